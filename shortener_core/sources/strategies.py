"""
Entropy sources for short code candidates.

Two capabilities are consumed by the generator:
- WordSource: draws dictionary words for human-readable codes
- IdSource: draws fixed-length random tokens for compact codes

Both are injected, so tests can pass deterministic fakes.
"""

import random
import secrets
import string
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import List, Optional, Sequence


BUNDLED_WORD_LIST = "words.txt"


class WordSource(ABC):
    """Abstract base class for word-list sources"""

    @abstractmethod
    def draw_words(self, count: int) -> List[str]:
        """
        Draw words for a candidate code.

        Args:
            count: Number of words wanted

        Returns:
            Exactly `count` lowercase words, in draw order
        """
        pass


class IdSource(ABC):
    """Abstract base class for random token sources"""

    @abstractmethod
    def draw_token(self) -> str:
        """Return a fixed-length, URL-safe random token"""
        pass


class WordListSource(WordSource):
    """
    Draws words uniformly from an in-memory word list.

    Words are drawn with replacement, so "moonmoon" is a valid code.
    """

    def __init__(self, words: Sequence[str], rng: Optional[random.Random] = None):
        cleaned = [w.strip().lower() for w in words if w.strip()]
        invalid = [w for w in cleaned if not (w.isascii() and w.isalpha())]
        if invalid:
            raise ValueError(
                f"Word list must contain alphabetic words only, got: {invalid[:5]}"
            )
        if not cleaned:
            raise ValueError("Word list is empty")

        self.words = cleaned
        self.rng = rng or random.SystemRandom()

    @classmethod
    def from_file(cls, path: Optional[str] = None) -> "WordListSource":
        """
        Load one word per line.

        Uses the word list shipped with the package when no path is given.
        """
        if path is None:
            text = (
                resources.files("shortener_core.sources")
                .joinpath("data").joinpath(BUNDLED_WORD_LIST)
                .read_text(encoding="utf-8")
            )
        else:
            text = Path(path).read_text(encoding="utf-8")
        return cls(text.splitlines())

    def draw_words(self, count: int) -> List[str]:
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        return [self.rng.choice(self.words) for _ in range(count)]


class RandomTokenSource(IdSource):
    """
    Cryptographically random alphanumeric tokens.

    62 characters at length 7 gives ~3.5 * 10^12 codes,
    so collisions stay rare for any realistic table size.
    """

    DEFAULT_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase

    def __init__(self, length: int = 7, alphabet: str = DEFAULT_ALPHABET):
        if length < 1:
            raise ValueError(f"Token length must be positive, got {length}")
        if not alphabet.isalnum():
            raise ValueError("Token alphabet must be alphanumeric")
        self.length = length
        self.alphabet = alphabet

    def draw_token(self) -> str:
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))
