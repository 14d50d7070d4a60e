"""
Candidate strategies for short code generation.
Uses Strategy Pattern to allow different code shapes.

A strategy only proposes a candidate. Checking it against reserved
routes and stored codes is the generator's job.
"""

from abc import ABC, abstractmethod
from shortener_core.sources.strategies import WordSource, IdSource


class CandidateStrategy(ABC):
    """Abstract base class for candidate strategies"""

    name: str = "base"

    @abstractmethod
    def candidate(self) -> str:
        """
        Propose one short code.

        Returns:
            A candidate code (not yet checked for uniqueness)
        """
        pass


class WordPairStrategy(CandidateStrategy):
    """
    Human-readable codes made of two dictionary words.

    Pros: Easy to read aloud and type
    Cons: Smaller code space, so more collisions as the table grows
    """

    name = "words"
    WORD_COUNT = 2

    def __init__(self, word_source: WordSource):
        self.word_source = word_source

    def candidate(self) -> str:
        """Concatenate the drawn words with no separator"""
        return "".join(self.word_source.draw_words(self.WORD_COUNT))


class CompactStrategy(CandidateStrategy):
    """
    Fixed-length random alphanumeric codes.

    Pros: Short, huge code space
    Cons: Not memorable
    """

    name = "compact"

    def __init__(self, id_source: IdSource):
        self.id_source = id_source

    def candidate(self) -> str:
        return self.id_source.draw_token()
