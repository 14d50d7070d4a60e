"""
Short code generator.

Draws candidates until one is neither reserved nor already stored.

Uniqueness contract: the returned code was free *at check time*. The check
and the later insert are not atomic, so two concurrent calls can both get
the same code. The `urls.code` unique constraint is the authoritative
check; the caller retries generation when storage reports a conflict
(see URLService.create_short_url). No lock is taken here.
"""

import logging
from typing import Optional

from shortener_core.config import settings
from shortener_core.exceptions import GenerationExhausted
from shortener_core.lookup.strategies import CodeLookup
from shortener_core.services.reserved_codes import ReservedCodeRegistry, get_reserved_registry
from shortener_core.services.short_code_strategies import (
    CandidateStrategy,
    CompactStrategy,
    WordPairStrategy,
)
from shortener_core.sources.strategies import IdSource, WordSource


logger = logging.getLogger(__name__)


class ShortCodeGenerator:
    """
    Stateless code generator with injected entropy sources.

    Args:
        word_source: Supplies words for the word-pair strategy
        id_source: Supplies tokens for the compact strategy
        reserved: Reserved route names (defaults to the configured registry)
        max_attempts: Candidates drawn before giving up
    """

    def __init__(
        self,
        word_source: WordSource,
        id_source: IdSource,
        reserved: Optional[ReservedCodeRegistry] = None,
        max_attempts: Optional[int] = None
    ):
        if max_attempts is None:
            max_attempts = settings.max_generation_attempts
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")

        self.word_pair_strategy = WordPairStrategy(word_source)
        self.compact_strategy = CompactStrategy(id_source)
        self.reserved = reserved if reserved is not None else get_reserved_registry()
        self.max_attempts = max_attempts

    def strategy_for(self, use_random_words: bool) -> CandidateStrategy:
        return self.word_pair_strategy if use_random_words else self.compact_strategy

    async def generate(self, lookup: CodeLookup, use_random_words: bool = True) -> str:
        """
        Generate a code that is neither reserved nor stored.

        Reserved candidates are discarded without a lookup call.
        Lookup errors propagate untouched: a failed check is never a miss.

        Args:
            lookup: Existence check backed by storage
            use_random_words: Word-pair code if True, compact token otherwise

        Returns:
            A short code that was free at check time

        Raises:
            GenerationExhausted: If max_attempts candidates were all rejected
            LookupFailure: If the lookup backend is unreachable
        """
        strategy = self.strategy_for(use_random_words)

        for attempt in range(1, self.max_attempts + 1):
            code = strategy.candidate()

            if self.reserved.is_reserved(code):
                logger.debug("Candidate %r is reserved (attempt %d)", code, attempt)
                continue

            if await lookup.exists(code):
                logger.debug("Candidate %r already taken (attempt %d)", code, attempt)
                continue

            return code

        logger.warning(
            "Short code space exhausted: %d %s candidates rejected",
            self.max_attempts, strategy.name
        )
        raise GenerationExhausted(self.max_attempts, strategy.name)
