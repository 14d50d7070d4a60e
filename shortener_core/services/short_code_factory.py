"""
Factory for creating the short code generator.
Uses caching to avoid loading the word list more than once.
"""

from enum import Enum
from typing import Optional

from shortener_core.config import settings
from shortener_core.services.reserved_codes import get_reserved_registry
from shortener_core.services.short_code_generator import ShortCodeGenerator
from shortener_core.sources.strategies import RandomTokenSource, WordListSource


class ShortCodeStrategyType(Enum):
    """Available short code strategies"""
    WORDS = "words"
    COMPACT = "compact"


class ShortCodeFactory:
    """Factory for the configured generator, with caching"""

    _instance: Optional[ShortCodeGenerator] = None

    @classmethod
    def create_generator(cls) -> ShortCodeGenerator:
        """
        Create or return the cached generator built from settings.

        Returns:
            A ShortCodeGenerator wired to the bundled (or configured) word
            list and a random token source
        """
        if cls._instance is not None:
            return cls._instance

        cls._instance = ShortCodeGenerator(
            word_source=WordListSource.from_file(settings.word_list_path),
            id_source=RandomTokenSource(
                length=settings.compact_code_length,
                alphabet=settings.compact_code_alphabet
            ),
            reserved=get_reserved_registry(),
            max_attempts=settings.max_generation_attempts
        )
        return cls._instance

    @staticmethod
    def use_random_words(strategy_type: Optional[ShortCodeStrategyType] = None) -> bool:
        """
        Map a strategy type to the generator's `use_random_words` flag.

        If None, uses value from settings.

        Raises:
            ValueError: If the configured strategy is unknown
        """
        if strategy_type is None:
            strategy_type = ShortCodeStrategyType(settings.short_code_strategy)
        return strategy_type == ShortCodeStrategyType.WORDS

    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
