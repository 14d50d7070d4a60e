"""
Entropy sources for short code generation.
"""

from .strategies import WordSource, IdSource, WordListSource, RandomTokenSource

__all__ = [
    "WordSource",
    "IdSource",
    "WordListSource",
    "RandomTokenSource",
]
