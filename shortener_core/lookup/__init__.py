"""
Code lookup module for the short code generator.
Implements Strategy Pattern for flexible existence-check backends.
"""

from .strategies import CodeLookup, SQLAlchemyCodeLookup, RedisCodeLookup, InMemoryCodeLookup
from .factory import LookupFactory, LookupBackend

__all__ = [
    "CodeLookup",
    "SQLAlchemyCodeLookup",
    "RedisCodeLookup",
    "InMemoryCodeLookup",
    "LookupFactory",
    "LookupBackend",
]
