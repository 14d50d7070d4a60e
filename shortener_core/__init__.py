"""
URL shortener core: normalization, tracking-parameter stripping and
collision-free short code generation.
"""

from .exceptions import (
    ShortenerError,
    LookupFailure,
    GenerationExhausted,
    MalformedURL,
    CodeConflict,
)

__all__ = [
    "ShortenerError",
    "LookupFailure",
    "GenerationExhausted",
    "MalformedURL",
    "CodeConflict",
]
