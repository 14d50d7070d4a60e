"""
Errors raised by the shortener core.

All of them are returned to the immediate caller (the web layer),
which decides what the user sees. Nothing here is retried internally
except where noted.
"""

from typing import Optional


class ShortenerError(Exception):
    """Base class for every error raised by the shortener core"""


class LookupFailure(ShortenerError):
    """
    The code-existence check could not be performed.

    Raised by lookup backends when the backing store is unreachable.
    The generator never reads this as "code is free".
    """

    def __init__(self, code: str, reason: str = "lookup backend unavailable"):
        self.code = code
        self.reason = reason
        super().__init__(f"Could not check short code '{code}': {reason}")


class GenerationExhausted(ShortenerError):
    """
    The attempt budget was spent without finding a free, non-reserved code.

    Treat as a capacity signal: back off, or retry with the other strategy.
    """

    def __init__(self, attempts: int, strategy: Optional[str] = None):
        self.attempts = attempts
        self.strategy = strategy
        detail = f" using '{strategy}' strategy" if strategy else ""
        super().__init__(
            f"Could not generate unique short code after {attempts} attempts{detail}"
        )


class MalformedURL(ShortenerError):
    """Input cannot be parsed as a URL at all"""

    def __init__(self, url: str, reason: str = "cannot be parsed"):
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed URL {url!r}: {reason}")


class CodeConflict(ShortenerError):
    """
    Storage rejected every generated code with a uniqueness violation.

    Only raised after the service has regenerated
    `settings.max_conflict_retries` times.
    """

    def __init__(self, retries: int):
        self.retries = retries
        super().__init__(
            f"Short code rejected by storage as duplicate after {retries} retries"
        )
