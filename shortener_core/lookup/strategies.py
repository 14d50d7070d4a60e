"""
Code lookup strategies using Strategy Pattern.
Answers "is this short code already stored?" against different backends
(SQLAlchemy, Redis, In-Memory).

Unlike a cache, a lookup must never guess: if the backend cannot be
reached the check fails with LookupFailure instead of reporting a miss.
A false "not found" would hand out a code that is already taken.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Set

import redis
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shortener_core.exceptions import LookupFailure
from shortener_core.models.url import URL


logger = logging.getLogger(__name__)


class CodeLookup(ABC):
    """
    Abstract base class for code lookup strategies.

    All methods are async because lookups involve I/O (database, network).
    """

    @abstractmethod
    async def exists(self, code: str) -> bool:
        """
        Check whether a record with this code is already stored.

        Args:
            code: Candidate short code

        Returns:
            True if taken, False if free at the time of the check

        Raises:
            LookupFailure: If the backing store could not be queried
        """
        pass

    async def record(self, code: str, long_url: str) -> None:
        """
        Note a code that storage has just accepted.

        Backends that read from the main database see new rows on their own,
        so the default does nothing.

        Raises:
            LookupFailure: If the backing store could not be written
        """
        return None


class SQLAlchemyCodeLookup(CodeLookup):
    """
    Looks codes up in the main `urls` table.

    Note: Async for interface consistency, the query itself is sync (indexed, fast).
    """

    def __init__(self, db: Session):
        self.db = db

    async def exists(self, code: str) -> bool:
        try:
            found = self.db.query(URL.id).filter(URL.code == code).first()
        except SQLAlchemyError as e:
            logger.error("Database lookup for code %r failed: %s", code, e)
            raise LookupFailure(code, str(e)) from e
        return found is not None


class RedisCodeLookup(CodeLookup):
    """
    Looks codes up in Redis, keyed as `<prefix><code>`.

    Useful when Redis holds the full code -> URL mapping.
    """

    def __init__(self, redis_client, key_prefix: str = "url:"):
        """
        Args:
            redis_client: Redis client instance (redis.Redis)
            key_prefix: Prefix shared with the writer of the mapping
        """
        self.redis = redis_client
        self.key_prefix = key_prefix

    async def exists(self, code: str) -> bool:
        try:
            return bool(self.redis.exists(f"{self.key_prefix}{code}"))
        except redis.RedisError as e:
            logger.error("Redis lookup for code %r failed: %s", code, e)
            raise LookupFailure(code, str(e)) from e

    async def record(self, code: str, long_url: str) -> None:
        """Write the code -> URL mapping (no TTL, a stored code never frees up)"""
        try:
            self.redis.set(f"{self.key_prefix}{code}", long_url)
        except redis.RedisError as e:
            logger.error("Redis write for code %r failed: %s", code, e)
            raise LookupFailure(code, str(e)) from e


class InMemoryCodeLookup(CodeLookup):
    """
    In-memory set of taken codes.

    Used in development and tests. Codes written by URLService are
    added through `record`.
    """

    def __init__(self, codes: Optional[Iterable[str]] = None):
        self._codes: Set[str] = set(codes or ())

    async def exists(self, code: str) -> bool:
        return code in self._codes

    async def record(self, code: str, long_url: str) -> None:
        self.add(code)

    def add(self, code: str) -> None:
        self._codes.add(code)

    def discard(self, code: str) -> None:
        self._codes.discard(code)
