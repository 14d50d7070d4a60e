"""
Factory for creating code lookup instances.
"""

import logging
from enum import Enum
from typing import Optional

import redis
from sqlalchemy.orm import Session

from .strategies import CodeLookup, SQLAlchemyCodeLookup, RedisCodeLookup, InMemoryCodeLookup
from shortener_core.config import settings


logger = logging.getLogger(__name__)


class LookupBackend(Enum):
    """Available lookup backends"""
    SQLALCHEMY = "sqlalchemy"
    REDIS = "redis"
    MEMORY = "memory"


class LookupFactory:
    """
    Factory for creating lookup instances.

    Redis and in-memory lookups are shared (singleton). SQLAlchemy lookups
    are bound to a session, so a new one is built per session.
    Gets configuration from settings (not passed as parameters).
    """

    _instance: Optional[CodeLookup] = None  # Shared non-session instance

    @classmethod
    def create(
        cls,
        backend: Optional[LookupBackend] = None,
        db: Optional[Session] = None
    ) -> CodeLookup:
        """
        Create a lookup for the given backend.

        Args:
            backend: Type of lookup backend. If None, uses value from settings.
            db: Session, required for the SQLAlchemy backend

        Returns:
            A CodeLookup instance

        Raises:
            ValueError: If the backend is unknown or a session is missing
        """
        if backend is None:
            backend = LookupBackend(settings.lookup_backend)

        if backend == LookupBackend.SQLALCHEMY:
            if db is None:
                raise ValueError("SQLAlchemy lookup requires a database session")
            return SQLAlchemyCodeLookup(db)

        if cls._instance is not None:
            return cls._instance

        if backend == LookupBackend.REDIS:
            # No fallback here: an unreachable Redis must surface as LookupFailure
            # on the first check, never as an empty lookup
            redis_client = redis.from_url(
                settings.redis_url,
                decode_responses=False,
                socket_connect_timeout=2,
                socket_timeout=2,
            )
            cls._instance = RedisCodeLookup(redis_client, key_prefix=settings.redis_key_prefix)
            logger.info("Redis code lookup initialized")

        elif backend == LookupBackend.MEMORY:
            cls._instance = InMemoryCodeLookup()
            logger.info("In-memory code lookup initialized")

        else:
            raise ValueError(f"Unknown lookup backend: {backend}")

        return cls._instance

    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
