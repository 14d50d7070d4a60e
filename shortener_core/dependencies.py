"""
Providers for dependency injection.

The web layer (not part of this package) wires these into its request
handling. Shared objects are built once; per-request objects take the
request's database session.
"""

from functools import lru_cache

from sqlalchemy.orm import Session

from shortener_core.config import settings
from shortener_core.lookup.factory import LookupFactory, LookupBackend
from shortener_core.lookup.strategies import CodeLookup
from shortener_core.services.short_code_factory import ShortCodeFactory
from shortener_core.services.short_code_generator import ShortCodeGenerator
from shortener_core.services.url_service import URLService


@lru_cache()
def get_generator() -> ShortCodeGenerator:
    """
    Get generator instance (singleton).

    @lru_cache ensures the word list is loaded only once.
    """
    return ShortCodeFactory.create_generator()


def get_lookup(db: Session) -> CodeLookup:
    """
    Get the configured lookup.

    SQLAlchemy lookups are bound to `db`; other backends are shared.
    """
    backend = LookupBackend(settings.lookup_backend)
    return LookupFactory.create(backend, db=db)


def get_url_service(db: Session) -> URLService:
    """
    Get URLService with all dependencies injected.

    Benefits:
    - Callers need one dependency instead of three
    - Easier to test (pass fakes to URLService directly)
    """
    return URLService(db=db, generator=get_generator(), lookup=get_lookup(db))
