import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shortener_core.config import settings
from shortener_core.exceptions import CodeConflict, LookupFailure
from shortener_core.lookup.strategies import CodeLookup, SQLAlchemyCodeLookup
from shortener_core.models.url import URL
from shortener_core.schemas.sanitization import SanitizationResult
from shortener_core.services.normalizer import normalize
from shortener_core.services.short_code_factory import ShortCodeFactory
from shortener_core.services.short_code_generator import ShortCodeGenerator
from shortener_core.services.tracking_sanitizer import sanitize


logger = logging.getLogger(__name__)


class URLService:
    """
    URL Service with dependency injection for the generator and lookup.

    This is the pipeline the web layer calls when a link is created:
    normalize -> sanitize -> generate -> insert (retry on conflict).

    Dependencies are injected (not created internally), so tests can pass
    fake sources and lookups.
    """

    def __init__(
        self,
        db: Session,
        generator: Optional[ShortCodeGenerator] = None,
        lookup: Optional[CodeLookup] = None,
        max_conflict_retries: Optional[int] = None
    ):
        """
        Initialize URL service with dependencies.

        Args:
            db: Database session (owns the unique constraint on codes)
            generator: Short code generator (default from factory)
            lookup: Existence check (defaults to the same database)
            max_conflict_retries: Regenerations allowed after a duplicate insert
        """
        self.db = db
        self.generator = generator or ShortCodeFactory.create_generator()
        self.lookup = lookup or SQLAlchemyCodeLookup(db)
        self.max_conflict_retries = (
            settings.max_conflict_retries
            if max_conflict_retries is None
            else max_conflict_retries
        )

    def prepare_long_url(self, raw_url: str) -> SanitizationResult:
        """Add a missing scheme, then strip tracking parameters

        Raises:
            MalformedURL: If the input is empty or cannot be parsed
        """
        return sanitize(normalize(raw_url))

    async def create_short_url(
        self,
        raw_url: str,
        use_random_words: Optional[bool] = None,
        strip_tracking: bool = True
    ) -> URL:
        """Create a new short URL

        Process:
        1. Normalize and sanitize the long URL
        2. Generate a code that was free at check time
        3. Insert; if the unique constraint rejects the code (a concurrent
           request won the race), roll back and generate again
        4. Record the accepted code in the lookup backend

        Args:
            raw_url: URL as typed by the user
            use_random_words: Word-pair code if True, compact if False,
                              configured strategy if None
            strip_tracking: Store the clean URL instead of the original

        Raises:
            MalformedURL: If the URL cannot be parsed
            LookupFailure: If the existence check fails
            GenerationExhausted: If no free code could be drawn
            CodeConflict: If every inserted code was rejected as duplicate
        """
        prepared = self.prepare_long_url(raw_url)
        long_url = prepared.clean_url if strip_tracking else prepared.url
        if prepared.is_dirty:
            logger.info(
                "Tracking parameters found in %s: %s",
                prepared.url, ", ".join(prepared.tracking_params)
            )

        if use_random_words is None:
            use_random_words = ShortCodeFactory.use_random_words()

        for attempt in range(self.max_conflict_retries + 1):
            code = await self.generator.generate(self.lookup, use_random_words)

            url = URL(code=code, long_url=long_url, is_word_pair=use_random_words)
            self.db.add(url)
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                logger.warning(
                    "Code %r was taken between check and insert (attempt %d)",
                    code, attempt + 1
                )
                continue

            self.db.refresh(url)

            # Redis and in-memory lookups only see codes they are told about.
            # The row is committed either way; the unique constraint guards it.
            try:
                await self.lookup.record(url.code, url.long_url)
            except LookupFailure as e:
                logger.warning("Stored code %r but could not record it in lookup: %s", url.code, e)

            return url

        raise CodeConflict(self.max_conflict_retries)

    async def get_url_by_code(self, code: str) -> Optional[URL]:
        """Get URL by short code

        Note: Async for interface consistency, DB query is sync (fast).
        """
        return self.db.query(URL).filter(URL.code == code).first()
