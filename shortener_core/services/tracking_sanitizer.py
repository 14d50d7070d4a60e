"""
Tracking-parameter sanitizer.

Strips attribution-only query keys (utm_*, fbclid, gclid, ...) from a URL
while leaving everything else exactly as it was written:
- scheme, host and path are copied verbatim (trailing slashes included)
- remaining pairs keep their order and their original encoding
- the fragment is kept
- no dangling "?" when every pair was removed
"""

from typing import Iterable, List, Optional, Tuple
from urllib.parse import urlsplit

from shortener_core.config import settings
from shortener_core.exceptions import MalformedURL
from shortener_core.schemas.sanitization import SanitizationResult


class TrackingParamClassifier:
    """Decides whether a query key is a tracking parameter

    Matching is case-sensitive: exact keys first, then prefix families.
    """

    def __init__(self, exact: Iterable[str], prefixes: Iterable[str]):
        self.exact = frozenset(exact)
        # str.startswith accepts a tuple
        self.prefixes: Tuple[str, ...] = tuple(p for p in prefixes if p)

    @classmethod
    def from_settings(cls) -> "TrackingParamClassifier":
        return cls(settings.tracking_params, settings.tracking_param_prefixes)

    def is_tracking_param(self, key: str) -> bool:
        if key in self.exact:
            return True
        return bool(self.prefixes) and key.startswith(self.prefixes)


_default_classifier: Optional[TrackingParamClassifier] = None


def get_default_classifier() -> TrackingParamClassifier:
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = TrackingParamClassifier.from_settings()
    return _default_classifier


def _query_key(pair: str) -> str:
    return pair.split("=", 1)[0]


def sanitize(
    url: str,
    classifier: Optional[TrackingParamClassifier] = None
) -> SanitizationResult:
    """
    Remove tracking parameters from a URL.

    Args:
        url: URL to sanitize
        classifier: Tracking key rules (defaults to the configured ones)

    Returns:
        SanitizationResult with the removed keys and the clean URL

    Raises:
        MalformedURL: If the URL cannot be parsed at all
    """
    if classifier is None:
        classifier = get_default_classifier()

    try:
        urlsplit(url)
    except ValueError as e:
        raise MalformedURL(url, str(e)) from e

    # Work on the raw text so untouched parts keep their exact spelling
    head, hash_sign, fragment = url.partition("#")
    base, question_mark, query = head.partition("?")

    if not question_mark or not query:
        return SanitizationResult(
            url=url, is_dirty=False, tracking_params=[], clean_url=url
        )

    kept: List[str] = []
    removed: List[str] = []
    for pair in query.split("&"):
        key = _query_key(pair)
        if pair and classifier.is_tracking_param(key):
            removed.append(key)
        else:
            kept.append(pair)

    if not removed:
        return SanitizationResult(
            url=url, is_dirty=False, tracking_params=[], clean_url=url
        )

    clean_url = base
    # Empty segments from "&&" stay, but alone they do not need a "?"
    if any(kept):
        clean_url += "?" + "&".join(kept)
    if hash_sign:
        clean_url += "#" + fragment

    return SanitizationResult(
        url=url,
        is_dirty=True,
        tracking_params=removed,
        clean_url=clean_url,
    )

