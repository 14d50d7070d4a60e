"""
Syntactic URL normalization.

No DNS or network checks happen here. The only repair ever made is
adding a missing scheme.
"""

import re
from typing import Iterable

from shortener_core.exceptions import MalformedURL


DEFAULT_SCHEME = "https"

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)


def has_scheme(url: str) -> bool:
    return bool(_SCHEME_RE.match(url))


def normalize(url: str) -> str:
    """
    Ensure the URL carries an explicit scheme.

    URLs that already start with `<scheme>://` are returned unchanged,
    anything else gets `https://` prepended.

    Raises:
        MalformedURL: If the input is the empty string
    """
    if not url:
        raise MalformedURL(url, "empty URL")

    if has_scheme(url):
        return url

    return f"{DEFAULT_SCHEME}://{url}"


def contains_secret_url(url: str, secret_urls: Iterable[str]) -> bool:
    """
    True if any configured secret substring occurs in the URL.

    The web layer uses this to skip previews and auto-redirects
    for destinations that must stay behind the confirmation page.
    """
    return any(secret and secret in url for secret in secret_urls)
