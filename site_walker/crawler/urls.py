# site_walker/crawler/urls.py
"""
URL normalization, depth and scope helpers for SiteWalker.

Every comparison the crawler makes (ledger membership, depth, pattern
classification) goes through :func:`normalize_url`, never the raw form.
"""
from __future__ import annotations

from typing import Optional, Sequence
from urllib.parse import urljoin, urlsplit

from site_walker.errors import UrlParseError

__all__: Sequence[str] = (
    "NON_NAVIGABLE_SCHEMES",
    "HTTP_SCHEMES",
    "strip_fragment",
    "normalize_url",
    "url_depth",
    "host_of",
    "is_http_url",
    "base_domain",
    "is_navigable",
    "resolve_link",
)

NON_NAVIGABLE_SCHEMES = ("tel:", "mailto:")
HTTP_SCHEMES = ("http", "https")


def strip_fragment(url: str) -> str:
    """Drop everything from the first ``#`` on."""
    return url.split("#", 1)[0]


def normalize_url(url: str) -> str:
    """
    Canonical form used for dedup: no fragment, no trailing slash, lower case.

    Best effort for malformed input; idempotent.
    """
    return strip_fragment(url).rstrip("/").lower()


def url_depth(url: str) -> int:
    """Count non-empty path segments; query and fragment never add depth."""
    try:
        path = urlsplit(strip_fragment(url)).path
    except ValueError:
        return 0
    return sum(1 for segment in path.split("/") if segment)


def host_of(url: str) -> Optional[str]:
    """Lower-cased host name of *url*, or None when it has none."""
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None


def is_http_url(url: str) -> bool:
    """True when *url* uses http or https."""
    try:
        return urlsplit(url).scheme.lower() in HTTP_SCHEMES
    except ValueError:
        return False


def base_domain(seed_url: str) -> str:
    """Host of the seed URL; raises UrlParseError if it cannot root a crawl."""
    try:
        parsed = urlsplit(seed_url)
        host = parsed.hostname
    except ValueError as exc:
        raise UrlParseError(f"Cannot parse seed URL {seed_url!r}: {exc}") from exc
    if parsed.scheme.lower() not in HTTP_SCHEMES:
        raise UrlParseError(f"Seed URL {seed_url!r} must use http or https")
    if not host:
        raise UrlParseError(f"Seed URL {seed_url!r} has no host")
    return host


def is_navigable(href: str) -> bool:
    """False for phone and mail links, which never lead to a page."""
    return not href.strip().lower().startswith(NON_NAVIGABLE_SCHEMES)


def resolve_link(page_url: str, href: str) -> Optional[str]:
    """Resolve *href* against *page_url* and strip the fragment; None on failure."""
    try:
        absolute = urljoin(page_url, href.strip())
        # urljoin is lazy about ports; force validation here
        urlsplit(absolute).port
    except ValueError:
        return None
    return strip_fragment(absolute)
