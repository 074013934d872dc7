# File: site_walker/errors.py
"""site_walker.errors: exception hierarchy shared by the crawler, CLI and tests."""

from __future__ import annotations

__all__ = (
    "CrawlError",
    "FetchError",
    "ParseError",
    "PatternLoadError",
    "FileAccessError",
    "UrlParseError",
)


class CrawlError(Exception):
    """Base class for every error that terminates a crawl."""


class FetchError(CrawlError):
    """Network or transport failure while fetching a page."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class ParseError(CrawlError):
    """The HTML parser rejected a document."""


class PatternLoadError(CrawlError):
    """A line of the pattern file is not a valid regular expression."""


class FileAccessError(CrawlError):
    """The pattern file could not be opened or read."""


class UrlParseError(CrawlError):
    """The seed URL cannot be used as a crawl root."""
