# site_walker/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per call, no retries and no rate limiting.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_walker.config import CrawlerConfig
from site_walker.crawler.models import PageData
from site_walker.errors import FetchError

_TEXTUAL_MARKERS = ("text/", "html", "xml")


def _is_textual(content_type: str) -> bool:
    ctype = content_type.lower()
    return not ctype or any(marker in ctype for marker in _TEXTUAL_MARKERS)


def build_session(config: CrawlerConfig) -> ClientSession:
    """Create the aiohttp session used for a whole run."""
    timeout = ClientTimeout(total=config.timeout)
    return ClientSession(
        timeout=timeout,
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


class Fetcher:
    """Handles HTTP fetching over a shared session."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> PageData:
        """
        GET *url* and return its status and text body.

        The body is left empty for 404 responses and non-textual content.
        Transport failures raise FetchError.
        """
        try:
            async with self.session.get(url) as resp:
                status = resp.status
                if status == 404:
                    return PageData(url, status)
                ctype = resp.headers.get("Content-Type", "")
                if not _is_textual(ctype):
                    return PageData(url, status)
                text = await resp.text(errors="replace")
                return PageData(url, status, text)
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "request timed out") from exc
        except ClientError as exc:
            raise FetchError(url, exc) from exc

