# File: tests/helpers.py
"""Test doubles shared by the crawler and CLI suites."""
from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Dict, List, Optional, Tuple

from aiohttp import web

from site_walker.crawler.models import CrawlRecord, PageData
from site_walker.errors import FetchError


class FakeFetcher:
    """
    In-memory stand-in for the HTTP fetcher.

    *pages* maps a URL to ``(status, html)``; unknown URLs are empty 200 pages.
    URLs listed in *failing* raise FetchError.
    """

    def __init__(
        self,
        pages: Dict[str, Tuple[int, str]],
        failing: Optional[set[str]] = None,
    ) -> None:
        self.pages = pages
        self.failing = failing or set()
        self.calls: List[str] = []

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        if url in self.failing:
            raise FetchError(url, "connection refused")
        status, html = self.pages.get(url, (200, ""))
        return PageData(url, status, html)


class ListSink:
    def __init__(self) -> None:
        self.records: List[CrawlRecord] = []

    async def write(self, record: CrawlRecord) -> None:
        self.records.append(record)


def links(*hrefs: str) -> str:
    """Build a minimal HTML page with one anchor per href."""
    anchors = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return f"<html><body>{anchors}</body></html>"


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}/"
    finally:
        await runner.cleanup()
