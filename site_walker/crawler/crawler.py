# === FILE: site_walker/crawler/crawler.py ===
from __future__ import annotations

import logging
import re
from typing import List, Optional, Protocol, Sequence, Tuple

from aiohttp import ClientSession

from site_walker.config import CrawlerConfig
from site_walker.crawler.fetcher import Fetcher, build_session
from site_walker.crawler.ledger import VisitLedger
from site_walker.crawler.link_extractor import extract_hrefs
from site_walker.crawler.models import CrawlRecord, PageData
from site_walker.crawler.patterns import classify, default_patterns
from site_walker.crawler.urls import (
    base_domain,
    host_of,
    is_http_url,
    is_navigable,
    normalize_url,
    resolve_link,
    strip_fragment,
    url_depth,
)
from site_walker.utils import utc_timestamp

__all__ = ("AsyncCrawler", "PageFetcher", "RecordWriter")

_Frame = Tuple[str, int]


class PageFetcher(Protocol):
    async def fetch(self, url: str) -> PageData: ...


class RecordWriter(Protocol):
    async def write(self, record: CrawlRecord) -> None: ...


class AsyncCrawler:
    """
    Depth-first same-domain crawler with one request in flight at a time.

    Links found on a page are filtered when the page is processed and then
    visited in document order, each subtree finishing before the next
    sibling starts. Any fetch or parse error ends the whole run.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        patterns: Optional[Sequence[re.Pattern[str]]] = None,
        *,
        ledger: Optional[VisitLedger] = None,
        fetcher: Optional[PageFetcher] = None,
        sink: Optional[RecordWriter] = None,
    ) -> None:
        self.config = config
        self.base_domain = base_domain(config.seed_url)
        self.patterns: List[re.Pattern[str]] = list(patterns) if patterns is not None else default_patterns()
        self.ledger = ledger if ledger is not None else VisitLedger()
        self.fetcher = fetcher
        self.sink = sink
        self.records: List[CrawlRecord] = []
        self.session: Optional[ClientSession] = None
        self.logger = logging.getLogger("SiteWalker")

    async def __aenter__(self) -> AsyncCrawler:
        if self.fetcher is None:
            self.session = build_session(self.config)
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    @property
    def visited_count(self) -> int:
        return self.ledger.visited_count

    async def crawl(self) -> List[CrawlRecord]:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized")
        self.logger.debug(
            "Start crawl: %s (max depth %d, pattern limit %d)",
            self.config.seed_url, self.config.max_depth, self.config.pattern_limit,
        )
        stack: List[_Frame] = [(self.config.seed_url, 0)]
        while stack:
            url, depth = stack.pop()
            children = await self._visit(url, depth)
            # reversed so the first link found is popped first
            stack.extend(reversed(children))
        return self.records

    async def _visit(self, url: str, depth: int) -> List[_Frame]:
        target = strip_fragment(url)
        normalized = normalize_url(target)
        if self.ledger.has_visited(normalized):
            return []
        self.ledger.mark_visited(normalized)
        self.logger.info("Crawling: %s", target)

        page = await self.fetcher.fetch(target)  # type: ignore[union-attr]
        await self._record(page)
        if page.not_found:
            self.logger.info("404 Error: %s", target)
            return []

        return [(link, depth + 1) for link in self._admit_links(page)]

    def _admit_links(self, page: PageData) -> List[str]:
        admitted: List[str] = []
        for href in extract_hrefs(page.content):
            if not is_navigable(href):
                continue
            absolute = resolve_link(page.url, href)
            if absolute is None:
                self.logger.debug("Unresolvable link %r on %s", href, page.url)
                continue
            if not is_http_url(absolute) or host_of(absolute) != self.base_domain:
                continue
            normalized = normalize_url(absolute)
            if url_depth(normalized) > self.config.max_depth:
                continue
            if self.ledger.has_visited(normalized) or self.ledger.has_admitted(normalized):
                continue
            pattern = classify(normalized, self.patterns)
            if not self.ledger.try_admit(pattern, self.config.pattern_limit):
                self.logger.debug("Pattern limit reached, skipping %s (%s)", absolute, pattern)
                continue
            self.ledger.mark_admitted(normalized)
            admitted.append(absolute)
        return admitted

    async def _record(self, page: PageData) -> None:
        record = CrawlRecord(
            url=page.url,
            domain=self.base_domain,
            status=page.status,
            timestamp=utc_timestamp(),
        )
        self.records.append(record)
        if self.sink is not None:
            await self.sink.write(record)
