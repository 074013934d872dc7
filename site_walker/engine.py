# File: site_walker/engine.py
"""site_walker.engine: wires config, patterns, sink and crawler into one run."""

from __future__ import annotations

import time
from contextlib import AsyncExitStack
from typing import Optional

from site_walker.config import CrawlerConfig
from site_walker.crawler.crawler import AsyncCrawler, PageFetcher
from site_walker.crawler.models import CrawlSummary
from site_walker.crawler.patterns import default_patterns, load_patterns
from site_walker.logger import logger
from site_walker.storage import SqliteSink

__all__ = ["start_crawl"]


async def start_crawl(cfg: CrawlerConfig, *, fetcher: Optional[PageFetcher] = None) -> CrawlSummary:
    """
    Run one crawl and return how many URLs were visited and how long it took.

    Pattern file and seed URL problems are raised before the first request.
    Passing *fetcher* replaces the HTTP client (used by tests).
    """
    patterns = load_patterns(cfg.pattern_file) if cfg.pattern_file else default_patterns()
    crawler = AsyncCrawler(cfg, patterns, fetcher=fetcher)

    async with AsyncExitStack() as stack:
        if cfg.database is not None:
            crawler.sink = await stack.enter_async_context(SqliteSink(cfg.database))
        await stack.enter_async_context(crawler)

        start = time.monotonic()
        try:
            records = await crawler.crawl()
        except Exception as exc:
            logger.error("Crawl aborted after %d URLs: %s", crawler.visited_count, exc)
            raise
        elapsed = time.monotonic() - start

    return CrawlSummary(visited=crawler.visited_count, elapsed=elapsed, records=records)
