# File: site_walker/crawler/__init__.py
"""site_walker.crawler: traversal engine and its collaborators."""

from .crawler import AsyncCrawler
from .ledger import VisitLedger
from .models import CrawlRecord, CrawlSummary, PageData

__all__ = ["AsyncCrawler", "VisitLedger", "CrawlRecord", "CrawlSummary", "PageData"]
