# site_walker/crawler/models.py
"""
Data models for the SiteWalker crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class PageData:
    """Outcome of one fetch: the requested URL, HTTP status and decoded body."""

    url: str
    status: int
    content: str = ""

    @property
    def not_found(self) -> bool:
        return self.status == 404


@dataclass(slots=True, frozen=True)
class CrawlRecord:
    """One persisted row describing a single fetch attempt."""

    url: str
    domain: str
    status: int
    timestamp: str


@dataclass(slots=True)
class CrawlSummary:
    """What a finished run reports back to the CLI."""

    visited: int
    elapsed: float
    records: List[CrawlRecord] = field(default_factory=list)
