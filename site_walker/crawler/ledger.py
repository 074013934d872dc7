# site_walker/crawler/ledger.py
"""
Visited-state, admission and per-pattern counters for one crawl run.
"""
from __future__ import annotations

from typing import Dict, Set


class VisitLedger:
    """
    URLs already fetched, URLs already queued, and how many URLs each
    pattern bucket has admitted.

    All collections only grow. A ledger belongs to one crawler and is
    mutated from a single task, so no locking is involved.
    """

    def __init__(self) -> None:
        self._visited: Set[str] = set()
        self._admitted: Set[str] = set()
        self._pattern_counts: Dict[str, int] = {}

    def has_visited(self, url: str) -> bool:
        return url in self._visited

    def mark_visited(self, url: str) -> None:
        self._visited.add(url)

    def has_admitted(self, url: str) -> bool:
        return url in self._admitted

    def mark_admitted(self, url: str) -> None:
        self._admitted.add(url)

    def try_admit(self, pattern: str, limit: int) -> bool:
        """Count one more URL for *pattern* unless it already reached *limit*."""
        count = self._pattern_counts.get(pattern, 0)
        if count >= limit:
            return False
        self._pattern_counts[pattern] = count + 1
        return True

    def pattern_count(self, pattern: str) -> int:
        return self._pattern_counts.get(pattern, 0)

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def __len__(self) -> int:
        return len(self._visited)
