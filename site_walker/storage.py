# File: site_walker/storage.py
"""site_walker.storage: append-only SQLite log of fetch attempts.

Table ``pages``::

    id         INTEGER PRIMARY KEY AUTOINCREMENT
    url        TEXT     -- URL as requested (fragment stripped)
    domain     TEXT     -- host of the seed URL
    status     INTEGER  -- HTTP status code
    timestamp  TEXT     -- ISO-8601 UTC
"""
from __future__ import annotations

import asyncio
import sqlite3
from pathlib import Path
from typing import List, Optional, Union

from site_walker.crawler.models import CrawlRecord
from site_walker.logger import logger

__all__ = ["SqliteSink"]


def _connect(db_path: Path) -> sqlite3.Connection:
    # writes run in a worker thread, one at a time
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.execute("PRAGMA journal_mode = WAL;")
    conn.execute("PRAGMA synchronous = NORMAL;")
    return conn


def _ensure_pages_table(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS pages (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            url TEXT NOT NULL,
            domain TEXT NOT NULL,
            status INTEGER NOT NULL,
            timestamp TEXT NOT NULL
        );
        """
    )
    conn.execute("CREATE INDEX IF NOT EXISTS idx_pages_url ON pages (url);")
    conn.commit()


class SqliteSink:
    """Persists one :class:`CrawlRecord` per fetch; rows are never updated."""

    def __init__(self, db_path: Union[str, Path]) -> None:
        self.db_path = Path(db_path).expanduser()
        self._conn: Optional[sqlite3.Connection] = None

    def open(self) -> None:
        if self._conn is not None:
            return
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = _connect(self.db_path)
        _ensure_pages_table(self._conn)
        logger.debug("Crawl records go to %s", self.db_path)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    async def __aenter__(self) -> SqliteSink:
        self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _insert(self, record: CrawlRecord) -> None:
        if self._conn is None:
            raise RuntimeError("SqliteSink is not open")
        self._conn.execute(
            "INSERT INTO pages (url, domain, status, timestamp) VALUES (?, ?, ?, ?)",
            (record.url, record.domain, record.status, record.timestamp),
        )
        self._conn.commit()

    async def write(self, record: CrawlRecord) -> None:
        await asyncio.to_thread(self._insert, record)

    def read_all(self) -> List[CrawlRecord]:
        """All stored rows in insertion order."""
        if self._conn is None:
            raise RuntimeError("SqliteSink is not open")
        rows = self._conn.execute(
            "SELECT url, domain, status, timestamp FROM pages ORDER BY id"
        ).fetchall()
        return [CrawlRecord(*row) for row in rows]
