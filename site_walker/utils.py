# File: site_walker/utils.py
"""site_walker.utils: small helpers for timestamps and run-time formatting."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

__all__: Sequence[str] = ("utc_timestamp", "format_elapsed")


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string (seconds precision)."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def format_elapsed(seconds: float) -> str:
    """Render a duration as ``"1h 2m 3s"``; hours are omitted when zero."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    return f"{minutes}m {secs}s"
