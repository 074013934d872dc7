# site_walker/crawler/patterns.py
"""
URL pattern buckets: loading user patterns and classifying URLs.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import List, Sequence, Union

from site_walker.errors import FileAccessError, PatternLoadError
from site_walker.logger import logger

__all__: Sequence[str] = ("DEFAULT_PATTERN", "default_patterns", "classify", "load_patterns")

#: any path segment made only of digits, e.g. ``/article/42``
DEFAULT_PATTERN = r"/\d+"


def default_patterns() -> List[re.Pattern[str]]:
    return [re.compile(DEFAULT_PATTERN)]


def classify(url: str, patterns: Sequence[re.Pattern[str]]) -> str:
    """
    Return the bucket key of a normalized URL.

    The source text of the first pattern found in *url* is the key; a URL no
    pattern matches is its own bucket.
    """
    for pattern in patterns:
        if pattern.search(url):
            return pattern.pattern
    return url


def load_patterns(path: Union[str, Path]) -> List[re.Pattern[str]]:
    """
    Read one regular expression per line, skipping blanks and duplicates.

    Duplicates collapse on their source text before compilation; the
    remaining patterns keep the order of their first appearance.
    """
    p = Path(path).expanduser()
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(f"Cannot read pattern file {p}: {exc}") from exc

    sources = list(dict.fromkeys(line.strip() for line in text.splitlines() if line.strip()))
    compiled: List[re.Pattern[str]] = []
    for source in sources:
        try:
            compiled.append(re.compile(source))
        except re.error as exc:
            raise PatternLoadError(f"Invalid pattern {source!r} in {p}: {exc}") from exc
    logger.debug("Loaded %d patterns from %s", len(compiled), p)
    return compiled
