# File: tests/conftest.py
from __future__ import annotations

import pytest

from site_walker.config import CrawlerConfig
from tests.helpers import ListSink


@pytest.fixture()
def make_config():
    """Factory for CrawlerConfig with test-friendly defaults."""

    def _make(**overrides) -> CrawlerConfig:
        data = {"seed_url": "http://example.com/", "max_depth": 3}
        data.update(overrides)
        return CrawlerConfig(**data)

    return _make


@pytest.fixture()
def sink() -> ListSink:
    return ListSink()
