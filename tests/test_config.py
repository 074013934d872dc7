# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from site_walker.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("seed_url: http://example.com/\nmax_depth: 2", ".yaml", None),
        (json.dumps({"seed_url": "http://example.com/", "max_depth": 2}), ".json", None),
        ("max_depth: -1", ".yml", ValidationError),
        ("unknown_key: 1", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("::invalid yaml", ".yaml", TypeError),
        ("{broken", ".json", ValueError),
        ("[1, 2]", ".json", TypeError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.seed_url == "http://example.com/"
        assert cfg.max_depth == 2
        assert cfg.pattern_limit == 3


def test_load_config_defaults_without_path():
    cfg = load_config(None)
    assert cfg.seed_url == "http://localhost/"
    assert cfg.max_depth == 3
    assert cfg.pattern_file is None
    assert cfg.database is None
    assert cfg.timeout is None


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_load_config_unsupported_suffix(tmp_path):
    cfg_path = write_file(tmp_path, "seed_url = 'x'", ".toml")
    with pytest.raises(ValueError):
        load_config(cfg_path)


def test_config_is_frozen():
    cfg = CrawlerConfig()
    with pytest.raises(ValidationError):
        cfg.max_depth = 10


def test_pattern_file_and_database_become_paths(tmp_path):
    cfg_path = write_file(
        tmp_path, f"pattern_file: {tmp_path / 'p.txt'}\ndatabase: crawl_data.db\n", ".yaml"
    )
    cfg = load_config(cfg_path)
    assert cfg.pattern_file == tmp_path / "p.txt"
    assert cfg.database == Path("crawl_data.db")
