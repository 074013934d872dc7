# === FILE: site_walker/config.py ===
"""
Loading and validation of the SiteWalker crawl configuration.
Pydantic describes the schema; YAML or JSON files may supply values.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SEED_URL = "http://localhost/"
DEFAULT_MAX_DEPTH = 3
DEFAULT_PATTERN_LIMIT = 3


class CrawlerConfig(BaseModel):
    """Settings for a single crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: str = Field(DEFAULT_SEED_URL, min_length=1, description="URL the crawl starts from.")
    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=0, description="Maximum path depth of followed links.")
    pattern_file: Optional[Path] = Field(None, description="File with one regular expression per line.")
    pattern_limit: int = Field(DEFAULT_PATTERN_LIMIT, ge=1, description="Visits allowed per URL pattern.")
    timeout: Optional[float] = Field(None, gt=0, description="Total timeout per request (seconds).")
    user_agent: str = Field("SiteWalker/1.0", min_length=1, description="User-Agent header.")
    database: Optional[Path] = Field(None, description="SQLite file receiving one row per fetch.")

    @field_validator("seed_url", mode="before")
    def _strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """
    Read YAML or JSON and return a validated CrawlerConfig.
    Without a path the built-in defaults are returned.
    """
    if path is None:
        return CrawlerConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return CrawlerConfig(**data)
