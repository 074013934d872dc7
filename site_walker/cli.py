# === FILE: site_walker/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for the SiteWalker crawler.

Usage:
  crawl [URL] [-d=<depth>] [-x=<pattern_file>] [-h|--help]

Arguments:
  URL                     Seed URL (default: http://localhost/)

Options:
  -d, --depth INT         Maximum link depth (default 3; invalid values fall back to 3)
  -x, --patterns PATH     File with one URL pattern (regular expression) per line
  --pattern-limit INT     Visits allowed per URL pattern (default 3)
  --db PATH               SQLite file that receives one row per fetch
  --timeout SEC           Total timeout per request (none by default)
  --user-agent TEXT       User-Agent header
  --config, -c PATH       YAML/JSON file with default settings
  --log-level LEVEL       Logging level (DEBUG, INFO, ...)
  --log-file PATH         Also write the log to this file
  --version, -v           Show the SiteWalker version

Short options accept the ``-d=3`` spelling; when an option is repeated the
first occurrence wins.

Example:
  crawl https://example.com/ -d=2 -x=patterns.txt --db crawl_data.db
"""
import asyncio
import sqlite3
import sys
from pathlib import Path
from typing import Any, Optional, Tuple

import click

from site_walker import __version__
from site_walker.config import DEFAULT_MAX_DEPTH, CrawlerConfig, load_config
from site_walker.engine import start_crawl
from site_walker.errors import CrawlError
from site_walker.logger import configure as configure_logging
from site_walker.utils import format_elapsed

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _first_value(values: Tuple[str, ...]) -> Optional[str]:
    """First occurrence of a repeatable option, without the ``=`` of ``-x=value``."""
    if not values:
        return None
    value = values[0]
    return value[1:] if value.startswith("=") else value


def parse_depth(ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]) -> Optional[int]:
    raw = _first_value(values)
    if raw is None:
        return None
    try:
        depth = int(raw)
    except ValueError:
        return DEFAULT_MAX_DEPTH
    return depth if depth >= 0 else DEFAULT_MAX_DEPTH


def parse_path(ctx: click.Context, param: click.Parameter, values: Tuple[str, ...]) -> Optional[Path]:
    raw = _first_value(values)
    return Path(raw) if raw else None


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteWalker, version %(version)s')
@click.argument('url', required=False, default=None)
@click.option(
    '-d', '--depth', 'depth',
    multiple=True, callback=parse_depth, metavar='INT',
    help='Maximum link depth (default 3).'
)
@click.option(
    '-x', '--patterns', 'pattern_file',
    multiple=True, callback=parse_path, metavar='PATH',
    help='File with one URL pattern per line.'
)
@click.option(
    '--pattern-limit', 'pattern_limit',
    type=click.IntRange(min=1), default=None,
    help='Visits allowed per URL pattern (default 3).'
)
@click.option(
    '--db', 'database',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='SQLite file that receives one row per fetch.'
)
@click.option(
    '--timeout', 'timeout',
    type=click.FloatRange(min=0, min_open=True), default=None,
    help='Total timeout per request in seconds.'
)
@click.option('--user-agent', 'user_agent', default=None, help='User-Agent header.')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML/JSON file with default settings.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level.'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Also write the log to this file.'
)
def cli(url, depth, pattern_file, pattern_limit, database, timeout, user_agent,
        config_path, log_level, log_file):
    """Crawl URL and every same-host page reachable from it."""
    configure_logging(level=log_level, log_file=log_file)

    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Failed to load configuration: {e}')

    overrides: dict[str, Any] = {
        'seed_url': url,
        'max_depth': depth,
        'pattern_file': pattern_file,
        'pattern_limit': pattern_limit,
        'database': database,
        'timeout': timeout,
        'user_agent': user_agent,
    }
    try:
        cfg = CrawlerConfig.model_validate(
            {**cfg.model_dump(), **{k: v for k, v in overrides.items() if v is not None}}
        )
    except ValueError as e:
        print_error(f'Invalid settings: {e}')

    try:
        summary = asyncio.run(start_crawl(cfg))
    except (CrawlError, OSError, sqlite3.Error) as e:
        print_error(f'Crawl failed: {e}')

    click.echo(f'Total URLs crawled: {summary.visited}')
    click.echo(f'Total elapsed time: {format_elapsed(summary.elapsed)}')


if __name__ == "__main__":
    cli()
