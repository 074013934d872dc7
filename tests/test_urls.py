# File: tests/test_urls.py
import pytest

from site_walker.crawler.urls import (
    base_domain,
    host_of,
    is_http_url,
    is_navigable,
    normalize_url,
    resolve_link,
    strip_fragment,
    url_depth,
)
from site_walker.errors import UrlParseError


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("http://example.com", "http://example.com"),
        ("http://example.com/", "http://example.com"),
        ("http://example.com/page/", "http://example.com/page"),
        ("http://example.com/PAGE/", "http://example.com/page"),
        ("HTTP://EXAMPLE.COM/PAGE", "http://example.com/page"),
        ("http://example.com/page#Section", "http://example.com/page"),
        ("http://example.com/a//", "http://example.com/a"),
    ],
)
def test_normalize_url(raw, expected):
    assert normalize_url(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "HTTP://EXAMPLE.COM/PAGE/",
        "http://example.com/a/b/?Q=1",
        "http://example.com/a//#frag",
        "not even a url/",
        "",
    ],
)
def test_normalize_url_is_idempotent(raw):
    once = normalize_url(raw)
    assert normalize_url(once) == once


def test_normalize_ignores_case_and_trailing_slash():
    assert normalize_url("HTTP://EXAMPLE.COM/PAGE/") == normalize_url("http://example.com/page")


def test_strip_fragment():
    assert strip_fragment("http://example.com/a?x=1#frag") == "http://example.com/a?x=1"
    assert strip_fragment("http://example.com/a") == "http://example.com/a"


@pytest.mark.parametrize(
    "url,depth",
    [
        ("http://example.com", 0),
        ("http://example.com/", 0),
        ("http://example.com/page", 1),
        ("http://example.com/a/b", 2),
        ("http://example.com/category/subcategory/page", 3),
        ("http://example.com/page?param=value", 1),
        ("http://example.com/page#section", 1),
        ("http://example.com/category/", 1),
        ("http://example.com/a?next=/b/c/d", 1),
    ],
)
def test_url_depth(url, depth):
    assert url_depth(url) == depth


def test_base_domain_is_lowercased_host():
    assert base_domain("https://Example.COM:8443/start") == "example.com"


@pytest.mark.parametrize("seed", ["not a url", "ftp://example.com/", "http://", "http://[::1/"])
def test_base_domain_rejects_unusable_seed(seed):
    with pytest.raises(UrlParseError):
        base_domain(seed)


def test_host_of():
    assert host_of("http://Sub.Example.com/x") == "sub.example.com"
    assert host_of("javascript:void(0)") is None


@pytest.mark.parametrize(
    "url,expected",
    [
        ("http://example.com/", True),
        ("HTTPS://example.com/a", True),
        ("ftp://example.com/file", False),
        ("ws://example.com/socket", False),
        ("javascript:void(0)", False),
    ],
)
def test_is_http_url(url, expected):
    assert is_http_url(url) is expected


@pytest.mark.parametrize(
    "href,expected",
    [
        ("tel:+123456", False),
        ("mailto:someone@example.com", False),
        ("MAILTO:someone@example.com", False),
        ("/contact", True),
        ("https://example.com/", True),
    ],
)
def test_is_navigable(href, expected):
    assert is_navigable(href) is expected


def test_resolve_link_relative_and_fragment():
    page = "http://example.com/docs/intro"
    assert resolve_link(page, "setup#install") == "http://example.com/docs/setup"
    assert resolve_link(page, "/b?x=1#frag") == "http://example.com/b?x=1"
    assert resolve_link(page, "http://other.com/c") == "http://other.com/c"


@pytest.mark.parametrize("href", ["http://[broken/", "http://example.com:99999/"])
def test_resolve_link_failure_returns_none(href):
    assert resolve_link("http://example.com/", href) is None
