# site_walker/crawler/link_extractor.py
"""
Anchor extraction for SiteWalker.
"""
from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, ParserRejectedMarkup, SoupStrainer
from bs4.element import Tag

from site_walker.errors import ParseError

# parse only <a href> tags
LINK_STRAINER = SoupStrainer("a", href=True)


def extract_hrefs(html: str) -> List[str]:
    """
    Return raw ``href`` values of all anchors, in document order.

    Nothing is resolved or filtered here; that is the crawler's job.
    """
    try:
        soup = BeautifulSoup(html, "html.parser", parse_only=LINK_STRAINER)
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Markup rejected by parser: {exc}") from exc

    hrefs: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if isinstance(href_val, str):
            hrefs.append(href_val)
    return hrefs
