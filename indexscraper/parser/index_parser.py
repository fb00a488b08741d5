# === FILE: indexscraper/parser/index_parser.py ===
"""Extraction of instance links from (possibly concatenated) index markup.

Two selector languages are supported:

* ``xpath`` evaluated with :mod:`lxml.html`;
* ``css`` evaluated with BeautifulSoup's ``select`` (soupsieve).

Both return the ``href`` of each matched element, in document order, keeping
duplicates. Matches without an ``href`` are skipped with a warning. XPath
expressions that already pick strings (``//a/@href``, ``//a/text()``) return
those strings as they are.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from bs4 import BeautifulSoup
from bs4.element import Tag
from lxml import etree, html

from indexscraper.config import SelectorMethod
from indexscraper.logger import logger

__all__: Sequence[str] = ("parse_index",)

_UTF8_PARSER = html.HTMLParser(encoding="utf-8")


def _xpath_links(text: str, selector: str) -> list[str]:
    # bytes, so an XHTML page may keep its <?xml ... encoding="..."?> line
    try:
        document = html.document_fromstring(text.encode("utf-8", errors="replace"), parser=_UTF8_PARSER)
    except etree.ParserError:
        logger.debug("Index markup has no elements, no links")
        return []
    result = document.xpath(selector)
    if not isinstance(result, list):
        raise ValueError(f"XPath {selector!r} does not select nodes: {result!r}")

    links: list[str] = []
    for node in result:
        if isinstance(node, str):
            links.append(str(node))
            continue
        if not isinstance(node, html.HtmlElement):
            continue
        href = node.get("href")
        if href is None:
            logger.warning("Index element <%s> matched by %r has no href, skipped", node.tag, selector)
            continue
        links.append(href)
    return links


def _css_links(text: str, selector: str) -> list[str]:
    soup = BeautifulSoup(text, "html.parser")
    links: list[str] = []
    for tag in soup.select(selector):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if href is None:
            logger.warning("Index element <%s> matched by %r has no href, skipped", tag.name, selector)
            continue
        links.append(href if isinstance(href, str) else " ".join(href))
    return links


def parse_index(
    text: str,
    selector: str,
    selector_method: Union[SelectorMethod, str] = SelectorMethod.XPATH,
) -> list[str]:
    """Return the link targets of the elements *selector* matches in *text*."""
    if not text.strip():
        return []
    method = SelectorMethod(selector_method)
    if method is SelectorMethod.CSS:
        return _css_links(text, selector)
    return _xpath_links(text, selector)
