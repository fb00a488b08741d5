# indexscraper/crawler/pagination.py
"""
Resolution of paginated documents into one concatenated body.
"""
from __future__ import annotations

from typing import List

from indexscraper.crawler.fetcher import Fetcher
from indexscraper.crawler.models import NextPageFn


async def resolve_chain(
    fetcher: Fetcher,
    start_url: str,
    stash: bool,
    next_page: NextPageFn,
    start_index: int = 1,
) -> str:
    """
    Fetch *start_url* and every page after it, returning the bodies joined in order.

    After each non-empty page ``next_page(url, index + 1)`` names the next one.
    The chain stops on an empty body or when the next URL equals the current
    one. An empty next URL is still "fetched": that yields ``""`` without any
    request and ends the chain on the following step.
    """
    parts: List[str] = []
    url, index = start_url, start_index
    while True:
        body = await fetcher.fetch(url, stash)
        if not body:
            break
        parts.append(body)
        next_url = next_page(url, index + 1)
        if next_url == url:
            break
        url, index = next_url, index + 1
    return "".join(parts)
