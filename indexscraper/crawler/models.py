# indexscraper/crawler/models.py
"""
Data models for the IndexScraper crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

#: ``next_page(current_url, next_index) -> next_url``; ``""`` ends the chain.
NextPageFn = Callable[[str, int], str]


@dataclass(frozen=True, slots=True)
class CrawlTarget:
    """Instance URL together with its 0-based position in the index link list."""

    url: str
    position: int
