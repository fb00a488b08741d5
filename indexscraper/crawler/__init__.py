"""indexscraper.crawler: fetching, stash-aware GETs and pagination chains."""

from indexscraper.crawler.fetcher import ACCEPT_HEADER, Fetcher
from indexscraper.crawler.models import CrawlTarget
from indexscraper.crawler.pagination import resolve_chain

__all__ = ["ACCEPT_HEADER", "CrawlTarget", "Fetcher", "resolve_chain"]
