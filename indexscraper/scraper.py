# === FILE: indexscraper/scraper.py ===
from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional

from aiohttp import ClientSession, ClientTimeout

from indexscraper.config import ScraperConfig
from indexscraper.crawler.fetcher import Fetcher, SleepFn
from indexscraper.crawler.models import CrawlTarget, NextPageFn
from indexscraper.crawler.pagination import resolve_chain
from indexscraper.logger import progress
from indexscraper.parser.index_parser import parse_index
from indexscraper.stash import Stash
from indexscraper.utils import no_next_page

__all__ = ("Scraper", "Handler", "IndexParser")

#: ``handler(content, url, position)``, called once per instance page.
Handler = Callable[[str, str, int], Any]
#: ``parser(text, selector, selector_method) -> [url, ...]``
IndexParser = Callable[[str, str, Any], List[str]]


class Scraper:
    """Index-then-instances scraper.

    Fetches the index (following ``next_index_page_url``), pulls the instance
    links out of it and hands every instance page (following
    ``next_instance_page_url``) to a handler, strictly one after another.
    """

    def __init__(
        self,
        config: ScraperConfig,
        *,
        next_index_page_url: NextPageFn = no_next_page,
        next_instance_page_url: NextPageFn = no_next_page,
        index_parser: IndexParser = parse_index,
        session: Optional[ClientSession] = None,
        sleep: Optional[SleepFn] = None,
    ) -> None:
        self.config = config
        self.next_index_page_url = next_index_page_url
        self.next_instance_page_url = next_instance_page_url
        self.index_parser = index_parser
        self.stash = Stash(config.stash_folder)
        self.session = session
        self._owns_session = session is None
        self._sleep = sleep
        self.fetcher: Optional[Fetcher] = None
        if session is not None:
            self.fetcher = Fetcher(session, config, self.stash, sleep)

    async def __aenter__(self) -> Scraper:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self.fetcher = Fetcher(self.session, self.config, self.stash, self._sleep)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()
            self.session = None
            self.fetcher = None

    def _require_fetcher(self) -> Fetcher:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        return self.fetcher

    async def get_index(self) -> List[str]:
        """Instance URLs listed on the (possibly paginated) index, in document order."""
        text = await resolve_chain(
            self._require_fetcher(),
            self.config.index_url,
            self.config.index_debug,
            self.next_index_page_url,
        )
        return self.index_parser(text, self.config.selector, self.config.selector_method)

    async def get_instance(self, url: str) -> str:
        """Concatenated body of an instance page and the pages that follow it."""
        return await resolve_chain(
            self._require_fetcher(),
            url,
            self.config.debug,
            self.next_instance_page_url,
        )

    async def scrape_from_list(self, urls: Iterable[str], handler: Handler) -> List[Any]:
        targets = [CrawlTarget(url, position) for position, url in enumerate(urls)]
        progress(self.config.verbose, "Scraping %d instances", len(targets))
        results: List[Any] = []
        for target in targets:
            content = await self.get_instance(target.url)
            results.append(handler(content, target.url, target.position))
        return results

    async def scrape(self, handler: Handler) -> List[Any]:
        """Run *handler* on every instance listed on the index; return its results in order."""
        return await self.scrape_from_list(await self.get_index(), handler)
