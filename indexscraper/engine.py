# File: indexscraper/engine.py
"""indexscraper.engine: blocking facade that runs a Scraper inside its own event loop."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Iterable, List, Optional, TypeVar

from indexscraper.config import ScraperConfig, load_config
from indexscraper.logger import configure_scraper, logger, progress
from indexscraper.scraper import Handler, Scraper

__all__ = ["Engine"]

_T = TypeVar("_T")


class Engine:
    """Facade for scripts and tests: load the config, run the scraper, return results."""

    @staticmethod
    def load_config(path: Optional[str]) -> ScraperConfig:
        """Load the config from YAML/JSON (``configs/default.yaml`` when *path* is None)."""
        return load_config(path)

    def __init__(self, config: ScraperConfig, **strategies: Any) -> None:
        """*strategies* are passed to :class:`Scraper` (continuations, index_parser, sleep).

        Also points the project logger at the config: progress lines only when
        ``verbose``, written to ``log_file`` as well when one is set.
        """
        self.config = config
        self.strategies = strategies
        configure_scraper(config.verbose, config.log_file)

    def _run(self, job: Callable[[Scraper], Awaitable[_T]]) -> _T:
        async def _runner() -> _T:
            async with Scraper(self.config, **self.strategies) as scraper:
                return await job(scraper)

        try:
            return asyncio.run(_runner())
        except Exception as exc:
            logger.error("Scraping %s failed: %s", self.config.index_url or "<list>", exc)
            raise

    def get_index(self) -> List[str]:
        return self._run(lambda scraper: scraper.get_index())

    def scrape(self, handler: Handler) -> List[Any]:
        """Call ``handler(content, url, position)`` for each instance, in index order."""
        progress(self.config.verbose, "Starting scrape of %s", self.config.index_url)
        return self._run(lambda scraper: scraper.scrape(handler))

    def scrape_from_list(self, urls: Iterable[str], handler: Handler) -> List[Any]:
        return self._run(lambda scraper: scraper.scrape_from_list(urls, handler))
