# indexscraper/crawler/fetcher.py
"""
Fetcher module: polite HTTP GET with a stash in front of it.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

from aiohttp import ClientSession

from indexscraper.config import ScraperConfig
from indexscraper.logger import progress
from indexscraper.stash import Stash

ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

SleepFn = Callable[[float], Awaitable[object]]


class Fetcher:
    """Fetches pages one at a time, sleeping before every network request.

    404 and 5xx answers are recovered as an empty body. Any other error
    status or transport failure propagates to the caller.
    """

    def __init__(
        self,
        session: ClientSession,
        config: ScraperConfig,
        stash: Stash,
        sleep: Optional[SleepFn] = None,
    ) -> None:
        self.session = session
        self.config = config
        self.stash = stash
        self._sleep: SleepFn = sleep or asyncio.sleep

    async def fetch(self, url: str, stash: bool = False) -> str:
        """
        Return the body of *url*, from the stash when *stash* is set and it has one.

        With *stash* set, whatever comes back from the network (an empty body
        after a 404/5xx included) is stashed, so failed pages are not retried.
        """
        if not url:
            return ""

        if stash and self.stash.has(url):
            progress(self.config.verbose, "Using a stashed copy of %s", url)
            return self.stash.read(url)

        progress(self.config.verbose, "Getting %s", url)
        await self._sleep(self.config.nice_sleep_time)
        status, body = await self._get(url)

        if stash:
            self.stash.write(url, body)
            progress(self.config.verbose, "Stashed (%s): %s", status, url)
        return body

    async def _get(self, url: str) -> tuple[int, str]:
        async with self.session.get(url, headers={"Accept": ACCEPT_HEADER}) as resp:
            if resp.status == 404 or 500 <= resp.status < 600:
                progress(self.config.verbose, "HTTP %s for %s, treating as empty page", resp.status, url)
                return resp.status, ""
            resp.raise_for_status()
            return resp.status, await resp.text(errors="replace")
