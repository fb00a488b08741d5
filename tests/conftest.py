# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
import logging
from typing import Dict, List, Tuple

import pytest
import pytest_asyncio
from aiohttp import ClientSession, web

from indexscraper.config import ScraperConfig
from indexscraper.crawler.fetcher import Fetcher
from indexscraper.logger import configure, logger
from indexscraper.stash import Stash


class FakeSite:
    """In-process web site: maps ``path?query`` to ``(status, body)`` and records hits."""

    def __init__(self) -> None:
        self.base = ""
        self.pages: Dict[str, Tuple[int, str]] = {}
        self.hits: List[str] = []
        self.accept_headers: List[str] = []

    def add(self, path: str, body: str = "", status: int = 200) -> str:
        self.pages[path] = (status, body)
        return self.url(path)

    def url(self, path: str) -> str:
        return f"{self.base}{path}"

    async def handle(self, request: web.Request) -> web.Response:
        key = request.path_qs
        self.hits.append(key)
        self.accept_headers.append(request.headers.get("Accept", ""))
        status, body = self.pages.get(key, (404, "<h1>Not found</h1>"))
        return web.Response(status=status, text=body, content_type="text/html")


async def _serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest_asyncio.fixture
async def fake_site(unused_tcp_port: int) -> AsyncIterator[FakeSite]:
    site = FakeSite()
    app = web.Application()
    app.router.add_route("GET", "/{tail:.*}", site.handle)
    async for url in _serve_app(app, unused_tcp_port):
        site.base = url
        yield site


@pytest.fixture()
def sleeps():
    """Async stand-in for ``asyncio.sleep`` that records requested delays."""
    calls: List[float] = []

    async def fake_sleep(seconds: float) -> None:
        calls.append(seconds)

    fake_sleep.calls = calls  # type: ignore[attr-defined]
    return fake_sleep


@pytest.fixture()
def stash_dir(tmp_path: Path) -> Path:
    return tmp_path / "stashes"


@pytest.fixture()
def basic_config(stash_dir: Path) -> ScraperConfig:
    """
    Return a ScraperConfig with default politeness and a temporary stash folder.
    """
    return ScraperConfig(
        index_url="http://example.com/list",
        selector="//a",
        stash_folder=stash_dir,
        user_agent="TestAgent/1.0",
        timeout=5.0,
    )


@pytest_asyncio.fixture
async def session() -> AsyncIterator[ClientSession]:
    async with ClientSession() as client:
        yield client


@pytest.fixture()
def fetcher(session: ClientSession, basic_config: ScraperConfig, sleeps) -> Fetcher:
    return Fetcher(session, basic_config, Stash(basic_config.stash_folder), sleeps)


class LogCapture(logging.Handler):
    """Collects the project logger's records; it does not propagate, so caplog misses them."""

    def __init__(self) -> None:
        super().__init__(logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def attach(self) -> None:
        logger.addHandler(self)
        logger.setLevel(logging.DEBUG)

    def messages(self, level: int) -> List[str]:
        return [r.getMessage() for r in self.records if r.levelno == level]


@pytest.fixture(autouse=True)
def _restore_logger():
    yield
    configure()


@pytest.fixture()
def log_capture() -> LogCapture:
    capture = LogCapture()
    capture.attach()
    return capture
