# indexscraper/stash.py
"""
On-disk stash of fetched pages, one UTF-8 text file per sanitized URL.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

from indexscraper.logger import logger
from indexscraper.utils import cache_key

#: NAME_MAX of common filesystems; keys are ASCII, so characters == bytes
MAX_KEY_LENGTH = 255


class Stash:
    """Persistent page store keyed by :func:`~indexscraper.utils.cache_key`.

    Entries are never expired. There is no locking: one writer at a time.
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)
        if not self.root.is_dir():
            self.root.mkdir(parents=True, exist_ok=True)
            logger.debug("Created stash folder %s", self.root)

    def path_for(self, url: str) -> Path:
        """File of *url*'s entry; ValueError if its key is empty or too long for a file name."""
        key = cache_key(url)
        if not key:
            raise ValueError(f"URL {url!r} has no characters usable as a stash key")
        if len(key) > MAX_KEY_LENGTH:
            raise ValueError(f"Stash key of {url!r} is longer than {MAX_KEY_LENGTH} characters")
        return self.root / key

    def has(self, url: str) -> bool:
        return self.path_for(url).is_file()

    def read(self, url: str) -> str:
        """Return the stashed body; raises FileNotFoundError if nothing is stashed."""
        # newline="" keeps the body byte-for-byte, no \r\n translation
        with self.path_for(url).open("r", encoding="utf-8", newline="") as fh:
            return fh.read()

    def write(self, url: str, body: str) -> Path:
        """Store *body* for *url*, replacing characters UTF-8 cannot encode."""
        path = self.path_for(url)
        with path.open("w", encoding="utf-8", errors="replace", newline="") as fh:
            fh.write(body)
        return path
