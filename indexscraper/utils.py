# File: indexscraper/utils.py
"""indexscraper.utils: small helpers for URLs, stash keys and pagination defaults."""

from __future__ import annotations

import re
from typing import Sequence

__all__: Sequence[str] = (
    "cache_key",
    "slug",
    "no_next_page",
)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9\-]")


def cache_key(url: str) -> str:
    """Stash file name for *url*: every character outside ``[A-Za-z0-9-]`` removed.

    Different URLs may collapse to the same key; they then share one stash entry.
    """
    return _UNSAFE_KEY_CHARS.sub("", url)


def slug(url: str) -> str:
    """Last path segment of *url* without the query string or an ``.html`` suffix."""
    last = url.split("/")[-1]
    last = re.sub(r"\?.*", "", last)
    return re.sub(r".html.*", "", last)


def no_next_page(url: str, index: int) -> str:
    """Default pagination continuation: there is never a next page."""
    return ""
