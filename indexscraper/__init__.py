"""
IndexScraper package initializer.
Defines package version and exposes the public scraping API.
"""
__version__ = "0.1.0"

from indexscraper.config import ScraperConfig, SelectorMethod, load_config
from indexscraper.engine import Engine
from indexscraper.scraper import Scraper
from indexscraper.utils import no_next_page, slug

__all__ = [
    "Engine",
    "Scraper",
    "ScraperConfig",
    "SelectorMethod",
    "load_config",
    "no_next_page",
    "slug",
]
