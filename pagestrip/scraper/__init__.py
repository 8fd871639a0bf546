"""Scraper package: web fetch, HTML cleaning and saving."""

from pagestrip.scraper.cleaner import DENYLIST, clean
from pagestrip.scraper.fetcher import fetch_url, validate_url
from pagestrip.scraper.filenames import sanitize_filename
from pagestrip.scraper.models import RawPage, SavedPage
from pagestrip.scraper.saver import save_page

__all__ = [
    "DENYLIST",
    "clean",
    "fetch_url",
    "validate_url",
    "sanitize_filename",
    "save_page",
    "RawPage",
    "SavedPage",
]
