"""Scraper package: fetch sessions and content extraction."""

from transcript_crawler.scraper.extractor import (
    base_url_of,
    extract_links,
    extract_transcript,
    resolve_links,
)
from transcript_crawler.scraper.fetcher import BrowserSession, HttpSession, open_session
from transcript_crawler.scraper.models import RawPage

__all__ = [
    "BrowserSession",
    "HttpSession",
    "open_session",
    "base_url_of",
    "extract_links",
    "extract_transcript",
    "resolve_links",
    "RawPage",
]
