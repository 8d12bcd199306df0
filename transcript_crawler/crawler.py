"""Depth-limited transcript crawl.

``crawl`` orchestrates the full pipeline for one starting URL:

    fetch index → pick first qualifying link → fetch → extract → parse
    → derive key → persist

A *qualifying* link is an absolute URL that starts with the starting URL and
is not the page it was found on.  Only the first one is followed, and the
crawl stops after storing it; the child's own links are not walked.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional

import structlog

from transcript_crawler.errors import StorageError
from transcript_crawler.scraper.extractor import (
    DEFAULT_CONTENT_SELECTOR,
    base_url_of,
    extract_links,
    extract_transcript,
    resolve_links,
)
from transcript_crawler.scraper.fetcher import FetchSession
from transcript_crawler.scraper.models import RawPage
from transcript_crawler.storage.keys import derive_key
from transcript_crawler.storage.sinks import TranscriptSink
from transcript_crawler.transcript.parser import parse_transcript, turns_to_json

logger = structlog.get_logger(logger_name=__name__)

MAX_DEPTH = 3


@dataclass(frozen=True)
class CrawlState:
    current_url: str
    depth: int
    starting_url: str
    base_url: str


@dataclass
class CrawlResult:
    """What a crawl did: every URL fetched, and the key stored (if any)."""

    visited: List[str] = field(default_factory=list)
    stored_key: Optional[str] = None


def select_link(links: List[str], starting_url: str, current_url: str) -> Optional[str]:
    """Return the first link under *starting_url* that is not *current_url*."""
    for link in links:
        if link.startswith(starting_url) and link != current_url:
            return link
    return None


class TranscriptCrawler:
    """Walk a transcript archive with one fetch session and one sink.

    The session must already be entered; the crawler never opens or closes
    it.  Use :func:`crawl` for the scoped version.
    """

    def __init__(
        self,
        session: FetchSession,
        sink: TranscriptSink,
        content_selector: str = DEFAULT_CONTENT_SELECTOR,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        self._session = session
        self._sink = sink
        self._selector = content_selector
        self._max_depth = max_depth

    def run(self, starting_url: str) -> CrawlResult:
        state = CrawlState(
            current_url=starting_url,
            depth=0,
            starting_url=starting_url,
            base_url=base_url_of(starting_url),
        )
        result = CrawlResult()
        logger.info("crawl_started", starting_url=starting_url, base_url=state.base_url)
        self.visit(state, result)
        return result

    def visit(self, state: CrawlState, result: CrawlResult) -> None:
        if state.depth > self._max_depth:
            logger.info("depth_exceeded", url=state.current_url, depth=state.depth)
            return

        page = self._fetch(state.current_url, result)
        links = resolve_links(extract_links(page.html), state.base_url)

        link = select_link(links, state.starting_url, state.current_url)
        if link is None:
            logger.info("no_qualifying_link", url=state.current_url, links=len(links))
            return

        logger.info("link_selected", url=link, depth=state.depth)
        self._store_transcript(replace(state, current_url=link), result)

    def _fetch(self, url: str, result: CrawlResult) -> RawPage:
        page = self._session.fetch(url)
        result.visited.append(url)
        logger.debug("page_fetched", url=url, status=page.status_code, size=len(page.html))
        return page

    def _store_transcript(self, state: CrawlState, result: CrawlResult) -> None:
        page = self._fetch(state.current_url, result)
        turns = parse_transcript(extract_transcript(page.html, self._selector))
        logger.info("transcript_parsed", url=state.current_url, turns=len(turns))
        for turn in turns:
            logger.debug("turn", speaker=turn.speaker, value=turn.value)

        key = derive_key(state.current_url, state.starting_url)
        try:
            self._sink.put(key, turns_to_json(turns))
        except StorageError as exc:
            logger.error("storage_failed", key=key, error=str(exc))
            return

        result.stored_key = key
        logger.info("transcript_stored", key=key)


def crawl(
    starting_url: str,
    session: FetchSession,
    sink: TranscriptSink,
    content_selector: str = DEFAULT_CONTENT_SELECTOR,
) -> CrawlResult:
    """Crawl from *starting_url*, holding *session* open for exactly the crawl.

    The session is entered here and released on every exit path, including a
    :class:`~transcript_crawler.errors.NavigationError` propagating out.
    """
    with session as active:
        return TranscriptCrawler(active, sink, content_selector).run(starting_url)
