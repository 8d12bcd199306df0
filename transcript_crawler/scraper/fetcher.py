"""Fetch sessions: one browser tab (or HTTP client) held for a whole crawl.

Both sessions are context managers.  Entering one acquires the underlying
resource, leaving it releases the resource exactly once, whatever path the
crawl took to get there.  ``fetch`` raises
:class:`~transcript_crawler.errors.NavigationError` when a page cannot be
loaded.
"""

from __future__ import annotations

from typing import Protocol

import httpx
import structlog

from transcript_crawler.config import Settings
from transcript_crawler.errors import NavigationError
from transcript_crawler.scraper.models import RawPage

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (compatible; TranscriptCrawler/1.0; +https://github.com/transcript-crawler)"
    )
}


class FetchSession(Protocol):
    def fetch(self, url: str) -> RawPage: ...

    def __enter__(self) -> "FetchSession": ...

    def __exit__(self, *exc_info) -> None: ...


class BrowserSession:
    """Render pages in a single headless Chromium tab.

    Playwright is imported lazily so the HTTP backend and the test suite do
    not need a browser installed.
    """

    def __init__(self, timeout: float = 30.0, headless: bool = True) -> None:
        self._timeout_ms = int(timeout * 1000)
        self._headless = headless
        self._playwright = None
        self._browser = None
        self._page = None

    def __enter__(self) -> "BrowserSession":
        from playwright.sync_api import sync_playwright  # noqa: PLC0415

        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(headless=self._headless)
            self._page = self._browser.new_page()
        except Exception:
            self._playwright.stop()
            raise
        return self

    def __exit__(self, *exc_info) -> None:
        try:
            if self._browser is not None:
                self._browser.close()
        finally:
            self._playwright.stop()
            self._browser = self._page = self._playwright = None
        logger.debug("browser_closed")

    def fetch(self, url: str) -> RawPage:
        from playwright.sync_api import Error as PlaywrightError  # noqa: PLC0415

        if self._page is None:
            raise RuntimeError("BrowserSession used outside of its 'with' block")

        try:
            response = self._page.goto(url, wait_until="networkidle", timeout=self._timeout_ms)
            html = self._page.content()
        except PlaywrightError as exc:
            logger.error("navigation_failed", url=url, error=str(exc))
            raise NavigationError(url, provider_name="playwright") from exc

        status_code = response.status if response is not None else 200
        return RawPage(url=url, html=html, status_code=status_code)


class HttpSession:
    """Fetch pages with a plain ``httpx`` client (no JavaScript rendering).

    Like the browser, an error status is returned as a page; only transport
    failures raise.
    """

    def __init__(self, timeout: float = 30.0, transport: httpx.BaseTransport | None = None) -> None:
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "HttpSession":
        self._client = httpx.Client(
            headers=_DEFAULT_HEADERS,
            timeout=self._timeout,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    def __exit__(self, *exc_info) -> None:
        self._client.close()
        self._client = None
        logger.debug("http_client_closed")

    def fetch(self, url: str) -> RawPage:
        if self._client is None:
            raise RuntimeError("HttpSession used outside of its 'with' block")

        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            logger.error("navigation_failed", url=url, error=str(exc))
            raise NavigationError(url, provider_name="httpx") from exc

        return RawPage(url=url, html=response.text, status_code=response.status_code)


def open_session(settings: Settings) -> FetchSession:
    """Return an (unentered) fetch session for ``settings.fetch_backend``."""
    if settings.fetch_backend == "http":
        return HttpSession(timeout=settings.request_timeout)
    return BrowserSession(timeout=settings.request_timeout, headless=settings.headless)
