"""Exception hierarchy for the transcript crawler.

    TranscriptCrawlerError  (base)
    +-- NavigationError     (a page could not be loaded; fatal for the crawl)
    +-- StorageError        (a sink rejected a write; logged, crawl goes on)
    +-- ConfigurationError  (invalid settings at startup)
"""

from __future__ import annotations


class TranscriptCrawlerError(Exception):
    """Base exception for all transcript crawler errors.

    Carries a human-readable ``message`` and an optional ``provider_name``
    identifying the backend that failed (e.g. "playwright", "httpx", "s3").
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class NavigationError(TranscriptCrawlerError):
    """Raised when a fetch session cannot load a URL."""

    def __init__(
        self,
        url: str,
        message: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        self.url = url
        super().__init__(
            message=message or f"Failed to go to URL: {url}",
            provider_name=provider_name,
        )


class StorageError(TranscriptCrawlerError):
    """Raised when a transcript sink fails to persist a key."""

    def __init__(
        self,
        key: str,
        message: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        self.key = key
        super().__init__(
            message=message or f"Failed to store {key}",
            provider_name=provider_name,
        )


class ConfigurationError(TranscriptCrawlerError):
    """Raised when settings hold a value the crawler cannot act on."""
