"""Content extraction from rendered transcript archive pages."""

from __future__ import annotations

from typing import List
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

from transcript_crawler.transcript.parser import LINE_BREAK

DEFAULT_CONTENT_SELECTOR = ".cnnBodyText"


def base_url_of(url: str) -> str:
    """Return ``scheme://host`` (plus port, if any) for *url*."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}"


def extract_links(html: str) -> List[str]:
    """Return every ``<a href>`` value in document order.

    Unlike a general-purpose link harvester nothing is filtered or
    deduplicated here; link qualification belongs to the crawler.
    """
    soup = BeautifulSoup(html, "html.parser")
    return [anchor["href"] for anchor in soup.select("a[href]")]


def resolve_links(hrefs: List[str], base_url: str) -> List[str]:
    """Resolve each href against *base_url* into an absolute URL."""
    return [urljoin(base_url, href.strip()) for href in hrefs]


def extract_transcript(html: str, selector: str = DEFAULT_CONTENT_SELECTOR) -> str:
    """Return the inner markup of every element matching *selector*, joined by ``<br>``.

    Inner markup keeps the line-break tags the archive uses between dialogue
    lines (serialised as ``<br/>``) and escapes only ``&``, ``<`` and ``>``,
    leaving accented characters and curly quotes as they are.  The result can
    go straight to :func:`~transcript_crawler.transcript.parser.parse_transcript`.
    """
    soup = BeautifulSoup(html, "html.parser")
    return LINE_BREAK.join(
        element.decode_contents(formatter="minimal") for element in soup.select(selector)
    )
