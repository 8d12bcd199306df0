"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The rendered markup for a single URL fetch."""

    url: str
    html: str
    status_code: int
