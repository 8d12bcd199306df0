"""Centralised settings for the transcript crawler.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

The entrypoint builds one :class:`Settings` and passes it (or the pieces it
needs) down explicitly; parsing and traversal never read the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from transcript_crawler.errors import ConfigurationError

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_START_URL = "https://transcripts.cnn.com/show/lkl"

FETCH_BACKENDS = ("browser", "http")
STORAGE_BACKENDS = ("s3", "local")


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class S3Config:
    """Everything the S3 sink needs, and nothing else."""

    bucket: str
    region: str | None = None
    access_key_id: str = ""
    secret_access_key: str = ""


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Crawl
    # ------------------------------------------------------------------
    start_url: str = field(
        default_factory=lambda: os.environ.get("START_URL", DEFAULT_START_URL)
    )
    content_selector: str = field(
        default_factory=lambda: os.environ.get("CONTENT_SELECTOR", ".cnnBodyText")
    )

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    fetch_backend: str = field(
        default_factory=lambda: os.environ.get("FETCH_BACKEND", "browser")
    )
    headless: bool = field(default_factory=lambda: _env_bool("HEADLESS", "true"))
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------
    storage_backend: str = field(
        default_factory=lambda: os.environ.get("STORAGE_BACKEND", "s3")
    )
    bucket_name: str = field(
        default_factory=lambda: os.environ.get("BUCKET_NAME", "larry-king-data")
    )
    aws_access_key_id: str = field(
        default_factory=lambda: os.environ.get("AWS_ACCESS_KEY_ID", "")
    )
    aws_secret_access_key: str = field(
        default_factory=lambda: os.environ.get("AWS_SECRET_ACCESS_KEY", ""),
        repr=False,
    )
    aws_region: str | None = field(
        default_factory=lambda: os.environ.get("AWS_DEFAULT_REGION") or None
    )
    output_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("TRANSCRIPT_OUTPUT_DIR", Path.home() / ".transcript_data")
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))
    json_logs: bool = field(default_factory=lambda: _env_bool("LOG_JSON", "false"))

    def __post_init__(self) -> None:
        if self.fetch_backend not in FETCH_BACKENDS:
            raise ConfigurationError(
                f"Unknown FETCH_BACKEND {self.fetch_backend!r}; "
                f"expected one of {', '.join(FETCH_BACKENDS)}"
            )
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown STORAGE_BACKEND {self.storage_backend!r}; "
                f"expected one of {', '.join(STORAGE_BACKENDS)}"
            )

    def s3_config(self) -> S3Config:
        """Return the explicit S3 configuration struct for the S3 sink."""
        return S3Config(
            bucket=self.bucket_name,
            region=self.aws_region,
            access_key_id=self.aws_access_key_id,
            secret_access_key=self.aws_secret_access_key,
        )
