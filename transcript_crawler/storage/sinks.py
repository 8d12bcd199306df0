"""Transcript sinks: where serialised transcripts end up.

Both sinks expose ``put(key, body)`` and raise
:class:`~transcript_crawler.errors.StorageError` on failure.  Writing the
same key twice overwrites the earlier object.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from transcript_crawler.config import S3Config, Settings
from transcript_crawler.errors import StorageError

logger = structlog.get_logger(logger_name=__name__)


class TranscriptSink(Protocol):
    def put(self, key: str, body: str) -> None: ...


class S3Sink:
    """Upload transcripts as JSON objects into a single S3 bucket."""

    def __init__(self, config: S3Config, client=None) -> None:
        self._config = config
        self._client = client or boto3.client(
            "s3",
            region_name=config.region,
            aws_access_key_id=config.access_key_id or None,
            aws_secret_access_key=config.secret_access_key or None,
        )

    @property
    def bucket(self) -> str:
        return self._config.bucket

    def put(self, key: str, body: str) -> None:
        try:
            self._client.put_object(
                Bucket=self._config.bucket,
                Key=key,
                Body=body.encode("utf-8"),
                ContentType="application/json",
            )
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(key, f"Failed to upload to S3: {exc}", provider_name="s3") from exc
        logger.info("transcript_uploaded", bucket=self._config.bucket, key=key)


class LocalSink:
    """Write transcripts as files under a root directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        return self.root / key

    def put(self, key: str, body: str) -> None:
        path = self.path_for(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(body, encoding="utf-8")
        except OSError as exc:
            raise StorageError(key, f"Failed to write {path}: {exc}", provider_name="local") from exc
        logger.info("transcript_written", path=str(path))


def build_sink(settings: Settings) -> TranscriptSink:
    """Return the sink selected by ``settings.storage_backend``."""
    if settings.storage_backend == "local":
        return LocalSink(settings.output_dir)
    return S3Sink(settings.s3_config())
