"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from transcript_crawler.config import DEFAULT_START_URL, S3Config, Settings
from transcript_crawler.errors import ConfigurationError

_ENV_VARS = [
    "START_URL",
    "FETCH_BACKEND",
    "HEADLESS",
    "REQUEST_TIMEOUT",
    "STORAGE_BACKEND",
    "BUCKET_NAME",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_DEFAULT_REGION",
    "TRANSCRIPT_OUTPUT_DIR",
    "LOG_LEVEL",
    "LOG_JSON",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings()
    assert settings.start_url == DEFAULT_START_URL
    assert settings.fetch_backend == "browser"
    assert settings.headless is True
    assert settings.request_timeout == 30.0
    assert settings.storage_backend == "s3"
    assert settings.bucket_name == "larry-king-data"
    assert settings.aws_region is None
    assert settings.content_selector == ".cnnBodyText"


def test_environment_overrides(clean_env, tmp_path):
    clean_env.setenv("START_URL", "https://site.com/show")
    clean_env.setenv("FETCH_BACKEND", "http")
    clean_env.setenv("HEADLESS", "false")
    clean_env.setenv("REQUEST_TIMEOUT", "5")
    clean_env.setenv("STORAGE_BACKEND", "local")
    clean_env.setenv("TRANSCRIPT_OUTPUT_DIR", str(tmp_path))

    settings = Settings()

    assert settings.start_url == "https://site.com/show"
    assert settings.fetch_backend == "http"
    assert settings.headless is False
    assert settings.request_timeout == 5.0
    assert settings.storage_backend == "local"
    assert settings.output_dir == Path(tmp_path)


def test_s3_config_from_credentials(clean_env):
    clean_env.setenv("AWS_ACCESS_KEY_ID", "AKIAEXAMPLE")
    clean_env.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    clean_env.setenv("AWS_DEFAULT_REGION", "us-west-2")
    clean_env.setenv("BUCKET_NAME", "transcripts")

    assert Settings().s3_config() == S3Config(
        bucket="transcripts",
        region="us-west-2",
        access_key_id="AKIAEXAMPLE",
        secret_access_key="secret",
    )


def test_secret_not_in_repr(clean_env):
    clean_env.setenv("AWS_SECRET_ACCESS_KEY", "hunter2")
    assert "hunter2" not in repr(Settings())


def test_unknown_fetch_backend_rejected(clean_env):
    with pytest.raises(ConfigurationError):
        Settings(fetch_backend="curl")


def test_unknown_storage_backend_rejected(clean_env):
    with pytest.raises(ConfigurationError, match="STORAGE_BACKEND"):
        Settings(storage_backend="ftp")
