"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RecipeSyncConfig, parse_log_level
from core.errors import RecipeSyncConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to anonymous access and a 15s timeout."""
    for name in (
        "GITHUB_TOKEN",
        "GH_TOKEN",
        "RECIPES_DATA_DIR",
        "RECIPES_REQUEST_TIMEOUT",
        "RECIPES_MIN_PAYLOAD_BYTES",
        "RECIPES_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = RecipeSyncConfig.from_env()

    assert config.github_token is None
    assert config.request_timeout == 15.0
    assert config.min_payload_bytes == 0
    assert config.data_dir.name == "data"
    assert config.log_level == "INFO"


def test_from_env_reads_token_with_gh_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    """GH_TOKEN should be used when GITHUB_TOKEN is unset."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("GH_TOKEN", " secret-token ")

    config = RecipeSyncConfig.from_env()

    assert config.github_token == "secret-token"


def test_from_env_treats_blank_token_as_absent(monkeypatch: pytest.MonkeyPatch) -> None:
    """A whitespace-only token should not be attached to requests."""
    monkeypatch.setenv("GITHUB_TOKEN", "   ")
    monkeypatch.delenv("GH_TOKEN", raising=False)

    config = RecipeSyncConfig.from_env()

    assert config.github_token is None


def test_from_env_reads_data_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the data directory from environment."""
    monkeypatch.setenv("RECIPES_DATA_DIR", "./.tmp-recipes")

    config = RecipeSyncConfig.from_env()

    assert config.data_dir.name == ".tmp-recipes"


@pytest.mark.parametrize("raw_value", ["soon", "0", "-3", "nan"])
def test_from_env_raises_for_invalid_timeout(
    monkeypatch: pytest.MonkeyPatch, raw_value: str
) -> None:
    """Config should reject non-positive or non-numeric timeouts."""
    monkeypatch.setenv("RECIPES_REQUEST_TIMEOUT", raw_value)

    with pytest.raises(RecipeSyncConfigError):
        RecipeSyncConfig.from_env()


def test_from_env_raises_for_negative_min_payload(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject a negative minimum payload size."""
    monkeypatch.setenv("RECIPES_MIN_PAYLOAD_BYTES", "-1")

    with pytest.raises(RecipeSyncConfigError):
        RecipeSyncConfig.from_env()


def test_parse_log_level_normalizes_case() -> None:
    """Log level names should be accepted case-insensitively."""
    assert parse_log_level(" debug ") == "DEBUG"

    with pytest.raises(RecipeSyncConfigError):
        parse_log_level("verbose")
