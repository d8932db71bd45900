"""Runtime configuration model for recipe sync.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MIN_PAYLOAD_BYTES,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import RecipeSyncConfigError


@dataclass(frozen=True)
class RecipeSyncConfig:
    """Validated runtime configuration.

    Attributes:
        data_dir: Directory receiving the three output artifacts.
        github_token: Optional bearer token for GitHub requests.
        request_timeout: Per-request timeout in seconds.
        min_payload_bytes: Smallest accepted dump size, 0 disables the check.
        log_level: structlog filtering level name.
    """

    data_dir: Path
    github_token: str | None
    request_timeout: float
    min_payload_bytes: int
    log_level: str

    @classmethod
    def from_env(cls) -> "RecipeSyncConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RecipeSyncConfigError: If environment values are invalid.
        """
        data_dir_value = os.getenv("RECIPES_DATA_DIR", str(DEFAULT_DATA_DIR))
        token = os.getenv("GITHUB_TOKEN") or os.getenv("GH_TOKEN") or None
        timeout_value = os.getenv("RECIPES_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
        min_bytes_value = os.getenv("RECIPES_MIN_PAYLOAD_BYTES", str(DEFAULT_MIN_PAYLOAD_BYTES))
        log_level_value = os.getenv("RECIPES_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            data_dir=Path(data_dir_value).expanduser(),
            github_token=token.strip() if token and token.strip() else None,
            request_timeout=_parse_timeout(timeout_value),
            min_payload_bytes=_parse_min_payload_bytes(min_bytes_value),
            log_level=parse_log_level(log_level_value),
        )


def parse_log_level(raw_value: str) -> str:
    """Validate a log level name.

    Args:
        raw_value: Level name from environment or CLI.

    Returns:
        Upper-cased level name.

    Raises:
        RecipeSyncConfigError: If level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise RecipeSyncConfigError(
            f"Invalid log level '{raw_value}': expected one of {SUPPORTED_LOG_LEVELS}. "
            "Set RECIPES_LOG_LEVEL or --log-level to a supported value."
        )
    return level


def _parse_timeout(raw_value: str) -> float:
    """Parse the request timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Positive timeout in seconds.

    Raises:
        RecipeSyncConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise RecipeSyncConfigError(
            "Invalid RECIPES_REQUEST_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set RECIPES_REQUEST_TIMEOUT to a positive number."
        ) from error
    if not math.isfinite(timeout) or timeout <= 0:
        raise RecipeSyncConfigError(
            f"Invalid RECIPES_REQUEST_TIMEOUT value {raw_value}: expected value > 0."
        )
    return timeout


def _parse_min_payload_bytes(raw_value: str) -> int:
    """Parse the minimum payload size environment value."""
    try:
        min_bytes = int(raw_value)
    except ValueError as error:
        raise RecipeSyncConfigError(
            "Invalid RECIPES_MIN_PAYLOAD_BYTES value: "
            f"expected integer, got '{raw_value}'. "
            "Set RECIPES_MIN_PAYLOAD_BYTES to 0 or a positive byte count."
        ) from error
    if min_bytes < 0:
        raise RecipeSyncConfigError(
            f"Invalid RECIPES_MIN_PAYLOAD_BYTES value {min_bytes}: expected value >= 0."
        )
    return min_bytes
