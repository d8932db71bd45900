"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest
import structlog


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Drop logging config bound to a previous test's captured streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., object]:
    """Build a runtime config rooted in the test's temp directory."""
    from core.config import RecipeSyncConfig

    def _make_config(
        token: str | None = None,
        min_payload_bytes: int = 0,
        timeout: float = 15.0,
    ) -> RecipeSyncConfig:
        return RecipeSyncConfig(
            data_dir=tmp_path / "data",
            github_token=token,
            request_timeout=timeout,
            min_payload_bytes=min_payload_bytes,
            log_level="INFO",
        )

    return _make_config
