"""Raw recipes dump parsing.

This module turns dump text into the top-level record array.
It also reads previously saved dumps from local disk.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.errors import InvalidPayloadError


def parse_recipe_dump(text: str, source: str) -> list[Any]:
    """Parse dump text and require a top-level JSON array.

    Args:
        text: Raw dump text.
        source: URL or path used in error messages.

    Returns:
        Parsed records, unvalidated beyond being a list.

    Raises:
        InvalidPayloadError: If text is not JSON or not an array.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise InvalidPayloadError(
            f"Failed to parse recipes dump from {source}: {error.msg} "
            f"at line {error.lineno} column {error.colno}."
        ) from error
    if not isinstance(payload, list):
        raise InvalidPayloadError(
            f"Invalid recipes dump from {source}: expected a top-level JSON array, "
            f"got {type(payload).__name__}."
        )
    return payload


def read_local_dump(path: Path) -> list[Any]:
    """Read and parse a recipes dump saved on local disk.

    Args:
        path: Path to a raw ``recipes.json`` file.

    Returns:
        Parsed records.

    Raises:
        InvalidPayloadError: If the file is missing, unreadable, or not an array.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise InvalidPayloadError(
            f"Failed to read recipes dump at {path}: {error.strerror or error}. "
            "Provide an existing raw dump file."
        ) from error
    return parse_recipe_dump(text, str(path))
