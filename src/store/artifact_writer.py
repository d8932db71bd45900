"""Artifact persistence for sync runs.

This module writes the raw dump, flattened JSON, and flattened CSV
into the data directory, overwriting any previous run.
"""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any, Sequence

from core.constants import (
    FLAT_CSV_FILE_NAME,
    FLAT_CSV_HEADER,
    FLAT_JSON_FILE_NAME,
    RAW_DUMP_FILE_NAME,
)
from core.errors import RecipeStoreError
from core.types import ArtifactPaths, FlatRow
from store.record_payload import flat_row_to_csv_fields, flat_row_to_payload


def write_artifacts(
    data_dir: Path,
    raw_records: Sequence[Any],
    rows: Sequence[FlatRow],
) -> ArtifactPaths:
    """Write all three artifacts into a data directory.

    Args:
        data_dir: Destination directory, created when missing.
        raw_records: Parsed raw dump records.
        rows: Flattened rows.

    Returns:
        Paths of the written files.

    Raises:
        RecipeStoreError: If the directory or a file cannot be written.
    """
    paths = ArtifactPaths(
        raw_path=data_dir / RAW_DUMP_FILE_NAME,
        flat_json_path=data_dir / FLAT_JSON_FILE_NAME,
        flat_csv_path=data_dir / FLAT_CSV_FILE_NAME,
    )
    _ensure_directory(data_dir)
    write_raw_dump(paths.raw_path, raw_records)
    write_flat_json(paths.flat_json_path, rows)
    write_flat_csv(paths.flat_csv_path, rows)
    return paths


def write_raw_dump(path: Path, raw_records: Sequence[Any]) -> None:
    """Write raw records as a pretty-printed JSON array."""
    _write_text(path, _render_json(list(raw_records)))


def write_flat_json(path: Path, rows: Sequence[FlatRow]) -> None:
    """Write flat rows as a pretty-printed JSON array."""
    _write_text(path, _render_json([flat_row_to_payload(row) for row in rows]))


def write_flat_csv(path: Path, rows: Sequence[FlatRow]) -> None:
    """Write flat rows as CSV with the fixed six-column header."""
    _write_text(path, render_flat_csv(rows))


def render_flat_csv(rows: Sequence[FlatRow]) -> str:
    """Render flat rows as CSV text.

    Fields containing a comma, double quote, or line break are quoted
    and inner quotes doubled.

    Args:
        rows: Flat rows to render.

    Returns:
        CSV text with header and ``\\n`` line endings.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(FLAT_CSV_HEADER)
    for row in rows:
        writer.writerow(flat_row_to_csv_fields(row))
    return buffer.getvalue()


def _render_json(payload: list[Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def _ensure_directory(data_dir: Path) -> None:
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise RecipeStoreError(
            f"Failed to create data directory {data_dir}: {error.strerror or error}. "
            "Choose a writable --data-dir."
        ) from error


def _write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as error:
        raise RecipeStoreError(
            f"Failed to write {path}: {error.strerror or error}."
        ) from error
