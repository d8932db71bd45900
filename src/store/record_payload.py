"""Shared serialization for FlatRow payloads.

This module centralizes FlatRow JSON and CSV field rendering.
It is reused by the artifact writer and by round-trip readers.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.types import FlatRow


def flat_row_to_payload(row: FlatRow) -> dict[str, object]:
    """Serialize FlatRow into its camelCase JSON payload.

    Args:
        row: Flat row instance.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "outputId": row.output_id,
        "outputQty": row.output_qty,
        "inputId": row.input_id,
        "inputQty": row.input_qty,
        "station": row.station,
        "focusBased": row.focus_based,
    }


def flat_row_from_payload(payload: Mapping[str, Any]) -> FlatRow:
    """Deserialize a camelCase JSON payload into FlatRow.

    Args:
        payload: Serialized row payload.

    Returns:
        Parsed FlatRow.
    """
    return FlatRow(
        output_id=str(payload["outputId"]),
        output_qty=int(payload["outputQty"]),
        input_id=str(payload.get("inputId", "")),
        input_qty=int(payload.get("inputQty", 0)),
        station=str(payload.get("station", "")),
        focus_based=bool(payload.get("focusBased", False)),
    )


def flat_row_to_csv_fields(row: FlatRow) -> list[str]:
    """Render FlatRow fields in CSV header order."""
    return [
        row.output_id,
        str(row.output_qty),
        row.input_id,
        str(row.input_qty),
        row.station,
        "true" if row.focus_based else "false",
    ]


def flat_row_from_csv_fields(fields: list[str]) -> FlatRow:
    """Parse CSV fields in header order back into FlatRow."""
    output_id, output_qty, input_id, input_qty, station, focus_based = fields
    return FlatRow(
        output_id=output_id,
        output_qty=int(output_qty),
        input_id=input_id,
        input_qty=int(input_qty),
        station=station,
        focus_based=focus_based == "true",
    )
