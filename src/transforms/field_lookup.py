"""Ordered-alias field lookup over loosely shaped records.

Dump vintages name the same field differently. Each lookup walks a
fixed alias list in priority order and takes the first key that is
present with a non-null value. Coercion failures fall back to the
caller's default instead of raising.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Sequence, TypeVar

DefaultT = TypeVar("DefaultT")

_TRUE_STRINGS = frozenset({"true", "1", "yes", "y"})


def first_present(
    record: Mapping[str, Any],
    keys: Sequence[str],
    default: DefaultT,
) -> Any | DefaultT:
    """Return the value of the first present, non-null alias.

    Args:
        record: Source record.
        keys: Aliases in priority order.
        default: Value returned when no alias is present.

    Returns:
        The first non-null aliased value, or ``default``.
    """
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


def first_text(record: Mapping[str, Any], keys: Sequence[str], default: str = "") -> str:
    """Return the first aliased value as stripped text."""
    value = first_present(record, keys, None)
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def first_quantity(
    record: Mapping[str, Any],
    keys: Sequence[str],
    default: int,
    minimum: int = 0,
) -> int:
    """Return the first aliased value coerced to an integer quantity.

    Args:
        record: Source record.
        keys: Aliases in priority order.
        default: Fallback for missing or uncoercible values.
        minimum: Smallest accepted quantity, smaller values fall back.

    Returns:
        Integer quantity.
    """
    quantity = coerce_quantity(first_present(record, keys, None))
    if quantity is None or quantity < minimum:
        return default
    return quantity


def first_flag(record: Mapping[str, Any], keys: Sequence[str], default: bool = False) -> bool:
    """Return the first aliased value coerced to a boolean."""
    value = first_present(record, keys, None)
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return default


def first_sequence(record: Mapping[str, Any], keys: Sequence[str]) -> list[Any]:
    """Return the first aliased value as a list, or an empty list."""
    value = first_present(record, keys, None)
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def coerce_quantity(value: Any) -> int | None:
    """Coerce numbers and numeric strings to int, None when impossible."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return None
