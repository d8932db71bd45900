"""Recipe flattening transform.

This module maps heterogeneous recipe records onto canonical
single-ingredient rows. It never raises: malformed records and
ingredients are skipped or filled with defaults.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from core.types import FlatRow
from transforms.field_lookup import first_flag, first_quantity, first_sequence, first_text

OUTPUT_ID_KEYS = ("OutputObject", "OutputItem", "OutputItemId", "output", "UniqueName", "ItemId")
OUTPUT_QTY_KEYS = ("OutputAmount", "OutputQuantity", "OutputQty", "quantity", "Amount")
STATION_KEYS = ("CraftingCategory", "Station", "station", "CraftingStation")
FOCUS_KEYS = ("FocusBased", "focusBased", "RequiresFocus", "UsesFocus")
INGREDIENT_LIST_KEYS = ("Ingredients", "ingredients", "EntryRequirements", "CraftResources")
INGREDIENT_ID_KEYS = ("Object", "Item", "ItemId", "item", "UniqueName")
INGREDIENT_QTY_KEYS = ("Count", "Amount", "count", "amount", "Quantity")


def normalize_recipes(raw_records: Iterable[Any]) -> list[FlatRow]:
    """Flatten raw recipe records into canonical rows.

    Args:
        raw_records: Parsed dump records of unknown shape.

    Returns:
        One row per (recipe, ingredient) pair, in input order.
        Recipes without usable ingredients yield a single row with
        an empty input id and zero input quantity. Records without
        an output id are dropped.
    """
    rows: list[FlatRow] = []
    for record in raw_records:
        if isinstance(record, Mapping):
            rows.extend(_flatten_record(record))
    return rows


def _flatten_record(record: Mapping[str, Any]) -> list[FlatRow]:
    output_id = first_text(record, OUTPUT_ID_KEYS)
    if not output_id:
        return []
    output_qty = first_quantity(record, OUTPUT_QTY_KEYS, default=1, minimum=1)
    station = first_text(record, STATION_KEYS)
    focus_based = first_flag(record, FOCUS_KEYS)
    ingredients = _extract_ingredients(record)
    if not ingredients:
        return [FlatRow(output_id, output_qty, "", 0, station, focus_based)]
    return [
        FlatRow(output_id, output_qty, input_id, input_qty, station, focus_based)
        for input_id, input_qty in ingredients
    ]


def _extract_ingredients(record: Mapping[str, Any]) -> list[tuple[str, int]]:
    """Return (id, quantity) pairs for ingredients that carry an id."""
    ingredients: list[tuple[str, int]] = []
    for ingredient in first_sequence(record, INGREDIENT_LIST_KEYS):
        if not isinstance(ingredient, Mapping):
            continue
        input_id = first_text(ingredient, INGREDIENT_ID_KEYS)
        if not input_id:
            continue
        input_qty = first_quantity(ingredient, INGREDIENT_QTY_KEYS, default=1, minimum=0)
        ingredients.append((input_id, input_qty))
    return ingredients
