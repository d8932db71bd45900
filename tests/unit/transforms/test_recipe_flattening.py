"""Unit tests for the recipe flattening transform."""

from __future__ import annotations

import json

from core.types import FlatRow
from tests.fixture_paths import read_fixture_text
from transforms.recipe_flattening import normalize_recipes


def test_normalize_recipes_expands_one_row_per_ingredient() -> None:
    """A bag with two ingredients should produce two rows."""
    raw = [
        {
            "OutputObject": "T4_BAG",
            "Ingredients": [
                {"Item": "T4_LEATHER", "Count": 2},
                {"Item": "T4_CLOTH", "Count": 1},
            ],
        }
    ]

    rows = normalize_recipes(raw)

    assert rows == [
        FlatRow("T4_BAG", 1, "T4_LEATHER", 2, "", False),
        FlatRow("T4_BAG", 1, "T4_CLOTH", 1, "", False),
    ]


def test_normalize_recipes_shares_parent_fields_across_rows() -> None:
    """Rows from one recipe should share output, station, and focus."""
    raw = [
        {
            "OutputItem": "T6_SWORD",
            "OutputQuantity": 2,
            "Station": "warrior_forge",
            "FocusBased": True,
            "EntryRequirements": [
                {"ItemId": "T6_METALBAR", "Amount": 16},
                {"ItemId": "T6_LEATHER", "Amount": 8},
                {"ItemId": "T6_ARTIFACT", "Amount": 1},
            ],
        }
    ]

    rows = normalize_recipes(raw)

    assert len(rows) == 3
    assert {(row.output_id, row.output_qty, row.station, row.focus_based) for row in rows} == {
        ("T6_SWORD", 2, "warrior_forge", True)
    }
    assert [(row.input_id, row.input_qty) for row in rows] == [
        ("T6_METALBAR", 16),
        ("T6_LEATHER", 8),
        ("T6_ARTIFACT", 1),
    ]


def test_normalize_recipes_emits_single_row_without_ingredients() -> None:
    """Recipes without ingredients should emit one empty-input row."""
    rows = normalize_recipes([{"UniqueName": "T2_PLANKS"}, {"ItemId": "T3_ORE", "Ingredients": []}])

    assert rows == [
        FlatRow("T2_PLANKS", 1, "", 0, "", False),
        FlatRow("T3_ORE", 1, "", 0, "", False),
    ]


def test_normalize_recipes_drops_records_without_output_id() -> None:
    """Records missing every output alias should not appear."""
    raw = [
        {"CraftingCategory": "orphan", "Ingredients": [{"Item": "T3_ORE"}]},
        {"OutputObject": "   "},
        {"OutputObject": None},
        "not-a-record",
        None,
        {"OutputObject": "T4_BAG"},
    ]

    rows = normalize_recipes(raw)

    assert [row.output_id for row in rows] == ["T4_BAG"]
    assert all(row.output_id for row in rows)


def test_normalize_recipes_prefers_first_output_alias() -> None:
    """OutputObject should beat OutputItem when both are present."""
    rows = normalize_recipes([{"OutputItem": "B", "OutputObject": "A"}])

    assert rows[0].output_id == "A"


def test_normalize_recipes_defaults_ingredient_quantity() -> None:
    """Missing or non-numeric ingredient quantities should become 1."""
    raw = [
        {
            "OutputObject": "T4_BAG",
            "Ingredients": [
                {"Item": "T4_LEATHER"},
                {"Item": "T4_CLOTH", "Amount": "not-a-number"},
            ],
        }
    ]

    rows = normalize_recipes(raw)

    assert [row.input_qty for row in rows] == [1, 1]


def test_normalize_recipes_skips_ingredients_without_id() -> None:
    """Ingredients lacking an id are dropped, leaving the rest."""
    raw = [
        {
            "OutputObject": "T4_BAG",
            "Ingredients": [{"Count": 4}, "junk", {"Item": "T4_CLOTH", "Count": 1}],
        },
        {"OutputObject": "T5_BAG", "Ingredients": [{"Count": 4}]},
    ]

    rows = normalize_recipes(raw)

    assert rows == [
        FlatRow("T4_BAG", 1, "T4_CLOTH", 1, "", False),
        FlatRow("T5_BAG", 1, "", 0, "", False),
    ]


def test_normalize_recipes_handles_fixture_dump() -> None:
    """Mixed-vintage fixture should flatten into five rows."""
    raw = json.loads(read_fixture_text("raw/recipes_sample.json"))

    rows = normalize_recipes(raw)

    assert len(rows) == 5
    potion_rows = [row for row in rows if row.output_id == "T5_POTION_HEAL"]
    assert [(row.input_id, row.input_qty) for row in potion_rows] == [
        ("T5_AGARIC", 12),
        ("T5_EGG", 1),
    ]
    assert potion_rows[0].output_qty == 5
    assert potion_rows[0].focus_based is True
