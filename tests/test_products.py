"""Tests for raw product record parsing."""

import pytest

from nutrition_normalizer.domain.products import RawNutritionRecord
from tests.conftest import k_cup_product


def test_per_100g_converts_sodium_to_milligrams() -> None:
    record = RawNutritionRecord.model_validate(k_cup_product())

    per_100g = record.per_100g()

    assert per_100g.calories == 400
    assert per_100g.protein == 8.47
    assert per_100g.sodium == pytest.approx(508)
    assert record.per_serving().sodium == pytest.approx(1200)


def test_missing_nutrients_stay_missing() -> None:
    record = RawNutritionRecord(nutriments={"energy-kcal_100g": 50, "fat_100g": 0})

    per_100g = record.per_100g()

    assert per_100g.fat == 0
    assert per_100g.fiber is None
    assert per_100g.sodium is None
    assert record.per_serving().is_empty()


def test_calories_fall_back_to_kilojoules() -> None:
    record = RawNutritionRecord(
        nutriments={"energy_100g": 1674, "energy_serving": 251}
    )

    assert record.per_100g().calories == 400
    assert record.per_serving().calories == 60


def test_calories_fall_back_to_energy_value() -> None:
    record = RawNutritionRecord(nutriments={"energy_value": 120})

    assert record.per_100g().calories == 120
    assert record.per_serving().calories is None


def test_malformed_values_are_ignored() -> None:
    record = RawNutritionRecord(
        nutriments={
            "energy-kcal_100g": "250",
            "proteins_100g": "n/a",
            "fat_100g": -3,
            "sugars_100g": True,
            "energy-kcal_unit": "kcal",
        }
    )

    per_100g = record.per_100g()

    assert per_100g.calories == 250
    assert per_100g.protein is None
    assert per_100g.fat is None
    assert per_100g.sugar is None


def test_serving_text_and_quantity() -> None:
    record = RawNutritionRecord.model_validate(
        {"quantity": "500 g", "serving_quantity": 30, "unknown_field": 1}
    )

    assert record.serving_text() == ""
    assert RawNutritionRecord(serving_size=" 15g ").serving_text() == "15g"
    assert record.serving_quantity_grams() == 30
    assert RawNutritionRecord(serving_quantity="abc").serving_quantity_grams() is None
    assert RawNutritionRecord(serving_quantity="0").serving_quantity_grams() is None
    assert RawNutritionRecord().name == ""
