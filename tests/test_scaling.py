"""Tests for nutrient scaling."""

import pytest

from nutrition_normalizer.domain.nutrition import NutrientVector
from nutrition_normalizer.services.scaling import scale


def test_scale_multiplies_every_field() -> None:
    base = NutrientVector(
        calories=400, protein=10, carbs=60, fat=15, fiber=5, sugar=30, sodium=500
    )

    scaled = scale(base, 0.15)

    assert scaled.calories == pytest.approx(60)
    assert scaled.protein == pytest.approx(1.5)
    assert scaled.carbs == pytest.approx(9)
    assert scaled.fat == pytest.approx(2.25)
    assert scaled.fiber == pytest.approx(0.75)
    assert scaled.sugar == pytest.approx(4.5)
    assert scaled.sodium == pytest.approx(75)


def test_scale_keeps_missing_fields_missing() -> None:
    base = NutrientVector(calories=200, protein=5, carbs=30, fat=8)

    scaled = scale(base, 2)

    assert scaled.calories == 400
    assert scaled.fiber is None
    assert scaled.sugar is None
    assert scaled.sodium is None


def test_scale_keeps_true_zero() -> None:
    scaled = scale(NutrientVector(calories=0, fat=0), 3)

    assert scaled.calories == 0
    assert scaled.fat == 0
    assert scaled.protein is None
