"""Proportional scaling of nutrient vectors."""

from dataclasses import fields

from nutrition_normalizer.domain.nutrition import NutrientVector


def scale(vector: NutrientVector, factor: float) -> NutrientVector:
    """Multiply every present nutrient by ``factor``; absent ones stay absent."""
    values: dict[str, float | None] = {}
    for field in fields(vector):
        value = getattr(vector, field.name)
        values[field.name] = value * factor if value is not None else None
    return NutrientVector(**values)
