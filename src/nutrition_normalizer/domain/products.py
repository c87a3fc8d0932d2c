"""Models for raw product records from Open Food Facts."""

import math
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from nutrition_normalizer.domain.nutrition import (
    NormalizedNutrition,
    NutrientVector,
    ServingOption,
)

_KJ_PER_KCAL = 4.184
_MG_PER_G = 1000.0


class RawNutritionRecord(BaseModel):
    """Untrusted product record as delivered by the product database."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    product_name: str | None = None
    brands: str | None = None
    serving_size: str | None = None
    serving_quantity: str | float | None = None
    # Whole-package size such as "454 g"; never read as a serving weight.
    quantity: str | None = None
    nutriments: dict[str, object] = Field(default_factory=dict)

    @property
    def name(self) -> str:
        """Product name, or an empty string when missing."""
        return self.product_name or ""

    def nutrient(self, key: str) -> float | None:
        """Return a numeric nutriment value, or None if missing or malformed."""
        value = _to_float(self.nutriments.get(key))
        if value is None or value < 0:
            return None
        return value

    def per_100g(self) -> NutrientVector:
        """Nutrients reported per 100 g/ml."""
        return self._vector("100g")

    def per_serving(self) -> NutrientVector:
        """Nutrients reported for one labeled serving."""
        return self._vector("serving")

    def serving_text(self) -> str:
        """Free-form serving string; the package quantity is never a serving."""
        return (self.serving_size or "").strip()

    def serving_quantity_grams(self) -> float | None:
        """Numeric serving quantity, if it is a finite positive number."""
        value = _to_float(self.serving_quantity)
        if value is None or value <= 0:
            return None
        return value

    def _vector(self, basis: str) -> NutrientVector:
        sodium = self.nutrient(f"sodium_{basis}")
        return NutrientVector(
            calories=self._calories(basis),
            protein=self.nutrient(f"proteins_{basis}"),
            carbs=self.nutrient(f"carbohydrates_{basis}"),
            fat=self.nutrient(f"fat_{basis}"),
            fiber=self.nutrient(f"fiber_{basis}"),
            sugar=self.nutrient(f"sugars_{basis}"),
            sodium=sodium * _MG_PER_G if sodium is not None else None,
        )

    def _calories(self, basis: str) -> float | None:
        kcal = self.nutrient(f"energy-kcal_{basis}")
        if kcal is not None:
            return kcal
        kilojoules = self.nutrient(f"energy_{basis}")
        if kilojoules is not None:
            return float(round(kilojoules / _KJ_PER_KCAL))
        if basis == "100g":
            return self.nutrient("energy_value")
        return None


def _to_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(result):
        return None
    return result


@dataclass(frozen=True)
class ProductNutrition:
    """Normalized nutrition for a looked-up product, ready for display."""

    barcode: str
    product_name: str
    brand: str | None
    nutrition: NormalizedNutrition
    serving_options: list[ServingOption]
