"""Nutrition domain models."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class NutrientVector:
    """Nutrient values on a single basis (100 g or one serving).

    Every field is optional: ``None`` means the source never reported the
    value, which is not the same as a reported zero. Sodium is in milligrams.
    """

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None

    def is_empty(self) -> bool:
        """Return True when no nutrient is present."""
        return all(value is None for value in asdict(self).values())

    def as_dict(self) -> dict[str, float | None]:
        """Return the vector as a plain dict."""
        return asdict(self)


@dataclass(frozen=True)
class ServingInfo:
    """Serving weight the engine decided to trust."""

    grams: float | None
    display_label: str
    was_corrected: bool
    correction_reason: str | None = None


@dataclass(frozen=True)
class NormalizedNutrition:
    """Validated nutrition for a product on both bases."""

    per_100g: NutrientVector
    per_serving: NutrientVector
    serving_info: ServingInfo
    is_serving_data_trusted: bool


@dataclass(frozen=True)
class ServingOption:
    """Single choice for a serving-size picker."""

    grams: float
    label: str
    is_default: bool


@dataclass(frozen=True)
class PlausibilityInput:
    """Reported figures to cross-check for a single product."""

    calories_per_serving: float | None
    calories_per_100g: float | None
    serving_grams: float | None
    product_name: str | None = None


@dataclass(frozen=True)
class PlausibilityResult:
    """Outcome of a plausibility check."""

    is_plausible: bool
    reason: str | None = None
