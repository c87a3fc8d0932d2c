"""Pydantic response models for the nutrition API."""

from pydantic import BaseModel

from nutrition_normalizer.domain.nutrition import (
    NormalizedNutrition,
    NutrientVector,
    ServingOption,
)
from nutrition_normalizer.domain.products import ProductNutrition


class NutrientsPayload(BaseModel):
    """Nutrient values on one basis; missing values are null."""

    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None

    @classmethod
    def from_vector(cls, vector: NutrientVector) -> "NutrientsPayload":
        return cls(**vector.as_dict())


class ServingInfoPayload(BaseModel):
    """Serving weight chosen by the normalizer."""

    grams: float | None
    display_label: str
    was_corrected: bool
    correction_reason: str | None = None


class ServingOptionPayload(BaseModel):
    """Single serving picker choice."""

    grams: float
    label: str
    is_default: bool

    @classmethod
    def from_option(cls, option: ServingOption) -> "ServingOptionPayload":
        return cls(grams=option.grams, label=option.label, is_default=option.is_default)


class NutritionResponse(BaseModel):
    """Normalized nutrition with serving options."""

    barcode: str | None = None
    product_name: str | None = None
    brand: str | None = None
    per_100g: NutrientsPayload
    per_serving: NutrientsPayload
    serving_info: ServingInfoPayload
    is_serving_data_trusted: bool
    serving_options: list[ServingOptionPayload]

    @classmethod
    def from_nutrition(
        cls,
        nutrition: NormalizedNutrition,
        options: list[ServingOption],
        *,
        barcode: str | None = None,
        product_name: str | None = None,
        brand: str | None = None,
    ) -> "NutritionResponse":
        info = nutrition.serving_info
        return cls(
            barcode=barcode,
            product_name=product_name,
            brand=brand,
            per_100g=NutrientsPayload.from_vector(nutrition.per_100g),
            per_serving=NutrientsPayload.from_vector(nutrition.per_serving),
            serving_info=ServingInfoPayload(
                grams=info.grams,
                display_label=info.display_label,
                was_corrected=info.was_corrected,
                correction_reason=info.correction_reason,
            ),
            is_serving_data_trusted=nutrition.is_serving_data_trusted,
            serving_options=[ServingOptionPayload.from_option(o) for o in options],
        )

    @classmethod
    def from_product(cls, product: ProductNutrition) -> "NutritionResponse":
        return cls.from_nutrition(
            product.nutrition,
            product.serving_options,
            barcode=product.barcode,
            product_name=product.product_name,
            brand=product.brand,
        )
