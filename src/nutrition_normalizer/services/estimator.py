"""Heuristic serving-size estimation."""

import math

from nutrition_normalizer.domain.thresholds import DEFAULT_THRESHOLDS, ServingThresholds
from nutrition_normalizer.services.multipack import (
    is_bar_product,
    is_packet_product,
    is_pod_product,
)


def estimate_reasonable_grams(
    product_name: str | None,
    calories_per_100g: float | None,
    thresholds: ServingThresholds = DEFAULT_THRESHOLDS,
) -> float:
    """Estimate a single-serving weight when no reported weight is trustworthy.

    Name patterns win (pods, bars, packets). Otherwise the estimate targets a
    fixed calorie amount per serving, so denser foods get smaller servings.
    The result is clamped and never increases as calorie density rises.
    """
    if is_pod_product(product_name):
        return thresholds.pod_serving_grams
    if is_bar_product(product_name):
        return thresholds.bar_serving_grams
    if is_packet_product(product_name):
        return thresholds.packet_serving_grams

    if calories_per_100g is None or math.isnan(calories_per_100g):
        return thresholds.default_estimated_grams
    if calories_per_100g <= 0:
        return thresholds.max_estimated_grams

    estimated = float(
        round(thresholds.target_serving_calories / calories_per_100g * 100.0)
    )
    return max(
        thresholds.min_estimated_grams,
        min(thresholds.max_estimated_grams, estimated),
    )
