"""Plausibility checks for reported per-serving nutrition."""

from nutrition_normalizer.domain.nutrition import PlausibilityInput, PlausibilityResult
from nutrition_normalizer.domain.thresholds import DEFAULT_THRESHOLDS, ServingThresholds
from nutrition_normalizer.services.multipack import is_multi_pack

_PLAUSIBLE = PlausibilityResult(is_plausible=True)


def check_plausibility(
    data: PlausibilityInput, thresholds: ServingThresholds = DEFAULT_THRESHOLDS
) -> PlausibilityResult:
    """Decide whether reported per-serving calories can be trusted.

    Rules run in order and the first failing one determines the reason:

    1. per-serving calories above the absolute calorie ceiling
    2. a serving weight above the absolute gram cap
    3. per-serving calories several-fold away from what the per-100g figure
       and serving weight imply
    4. a multi-pack product whose per-serving / per-100g ratio exceeds the
       multi-pack ceiling

    Rules whose inputs are missing are skipped; with no per-serving calories
    there is nothing to distrust.
    """
    calories = data.calories_per_serving
    if calories is None:
        return _PLAUSIBLE

    if calories > thresholds.max_serving_calories:
        return PlausibilityResult(
            is_plausible=False,
            reason=(
                f"{round(calories)} cal per serving seems too high; "
                "this may be the total for the entire package."
            ),
        )

    grams = data.serving_grams
    if grams is None:
        return _PLAUSIBLE

    if grams > thresholds.max_serving_grams:
        return PlausibilityResult(
            is_plausible=False,
            reason=(
                f"Serving size of {grams:g}g is unusually large; "
                "this may be the full package weight."
            ),
        )

    per_100g = data.calories_per_100g
    if per_100g is None or per_100g <= 0:
        return _PLAUSIBLE

    expected = per_100g * grams / 100.0
    if _diverges(calories, expected, thresholds):
        return PlausibilityResult(
            is_plausible=False,
            reason=(
                f"{round(calories)} cal per serving does not match the "
                f"{round(expected)} cal implied by {grams:g}g at "
                f"{round(per_100g)} cal per 100g."
            ),
        )

    ratio = calories / per_100g
    if ratio > thresholds.max_multi_pack_ratio and is_multi_pack(data.product_name):
        return PlausibilityResult(
            is_plausible=False,
            reason=(
                "This appears to be a multi-pack product; showing nutrition "
                "per individual serving instead of the full box."
            ),
        )

    return _PLAUSIBLE


def check_serving_plausibility(
    *,
    calories_per_serving: float | None,
    calories_per_100g: float | None,
    serving_grams: float | None,
    product_name: str | None = None,
    thresholds: ServingThresholds = DEFAULT_THRESHOLDS,
) -> PlausibilityResult:
    """Keyword-only wrapper around :func:`check_plausibility`."""
    return check_plausibility(
        PlausibilityInput(
            calories_per_serving=calories_per_serving,
            calories_per_100g=calories_per_100g,
            serving_grams=serving_grams,
            product_name=product_name,
        ),
        thresholds,
    )


def _diverges(reported: float, expected: float, thresholds: ServingThresholds) -> bool:
    if abs(reported - expected) <= thresholds.min_calorie_divergence_kcal:
        return False
    low, high = sorted((reported, expected))
    if low <= 0:
        return True
    return high / low > thresholds.max_calorie_divergence_ratio
