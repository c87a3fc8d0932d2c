"""Thresholds used when judging and correcting serving data.

These encode domain judgment calls rather than physical facts, so they are
kept together here and bundled into :class:`ServingThresholds` for callers
that need to tune them.
"""

from dataclasses import dataclass

# A Big Mac is ~550 kcal and restaurant entrees rarely exceed 800 kcal, so a
# larger "serving" is almost always the whole box.
MAX_SERVING_CALORIES = 800.0

# Packaged-food servings above this weight are usually the full package.
MAX_SERVING_GRAMS = 500.0

# Reported vs. expected per-serving calories may differ by this factor before
# the figures are considered inconsistent.
MAX_CALORIE_DIVERGENCE_RATIO = 3.0

# Divergence below this many kcal is label rounding, not a data entry error.
MIN_CALORIE_DIVERGENCE_KCAL = 50.0

# Ceiling on per-serving / per-100g calories for multi-pack products.
MAX_MULTI_PACK_RATIO = 3.0

POD_SERVING_GRAMS = 15.0
BAR_SERVING_GRAMS = 40.0
PACKET_SERVING_GRAMS = 28.0

# Calorie-density estimate: aim for a serving of about this many kcal.
TARGET_SERVING_CALORIES = 150.0
MIN_ESTIMATED_GRAMS = 10.0
MAX_ESTIMATED_GRAMS = 200.0

# Used when nothing is known about the product's energy density.
DEFAULT_ESTIMATED_GRAMS = 30.0


@dataclass(frozen=True)
class ServingThresholds:
    """Bundle of thresholds passed explicitly to the engine."""

    max_serving_calories: float = MAX_SERVING_CALORIES
    max_serving_grams: float = MAX_SERVING_GRAMS
    max_calorie_divergence_ratio: float = MAX_CALORIE_DIVERGENCE_RATIO
    min_calorie_divergence_kcal: float = MIN_CALORIE_DIVERGENCE_KCAL
    max_multi_pack_ratio: float = MAX_MULTI_PACK_RATIO
    pod_serving_grams: float = POD_SERVING_GRAMS
    bar_serving_grams: float = BAR_SERVING_GRAMS
    packet_serving_grams: float = PACKET_SERVING_GRAMS
    target_serving_calories: float = TARGET_SERVING_CALORIES
    min_estimated_grams: float = MIN_ESTIMATED_GRAMS
    max_estimated_grams: float = MAX_ESTIMATED_GRAMS
    default_estimated_grams: float = DEFAULT_ESTIMATED_GRAMS


DEFAULT_THRESHOLDS = ServingThresholds()
