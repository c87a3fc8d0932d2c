"""Serving-size choices for a serving picker."""

from nutrition_normalizer.domain.nutrition import ServingInfo, ServingOption
from nutrition_normalizer.domain.thresholds import DEFAULT_THRESHOLDS, ServingThresholds
from nutrition_normalizer.services.multipack import is_bar_product, is_pod_product

HOUSEHOLD_MEASURES: tuple[tuple[str, float], ...] = (
    ("1 tsp (4g)", 4.0),
    ("1 tbsp (12g)", 12.0),
    ("¼ cup (60g)", 60.0),
    ("1 cup (240g)", 240.0),
)

REFERENCE_LABEL = "100g"
REFERENCE_GRAMS = 100.0


def build_options(
    serving_info: ServingInfo,
    product_name: str | None,
    thresholds: ServingThresholds = DEFAULT_THRESHOLDS,
) -> list[ServingOption]:
    """Build a deduplicated, ranked list of serving choices.

    The product serving is the default when known; otherwise the 100g
    reference is. Each gram value (rounded to 0.1 g) appears once, and the
    default option is listed first followed by the rest in ascending grams.
    """
    options: list[ServingOption] = []
    used_grams: set[float] = set()

    def add(label: str, grams: float, is_default: bool) -> None:
        rounded = round(grams, 1)
        if rounded <= 0 or rounded in used_grams:
            return
        used_grams.add(rounded)
        options.append(ServingOption(grams=rounded, label=label, is_default=is_default))

    serving_grams = serving_info.grams
    has_serving = serving_grams is not None and round(serving_grams, 1) > 0
    if serving_grams is not None and has_serving:
        add(serving_info.display_label, serving_grams, True)

    unit_option = _unit_option(product_name, thresholds)
    if unit_option is not None:
        add(*unit_option, False)

    for label, grams in HOUSEHOLD_MEASURES:
        add(label, grams, False)

    add(REFERENCE_LABEL, REFERENCE_GRAMS, not has_serving)

    return sorted(options, key=lambda option: (not option.is_default, option.grams))


def _unit_option(
    product_name: str | None, thresholds: ServingThresholds
) -> tuple[str, float] | None:
    if is_pod_product(product_name):
        grams = thresholds.pod_serving_grams
        return f"1 pod ({grams:g}g)", grams
    if is_bar_product(product_name):
        grams = thresholds.bar_serving_grams
        return f"1 bar ({grams:g}g)", grams
    return None
