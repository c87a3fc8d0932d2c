"""Tests for serving option building."""

from nutrition_normalizer.domain.nutrition import ServingInfo, ServingOption
from nutrition_normalizer.services.serving_options import build_options


def _defaults(options: list[ServingOption]) -> list[ServingOption]:
    return [option for option in options if option.is_default]


def _assert_well_formed(options: list[ServingOption]) -> None:
    grams = [option.grams for option in options]
    assert len(grams) == len(set(grams))
    assert len(_defaults(options)) == 1
    assert options[0].is_default


def test_includes_product_serving_and_common_sizes() -> None:
    options = build_options(
        ServingInfo(grams=15, display_label="1 pod (15g)", was_corrected=False),
        "Hot Chocolate Pods",
    )

    _assert_well_formed(options)
    assert _defaults(options)[0].grams == 15
    assert _defaults(options)[0].label == "1 pod (15g)"
    grams = {option.grams for option in options}
    assert {4, 12, 15, 60, 100, 240} <= grams


def test_orders_non_default_options_by_grams() -> None:
    options = build_options(
        ServingInfo(grams=150, display_label="150g", was_corrected=False),
        "Greek Yogurt",
    )

    assert [option.grams for option in options] == [150, 4, 12, 60, 100, 240]


def test_deduplicates_matching_household_measure() -> None:
    options = build_options(
        ServingInfo(grams=4, display_label="1 tsp (4g)", was_corrected=False),
        "Sugar",
    )

    _assert_well_formed(options)
    assert len([option for option in options if option.grams == 4]) == 1
    assert _defaults(options)[0].grams == 4


def test_100g_is_default_without_product_serving() -> None:
    options = build_options(
        ServingInfo(grams=None, display_label="100g", was_corrected=False),
        "Unknown Item",
    )

    _assert_well_formed(options)
    assert _defaults(options)[0].grams == 100
    assert _defaults(options)[0].label == "100g"


def test_product_serving_of_100g_stays_single_default() -> None:
    options = build_options(
        ServingInfo(grams=100, display_label="100g", was_corrected=False),
        "Generic Cereal",
    )

    _assert_well_formed(options)
    assert len([option for option in options if option.grams == 100]) == 1


def test_adds_unit_option_for_bars() -> None:
    options = build_options(
        ServingInfo(grams=100, display_label="100g", was_corrected=False),
        "Protein Bar",
    )

    _assert_well_formed(options)
    assert ServingOption(grams=40, label="1 bar (40g)", is_default=False) in options


def test_rounds_gram_values() -> None:
    options = build_options(
        ServingInfo(grams=33.333, display_label="1/3 cup", was_corrected=False),
        None,
    )

    assert options[0].grams == 33.3
