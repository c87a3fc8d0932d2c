"""Serving validation and nutrition normalization."""

import logging
from dataclasses import dataclass

from nutrition_normalizer.domain.errors import InsufficientNutritionDataError
from nutrition_normalizer.domain.nutrition import (
    NormalizedNutrition,
    NutrientVector,
    PlausibilityInput,
    ServingInfo,
)
from nutrition_normalizer.domain.products import RawNutritionRecord
from nutrition_normalizer.domain.thresholds import DEFAULT_THRESHOLDS, ServingThresholds
from nutrition_normalizer.services.estimator import estimate_reasonable_grams
from nutrition_normalizer.services.plausibility import check_plausibility
from nutrition_normalizer.services.scaling import scale
from nutrition_normalizer.services.serving_parser import parse_serving_grams

_logger = logging.getLogger(__name__)

_FULL_PACKAGE_REASON = "Original serving size appeared to be the full package weight."
_NO_BASIS_REASON = "No nutrition data reported per 100g or per serving."


@dataclass(frozen=True)
class NormalizationService:
    """Validates reported serving data and derives trustworthy nutrition."""

    thresholds: ServingThresholds = DEFAULT_THRESHOLDS
    debug: bool = False

    def normalize(self, record: RawNutritionRecord) -> NormalizedNutrition:
        """Normalize a raw product record.

        Per-100g values are the source of truth and are returned unchanged.
        Reported per-serving values are kept only when they pass the
        plausibility check; otherwise they are recomputed from per-100g data
        with a trustworthy serving weight.

        Raises:
            InsufficientNutritionDataError: when the record reports no
                nutrients on either basis. Implausible data never raises.
        """
        per_100g = record.per_100g()
        reported = record.per_serving()
        if per_100g.is_empty() and reported.is_empty():
            raise InsufficientNutritionDataError(_NO_BASIS_REASON)

        serving_text = record.serving_text()
        serving_grams = parse_serving_grams(serving_text)
        if serving_grams is None:
            serving_grams = record.serving_quantity_grams()

        if reported.calories is not None:
            plausibility = check_plausibility(
                PlausibilityInput(
                    calories_per_serving=reported.calories,
                    calories_per_100g=per_100g.calories,
                    serving_grams=serving_grams,
                    product_name=record.name,
                ),
                self.thresholds,
            )
            if plausibility.is_plausible:
                return NormalizedNutrition(
                    per_100g=per_100g,
                    per_serving=reported,
                    serving_info=ServingInfo(
                        grams=serving_grams,
                        display_label=serving_text or "1 serving",
                        was_corrected=False,
                    ),
                    is_serving_data_trusted=True,
                )
            if per_100g.is_empty():
                # No basis to recompute from; keep the figures but distrust them.
                return NormalizedNutrition(
                    per_100g=per_100g,
                    per_serving=reported,
                    serving_info=ServingInfo(
                        grams=serving_grams,
                        display_label=serving_text or "1 serving",
                        was_corrected=False,
                        correction_reason=plausibility.reason,
                    ),
                    is_serving_data_trusted=False,
                )
            if serving_grams is not None and self._is_reasonable_weight(
                serving_grams, per_100g.calories, record.name
            ):
                corrected_grams = serving_grams
                label = serving_text or f"{serving_grams:g}g"
            else:
                corrected_grams = estimate_reasonable_grams(
                    record.name, per_100g.calories, self.thresholds
                )
                label = None
            if self.debug:
                _logger.info(
                    "Corrected serving for %r: reported=%s kcal grams=%s -> %sg (%s)",
                    record.name,
                    reported.calories,
                    serving_grams,
                    corrected_grams,
                    plausibility.reason,
                )
            return _corrected(
                per_100g, corrected_grams, plausibility.reason, label=label
            )

        if serving_grams is not None and serving_grams > 0 and not per_100g.is_empty():
            if not self._is_reasonable_weight(
                serving_grams, per_100g.calories, record.name
            ):
                estimated = estimate_reasonable_grams(
                    record.name, per_100g.calories, self.thresholds
                )
                if self.debug:
                    _logger.info(
                        "Replaced package-sized serving for %r: %sg -> %sg",
                        record.name,
                        serving_grams,
                        estimated,
                    )
                return _corrected(per_100g, estimated, _FULL_PACKAGE_REASON)
            return NormalizedNutrition(
                per_100g=per_100g,
                per_serving=scale(per_100g, serving_grams / 100.0),
                serving_info=ServingInfo(
                    grams=serving_grams,
                    display_label=serving_text or f"{serving_grams:g}g",
                    was_corrected=False,
                ),
                is_serving_data_trusted=True,
            )

        if per_100g.is_empty():
            # Macros reported per serving without calories; nothing to check.
            return NormalizedNutrition(
                per_100g=per_100g,
                per_serving=reported,
                serving_info=ServingInfo(
                    grams=serving_grams,
                    display_label=serving_text or "1 serving",
                    was_corrected=False,
                ),
                is_serving_data_trusted=False,
            )

        return NormalizedNutrition(
            per_100g=per_100g,
            per_serving=per_100g,
            serving_info=ServingInfo(
                grams=100.0,
                display_label="100g",
                was_corrected=False,
            ),
            is_serving_data_trusted=False,
        )

    def _is_reasonable_weight(
        self,
        serving_grams: float,
        calories_per_100g: float | None,
        product_name: str,
    ) -> bool:
        """Check whether a weight holds up independently of reported calories."""
        if serving_grams <= 0:
            return False
        if serving_grams > self.thresholds.max_serving_grams:
            return False
        if calories_per_100g is None:
            return True
        implied = check_plausibility(
            PlausibilityInput(
                calories_per_serving=calories_per_100g * serving_grams / 100.0,
                calories_per_100g=calories_per_100g,
                serving_grams=serving_grams,
                product_name=product_name,
            ),
            self.thresholds,
        )
        return implied.is_plausible


def normalize(
    record: RawNutritionRecord, thresholds: ServingThresholds = DEFAULT_THRESHOLDS
) -> NormalizedNutrition:
    """Normalize a raw product record with the given thresholds."""
    return NormalizationService(thresholds=thresholds).normalize(record)


def _corrected(
    per_100g: NutrientVector,
    grams: float,
    reason: str | None,
    label: str | None = None,
) -> NormalizedNutrition:
    return NormalizedNutrition(
        per_100g=per_100g,
        per_serving=scale(per_100g, grams / 100.0),
        serving_info=ServingInfo(
            grams=grams,
            display_label=label or f"~{grams:g}g (estimated serving)",
            was_corrected=True,
            correction_reason=reason,
        ),
        is_serving_data_trusted=False,
    )
