"""Product nutrition lookup backed by Open Food Facts."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nutrition_normalizer.adapters.open_food_facts_client import ProductClient
from nutrition_normalizer.domain.errors import ProductNotFoundError
from nutrition_normalizer.domain.products import ProductNutrition, RawNutritionRecord
from nutrition_normalizer.services.cache import Cache
from nutrition_normalizer.services.normalization import NormalizationService
from nutrition_normalizer.services.serving_options import build_options

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class ProductNutritionService:
    """Fetches product records and normalizes their nutrition, with caching."""

    product_client: ProductClient
    cache: Cache
    normalization_service: NormalizationService = field(
        default_factory=NormalizationService
    )
    product_ttl_seconds: int = 86400
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def get_product_nutrition(self, barcode: str) -> ProductNutrition:
        """Return normalized nutrition and serving options for a barcode.

        Raises:
            ProductNotFoundError: when the database has no such product.
            InsufficientNutritionDataError: when the product has no usable
                nutrition data.
        """
        record = await self.get_record(barcode)
        return self.describe(barcode, record)

    async def get_record(self, barcode: str) -> RawNutritionRecord:
        """Fetch and validate the raw product record, with caching."""
        cache_key = f"off:product:{barcode}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, RawNutritionRecord):
            return cached

        payload = await self._call_with_retry(
            lambda: self.product_client.get_product(barcode),
            action=f"get_product:{barcode}",
        )
        product = payload.get("product")
        if payload.get("status") != 1 or not isinstance(product, dict):
            if self.debug:
                _logger.info("Product lookup miss: barcode=%s", barcode)
            raise ProductNotFoundError(barcode)

        record = RawNutritionRecord.model_validate(product)
        self.cache.set(cache_key, record, ttl_seconds=self.product_ttl_seconds)
        if self.debug:
            _logger.info("Product lookup: barcode=%s name=%s", barcode, record.name)
        return record

    def describe(self, barcode: str, record: RawNutritionRecord) -> ProductNutrition:
        """Normalize a record and attach serving options."""
        nutrition = self.normalization_service.normalize(record)
        options = build_options(
            nutrition.serving_info,
            record.name,
            self.normalization_service.thresholds,
        )
        return ProductNutrition(
            barcode=barcode,
            product_name=record.name or "Unknown Product",
            brand=record.brands,
            nutrition=nutrition,
            serving_options=options,
        )

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                if self.debug:
                    _logger.warning(
                        "Product %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        _status_code_from_exception(exc),
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
