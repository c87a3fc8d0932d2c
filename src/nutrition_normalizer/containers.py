"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_normalizer.adapters.open_food_facts_client import (
    HttpxOpenFoodFactsClient,
)
from nutrition_normalizer.config import Settings
from nutrition_normalizer.services.cache import InMemoryCache
from nutrition_normalizer.services.normalization import NormalizationService
from nutrition_normalizer.services.products import ProductNutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    normalization_service: NormalizationService
    product_service: ProductNutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    normalization_service = NormalizationService(
        thresholds=resolved_settings.thresholds(),
        debug=resolved_settings.debug,
    )
    product_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.off_base_url,
        user_agent=resolved_settings.off_user_agent,
    )
    product_service = ProductNutritionService(
        product_client=product_client,
        cache=InMemoryCache(),
        normalization_service=normalization_service,
        product_ttl_seconds=resolved_settings.cache_ttl_seconds,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await product_client.close()

    return AppContainer(
        settings=resolved_settings,
        normalization_service=normalization_service,
        product_service=product_service,
        close_resources=close_resources,
    )
