"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrition_normalizer.adapters.open_food_facts_client import ProductClient
from nutrition_normalizer.config import Settings
from nutrition_normalizer.containers import AppContainer
from nutrition_normalizer.services.cache import InMemoryCache
from nutrition_normalizer.services.normalization import NormalizationService
from nutrition_normalizer.services.products import ProductNutritionService

K_CUP_BARCODE = "0663447217174"
HOT_CHOCOLATE_BARCODE = "0099555086007"


def k_cup_product() -> dict[str, object]:
    """Product whose serving size is the weight of the whole box."""
    return {
        "product_name": "Laura Secord Hot Chocolate K-Cups",
        "brands": "Laura Secord",
        "serving_size": "236.0g",
        "serving_quantity": "236",
        "nutriments": {
            "energy-kcal_100g": 400,
            "energy-kcal_serving": 944,
            "proteins_100g": 8.47,
            "proteins_serving": 20,
            "carbohydrates_100g": 72.03,
            "carbohydrates_serving": 170,
            "fat_100g": 8.47,
            "fat_serving": 20,
            "sugars_100g": 59.32,
            "sugars_serving": 140,
            "fiber_100g": 4.2,
            "fiber_serving": 10,
            "sodium_100g": 0.508,
            "sodium_serving": 1.2,
        },
    }


def hot_chocolate_product() -> dict[str, object]:
    """Product with consistent serving data."""
    return {
        "product_name": "Victor Allen's Hot Chocolate",
        "brands": "Victor Allen's",
        "serving_size": "15g",
        "serving_quantity": "15",
        "nutriments": {
            "energy-kcal_100g": 467,
            "energy-kcal_serving": 70,
            "proteins_100g": 6.67,
            "proteins_serving": 1,
            "carbohydrates_100g": 73.33,
            "carbohydrates_serving": 11,
            "fat_100g": 13.33,
            "fat_serving": 2,
            "sugars_100g": 53.33,
            "sugars_serving": 8,
        },
    }


@dataclass
class FakeProductClient(ProductClient):
    """Fake product client serving in-memory payloads by barcode."""

    products: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            K_CUP_BARCODE: k_cup_product(),
            HOT_CHOCOLATE_BARCODE: hot_chocolate_product(),
        }
    )
    calls: int = 0
    failures_before_success: int = 0

    async def get_product(self, barcode: str) -> dict[str, object]:
        self.calls += 1
        if self.failures_before_success > 0:
            self.failures_before_success -= 1
            raise RuntimeError("temporary failure")
        product = self.products.get(barcode)
        if product is None:
            return {"status": 0, "status_verbose": "product not found"}
        return {"status": 1, "code": barcode, "product": product}


@pytest.fixture
def settings() -> Settings:
    return Settings(off_base_url="https://off.example.test")


@pytest.fixture
def product_client() -> FakeProductClient:
    return FakeProductClient()


@pytest.fixture
def product_service(product_client: FakeProductClient) -> ProductNutritionService:
    return ProductNutritionService(
        product_client=product_client,
        cache=InMemoryCache(),
        retry_delay_seconds=0,
    )


@pytest.fixture
def container(
    settings: Settings, product_service: ProductNutritionService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        normalization_service=NormalizationService(thresholds=settings.thresholds()),
        product_service=product_service,
        close_resources=close_resources,
    )
