"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_normalizer.domain.thresholds import (
    MAX_MULTI_PACK_RATIO,
    MAX_SERVING_CALORIES,
    MAX_SERVING_GRAMS,
    ServingThresholds,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    off_base_url: str = "https://world.openfoodfacts.org"
    off_user_agent: str = "nutrition-normalizer/0.1"
    cache_ttl_seconds: int = 86400
    debug: bool = False
    max_serving_calories: float = MAX_SERVING_CALORIES
    max_serving_grams: float = MAX_SERVING_GRAMS
    max_multi_pack_ratio: float = MAX_MULTI_PACK_RATIO
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def thresholds(self) -> ServingThresholds:
        """Return engine thresholds with configured overrides applied."""
        return ServingThresholds(
            max_serving_calories=self.max_serving_calories,
            max_serving_grams=self.max_serving_grams,
            max_multi_pack_ratio=self.max_multi_pack_ratio,
        )
