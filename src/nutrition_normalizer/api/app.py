"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException, Request, status

from nutrition_normalizer.api.models import NutritionResponse
from nutrition_normalizer.app_logging import configure_logging
from nutrition_normalizer.containers import AppContainer
from nutrition_normalizer.domain.errors import (
    InsufficientNutritionDataError,
    ProductNotFoundError,
)
from nutrition_normalizer.domain.products import RawNutritionRecord
from nutrition_normalizer.services.serving_options import build_options


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/products/{barcode}/nutrition")
    async def product_nutrition(barcode: str, request: Request) -> NutritionResponse:
        """Look up a product by barcode and return normalized nutrition."""
        state_container: AppContainer = request.app.state.container
        try:
            product = await state_container.product_service.get_product_nutrition(
                barcode
            )
        except ProductNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except InsufficientNutritionDataError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        except httpx.HTTPError as exc:
            logger.exception("Product lookup failed for barcode %s", barcode)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Product database unavailable",
            ) from exc
        return NutritionResponse.from_product(product)

    @app.post("/nutrition/normalize")
    async def normalize_record(
        record: RawNutritionRecord, request: Request
    ) -> NutritionResponse:
        """Normalize a raw product record supplied by the caller."""
        state_container: AppContainer = request.app.state.container
        service = state_container.normalization_service
        try:
            nutrition = service.normalize(record)
        except InsufficientNutritionDataError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        options = build_options(nutrition.serving_info, record.name, service.thresholds)
        return NutritionResponse.from_nutrition(
            nutrition,
            options,
            product_name=record.product_name,
            brand=record.brands,
        )

    return app
