"""Open Food Facts product API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class ProductClient(Protocol):
    """Interface for product database lookups."""

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch a product by barcode and return raw API data."""


@dataclass
class HttpxOpenFoodFactsClient(ProductClient):
    """HTTPX-backed Open Food Facts client."""

    base_url: str
    user_agent: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str, user_agent: str) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            user_agent=user_agent,
            http_client=httpx.AsyncClient(),
        )

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch a product by barcode."""
        url = f"{self.base_url}/api/v0/product/{barcode}.json"
        response = await self.http_client.get(
            url,
            headers={"User-Agent": self.user_agent},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
