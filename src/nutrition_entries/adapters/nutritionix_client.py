"""Nutritionix natural-language nutrients API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

DEFAULT_BASE_URL = "https://trackapi.nutritionix.com"


class NutritionixClient(Protocol):
    """Interface for Nutritionix API interactions."""

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        """Resolve a free-text query into foods and return raw API data."""


@dataclass
class HttpxNutritionixClient(NutritionixClient):
    """HTTPX-backed Nutritionix client."""

    app_id: str
    app_key: str
    http_client: httpx.AsyncClient
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls,
        app_id: str,
        app_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 30.0,
    ) -> "HttpxNutritionixClient":
        """Create a Nutritionix client with a managed httpx session."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            http_client=httpx.AsyncClient(),
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        """Post a query to the natural nutrients endpoint.

        Raises ``httpx.HTTPStatusError`` for any non-200 reply.
        """
        url = f"{self.base_url.rstrip('/')}/v2/natural/nutrients"
        response = await self.http_client.post(
            url,
            headers={"x-app-id": self.app_id, "x-app-key": self.app_key},
            json={"query": query},
            timeout=self.timeout_seconds,
        )
        if response.status_code != httpx.codes.OK:
            raise httpx.HTTPStatusError(
                f"Nutritionix API error: status {response.status_code}",
                request=response.request,
                response=response,
            )
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
