"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx
import pytest
from fastapi.testclient import TestClient

from nutrition_entries.adapters.nutritionix_client import NutritionixClient
from nutrition_entries.api.app import create_app
from nutrition_entries.config import Settings
from nutrition_entries.containers import AppContainer
from nutrition_entries.domain.entries import Entry, Food, Nutrients, Photo
from nutrition_entries.services.entries import EntryService, InMemoryEntryStore
from nutrition_entries.services.nutrition import NutritionService


def rice_payload() -> dict[str, object]:
    return {
        "foods": [
            {
                "food_name": "rice",
                "serving_qty": 1,
                "serving_unit": "cup",
                "serving_weight_grams": 158,
                "nf_calories": 205.4,
                "nf_protein": 4.25,
                "nf_total_fat": 0.44,
                "nf_total_carbohydrate": 44.51,
                "nf_sodium": 1.58,
                "nf_sugars": 0.08,
                "nf_dietary_fiber": 0.63,
                "photo": {
                    "thumb": "https://nix-tag-images.s3.amazonaws.com/784_thumb.jpg",
                    "highres": "https://nix-tag-images.s3.amazonaws.com/784_highres.jpg",
                },
            },
            {
                "food_name": "chicken breast",
                "serving_qty": 1,
                "serving_unit": "oz",
                "serving_weight_grams": 28.35,
                "nf_calories": 35.7,
                "nf_protein": 8.5,
                "nf_total_fat": 0.5,
                "nf_total_carbohydrate": 0,
                "nf_sodium": 20.98,
                "nf_sugars": 0,
                "nf_dietary_fiber": 0,
                "photo": {
                    "thumb": "https://nix-tag-images.s3.amazonaws.com/4025_thumb.jpg",
                    "highres": None,
                },
            },
        ]
    }


def make_food(
    name: str = "rice",
    calories: float = 205.4,
    thumb: str | None = None,
    serving_qty: float = 1,
    serving_unit: str = "cup",
) -> Food:
    return Food(
        food_name=name,
        serving_qty=serving_qty,
        serving_unit=serving_unit,
        serving_weight_grams=158,
        nf_calories=calories,
        nf_protein=4.25,
        nf_total_fat=0.44,
        nf_total_carbohydrate=44.51,
        nf_sodium=1.58,
        nf_sugars=0.08,
        nf_dietary_fiber=0.63,
        photo=Photo(thumb=thumb),
    )


def make_entry(foods: tuple[Food, ...] = (), entry_id: int = 1) -> Entry:
    return Entry(
        id=entry_id,
        date="2025-08-11",
        query="1 cup rice",
        nutrients=Nutrients(foods=foods),
        created_at=datetime(2025, 8, 11, 10, 0, tzinfo=UTC),
    )


@dataclass
class FakeNutritionixClient(NutritionixClient):
    """Fake Nutritionix client returning a fixed payload."""

    payload: object = field(default_factory=rice_payload)
    error: Exception | None = None
    queries: list[str] = field(default_factory=list)

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload  # type: ignore[return-value]


@pytest.fixture
def settings() -> Settings:
    return Settings(app_id="test-app-id", app_key="test-app-key")


@pytest.fixture
def nutritionix_client() -> FakeNutritionixClient:
    return FakeNutritionixClient()


@pytest.fixture
def failing_nutritionix_client() -> FakeNutritionixClient:
    return FakeNutritionixClient(error=httpx.ConnectError("network unreachable"))


def _build_test_container(
    settings: Settings, client: NutritionixClient
) -> AppContainer:
    nutrition_service = NutritionService(client=client)
    entry_store = InMemoryEntryStore()
    entry_service = EntryService(nutrition_service=nutrition_service, store=entry_store)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        entry_store=entry_store,
        nutrition_service=nutrition_service,
        entry_service=entry_service,
        close_resources=close_resources,
    )


@pytest.fixture
def container(
    settings: Settings, nutritionix_client: FakeNutritionixClient
) -> AppContainer:
    return _build_test_container(settings, nutritionix_client)


@pytest.fixture
def failing_container(
    settings: Settings, failing_nutritionix_client: FakeNutritionixClient
) -> AppContainer:
    return _build_test_container(settings, failing_nutritionix_client)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
