"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_entries.adapters.nutritionix_client import HttpxNutritionixClient
from nutrition_entries.config import Settings
from nutrition_entries.services.entries import (
    EntryService,
    EntryStore,
    InMemoryEntryStore,
)
from nutrition_entries.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_store: EntryStore
    nutrition_service: NutritionService
    entry_service: EntryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Raises ``pydantic.ValidationError`` when the Nutritionix credentials are
    missing from the environment.
    """
    resolved_settings = settings or Settings()
    nutritionix_client = HttpxNutritionixClient.create(
        app_id=resolved_settings.app_id,
        app_key=resolved_settings.app_key,
        base_url=resolved_settings.nutritionix_base_url,
        timeout_seconds=resolved_settings.lookup_timeout_seconds,
    )
    nutrition_service = NutritionService(client=nutritionix_client)
    entry_store = InMemoryEntryStore()
    entry_service = EntryService(
        nutrition_service=nutrition_service,
        store=entry_store,
    )

    async def close_resources() -> None:
        await nutritionix_client.close()

    return AppContainer(
        settings=resolved_settings,
        entry_store=entry_store,
        nutrition_service=nutrition_service,
        entry_service=entry_service,
        close_resources=close_resources,
    )
