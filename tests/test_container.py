"""Tests for container wiring and configuration."""

import asyncio

import pytest
from pydantic import ValidationError

from nutrition_entries.adapters.nutritionix_client import HttpxNutritionixClient
from nutrition_entries.config import Settings
from nutrition_entries.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.entry_store.count() == 0
    assert container.entry_service.store is container.entry_store
    client = container.nutrition_service.client
    assert isinstance(client, HttpxNutritionixClient)
    assert client.app_id == "test-app-id"
    assert client.timeout_seconds == 30.0
    asyncio.run(container.close_resources())


def test_settings_defaults(monkeypatch) -> None:
    for name in ("PORT", "NUTRITIONIX_BASE_URL", "LOOKUP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None, app_id="id", app_key="key")

    assert settings.port == 9000
    assert settings.nutritionix_base_url == "https://trackapi.nutritionix.com"
    assert settings.lookup_timeout_seconds == 30.0


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("APP_ID", "env-id")
    monkeypatch.setenv("APP_KEY", "env-key")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.app_id == "env-id"
    assert settings.app_key == "env-key"
    assert settings.port == 8080


def test_missing_credentials_fail_fast(monkeypatch) -> None:
    monkeypatch.delenv("APP_ID", raising=False)
    monkeypatch.delenv("APP_KEY", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_credentials_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, app_id="  ", app_key="key")
