"""ASGI entrypoint for the nutrition entries API."""

from nutrition_entries.api.app import create_app
from nutrition_entries.containers import build_container

app = create_app(build_container())
