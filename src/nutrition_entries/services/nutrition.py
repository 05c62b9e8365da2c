"""Nutrition lookup service backed by Nutritionix."""

import logging
from dataclasses import dataclass

import httpx

from nutrition_entries.adapters.nutritionix_client import NutritionixClient
from nutrition_entries.domain.entries import Food, Photo

_logger = logging.getLogger(__name__)


class NutritionLookupError(Exception):
    """Raised when nutrition data could not be fetched or understood."""


@dataclass
class NutritionService:
    """Service that turns free-text queries into food items."""

    client: NutritionixClient

    async def lookup(self, query: str) -> tuple[Food, ...]:
        """Resolve a query into foods.

        Transport errors, non-200 replies, undecodable bodies and malformed
        food objects all surface as a single ``NutritionLookupError``.
        """
        try:
            payload = await self.client.natural_nutrients(query)
            foods = parse_foods(payload)
        except (httpx.HTTPError, ValueError, TypeError) as exc:
            _logger.exception("Nutritionix lookup failed: query=%r", query)
            raise NutritionLookupError(str(exc)) from exc
        _logger.debug("Nutritionix lookup: query=%r foods=%s", query, len(foods))
        return foods


def parse_foods(payload: object) -> tuple[Food, ...]:
    """Convert a raw natural nutrients payload into domain foods."""
    if not isinstance(payload, dict):
        raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
    raw_foods = payload.get("foods")
    if raw_foods is None:
        return ()
    if not isinstance(raw_foods, list):
        raise TypeError("'foods' must be a list")
    return tuple(_parse_food(raw) for raw in raw_foods)


def _parse_food(raw: object) -> Food:
    if not isinstance(raw, dict):
        raise TypeError("food must be a JSON object")
    return Food(
        food_name=_as_str(raw.get("food_name")),
        serving_qty=_as_float(raw.get("serving_qty")),
        serving_unit=_as_str(raw.get("serving_unit")),
        serving_weight_grams=_as_float(raw.get("serving_weight_grams")),
        nf_calories=_as_float(raw.get("nf_calories")),
        nf_protein=_as_float(raw.get("nf_protein")),
        nf_total_fat=_as_float(raw.get("nf_total_fat")),
        nf_total_carbohydrate=_as_float(raw.get("nf_total_carbohydrate")),
        nf_sodium=_as_float(raw.get("nf_sodium")),
        nf_sugars=_as_float(raw.get("nf_sugars")),
        nf_dietary_fiber=_as_float(raw.get("nf_dietary_fiber")),
        photo=_parse_photo(raw.get("photo")),
    )


def _parse_photo(raw: object) -> Photo:
    if raw is None:
        return Photo()
    if not isinstance(raw, dict):
        raise TypeError("photo must be a JSON object")
    return Photo(
        thumb=_as_optional_str(raw.get("thumb")),
        highres=_as_optional_str(raw.get("highres")),
    )


def _as_float(value: object) -> float:
    """Read a JSON number, treating null or absent as zero."""
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)


def _as_str(value: object) -> str:
    return _as_optional_str(value) or ""


def _as_optional_str(value: object) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value
