"""Domain models for nutrition entries."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Photo:
    """Image links attached to a food by the lookup service."""

    thumb: str | None = None
    highres: str | None = None


@dataclass(frozen=True)
class Food:
    """One food component resolved from a free-text query.

    Energy is in kcal, sodium in mg, every other nutrient in grams.
    """

    food_name: str
    serving_qty: float
    serving_unit: str
    serving_weight_grams: float
    nf_calories: float
    nf_protein: float
    nf_total_fat: float
    nf_total_carbohydrate: float
    nf_sodium: float
    nf_sugars: float
    nf_dietary_fiber: float
    photo: Photo = field(default_factory=Photo)


@dataclass(frozen=True)
class Nutrients:
    """Foods returned for a single lookup."""

    foods: tuple[Food, ...] = ()


@dataclass(frozen=True)
class Entry:
    """A stored lookup result tied to a date and the original query."""

    id: int
    date: str
    query: str
    nutrients: Nutrients
    created_at: datetime


@dataclass(frozen=True)
class SimplifiedEntry:
    """Aggregated read-only projection of an entry."""

    id: int
    date: str
    query: str
    food_name: str
    serving_size: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    created_at: datetime
    image_url: str | None = None
