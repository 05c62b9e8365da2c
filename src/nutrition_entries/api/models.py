"""Pydantic request and response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class CreateEntryRequest(BaseModel):
    """Body of a create-entry request."""

    query: str = Field(min_length=1, examples=["1 cup rice"])
    date: str = Field(min_length=1, examples=["2025-08-11"])


class PhotoResponse(BaseModel):
    """Food image links."""

    thumb: str = ""
    highres: str = ""

    @field_validator("thumb", "highres", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class FoodResponse(BaseModel):
    """A single food with per-serving nutrition."""

    food_name: str = Field(examples=["rice"])
    serving_qty: float = Field(examples=[1])
    serving_unit: str = Field(examples=["cup"])
    serving_weight_grams: float = Field(examples=[158])
    nf_calories: float = Field(examples=[205.4])
    nf_protein: float = Field(examples=[4.25])
    nf_total_fat: float = Field(examples=[0.44])
    nf_total_carbohydrate: float = Field(examples=[44.51])
    nf_sodium: float = Field(examples=[1.58])
    nf_sugars: float = Field(examples=[0.08])
    nf_dietary_fiber: float = Field(examples=[0.63])
    photo: PhotoResponse = Field(default_factory=PhotoResponse)


class NutrientsResponse(BaseModel):
    """Foods resolved for an entry's query."""

    foods: list[FoodResponse] = Field(default_factory=list)


class EntryResponse(BaseModel):
    """Full nutrition entry."""

    id: int = Field(examples=[1])
    date: str = Field(examples=["2025-08-11"])
    query: str = Field(examples=["1 cup rice"])
    nutrients: NutrientsResponse
    created_at: datetime


class SimplifiedEntryResponse(BaseModel):
    """Aggregated nutrition entry."""

    id: int = Field(examples=[1])
    date: str = Field(examples=["2025-08-11"])
    query: str = Field(examples=["1 cup rice"])
    food_name: str = Field(examples=["rice"])
    serving_size: str = Field(examples=["1.0 cup"])
    calories: float = Field(examples=[205.4])
    protein_g: float = Field(examples=[4.25])
    carbs_g: float = Field(examples=[44.51])
    fat_g: float = Field(examples=[0.44])
    image_url: str | None = None
    created_at: datetime


class HealthResponse(BaseModel):
    """Health check payload."""

    status: str = Field(examples=["healthy"])
    entries: int = Field(examples=[5])
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Error payload."""

    error: str = Field(examples=["Entry not found"])
