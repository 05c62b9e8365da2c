"""Nutrition entry endpoints."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from nutrition_entries.api.models import (
    CreateEntryRequest,
    EntryResponse,
    ErrorResponse,
    SimplifiedEntryResponse,
)
from nutrition_entries.domain.entries import Entry, SimplifiedEntry  # noqa: TC001
from nutrition_entries.services.nutrition import NutritionLookupError
from nutrition_entries.services.views import simplify

if TYPE_CHECKING:
    from nutrition_entries.containers import AppContainer

router = APIRouter(prefix="/entries", tags=["entries"])

_ENTRY_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_MAX_ENTRY_ID = 2**63 - 1


@router.get(
    "",
    response_model=list[EntryResponse] | list[SimplifiedEntryResponse],
    response_model_exclude_none=True,
)
async def list_entries(
    request: Request,
    response_format: str | None = Query(
        default=None,
        alias="format",
        description="Use 'simple' for aggregated entries.",
    ),
) -> list[Entry] | list[SimplifiedEntry]:
    """Return all entries, full or simplified."""
    container: AppContainer = request.app.state.container
    entries = container.entry_store.list()
    if response_format == "simple":
        return [simplify(entry) for entry in entries]
    return entries


@router.get(
    "/{entry_id}",
    response_model=EntryResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
async def get_entry(entry_id: str, request: Request) -> Entry:
    """Return a single entry by its id."""
    parsed_id = _parse_entry_id(entry_id)
    if parsed_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid ID format"
        )
    container: AppContainer = request.app.state.container
    entry = container.entry_store.get(parsed_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found"
        )
    return entry


@router.post(
    "",
    response_model=EntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def create_entry(payload: CreateEntryRequest, request: Request) -> Entry:
    """Create an entry by looking up nutrition data for the query."""
    container: AppContainer = request.app.state.container
    try:
        return await container.entry_service.create_entry(
            date=payload.date, query=payload.query
        )
    except NutritionLookupError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch nutrition data",
        ) from exc


def _parse_entry_id(raw: str) -> int | None:
    """Return the id when it is a positive 64-bit integer written in ASCII digits."""
    if not _ENTRY_ID_PATTERN.fullmatch(raw):
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if 0 < value <= _MAX_ENTRY_ID else None
