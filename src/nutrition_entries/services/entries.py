"""Entry storage and creation services."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from nutrition_entries.domain.entries import Entry, Food, Nutrients
from nutrition_entries.services.locks import ReadWriteLock
from nutrition_entries.services.nutrition import NutritionService

_logger = logging.getLogger(__name__)


class EntryStore(Protocol):
    """Storage interface for nutrition entries."""

    def insert(self, date: str, query: str, foods: Sequence[Food]) -> Entry:
        """Assign the next id, stamp the creation time and store the entry."""

    def get(self, entry_id: int) -> Entry | None:
        """Return an entry by id."""

    def list(self) -> list[Entry]:
        """Return all stored entries."""

    def count(self) -> int:
        """Return the number of stored entries."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class InMemoryEntryStore(EntryStore):
    """Process-lifetime entry table guarded by a reader/writer lock.

    Ids start at 1 and are never reused. ``list`` returns entries in
    insertion order, which is also ascending id order.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._lock = ReadWriteLock()
        self._entries: dict[int, Entry] = {}
        self._next_id = 1
        self._last_created_at: datetime | None = None

    def insert(self, date: str, query: str, foods: Sequence[Food]) -> Entry:
        """Store a new entry and return it."""
        nutrients = Nutrients(foods=tuple(foods))
        with self._lock.write():
            created_at = self._clock()
            if self._last_created_at and created_at < self._last_created_at:
                created_at = self._last_created_at
            entry = Entry(
                id=self._next_id,
                date=date,
                query=query,
                nutrients=nutrients,
                created_at=created_at,
            )
            self._entries[entry.id] = entry
            self._next_id += 1
            self._last_created_at = created_at
        return entry

    def get(self, entry_id: int) -> Entry | None:
        """Return an entry by id, if present."""
        with self._lock.read():
            return self._entries.get(entry_id)

    def list(self) -> list[Entry]:
        """Return a snapshot of all entries."""
        with self._lock.read():
            return list(self._entries.values())

    def count(self) -> int:
        """Return the number of stored entries."""
        with self._lock.read():
            return len(self._entries)


@dataclass
class EntryService:
    """Creates entries from nutrition lookups."""

    nutrition_service: NutritionService
    store: EntryStore

    async def create_entry(self, date: str, query: str) -> Entry:
        """Look up nutrition data and store it as a new entry.

        The lookup runs before the store is touched, so a failed lookup
        leaves the store unchanged.
        """
        foods = await self.nutrition_service.lookup(query)
        entry = self.store.insert(date=date, query=query, foods=foods)
        _logger.info("Entry created: id=%s foods=%s", entry.id, len(foods))
        return entry
