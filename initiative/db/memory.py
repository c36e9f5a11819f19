"""
In-memory implementations of the storage interface.

InMemoryRepository keeps entities in a dictionary and hands out copies, so
stored state cannot be mutated behind the store's back. NullRepository
stands in when storage is unavailable.
"""

from __future__ import annotations

from copy import deepcopy
from uuid import UUID

from initiative.db.interfaces import StorageError
from initiative.models import Thing


class InMemoryRepository:
    """In-memory implementation of Repository."""

    def __init__(self) -> None:
        self._things: dict[UUID, Thing] = {}

    def is_enabled(self) -> bool:
        return True

    async def init(self) -> None:
        """Nothing to prepare for a dictionary."""

    async def save(self, thing: Thing) -> None:
        """Insert or update an entity."""
        self._things[thing.id] = deepcopy(thing)

    async def load_by_name(self, name: str) -> Thing | None:
        """Get an entity by name (case-insensitive)."""
        name = name.strip().lower()
        for thing in self._things.values():
            if thing.name.value is not None and thing.name.value.lower() == name:
                return deepcopy(thing)
        return None

    async def delete(self, thing_id: UUID) -> bool:
        """Delete an entity."""
        return self._things.pop(thing_id, None) is not None

    async def list_saved(self) -> list[Thing]:
        """Get every stored entity, sorted by name."""
        things = [deepcopy(t) for t in self._things.values()]
        things.sort(key=lambda t: (t.name.value or "").lower())
        return things


class NullRepository:
    """
    Repository for sessions without storage.

    is_enabled() is False and every operation raises StorageError.
    """

    def is_enabled(self) -> bool:
        return False

    async def init(self) -> None:
        """Nothing to prepare."""

    async def save(self, thing: Thing) -> None:
        raise StorageError("Storage is not available")

    async def load_by_name(self, name: str) -> Thing | None:
        raise StorageError("Storage is not available")

    async def delete(self, thing_id: UUID) -> bool:
        raise StorageError("Storage is not available")

    async def list_saved(self) -> list[Thing]:
        raise StorageError("Storage is not available")
