"""
Storage interface definitions for initiative.

Uses a Protocol class to define the contract for the backing store.
Implementations can persist anywhere; the in-memory ones are used for
sessions without storage and for tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from initiative.models import Thing


class StorageError(Exception):
    """The backing store could not complete an operation."""


class Repository(Protocol):
    """
    Interface for the entity store.

    Calls are awaited at the command boundary. Any failure is raised as a
    StorageError; callers degrade to in-memory operation instead of aborting.
    """

    def is_enabled(self) -> bool:
        """Whether saving and loading are available at all."""
        ...

    async def init(self) -> None:
        """Prepare the store for use."""
        ...

    async def save(self, thing: Thing) -> None:
        """Insert or update an entity."""
        ...

    async def load_by_name(self, name: str) -> Thing | None:
        """Get an entity by name (case-insensitive)."""
        ...

    async def delete(self, thing_id: UUID) -> bool:
        """Delete an entity. Returns False if it was not stored."""
        ...

    async def list_saved(self) -> list[Thing]:
        """Get every stored entity."""
        ...
