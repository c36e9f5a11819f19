"""
Lockable field wrapper for generated attributes.

Every generated attribute of an entity is wrapped in a Field. Generation only
writes to unlocked fields; a user edit writes the value and locks it so that
later regeneration passes leave it alone.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Field(BaseModel, Generic[T]):
    """A generated value paired with a lock flag."""

    value: T | None = None
    locked: bool = False

    def get(self) -> T | None:
        """Get the current value, or None if nothing has been generated yet."""
        return self.value

    def is_some(self) -> bool:
        return self.value is not None

    def is_locked(self) -> bool:
        return self.locked

    def set(self, value: T) -> None:
        """Store a value and lock it against regeneration."""
        self.value = value
        self.locked = True

    def replace_with(self, f: Callable[[T | None], T]) -> None:
        """
        Replace the value with the result of f(current value).

        Used by generators. Does nothing when the field is locked.
        """
        if not self.locked:
            self.value = f(self.value)

    def lock(self) -> None:
        self.locked = True

    def unlock(self) -> None:
        self.locked = False

    def clear(self) -> None:
        """Unlock and drop the value so the next regeneration fills it again."""
        self.value = None
        self.locked = False

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)
