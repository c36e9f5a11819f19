"""
Storage layer for initiative.

Provides the Repository interface and in-memory implementations:
- InMemoryRepository: dictionary-backed, used by default and in tests
- NullRepository: storage disabled; sessions run memory-only
"""

from __future__ import annotations

from initiative.db.interfaces import Repository, StorageError
from initiative.db.memory import InMemoryRepository, NullRepository

__all__ = [
    "Repository",
    "StorageError",
    "InMemoryRepository",
    "NullRepository",
]
