"""
Session context for initiative.

The AppContext is owned by one running session and passed explicitly to
every parser and command. All mutation happens inside a single command run.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from uuid import UUID

from initiative.config import AppConfig
from initiative.db.interfaces import Repository
from initiative.db.memory import InMemoryRepository, NullRepository
from initiative.models import Demographics, World


@dataclass
class AppContext:
    """Current state of a session."""

    world: World = field(default_factory=World)
    demographics: Demographics = field(default_factory=Demographics.default)
    repository: Repository = field(default_factory=InMemoryRepository)
    rng: random.Random = field(default_factory=random.Random)
    config: AppConfig = field(default_factory=AppConfig)
    saved_ids: set[UUID] = field(default_factory=set)
    """Entities that have been written to the repository."""

    @classmethod
    def from_config(cls, config: AppConfig) -> AppContext:
        """Build a fresh context with the storage and seed named by config."""
        repository: Repository = (
            InMemoryRepository() if config.storage == "memory" else NullRepository()
        )
        return cls(
            repository=repository,
            rng=random.Random(config.seed),
            config=config,
        )

    def is_saved(self, thing_id: UUID) -> bool:
        return thing_id in self.saved_ids
