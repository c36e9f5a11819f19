"""
Command family contract and shared helpers.

A command family is a closed set of variants for one feature area. Each
family parses raw input into at most one exact match plus any number of
fuzzy matches, renders its canonical phrasing via str(), offers
autocomplete labels, and runs itself against the session context.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pydantic import BaseModel

from initiative.db.interfaces import StorageError
from initiative.engine.context import AppContext
from initiative.engine.models import CommandResult, Suggestion
from initiative.models import Location, Npc, Thing

logger = logging.getLogger(__name__)

ParseResult = tuple["CommandFamily | None", list["CommandFamily"]]


class CommandFamily(BaseModel, ABC):
    """Base class for every command family. Commands are immutable."""

    model_config = {"frozen": True}

    @classmethod
    @abstractmethod
    def parse_input(cls, input: str, context: AppContext) -> ParseResult:
        """
        Parse raw input.

        Returns:
            (exact_match, fuzzy_matches). The exact match is authoritative;
            fuzzy matches are every other plausible reading.
        """

    @classmethod
    @abstractmethod
    def autocomplete(cls, input: str, context: AppContext) -> list[Suggestion]:
        """Suggestions this family can offer for a partial input."""

    @abstractmethod
    async def run(self, input: str, context: AppContext) -> CommandResult:
        """Execute the command. Domain failures come back as success=False."""

    @abstractmethod
    def __str__(self) -> str:
        """Canonical phrasing; parsing it yields this command as the exact match."""


# =============================================================================
# Case-insensitive string helpers
# =============================================================================


def eq_ci(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def starts_with_ci(text: str, prefix: str) -> bool:
    return text.lower().startswith(prefix.lower())


def strip_prefix_ci(text: str, prefix: str) -> str | None:
    """Remove prefix (ignoring case), or return None if text lacks it."""
    if starts_with_ci(text, prefix):
        return text[len(prefix) :]
    return None


def strip_article(text: str) -> str:
    """Remove a leading "a", "an" or "the"."""
    for article in ("a ", "an ", "the "):
        rest = strip_prefix_ci(text, article)
        if rest is not None:
            return rest.strip()
    return text


def with_article(word: str) -> str:
    return f"an {word}" if word[:1].lower() in "aeiou" else f"a {word}"


# =============================================================================
# Entity helpers
# =============================================================================


def describe_thing(thing: Thing, context: AppContext) -> str:
    """Full description of an entity, including its references to others."""
    lines = [str(thing)]
    world = context.world
    if isinstance(thing, Npc):
        if thing.location_id.is_some():
            lines.append(f"**Location:** {world.describe_relation(thing.location_id.value)}")
    elif isinstance(thing, Location):
        lines.append(f"**Region:** {world.describe_relation(thing.region_id.value)}")
    elif thing.parent_id.is_some():
        lines.append(f"**Part of:** {world.describe_relation(thing.parent_id.value)}")
    return "\n\n".join(lines)


async def persist(thing: Thing, context: AppContext) -> list[str]:
    """
    Write an entity to the repository.

    Returns warnings instead of raising; a failed save leaves the session
    running in memory only.
    """
    if not context.repository.is_enabled():
        return ["Storage is not available. Changes will be lost when you leave."]
    try:
        await context.repository.save(thing)
    except StorageError as e:
        logger.warning("Saving %s failed, keeping it in memory only: %s", thing.id, e)
        return [f"Couldn't save {thing.name.value or 'that'}: {e}. It is kept in memory only."]
    return []
