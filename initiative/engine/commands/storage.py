"""
Storage commands: save, load, delete and list journal entries.

Saving locks every field of an entity and writes it to the repository. If
storage is unavailable the session carries on in memory and says so.
"""

from __future__ import annotations

import logging
from enum import Enum

from initiative.db.interfaces import StorageError
from initiative.engine.commands.base import (
    CommandFamily,
    ParseResult,
    describe_thing,
    eq_ci,
    persist,
    starts_with_ci,
    strip_prefix_ci,
)
from initiative.engine.context import AppContext
from initiative.engine.models import CommandResult, Suggestion
from initiative.models import Thing, ThingType

logger = logging.getLogger(__name__)


class StorageAction(str, Enum):
    SAVE = "save"
    LOAD = "load"
    DELETE = "delete"
    JOURNAL = "journal"


_VERBS = (StorageAction.SAVE, StorageAction.LOAD, StorageAction.DELETE)

_SECTION_TITLES = {
    ThingType.NPC: "NPCs",
    ThingType.LOCATION: "Locations",
    ThingType.REGION: "Regions",
}


class StorageCommand(CommandFamily):
    """Manage the journal of saved entities."""

    action: StorageAction
    name: str | None = None

    @classmethod
    def parse_input(cls, input: str, context: AppContext) -> ParseResult:
        if eq_ci(input, "journal"):
            return cls(action=StorageAction.JOURNAL), []

        for action in _VERBS:
            rest = strip_prefix_ci(input, f"{action.value} ")
            if rest is None:
                continue
            thing = context.world.find_by_name(rest)
            if thing is not None and thing.name.value is not None:
                return cls(action=action, name=thing.name.value), []
            if action == StorageAction.LOAD and rest.strip():
                # Not in this session; the journal may still have it.
                return cls(action=action, name=rest.strip()), []

        # Typing an entity's name on its own shows it.
        thing = context.world.find_by_name(input)
        if thing is not None and thing.name.value is not None:
            return cls(action=StorageAction.LOAD, name=thing.name.value), []

        return None, []

    @classmethod
    def autocomplete(cls, input: str, context: AppContext) -> list[Suggestion]:
        suggestions = [
            Suggestion("journal", "list saved entities"),
            Suggestion("save", "save an entity to your journal"),
            Suggestion("load", "show an entity"),
            Suggestion("delete", "remove an entity"),
        ]

        for name, thing_type in context.world.names():
            suggestions.append(Suggestion(name, thing_type.value))
            for action in _VERBS:
                if starts_with_ci(input, f"{action.value} "):
                    suggestions.append(
                        Suggestion(f"{action.value} {name}", f"{action.value} {thing_type.value}")
                    )

        return suggestions

    async def run(self, input: str, context: AppContext) -> CommandResult:
        if self.action == StorageAction.JOURNAL:
            return await self._journal(context)

        thing = context.world.find_by_name(self.name or "")
        warnings: list[str] = []
        if thing is None and self.action == StorageAction.LOAD:
            thing = await self._load_from_storage(context, warnings)
        if thing is None:
            return CommandResult(
                success=False,
                output=f'There is no entity named "{self.name}".',
                warnings=warnings,
            )

        if self.action == StorageAction.LOAD:
            return CommandResult(output=describe_thing(thing, context), warnings=warnings)

        if self.action == StorageAction.SAVE:
            thing.lock_all()
            context.saved_ids.add(thing.id)
            warnings = await persist(thing, context)
            if warnings:
                return CommandResult(
                    output=f"{self.name} is locked, but only kept in memory.",
                    warnings=warnings,
                )
            return CommandResult(output=f"{self.name} was successfully saved.")

        # Delete
        if context.world.remove(thing.id) is None:
            return CommandResult(success=False, output=f"{self.name} can't be deleted.")
        was_saved = context.is_saved(thing.id)
        context.saved_ids.discard(thing.id)
        if was_saved and context.repository.is_enabled():
            try:
                await context.repository.delete(thing.id)
            except StorageError as e:
                logger.warning("Deleting %s from storage failed: %s", thing.id, e)
                warnings.append(f"Couldn't remove {self.name} from storage: {e}")
        return CommandResult(output=f"{self.name} was deleted.", warnings=warnings)

    async def _load_from_storage(self, context: AppContext, warnings: list[str]) -> Thing | None:
        """Bring a saved entity that is missing from the world back into it."""
        if not context.repository.is_enabled():
            return None
        try:
            thing = await context.repository.load_by_name(self.name or "")
        except StorageError as e:
            logger.warning("Loading %r from storage failed: %s", self.name, e)
            warnings.append(f"Storage is not available ({e}).")
            return None
        if thing is not None:
            context.world.add(thing)
            context.saved_ids.add(thing.id)
        return thing

    async def _journal(self, context: AppContext) -> CommandResult:
        warnings: list[str] = []
        try:
            things = await context.repository.list_saved()
        except StorageError as e:
            logger.warning("Listing the journal failed, showing memory only: %s", e)
            warnings.append(f"Storage is not available ({e}); showing this session only.")
            things = [context.world.get(thing_id) for thing_id in sorted(context.saved_ids)]
            things = [thing for thing in things if thing is not None]

        if not things:
            return CommandResult(output="# Journal\n\n*Your journal is empty.*", warnings=warnings)

        sections: dict[ThingType, list[str]] = {}
        for thing in things:
            sections.setdefault(ThingType.of(thing), []).append(f"* {thing.summary()}")

        lines = ["# Journal"]
        for thing_type in ThingType:
            if thing_type in sections:
                lines.append(f"## {_SECTION_TITLES[thing_type]}")
                lines.append("\n".join(sections[thing_type]))
        return CommandResult(output="\n\n".join(lines), warnings=warnings)

    def __str__(self) -> str:
        if self.action == StorageAction.JOURNAL:
            return "journal"
        return f"{self.action.value} {self.name}"
