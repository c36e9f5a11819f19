"""
Edit commands: change, unlock and regenerate fields of existing entities.

"[name] is [value]" sets a field and locks it, so later regeneration keeps
the user's choice. "unlock" releases a lock; "regenerate" rerolls every
unlocked field.
"""

from __future__ import annotations

import logging
from enum import Enum

from initiative.engine.commands.base import (
    CommandFamily,
    ParseResult,
    describe_thing,
    persist,
    starts_with_ci,
    strip_article,
    strip_prefix_ci,
    with_article,
)
from initiative.engine.context import AppContext
from initiative.engine.models import CommandResult, Suggestion
from initiative.models import (
    Age,
    ConfigurationError,
    Gender,
    Location,
    LocationType,
    Npc,
    RegionType,
    Species,
    Thing,
)
from initiative.services import regenerate_unique

logger = logging.getLogger(__name__)


class EditAction(str, Enum):
    EDIT = "edit"
    UNLOCK = "unlock"
    REGENERATE = "regenerate"


def parse_value(thing: Thing, text: str) -> list[tuple[str, str]]:
    """
    Every (field, canonical value) reading of text for this kind of entity.

    "named X" always means the name field.
    """
    new_name = strip_prefix_ci(text, "named ")
    if new_name is not None and new_name.strip():
        return [("name", new_name.strip())]

    word = strip_article(text)
    readings: list[tuple[str, str]] = []
    if isinstance(thing, Npc):
        species = Species.parse(word)
        if species is not None:
            readings.append(("species", species.value))
        gender = Gender.parse(word)
        if gender is not None:
            readings.append(("gender", gender.value))
        age = Age.parse(word)
        if age is not None:
            readings.append(("age", age.value))
    elif isinstance(thing, Location):
        location_type = LocationType.parse(word)
        if location_type is not None:
            readings.append(("subtype", location_type.value))
    else:
        region_type = RegionType.parse(word)
        if region_type is not None and region_type != RegionType.WORLD:
            readings.append(("subtype", region_type.value))
    return readings


def _value_choices(thing: Thing) -> list[tuple[str, str]]:
    """Every (field, value) a thing can be edited to, for autocomplete."""
    if isinstance(thing, Npc):
        return [
            *(("species", s.value) for s in Species),
            *(("gender", g.value) for g in Gender),
            *(("age", a.value) for a in Age),
        ]
    elif isinstance(thing, Location):
        return [("subtype", word) for word in LocationType.words()]
    return [("subtype", word) for word in RegionType.words() if word != RegionType.WORLD.value]


def _render_edit(name: str, field: str, value: str) -> str:
    if field == "name":
        return f"{name} is named {value}"
    elif field == "gender":
        return f"{name} is {value}"
    return f"{name} is {with_article(value)}"


class EditCommand(CommandFamily):
    """Modify an entity that already exists in the world."""

    action: EditAction
    name: str
    field: str | None = None
    value: str | None = None

    @classmethod
    def parse_input(cls, input: str, context: AppContext) -> ParseResult:
        world = context.world
        candidates: list[EditCommand] = []

        rest = strip_prefix_ci(input, "regenerate ")
        if rest is not None:
            thing = world.find_by_name(rest)
            if thing is not None and thing.name.value is not None:
                candidates.append(cls(action=EditAction.REGENERATE, name=thing.name.value))

        rest = strip_prefix_ci(input, "unlock ")
        if rest is not None:
            candidates.extend(cls._parse_unlock(rest, context))

        # Try every " is " so that names containing "is" still work.
        lowered = input.lower()
        index = lowered.find(" is ")
        while index != -1:
            thing = world.find_by_name(input[:index])
            if thing is not None and thing.name.value is not None:
                for field, value in parse_value(thing, input[index + 4 :].strip()):
                    candidates.append(
                        cls(action=EditAction.EDIT, name=thing.name.value, field=field, value=value)
                    )
            index = lowered.find(" is ", index + 1)

        if len(candidates) == 1:
            return candidates[0], []
        return None, list(candidates)

    @classmethod
    def _parse_unlock(cls, rest: str, context: AppContext) -> list[EditCommand]:
        thing = context.world.find_by_name(rest)
        if thing is not None and thing.name.value is not None:
            return [cls(action=EditAction.UNLOCK, name=thing.name.value)]

        name, _, field = rest.rpartition(" ")
        thing = context.world.find_by_name(name) if name else None
        if thing is None or thing.name.value is None:
            return []
        field = field.lower()
        if field not in thing.fields():
            return []
        return [cls(action=EditAction.UNLOCK, name=thing.name.value, field=field)]

    @classmethod
    def autocomplete(cls, input: str, context: AppContext) -> list[Suggestion]:
        suggestions = [
            Suggestion("regenerate", "reroll unlocked fields"),
            Suggestion("unlock", "let a field change again"),
        ]

        for thing in context.world.things():
            name = thing.name.value
            if name is None:
                continue
            if starts_with_ci(input, f"{name} is "):
                suggestions.extend(
                    Suggestion(_render_edit(name, field, value), f"set {field}")
                    for field, value in _value_choices(thing)
                )
            elif starts_with_ci(input, "regenerate "):
                suggestions.append(Suggestion(f"regenerate {name}", "reroll unlocked fields"))
            elif starts_with_ci(input, "unlock "):
                suggestions.append(Suggestion(f"unlock {name}", "unlock every field"))
                suggestions.extend(
                    Suggestion(f"unlock {name} {field}", f"unlock {field}")
                    for field in thing.fields()
                )

        return suggestions

    async def run(self, input: str, context: AppContext) -> CommandResult:
        thing = context.world.find_by_name(self.name)
        if thing is None:
            return CommandResult(success=False, output=f'There is no entity named "{self.name}".')

        if self.action == EditAction.REGENERATE:
            try:
                taken = [name for name, _ in context.world.names() if name != thing.name.value]
                regenerate_unique(thing, context.rng, context.demographics, taken)
            except ConfigurationError as e:
                logger.error("Regeneration failed for %s: %s", thing.id, e)
                return CommandResult(success=False, output=f"Couldn't regenerate that: {e}")
            message = "Unlocked fields have been regenerated."
        elif self.action == EditAction.UNLOCK:
            fields = thing.fields()
            targets = [fields[self.field]] if self.field else list(fields.values())
            for field in targets:
                field.unlock()
            what = f"The {self.field} of {self.name} is" if self.field else f"All of {self.name} is"
            message = f"{what} unlocked and will change on the next `regenerate`."
        else:
            if self.field == "name":
                other = context.world.find_by_name(self.value or "")
                if other is not None and other.id != thing.id:
                    return CommandResult(
                        success=False,
                        output=f"There is already an entity named {other.name.value}.",
                    )
            self._apply(thing)
            message = f"{thing.name.value}'s {self.field} is now locked as {self.value}."

        warnings = await persist(thing, context) if context.is_saved(thing.id) else []
        return CommandResult(
            output=f"{describe_thing(thing, context)}\n\n_{message}_",
            warnings=warnings,
        )

    def _apply(self, thing: Thing) -> None:
        """Set and lock the field named by this command."""
        value = self.value or ""
        if self.field == "name":
            thing.name.set(value)
        elif isinstance(thing, Npc):
            if self.field == "species":
                thing.species.set(Species(value))
            elif self.field == "gender":
                thing.gender.set(Gender(value))
            elif self.field == "age":
                thing.age.set(Age(value))
        elif isinstance(thing, Location):
            thing.subtype.set(LocationType(value))
        else:
            thing.subtype.set(RegionType(value))

    def __str__(self) -> str:
        if self.action == EditAction.REGENERATE:
            return f"regenerate {self.name}"
        elif self.action == EditAction.UNLOCK:
            return f"unlock {self.name} {self.field}" if self.field else f"unlock {self.name}"
        return _render_edit(self.name, self.field or "", self.value or "")
