"""
World commands: generate NPCs, locations and regions.

"npc" generates a person of any species; naming a species, location type or
region type generates one of that kind with the type locked in.
"""

from __future__ import annotations

import logging

from initiative.engine.commands.base import (
    CommandFamily,
    ParseResult,
    describe_thing,
    eq_ci,
    strip_article,
)
from initiative.engine.context import AppContext
from initiative.engine.models import CommandResult, Suggestion
from initiative.models import (
    ConfigurationError,
    LocationType,
    RegionType,
    Species,
    Thing,
    ThingType,
)
from initiative.services import (
    generate_location,
    generate_npc,
    generate_region,
    regenerate_unique,
)

logger = logging.getLogger(__name__)


class WorldCommand(CommandFamily):
    """Generate a new entity, optionally of a specific type."""

    thing_type: ThingType
    species: Species | None = None
    location_type: LocationType | None = None
    region_type: RegionType | None = None

    @classmethod
    def parse_input(cls, input: str, context: AppContext) -> ParseResult:
        exact_match = cls._parse_word(input)

        fuzzy_matches: list[CommandFamily] = []
        if exact_match is None:
            stripped = strip_article(input)
            if stripped != input:
                fuzzy = cls._parse_word(stripped)
                if fuzzy is not None:
                    fuzzy_matches.append(fuzzy)

        return exact_match, fuzzy_matches

    @classmethod
    def _parse_word(cls, word: str) -> WorldCommand | None:
        if eq_ci(word, "npc"):
            return cls(thing_type=ThingType.NPC)
        elif eq_ci(word, "location"):
            return cls(thing_type=ThingType.LOCATION)
        elif eq_ci(word, "region"):
            return cls(thing_type=ThingType.REGION)

        species = Species.parse(word)
        if species is not None:
            return cls(thing_type=ThingType.NPC, species=species)

        location_type = LocationType.parse(word)
        if location_type is not None:
            return cls(thing_type=ThingType.LOCATION, location_type=location_type)

        region_type = RegionType.parse(word)
        # The world itself is the registry's root and is never generated.
        if region_type is not None and region_type != RegionType.WORLD:
            return cls(thing_type=ThingType.REGION, region_type=region_type)

        return None

    @classmethod
    def autocomplete(cls, input: str, context: AppContext) -> list[Suggestion]:
        suggestions = [
            Suggestion("npc", "create a person"),
            Suggestion("location", "create a location"),
            Suggestion("region", "create a region"),
        ]
        suggestions.extend(Suggestion(s.value, f"create a {s.value}") for s in Species)
        suggestions.extend(Suggestion(word, "create a location") for word in LocationType.words())
        suggestions.extend(
            Suggestion(word, "create a region")
            for word in RegionType.words()
            if word != RegionType.WORLD.value
        )
        return suggestions

    async def run(self, input: str, context: AppContext) -> CommandResult:
        try:
            thing = self._generate(context)
        except ConfigurationError as e:
            logger.error("Generation failed for %r: %s", str(self), e)
            return CommandResult(success=False, output=f"Couldn't generate that: {e}")

        context.world.add(thing)
        logger.info("Generated %s %s", ThingType.of(thing).value, thing.id)

        name = thing.name.value or "it"
        return CommandResult(
            output=f"{describe_thing(thing, context)}\n\n"
            f"_{name} has not yet been saved. Use `save {name}` to save it to your journal._"
        )

    def _generate(self, context: AppContext) -> Thing:
        if self.thing_type == ThingType.NPC:
            thing = generate_npc(context.rng, context.demographics, species=self.species)
        elif self.thing_type == ThingType.LOCATION:
            thing = generate_location(context.rng, subtype=self.location_type)
        else:
            thing = generate_region(context.rng, subtype=self.region_type)

        # Commands find entities by name, so a new one never reuses a name.
        taken = [name for name, _ in context.world.names()]
        if context.world.find_by_name(thing.name.value or "") is not None:
            regenerate_unique(thing, context.rng, context.demographics, taken)
        return thing

    def __str__(self) -> str:
        subtype = self.species or self.location_type or self.region_type
        return subtype.value if subtype is not None else self.thing_type.value
