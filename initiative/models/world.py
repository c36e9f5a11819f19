"""
World registry for initiative.

The World owns every generated entity, keyed by id. Entities refer to each
other only by id; lookups for missing ids return None.
"""

from __future__ import annotations

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from initiative.models.npc import Npc
from initiative.models.place import Location, Region, RegionType

Thing = Npc | Location | Region


class ThingType(str, Enum):
    """Entity categories held by the world."""

    NPC = "npc"
    LOCATION = "location"
    REGION = "region"

    @classmethod
    def of(cls, thing: Thing) -> ThingType:
        if isinstance(thing, Npc):
            return cls.NPC
        elif isinstance(thing, Location):
            return cls.LOCATION
        return cls.REGION


ROOT_REGION_ID = UUID(bytes=b"\xff" * 16)


def _root_regions() -> dict[UUID, Region]:
    root = Region(id=ROOT_REGION_ID)
    root.name.set("The World")
    root.subtype.set(RegionType.WORLD)
    return {root.id: root}


class World(BaseModel):
    """
    Registry of every entity in a session.

    Ids are unique per category for the life of the world. A root region
    named "The World" always exists.
    """

    regions: dict[UUID, Region] = Field(default_factory=_root_regions)
    locations: dict[UUID, Location] = Field(default_factory=dict)
    npcs: dict[UUID, Npc] = Field(default_factory=dict)

    def _registry(self, thing_type: ThingType) -> dict:
        return {
            ThingType.NPC: self.npcs,
            ThingType.LOCATION: self.locations,
            ThingType.REGION: self.regions,
        }[thing_type]

    def add(self, thing: Thing) -> None:
        """Add or replace an entity."""
        self._registry(ThingType.of(thing))[thing.id] = thing

    def get(self, thing_id: UUID) -> Thing | None:
        """Find an entity in any category."""
        for thing_type in ThingType:
            thing = self._registry(thing_type).get(thing_id)
            if thing is not None:
                return thing
        return None

    def remove(self, thing_id: UUID) -> Thing | None:
        """Remove an entity. The root region cannot be removed."""
        if thing_id == ROOT_REGION_ID:
            return None
        for thing_type in ThingType:
            thing = self._registry(thing_type).pop(thing_id, None)
            if thing is not None:
                return thing
        return None

    def things(self) -> list[Thing]:
        return [*self.npcs.values(), *self.locations.values(), *self.regions.values()]

    def find_by_name(self, name: str) -> Thing | None:
        """Case-insensitive name lookup across all categories."""
        name = name.strip().lower()
        for thing in self.things():
            if thing.name.value is not None and thing.name.value.lower() == name:
                return thing
        return None

    def names(self) -> list[tuple[str, ThingType]]:
        """Every named entity, for autocomplete."""
        return [
            (thing.name.value, ThingType.of(thing))
            for thing in self.things()
            if thing.name.value is not None
        ]

    def describe_relation(self, thing_id: UUID | None) -> str:
        """
        Render a reference to another entity.

        A reference to an id that is no longer in the world renders as
        "(missing)" rather than raising.
        """
        if thing_id is None:
            return "(none)"
        target = self.get(thing_id)
        if target is None:
            return "(missing)"
        return target.name.value or "(unnamed)"
