"""
Place models for initiative: locations and regions.

Locations are points of interest (a cave, an inn); regions are areas that
contain them (a forest, a continent). Both reference their parent region by
id only.
"""

from __future__ import annotations

from enum import Enum
from uuid import UUID, uuid4

import pydantic
from pydantic import BaseModel

from initiative.models.field import Field


class LocationType(str, Enum):
    """Kinds of location that can be generated."""

    # Geographical features
    BEACH = "beach"
    CANYON = "canyon"
    CAVE = "cave"
    CHASM = "chasm"
    GLACIER = "glacier"
    GROVE = "grove"
    HILL = "hill"
    ISLAND = "island"
    MONOLITH = "monolith"
    OASIS = "oasis"
    PASS = "pass"
    PENINSULA = "peninsula"
    RIDGE = "ridge"
    RIFT = "rift"
    RIVER = "river"
    TREE = "tree"
    VALLEY = "valley"

    # Buildings
    INN = "inn"
    TEMPLE = "temple"
    MARKET = "market"

    @classmethod
    def parse(cls, text: str) -> LocationType | None:
        text = text.strip().lower()
        aliases = {
            "gorge": cls.CANYON,
            "cavern": cls.CAVE,
            "vale": cls.VALLEY,
            "tavern": cls.INN,
            "shrine": cls.TEMPLE,
            "shop": cls.MARKET,
        }
        if text in aliases:
            return aliases[text]
        try:
            return cls(text)
        except ValueError:
            return None

    @classmethod
    def words(cls) -> list[str]:
        return [member.value for member in cls]

    def is_building(self) -> bool:
        return self in (LocationType.INN, LocationType.TEMPLE, LocationType.MARKET)

    @property
    def emoji(self) -> str | None:
        return _LOCATION_EMOJI.get(self)

    def __str__(self) -> str:
        return self.value


_LOCATION_EMOJI: dict[LocationType, str] = {
    LocationType.BEACH: "🏖",
    LocationType.CANYON: "🏞",
    LocationType.CHASM: "🏞",
    LocationType.RIVER: "🏞",
    LocationType.VALLEY: "🏞",
    LocationType.GLACIER: "🏔",
    LocationType.GROVE: "🌳",
    LocationType.TREE: "🌳",
    LocationType.HILL: "⛰",
    LocationType.PASS: "⛰",
    LocationType.RIDGE: "⛰",
    LocationType.ISLAND: "🏝",
    LocationType.PENINSULA: "🏝",
    LocationType.MONOLITH: "🗿",
    LocationType.OASIS: "🌴",
    LocationType.INN: "🏨",
    LocationType.TEMPLE: "🛕",
    LocationType.MARKET: "🛒",
}


class RegionType(str, Enum):
    """Kinds of region that can be generated."""

    ARCHIPELAGO = "archipelago"
    BARRENS = "barrens"
    COASTLINE = "coastline"
    CONTINENT = "continent"
    DESERT = "desert"
    FOREST = "forest"
    JUNGLE = "jungle"
    LAKE = "lake"
    MARSH = "marsh"
    MESA = "mesa"
    MOOR = "moor"
    MOUNTAIN = "mountain"
    OCEAN = "ocean"
    PLAIN = "plain"
    PLATEAU = "plateau"
    REEF = "reef"
    SEA = "sea"
    SWAMP = "swamp"
    TUNDRA = "tundra"
    WASTELAND = "wasteland"
    WORLD = "world"

    @classmethod
    def parse(cls, text: str) -> RegionType | None:
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None

    @classmethod
    def words(cls) -> list[str]:
        return [member.value for member in cls]

    @property
    def emoji(self) -> str | None:
        return _REGION_EMOJI.get(self)

    def __str__(self) -> str:
        return self.value


_REGION_EMOJI: dict[RegionType, str] = {
    RegionType.ARCHIPELAGO: "🏝",
    RegionType.BARRENS: "🏜",
    RegionType.DESERT: "🏜",
    RegionType.WASTELAND: "🏜",
    RegionType.COASTLINE: "🌊",
    RegionType.LAKE: "🌊",
    RegionType.SEA: "🌊",
    RegionType.OCEAN: "🌊",
    RegionType.FOREST: "🌳",
    RegionType.JUNGLE: "🌳",
    RegionType.MOUNTAIN: "⛰",
    RegionType.TUNDRA: "❄",
    RegionType.WORLD: "🌐",
}


class Location(BaseModel):
    """A generated point of interest."""

    id: UUID = pydantic.Field(default_factory=uuid4)
    name: Field[str] = pydantic.Field(default_factory=Field[str])
    subtype: Field[LocationType] = pydantic.Field(default_factory=Field[LocationType])
    description: Field[str] = pydantic.Field(default_factory=Field[str])
    region_id: Field[UUID] = pydantic.Field(default_factory=Field[UUID])

    def fields(self) -> dict[str, Field]:
        return {
            "name": self.name,
            "subtype": self.subtype,
            "description": self.description,
            "region": self.region_id,
        }

    def lock_all(self) -> None:
        for field in self.fields().values():
            field.lock()

    def summary(self) -> str:
        name = self.name.value or "Unnamed location"
        subtype = self.subtype.value
        if subtype is None:
            return name
        prefix = f"{subtype.emoji} " if subtype.emoji else ""
        return f"{prefix}{name} ({subtype.value})"

    def __str__(self) -> str:
        lines = [f"# {self.name.value or 'Unnamed location'}"]
        if self.subtype.is_some():
            lines.append(f"*{self.subtype}*")
        if self.description.is_some():
            lines.append(str(self.description))
        return "\n\n".join(lines)


class Region(BaseModel):
    """A generated area. parent_id points at the containing region, if any."""

    id: UUID = pydantic.Field(default_factory=uuid4)
    name: Field[str] = pydantic.Field(default_factory=Field[str])
    subtype: Field[RegionType] = pydantic.Field(default_factory=Field[RegionType])
    parent_id: Field[UUID] = pydantic.Field(default_factory=Field[UUID])

    def fields(self) -> dict[str, Field]:
        return {
            "name": self.name,
            "subtype": self.subtype,
            "parent": self.parent_id,
        }

    def lock_all(self) -> None:
        for field in self.fields().values():
            field.lock()

    def summary(self) -> str:
        name = self.name.value or "Unnamed region"
        subtype = self.subtype.value
        if subtype is None:
            return name
        prefix = f"{subtype.emoji} " if subtype.emoji else ""
        return f"{prefix}{name} ({subtype.value})"

    def __str__(self) -> str:
        lines = [f"# {self.name.value or 'Unnamed region'}"]
        if self.subtype.is_some():
            lines.append(f"*{self.subtype}*")
        return "\n\n".join(lines)
