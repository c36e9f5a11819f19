"""
Core data models for initiative.

Every generated attribute is a lockable Field. Entities (NPCs, locations,
regions) are pydantic models held by the World registry and linked by id.
"""

from initiative.models.demographics import ConfigurationError, Demographics
from initiative.models.field import Field
from initiative.models.npc import Age, Gender, Npc, Size, Species
from initiative.models.place import Location, LocationType, Region, RegionType
from initiative.models.world import ROOT_REGION_ID, Thing, ThingType, World

__all__ = [
    # Field
    "Field",
    # Demographics
    "Demographics",
    "ConfigurationError",
    # NPC
    "Npc",
    "Species",
    "Gender",
    "Age",
    "Size",
    # Places
    "Location",
    "LocationType",
    "Region",
    "RegionType",
    # World
    "World",
    "Thing",
    "ThingType",
    "ROOT_REGION_ID",
]
