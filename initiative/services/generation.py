"""
Entity Generation Service for initiative.

Creates NPCs, locations and regions, and regenerates them in place. Every
write goes through Field.replace_with, so locked fields are never touched.
The random source is always passed in; nothing here keeps global state.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Collection
from uuid import UUID

from initiative.models.demographics import ConfigurationError, Demographics
from initiative.models.npc import Npc, Species
from initiative.models.place import Location, LocationType, Region, RegionType
from initiative.models.world import ROOT_REGION_ID, Thing
from initiative.services import species as species_strategies

logger = logging.getLogger(__name__)


# =============================================================================
# NPCs
# =============================================================================


def generate_npc(
    rng: random.Random,
    demographics: Demographics,
    species: Species | None = None,
) -> Npc:
    """
    Generate a new NPC.

    Args:
        rng: Random source
        demographics: Tables used for species, gender and age
        species: Force a species; the field is locked so regeneration keeps it

    Returns:
        A fully generated NPC. Only the species field is locked, and only
        when it was forced.
    """
    npc = Npc()
    if species is not None:
        forced = _only_species(demographics, species)
        npc.species.set(_sample_species(rng, forced))
    regenerate_npc(npc, rng, demographics)
    return npc


def regenerate_npc(npc: Npc, rng: random.Random, demographics: Demographics) -> None:
    """Regenerate every unlocked NPC field in place."""
    npc.species.replace_with(lambda _: _sample_species(rng, demographics))
    species_strategies.regenerate(rng, demographics, npc)


def _only_species(demographics: Demographics, species: Species) -> Demographics:
    """Shift the species table so that only one species can be drawn."""
    for other in Species:
        weight = 1.0 if other == species else 0.0
        demographics = demographics.with_weight("species", other.value, weight)
    return demographics


def _sample_species(rng: random.Random, demographics: Demographics) -> Species:
    choice = demographics.weighted_choice(rng, "species")
    species = Species.parse(choice)
    if species is None:
        raise ConfigurationError(f"Unknown species '{choice}' in demographics")
    return species


# =============================================================================
# Locations
# =============================================================================

LOCATION_ADJECTIVES = [
    "Ashen", "Broken", "Crimson", "Drowned", "Echoing", "Forgotten", "Gilded",
    "Hollow", "Howling", "Misty", "Silent", "Sunken", "Twisted", "Whispering",
    "Windswept",
]

INN_ADJECTIVES = [
    "Bent", "Dancing", "Drunken", "Golden", "Jolly", "Laughing", "Prancing",
    "Rusty", "Sleeping", "Wandering",
]

INN_NOUNS = [
    "Badger", "Dragon", "Flagon", "Goose", "Griffin", "Lantern", "Mug", "Pony",
    "Stag", "Tankard",
]

TEMPLE_DEDICATIONS = [
    "the Dawn", "the Eternal Flame", "the Harvest", "the Moon", "the Silent Watch",
    "the Storm Lord", "the Two Rivers",
]

MARKET_OWNERS = ["Ashdown", "Carver", "Greaves", "Hollis", "Kettle", "Penrose", "Quill"]

MARKET_GOODS = ["Curiosities", "Goods", "Provisions", "Sundries", "Wares", "Emporium"]

LOCATION_DESCRIPTIONS: dict[str, list[str]] = {
    "building": [
        "Lamplight spills from the windows onto the street.",
        "The door sticks, and the floorboards creak underfoot.",
        "It is busier than it looks from outside.",
        "A faded sign hangs crooked above the entrance.",
    ],
    "natural": [
        "Few travellers come this way, and fewer stay.",
        "Local stories disagree about what happened here.",
        "The wind carries a faint smell of smoke.",
        "Old markers suggest someone once claimed this place.",
    ],
}


def generate_location(
    rng: random.Random,
    subtype: LocationType | None = None,
    region_id: UUID | None = ROOT_REGION_ID,
) -> Location:
    """Generate a new location, optionally forcing its type."""
    location = Location()
    if subtype is not None:
        location.subtype.set(subtype)
    if region_id is not None:
        location.region_id.replace_with(lambda _: region_id)
    regenerate_location(location, rng)
    return location


def regenerate_location(location: Location, rng: random.Random) -> None:
    """Regenerate every unlocked location field in place."""
    location.subtype.replace_with(lambda _: rng.choice(list(LocationType)))

    subtype = location.subtype.value
    if subtype is None:
        logger.debug("Skipping name for location %s: no subtype", location.id)
        return

    location.name.replace_with(lambda _: _location_name(rng, subtype))
    kind = "building" if subtype.is_building() else "natural"
    location.description.replace_with(lambda _: rng.choice(LOCATION_DESCRIPTIONS[kind]))


def _location_name(rng: random.Random, subtype: LocationType) -> str:
    if subtype == LocationType.INN:
        return f"The {rng.choice(INN_ADJECTIVES)} {rng.choice(INN_NOUNS)}"
    elif subtype == LocationType.TEMPLE:
        return f"Temple of {rng.choice(TEMPLE_DEDICATIONS)}"
    elif subtype == LocationType.MARKET:
        return f"{rng.choice(MARKET_OWNERS)}'s {rng.choice(MARKET_GOODS)}"
    return f"{rng.choice(LOCATION_ADJECTIVES)} {subtype.value.title()}"


# =============================================================================
# Regions
# =============================================================================

REGION_PREFIXES = [
    "Amber", "Ash", "Black", "Cold", "Ember", "Frost", "Grey", "Iron", "Raven",
    "Salt", "Shadow", "Storm", "Thorn", "Wolf",
]

REGION_SUFFIXES = ["fall", "hold", "mere", "moor", "reach", "vale", "wold", "wood"]


def generate_region(
    rng: random.Random,
    subtype: RegionType | None = None,
    parent_id: UUID | None = ROOT_REGION_ID,
) -> Region:
    """Generate a new region, optionally forcing its type."""
    region = Region()
    if subtype is not None:
        region.subtype.set(subtype)
    if parent_id is not None:
        region.parent_id.replace_with(lambda _: parent_id)
    regenerate_region(region, rng)
    return region


def regenerate_region(region: Region, rng: random.Random) -> None:
    """Regenerate every unlocked region field in place."""
    # The root "world" type is reserved for the registry's root region.
    choices = [subtype for subtype in RegionType if subtype != RegionType.WORLD]
    region.subtype.replace_with(lambda _: rng.choice(choices))

    subtype = region.subtype.value
    if subtype is None:
        logger.debug("Skipping name for region %s: no subtype", region.id)
        return

    region.name.replace_with(lambda _: _region_name(rng, subtype))


def _region_name(rng: random.Random, subtype: RegionType) -> str:
    stem = f"{rng.choice(REGION_PREFIXES)}{rng.choice(REGION_SUFFIXES)}"
    if rng.random() < 0.5:
        return f"The {stem} {subtype.value.title()}"
    return f"{subtype.value.title()} of {stem}"


# =============================================================================
# Generic entry point
# =============================================================================


def regenerate(thing: Thing, rng: random.Random, demographics: Demographics) -> None:
    """Regenerate any entity in place, respecting its locked fields."""
    if isinstance(thing, Npc):
        regenerate_npc(thing, rng, demographics)
    elif isinstance(thing, Location):
        regenerate_location(thing, rng)
    else:
        regenerate_region(thing, rng)


MAX_NAME_ATTEMPTS = 20


def numbered_name(name: str, taken: Collection[str]) -> str:
    """The name with the lowest free number appended, e.g. "Onyx 2"."""
    lowered = {t.lower() for t in taken}
    number = 2
    while f"{name} {number}".lower() in lowered:
        number += 1
    return f"{name} {number}"


def regenerate_unique(
    thing: Thing,
    rng: random.Random,
    demographics: Demographics,
    taken: Collection[str],
) -> None:
    """
    Regenerate an entity so that its name is not one of the taken names.

    Rerolls up to MAX_NAME_ATTEMPTS times, then numbers the last name drawn.
    A locked name is left alone.
    """
    lowered = {t.lower() for t in taken}
    for _ in range(MAX_NAME_ATTEMPTS):
        regenerate(thing, rng, demographics)
        name = thing.name.value
        if name is None or thing.name.is_locked() or name.lower() not in lowered:
            return
    logger.debug("No free name for %s after %d attempts", thing.id, MAX_NAME_ATTEMPTS)
    thing.name.replace_with(lambda name: numbered_name(name or "", lowered))
