"""
Per-species generation strategies.

Species is a closed enumeration; GENERATORS maps every member to exactly one
strategy, and regenerate() dispatches on an NPC's resolved species field.
"""

from __future__ import annotations

import logging
import random

from initiative.models.demographics import Demographics
from initiative.models.npc import Npc, Species
from initiative.services.species.base import SpeciesGenerator
from initiative.services.species.dwarf import DwarfGenerator
from initiative.services.species.elf import ElfGenerator
from initiative.services.species.human import HumanGenerator
from initiative.services.species.warforged import WarforgedGenerator

logger = logging.getLogger(__name__)

GENERATORS: dict[Species, type[SpeciesGenerator]] = {
    Species.HUMAN: HumanGenerator,
    Species.DWARF: DwarfGenerator,
    Species.ELF: ElfGenerator,
    Species.WARFORGED: WarforgedGenerator,
}

_unhandled = set(Species) - set(GENERATORS)
if _unhandled:
    raise RuntimeError(f"No generator for species: {sorted(s.value for s in _unhandled)}")


def get_generator(species: Species) -> type[SpeciesGenerator]:
    return GENERATORS[species]


def regenerate(rng: random.Random, demographics: Demographics, npc: Npc) -> None:
    """Run the strategy for the NPC's species. Skips if species is unknown."""
    species = npc.species.value
    if species is None:
        logger.debug("Skipping species generation for %s: no species", npc.id)
        return
    get_generator(species).regenerate(rng, demographics, npc)


__all__ = [
    "GENERATORS",
    "SpeciesGenerator",
    "DwarfGenerator",
    "ElfGenerator",
    "HumanGenerator",
    "WarforgedGenerator",
    "get_generator",
    "regenerate",
]
