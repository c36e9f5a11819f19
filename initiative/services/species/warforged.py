"""
Warforged generation.

Warforged take a single descriptive name and are built at full size, so
neither age nor gender changes their name or stature.
"""

from __future__ import annotations

import random

from initiative.models.npc import Age, Gender, Size, Species
from initiative.services.species.base import SpeciesGenerator, roll

NAMES = [
    "Anchor", "Banner", "Bastion", "Blade", "Blue", "Bow", "Cart", "Church",
    "Crunch", "Crystal", "Dagger", "Dent", "Five", "Glaive", "Hammer", "Iron",
    "Lucky", "Mace", "Oak", "Onyx", "Pants", "Pierce", "Red", "Rod", "Rusty",
    "Scout", "Seven", "Shield", "Slate", "Spark", "Spike", "Stone", "Stubby",
    "Titan", "Vault", "Wreck",
]


class WarforgedGenerator(SpeciesGenerator):
    species = Species.WARFORGED

    @classmethod
    def gen_name(cls, rng: random.Random, age: Age, gender: Gender) -> str:
        return rng.choice(NAMES)

    @classmethod
    def gen_size(cls, rng: random.Random, age: Age, gender: Gender) -> Size:
        height_mod = roll(rng, 2, 6)
        return Size(height_inches=70 + height_mod, weight_lbs=270 + height_mod * 4)
