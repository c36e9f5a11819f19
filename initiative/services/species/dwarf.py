"""Dwarf generation: given name plus clan name; short and heavy."""

from __future__ import annotations

import random

from initiative.models.npc import Age, Gender, Size, Species
from initiative.services.species.base import (
    SpeciesGenerator,
    pick_first_name,
    roll,
    scale_for_age,
)

FEMININE_NAMES = [
    "Amber", "Bardryn", "Dagnal", "Diesa", "Eldeth", "Gunnloda", "Gurdis",
    "Helja", "Hlin", "Kathra", "Kristryd", "Ilde", "Liftrasa", "Mardred",
    "Riswynn", "Sannl", "Torbera", "Torgga", "Vistra",
]

MASCULINE_NAMES = [
    "Adrik", "Baern", "Barendd", "Brottor", "Dain", "Darrak", "Eberk", "Einkil",
    "Fargrim", "Gardain", "Harbek", "Kildrak", "Morgran", "Orsik", "Oskar",
    "Rangrim", "Rurik", "Taklinn", "Thoradin", "Tordek", "Ulfgar", "Vondal",
]

CLAN_NAMES = [
    "Balderk", "Battlehammer", "Brawnanvil", "Dankil", "Fireforge", "Frostbeard",
    "Gorunn", "Holderhek", "Ironfist", "Loderr", "Lutgehr", "Rumnaheim",
    "Strakeln", "Torunn", "Ungart",
]


class DwarfGenerator(SpeciesGenerator):
    species = Species.DWARF

    @classmethod
    def gen_name(cls, rng: random.Random, age: Age, gender: Gender) -> str:
        first = pick_first_name(rng, gender, FEMININE_NAMES, MASCULINE_NAMES)
        return f"{first} {rng.choice(CLAN_NAMES)}"

    @classmethod
    def gen_size(cls, rng: random.Random, age: Age, gender: Gender) -> Size:
        height_mod = roll(rng, 2, 4)
        height = 48 + height_mod
        weight = 130 + height_mod * roll(rng, 2, 6)
        if gender == Gender.FEMININE:
            height -= 1
            weight = round(weight * 0.9)
        return scale_for_age(height, weight, age)
