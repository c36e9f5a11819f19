"""
Elf generation.

Elves go by a child name until they come of age, then choose an adult name
and take their family name.
"""

from __future__ import annotations

import random

from initiative.models.npc import Age, Gender, Size, Species
from initiative.services.species.base import (
    SpeciesGenerator,
    pick_first_name,
    roll,
    scale_for_age,
)

CHILD_NAMES = [
    "Ara", "Bryn", "Del", "Eryn", "Faen", "Innil", "Lael", "Mella", "Naill",
    "Naeris", "Phann", "Rael", "Rinn", "Sai", "Syllin", "Thia", "Vall",
]

FEMININE_NAMES = [
    "Adrie", "Althaea", "Anastrianna", "Andraste", "Antinua", "Bethrynna",
    "Birel", "Caelynn", "Drusilia", "Enna", "Felosial", "Ielenia", "Jelenneth",
    "Keyleth", "Leshanna", "Lia", "Meriele", "Mialee", "Naivara", "Quelenna",
    "Sariel", "Shanairra", "Silaqui", "Theirastra", "Thia", "Vadania", "Valanthe",
]

MASCULINE_NAMES = [
    "Adran", "Aelar", "Aramil", "Arannis", "Aust", "Beiro", "Berrian", "Carric",
    "Enialis", "Erdan", "Erevan", "Galinndan", "Hadarai", "Heian", "Himo",
    "Immeral", "Ivellios", "Laucian", "Mindartis", "Paelias", "Peren", "Quarion",
    "Riardon", "Rolen", "Soveliss", "Thamior", "Tharivol", "Theren", "Varis",
]

FAMILY_NAMES = [
    "Amakiir", "Amastacia", "Galanodel", "Holimion", "Ilphelkiir", "Liadon",
    "Meliamne", "Nailo", "Siannodel", "Xiloscient",
]


class ElfGenerator(SpeciesGenerator):
    species = Species.ELF

    @classmethod
    def gen_name(cls, rng: random.Random, age: Age, gender: Gender) -> str:
        if not age.is_grown():
            return rng.choice(CHILD_NAMES)
        first = pick_first_name(rng, gender, FEMININE_NAMES, MASCULINE_NAMES)
        return f"{first} {rng.choice(FAMILY_NAMES)}"

    @classmethod
    def gen_size(cls, rng: random.Random, age: Age, gender: Gender) -> Size:
        height_mod = roll(rng, 2, 10)
        height = 54 + height_mod
        weight = 90 + height_mod * roll(rng, 1, 4)
        if gender == Gender.FEMININE:
            height -= 1
        return scale_for_age(height, weight, age)
