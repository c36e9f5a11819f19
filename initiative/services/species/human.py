"""Human generation: given name plus family name, PHB height and weight."""

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
    "Adela", "Brenna", "Catrin", "Della", "Edith", "Freya", "Gwen", "Hilde",
    "Ilsa", "Joan", "Kerra", "Liesel", "Mara", "Nessa", "Orla", "Pella",
    "Rowan", "Sabine", "Tamsin", "Wren",
]

MASCULINE_NAMES = [
    "Aldric", "Bram", "Cedric", "Dorran", "Edmund", "Falk", "Garrett", "Hugh",
    "Ivo", "Jory", "Kellan", "Lucan", "Marten", "Nils", "Osric", "Piers",
    "Roland", "Silas", "Tobin", "Walter",
]

SURNAMES = [
    "Ashdown", "Blackwood", "Carver", "Dunmore", "Fairweather", "Greaves",
    "Hollis", "Ingram", "Kettle", "Lovell", "Marsh", "Norwood", "Oakley",
    "Penrose", "Quill", "Redfern", "Stroud", "Thorne", "Underhill", "Weller",
]


class HumanGenerator(SpeciesGenerator):
    species = Species.HUMAN

    @classmethod
    def gen_name(cls, rng: random.Random, age: Age, gender: Gender) -> str:
        first = pick_first_name(rng, gender, FEMININE_NAMES, MASCULINE_NAMES)
        return f"{first} {rng.choice(SURNAMES)}"

    @classmethod
    def gen_size(cls, rng: random.Random, age: Age, gender: Gender) -> Size:
        height_mod = roll(rng, 2, 10)
        height = 56 + height_mod
        weight = 110 + height_mod * roll(rng, 2, 4)
        if gender == Gender.FEMININE:
            height -= 2
            weight = round(weight * 0.9)
        return scale_for_age(height, weight, age)
