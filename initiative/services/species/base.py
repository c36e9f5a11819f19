"""
Shared contract for per-species generation strategies.

Each species implements gender, age, name and size generation. The common
regenerate() driver fills gender and age first, because name and size both
depend on them.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import ClassVar

from initiative.models.demographics import ConfigurationError, Demographics
from initiative.models.npc import Age, Gender, Npc, Size, Species

logger = logging.getLogger(__name__)


def roll(rng: random.Random, count: int, sides: int) -> int:
    """Sum of count dice with the given number of sides."""
    return sum(rng.randint(1, sides) for _ in range(count))


def pick_first_name(
    rng: random.Random,
    gender: Gender,
    feminine: list[str],
    masculine: list[str],
) -> str:
    """Choose from the gendered list, or from both for other genders."""
    if gender == Gender.FEMININE:
        return rng.choice(feminine)
    elif gender == Gender.MASCULINE:
        return rng.choice(masculine)
    return rng.choice(feminine + masculine)


def scale_for_age(height: int, weight: int, age: Age) -> Size:
    """Shrink an adult size down for children and adolescents."""
    if age == Age.CHILD:
        height, weight = round(height * 0.6), round(weight * 0.35)
    elif age == Age.ADOLESCENT:
        height, weight = round(height * 0.9), round(weight * 0.8)
    return Size(height_inches=max(height, 1), weight_lbs=max(weight, 1))


class SpeciesGenerator(ABC):
    """
    Generation strategy for one species.

    Subclasses set `species` and implement gen_name and gen_size. Gender and
    age are drawn from the demographics tables for the species, falling back
    to the general tables.
    """

    species: ClassVar[Species]

    @classmethod
    def regenerate(cls, rng: random.Random, demographics: Demographics, npc: Npc) -> None:
        """
        Fill every unlocked field this strategy is responsible for.

        Name and size are skipped when gender or age is still missing
        (for instance a field locked while empty).
        """
        npc.gender.replace_with(lambda _: cls.gen_gender(rng, demographics))
        npc.age.replace_with(lambda _: cls.gen_age(rng, demographics))

        gender = npc.gender.value
        age = npc.age.value
        if gender is None or age is None:
            logger.debug(
                "Skipping name and size for %s: gender=%s age=%s",
                npc.id,
                gender,
                age,
            )
            return

        npc.name.replace_with(lambda _: cls.gen_name(rng, age, gender))
        npc.size.replace_with(lambda _: cls.gen_size(rng, age, gender))

    @classmethod
    def gen_gender(cls, rng: random.Random, demographics: Demographics) -> Gender:
        choice = demographics.weighted_choice(rng, f"gender:{cls.species.value}")
        gender = Gender.parse(choice)
        if gender is None:
            raise ConfigurationError(f"Unknown gender '{choice}' in demographics")
        return gender

    @classmethod
    def gen_age(cls, rng: random.Random, demographics: Demographics) -> Age:
        choice = demographics.weighted_choice(rng, f"age:{cls.species.value}")
        age = Age.parse(choice)
        if age is None:
            raise ConfigurationError(f"Unknown age '{choice}' in demographics")
        return age

    @classmethod
    @abstractmethod
    def gen_name(cls, rng: random.Random, age: Age, gender: Gender) -> str:
        """Generate a name appropriate to age and gender."""

    @classmethod
    @abstractmethod
    def gen_size(cls, rng: random.Random, age: Age, gender: Gender) -> Size:
        """Generate height and weight appropriate to age and gender."""
