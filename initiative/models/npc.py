"""
NPC model for initiative.

An Npc is a bundle of lockable fields. Species selects the generation
strategy; gender and age must be known before name and size can be generated.
"""

from __future__ import annotations

from enum import Enum
from uuid import UUID, uuid4

import pydantic
from pydantic import BaseModel

from initiative.models.field import Field


class Species(str, Enum):
    """Playable lineages. Each has its own generation strategy."""

    HUMAN = "human"
    DWARF = "dwarf"
    ELF = "elf"
    WARFORGED = "warforged"

    @classmethod
    def parse(cls, text: str) -> Species | None:
        """Case-insensitive lookup by name."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class Gender(str, Enum):
    """Gender identity, used for pronouns and name selection."""

    FEMININE = "feminine"
    MASCULINE = "masculine"
    NONBINARY = "nonbinary"
    NEUTER = "neuter"

    @classmethod
    def parse(cls, text: str) -> Gender | None:
        text = text.strip().lower()
        aliases = {
            "female": cls.FEMININE,
            "woman": cls.FEMININE,
            "male": cls.MASCULINE,
            "man": cls.MASCULINE,
            "trans": cls.NONBINARY,
            "enby": cls.NONBINARY,
            "it": cls.NEUTER,
        }
        if text in aliases:
            return aliases[text]
        try:
            return cls(text)
        except ValueError:
            return None

    def pronouns(self) -> str:
        return {
            Gender.FEMININE: "she/her",
            Gender.MASCULINE: "he/him",
            Gender.NONBINARY: "they/them",
            Gender.NEUTER: "it",
        }[self]

    def __str__(self) -> str:
        return self.value


class Age(str, Enum):
    """Life stage. Species strategies translate it to years and stature."""

    CHILD = "child"
    ADOLESCENT = "adolescent"
    YOUNG_ADULT = "young adult"
    ADULT = "adult"
    MIDDLE_AGED = "middle-aged"
    ELDERLY = "elderly"

    @classmethod
    def parse(cls, text: str) -> Age | None:
        text = text.strip().lower().replace("_", " ")
        aliases = {"kid": cls.CHILD, "teen": cls.ADOLESCENT, "old": cls.ELDERLY}
        if text in aliases:
            return aliases[text]
        try:
            return cls(text)
        except ValueError:
            return None

    def is_grown(self) -> bool:
        return self not in (Age.CHILD, Age.ADOLESCENT)

    def __str__(self) -> str:
        return self.value


class Size(BaseModel):
    """Physical size of a creature."""

    height_inches: int = pydantic.Field(ge=1)
    weight_lbs: int = pydantic.Field(ge=1)

    model_config = {"frozen": True}

    @property
    def category(self) -> str:
        if self.height_inches < 24:
            return "tiny"
        elif self.height_inches < 48:
            return "small"
        return "medium"

    def __str__(self) -> str:
        feet, inches = divmod(self.height_inches, 12)
        return f"{self.category} ({feet}'{inches}\", {self.weight_lbs} lbs)"


class Npc(BaseModel):
    """
    A generated non-player character.

    All attributes are Fields. location_id is a non-owning reference into the
    world's location registry and may dangle.
    """

    id: UUID = pydantic.Field(default_factory=uuid4)
    name: Field[str] = pydantic.Field(default_factory=Field[str])
    species: Field[Species] = pydantic.Field(default_factory=Field[Species])
    gender: Field[Gender] = pydantic.Field(default_factory=Field[Gender])
    age: Field[Age] = pydantic.Field(default_factory=Field[Age])
    size: Field[Size] = pydantic.Field(default_factory=Field[Size])
    location_id: Field[UUID] = pydantic.Field(default_factory=Field[UUID])

    def fields(self) -> dict[str, Field]:
        """Named fields, in display order."""
        return {
            "name": self.name,
            "species": self.species,
            "gender": self.gender,
            "age": self.age,
            "size": self.size,
            "location": self.location_id,
        }

    def lock_all(self) -> None:
        for field in self.fields().values():
            field.lock()

    def summary(self) -> str:
        """One-line summary, e.g. "Ana Lovell (adult human, she/her)"."""
        details = " ".join(str(f) for f in (self.age, self.species) if f.is_some())
        if self.gender.value is not None:
            pronouns = self.gender.value.pronouns()
            details = f"{details}, {pronouns}" if details else pronouns
        name = self.name.value or "Unnamed NPC"
        return f"{name} ({details})" if details else name

    def __str__(self) -> str:
        lines = [f"# {self.name.value or 'Unnamed NPC'}"]
        description = " ".join(str(f) for f in (self.age, self.species) if f.is_some())
        if description:
            lines.append(f"*{description}*")
        if self.gender.value is not None:
            lines.append(f"**Gender:** {self.gender} ({self.gender.value.pronouns()})")
        if self.size.is_some():
            lines.append(f"**Size:** {self.size}")
        return "\n\n".join(lines)
