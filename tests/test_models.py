"""Tests for entity models and the world registry."""

from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from initiative.models import (
    ROOT_REGION_ID,
    Age,
    Gender,
    Location,
    LocationType,
    Npc,
    Region,
    RegionType,
    Size,
    Species,
    ThingType,
    World,
)


def _named_npc(name: str) -> Npc:
    npc = Npc()
    npc.name.set(name)
    return npc


class TestEnums:
    """Test parsing of species, gender, age and place types."""

    def test_species_parse(self):
        assert Species.parse("Dwarf") == Species.DWARF
        assert Species.parse("goblin") is None

    def test_gender_aliases(self):
        assert Gender.parse("female") == Gender.FEMININE
        assert Gender.parse("MALE") == Gender.MASCULINE
        assert Gender.parse("nonbinary") == Gender.NONBINARY

    def test_gender_pronouns(self):
        assert Gender.FEMININE.pronouns() == "she/her"
        assert Gender.NONBINARY.pronouns() == "they/them"

    def test_age_parse(self):
        assert Age.parse("young adult") == Age.YOUNG_ADULT
        assert Age.parse("middle-aged") == Age.MIDDLE_AGED
        assert Age.parse("teen") == Age.ADOLESCENT

    def test_age_is_grown(self):
        assert not Age.CHILD.is_grown()
        assert Age.ELDERLY.is_grown()

    def test_location_type_aliases(self):
        assert LocationType.parse("tavern") == LocationType.INN
        assert LocationType.parse("shop") == LocationType.MARKET
        assert LocationType.INN.is_building()
        assert not LocationType.CAVE.is_building()

    def test_emoji(self):
        assert LocationType.INN.emoji == "🏨"
        assert RegionType.WORLD.emoji == "🌐"
        assert RegionType.MOOR.emoji is None


class TestSize:
    """Test the Size model."""

    def test_str(self):
        assert str(Size(height_inches=70, weight_lbs=170)) == "medium (5'10\", 170 lbs)"

    def test_category(self):
        assert Size(height_inches=40, weight_lbs=40).category == "small"
        assert Size(height_inches=12, weight_lbs=5).category == "tiny"

    def test_rejects_zero(self):
        with pytest.raises(ValidationError):
            Size(height_inches=0, weight_lbs=100)


class TestNpc:
    """Test NPC rendering and locking."""

    def test_empty_npc_renders(self):
        npc = Npc()
        assert str(npc) == "# Unnamed NPC"
        assert npc.summary() == "Unnamed NPC"

    def test_summary(self):
        npc = _named_npc("Mara Lovell")
        npc.age.replace_with(lambda _: Age.ADULT)
        npc.species.replace_with(lambda _: Species.HUMAN)
        npc.gender.replace_with(lambda _: Gender.FEMININE)
        assert npc.summary() == "Mara Lovell (adult human, she/her)"

    def test_str_includes_fields(self):
        npc = _named_npc("Onyx")
        npc.species.set(Species.WARFORGED)
        npc.gender.set(Gender.NEUTER)
        npc.size.set(Size(height_inches=76, weight_lbs=294))
        text = str(npc)
        assert text.startswith("# Onyx")
        assert "*warforged*" in text
        assert "**Gender:** neuter (it)" in text
        assert "**Size:** medium (6'4\", 294 lbs)" in text

    def test_lock_all(self):
        npc = Npc()
        npc.lock_all()
        assert all(field.is_locked() for field in npc.fields().values())

    def test_fields_names(self):
        assert list(Npc().fields()) == ["name", "species", "gender", "age", "size", "location"]


class TestWorld:
    """Test the world registry."""

    def test_root_region_exists(self):
        world = World()
        root = world.get(ROOT_REGION_ID)
        assert root is not None
        assert root.name.value == "The World"
        assert root.subtype.value == RegionType.WORLD
        assert root.name.is_locked()

    def test_add_and_get(self):
        world = World()
        npc = _named_npc("Bram")
        location = Location()
        world.add(npc)
        world.add(location)
        assert world.get(npc.id) is npc
        assert world.get(location.id) is location
        assert location.id in world.locations
        assert location.id not in world.npcs

    def test_get_missing(self):
        assert World().get(uuid4()) is None

    def test_find_by_name_ignores_case(self):
        world = World()
        npc = _named_npc("Mara Lovell")
        world.add(npc)
        assert world.find_by_name("mara lovell") is npc
        assert world.find_by_name("  MARA LOVELL ") is npc
        assert world.find_by_name("Mara") is None

    def test_names(self):
        world = World()
        world.add(_named_npc("Bram"))
        world.add(Npc())
        names = world.names()
        assert ("Bram", ThingType.NPC) in names
        assert ("The World", ThingType.REGION) in names
        assert len(names) == 2

    def test_remove(self):
        world = World()
        npc = _named_npc("Bram")
        world.add(npc)
        assert world.remove(npc.id) is npc
        assert world.get(npc.id) is None

    def test_root_cannot_be_removed(self):
        world = World()
        assert world.remove(ROOT_REGION_ID) is None
        assert world.get(ROOT_REGION_ID) is not None

    def test_dangling_reference_renders_missing(self):
        """A reference to a removed entity renders instead of failing."""
        world = World()
        region = Region()
        region.name.set("Ashfall Forest")
        location = Location()
        location.region_id.set(region.id)
        world.add(region)
        world.add(location)

        assert world.describe_relation(location.region_id.value) == "Ashfall Forest"
        world.remove(region.id)
        assert world.describe_relation(location.region_id.value) == "(missing)"

    def test_describe_relation_none(self):
        assert World().describe_relation(None) == "(none)"

    def test_thing_type_of(self):
        assert ThingType.of(Npc()) == ThingType.NPC
        assert ThingType.of(Location()) == ThingType.LOCATION
        assert ThingType.of(Region()) == ThingType.REGION
