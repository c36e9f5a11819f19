"""Tests for per-species generation strategies."""

from __future__ import annotations

import random

import pytest

from initiative.models import Age, ConfigurationError, Demographics, Gender, Npc, Species
from initiative.services.species import GENERATORS, get_generator, regenerate
from initiative.services.species.base import roll, scale_for_age
from initiative.services.species.elf import CHILD_NAMES
from initiative.services.species.warforged import NAMES as WARFORGED_NAMES


def _npc(species: Species) -> Npc:
    npc = Npc()
    npc.species.set(species)
    return npc


class TestDispatch:
    """Test the species-to-strategy mapping."""

    def test_every_species_has_a_generator(self):
        assert set(GENERATORS) == set(Species)

    def test_generator_declares_its_species(self):
        for species, generator in GENERATORS.items():
            assert generator.species == species
            assert get_generator(species) is generator

    def test_no_species_is_a_no_op(self):
        npc = Npc()
        regenerate(random.Random(1), Demographics.default(), npc)
        assert not npc.gender.is_some()
        assert not npc.name.is_some()


class TestHelpers:
    """Test shared generation helpers."""

    def test_roll_range(self):
        rng = random.Random(5)
        for _ in range(100):
            assert 2 <= roll(rng, 2, 6) <= 12

    def test_scale_for_age(self):
        adult = scale_for_age(70, 180, Age.ADULT)
        child = scale_for_age(70, 180, Age.CHILD)
        assert adult.height_inches == 70
        assert child.height_inches < adult.height_inches
        assert child.weight_lbs < adult.weight_lbs


class TestSpeciesRegenerate:
    """Test the shared regenerate driver."""

    @pytest.mark.parametrize("species", list(Species))
    def test_fills_every_field(self, species: Species):
        npc = _npc(species)
        regenerate(random.Random(11), Demographics.default(), npc)
        assert npc.gender.is_some()
        assert npc.age.is_some()
        assert npc.name.is_some()
        assert npc.size.is_some()

    def test_locked_empty_age_skips_name_and_size(self):
        """Name and size depend on age; without one they stay empty."""
        npc = _npc(Species.HUMAN)
        npc.age.lock()
        regenerate(random.Random(2), Demographics.default(), npc)
        assert npc.gender.is_some()
        assert not npc.age.is_some()
        assert not npc.name.is_some()
        assert not npc.size.is_some()

    def test_locked_gender_is_kept(self):
        npc = _npc(Species.ELF)
        npc.gender.set(Gender.NONBINARY)
        for seed in range(10):
            regenerate(random.Random(seed), Demographics.default(), npc)
            assert npc.gender.value == Gender.NONBINARY

    def test_species_specific_table(self):
        demographics = Demographics(
            tables={
                "gender": {"feminine": 1.0},
                "gender:warforged": {"neuter": 1.0},
                "age": {"adult": 1.0},
            }
        )
        warforged = _npc(Species.WARFORGED)
        human = _npc(Species.HUMAN)
        regenerate(random.Random(), demographics, warforged)
        regenerate(random.Random(), demographics, human)
        assert warforged.gender.value == Gender.NEUTER
        assert human.gender.value == Gender.FEMININE

    def test_unknown_table_value_raises(self):
        demographics = Demographics(tables={"gender": {"robot": 1.0}, "age": {"adult": 1.0}})
        with pytest.raises(ConfigurationError, match="Unknown gender"):
            regenerate(random.Random(), demographics, _npc(Species.DWARF))


class TestSpeciesDetails:
    """Test species-specific naming and sizing."""

    def test_elf_child_uses_child_name(self):
        npc = _npc(Species.ELF)
        npc.age.set(Age.CHILD)
        regenerate(random.Random(4), Demographics.default(), npc)
        assert npc.name.value in CHILD_NAMES

    def test_adult_elf_has_family_name(self):
        npc = _npc(Species.ELF)
        npc.age.set(Age.ADULT)
        regenerate(random.Random(4), Demographics.default(), npc)
        assert len(npc.name.value.split()) == 2

    def test_warforged_single_name(self):
        npc = _npc(Species.WARFORGED)
        regenerate(random.Random(8), Demographics.default(), npc)
        assert npc.name.value in WARFORGED_NAMES

    def test_warforged_size_ignores_age(self):
        npc = _npc(Species.WARFORGED)
        npc.age.set(Age.CHILD)
        regenerate(random.Random(8), Demographics.default(), npc)
        assert npc.size.value.height_inches >= 72

    def test_adult_dwarf_height_range(self):
        for seed in range(10):
            dwarf = _npc(Species.DWARF)
            dwarf.age.set(Age.ADULT)
            regenerate(random.Random(seed), Demographics.default(), dwarf)
            assert dwarf.size.value.height_inches <= 56
