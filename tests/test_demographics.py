"""Tests for demographics tables and weighted sampling."""

from __future__ import annotations

import random

import pytest

from initiative.models import ConfigurationError, Demographics


class TestResolveKey:
    """Test table resolution by key specificity."""

    def test_exact_key(self):
        demographics = Demographics.default()
        assert demographics.resolve_key("gender:warforged") == "gender:warforged"

    def test_falls_back_to_general_table(self):
        demographics = Demographics.default()
        assert demographics.resolve_key("gender:dwarf") == "gender"

    def test_falls_back_through_several_levels(self):
        demographics = Demographics.default()
        assert demographics.resolve_key("age:warforged:mark-5") == "age:warforged"

    def test_missing_table(self):
        demographics = Demographics(tables={})
        assert demographics.resolve_key("gender") is None
        with pytest.raises(ConfigurationError, match="No demographics table"):
            demographics.get_table("gender")


class TestWeightedChoice:
    """Test weighted sampling."""

    def test_choice_is_a_category(self):
        demographics = Demographics.default()
        rng = random.Random(1)
        for _ in range(50):
            assert demographics.weighted_choice(rng, "species") in demographics.tables["species"]

    def test_zero_weight_never_chosen(self):
        demographics = Demographics(tables={"color": {"red": 1.0, "blue": 0.0}})
        rng = random.Random(3)
        assert {demographics.weighted_choice(rng, "color") for _ in range(100)} == {"red"}

    def test_same_seed_same_choices(self):
        demographics = Demographics.default()
        first = [demographics.weighted_choice(random.Random(7), "age") for _ in range(5)]
        second = [demographics.weighted_choice(random.Random(7), "age") for _ in range(5)]
        assert first == second

    def test_all_zero_weights_raise(self):
        demographics = Demographics(tables={"species": {"human": 0.0, "elf": 0.0}})
        with pytest.raises(ConfigurationError, match="zero total weight"):
            demographics.weighted_choice(random.Random(), "species")

    def test_empty_table_raises(self):
        demographics = Demographics(tables={"species": {}})
        with pytest.raises(ConfigurationError):
            demographics.weighted_choice(random.Random(), "species")

    def test_negative_weight_raises(self):
        demographics = Demographics(tables={"species": {"human": 5.0, "elf": -1.0}})
        with pytest.raises(ConfigurationError, match="Negative weight"):
            demographics.weighted_choice(random.Random(), "species")


class TestWithWeight:
    """Test copy-on-write table edits."""

    def test_returns_modified_copy(self):
        original = Demographics.default()
        changed = original.with_weight("species", "elf", 0.0)
        assert changed.tables["species"]["elf"] == 0.0
        assert original.tables["species"]["elf"] == 15.0

    def test_creates_specific_table_from_fallback(self):
        changed = Demographics.default().with_weight("gender:dwarf", "nonbinary", 10.0)
        assert changed.tables["gender:dwarf"]["nonbinary"] == 10.0
        assert changed.tables["gender:dwarf"]["feminine"] == 48.0
        assert "gender:dwarf" not in Demographics.default().tables

    def test_rejects_negative_weight(self):
        with pytest.raises(ConfigurationError):
            Demographics.default().with_weight("species", "elf", -3.0)
