"""Tests for autocomplete."""

from __future__ import annotations

import random

import pytest

from initiative.engine import AppContext, Autocompleter, Suggestion
from initiative.models import Npc


@pytest.fixture
def context() -> AppContext:
    return AppContext(rng=random.Random(1))


@pytest.fixture
def autocompleter() -> Autocompleter:
    return Autocompleter()


class TestAutocomplete:
    """Tests for Autocompleter.autocomplete."""

    def test_empty_world_s(self, autocompleter: Autocompleter, context: AppContext):
        suggestions = autocompleter.autocomplete("s", context)
        assert [s.label for s in suggestions] == [
            "Shield",
            "Shield",
            "Shields",
            "Shortsword",
            "Sleep",
            "save",
            "sea",
            "spells",
            "swamp",
        ]
        assert suggestions[0] == Suggestion("Shield", "SRD spell")
        assert suggestions[1] == Suggestion("Shield", "SRD item")

    @pytest.mark.parametrize("partial", ["a", "c", "s", "Sh", "m", "t", "roll 2d6", "srd"])
    def test_invariants(self, autocompleter: Autocompleter, context: AppContext, partial: str):
        suggestions = autocompleter.autocomplete(partial, context)
        assert len(suggestions) <= 10
        labels = [s.label for s in suggestions]
        assert labels == sorted(labels)
        assert all(label.lower().startswith(partial.lower()) for label in labels)

    def test_prefix_ignores_case(self, autocompleter: Autocompleter, context: AppContext):
        labels = [s.label for s in autocompleter.autocomplete("FIRE", context)]
        assert labels == ["Fireball"]

    def test_empty_input(self, autocompleter: Autocompleter, context: AppContext):
        assert autocompleter.autocomplete("", context) == []

    def test_no_suggestions(self, autocompleter: Autocompleter, context: AppContext):
        assert autocompleter.autocomplete("zzz", context) == []

    def test_limit(self, context: AppContext):
        suggestions = Autocompleter(limit=3).autocomplete("s", context)
        assert [s.label for s in suggestions] == ["Shield", "Shield", "Shields"]

    def test_duplicates_collapse(self, autocompleter: Autocompleter, context: AppContext):
        for _ in range(2):
            npc = Npc()
            npc.name.set("Bram Carver")
            context.world.add(npc)
        suggestions = autocompleter.autocomplete("Bram", context)
        assert suggestions == [Suggestion("Bram Carver", "npc")]

    def test_entity_names_and_verbs(self, autocompleter: Autocompleter, context: AppContext):
        npc = Npc()
        npc.name.set("Bram Carver")
        context.world.add(npc)
        assert Suggestion("save Bram Carver", "save npc") in autocompleter.autocomplete(
            "save B", context
        )

    def test_dice_expression(self, autocompleter: Autocompleter, context: AppContext):
        suggestions = autocompleter.autocomplete("roll 2d6", context)
        assert suggestions == [Suggestion("roll 2d6", "roll dice")]

    def test_edit_suggestions_are_capped(
        self, autocompleter: Autocompleter, context: AppContext
    ):
        npc = Npc()
        npc.name.set("Bram Carver")
        context.world.add(npc)
        suggestions = autocompleter.autocomplete("Bram Carver is ", context)
        assert len(suggestions) == 10
        assert all(s.label.startswith("Bram Carver is ") for s in suggestions)

    def test_custom_ranker(self, context: AppContext):
        autocompleter = Autocompleter(
            ranker=lambda input, suggestions: sorted(suggestions, key=lambda s: s.label.lower())
        )
        labels = [s.label for s in autocompleter.autocomplete("s", context)]
        assert labels[0] == "save"

    def test_leading_whitespace_is_ignored(
        self, autocompleter: Autocompleter, context: AppContext
    ):
        assert autocompleter.autocomplete("  s", context) == autocompleter.autocomplete(
            "s", context
        )

    def test_srd_phrasings(self, autocompleter: Autocompleter, context: AppContext):
        assert autocompleter.autocomplete("srd spells", context) == [
            Suggestion("srd spells", "SRD index")
        ]
        assert autocompleter.autocomplete("SRD spell sh", context) == [
            Suggestion("srd spell Shield", "SRD spell")
        ]
        labels = [s.label for s in autocompleter.autocomplete("srd", context)]
        assert len(labels) == 10
        assert all(label.startswith("srd ") for label in labels)
