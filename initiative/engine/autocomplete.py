"""
Autocomplete for initiative.

Merges suggestions from every command family (which covers canonical
phrasings, reference word lists and entity names), keeps those starting with
the partial input, and returns a short sorted list.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from initiative.engine.commands import COMMAND_FAMILIES, CommandFamily
from initiative.engine.context import AppContext
from initiative.engine.models import Suggestion

DEFAULT_LIMIT = 10

SuggestionRanker = Callable[[str, list[Suggestion]], list[Suggestion]]


def sort_by_label(input: str, suggestions: list[Suggestion]) -> list[Suggestion]:
    """Default ordering: lexicographic by label, stable for equal labels."""
    return sorted(suggestions, key=lambda suggestion: suggestion.label)


class Autocompleter:
    """Collects and ranks suggestions across command families."""

    def __init__(
        self,
        families: Sequence[type[CommandFamily]] = COMMAND_FAMILIES,
        limit: int = DEFAULT_LIMIT,
        ranker: SuggestionRanker = sort_by_label,
    ) -> None:
        self.families = tuple(families)
        self.limit = limit
        self.ranker = ranker

    def autocomplete(self, input: str, context: AppContext) -> list[Suggestion]:
        """
        Suggest completions for a partial input.

        A label offered by several families appears once per distinct hint,
        so "Shield" the spell and "Shield" the item are both listed.

        Returns:
            At most `limit` suggestions whose labels start with the input
            (ignoring case), in ranker order
        """
        # A trailing space still matters: "save " offers "save <name>".
        input = input.lstrip()
        if not input.strip():
            return []

        prefix = input.lower()
        seen: set[Suggestion] = set()
        matches: list[Suggestion] = []

        for family in self.families:
            for suggestion in family.autocomplete(input, context):
                if not suggestion.label.lower().startswith(prefix):
                    continue
                if suggestion in seen:
                    continue
                seen.add(suggestion)
                matches.append(suggestion)

        return self.ranker(input, matches)[: self.limit]
