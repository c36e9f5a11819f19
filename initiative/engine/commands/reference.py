"""
Reference commands: SRD spell, item, category and magic item lookups.

A bare name can be several things at once ("Shield" is both a spell and an
item), so every reading is returned as a fuzzy match. The namespaced forms
("srd spell Shield") are exact.
"""

from __future__ import annotations

from enum import Enum

from initiative.content import srd
from initiative.content.srd import SrdKind
from initiative.engine.commands.base import (
    CommandFamily,
    ParseResult,
    eq_ci,
    starts_with_ci,
    strip_prefix_ci,
)
from initiative.engine.context import AppContext
from initiative.engine.models import CommandResult, Suggestion


class ReferenceAction(str, Enum):
    SPELL = "spell"
    SPELLS = "spells"
    ITEM = "item"
    ITEM_CATEGORY = "item category"
    MAGIC_ITEM = "magic item"
    OPEN_GAME_LICENSE = "open game license"


# Prefix order matters: "srd item category " must be tried before "srd item ".
_PREFIXES: list[tuple[str, ReferenceAction, SrdKind]] = [
    ("srd spell ", ReferenceAction.SPELL, SrdKind.SPELL),
    ("srd item category ", ReferenceAction.ITEM_CATEGORY, SrdKind.ITEM_CATEGORY),
    ("srd item ", ReferenceAction.ITEM, SrdKind.ITEM),
    ("srd magic item ", ReferenceAction.MAGIC_ITEM, SrdKind.MAGIC_ITEM),
]

_KIND_ACTIONS: dict[SrdKind, ReferenceAction] = {
    kind: action for _, action, kind in _PREFIXES
}

_HINTS: dict[SrdKind, str] = {
    SrdKind.SPELL: "SRD spell",
    SrdKind.ITEM: "SRD item",
    SrdKind.ITEM_CATEGORY: "SRD item category",
    SrdKind.MAGIC_ITEM: "SRD magic item",
}


class ReferenceCommand(CommandFamily):
    """Look up System Reference Document content."""

    action: ReferenceAction
    name: str | None = None
    """Canonical entry name, for the single-entry actions."""

    @classmethod
    def parse_input(cls, input: str, context: AppContext) -> ParseResult:
        exact_match: ReferenceCommand | None = None

        if eq_ci(input, "Open Game License"):
            exact_match = cls(action=ReferenceAction.OPEN_GAME_LICENSE)
        elif eq_ci(input, "srd spells"):
            exact_match = cls(action=ReferenceAction.SPELLS)
        else:
            for prefix, action, kind in _PREFIXES:
                rest = strip_prefix_ci(input, prefix)
                entry = srd.lookup(kind, rest) if rest is not None else None
                if entry is not None:
                    exact_match = cls(action=action, name=entry.name)
                    break

        fuzzy_matches: list[CommandFamily] = []
        for kind in SrdKind:
            entry = srd.lookup(kind, input)
            if entry is not None:
                fuzzy_matches.append(cls(action=_KIND_ACTIONS[kind], name=entry.name))
        if eq_ci(input, "spells"):
            fuzzy_matches.append(cls(action=ReferenceAction.SPELLS))

        return exact_match, fuzzy_matches

    @classmethod
    def autocomplete(cls, input: str, context: AppContext) -> list[Suggestion]:
        suggestions = [
            Suggestion("Open Game License", "SRD license"),
            Suggestion("spells", "SRD index"),
        ]
        for kind in SrdKind:
            suggestions.extend(Suggestion(word, _HINTS[kind]) for word in srd.words(kind))

        if starts_with_ci(input, "srd"):
            suggestions.append(Suggestion("srd spells", "SRD index"))
            for prefix, _, kind in _PREFIXES:
                suggestions.extend(
                    Suggestion(f"{prefix}{word}", _HINTS[kind]) for word in srd.words(kind)
                )
        return suggestions

    async def run(self, input: str, context: AppContext) -> CommandResult:
        if self.action == ReferenceAction.OPEN_GAME_LICENSE:
            return CommandResult(output=srd.OPEN_GAME_LICENSE)

        if self.action == ReferenceAction.SPELLS:
            output, name = srd.spell_index(), "This listing"
        else:
            entry = srd.lookup(self._kind(), self.name or "")
            if entry is None:
                return CommandResult(success=False, output=f'No SRD entry named "{self.name}".')
            output, name = str(entry), entry.name
            if entry.kind == SrdKind.ITEM_CATEGORY:
                name = "This listing"

        return CommandResult(
            output=f"{output}\n\n*{name} is Open Game Content subject to the "
            "`Open Game License`.*"
        )

    def _kind(self) -> SrdKind:
        for kind, action in _KIND_ACTIONS.items():
            if action == self.action:
                return kind
        raise ValueError(f"{self.action.value} has no SRD entry kind")

    def __str__(self) -> str:
        if self.action == ReferenceAction.OPEN_GAME_LICENSE:
            return "Open Game License"
        elif self.action == ReferenceAction.SPELLS:
            return "srd spells"
        return f"srd {self.action.value} {self.name}"
