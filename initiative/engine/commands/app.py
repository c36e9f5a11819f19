"""
Application commands: about, help and dice rolls.
"""

from __future__ import annotations

from enum import Enum

from initiative.engine.commands.base import CommandFamily, ParseResult, eq_ci, strip_prefix_ci
from initiative.engine.context import AppContext
from initiative.engine.models import CommandResult, Suggestion
from initiative.skills.dice import is_dice_notation, normalize, roll_dice

ABOUT_TEXT = """\
# About initiative

A toolkit for game masters: generate people and places on the fly, look up \
SRD reference material, and roll dice. Anything you generate can be edited, \
saved to your journal, and regenerated without losing the parts you care about."""

HELP_TEXT = """\
# Commands

* `npc`, `human`, `dwarf`, `elf`, `warforged`: generate a person
* `inn`, `cave`, `temple`, ...: generate a location
* `forest`, `desert`, `sea`, ...: generate a region
* `[name] is [species/gender/age]`, `[name] is named [new name]`: edit and lock a field
* `unlock [name] [field]`, `regenerate [name]`: reroll what isn't locked
* `save [name]`, `load [name]`, `delete [name]`, `journal`: manage your journal
* `srd spells`, `srd spell [name]`, `srd item [name]`, `srd magic item [name]`: reference
* `roll [dice]`: roll dice, e.g. `roll 2d6+3`
* `about`, `help`, `Open Game License`"""


class AppAction(str, Enum):
    ABOUT = "about"
    HELP = "help"
    ROLL = "roll"


class AppCommand(CommandFamily):
    """Commands about the application itself."""

    action: AppAction
    expression: str | None = None

    @classmethod
    def parse_input(cls, input: str, context: AppContext) -> ParseResult:
        exact_match: AppCommand | None = None
        fuzzy_matches: list[CommandFamily] = []

        if eq_ci(input, "about"):
            exact_match = cls(action=AppAction.ABOUT)
        elif eq_ci(input, "help"):
            exact_match = cls(action=AppAction.HELP)
        else:
            expression = strip_prefix_ci(input, "roll ")
            if expression is not None and is_dice_notation(expression):
                exact_match = cls(action=AppAction.ROLL, expression=normalize(expression))

        if exact_match is None and is_dice_notation(input):
            fuzzy_matches.append(cls(action=AppAction.ROLL, expression=normalize(input)))

        return exact_match, fuzzy_matches

    @classmethod
    def autocomplete(cls, input: str, context: AppContext) -> list[Suggestion]:
        suggestions = [
            Suggestion("about", "about initiative"),
            Suggestion("help", "how to use initiative"),
            Suggestion("roll", "roll eg. 8d6 or d20+3"),
        ]

        expression = strip_prefix_ci(input, "roll ")
        if expression is not None and is_dice_notation(expression):
            suggestions.append(Suggestion(input, "roll dice"))

        return suggestions

    async def run(self, input: str, context: AppContext) -> CommandResult:
        if self.action == AppAction.ABOUT:
            return CommandResult(output=ABOUT_TEXT)
        elif self.action == AppAction.HELP:
            return CommandResult(output=HELP_TEXT)

        try:
            result = roll_dice(self.expression or "", context.rng)
        except ValueError as e:
            return CommandResult(success=False, output=f"Couldn't roll that: {e}")
        return CommandResult(output=str(result))

    def __str__(self) -> str:
        if self.action == AppAction.ROLL:
            return f"roll {self.expression}"
        return self.action.value
