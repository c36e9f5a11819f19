"""
Command Resolver for initiative.

Turns raw input into a command by asking every command family to parse it.
An exact match from a single family wins outright; otherwise every fuzzy
match from every family is surfaced so the user can choose.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from initiative.engine.commands import COMMAND_FAMILIES, CommandFamily
from initiative.engine.context import AppContext
from initiative.engine.models import Ambiguous, CommandResult, ExactMatch, NoMatch, Resolution

logger = logging.getLogger(__name__)

Ranker = Callable[[str, Sequence[CommandFamily]], Sequence[CommandFamily]]
"""Reorders candidates for an input. Without one, declaration order is kept."""


@dataclass(frozen=True)
class Disambiguation:
    """Runnable that lists candidate commands for the user to pick from."""

    candidates: tuple[CommandFamily, ...]

    async def run(self, input: str, context: AppContext) -> CommandResult:
        options = "\n".join(f"* `{candidate}`" for candidate in self.candidates)
        return CommandResult(
            success=False,
            output=f"There are several possible interpretations of this command. "
            f"Did you mean:\n\n{options}",
        )


@dataclass(frozen=True)
class UnknownCommand:
    """Runnable for input that matched nothing."""

    input: str

    async def run(self, input: str, context: AppContext) -> CommandResult:
        return CommandResult(
            success=False,
            output=f'Unknown command: "{self.input}". Type `help` for a list of commands.',
        )


Runnable = CommandFamily | Disambiguation | UnknownCommand


class CommandResolver:
    """
    Resolves input against a fixed list of command families.

    Every family is queried for every input; results are collected before
    any decision is made.
    """

    def __init__(
        self,
        families: Sequence[type[CommandFamily]] = COMMAND_FAMILIES,
        ranker: Ranker | None = None,
    ) -> None:
        self.families = tuple(families)
        self.ranker = ranker

    def resolve(self, input: str, context: AppContext) -> Resolution:
        """
        Resolve input to an exact match, a list of candidates, or nothing.

        Args:
            input: Raw user input
            context: Current session context

        Returns:
            ExactMatch when exactly one family claims the input exactly,
            Ambiguous when several exact matches or any fuzzy matches exist,
            NoMatch otherwise
        """
        input = input.strip()
        if not input:
            return NoMatch(input)

        results = tuple(family.parse_input(input, context) for family in self.families)
        exact_matches = tuple(exact for exact, _ in results if exact is not None)
        fuzzy_matches = tuple(fuzzy for _, fuzzies in results for fuzzy in fuzzies)

        if len(exact_matches) == 1:
            return ExactMatch(exact_matches[0])
        elif exact_matches:
            logger.debug("Input %r has %d exact matches", input, len(exact_matches))
            return Ambiguous(self._rank(input, exact_matches))
        elif fuzzy_matches:
            return Ambiguous(self._rank(input, fuzzy_matches))
        return NoMatch(input)

    def resolve_irrefutable(
        self,
        input: str,
        context: AppContext,
        auto_pick_single: bool = True,
    ) -> Runnable:
        """
        Always produce something runnable.

        A lone fuzzy candidate is picked automatically when auto_pick_single
        is set; otherwise ambiguity becomes a choice list and no match becomes
        an unknown-command message.
        """
        resolution = self.resolve(input, context)

        if isinstance(resolution, ExactMatch):
            return resolution.command
        elif isinstance(resolution, Ambiguous):
            if auto_pick_single and len(resolution.candidates) == 1:
                return resolution.candidates[0]
            return Disambiguation(resolution.candidates)
        return UnknownCommand(resolution.input)

    def _rank(
        self, input: str, candidates: tuple[CommandFamily, ...]
    ) -> tuple[CommandFamily, ...]:
        if self.ranker is None:
            return candidates
        return tuple(self.ranker(input, candidates))
