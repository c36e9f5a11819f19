"""
Engine Data Models for initiative.

Defines the values passed across the command boundary:
- CommandResult: formatted output of a command, success or failure
- Suggestion: an autocomplete label with its category hint
- ExactMatch / Ambiguous / NoMatch: outcomes of command resolution
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from initiative.engine.commands.base import CommandFamily


class CommandResult(BaseModel):
    """Output of running a command. Failures carry a user-facing message."""

    success: bool = True
    output: str = Field(default="", description="Formatted text for the user")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal problems")

    def render(self) -> str:
        """Output followed by any warnings."""
        parts = [self.output] if self.output else []
        parts.extend(f"! {warning}" for warning in self.warnings)
        return "\n\n".join(parts)


class Suggestion(NamedTuple):
    """An autocomplete entry: the text to insert and what kind of thing it is."""

    label: str
    hint: str


@dataclass(frozen=True)
class ExactMatch:
    """Input matched one command authoritatively."""

    command: CommandFamily


@dataclass(frozen=True)
class Ambiguous:
    """Input could mean several commands; the caller must choose."""

    candidates: tuple[CommandFamily, ...]


@dataclass(frozen=True)
class NoMatch:
    """Input matched nothing."""

    input: str


Resolution = ExactMatch | Ambiguous | NoMatch
