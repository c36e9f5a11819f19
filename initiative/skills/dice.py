"""
Dice rolling for the roll command.

Understands the usual tabletop notation (count, sides, keep highest or
lowest, flat modifier). Generation does not roll through here; it draws
from the session's random source directly.
"""

from __future__ import annotations

import random
import re
import secrets

from pydantic import BaseModel, Field

MAX_DICE = 1000

# [N]dX[kh|klK][+|-M]
DICE_PATTERN = re.compile(
    r"^(?P<count>\d*)d(?P<sides>\d+)"
    r"(?:(?P<keep>k[hl])(?P<keep_count>\d+))?"
    r"(?P<mod>[+-]\d+)?$"
)


class DiceResult(BaseModel):
    """Outcome of one roll."""

    notation: str = Field(description="Normalized dice notation")
    rolls: list[int] = Field(description="Every die rolled, in order")
    kept: list[int] | None = Field(default=None, description="Dice counted for kh/kl")
    modifier: int = Field(default=0, description="Flat bonus or penalty")
    total: int = Field(description="Sum of counted dice plus modifier")

    def __str__(self) -> str:
        shown = ", ".join(str(r) for r in self.rolls)
        modifier = ""
        if self.modifier:
            sign = "+" if self.modifier > 0 else "-"
            modifier = f" {sign} {abs(self.modifier)}"
        return f"{self.notation} = [{shown}]{modifier} = **{self.total}**"


def normalize(notation: str) -> str:
    """Lowercase and strip all whitespace, e.g. "1D20 + 5" -> "1d20+5"."""
    return re.sub(r"\s+", "", notation.lower())


def is_dice_notation(text: str) -> bool:
    """Check whether text looks like a dice expression without rolling it."""
    return DICE_PATTERN.match(normalize(text)) is not None


def roll_dice(notation: str, rng: random.Random | None = None) -> DiceResult:
    """
    Roll a dice expression.

    Examples: "d20", "8d6", "1d20+5", "4d6kh3" (keep highest three),
    "2d20kl1" (keep lowest).

    Args:
        notation: Expression to roll; case and spacing are ignored
        rng: Seeded random source; cryptographic randomness when omitted

    Raises:
        ValueError: On unparseable notation, zero dice or sides, more than
            MAX_DICE dice, or keeping more dice than were rolled
    """
    notation = normalize(notation)
    match = DICE_PATTERN.match(notation)
    if match is None:
        raise ValueError(f"Invalid dice notation: {notation}")

    count = int(match["count"] or 1)
    sides = int(match["sides"])
    keep = match["keep"]
    keep_count = int(match["keep_count"]) if keep else count
    modifier = int(match["mod"] or 0)

    if count < 1 or sides < 1:
        raise ValueError("Number of dice and die size must be positive")
    if count > MAX_DICE:
        raise ValueError(f"Too many dice: {count} (at most {MAX_DICE})")
    if keep_count > count:
        raise ValueError(f"Cannot keep {keep_count} of {count} dice")

    if rng is None:
        rolls = [1 + secrets.randbelow(sides) for _ in range(count)]
    else:
        rolls = [rng.randint(1, sides) for _ in range(count)]

    kept = None
    counted = rolls
    if keep:
        kept = sorted(rolls, reverse=keep == "kh")[:keep_count]
        counted = kept

    return DiceResult(
        notation=notation,
        rolls=rolls,
        kept=kept,
        modifier=modifier,
        total=sum(counted) + modifier,
    )
