"""
Skills for initiative.

Mechanical helpers that commands call into. Currently the dice evaluator.
"""

from initiative.skills.dice import DiceResult, is_dice_notation, roll_dice

__all__ = [
    "DiceResult",
    "is_dice_notation",
    "roll_dice",
]
