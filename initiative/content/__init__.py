"""
Static content for initiative.

Reference data (SRD spells, items, categories, magic items) that commands
look up by name. Read-only.
"""

from initiative.content import srd
from initiative.content.srd import OPEN_GAME_LICENSE, SrdEntry, SrdKind

__all__ = [
    "srd",
    "OPEN_GAME_LICENSE",
    "SrdEntry",
    "SrdKind",
]
