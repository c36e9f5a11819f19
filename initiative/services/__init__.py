"""
Services for initiative.

Generation of NPCs, locations and regions on top of the core models.
"""

from initiative.services.generation import (
    generate_location,
    generate_npc,
    generate_region,
    regenerate,
    regenerate_location,
    regenerate_npc,
    regenerate_region,
    regenerate_unique,
)

__all__ = [
    "generate_npc",
    "regenerate_npc",
    "generate_location",
    "regenerate_location",
    "generate_region",
    "regenerate_region",
    "regenerate",
    "regenerate_unique",
]
