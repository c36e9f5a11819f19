"""
Command families for initiative.

COMMAND_FAMILIES is the declaration order used by resolution and
autocomplete. Fuzzy matches are listed in this order.
"""

from __future__ import annotations

from initiative.engine.commands.app import AppAction, AppCommand
from initiative.engine.commands.base import CommandFamily
from initiative.engine.commands.edit import EditAction, EditCommand
from initiative.engine.commands.reference import ReferenceAction, ReferenceCommand
from initiative.engine.commands.storage import StorageAction, StorageCommand
from initiative.engine.commands.world import WorldCommand

COMMAND_FAMILIES: tuple[type[CommandFamily], ...] = (
    AppCommand,
    ReferenceCommand,
    WorldCommand,
    EditCommand,
    StorageCommand,
)

__all__ = [
    "COMMAND_FAMILIES",
    "CommandFamily",
    "AppAction",
    "AppCommand",
    "ReferenceAction",
    "ReferenceCommand",
    "WorldCommand",
    "EditAction",
    "EditCommand",
    "StorageAction",
    "StorageCommand",
]
