"""
Command engine for initiative.

The engine turns text into commands and suggestions:
- Command families (app, reference, world, edit, storage)
- Resolution (exact match beats fuzzy; fuzzy candidates are all surfaced)
- Autocomplete (merged, filtered, sorted, capped)
- The App facade tying them to a session context
"""

from __future__ import annotations

from initiative.engine.app import App
from initiative.engine.autocomplete import Autocompleter, sort_by_label
from initiative.engine.commands import (
    COMMAND_FAMILIES,
    AppCommand,
    CommandFamily,
    EditCommand,
    ReferenceCommand,
    StorageCommand,
    WorldCommand,
)
from initiative.engine.context import AppContext
from initiative.engine.models import (
    Ambiguous,
    CommandResult,
    ExactMatch,
    NoMatch,
    Resolution,
    Suggestion,
)
from initiative.engine.resolver import (
    CommandResolver,
    Disambiguation,
    UnknownCommand,
)

__all__ = [
    # App
    "App",
    "AppContext",
    # Commands
    "COMMAND_FAMILIES",
    "CommandFamily",
    "AppCommand",
    "ReferenceCommand",
    "WorldCommand",
    "EditCommand",
    "StorageCommand",
    # Resolution
    "CommandResolver",
    "Resolution",
    "ExactMatch",
    "Ambiguous",
    "NoMatch",
    "Disambiguation",
    "UnknownCommand",
    # Autocomplete
    "Autocompleter",
    "Suggestion",
    "sort_by_label",
    # Results
    "CommandResult",
]
