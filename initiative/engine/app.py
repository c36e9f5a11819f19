"""
Application facade for initiative.

The App owns the session context and is the only entry point a front end
needs: init() once, then command() for each line of input and
autocomplete() for each keystroke.
"""

from __future__ import annotations

import logging

from initiative.db.interfaces import StorageError
from initiative.engine.autocomplete import Autocompleter
from initiative.engine.context import AppContext
from initiative.engine.models import CommandResult, Suggestion
from initiative.engine.resolver import CommandResolver

logger = logging.getLogger(__name__)

MOTD = """\
# Welcome to initiative

Type `help` to see what you can do, or just start typing: try `npc`, `inn` or \
`srd spell Shield`."""

STORAGE_WARNING = (
    "! Storage is not available. You will be able to use initiative, "
    "but saving and loading won't work."
)


class App:
    """A single interactive session."""

    def __init__(
        self,
        context: AppContext,
        resolver: CommandResolver | None = None,
        autocompleter: Autocompleter | None = None,
    ) -> None:
        self.context = context
        self.resolver = resolver or CommandResolver()
        self.autocompleter = autocompleter or Autocompleter(
            limit=context.config.autocomplete_limit
        )

    async def init(self) -> str:
        """
        Prepare storage and load the journal into the world.

        Returns:
            The message of the day, with a warning if storage is unavailable
        """
        repository = self.context.repository
        if not repository.is_enabled():
            return f"{MOTD}\n\n{STORAGE_WARNING}"

        try:
            await repository.init()
            saved = await repository.list_saved()
        except StorageError as e:
            logger.warning("Storage unavailable, continuing in memory: %s", e)
            return f"{MOTD}\n\n{STORAGE_WARNING}"

        for thing in saved:
            self.context.world.add(thing)
            self.context.saved_ids.add(thing.id)
        logger.info("Loaded %d saved entities", len(saved))
        return MOTD

    async def command(self, input: str) -> CommandResult:
        """Resolve and run one line of input."""
        runnable = self.resolver.resolve_irrefutable(
            input,
            self.context,
            auto_pick_single=self.context.config.auto_pick_single_fuzzy,
        )
        logger.debug("Input %r resolved to %r", input, runnable)
        return await runnable.run(input, self.context)

    def autocomplete(self, input: str) -> list[Suggestion]:
        """Suggestions for partial input."""
        return self.autocompleter.autocomplete(input, self.context)
