"""
Interactive REPL for initiative.

Every line is handed to the App as a command. Lines starting with "/" are
meta commands handled here: quitting, listing meta commands, and previewing
autocomplete for a partial input.
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Callable
from dataclasses import dataclass

from initiative import app as build_app
from initiative.config import AppConfig
from initiative.engine import App

PROMPT = "> "


@dataclass
class ReplState:
    """Current state of the REPL session."""

    app: App
    running: bool = True


@dataclass
class MetaCommand:
    """A slash command understood by the REPL itself."""

    name: str
    aliases: tuple[str, ...]
    summary: str
    handler: Callable[[ReplState, str], str]


class InitiativeREPL:
    """
    Line-oriented front end for an App.

    Meta commands are looked up by name or alias; anything else goes to
    App.command and its rendered result is printed.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self.meta_commands = (
            MetaCommand("quit", ("exit", "q"), "Leave initiative", self._quit),
            MetaCommand("help", ("?",), "List slash commands", self._help),
            MetaCommand(
                "suggest",
                ("complete", "s"),
                "Preview autocomplete, e.g. /suggest sh",
                self._suggest,
            ),
        )
        self._lookup = {
            key: meta
            for meta in self.meta_commands
            for key in (meta.name, *meta.aliases)
        }

    def _quit(self, state: ReplState, argument: str) -> str:
        state.running = False
        return "Goodbye!"

    def _help(self, state: ReplState, argument: str) -> str:
        rows = ["Slash commands:"]
        for meta in self.meta_commands:
            aliases = ", ".join(f"/{alias}" for alias in meta.aliases)
            rows.append(f"  /{meta.name} ({aliases}): {meta.summary}")
        rows.append("")
        rows.append("Anything else is run as a command; type `help` for those.")
        return "\n".join(rows)

    def _suggest(self, state: ReplState, argument: str) -> str:
        if not argument:
            return "Usage: /suggest <partial input>"

        suggestions = state.app.autocomplete(argument)
        if not suggestions:
            return f'No suggestions for "{argument}".'

        width = max(len(s.label) for s in suggestions)
        return "\n".join(f"  {s.label.ljust(width)}  {s.hint}" for s in suggestions)

    async def _process_input(self, text: str, state: ReplState) -> str:
        """Handle one line and return what should be printed."""
        text = text.strip()
        if not text:
            return ""

        if text.startswith("/"):
            name, _, argument = text[1:].partition(" ")
            meta = self._lookup.get(name.lower())
            if meta is None:
                return f"Unknown REPL command: /{name}. Type /help for a list."
            return meta.handler(state, argument.strip())

        result = await state.app.command(text)
        return result.render()

    async def run(self) -> None:
        """Run until /quit, end of input or Ctrl-C."""
        state = ReplState(app=build_app(self.config))

        print(await state.app.init())
        print("Type /help for slash commands, or /suggest <text> to preview completions.\n")

        while state.running:
            try:
                line = input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                print()
                break

            output = await self._process_input(line, state)
            if output:
                print(f"\n{output}\n")


def main(argv: list[str] | None = None) -> None:
    """Entry point for the initiative console script."""
    parser = argparse.ArgumentParser(description="initiative: a game master's toolkit")
    parser.add_argument("--seed", type=int, default=None, help="Seed for generation")
    parser.add_argument(
        "--no-storage",
        action="store_true",
        help="Run without storage (saving will not persist)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG")

    args = parser.parse_args(argv)

    config = AppConfig.from_env()
    updates: dict[str, object] = {}
    if args.seed is not None:
        updates["seed"] = args.seed
    if args.no_storage:
        updates["storage"] = "none"
    if args.log_level:
        updates["log_level"] = args.log_level.upper()
    config = config.model_copy(update=updates)
    config.configure_logging()

    asyncio.run(InitiativeREPL(config).run())


if __name__ == "__main__":
    main()
