"""Command-line front end for initiative."""

from initiative.cli.repl import InitiativeREPL, main

__all__ = ["InitiativeREPL", "main"]
