"""
initiative: a game master's toolkit.

Interprets short text commands and generates people and places whose
attributes can be individually locked, edited and regenerated.
"""

from __future__ import annotations

from initiative.config import AppConfig
from initiative.db.interfaces import Repository
from initiative.engine import App, AppContext, CommandResult, Suggestion

__version__ = "0.1.0"


def app(config: AppConfig | None = None, repository: Repository | None = None) -> App:
    """
    Build an App for a new session.

    Args:
        config: Settings; defaults to AppConfig()
        repository: Storage backend; defaults to what config.storage names
    """
    config = config or AppConfig()
    context = AppContext.from_config(config)
    if repository is not None:
        context.repository = repository
    return App(context)


__all__ = [
    "App",
    "AppConfig",
    "AppContext",
    "CommandResult",
    "Suggestion",
    "app",
]
