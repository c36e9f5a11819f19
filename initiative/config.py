"""
Configuration for initiative.

Settings come from keyword arguments or, via from_env(), from environment
variables:
    INITIATIVE_SEED: Seed for the session's random source (default: unseeded)
    INITIATIVE_AUTOCOMPLETE_LIMIT: Maximum suggestions returned (default: 10)
    INITIATIVE_AUTO_PICK: "1" to run a lone fuzzy match directly (default: 1)
    INITIATIVE_STORAGE: "memory" or "none" (default: memory)
    INITIATIVE_LOG_LEVEL: Logging level name (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from typing import Literal

from pydantic import BaseModel, Field


class AppConfig(BaseModel):
    """Application configuration."""

    seed: int | None = None
    autocomplete_limit: int = Field(default=10, ge=1)
    auto_pick_single_fuzzy: bool = True
    storage: Literal["memory", "none"] = "memory"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppConfig:
        """Build a config from INITIATIVE_* environment variables."""
        values: dict[str, object] = {}

        if os.getenv("INITIATIVE_SEED"):
            values["seed"] = int(os.getenv("INITIATIVE_SEED", "0"))

        if os.getenv("INITIATIVE_AUTOCOMPLETE_LIMIT"):
            values["autocomplete_limit"] = int(os.getenv("INITIATIVE_AUTOCOMPLETE_LIMIT", "10"))

        if os.getenv("INITIATIVE_AUTO_PICK"):
            values["auto_pick_single_fuzzy"] = os.getenv("INITIATIVE_AUTO_PICK") in ("1", "true")

        if os.getenv("INITIATIVE_STORAGE"):
            values["storage"] = os.getenv("INITIATIVE_STORAGE", "memory").lower()

        if os.getenv("INITIATIVE_LOG_LEVEL"):
            values["log_level"] = os.getenv("INITIATIVE_LOG_LEVEL", "WARNING").upper()

        return cls(**values)

    def configure_logging(self) -> None:
        """Apply log_level to the root logger."""
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.WARNING),
            format="%(levelname)s %(name)s: %(message)s",
        )
