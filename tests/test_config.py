"""Tests for configuration and the REPL front end."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

import initiative
from initiative import AppConfig
from initiative.cli.repl import InitiativeREPL, ReplState
from initiative.engine import AppContext


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()
        assert config.seed is None
        assert config.autocomplete_limit == 10
        assert config.auto_pick_single_fuzzy
        assert config.storage == "memory"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("INITIATIVE_SEED", "12")
        monkeypatch.setenv("INITIATIVE_AUTOCOMPLETE_LIMIT", "5")
        monkeypatch.setenv("INITIATIVE_AUTO_PICK", "0")
        monkeypatch.setenv("INITIATIVE_STORAGE", "NONE")
        monkeypatch.setenv("INITIATIVE_LOG_LEVEL", "debug")

        config = AppConfig.from_env()
        assert config.seed == 12
        assert config.autocomplete_limit == 5
        assert not config.auto_pick_single_fuzzy
        assert config.storage == "none"
        assert config.log_level == "DEBUG"

    def test_from_env_empty(self, monkeypatch: pytest.MonkeyPatch):
        for name in ("SEED", "AUTOCOMPLETE_LIMIT", "AUTO_PICK", "STORAGE", "LOG_LEVEL"):
            monkeypatch.delenv(f"INITIATIVE_{name}", raising=False)
        assert AppConfig.from_env() == AppConfig()

    def test_invalid_storage(self):
        with pytest.raises(ValidationError):
            AppConfig(storage="postgres")

    def test_invalid_limit(self):
        with pytest.raises(ValidationError):
            AppConfig(autocomplete_limit=0)

    def test_seeded_context(self):
        first = AppContext.from_config(AppConfig(seed=5))
        second = AppContext.from_config(AppConfig(seed=5))
        assert first.rng.random() == second.rng.random()


class TestRepl:
    """Tests for the REPL's input handling."""

    @pytest.fixture
    def repl(self) -> InitiativeREPL:
        return InitiativeREPL(AppConfig(seed=1))

    @pytest.fixture
    def state(self, repl: InitiativeREPL) -> ReplState:
        return ReplState(app=initiative.app(repl.config))

    @pytest.mark.asyncio
    async def test_quit(self, repl: InitiativeREPL, state: ReplState):
        await repl._process_input("/quit", state)
        assert not state.running

    @pytest.mark.asyncio
    async def test_help_lists_commands(self, repl: InitiativeREPL, state: ReplState):
        output = await repl._process_input("/help", state)
        assert "/suggest" in output
        assert "/quit" in output

    @pytest.mark.asyncio
    async def test_suggest(self, repl: InitiativeREPL, state: ReplState):
        output = await repl._process_input("/suggest Sh", state)
        assert "Shield" in output
        assert "SRD spell" in output

    @pytest.mark.asyncio
    async def test_unknown_repl_command(self, repl: InitiativeREPL, state: ReplState):
        output = await repl._process_input("/dance", state)
        assert "Unknown REPL command" in output

    @pytest.mark.asyncio
    async def test_plain_input_runs_command(self, repl: InitiativeREPL, state: ReplState):
        output = await repl._process_input("about", state)
        assert output.startswith("# About initiative")

    @pytest.mark.asyncio
    async def test_blank_input(self, repl: InitiativeREPL, state: ReplState):
        assert await repl._process_input("   ", state) == ""
