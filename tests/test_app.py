"""End-to-end tests for the App facade."""

from __future__ import annotations

import pytest

import initiative
from initiative import AppConfig
from initiative.db import InMemoryRepository, NullRepository
from initiative.engine import App
from initiative.models import Demographics, Npc, Species


@pytest.fixture
def app() -> App:
    return initiative.app(AppConfig(seed=7))


def _only_npc(app: App) -> Npc:
    assert len(app.context.world.npcs) == 1
    return next(iter(app.context.world.npcs.values()))


class TestInit:
    """Tests for App.init."""

    @pytest.mark.asyncio
    async def test_motd(self, app: App):
        motd = await app.init()
        assert motd.startswith("# Welcome to initiative")
        assert "Storage is not available" not in motd

    @pytest.mark.asyncio
    async def test_loads_journal(self):
        repository = InMemoryRepository()
        npc = Npc()
        npc.name.set("Wren Marsh")
        await repository.save(npc)

        app = initiative.app(AppConfig(seed=1), repository=repository)
        await app.init()

        assert app.context.world.find_by_name("Wren Marsh") is not None
        assert app.context.is_saved(npc.id)

    @pytest.mark.asyncio
    async def test_storage_disabled(self):
        app = initiative.app(AppConfig(storage="none"))
        assert isinstance(app.context.repository, NullRepository)
        motd = await app.init()
        assert "Storage is not available" in motd


class TestCommandFlow:
    """A typical session: generate, edit, regenerate, save, delete."""

    @pytest.mark.asyncio
    async def test_session(self, app: App):
        await app.init()

        result = await app.command("dwarf")
        assert result.success
        npc = _only_npc(app)
        assert npc.species.value == Species.DWARF

        result = await app.command(f"{npc.name.value} is an elf")
        assert result.success
        assert npc.species.value == Species.ELF
        assert npc.species.is_locked()

        result = await app.command(f"regenerate {npc.name.value}")
        assert result.success
        assert npc.species.value == Species.ELF

        name = npc.name.value
        result = await app.command(f"save {name}")
        assert result.output == f"{name} was successfully saved."
        assert npc.name.is_locked()

        result = await app.command("journal")
        assert name in result.output

        result = await app.command(f"delete {name}")
        assert result.success
        assert await app.context.repository.list_saved() == []
        assert app.context.world.npcs == {}

    @pytest.mark.asyncio
    async def test_same_seed_same_session(self):
        first = initiative.app(AppConfig(seed=3))
        second = initiative.app(AppConfig(seed=3))
        await first.command("npc")
        await second.command("npc")
        assert _only_npc(first).name.value == _only_npc(second).name.value

    @pytest.mark.asyncio
    async def test_edit_of_saved_entity_is_persisted(self, app: App):
        await app.command("human")
        npc = _only_npc(app)
        await app.command(f"save {npc.name.value}")
        await app.command(f"{npc.name.value} is named Mara Lovell")

        stored = await app.context.repository.load_by_name("Mara Lovell")
        assert stored.name.value == "Mara Lovell"

    @pytest.mark.asyncio
    async def test_unknown_command(self, app: App):
        result = await app.command("xyz")
        assert not result.success
        assert "Unknown command" in result.output

    @pytest.mark.asyncio
    async def test_ambiguous_command(self, app: App):
        result = await app.command("shield")
        assert not result.success
        assert "several possible interpretations" in result.output

    @pytest.mark.asyncio
    async def test_roll(self, app: App):
        result = await app.command("roll 4d6kh3")
        assert result.success
        assert result.output.startswith("4d6kh3 = [")

    @pytest.mark.asyncio
    async def test_configuration_error_is_reported(self, app: App):
        app.context.demographics = Demographics(tables={"species": {"elf": 0.0}})
        result = await app.command("npc")
        assert not result.success
        assert "Couldn't generate" in result.output

        result = await app.command("cave")
        assert result.success


class TestStorageDegradation:
    """Without storage the session keeps working in memory."""

    @pytest.mark.asyncio
    async def test_save_and_journal_without_storage(self):
        app = initiative.app(AppConfig(seed=2, storage="none"))
        await app.init()
        await app.command("elf")
        name = _only_npc(app).name.value

        result = await app.command(f"save {name}")
        assert result.success
        assert result.warnings
        assert "Storage is not available" in result.render()

        result = await app.command("journal")
        assert name in result.output
        assert result.warnings


class TestAutocomplete:
    """Tests for App.autocomplete."""

    def test_uses_configured_limit(self):
        app = initiative.app(AppConfig(autocomplete_limit=2))
        assert len(app.autocomplete("s")) == 2

    @pytest.mark.asyncio
    async def test_generated_names_are_suggested(self, app: App):
        await app.command("inn")
        location = next(iter(app.context.world.locations.values()))
        labels = [s.label for s in app.autocomplete(location.name.value[:6])]
        assert location.name.value in labels
