"""Tests for the lockable Field wrapper."""

from __future__ import annotations

from initiative.models import Field


class TestField:
    """Test Field locking semantics."""

    def test_default_is_empty_and_unlocked(self):
        field = Field[str]()
        assert field.get() is None
        assert not field.is_some()
        assert not field.is_locked()
        assert str(field) == ""

    def test_set_stores_and_locks(self):
        field = Field[str]()
        field.set("Mara")
        assert field.get() == "Mara"
        assert field.is_locked()

    def test_replace_with_writes_when_unlocked(self):
        field = Field[int]()
        field.replace_with(lambda _: 5)
        assert field.get() == 5
        assert not field.is_locked()

    def test_replace_with_receives_current_value(self):
        field = Field[int](value=2)
        field.replace_with(lambda current: (current or 0) + 1)
        assert field.get() == 3

    def test_replace_with_skips_locked(self):
        """A locked field is never touched by generation."""
        field = Field[str]()
        field.set("kept")
        field.replace_with(lambda _: "overwritten")
        assert field.get() == "kept"

    def test_replace_with_skips_locked_empty(self):
        field = Field[str]()
        field.lock()
        field.replace_with(lambda _: "value")
        assert field.get() is None

    def test_unlock_allows_regeneration(self):
        field = Field[str]()
        field.set("old")
        field.unlock()
        field.replace_with(lambda _: "new")
        assert field.get() == "new"

    def test_clear(self):
        field = Field[str]()
        field.set("gone")
        field.clear()
        assert field.get() is None
        assert not field.is_locked()

    def test_str_renders_value(self):
        field = Field[int](value=42)
        assert str(field) == "42"
