"""Tests for PersistedStore."""

from __future__ import annotations

from pydantic import BaseModel, Field

from geoquiz.infrastructure.persistence import KeyValueStore, PersistedStore


class Preferences(BaseModel):
    """Small model used to exercise the store."""

    theme: str = "light"
    volume: int = Field(default=5, ge=0, le=10)


class TestPersistedStore:
    """Test PersistedStore."""

    def test_default_when_empty(self, store: KeyValueStore) -> None:
        persisted = PersistedStore(store, "prefs", Preferences())
        assert persisted.get() == Preferences()

    def test_set_does_not_save(self, store: KeyValueStore) -> None:
        persisted = PersistedStore(store, "prefs", Preferences())
        persisted.set(Preferences(theme="dark"))

        assert store.get_raw("prefs") is None
        assert PersistedStore(store, "prefs", Preferences()).get().theme == "light"

    def test_save_and_reload(self, store: KeyValueStore) -> None:
        persisted = PersistedStore(store, "prefs", Preferences())
        persisted.update(lambda p: p.model_copy(update={"volume": 9}))
        assert persisted.save() is True

        assert PersistedStore(store, "prefs", Preferences()).get().volume == 9

    def test_in_memory_value_wins_after_load(self, store: KeyValueStore) -> None:
        persisted = PersistedStore(store, "prefs", Preferences())
        store.set_raw("prefs", '{"theme": "dark", "volume": 1}')

        assert persisted.get() == Preferences()

    def test_merge_fills_missing_fields(self, store: KeyValueStore) -> None:
        store.set_raw("prefs", '{"theme": "dark"}')
        persisted = PersistedStore(store, "prefs", Preferences(volume=7), merge=True)
        assert persisted.get() == Preferences(theme="dark", volume=7)

    def test_incompatible_data_uses_default(self, store: KeyValueStore) -> None:
        store.set_raw("prefs", '{"theme": "dark", "volume": 99}')
        persisted = PersistedStore(store, "prefs", Preferences())
        assert persisted.get() == Preferences()

    def test_validator_rejects(self, store: KeyValueStore) -> None:
        store.set_raw("prefs", '{"theme": "neon"}')
        persisted = PersistedStore(
            store, "prefs", Preferences(), validator=lambda v: v.get("theme") in {"light", "dark"}
        )
        assert persisted.get().theme == "light"

    def test_reset_returns_fresh_default(self, store: KeyValueStore) -> None:
        default = Preferences()
        persisted = PersistedStore(store, "prefs", default)
        persisted.set(Preferences(theme="dark"))

        persisted.reset()

        assert persisted.get() == default
        assert persisted.get() is not default

    def test_remove(self, store: KeyValueStore) -> None:
        persisted = PersistedStore(store, "prefs", Preferences())
        persisted.save()

        assert persisted.remove() is True
        assert store.get_raw("prefs") is None
        assert persisted.get() == Preferences()
