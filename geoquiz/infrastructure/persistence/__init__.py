"""Persistence adapters."""

from geoquiz.infrastructure.persistence.key_value_store import KeyValueStore
from geoquiz.infrastructure.persistence.persisted_store import PersistedStore
from geoquiz.infrastructure.persistence.storage import (
    clear_storage,
    load_from_storage,
    remove_from_storage,
    save_to_storage,
)
from geoquiz.infrastructure.persistence.validators import (
    validate_settings,
    validate_statistics,
)

__all__ = [
    "KeyValueStore",
    "PersistedStore",
    "clear_storage",
    "load_from_storage",
    "remove_from_storage",
    "save_to_storage",
    "validate_settings",
    "validate_statistics",
]
