"""In-memory value backed by a key in the key-value store."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from geoquiz.infrastructure.persistence.key_value_store import KeyValueStore
from geoquiz.infrastructure.persistence.storage import (
    Validator,
    load_from_storage,
    remove_from_storage,
    save_to_storage,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class PersistedStore(Generic[M]):
    """Holds a pydantic model loaded once from storage.

    After construction the in-memory value is the source of truth; it is
    only written back when ``save`` is called.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        default: M,
        merge: bool = False,
        validator: Validator | None = None,
    ) -> None:
        """Initialize persisted store.

        Args:
            store: Backing key-value store
            key: Storage key
            default: Value used on first run and on unusable data
            merge: Fill fields missing from stored data with defaults
            validator: Extra check applied to the stored document
        """
        self.store = store
        self.key = key
        self._default = default
        self._model: type[M] = type(default)
        self.merge = merge
        self.validator = validator
        self._value = self._load()

    def _load(self) -> M:
        raw = load_from_storage(self.store, self.key, None)
        if raw is None:
            return self.default

        if self.merge and isinstance(raw, dict):
            raw = {**self._default.model_dump(mode="json"), **raw}

        if self.validator is not None and not self.validator(raw):
            logger.warning(f"Stored data failed validation (key: {self.key}), using defaults")
            return self.default

        try:
            return self._model.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Incompatible data in storage (key: {self.key}): {e}")
            return self.default

    @property
    def default(self) -> M:
        """A fresh copy of the default value."""
        return self._default.model_copy(deep=True)

    def get(self) -> M:
        return self._value

    def set(self, value: M) -> None:
        self._value = value

    def update(self, updater: Callable[[M], M]) -> M:
        self._value = updater(self._value)
        return self._value

    def reset(self) -> None:
        self._value = self.default

    def save(self) -> bool:
        """Write the current value to storage."""
        return save_to_storage(self.store, self.key, self._value.model_dump(mode="json"))

    def remove(self) -> bool:
        """Delete the stored document; the in-memory value is kept."""
        return remove_from_storage(self.store, self.key)
