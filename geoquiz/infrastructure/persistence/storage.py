"""JSON load/save helpers with error handling.

Failures never propagate to callers: loads fall back to the supplied default
and saves report ``False``. Both are logged.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from geoquiz.infrastructure.persistence.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

Validator = Callable[[Any], bool]


def save_to_storage(store: KeyValueStore, key: str, value: Any) -> bool:
    """Serialize ``value`` to JSON and store it under ``key``."""
    try:
        serialized = json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to serialize value for storage (key: {key}): {e}")
        return False

    try:
        store.set_raw(key, serialized)
    except SQLAlchemyError as e:
        logger.error(f"Failed to save to storage (key: {key}): {e}")
        return False
    return True


def load_from_storage(
    store: KeyValueStore,
    key: str,
    default: T,
    validator: Validator | None = None,
) -> T | Any:
    """Load the JSON value stored under ``key``.

    Args:
        store: Backing key-value store
        key: Storage key
        default: Returned when the key is missing or the data is unusable
        validator: Optional check the decoded value must pass

    Returns:
        The decoded value, or ``default``
    """
    try:
        item = store.get_raw(key)
    except SQLAlchemyError as e:
        logger.error(f"Failed to load from storage (key: {key}): {e}")
        return default

    if item is None:
        return default

    try:
        value = json.loads(item)
    except json.JSONDecodeError as e:
        logger.warning(f"Corrupt data in storage (key: {key}): {e}")
        return default

    if validator is not None and not validator(value):
        logger.warning(f"Stored data failed validation (key: {key}), using defaults")
        return default

    return value


def remove_from_storage(store: KeyValueStore, key: str) -> bool:
    try:
        store.remove(key)
        return True
    except SQLAlchemyError as e:
        logger.error(f"Failed to remove from storage (key: {key}): {e}")
        return False


def clear_storage(store: KeyValueStore) -> bool:
    try:
        store.clear()
        return True
    except SQLAlchemyError as e:
        logger.error(f"Failed to clear storage: {e}")
        return False
