"""Runtime validation of persisted documents."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from geoquiz.core.models import Statistics, UserSettings


def is_valid_model(model: type[BaseModel], value: Any) -> bool:
    """Check whether ``value`` validates against ``model``."""
    if not isinstance(value, dict):
        return False
    try:
        model.model_validate(value)
    except ValidationError:
        return False
    return True


def validate_statistics(value: Any) -> bool:
    return is_valid_model(Statistics, value)


def validate_settings(value: Any) -> bool:
    return is_valid_model(UserSettings, value)
