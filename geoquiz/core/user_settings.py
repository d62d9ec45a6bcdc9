"""Persisted user preferences."""

from __future__ import annotations

from geoquiz.core.models import UserSettings
from geoquiz.infrastructure.persistence import KeyValueStore, PersistedStore, validate_settings

SETTINGS_STORAGE_KEY = "geo-learner-settings"


class UserSettingsStore(PersistedStore[UserSettings]):
    """User settings, merged with defaults so new fields get sane values."""

    def __init__(self, store: KeyValueStore) -> None:
        super().__init__(
            store,
            SETTINGS_STORAGE_KEY,
            UserSettings(),
            merge=True,
            validator=validate_settings,
        )

    def set_timer_enabled(self, enabled: bool) -> UserSettings:
        return self.update(lambda s: s.model_copy(update={"timer_enabled": enabled}))

    def set_timer_duration(self, duration: int) -> UserSettings:
        """Change the timer duration in seconds.

        Raises:
            pydantic.ValidationError: If ``duration`` is outside 1..300
        """
        updated = UserSettings.model_validate(
            {**self.get().model_dump(), "timer_duration": duration}
        )
        self.set(updated)
        return updated
