"""Aggregated performance statistics across quiz sessions.

Each recorded session updates the rollup of its game mode and replaces the
list of weak areas. Weak areas are computed from the newest session only,
not from the whole history.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from geoquiz.core.models import GameMode, GameSession, ModeStatistics, Statistics, WeakArea
from geoquiz.infrastructure.persistence import (
    KeyValueStore,
    PersistedStore,
    validate_statistics,
)

logger = logging.getLogger(__name__)

STATISTICS_STORAGE_KEY = "geo-learner-statistics"
MAX_WEAK_AREAS = 10


@dataclass
class LocationTally:
    """Correct and total answer events for one location."""

    name: str
    correct: int = 0
    total: int = 0

    @property
    def success_rate(self) -> float:
        return (self.correct / self.total * 100) if self.total > 0 else 0.0


def calculate_success_rate(correct: int, total: int) -> float:
    return (correct / total * 100) if total > 0 else 0.0


def calculate_weak_areas(session: GameSession, limit: int = MAX_WEAK_AREAS) -> list[WeakArea]:
    """Rank the locations of a session by how often they were missed.

    Location clicks and capital answers both count as answer events.
    Locations answered perfectly are left out.
    """
    tallies: dict[str, LocationTally] = {}
    for answer in session.answers:
        location = answer.question.location
        tally = tallies.setdefault(location.id, LocationTally(name=location.name))

        tally.total += 1
        if answer.location_correct:
            tally.correct += 1

        if answer.capital_correct is not None:
            tally.total += 1
            if answer.capital_correct:
                tally.correct += 1

    weak_areas = [
        WeakArea(
            location_id=location_id,
            location_name=tally.name,
            success_rate=tally.success_rate,
        )
        for location_id, tally in tallies.items()
        if tally.success_rate < 100
    ]
    weak_areas.sort(key=lambda area: area.success_rate)
    return weak_areas[:limit]


class StatisticsAggregator:
    """Maintains the statistics of all recorded sessions."""

    def __init__(self, store: KeyValueStore | None = None) -> None:
        """Initialize statistics aggregator.

        Args:
            store: Key-value store to load from and save to, memory-only when None
        """
        self._persisted: PersistedStore[Statistics] | None = None
        if store is not None:
            self._persisted = PersistedStore(
                store,
                STATISTICS_STORAGE_KEY,
                Statistics(),
                validator=validate_statistics,
            )
            self._statistics = self._persisted.get()
        else:
            self._statistics = Statistics()

    @property
    def statistics(self) -> Statistics:
        return self._statistics

    def snapshot(self) -> Statistics:
        return self._statistics.model_copy(deep=True)

    def get_mode_statistics(self, mode: GameMode) -> ModeStatistics:
        return self._statistics.by_mode[mode]

    def record_session(self, session: GameSession) -> Statistics:
        """Fold a finished session into the statistics.

        Every call counts as one more session, so recording the same
        session twice counts it twice.
        """
        stats = self._statistics
        previous = stats.by_mode[session.mode]

        correct_answers = previous.correct_answers + session.correct_answers
        total_questions = previous.total_questions + session.total_questions

        updated = ModeStatistics(
            sessions_played=previous.sessions_played + 1,
            total_questions=total_questions,
            correct_answers=correct_answers,
            success_rate=calculate_success_rate(correct_answers, total_questions),
            best_score=max(previous.best_score, session.score),
        )

        self._statistics = Statistics(
            total_sessions=stats.total_sessions + 1,
            by_mode={**stats.by_mode, session.mode: updated},
            weak_areas=calculate_weak_areas(session),
        )
        if self._persisted is not None:
            self._persisted.set(self._statistics)

        logger.info(
            f"Recorded {session.mode.value} session: score {session.score}, "
            f"{session.correct_answers}/{session.total_questions} correct"
        )
        return self._statistics

    def reset(self) -> None:
        """Restore first-run defaults."""
        self._statistics = Statistics()
        if self._persisted is not None:
            self._persisted.set(self._statistics)
        logger.info("Statistics reset")

    def save(self) -> bool:
        """Persist the current statistics; False when memory-only or on failure."""
        if self._persisted is None:
            return False
        return self._persisted.save()
