"""Core quiz engine.

The session controller and statistics aggregator live in
``geoquiz.core.session_manager`` and ``geoquiz.core.statistics``.
"""

from geoquiz.core.models import (
    Answer,
    AnsweredRegions,
    GameMode,
    GameSession,
    GameState,
    ModeStatistics,
    Point,
    PointLocation,
    Question,
    RegionLocation,
    Statistics,
    UserSettings,
    WeakArea,
)
from geoquiz.core.proximity import DEFAULT_TOLERANCE, calculate_distance, is_near
from geoquiz.core.text_matching import compare_text, normalize_text

__all__ = [
    "Answer",
    "AnsweredRegions",
    "DEFAULT_TOLERANCE",
    "GameMode",
    "GameSession",
    "GameState",
    "ModeStatistics",
    "Point",
    "PointLocation",
    "Question",
    "RegionLocation",
    "Statistics",
    "UserSettings",
    "WeakArea",
    "calculate_distance",
    "compare_text",
    "is_near",
    "normalize_text",
]
