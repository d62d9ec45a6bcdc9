"""Pytest configuration and fixtures."""

from __future__ import annotations

import itertools
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from geoquiz.core.models import GameMode, Point, PointLocation, Question, RegionLocation  # noqa: E402
from geoquiz.infrastructure.persistence import KeyValueStore  # noqa: E402


@pytest.fixture
def store() -> KeyValueStore:
    """In-memory key-value store."""
    return KeyValueStore()


@pytest.fixture
def clock() -> Callable[[], int]:
    """Deterministic millisecond clock advancing one second per call."""
    counter = itertools.count(start=1_000_000, step=1000)
    return lambda: next(counter)


@pytest.fixture
def bavaria() -> RegionLocation:
    return RegionLocation(id="by", name="Bayern", capital="München", region_keys=("DE-BY",))


@pytest.fixture
def hesse() -> RegionLocation:
    return RegionLocation(id="he", name="Hessen", capital="Wiesbaden", region_keys=("DE-HE",))


@pytest.fixture
def elbe() -> RegionLocation:
    return RegionLocation(id="elbe", name="Elbe", region_keys=("river-11", "river-12"))


@pytest.fixture
def cologne() -> PointLocation:
    return PointLocation(
        id="koeln",
        name="Köln",
        region_key="city-koeln",
        coordinates=Point(x=350, y=450),
        state_id="nw",
    )


def make_questions(mode: GameMode, *locations: RegionLocation | PointLocation) -> list[Question]:
    """Questions for ``locations`` in the given order."""
    return [Question(location=location, mode=mode) for location in locations]


@pytest.fixture
def questions_factory() -> Callable[..., list[Question]]:
    return make_questions
