"""Question sequence generation for each game mode.

Each mode draws from one or more location catalogs, shuffles them and
optionally keeps only a fixed-size sample.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from geoquiz.core.models import GameMode, PointLocation, Question, RegionLocation
from geoquiz.data import CITIES, FEDERAL_STATES, NEIGHBORING_COUNTRIES, RIVERS

logger = logging.getLogger(__name__)

T = TypeVar("T")

CatalogLocation = RegionLocation | PointLocation


@dataclass(frozen=True)
class Catalogs:
    """The location catalogs questions are drawn from."""

    federal_states: Sequence[RegionLocation] = FEDERAL_STATES
    neighboring_countries: Sequence[RegionLocation] = NEIGHBORING_COUNTRIES
    cities: Sequence[PointLocation] = CITIES
    rivers: Sequence[RegionLocation] = RIVERS


DEFAULT_CATALOGS = Catalogs()


@dataclass(frozen=True)
class ModeDefinition:
    """Which catalogs a mode uses and how many questions it asks."""

    catalogs: tuple[str, ...]
    sample_size: int | None  # None means the whole pool
    requires_capital: bool


MODE_DEFINITIONS: dict[GameMode, ModeDefinition] = {
    GameMode.REGIONS: ModeDefinition(
        catalogs=("federal_states", "neighboring_countries"),
        sample_size=10,
        requires_capital=True,
    ),
    GameMode.PLACES: ModeDefinition(
        catalogs=("cities", "rivers"),
        sample_size=15,
        requires_capital=False,
    ),
    GameMode.FEDERAL_STATE: ModeDefinition(
        catalogs=("federal_states",),
        sample_size=None,
        requires_capital=True,
    ),
    GameMode.NEIGHBOR: ModeDefinition(
        catalogs=("federal_states", "neighboring_countries"),
        sample_size=None,
        requires_capital=True,
    ),
    GameMode.CITY: ModeDefinition(
        catalogs=("cities",),
        sample_size=None,
        requires_capital=False,
    ),
}


def mode_requires_capital(mode: GameMode) -> bool:
    """Whether a correct location answer in ``mode`` triggers a capital question."""
    return MODE_DEFINITIONS[mode].requires_capital


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of ``items`` (Fisher-Yates)."""
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def locations_for_mode(
    mode: GameMode, catalogs: Catalogs = DEFAULT_CATALOGS
) -> list[CatalogLocation]:
    """Collect the unshuffled location pool for a mode."""
    pool: list[CatalogLocation] = []
    for catalog_name in MODE_DEFINITIONS[mode].catalogs:
        pool.extend(getattr(catalogs, catalog_name))
    return pool


def generate_questions(
    mode: GameMode,
    catalogs: Catalogs = DEFAULT_CATALOGS,
    rng: random.Random | None = None,
    sample_size: int | None = None,
) -> list[Question]:
    """Build a shuffled question sequence for a mode.

    Args:
        mode: Game mode to generate questions for
        catalogs: Location catalogs to draw from
        rng: Random source, a fresh one is used when omitted
        sample_size: Overrides the mode's default sample size

    Returns:
        Questions in presentation order, possibly empty
    """
    definition = MODE_DEFINITIONS[mode]
    size = sample_size if sample_size is not None else definition.sample_size

    locations = shuffle(locations_for_mode(mode, catalogs), rng)
    if size is not None:
        locations = locations[:size]

    if not locations:
        logger.warning(f"No locations available for mode {mode.value}")

    return [Question(location=location, mode=mode) for location in locations]
