"""Core data models for the GeoQuiz engine."""

from __future__ import annotations

import time
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def now_ms() -> int:
    """Current wall clock time in integer milliseconds."""
    return int(time.time() * 1000)


class GameMode(str, Enum):
    """Quiz variants."""

    REGIONS = "regions"  # Federal states + neighbors, sampled, with capitals
    PLACES = "places"  # Cities + rivers, sampled
    FEDERAL_STATE = "federal_state"  # All federal states, with capitals
    NEIGHBOR = "neighbor"  # All states and neighbors, with capitals
    CITY = "city"  # All cities


class Point(BaseModel):
    """A coordinate in map units."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class RegionLocation(BaseModel):
    """Location identified by clicking one of its map regions."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["region"] = "region"
    id: str
    name: str
    capital: str | None = None
    region_keys: tuple[str, ...] = Field(..., min_length=1)

    @property
    def primary_region_key(self) -> str:
        return self.region_keys[0]


class PointLocation(BaseModel):
    """Location identified by clicking close to its coordinates."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["point"] = "point"
    id: str
    name: str
    capital: str | None = None
    region_key: str
    coordinates: Point
    state_id: str | None = None

    @property
    def region_keys(self) -> tuple[str, ...]:
        return (self.region_key,)

    @property
    def primary_region_key(self) -> str:
        return self.region_key


Location = Annotated[RegionLocation | PointLocation, Field(discriminator="kind")]


class Question(BaseModel):
    """A single quiz prompt: find this location on the map."""

    model_config = ConfigDict(frozen=True)

    location: Location
    kind: Literal["location"] = "location"
    mode: GameMode


class Answer(BaseModel):
    """Result of one question, completed in two phases.

    The location phase is set on creation; the capital phase is attached
    later through ``GameSession.attach_capital_result``.
    """

    question: Question
    location_correct: bool
    capital_correct: bool | None = None
    user_click_point: Point | None = None
    user_clicked_region: str | None = None
    user_capital_text: str | None = None
    timestamp: int = Field(default_factory=now_ms)


class GameSession(BaseModel):
    """One played quiz round."""

    mode: GameMode
    score: int = 0
    total_questions: int = 0
    answers: list[Answer] = Field(default_factory=list)
    start_time: int = Field(default_factory=now_ms)
    end_time: int | None = None

    @property
    def is_complete(self) -> bool:
        return self.end_time is not None

    @property
    def correct_answers(self) -> int:
        """Location and capital points earned across all answers."""
        correct = 0
        for answer in self.answers:
            if answer.location_correct:
                correct += 1
            if answer.capital_correct is True:
                correct += 1
        return correct

    @property
    def duration_ms(self) -> int | None:
        if self.end_time is None:
            return None
        return self.end_time - self.start_time

    def add_answer(self, answer: Answer) -> int:
        """Append an answer and return its index."""
        self.answers.append(answer)
        return len(self.answers) - 1

    def attach_capital_result(self, index: int, correct: bool, text: str) -> Answer:
        """Record the capital phase on the answer at ``index``.

        Raises:
            IndexError: If no answer exists at ``index``
        """
        updated = self.answers[index].model_copy(
            update={"capital_correct": correct, "user_capital_text": text}
        )
        self.answers[index] = updated
        return updated


class AnsweredRegions(BaseModel):
    """Region keys to highlight as answered right or wrong."""

    correct: list[str] = Field(default_factory=list)
    incorrect: list[str] = Field(default_factory=list)


class GameState(BaseModel):
    """Live state of a session controller."""

    current_mode: GameMode | None = None
    current_session: GameSession | None = None
    current_question: Question | None = None
    question_queue: list[Question] = Field(default_factory=list)
    awaiting_capital_input: bool = False
    last_answer_correct: bool | None = None
    correct_location: Location | None = None
    answered_regions: AnsweredRegions = Field(default_factory=AnsweredRegions)

    @property
    def is_session_active(self) -> bool:
        return self.current_session is not None and self.current_question is not None


class ModeStatistics(BaseModel):
    """Cumulative results for one game mode."""

    sessions_played: int = Field(default=0, ge=0)
    total_questions: int = Field(default=0, ge=0)
    correct_answers: int = Field(default=0, ge=0)
    success_rate: float = Field(default=0.0, ge=0)
    best_score: int = Field(default=0, ge=0)


class WeakArea(BaseModel):
    """A location the user recently got wrong at least once."""

    location_id: str
    location_name: str
    success_rate: float = Field(..., ge=0, le=100)


def _default_by_mode() -> dict[GameMode, ModeStatistics]:
    return {mode: ModeStatistics() for mode in GameMode}


class Statistics(BaseModel):
    """Aggregated history across all recorded sessions."""

    total_sessions: int = Field(default=0, ge=0)
    by_mode: dict[GameMode, ModeStatistics] = Field(default_factory=_default_by_mode)
    weak_areas: list[WeakArea] = Field(default_factory=list, max_length=10)

    @field_validator("by_mode")
    @classmethod
    def fill_missing_modes(
        cls, v: dict[GameMode, ModeStatistics]
    ) -> dict[GameMode, ModeStatistics]:
        """Add empty rollups for modes absent from older saved data."""
        for mode in GameMode:
            v.setdefault(mode, ModeStatistics())
        return v


class UserSettings(BaseModel):
    """User preferences kept between runs."""

    timer_enabled: bool = False
    timer_duration: int = Field(default=30, ge=1, le=300)
