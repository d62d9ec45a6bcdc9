"""Quiz session orchestration.

This module drives a single quiz session: it hands out questions, checks
location and capital answers, keeps the score and tracks which map regions
were answered right or wrong.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from geoquiz.core.models import (
    Answer,
    GameMode,
    GameSession,
    GameState,
    Point,
    PointLocation,
    Question,
    RegionLocation,
    now_ms,
)
from geoquiz.core.proximity import DEFAULT_TOLERANCE, is_near
from geoquiz.core.question_generator import generate_questions, mode_requires_capital
from geoquiz.core.text_matching import compare_text

logger = logging.getLogger(__name__)

QuestionGenerator = Callable[[GameMode], list[Question]]
StateFactory = Callable[[], GameState]
Clock = Callable[[], int]


class SessionController:
    """Owns one game state and applies quiz operations to it.

    Operations that arrive without an active question (for example a late
    click after the session ended) are ignored rather than raising.
    """

    def __init__(
        self,
        initial_state_factory: StateFactory = GameState,
        question_generator: QuestionGenerator = generate_questions,
        clock: Clock = now_ms,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> None:
        """Initialize session controller.

        Args:
            initial_state_factory: Builds the idle state
            question_generator: Produces the questions for a mode
            clock: Returns the current time in milliseconds
            tolerance: Click radius for point-based locations
        """
        self._initial_state_factory = initial_state_factory
        self._question_generator = question_generator
        self._clock = clock
        self.tolerance = tolerance
        self._state = initial_state_factory()

    @property
    def state(self) -> GameState:
        """Live state. Use ``snapshot`` to hand a copy to readers."""
        return self._state

    def snapshot(self) -> GameState:
        return self._state.model_copy(deep=True)

    @property
    def current_mode(self) -> GameMode | None:
        return self._state.current_mode

    @property
    def current_question(self) -> Question | None:
        return self._state.current_question

    @property
    def current_score(self) -> int:
        session = self._state.current_session
        return session.score if session else 0

    @property
    def is_session_active(self) -> bool:
        return self._state.is_session_active

    def start_new_session(self, mode: GameMode) -> GameSession:
        """Start a new session in ``mode``, replacing any current one.

        With no questions available the session is completed immediately.
        """
        questions = self._question_generator(mode)
        session = GameSession(
            mode=mode,
            total_questions=len(questions),
            start_time=self._clock(),
        )

        state = self._initial_state_factory()
        state.current_mode = mode
        state.current_session = session
        if questions:
            state.current_question = questions[0]
            state.question_queue = list(questions[1:])
        else:
            session.end_time = self._clock()
            logger.info(f"Session for mode {mode.value} has no questions")

        self._state = state
        logger.debug(f"Started {mode.value} session with {len(questions)} questions")
        return session

    def submit_location_answer(
        self,
        clicked_region_key: str | None = None,
        click_point: Point | None = None,
    ) -> bool | None:
        """Evaluate a map click for the current question.

        Args:
            clicked_region_key: Key of the clicked map region, if any
            click_point: Click coordinates, needed for point-based locations

        Returns:
            Whether the location was correct, or None if the call was ignored
        """
        state = self._state
        question = state.current_question
        session = state.current_session
        if question is None or session is None or state.awaiting_capital_input:
            logger.debug("Ignoring location answer without a pending question")
            return None

        location = question.location
        correct = self._is_location_correct(location, clicked_region_key, click_point)

        session.add_answer(
            Answer(
                question=question,
                location_correct=correct,
                user_click_point=click_point,
                user_clicked_region=clicked_region_key,
                timestamp=self._clock(),
            )
        )

        # Every key of a multi-path location is highlighted together.
        answered = state.answered_regions
        target = answered.correct if correct else answered.incorrect
        for key in location.region_keys:
            if key not in target:
                target.append(key)

        state.last_answer_correct = correct
        state.correct_location = location

        if correct and mode_requires_capital(question.mode) and location.capital:
            session.score += 1
            state.awaiting_capital_input = True
            return correct

        if correct:
            session.score += 1
        self._move_to_next_question()
        return correct

    def submit_capital_answer(self, text: str) -> bool | None:
        """Evaluate the capital typed for the current question.

        Returns:
            Whether the capital was correct, or None if the call was ignored
        """
        state = self._state
        question = state.current_question
        session = state.current_session
        if (
            question is None
            or session is None
            or not state.awaiting_capital_input
            or not session.answers
        ):
            logger.debug("Ignoring capital answer without a pending capital question")
            return None

        correct = compare_text(text, question.location.capital or "")
        session.attach_capital_result(len(session.answers) - 1, correct, text)

        if correct:
            session.score += 1
        state.awaiting_capital_input = False
        state.last_answer_correct = correct
        self._move_to_next_question()
        return correct

    def end_session(self) -> GameSession | None:
        """Stop the current session and return it for recording."""
        session = self._state.current_session
        if session is None:
            return None

        if session.end_time is None:
            session.end_time = self._clock()

        state = self._initial_state_factory()
        state.current_session = session
        self._state = state
        logger.debug(f"Ended {session.mode.value} session with score {session.score}")
        return session

    def clear_session(self) -> None:
        """Discard everything and return to the idle state."""
        self._state = self._initial_state_factory()

    def _is_location_correct(
        self,
        location: RegionLocation | PointLocation,
        clicked_region_key: str | None,
        click_point: Point | None,
    ) -> bool:
        match location:
            case PointLocation():
                return click_point is not None and is_near(
                    click_point, location.coordinates, self.tolerance
                )
            case RegionLocation():
                return (
                    clicked_region_key is not None
                    and clicked_region_key in location.region_keys
                )
            case _:
                raise TypeError(f"Unknown location type: {type(location).__name__}")

    def _move_to_next_question(self) -> None:
        state = self._state
        if state.question_queue:
            state.current_question = state.question_queue.pop(0)
            return

        state.current_question = None
        if state.current_session is not None:
            state.current_session.end_time = self._clock()
            logger.info(
                f"Completed {state.current_session.mode.value} session "
                f"with score {state.current_session.score}"
            )


def create_session_controller(
    initial_state_factory: StateFactory = GameState,
    question_generator: QuestionGenerator = generate_questions,
    clock: Clock = now_ms,
    tolerance: float = DEFAULT_TOLERANCE,
) -> SessionController:
    """Create an isolated session controller."""
    return SessionController(
        initial_state_factory=initial_state_factory,
        question_generator=question_generator,
        clock=clock,
        tolerance=tolerance,
    )
