"""Game engine shared between the Qt layer and headless drivers."""

from __future__ import annotations

import logging
from threading import RLock
from typing import Callable

from math_sprint.constants.game_constants import (
    CORRECT_FEEDBACK_TEMPLATE,
    WRONG_FEEDBACK_TEMPLATE,
)
from math_sprint.core.answer_parser import parse_answer
from math_sprint.core.models import (
    AnswerResult,
    FeedbackKind,
    GameConfig,
    GameSnapshot,
    GameState,
    Operator,
    Question,
)
from math_sprint.core.question_generator import QuestionGenerator
from math_sprint.core.services.feedback import FeedbackChannel
from math_sprint.core.services.scheduler import Scheduler, TaskHandle
from math_sprint.core.services.session_manager import SessionManager

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[GameSnapshot], None]


class GameEngine:
    """Facade over the session, question generator, feedback and timers.

    Operations that are not valid in the current state do nothing and return
    ``False`` (or ``None`` for ``submit_answer``). Listeners are called with a
    fresh snapshot after every change, outside the engine lock.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: GameConfig | None = None,
        session_manager: SessionManager | None = None,
        generator: QuestionGenerator | None = None,
    ) -> None:
        self._lock = RLock()
        self._config = config or GameConfig()
        self._scheduler = scheduler

        # Services
        self._sessions = session_manager or SessionManager(self._config.start_seconds)
        self._session = self._sessions.new_session()
        self._generator = generator or QuestionGenerator(self._config.seed)
        self._feedback = FeedbackChannel(scheduler, self._expire_feedback)

        self._tick_handle: TaskHandle | None = None
        self._listeners: list[SnapshotListener] = []

    # --- Game lifecycle ---

    def start(self) -> bool:
        with self._lock:
            started = self._start_locked()
            snapshot = self._snapshot_locked()
        if started:
            self._notify(snapshot)
        return started

    def update_input(self, text: str) -> bool:
        """Track typed input; non-blank input while idle starts a game."""
        with self._lock:
            state = self._session.get_state()
            if state is GameState.ENDED:
                return False
            if state is GameState.IDLE:
                if not text.strip():
                    return False
                changed = self._start_locked()
            else:
                self._session.set_pending_input(text)
                changed = True
            snapshot = self._snapshot_locked()
        if changed:
            self._notify(snapshot)
        return changed

    def submit_answer(self, raw_input: str | None = None) -> AnswerResult | None:
        """Score ``raw_input`` (or the pending input) and move to a new question."""
        with self._lock:
            question = self._session.get_current_question()
            if not self._session.is_playing() or question is None:
                logger.debug("Ignoring answer while %s", self._session.get_state().name)
                return None

            text = self._session.get_pending_input() if raw_input is None else raw_input
            if not text.strip():
                return None

            value = parse_answer(text)
            is_correct = value is not None and value == question.expected_answer
            if is_correct:
                bonus = self._config.correct_bonus_seconds
                self._session.record_correct(bonus)
                feedback = self._feedback.publish(
                    FeedbackKind.CORRECT,
                    CORRECT_FEEDBACK_TEMPLATE.format(bonus=bonus),
                    self._config.correct_feedback_seconds,
                )
            else:
                feedback = self._feedback.publish(
                    FeedbackKind.WRONG,
                    WRONG_FEEDBACK_TEMPLATE.format(answer=question.expected_answer),
                    self._config.wrong_feedback_seconds,
                )
            logger.debug(
                "Answer %r to %s %s %s: %s",
                text,
                question.first_operand,
                question.operator.value,
                question.second_operand,
                "correct" if is_correct else "wrong",
            )

            self._session.set_feedback(feedback)
            self._session.set_current_question(self._generator.next_question())
            result = AnswerResult(
                is_correct=is_correct,
                submitted_value=value,
                expected_answer=question.expected_answer,
                score=self._session.get_score(),
                remaining_seconds=self._session.get_remaining_seconds(),
            )
            snapshot = self._snapshot_locked()
        self._notify(snapshot)
        return result

    def tick(self) -> bool:
        """Advance the countdown by one second."""
        with self._lock:
            if not self._session.is_playing():
                return False
            if self._session.count_down() <= 0:
                self._end_locked()
            snapshot = self._snapshot_locked()
        self._notify(snapshot)
        return True

    def restart(self) -> bool:
        with self._lock:
            if self._session.is_playing():
                logger.debug("Ignoring restart while a game is running")
                return False
            self._cancel_tick_timer()
            self._feedback.invalidate()
            self._session = self._sessions.new_session()
            logger.info("Game reset; best score %d", self._sessions.get_best_score())
            snapshot = self._snapshot_locked()
        self._notify(snapshot)
        return True

    def shutdown(self) -> None:
        """Cancel every pending timer. Safe to call more than once."""
        with self._lock:
            self._cancel_tick_timer()
            self._feedback.invalidate()

    # --- Questions ---

    def generate_question(self, operator: Operator) -> Question:
        with self._lock:
            return self._generator.question_for(operator)

    def set_seed(self, seed: int | None) -> None:
        with self._lock:
            self._generator.set_seed(seed)

    # --- Read access ---

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def get_state(self) -> GameState:
        with self._lock:
            return self._session.get_state()

    def get_best_score(self) -> int:
        with self._lock:
            return self._sessions.get_best_score()

    def get_config(self) -> GameConfig:
        return self._config

    def is_tick_timer_active(self) -> bool:
        with self._lock:
            return self._tick_handle is not None and self._tick_handle.active

    # --- Listeners ---

    def add_listener(self, listener: SnapshotListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: SnapshotListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # --- Internals ---

    def _start_locked(self) -> bool:
        state = self._session.get_state()
        if state is not GameState.IDLE:
            logger.debug("Ignoring start while %s", state.name)
            return False
        self._feedback.invalidate()
        self._session.begin(self._generator.next_question())
        self._cancel_tick_timer()
        self._tick_handle = self._scheduler.call_repeating(
            self._config.tick_interval_seconds, self.tick
        )
        logger.info("Game started with %ds on the clock", self._session.get_remaining_seconds())
        return True

    def _end_locked(self) -> None:
        self._cancel_tick_timer()
        new_best = self._session.finish()
        logger.info(
            "Time is up: score %d, best %d%s",
            self._session.get_score(),
            self._sessions.get_best_score(),
            " (new best)" if new_best else "",
        )

    def _cancel_tick_timer(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _expire_feedback(self, version: int) -> None:
        with self._lock:
            feedback = self._session.get_feedback()
            if (
                not self._feedback.is_current(version)
                or feedback is None
                or feedback.version != version
            ):
                logger.debug("Skipping stale feedback clear (version %d)", version)
                return
            self._session.set_feedback(None)
            snapshot = self._snapshot_locked()
        self._notify(snapshot)

    def _snapshot_locked(self) -> GameSnapshot:
        question = self._session.get_current_question()
        feedback = self._session.get_feedback()
        return GameSnapshot(
            state=self._session.get_state(),
            question=question.prompt() if question is not None else None,
            score=self._session.get_score(),
            best_score=self._sessions.get_best_score(),
            remaining_seconds=self._session.get_remaining_seconds(),
            transient_message=feedback.text if feedback is not None else None,
            feedback_kind=feedback.kind if feedback is not None else None,
            pending_input=self._session.get_pending_input(),
        )

    def _notify(self, snapshot: GameSnapshot) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(snapshot)
