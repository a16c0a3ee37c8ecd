"""Service holding the state of one play-through."""

from __future__ import annotations

from typing import TYPE_CHECKING

from math_sprint.core.models import Feedback, GameState, Question

if TYPE_CHECKING:
    from math_sprint.core.services.session_manager import SessionManager


class GameSession:
    """Manages the state of a single game from idle through ended."""

    def __init__(self, manager: SessionManager, start_seconds: int) -> None:
        self._manager = manager
        self._state: GameState = GameState.IDLE
        self._current_question: Question | None = None
        self._score: int = 0
        self._start_seconds = start_seconds
        self._remaining_seconds: int = start_seconds
        self._pending_input: str = ""
        self._feedback: Feedback | None = None

    def begin(self, question: Question) -> None:
        self._state = GameState.PLAYING
        self._score = 0
        self._remaining_seconds = self._start_seconds
        self._pending_input = ""
        self._feedback = None
        self._current_question = question

    def finish(self) -> bool:
        """Mark the session ended. Returns True when the score is a new best."""
        self._state = GameState.ENDED
        self._remaining_seconds = 0
        return self._manager.record_final_score(self._score)

    def get_state(self) -> GameState:
        return self._state

    def is_playing(self) -> bool:
        return self._state is GameState.PLAYING

    def get_current_question(self) -> Question | None:
        return self._current_question

    def set_current_question(self, question: Question) -> None:
        self._current_question = question
        self._pending_input = ""

    def get_score(self) -> int:
        return self._score

    def get_best_score(self) -> int:
        return self._manager.get_best_score()

    def record_correct(self, bonus_seconds: int) -> None:
        self._score += 1
        self._remaining_seconds += bonus_seconds

    def get_remaining_seconds(self) -> int:
        return self._remaining_seconds

    def count_down(self) -> int:
        self._remaining_seconds = max(0, self._remaining_seconds - 1)
        return self._remaining_seconds

    def get_pending_input(self) -> str:
        return self._pending_input

    def set_pending_input(self, text: str) -> None:
        self._pending_input = text

    def get_feedback(self) -> Feedback | None:
        return self._feedback

    def set_feedback(self, feedback: Feedback | None) -> None:
        self._feedback = feedback
