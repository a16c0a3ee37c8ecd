"""Process-wide state that outlives a single play-through."""

from __future__ import annotations

from math_sprint.core.services.game_session import GameSession


class SessionManager:
    """Owns the best score and creates fresh sessions."""

    def __init__(self, start_seconds: int) -> None:
        self._start_seconds = start_seconds
        self._best_score: int = 0
        self._sessions_created: int = 0

    def new_session(self) -> GameSession:
        self._sessions_created += 1
        return GameSession(self, start_seconds=self._start_seconds)

    def get_best_score(self) -> int:
        return self._best_score

    def record_final_score(self, score: int) -> bool:
        """Raise the best score if ``score`` beats it. Returns True on a new best."""
        if score > self._best_score:
            self._best_score = score
            return True
        return False

    def get_sessions_created(self) -> int:
        return self._sessions_created
