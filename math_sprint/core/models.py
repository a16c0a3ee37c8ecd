"""Domain models for the arithmetic game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from math_sprint.constants.game_constants import (
    CORRECT_BONUS_SECONDS,
    CORRECT_FEEDBACK_SECONDS,
    START_SECONDS,
    TICK_INTERVAL_SECONDS,
    WRONG_FEEDBACK_SECONDS,
)


class Operator(Enum):
    """Arithmetic operators a question can use."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        """Glyph shown to the player."""
        return _DISPLAY_SYMBOLS[self]

    def apply(self, first: int, second: int) -> int:
        if self is Operator.ADD:
            return first + second
        if self is Operator.SUBTRACT:
            return first - second
        if self is Operator.MULTIPLY:
            return first * second
        quotient, remainder = divmod(first, second)
        if remainder:
            raise ValueError(f"{first} is not evenly divisible by {second}")
        return quotient


_DISPLAY_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
}


class GameState(Enum):
    """Lifecycle of a single play-through."""

    IDLE = auto()
    PLAYING = auto()
    ENDED = auto()


class FeedbackKind(Enum):
    CORRECT = auto()
    WRONG = auto()


@dataclass(frozen=True, slots=True)
class QuestionPrompt:
    """Question as shown to the player, without the answer."""

    first_operand: int
    second_operand: int
    operator: Operator


@dataclass(frozen=True, slots=True)
class Question:
    """Arithmetic problem together with its exact integer answer."""

    first_operand: int
    second_operand: int
    operator: Operator
    expected_answer: int

    def prompt(self) -> QuestionPrompt:
        return QuestionPrompt(
            first_operand=self.first_operand,
            second_operand=self.second_operand,
            operator=self.operator,
        )


@dataclass(frozen=True, slots=True)
class Feedback:
    """Transient message shown after an answer."""

    kind: FeedbackKind
    text: str
    version: int


@dataclass(frozen=True, slots=True)
class AnswerResult:
    """Outcome of a submitted answer."""

    is_correct: bool
    submitted_value: int | None
    expected_answer: int
    score: int
    remaining_seconds: int


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only view of the engine handed to the presentation layer."""

    state: GameState
    question: QuestionPrompt | None
    score: int
    best_score: int
    remaining_seconds: int
    transient_message: str | None
    feedback_kind: FeedbackKind | None
    pending_input: str


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Tunable engine settings. Times are in seconds."""

    start_seconds: int = START_SECONDS
    correct_bonus_seconds: int = CORRECT_BONUS_SECONDS
    tick_interval_seconds: float = TICK_INTERVAL_SECONDS
    correct_feedback_seconds: float = CORRECT_FEEDBACK_SECONDS
    wrong_feedback_seconds: float = WRONG_FEEDBACK_SECONDS
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.start_seconds <= 0:
            raise ValueError("start_seconds must be positive")
        if self.correct_bonus_seconds < 0:
            raise ValueError("correct_bonus_seconds cannot be negative")
        for name in ("tick_interval_seconds", "correct_feedback_seconds", "wrong_feedback_seconds"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
