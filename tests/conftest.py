from __future__ import annotations

from itertools import cycle

import pytest

from math_sprint.core.game_engine import GameEngine
from math_sprint.core.models import GameConfig, Operator, Question
from math_sprint.core.question_generator import QuestionGenerator
from math_sprint.core.services.scheduler import ManualScheduler


class ScriptedGenerator(QuestionGenerator):
    """Hands out the given questions in a loop."""

    def __init__(self, questions: list[Question]) -> None:
        super().__init__(seed=0)
        self._questions = cycle(questions)

    def next_question(self) -> Question:
        return next(self._questions)


SEVEN_PLUS_FIVE = Question(7, 5, Operator.ADD, 12)
THREE_TIMES_FOUR = Question(3, 4, Operator.MULTIPLY, 12)
FORTY_TWO_MINUS_NINE = Question(42, 9, Operator.SUBTRACT, 33)


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def engine(scheduler: ManualScheduler) -> GameEngine:
    return GameEngine(scheduler, GameConfig(seed=1234))


@pytest.fixture()
def scripted_engine(scheduler: ManualScheduler) -> GameEngine:
    generator = ScriptedGenerator([SEVEN_PLUS_FIVE, THREE_TIMES_FOUR, FORTY_TWO_MINUS_NINE])
    return GameEngine(scheduler, GameConfig(), generator=generator)


def play_until_over(engine: GameEngine) -> None:
    while engine.tick():
        pass
