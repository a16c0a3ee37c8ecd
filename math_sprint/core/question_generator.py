"""Random arithmetic question generation."""

from __future__ import annotations

import random

from math_sprint.constants.game_constants import (
    ADD_OPERAND_RANGE,
    DIVIDE_DIVISOR_RANGE,
    DIVIDE_QUOTIENT_RANGE,
    MULTIPLY_OPERAND_RANGE,
    SUBTRACT_MINUEND_RANGE,
)
from math_sprint.core.models import Operator, Question

_OPERATORS: tuple[Operator, ...] = tuple(Operator)


def generate_question(operator: Operator, rng: random.Random | None = None) -> Question:
    """Build a question for ``operator`` whose answer is an exact integer.

    Subtraction never goes negative and division never leaves a remainder:
    the dividend is built as ``quotient * divisor``.
    """
    if not isinstance(operator, Operator):
        raise ValueError(f"Unsupported operator: {operator!r}")
    rng = rng or random.Random()

    if operator is Operator.ADD:
        first = rng.randint(*ADD_OPERAND_RANGE)
        second = rng.randint(*ADD_OPERAND_RANGE)
        answer = first + second
    elif operator is Operator.SUBTRACT:
        first = rng.randint(*SUBTRACT_MINUEND_RANGE)
        second = rng.randint(1, first)
        answer = first - second
    elif operator is Operator.MULTIPLY:
        first = rng.randint(*MULTIPLY_OPERAND_RANGE)
        second = rng.randint(*MULTIPLY_OPERAND_RANGE)
        answer = first * second
    else:
        answer = rng.randint(*DIVIDE_QUOTIENT_RANGE)
        second = rng.randint(*DIVIDE_DIVISOR_RANGE)
        first = answer * second

    return Question(
        first_operand=first,
        second_operand=second,
        operator=operator,
        expected_answer=answer,
    )


def pick_operator(rng: random.Random | None = None) -> Operator:
    """Uniform choice over the four operators."""
    return (rng or random.Random()).choice(_OPERATORS)


class QuestionGenerator:
    """Seedable source of questions with a randomly chosen operator."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def set_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def next_question(self) -> Question:
        return generate_question(pick_operator(self._rng), self._rng)

    def question_for(self, operator: Operator) -> Question:
        return generate_question(operator, self._rng)
