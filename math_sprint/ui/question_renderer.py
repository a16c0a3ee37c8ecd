"""Text rendering for the question area."""

from __future__ import annotations

from math_sprint.constants.ui_constants import ENDED_TEMPLATE, IDLE_PROMPT, QUESTION_TEMPLATE
from math_sprint.core.models import GameSnapshot, GameState, QuestionPrompt


def render_question(prompt: QuestionPrompt) -> str:
    """Format a question like ``7 × 5 = ?`` using display glyphs."""
    return QUESTION_TEMPLATE.format(
        first=prompt.first_operand,
        symbol=prompt.operator.symbol,
        second=prompt.second_operand,
    )


def render_headline(snapshot: GameSnapshot) -> str:
    if snapshot.state is GameState.PLAYING and snapshot.question is not None:
        return render_question(snapshot.question)
    if snapshot.state is GameState.ENDED:
        return ENDED_TEMPLATE.format(score=snapshot.score)
    return IDLE_PROMPT
