"""Qt UI components for the game window."""

from .dialog_helpers import show_info
from .main_window import MathSprintWindow
from .qt_scheduler import QtScheduler, QtTaskHandle
from .question_renderer import render_headline, render_question

__all__ = [
    "MathSprintWindow",
    "QtScheduler",
    "QtTaskHandle",
    "render_headline",
    "render_question",
    "show_info",
]
