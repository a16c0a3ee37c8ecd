"""Question, answer input, feedback and action button."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from math_sprint.constants.ui_constants import (
    ANSWER_PLACEHOLDER,
    INSTRUCTIONS_MARKDOWN,
    RESTART_BUTTON,
    START_BUTTON,
    SUBMIT_BUTTON,
)
from math_sprint.core.game_engine import GameEngine
from math_sprint.core.markdown_renderer import renderer
from math_sprint.core.models import FeedbackKind, GameSnapshot, GameState
from math_sprint.styling import ColorPalette, Theme
from math_sprint.styling.styles import Styles
from math_sprint.ui.question_renderer import render_headline


class GamePanel(QGroupBox):
    """Card holding the interactive part of the game."""

    def __init__(self, engine: GameEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.engine = engine
        self._font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._state: GameState = GameState.IDLE
        self._feedback_kind: FeedbackKind | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.headline_label = QLabel("", self)
        self.headline_label.setAlignment(Qt.AlignCenter)
        self.headline_label.setWordWrap(True)
        layout.addWidget(self.headline_label)

        self.answer_input = QLineEdit(self)
        self.answer_input.setPlaceholderText(ANSWER_PLACEHOLDER)
        self.answer_input.setAlignment(Qt.AlignCenter)
        self.answer_input.textEdited.connect(self.engine.update_input)
        self.answer_input.returnPressed.connect(self._handle_return_pressed)
        layout.addWidget(self.answer_input)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setAlignment(Qt.AlignCenter)
        self.feedback_label.setVisible(False)
        layout.addWidget(self.feedback_label)

        self.action_button = QPushButton(START_BUTTON, self)
        self.action_button.clicked.connect(self._handle_action)
        layout.addWidget(self.action_button)

        self.instructions_label = QLabel("", self)
        self.instructions_label.setTextFormat(Qt.RichText)
        self.instructions_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.instructions_label)
        self._render_instructions()

    def render(self, snapshot: GameSnapshot) -> None:
        self._state = snapshot.state
        self.headline_label.setText(render_headline(snapshot))

        self.answer_input.setEnabled(snapshot.state is not GameState.ENDED)
        if self.answer_input.text() != snapshot.pending_input:
            self.answer_input.setText(snapshot.pending_input)

        self._feedback_kind = snapshot.feedback_kind
        if snapshot.transient_message:
            self.feedback_label.setText(snapshot.transient_message)
            self.feedback_label.setVisible(True)
            self._apply_feedback_style()
        else:
            self.feedback_label.setText("")
            self.feedback_label.setVisible(False)

        if snapshot.state is GameState.PLAYING:
            self.action_button.setText(SUBMIT_BUTTON)
            self.action_button.setEnabled(bool(snapshot.pending_input.strip()))
        elif snapshot.state is GameState.ENDED:
            self.action_button.setText(RESTART_BUTTON)
            self.action_button.setEnabled(True)
        else:
            self.action_button.setText(START_BUTTON)
            self.action_button.setEnabled(True)

        self.instructions_label.setVisible(snapshot.state is GameState.IDLE)

    def apply_style(self, font_size: int, theme: Theme) -> None:
        self._font_size = font_size
        self._theme = theme
        self.headline_label.setStyleSheet(f"font-size: {font_size + 10}pt; font-weight: bold;")
        self.answer_input.setStyleSheet(f"font-size: {font_size + 4}pt; font-weight: 600;")
        self.action_button.setStyleSheet(f"font-size: {font_size}pt;")
        self._apply_feedback_style()
        self._render_instructions()

    def focus_input(self) -> None:
        self.answer_input.setFocus()

    def _handle_action(self) -> None:
        if self._state is GameState.IDLE:
            self.engine.start()
        elif self._state is GameState.PLAYING:
            self.engine.submit_answer()
        else:
            self.engine.restart()
        self.focus_input()

    def _handle_return_pressed(self) -> None:
        if self._state is GameState.PLAYING:
            self.engine.submit_answer()
        elif self._state is GameState.IDLE:
            self.engine.start()

    def _apply_feedback_style(self) -> None:
        correct = self._feedback_kind is FeedbackKind.CORRECT
        self.feedback_label.setStyleSheet(
            Styles.get_feedback_style(self._font_size, correct, self._theme)
        )

    def _render_instructions(self) -> None:
        self.instructions_label.setText(
            renderer.render_centered(
                INSTRUCTIONS_MARKDOWN, color=ColorPalette.TEXT_MUTED.get(self._theme)
            )
        )
