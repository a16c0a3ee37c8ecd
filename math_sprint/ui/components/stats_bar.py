"""Score, best score and countdown badges."""

from __future__ import annotations

from PySide6.QtWidgets import QHBoxLayout, QLabel, QWidget

from math_sprint.constants.game_constants import LOW_TIME_WARNING_SECONDS
from math_sprint.constants.ui_constants import (
    BEST_TEMPLATE,
    SCORE_TEMPLATE,
    TIME_CAPTION,
    TIME_TEMPLATE,
)
from math_sprint.core.models import GameSnapshot, GameState
from math_sprint.styling import Theme
from math_sprint.styling.styles import Styles


class StatsBar(QWidget):
    """Row of badges shown above the game area."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._last_snapshot: GameSnapshot | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(layout)

        self.score_label = QLabel(SCORE_TEMPLATE.format(score=0), self)
        layout.addWidget(self.score_label)

        self.best_label = QLabel(BEST_TEMPLATE.format(best=0), self)
        layout.addWidget(self.best_label)

        layout.addStretch()

        self.time_caption = QLabel(TIME_CAPTION, self)
        layout.addWidget(self.time_caption)

        self.time_label = QLabel("", self)
        layout.addWidget(self.time_label)

    def render(self, snapshot: GameSnapshot) -> None:
        self._last_snapshot = snapshot
        self.score_label.setText(SCORE_TEMPLATE.format(score=snapshot.score))
        self.best_label.setText(BEST_TEMPLATE.format(best=snapshot.best_score))
        self.time_label.setText(TIME_TEMPLATE.format(seconds=snapshot.remaining_seconds))
        self._update_time_emphasis(snapshot)

    def apply_style(self, font_size: int, theme: Theme) -> None:
        self._font_size = font_size
        self._theme = theme
        self.score_label.setStyleSheet(Styles.get_badge_style(font_size, theme))
        self.best_label.setStyleSheet(Styles.get_badge_style(font_size, theme))
        self.time_caption.setStyleSheet(Styles.get_muted_label_style(theme))
        if self._last_snapshot is not None:
            self._update_time_emphasis(self._last_snapshot)
        else:
            self.time_label.setStyleSheet(Styles.get_badge_style(font_size, theme, accent=True))

    def _update_time_emphasis(self, snapshot: GameSnapshot) -> None:
        remaining = snapshot.remaining_seconds
        low_time = snapshot.state is not GameState.IDLE and remaining <= LOW_TIME_WARNING_SECONDS
        if not low_time:
            self.time_label.setStyleSheet(
                Styles.get_badge_style(self._font_size, self._theme, accent=True)
            )
            return
        blink_state = snapshot.state is GameState.PLAYING and remaining % 2 == 0
        self.time_label.setStyleSheet(
            Styles.get_time_warning_style(self._font_size, blink_state, self._theme)
        )
