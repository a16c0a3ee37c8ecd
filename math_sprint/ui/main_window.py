"""Qt main window for the arithmetic game."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from math_sprint.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from math_sprint.constants.ui_constants import (
    ABOUT_BUTTON,
    DEFAULT_GAME_FONT_SIZE,
    HEADER_SUBTITLE,
    HEADER_TITLE,
    SETTINGS_BUTTON,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from math_sprint.core.game_engine import GameEngine
from math_sprint.core.models import GameSnapshot
from math_sprint.styling import Theme
from math_sprint.styling.styles import Styles
from math_sprint.ui.components.game_panel import GamePanel
from math_sprint.ui.components.stats_bar import StatsBar
from math_sprint.ui.dialog_helpers import show_info
from math_sprint.ui.settings_dialog import SettingsDialog


class MathSprintWindow(QMainWindow):
    """Main window rendering engine snapshots and forwarding input."""

    def __init__(self, engine: GameEngine) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumWidth(WINDOW_MIN_WIDTH)

        self.engine = engine

        self._game_font_size: int = DEFAULT_GAME_FONT_SIZE
        self._theme: Theme = Theme.LIGHT
        self._question_seed: int | None = engine.get_config().seed

        self._build_ui()
        self._apply_styles()
        self.engine.add_listener(self._render)
        self._render(self.engine.snapshot())
        self.game_panel.focus_input()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.title_label = QLabel(HEADER_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(HEADER_SUBTITLE, self)
        self.subtitle_label.setAlignment(Qt.AlignCenter)
        root_layout.addWidget(self.subtitle_label)

        self.stats_bar = StatsBar(self)
        root_layout.addWidget(self.stats_bar)

        self.game_panel = GamePanel(self.engine, self)
        root_layout.addWidget(self.game_panel, stretch=1)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        root_layout.addLayout(button_row)

    def _render(self, snapshot: GameSnapshot) -> None:
        self.stats_bar.render(snapshot)
        self.game_panel.render(snapshot)

    def _handle_about(self) -> None:
        details = f"**{APP_NAME}** v{APP_VERSION} ({APP_LICENSE})\n\n{APP_ABOUT_TEXT}"
        show_info(self, f"About {APP_NAME}", details, markdown=True)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._game_font_size,
            self._theme == Theme.DARK,
            self._question_seed,
        )
        if dialog.exec():
            self._game_font_size = dialog.get_game_font_size()
            self._theme = Theme.DARK if dialog.get_dark_theme() else Theme.LIGHT
            self._question_seed = dialog.get_question_seed()

            self.engine.set_seed(self._question_seed)

            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.title_label.setStyleSheet(Styles.get_title_style())
        self.subtitle_label.setStyleSheet(Styles.get_muted_label_style(self._theme))

        self.stats_bar.apply_style(self._game_font_size, self._theme)
        self.game_panel.apply_style(self._game_font_size, self._theme)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        self.engine.remove_listener(self._render)
        self.engine.shutdown()
        super().closeEvent(event)
