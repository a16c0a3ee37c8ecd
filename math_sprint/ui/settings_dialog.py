"""Settings dialog for configuring Math Sprint preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        game_font_size: int = 14,
        dark_theme: bool = False,
        question_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(360)

        self._game_font_size = max(10, min(32, game_font_size))
        self._dark_theme = dark_theme
        self._question_seed = question_seed or 0

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Game font size:")
        font_label.setToolTip("Font size for the question, score and timer")
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(10, 32)
        self.font_spinbox.setValue(self._game_font_size)
        self.font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.font_spinbox)
        display_layout.addLayout(font_row)

        self.dark_theme_checkbox = QCheckBox("Dark theme")
        self.dark_theme_checkbox.setChecked(self._dark_theme)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        questions_group = QGroupBox("Questions")
        questions_layout = QHBoxLayout()
        questions_group.setLayout(questions_layout)

        seed_label = QLabel("Random seed (0 = random):")
        seed_label.setToolTip("A fixed seed replays the same sequence of questions.")
        self.seed_spinbox = QSpinBox()
        self.seed_spinbox.setRange(0, 999999)
        self.seed_spinbox.setValue(self._question_seed)
        questions_layout.addWidget(seed_label)
        questions_layout.addStretch()
        questions_layout.addWidget(self.seed_spinbox)

        layout.addWidget(questions_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_game_font_size(self) -> int:
        return self.font_spinbox.value()

    def get_dark_theme(self) -> bool:
        return self.dark_theme_checkbox.isChecked()

    def get_question_seed(self) -> int | None:
        """Get the seed, or None for system randomness."""
        value = self.seed_spinbox.value()
        return value or None
