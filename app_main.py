"""Application entry point for Math Sprint."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from math_sprint.core.game_engine import GameEngine
from math_sprint.core.models import GameConfig
from math_sprint.ui.main_window import MathSprintWindow
from math_sprint.ui.qt_scheduler import QtScheduler
from math_sprint.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, build the engine, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting Math Sprint…")

    app = QApplication(sys.argv)
    engine = GameEngine(scheduler=QtScheduler(app), config=GameConfig())
    window = MathSprintWindow(engine=engine)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
