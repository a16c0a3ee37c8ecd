"""Helper functions for common dialog patterns in the game window."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMessageBox, QWidget

from math_sprint.core.markdown_renderer import renderer


def show_info(parent: QWidget, title: str, message: str, markdown: bool = False) -> None:
    """Show an informational message box.

    Args:
        parent: Parent widget for the dialog
        title: Window title
        message: Plain text, or Markdown when ``markdown`` is set
        markdown: Render ``message`` as rich text
    """
    box = QMessageBox(parent)
    box.setIcon(QMessageBox.Information)
    box.setWindowTitle(title)
    if markdown:
        box.setTextFormat(Qt.RichText)
        box.setText(renderer.render_fragment(message))
    else:
        box.setText(message)
    box.exec()
