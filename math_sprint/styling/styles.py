"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: none;
                border-radius: 6px;
                padding: 8px 14px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BADGE_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_MUTED.get(theme)};
            }}
            QLineEdit, QSpinBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
        """

    @staticmethod
    def get_title_style() -> str:
        return "font-size: 22pt; font-weight: bold;"

    @staticmethod
    def get_muted_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_MUTED.get(theme)};"

    @staticmethod
    def get_badge_style(font_size: int, theme: Theme = Theme.LIGHT, accent: bool = False) -> str:
        if accent:
            background = ColorPalette.BADGE_ACCENT_BG.get(theme)
            color = ColorPalette.BADGE_ACCENT_TEXT.get(theme)
        else:
            background = ColorPalette.BADGE_SECONDARY_BG.get(theme)
            color = ColorPalette.TEXT_PRIMARY.get(theme)
        return (
            f"padding: 2px 8px; border-radius: 4px; font-size: {font_size}pt;"
            f" color: {color}; background-color: {background};"
        )

    @staticmethod
    def get_time_warning_style(font_size: int, blink_state: bool, theme: Theme = Theme.LIGHT) -> str:
        palette_entry = ColorPalette.ERROR_BLINK if blink_state else ColorPalette.ERROR
        return (
            f"padding: 2px 8px; border-radius: 4px; font-size: {font_size}pt;"
            f" color: #fff; background-color: {palette_entry.get(theme)};"
        )

    @staticmethod
    def get_feedback_style(font_size: int, correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS if correct else ColorPalette.ERROR
        return f"font-size: {font_size}pt; font-weight: 600; color: {color.get(theme)};"
