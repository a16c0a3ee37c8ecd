"""Color palette for Math Sprint supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#111827",      # Near black
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_MUTED = ThemeColors(
        light="#6B7280",      # Gray
        dark="#9CA3AF"        # Light Gray
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    BACKGROUND_CARD = ThemeColors(
        light="#F9FAFB",      # Off white
        dark="#2D2D2D"        # Slightly lighter dark
    )

    # Badges
    BADGE_SECONDARY_BG = ThemeColors(
        light="#E5E7EB",
        dark="#3A3A3A"
    )

    BADGE_ACCENT_BG = ThemeColors(
        light="#0E7490",      # Cyan
        dark="#22D3EE"        # Light Cyan
    )

    BADGE_ACCENT_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#0B1120"
    )

    # Status colors
    SUCCESS = ThemeColors(
        light="#15803D",      # Green
        dark="#6FCF6F"        # Light Green
    )

    ERROR = ThemeColors(
        light="#DC2626",      # Red
        dark="#FF6B6B"        # Light Red
    )

    ERROR_BLINK = ThemeColors(
        light="#B91C1C",      # Dark Red
        dark="#EF4444"        # Red
    )

    # Border colors
    BORDER_PRIMARY = ThemeColors(
        light="#D1D5DB",      # Gray
        dark="#555555"        # Dark Gray
    )

    # Button colors
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#0078D4",      # Blue
        dark="#4A9EFF"        # Lighter Blue
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",      # White
        dark="#000000"        # Black
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#005A9E",      # Dark Blue
        dark="#74B4FF"        # Pale Blue
    )
