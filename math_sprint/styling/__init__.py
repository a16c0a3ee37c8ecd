"""Styling module for the Math Sprint window."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
