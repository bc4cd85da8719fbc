"""Styling module for the TriviaQt player."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
