"""Color palette for TriviaQt supporting light and dark themes."""

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
    """Centralized color definitions for the player window."""

    TEXT_PRIMARY = ThemeColors(light="#1F2937", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#6B7280", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#EEF2FF", dark="#1E1E1E")
    BACKGROUND_CARD = ThemeColors(light="#FFFFFF", dark="#2D2D2D")

    ACCENT_PRIMARY = ThemeColors(light="#2563EB", dark="#4A9EFF")

    # Answer feedback and score tiers
    SUCCESS = ThemeColors(light="#059669", dark="#6FCF6F")
    SUCCESS_BG = ThemeColors(light="#ECFDF5", dark="#1F3A2A")
    WARNING = ThemeColors(light="#D97706", dark="#FFC83D")
    ERROR = ThemeColors(light="#DC2626", dark="#FF6B6B")
    ERROR_BG = ThemeColors(light="#FEF2F2", dark="#3A1F1F")

    BORDER_PRIMARY = ThemeColors(light="#E5E7EB", dark="#555555")

    BUTTON_PRIMARY_BG = ThemeColors(light="#2563EB", dark="#4A9EFF")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#000000")
    BUTTON_SECONDARY_BG = ThemeColors(light="#F9FAFB", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#EFF6FF", dark="#505050")
    BUTTON_DANGER_BG = ThemeColors(light="#EF4444", dark="#FF6B6B")
