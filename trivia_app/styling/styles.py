"""Centralized Qt stylesheets for the player window."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 8px 14px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QLineEdit, QSpinBox, QComboBox {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px;
            }}
            QProgressBar {{
                border: none;
                border-radius: 3px;
                background-color: {ColorPalette.BORDER_PRIMARY.get(theme)};
                max-height: 6px;
            }}
            QProgressBar::chunk {{
                border-radius: 3px;
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
        """

    @staticmethod
    def get_title_style() -> str:
        return "font-size: 20pt; font-weight: bold;"

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};"
            f"color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};"
            "font-weight: bold;"
        )

    @staticmethod
    def get_danger_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.BUTTON_DANGER_BG.get(theme)};"
            "color: #FFFFFF;"
        )

    @staticmethod
    def get_option_style(state: str, theme: Theme = Theme.LIGHT) -> str:
        """Style for an answer button: idle, correct, wrong or dimmed."""
        if state == "correct":
            return (
                f"text-align: left; border: 2px solid {ColorPalette.SUCCESS.get(theme)};"
                f"background-color: {ColorPalette.SUCCESS_BG.get(theme)};"
            )
        if state == "wrong":
            return (
                f"text-align: left; border: 2px solid {ColorPalette.ERROR.get(theme)};"
                f"background-color: {ColorPalette.ERROR_BG.get(theme)};"
            )
        if state == "dimmed":
            return f"text-align: left; color: {ColorPalette.TEXT_SECONDARY.get(theme)};"
        return "text-align: left;"

    @staticmethod
    def get_timer_style(low: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.ERROR if low else ColorPalette.ACCENT_PRIMARY
        return f"font-size: 14pt; font-weight: bold; color: {color.get(theme)};"

    @staticmethod
    def get_score_style(tier: str, theme: Theme = Theme.LIGHT) -> str:
        colors = {
            "good": ColorPalette.SUCCESS,
            "fair": ColorPalette.WARNING,
            "poor": ColorPalette.ERROR,
        }
        return f"font-size: 36pt; font-weight: bold; color: {colors[tier].get(theme)};"
