"""Qt UI components for the player application."""

from .dialog_helpers import confirm_logout, show_error, show_info, show_warning
from .player_main_window import PlayerMainWindow

__all__ = [
    "PlayerMainWindow",
    "confirm_logout",
    "show_error",
    "show_info",
    "show_warning",
]
