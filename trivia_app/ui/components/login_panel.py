"""Component for the local login screen."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from trivia_app.constants.ui_constants import (
    LOGIN_BUTTON,
    LOGIN_DESCRIPTION,
    LOGIN_PLACEHOLDER,
    LOGIN_TITLE,
)
from trivia_app.core.exceptions import SessionStateError
from trivia_app.core.session_machine import SessionStateMachine
from trivia_app.styling.styles import Styles
from trivia_app.ui.dialog_helpers import show_warning

logger = logging.getLogger(__name__)


class LoginPanel(QWidget):
    """Name entry; no credentials are involved."""

    def __init__(
        self,
        session: SessionStateMachine,
        on_logged_in: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session = session
        self.on_logged_in = on_logged_in
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        title = QLabel(LOGIN_TITLE, self)
        title.setStyleSheet(Styles.get_title_style())
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        description = QLabel(LOGIN_DESCRIPTION, self)
        description.setAlignment(Qt.AlignCenter)
        layout.addWidget(description)

        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(LOGIN_PLACEHOLDER)
        self.name_input.returnPressed.connect(self._handle_login)
        layout.addWidget(self.name_input)

        self.login_button = QPushButton(LOGIN_BUTTON, self)
        self.login_button.setStyleSheet(Styles.get_primary_button_style())
        self.login_button.clicked.connect(self._handle_login)
        layout.addWidget(self.login_button)

    def _handle_login(self) -> None:
        try:
            self.session.login(self.name_input.text())
        except ValueError as exc:
            show_warning(self, "Login", str(exc))
            return
        except SessionStateError as exc:
            # Already logged in from the browser; the next refresh switches screens.
            logger.debug("Login ignored: %s", exc)
        self.name_input.clear()
        self.on_logged_in()
