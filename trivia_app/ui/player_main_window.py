"""Qt main window switching between the login, setup, quiz and results screens."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    TRIVIA_SOURCE_URL,
)
from trivia_app.constants.ui_constants import (
    ABOUT_BUTTON,
    HEADER_WELCOME_TEMPLATE,
    LOGOUT_BUTTON,
    STATE_REFRESH_INTERVAL_MS,
    WINDOW_TITLE,
)
from trivia_app.core.models import Screen
from trivia_app.core.session_machine import QuestionProvider, SessionStateMachine
from trivia_app.styling.styles import Styles
from trivia_app.ui.components.login_panel import LoginPanel
from trivia_app.ui.components.quiz_panel import QuizPanel
from trivia_app.ui.components.results_panel import ResultsPanel
from trivia_app.ui.components.setup_panel import SetupPanel
from trivia_app.ui.dialog_helpers import confirm_logout, show_info


class PlayerMainWindow(QMainWindow):
    """Main Qt window mirroring the session's current screen.

    The session is also driven by timer threads and the HTTP API, so the
    window never caches state: a refresh timer re-reads a snapshot and
    updates the visible panel.
    """

    def __init__(
        self,
        session: SessionStateMachine,
        provider: QuestionProvider,
        player_url: str | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(760, 620)

        self.session = session
        self.provider = provider
        self.player_url = player_url
        self._screen: Screen | None = None

        self._build_ui()
        self._configure_refresh_timer()
        self.setStyleSheet(Styles.get_main_window_style())
        self._refresh_state()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        header_row = QHBoxLayout()
        self.welcome_label = QLabel("", self)
        header_row.addWidget(self.welcome_label)
        header_row.addStretch()
        self.url_label = QLabel(f"Browser player: {self.player_url}" if self.player_url else "", self)
        header_row.addWidget(self.url_label)
        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        header_row.addWidget(self.about_button)
        self.logout_button = QPushButton(LOGOUT_BUTTON, self)
        self.logout_button.setStyleSheet(Styles.get_danger_button_style())
        self.logout_button.clicked.connect(self._handle_logout)
        header_row.addWidget(self.logout_button)
        root_layout.addLayout(header_row)

        self.screen_stack = QStackedWidget(self)
        self.login_panel = LoginPanel(self.session, on_logged_in=self._refresh_state, parent=self)
        self.setup_panel = SetupPanel(self.session, self.provider, parent=self)
        self.quiz_panel = QuizPanel(self.session, parent=self)
        self.results_panel = ResultsPanel(self.session, on_restart=self._refresh_state, parent=self)

        self._panel_index = {
            Screen.LOGIN: self.screen_stack.addWidget(self.login_panel),
            Screen.SETUP: self.screen_stack.addWidget(self.setup_panel),
            Screen.QUIZ: self.screen_stack.addWidget(self.quiz_panel),
            Screen.RESULTS: self.screen_stack.addWidget(self.results_panel),
        }
        root_layout.addWidget(self.screen_stack, stretch=1)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(STATE_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_state)
        self.refresh_timer.start()

    def _refresh_state(self) -> None:
        snapshot = self.session.snapshot()
        if snapshot.screen != self._screen:
            self._screen = snapshot.screen
            self.screen_stack.setCurrentIndex(self._panel_index[snapshot.screen])
            self.quiz_panel.reset_state()

        logged_in = snapshot.user is not None
        self.welcome_label.setText(
            HEADER_WELCOME_TEMPLATE.format(name=snapshot.user.name) if logged_in else ""
        )
        self.logout_button.setVisible(logged_in)

        self.setup_panel.poll_fetch()
        if snapshot.screen is Screen.QUIZ:
            self.quiz_panel.refresh(snapshot)
        elif snapshot.screen is Screen.RESULTS and snapshot.results is not None:
            self.results_panel.show_summary(snapshot.results)

    def _handle_logout(self) -> None:
        if self.session.screen is Screen.QUIZ and not confirm_logout(self):
            return
        self.session.logout()
        self._refresh_state()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"Questions: {TRIVIA_SOURCE_URL}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self.refresh_timer.stop()
        self.session.shutdown()
        super().closeEvent(event)
