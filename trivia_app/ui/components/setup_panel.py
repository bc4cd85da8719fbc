"""Component for configuring and starting a quiz."""

from __future__ import annotations

import logging
from threading import Thread

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.quiz_constants import (
    CATEGORIES,
    DEFAULT_QUESTION_COUNT,
    DEFAULT_TIME_LIMIT_SECONDS,
    DIFFICULTIES,
    MAX_QUESTION_COUNT,
    MAX_TIME_LIMIT_SECONDS,
    MIN_QUESTION_COUNT,
    MIN_TIME_LIMIT_SECONDS,
    QUESTION_TYPES,
)
from trivia_app.constants.ui_constants import (
    SETUP_DESCRIPTION,
    SETUP_FETCH_FAILED_TITLE,
    SETUP_LOADING_BUTTON,
    SETUP_START_BUTTON,
    SETUP_TITLE,
)
from trivia_app.core.exceptions import QuestionProviderError, SessionStateError
from trivia_app.core.models import QuizSettings
from trivia_app.core.session_machine import QuestionProvider, SessionStateMachine
from trivia_app.styling.styles import Styles
from trivia_app.ui.dialog_helpers import show_error

logger = logging.getLogger(__name__)


class SetupPanel(QWidget):
    """Quiz settings form.

    Questions are fetched on a worker thread so the window stays responsive;
    ``poll_fetch`` is called from the window's refresh timer to surface errors.
    """

    def __init__(
        self,
        session: SessionStateMachine,
        provider: QuestionProvider,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session = session
        self.provider = provider
        self._fetch_thread: Thread | None = None
        self._fetch_error: str | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignTop)
        self.setLayout(layout)

        title = QLabel(SETUP_TITLE, self)
        title.setStyleSheet(Styles.get_title_style())
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)
        description = QLabel(SETUP_DESCRIPTION, self)
        description.setAlignment(Qt.AlignCenter)
        layout.addWidget(description)

        form = QFormLayout()
        self.amount_spinbox = QSpinBox(self)
        self.amount_spinbox.setRange(MIN_QUESTION_COUNT, MAX_QUESTION_COUNT)
        self.amount_spinbox.setValue(DEFAULT_QUESTION_COUNT)
        form.addRow("Number of Questions", self.amount_spinbox)

        self.time_spinbox = QSpinBox(self)
        self.time_spinbox.setRange(MIN_TIME_LIMIT_SECONDS, MAX_TIME_LIMIT_SECONDS)
        self.time_spinbox.setValue(DEFAULT_TIME_LIMIT_SECONDS)
        self.time_spinbox.setSuffix(" s")
        form.addRow("Time Limit (seconds)", self.time_spinbox)

        self.category_combo = self._build_combo(CATEGORIES)
        form.addRow("Category", self.category_combo)
        self.difficulty_combo = self._build_combo(DIFFICULTIES)
        form.addRow("Difficulty", self.difficulty_combo)
        self.type_combo = self._build_combo(QUESTION_TYPES)
        form.addRow("Question Type", self.type_combo)
        layout.addLayout(form)

        self.start_button = QPushButton(SETUP_START_BUTTON, self)
        self.start_button.setStyleSheet(Styles.get_primary_button_style())
        self.start_button.clicked.connect(self._handle_start)
        layout.addWidget(self.start_button)

    def _build_combo(self, items: tuple[tuple[str, str], ...]) -> QComboBox:
        combo = QComboBox(self)
        for value, label in items:
            combo.addItem(label, value)
        return combo

    def current_settings(self) -> QuizSettings:
        return QuizSettings(
            amount=self.amount_spinbox.value(),
            category=self.category_combo.currentData(),
            difficulty=self.difficulty_combo.currentData(),
            question_type=self.type_combo.currentData(),
            time_limit_seconds=self.time_spinbox.value(),
        )

    def is_fetching(self) -> bool:
        return self._fetch_thread is not None and self._fetch_thread.is_alive()

    def _handle_start(self) -> None:
        if self.is_fetching():
            return
        settings = self.current_settings()
        self._fetch_error = None
        self._set_loading(True)
        self._fetch_thread = Thread(
            target=self._fetch_and_start, args=(settings,), name="QuizFetch", daemon=True
        )
        self._fetch_thread.start()

    def _fetch_and_start(self, settings: QuizSettings) -> None:
        try:
            self.session.fetch_and_start(self.provider, settings)
        except (QuestionProviderError, ValueError) as exc:
            self._fetch_error = str(exc)
        except SessionStateError as exc:
            logger.info("Quiz start ignored: %s", exc)

    def poll_fetch(self) -> None:
        """Finish a background fetch: restore the button and report any error."""
        if self._fetch_thread is None or self._fetch_thread.is_alive():
            return
        self._fetch_thread = None
        self._set_loading(False)
        error, self._fetch_error = self._fetch_error, None
        if error:
            show_error(self, SETUP_FETCH_FAILED_TITLE, error)

    def _set_loading(self, loading: bool) -> None:
        self.start_button.setEnabled(not loading)
        self.start_button.setText(SETUP_LOADING_BUTTON if loading else SETUP_START_BUTTON)
