"""Component for the scored summary shown after a quiz."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.ui_constants import (
    RESULTS_COPIED_MESSAGE,
    RESULTS_COPY_BUTTON,
    RESULTS_RESTART_BUTTON,
    RESULTS_TITLE,
)
from trivia_app.core import result_feedback
from trivia_app.core.exceptions import SessionStateError
from trivia_app.core.models import ScoreSummary
from trivia_app.core.session_machine import SessionStateMachine
from trivia_app.styling.styles import Styles
from trivia_app.ui.dialog_helpers import show_info

logger = logging.getLogger(__name__)


class ResultsPanel(QWidget):
    """Score, per-bucket breakdown and the restart action."""

    def __init__(
        self,
        session: SessionStateMachine,
        on_restart: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.session = session
        self.on_restart = on_restart
        self._summary: ScoreSummary | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignTop)
        self.setLayout(layout)

        title = QLabel(RESULTS_TITLE, self)
        title.setStyleSheet(Styles.get_title_style())
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.message_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        grid = QGridLayout()
        self.bucket_labels: dict[str, QLabel] = {}
        for column, name in enumerate(("Correct", "Incorrect", "Unanswered")):
            value_label = QLabel("", self)
            value_label.setAlignment(Qt.AlignCenter)
            value_label.setStyleSheet("font-size: 18pt; font-weight: bold;")
            grid.addWidget(value_label, 0, column)
            caption = QLabel(name, self)
            caption.setAlignment(Qt.AlignCenter)
            grid.addWidget(caption, 1, column)
            self.bucket_labels[name] = value_label
        layout.addLayout(grid)

        self.summary_label = QLabel("", self)
        self.summary_label.setWordWrap(True)
        layout.addWidget(self.summary_label)

        self.badge_label = QLabel("", self)
        self.badge_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.badge_label)

        button_row = QHBoxLayout()
        self.restart_button = QPushButton(RESULTS_RESTART_BUTTON, self)
        self.restart_button.setStyleSheet(Styles.get_primary_button_style())
        self.restart_button.clicked.connect(self._handle_restart)
        button_row.addWidget(self.restart_button)
        self.copy_button = QPushButton(RESULTS_COPY_BUTTON, self)
        self.copy_button.clicked.connect(self._handle_copy)
        button_row.addWidget(self.copy_button)
        layout.addLayout(button_row)

    def show_summary(self, summary: ScoreSummary) -> None:
        if summary == self._summary:
            return
        self._summary = summary
        score = summary.score_percent
        self.message_label.setText(result_feedback.score_message(score))
        self.score_label.setText(f"{score}%")
        self.score_label.setStyleSheet(Styles.get_score_style(result_feedback.performance_tier(score)))
        for name, count in (
            ("Correct", summary.correct),
            ("Incorrect", summary.incorrect),
            ("Unanswered", summary.unanswered),
        ):
            self.bucket_labels[name].setText(
                f"{count} ({result_feedback.bucket_percent(count, summary)}%)"
            )
        self.summary_label.setText(
            f"Total Questions: {summary.total}\n"
            f"Questions Attempted: {summary.correct + summary.incorrect}\n"
            f"Accuracy Rate: {result_feedback.accuracy_percent(summary)}%"
        )
        self.badge_label.setText(result_feedback.performance_badge(score))

    def _handle_restart(self) -> None:
        try:
            self.session.restart()
        except SessionStateError as exc:
            logger.debug("Restart ignored: %s", exc)
        self._summary = None
        self.on_restart()

    def _handle_copy(self) -> None:
        if self._summary is None:
            return
        QGuiApplication.clipboard().setText(result_feedback.share_text(self._summary))
        show_info(self, RESULTS_COPY_BUTTON, RESULTS_COPIED_MESSAGE)
