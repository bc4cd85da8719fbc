"""Component for answering the questions of a running quiz."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.ui_constants import (
    QUIZ_ANSWERED_TEMPLATE,
    QUIZ_PROGRESS_TEMPLATE,
    QUIZ_SKIP_BUTTON,
)
from trivia_app.core import result_feedback
from trivia_app.core.exceptions import SessionStateError
from trivia_app.core.models import SKIPPED, AnswerSlot, SessionSnapshot
from trivia_app.core.session_machine import SessionStateMachine
from trivia_app.styling.styles import Styles

logger = logging.getLogger(__name__)


class QuizPanel(QWidget):
    """Shows the current question, its options and the countdown."""

    def __init__(self, session: SessionStateMachine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self._current_index: int = 0
        self._question_key: tuple[int, str] | None = None
        self._option_values: list[str] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignTop)
        self.setLayout(layout)

        header_row = QHBoxLayout()
        self.progress_label = QLabel("", self)
        header_row.addWidget(self.progress_label)
        self.answered_label = QLabel("", self)
        header_row.addWidget(self.answered_label)
        header_row.addStretch()
        self.timer_label = QLabel("", self)
        header_row.addWidget(self.timer_label)
        layout.addLayout(header_row)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        tag_row = QHBoxLayout()
        self.category_label = QLabel("", self)
        tag_row.addWidget(self.category_label)
        self.difficulty_label = QLabel("", self)
        tag_row.addWidget(self.difficulty_label)
        tag_row.addStretch()
        layout.addLayout(tag_row)

        self.question_label = QLabel("", self)
        self.question_label.setWordWrap(True)
        self.question_label.setStyleSheet("font-size: 16pt; font-weight: bold;")
        layout.addWidget(self.question_label)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)
        self.option_buttons: list[QPushButton] = []

        self.skip_button = QPushButton(QUIZ_SKIP_BUTTON, self)
        self.skip_button.setFlat(True)
        self.skip_button.clicked.connect(lambda: self._submit(SKIPPED))
        layout.addWidget(self.skip_button, alignment=Qt.AlignCenter)

    def refresh(self, snapshot: SessionSnapshot) -> None:
        question = snapshot.current_question
        if snapshot.quiz is None or question is None:
            return
        total = snapshot.quiz.question_count
        self._current_index = snapshot.current_index

        self.progress_label.setText(
            QUIZ_PROGRESS_TEMPLATE.format(current=snapshot.current_index + 1, total=total)
        )
        self.answered_label.setText(
            QUIZ_ANSWERED_TEMPLATE.format(answered=snapshot.answered_count, total=total)
        )
        self.timer_label.setText(f"⏰ {result_feedback.format_time(snapshot.time_remaining)}")
        self.timer_label.setStyleSheet(
            Styles.get_timer_style(result_feedback.is_time_low(snapshot.time_remaining))
        )
        self.progress_bar.setRange(0, total)
        self.progress_bar.setValue(snapshot.current_index + 1)

        key = (snapshot.current_index, question.text)
        if key != self._question_key:
            self._question_key = key
            self.category_label.setText(result_feedback.decode_html(question.category))
            self.difficulty_label.setText(result_feedback.difficulty_label(question.difficulty))
            self.question_label.setText(result_feedback.decode_html(question.text))
            self._rebuild_options(question.all_answers)

        self._apply_feedback(snapshot.revealing, snapshot.selected_answer, question.correct_answer)

    def reset_state(self) -> None:
        self._question_key = None

    def _rebuild_options(self, answers: tuple[str, ...]) -> None:
        for button in self.option_buttons:
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self.option_buttons = []
        self._option_values = list(answers)
        for idx, answer in enumerate(answers):
            letter = chr(ord("A") + idx)
            button = QPushButton(f"{letter}.  {result_feedback.decode_html(answer)}", self)
            button.clicked.connect(lambda _checked=False, value=answer: self._submit(value))
            self.options_layout.addWidget(button)
            self.option_buttons.append(button)

    def _apply_feedback(self, revealing: bool, selected: AnswerSlot, correct: str) -> None:
        for button, value in zip(self.option_buttons, self._option_values):
            button.setEnabled(not revealing)
            if not revealing:
                state = "idle"
            elif value == correct:
                state = "correct"
            elif value == selected:
                state = "wrong"
            else:
                state = "dimmed"
            button.setStyleSheet(Styles.get_option_style(state))
        self.skip_button.setEnabled(not revealing)

    def _submit(self, value: AnswerSlot) -> None:
        try:
            self.session.answer(self._current_index, value)
        except SessionStateError as exc:
            logger.debug("Answer ignored: %s", exc)
