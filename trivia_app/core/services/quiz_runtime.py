"""Runtime of one in-progress quiz: question pointer, answers and countdown."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from threading import RLock
from typing import Callable, Protocol, Sequence

from trivia_app.constants.quiz_constants import (
    ANSWER_REVEAL_DELAY_SECONDS,
    COMPLETION_DELAY_SECONDS,
    TICK_INTERVAL_SECONDS,
)
from trivia_app.core.exceptions import AnswerRejectedError
from trivia_app.core.models import AnswerSlot, QuizDefinition, ScoreSummary
from trivia_app.core.scheduler import ScheduledHandle, Scheduler
from trivia_app.core.services.scoring_engine import score

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RuntimeTiming:
    """Delays driving the runtime, in seconds."""

    tick_interval: float = TICK_INTERVAL_SECONDS
    reveal_delay: float = ANSWER_REVEAL_DELAY_SECONDS
    completion_delay: float = COMPLETION_DELAY_SECONDS


class RuntimeListener(Protocol):
    """Receives runtime events; called with the runtime lock held."""

    def on_answer_committed(self, runtime: "QuizRuntime", answers: list[AnswerSlot]) -> None: ...

    def on_time_tick(self, runtime: "QuizRuntime", time_remaining: int) -> None: ...

    def on_quiz_complete(self, runtime: "QuizRuntime", summary: ScoreSummary) -> None: ...


def first_open_index(answers: Sequence[AnswerSlot]) -> int:
    """Index of the first absent slot, or the last index when every slot is filled."""
    for index, slot in enumerate(answers):
        if slot is None:
            return index
    return max(len(answers) - 1, 0)


class QuizRuntime:
    """Drives a single quiz attempt from start to completion.

    Completion fires exactly once, either when no absent slot remains (after
    the completion delay) or when the countdown reaches zero. After
    completion or ``cancel()`` every pending callback becomes a no-op.
    """

    def __init__(
        self,
        quiz: QuizDefinition,
        answers: Sequence[AnswerSlot],
        time_remaining: int,
        scheduler: Scheduler,
        listener: RuntimeListener,
        lock: RLock | None = None,
        timing: RuntimeTiming | None = None,
    ) -> None:
        if len(answers) != quiz.question_count:
            raise ValueError("Answer set size must match the number of questions.")
        self._quiz = quiz
        self._answers: list[AnswerSlot] = list(answers)
        self._time_remaining = int(time_remaining)
        self._scheduler = scheduler
        self._listener = listener
        self._lock = lock or RLock()
        self._timing = timing or RuntimeTiming()

        self._current_index = first_open_index(self._answers)
        self._selected_answer: AnswerSlot = None
        self._revealing = False

        self._started = False
        self._finished = False
        self._completion_pending = False
        self._tick_handle: ScheduledHandle | None = None
        self._advance_handle: ScheduledHandle | None = None
        self._completion_handle: ScheduledHandle | None = None

    # --- State ---

    @property
    def quiz(self) -> QuizDefinition:
        return self._quiz

    @property
    def answers(self) -> list[AnswerSlot]:
        with self._lock:
            return list(self._answers)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def selected_answer(self) -> AnswerSlot:
        return self._selected_answer

    @property
    def revealing(self) -> bool:
        return self._revealing

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def is_finished(self) -> bool:
        return self._finished

    def is_last_question(self) -> bool:
        return self._current_index >= self._quiz.question_count - 1

    # --- Lifecycle ---

    def start(self) -> None:
        """Start the countdown; a runtime starts at most once."""
        with self._lock:
            if self._started or self._finished:
                return
            self._started = True
            if self._time_remaining <= 0:
                logger.info("Quiz resumed with no time left; completing")
                self._finish()
                return
            self._tick_handle = self._scheduler.call_every(
                self._timing.tick_interval, self._guarded(self._tick)
            )
            self._check_all_answered()

    def cancel(self) -> None:
        """Tear down without completing."""
        with self._lock:
            if self._finished:
                return
            self._finished = True
            self._cancel_handles()
            logger.debug("Quiz runtime cancelled")

    # --- Answers ---

    def commit_answer(self, value: AnswerSlot) -> int:
        """Record ``value`` for the visible question and return its index."""
        with self._lock:
            if self._finished:
                raise AnswerRejectedError("The quiz is already finished.")
            if not self._started:
                raise AnswerRejectedError("The quiz has not started.")
            if self._revealing:
                raise AnswerRejectedError("The current question has already been answered.")

            index = self._current_index
            self._answers[index] = value
            self._selected_answer = value
            self._revealing = True
            logger.debug("Answer committed for question %d", index + 1)
            try:
                self._listener.on_answer_committed(self, list(self._answers))
            finally:
                if not self.is_last_question():
                    self._advance_handle = self._scheduler.call_later(
                        self._timing.reveal_delay, self._guarded(self._advance)
                    )
                self._check_all_answered()
            return index

    def _advance(self) -> None:
        self._advance_handle = None
        if self.is_last_question():
            return
        self._current_index += 1
        self._selected_answer = None
        self._revealing = False

    # --- Completion ---

    def _check_all_answered(self) -> None:
        if self._completion_pending or self._finished:
            return
        if any(slot is None for slot in self._answers):
            return
        self._completion_pending = True
        self._completion_handle = self._scheduler.call_later(
            self._timing.completion_delay, self._guarded(self._finish)
        )

    def _tick(self) -> None:
        self._time_remaining -= 1
        try:
            self._listener.on_time_tick(self, self._time_remaining)
        finally:
            if self._time_remaining <= 0:
                logger.info("Time is up")
                self._finish()

    def _finish(self) -> None:
        if self._finished:
            return
        self._finished = True
        self._cancel_handles()
        summary = score(self._quiz.questions, self._answers)
        logger.info(
            "Quiz complete: %d/%d correct (%d%%)",
            summary.correct,
            summary.total,
            summary.score_percent,
        )
        self._listener.on_quiz_complete(self, summary)

    # --- Helpers ---

    def _guarded(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Wrap a scheduled callback so it runs under the lock and only while live."""

        def run() -> None:
            with self._lock:
                if self._finished:
                    return
                callback()

        return run

    def _cancel_handles(self) -> None:
        for handle in (self._tick_handle, self._advance_handle, self._completion_handle):
            if handle is not None:
                handle.cancel()
        self._tick_handle = None
        self._advance_handle = None
        self._completion_handle = None
