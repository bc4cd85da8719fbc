"""Session state machine shared between the Qt window and the HTTP API."""

from __future__ import annotations

import logging
from threading import RLock
from typing import Protocol

from trivia_app.constants.quiz_constants import (
    STORAGE_KEY_ANSWERS,
    STORAGE_KEY_QUIZ,
    STORAGE_KEY_TIME,
    STORAGE_KEY_USER,
)
from trivia_app.core import quiz_codec
from trivia_app.core.exceptions import (
    AnswerRejectedError,
    PersistedStateError,
    SessionStateError,
)
from trivia_app.core.models import (
    AnswerSlot,
    QuizDefinition,
    QuizSettings,
    Screen,
    ScoreSummary,
    SessionSnapshot,
    UserProfile,
)
from trivia_app.core.scheduler import Scheduler
from trivia_app.core.services.persisted_store import PersistedStore
from trivia_app.core.services.quiz_runtime import QuizRuntime, RuntimeTiming

logger = logging.getLogger(__name__)

_QUIZ_KEYS = (STORAGE_KEY_QUIZ, STORAGE_KEY_ANSWERS, STORAGE_KEY_TIME)


class QuestionProvider(Protocol):
    def fetch_quiz(self, settings: QuizSettings) -> QuizDefinition: ...


class SessionStateMachine:
    """Owns the screen, the user, the current quiz and its answers.

    All mutations go through the transition methods and are serialized by a
    single re-entrant lock, which the quiz runtime shares for its timer
    callbacks. Only this class reads or writes the persisted store.
    """

    def __init__(
        self,
        store: PersistedStore,
        scheduler: Scheduler,
        timing: RuntimeTiming | None = None,
    ) -> None:
        self._lock = RLock()
        self._store = store
        self._scheduler = scheduler
        self._timing = timing or RuntimeTiming()

        self._screen = Screen.LOGIN
        self._user: UserProfile | None = None
        self._quiz: QuizDefinition | None = None
        self._answers: list[AnswerSlot] = []
        self._results: ScoreSummary | None = None
        self._time_remaining: int = 0
        self._runtime: QuizRuntime | None = None

        self._restore()

    # --- Queries ---

    @property
    def screen(self) -> Screen:
        with self._lock:
            return self._screen

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            runtime = self._runtime
            return SessionSnapshot(
                screen=self._screen,
                user=self._user,
                quiz=self._quiz,
                answers=tuple(self._answers),
                results=self._results,
                time_remaining=self._time_remaining,
                current_index=runtime.current_index if runtime else 0,
                selected_answer=runtime.selected_answer if runtime else None,
                revealing=runtime.revealing if runtime else False,
            )

    # --- Transitions ---

    def login(self, name: str) -> UserProfile:
        user = UserProfile.from_name(name)
        with self._lock:
            self._require(Screen.LOGIN, "login")
            self._user = user
            self._store.set(STORAGE_KEY_USER, quiz_codec.encode_user(user))
            self._screen = Screen.SETUP
            logger.info("User %s logged in", user.name)
            return user

    def start_quiz(self, quiz: QuizDefinition) -> None:
        with self._lock:
            self._require(Screen.SETUP, "start a quiz")
            answers: list[AnswerSlot] = [None] * quiz.question_count
            self._store.set(STORAGE_KEY_QUIZ, quiz_codec.encode_quiz(quiz))
            self._store.set(STORAGE_KEY_ANSWERS, quiz_codec.encode_answers(answers))
            self._store.set(STORAGE_KEY_TIME, quiz_codec.encode_time(quiz.time_limit_seconds))
            logger.info(
                "Starting quiz with %d questions and %d seconds",
                quiz.question_count,
                quiz.time_limit_seconds,
            )
            self._enter_quiz(quiz, answers, quiz.time_limit_seconds)

    def fetch_and_start(self, provider: QuestionProvider, settings: QuizSettings) -> QuizDefinition:
        """Fetch a quiz for ``settings`` and start it.

        The fetch runs without holding the lock. Provider errors propagate and
        leave the session on the setup screen.
        """
        settings = settings.validated()
        with self._lock:
            self._require(Screen.SETUP, "start a quiz")
        quiz = provider.fetch_quiz(settings)
        self.start_quiz(quiz)
        return quiz

    def answer(self, index: int, value: AnswerSlot) -> None:
        with self._lock:
            self._require(Screen.QUIZ, "answer")
            runtime = self._runtime
            if runtime is None:
                raise SessionStateError("No quiz is running.")
            if index != runtime.current_index:
                raise AnswerRejectedError(
                    f"Question {index + 1} is not the current question."
                )
            runtime.commit_answer(value)

    def restart(self) -> None:
        with self._lock:
            self._require(Screen.RESULTS, "restart")
            self._quiz = None
            self._answers = []
            self._results = None
            self._time_remaining = 0
            self._screen = Screen.SETUP
            logger.info("Returning to quiz setup")

    def logout(self) -> None:
        with self._lock:
            self._stop_runtime()
            self._store.delete(STORAGE_KEY_USER)
            for key in _QUIZ_KEYS:
                self._store.delete(key)
            name = self._user.name if self._user else None
            self._user = None
            self._quiz = None
            self._answers = []
            self._results = None
            self._time_remaining = 0
            self._screen = Screen.LOGIN
            logger.info("User %s logged out", name)

    def shutdown(self) -> None:
        """Stop timers without touching persisted state, so the quiz can resume later."""
        with self._lock:
            self._stop_runtime()

    # --- Runtime listener ---

    def on_answer_committed(self, runtime: QuizRuntime, answers: list[AnswerSlot]) -> None:
        with self._lock:
            if runtime is not self._runtime:
                return
            self._answers = list(answers)
            self._save(STORAGE_KEY_ANSWERS, quiz_codec.encode_answers(self._answers))

    def on_time_tick(self, runtime: QuizRuntime, time_remaining: int) -> None:
        with self._lock:
            if runtime is not self._runtime:
                return
            self._time_remaining = time_remaining
            self._save(STORAGE_KEY_TIME, quiz_codec.encode_time(time_remaining))
            logger.debug("%d seconds remaining", time_remaining)

    def on_quiz_complete(self, runtime: QuizRuntime, summary: ScoreSummary) -> None:
        with self._lock:
            if runtime is not self._runtime:
                return
            self._complete(summary)

    # --- Internals ---

    def _complete(self, summary: ScoreSummary) -> None:
        self._runtime = None
        self._results = summary
        self._screen = Screen.RESULTS
        for key in _QUIZ_KEYS:
            try:
                self._store.delete(key)
            except OSError as exc:
                logger.warning("Could not clear %s from the store: %s", key, exc)

    def _save(self, key: str, value: str) -> None:
        """Persist a value written by the running quiz; a failed write keeps the quiz going."""
        try:
            self._store.set(key, value)
        except OSError as exc:
            logger.warning("Could not persist %s: %s", key, exc)

    def _enter_quiz(self, quiz: QuizDefinition, answers: list[AnswerSlot], time_remaining: int) -> None:
        self._quiz = quiz
        self._answers = list(answers)
        self._results = None
        self._time_remaining = time_remaining
        self._screen = Screen.QUIZ
        self._runtime = QuizRuntime(
            quiz=quiz,
            answers=answers,
            time_remaining=time_remaining,
            scheduler=self._scheduler,
            listener=self,
            lock=self._lock,
            timing=self._timing,
        )
        self._runtime.start()

    def _stop_runtime(self) -> None:
        if self._runtime is not None:
            self._runtime.cancel()
            self._runtime = None

    def _require(self, screen: Screen, action: str) -> None:
        if self._screen is not screen:
            raise SessionStateError(
                f"Cannot {action} while on the {self._screen.value} screen."
            )

    def _restore(self) -> None:
        raw_user = self._store.get(STORAGE_KEY_USER)
        if raw_user is None:
            return
        try:
            user = quiz_codec.decode_user(raw_user)
        except PersistedStateError as exc:
            logger.warning("Discarding stored user: %s", exc)
            self._store.delete(STORAGE_KEY_USER)
            for key in _QUIZ_KEYS:
                self._store.delete(key)
            return

        with self._lock:
            self._user = user
            self._screen = Screen.SETUP
            resumable = self._load_resumable_quiz()
            if resumable is None:
                logger.info("Restored user %s", user.name)
                return
            quiz, answers, time_remaining = resumable
            logger.info(
                "Resuming quiz for %s: %d of %d slots filled, %d seconds left",
                user.name,
                sum(1 for slot in answers if slot is not None),
                quiz.question_count,
                time_remaining,
            )
            self._enter_quiz(quiz, answers, time_remaining)

    def _load_resumable_quiz(self) -> tuple[QuizDefinition, list[AnswerSlot], int] | None:
        raw_quiz = self._store.get(STORAGE_KEY_QUIZ)
        raw_answers = self._store.get(STORAGE_KEY_ANSWERS)
        if raw_quiz is None or raw_answers is None:
            if raw_quiz is not None or raw_answers is not None:
                logger.warning("Partial quiz data in store; starting from setup")
                self._discard_quiz_keys()
            return None
        try:
            quiz = quiz_codec.decode_quiz(raw_quiz)
            answers = quiz_codec.decode_answers(raw_answers)
            if len(answers) != quiz.question_count:
                raise PersistedStateError("Stored answers do not match the stored quiz.")
            raw_time = self._store.get(STORAGE_KEY_TIME)
            time_remaining = (
                quiz_codec.decode_time(raw_time) if raw_time is not None else quiz.time_limit_seconds
            )
        except PersistedStateError as exc:
            logger.warning("Discarding stored quiz: %s", exc)
            self._discard_quiz_keys()
            return None
        return quiz, answers, time_remaining

    def _discard_quiz_keys(self) -> None:
        for key in _QUIZ_KEYS:
            self._store.delete(key)
