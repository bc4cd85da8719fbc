from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import pytest

from trivia_app.core.models import Question, QuizDefinition, QuizSettings
from trivia_app.core.services.persisted_store import MemoryStore
from trivia_app.core.services.quiz_runtime import RuntimeTiming
from trivia_app.core.session_machine import SessionStateMachine


@dataclass
class _Scheduled:
    due: float
    seq: int
    callback: Callable[[], None]
    interval: float | None = None
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualScheduler:
    """Deterministic scheduler: callbacks run only when the test advances time."""

    now: float = 0.0
    _entries: list[_Scheduled] = field(default_factory=list)
    _seq: int = 0

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> _Scheduled:
        return self._add(delay_seconds, callback, None)

    def call_every(self, interval_seconds: float, callback: Callable[[], None]) -> _Scheduled:
        return self._add(interval_seconds, callback, interval_seconds)

    def _add(self, delay: float, callback: Callable[[], None], interval: float | None) -> _Scheduled:
        self._seq += 1
        entry = _Scheduled(due=self.now + delay, seq=self._seq, callback=callback, interval=interval)
        self._entries.append(entry)
        return entry

    def pending(self) -> int:
        return sum(1 for entry in self._entries if not entry.cancelled)

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [e for e in self._entries if not e.cancelled and e.due <= target]
            if not due:
                break
            entry = min(due, key=lambda e: (e.due, e.seq))
            self.now = entry.due
            if entry.interval is None:
                entry.cancelled = True
            else:
                entry.due += entry.interval
            entry.callback()
        self._entries = [e for e in self._entries if not e.cancelled]
        self.now = target


TIMING = RuntimeTiming(tick_interval=1.0, reveal_delay=1.0, completion_delay=1.5)


def make_question(
    correct: str,
    wrong: tuple[str, ...] = ("A", "B", "C"),
    text: str = "Question?",
    difficulty: str = "easy",
) -> Question:
    return Question(
        text=text,
        category="General Knowledge",
        difficulty=difficulty,
        correct_answer=correct,
        all_answers=(correct,) + tuple(w for w in wrong if w != correct),
    )


def make_quiz(correct_answers: list[str], time_limit_seconds: int = 300) -> QuizDefinition:
    questions = tuple(
        make_question(answer, text=f"Question {idx + 1}?") for idx, answer in enumerate(correct_answers)
    )
    return QuizDefinition(questions=questions, time_limit_seconds=time_limit_seconds)


class FakeProvider:
    def __init__(self, quiz: QuizDefinition | None = None, error: Exception | None = None) -> None:
        self.quiz = quiz
        self.error = error
        self.requests: list[QuizSettings] = []

    def fetch_quiz(self, settings: QuizSettings) -> QuizDefinition:
        self.requests.append(settings)
        if self.error is not None:
            raise self.error
        assert self.quiz is not None
        return self.quiz


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def make_session(store: MemoryStore, scheduler: ManualScheduler):
    def factory(backing_store: MemoryStore | None = None) -> SessionStateMachine:
        return SessionStateMachine(
            store=backing_store if backing_store is not None else store,
            scheduler=scheduler,
            timing=TIMING,
        )

    return factory
