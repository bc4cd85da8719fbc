"""Domain models for the trivia application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from trivia_app.constants.quiz_constants import (
    CATEGORIES,
    DEFAULT_QUESTION_COUNT,
    DEFAULT_TIME_LIMIT_SECONDS,
    MAX_QUESTION_COUNT,
    MAX_TIME_LIMIT_SECONDS,
    MIN_QUESTION_COUNT,
    MIN_TIME_LIMIT_SECONDS,
)

DIFFICULTY_LEVELS: tuple[str, ...] = ("easy", "medium", "hard")
QUESTION_KINDS: tuple[str, ...] = ("multiple", "boolean")


class Screen(str, Enum):
    """Screens of the session state machine."""

    LOGIN = "login"
    SETUP = "setup"
    QUIZ = "quiz"
    RESULTS = "results"


class AnswerMarker(Enum):
    """Explicit non-answer recorded when the user skips a question."""

    SKIPPED = "skipped"


SKIPPED = AnswerMarker.SKIPPED

# None is an absent slot (never visited).
AnswerSlot = Union[str, AnswerMarker, None]


@dataclass(slots=True, frozen=True)
class UserProfile:
    """Locally entered player identity."""

    name: str

    @classmethod
    def from_name(cls, name: str) -> "UserProfile":
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValueError("Name must not be empty.")
        return cls(name=cleaned)


@dataclass(slots=True, frozen=True)
class Question:
    """Multiple-choice question as delivered by the provider (HTML-encoded)."""

    text: str
    category: str
    difficulty: str
    correct_answer: str
    all_answers: tuple[str, ...]
    kind: str = "multiple"

    def __post_init__(self) -> None:
        if self.difficulty not in DIFFICULTY_LEVELS:
            raise ValueError(f"Unknown difficulty: {self.difficulty!r}")
        if self.correct_answer not in self.all_answers:
            raise ValueError("Correct answer must be one of the answer options.")


@dataclass(slots=True, frozen=True)
class QuizDefinition:
    """Questions and time budget for one quiz attempt."""

    questions: tuple[Question, ...]
    time_limit_seconds: int

    def __post_init__(self) -> None:
        if not self.questions:
            raise ValueError("Quiz must contain at least one question.")
        limit = self.time_limit_seconds
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError("Time limit must be a positive integer.")

    @property
    def question_count(self) -> int:
        return len(self.questions)


@dataclass(slots=True, frozen=True)
class ScoreSummary:
    """Result of scoring an answer set against a quiz."""

    correct: int
    incorrect: int
    unanswered: int
    total: int
    score_percent: int


@dataclass(slots=True, frozen=True)
class QuizSettings:
    """Parameters chosen on the setup screen."""

    amount: int = DEFAULT_QUESTION_COUNT
    category: str = ""
    difficulty: str = ""
    question_type: str = ""
    time_limit_seconds: int = DEFAULT_TIME_LIMIT_SECONDS

    def validated(self) -> "QuizSettings":
        """Return self when every field is in range, raise ValueError otherwise."""
        if not MIN_QUESTION_COUNT <= self.amount <= MAX_QUESTION_COUNT:
            raise ValueError(
                f"Number of questions must be between {MIN_QUESTION_COUNT} and {MAX_QUESTION_COUNT}."
            )
        if not MIN_TIME_LIMIT_SECONDS <= self.time_limit_seconds <= MAX_TIME_LIMIT_SECONDS:
            raise ValueError(
                f"Time limit must be between {MIN_TIME_LIMIT_SECONDS} and {MAX_TIME_LIMIT_SECONDS} seconds."
            )
        if self.category not in {value for value, _ in CATEGORIES}:
            raise ValueError(f"Unknown category: {self.category!r}")
        if self.difficulty and self.difficulty not in DIFFICULTY_LEVELS:
            raise ValueError(f"Unknown difficulty: {self.difficulty!r}")
        if self.question_type and self.question_type not in QUESTION_KINDS:
            raise ValueError(f"Unknown question type: {self.question_type!r}")
        return self


@dataclass(slots=True, frozen=True)
class SessionSnapshot:
    """Immutable view of the session handed to the UI layers."""

    screen: Screen
    user: UserProfile | None = None
    quiz: QuizDefinition | None = None
    answers: tuple[AnswerSlot, ...] = field(default_factory=tuple)
    results: ScoreSummary | None = None
    time_remaining: int = 0
    current_index: int = 0
    selected_answer: AnswerSlot = None
    revealing: bool = False

    @property
    def answered_count(self) -> int:
        return sum(1 for slot in self.answers if isinstance(slot, str))

    @property
    def current_question(self) -> Question | None:
        if self.quiz is None:
            return None
        return self.quiz.questions[self.current_index]
