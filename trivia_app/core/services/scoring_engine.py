"""Scoring of a finished (or timed-out) quiz attempt."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from trivia_app.core.models import AnswerSlot, Question, ScoreSummary


def percent(part: int, total: int) -> int:
    """Integer percentage rounded half-up; 0 when total is 0."""
    if total <= 0:
        return 0
    exact = Decimal(part) * 100 / Decimal(total)
    return int(exact.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def score(questions: Sequence[Question], answers: Sequence[AnswerSlot]) -> ScoreSummary:
    """Count correct, incorrect and unanswered slots.

    Absent and skipped slots are unanswered. Answers are compared to the
    correct answer by exact string equality. Slots beyond the question list
    are ignored and missing slots count as unanswered.
    """
    correct = incorrect = unanswered = 0
    for index, question in enumerate(questions):
        answer = answers[index] if index < len(answers) else None
        if not isinstance(answer, str):
            unanswered += 1
        elif answer == question.correct_answer:
            correct += 1
        else:
            incorrect += 1

    total = len(questions)
    return ScoreSummary(
        correct=correct,
        incorrect=incorrect,
        unanswered=unanswered,
        total=total,
        score_percent=percent(correct, total),
    )
