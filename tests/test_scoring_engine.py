import pytest

from conftest import make_quiz
from trivia_app.core.models import SKIPPED, ScoreSummary
from trivia_app.core.services.scoring_engine import percent, score


def test_mixed_answers_scenario() -> None:
    quiz = make_quiz(["Paris", "5", "Rome"])
    summary = score(quiz.questions, ["Paris", "4", None])
    assert summary == ScoreSummary(correct=1, incorrect=1, unanswered=1, total=3, score_percent=33)


@pytest.mark.parametrize(
    "answers",
    [
        [None, None, None, None],
        ["x", "y", "z", "w"],
        ["a", None, SKIPPED, "wrong"],
        ["a", "b", "c", "d"],
    ],
)
def test_buckets_always_sum_to_total(answers) -> None:
    quiz = make_quiz(["a", "b", "c", "d"])
    summary = score(quiz.questions, answers)
    assert summary.correct + summary.incorrect + summary.unanswered == summary.total == 4


def test_empty_quiz_scores_zero() -> None:
    summary = score([], [])
    assert summary.total == 0
    assert summary.score_percent == 0


def test_score_is_idempotent() -> None:
    quiz = make_quiz(["a", "b", "c"])
    answers = ["a", "x", None]
    assert score(quiz.questions, answers) == score(quiz.questions, answers)


def test_skipped_slot_counts_as_unanswered() -> None:
    quiz = make_quiz(["a", "b"])
    summary = score(quiz.questions, [SKIPPED, "b"])
    assert summary.unanswered == 1
    assert summary.correct == 1
    assert summary.score_percent == 50


def test_comparison_is_exact_and_case_sensitive() -> None:
    quiz = make_quiz(["Paris", "Rome"])
    summary = score(quiz.questions, ["paris", "Rome "])
    assert summary.correct == 0
    assert summary.incorrect == 2


def test_short_answer_set_counts_missing_slots_as_unanswered() -> None:
    quiz = make_quiz(["a", "b", "c"])
    summary = score(quiz.questions, ["a"])
    assert (summary.correct, summary.unanswered, summary.total) == (1, 2, 3)


@pytest.mark.parametrize(
    ("part", "total", "expected"),
    [(1, 8, 13), (2, 3, 67), (1, 3, 33), (1, 6, 17), (3, 3, 100), (0, 5, 0), (1, 0, 0)],
)
def test_percent_rounds_half_up(part: int, total: int, expected: int) -> None:
    assert percent(part, total) == expected
