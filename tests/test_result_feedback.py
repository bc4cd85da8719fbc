import pytest

from trivia_app.core import result_feedback
from trivia_app.core.models import ScoreSummary


def make_summary(correct: int, incorrect: int, unanswered: int, score_percent: int) -> ScoreSummary:
    return ScoreSummary(
        correct=correct,
        incorrect=incorrect,
        unanswered=unanswered,
        total=correct + incorrect + unanswered,
        score_percent=score_percent,
    )


@pytest.mark.parametrize(
    "seconds, label",
    [(300, "5:00"), (61, "1:01"), (9, "0:09"), (0, "0:00"), (-3, "0:00")],
)
def test_format_time(seconds, label) -> None:
    assert result_feedback.format_time(seconds) == label


def test_time_low_threshold() -> None:
    assert result_feedback.is_time_low(60)
    assert not result_feedback.is_time_low(61)


def test_decode_html_entities() -> None:
    assert result_feedback.decode_html("Who&#039;s &quot;there&quot;?") == 'Who\'s "there"?'


def test_difficulty_label() -> None:
    assert result_feedback.difficulty_label("hard") == "Hard"
    assert result_feedback.difficulty_label("legendary") == "Legendary"


@pytest.mark.parametrize(
    "score_percent, message, badge, tier",
    [
        (95, "Excellent! 🏆", "🥇 Master", "good"),
        (80, "Great job! 🎉", "🥈 Expert", "good"),
        (70, "Good work! 👍", "🥉 Proficient", "fair"),
        (60, "Not bad! 👌", "📖 Learner", "fair"),
        (59, "Keep practicing! 💪", "🔰 Beginner", "poor"),
    ],
)
def test_score_feedback_thresholds(score_percent, message, badge, tier) -> None:
    assert result_feedback.score_message(score_percent) == message
    assert result_feedback.performance_badge(score_percent) == badge
    assert result_feedback.performance_tier(score_percent) == tier


def test_bucket_and_accuracy_percent() -> None:
    summary = make_summary(correct=2, incorrect=1, unanswered=0, score_percent=67)
    assert result_feedback.bucket_percent(summary.incorrect, summary) == 33
    assert result_feedback.accuracy_percent(summary) == 67


def test_accuracy_without_attempts_is_zero() -> None:
    assert result_feedback.accuracy_percent(make_summary(0, 0, 4, 0)) == 0


def test_share_text_lists_counts() -> None:
    text = result_feedback.share_text(make_summary(3, 1, 1, 60))
    assert text.startswith("I just scored 60% on a quiz!")
    assert "✅ Correct: 3" in text
    assert "⏭️ Unanswered: 1" in text
    assert text.endswith("Not bad! 👌")
