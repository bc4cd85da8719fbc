"""Display helpers shared by the Qt window and the browser player."""

from __future__ import annotations

import html

from trivia_app.constants.quiz_constants import DIFFICULTIES, TIME_WARNING_THRESHOLD_SECONDS
from trivia_app.core.models import ScoreSummary
from trivia_app.core.services.scoring_engine import percent

_SCORE_MESSAGES = (
    (90, "Excellent! 🏆"),
    (80, "Great job! 🎉"),
    (70, "Good work! 👍"),
    (60, "Not bad! 👌"),
)
_BADGES = (
    (90, "🥇 Master"),
    (80, "🥈 Expert"),
    (70, "🥉 Proficient"),
    (60, "📖 Learner"),
)


def decode_html(text: str) -> str:
    """Turn provider text such as ``Who&#039;s there?`` into plain text."""
    return html.unescape(text)


def format_time(seconds: int) -> str:
    """Format seconds as ``m:ss``; negative values show as ``0:00``."""
    seconds = max(int(seconds), 0)
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def is_time_low(seconds: int) -> bool:
    return seconds <= TIME_WARNING_THRESHOLD_SECONDS


def difficulty_label(difficulty: str) -> str:
    for value, label in DIFFICULTIES:
        if value and value == difficulty:
            return label
    return difficulty.capitalize()


def score_message(score_percent: int) -> str:
    for threshold, message in _SCORE_MESSAGES:
        if score_percent >= threshold:
            return message
    return "Keep practicing! 💪"


def performance_badge(score_percent: int) -> str:
    for threshold, badge in _BADGES:
        if score_percent >= threshold:
            return badge
    return "🔰 Beginner"


def performance_tier(score_percent: int) -> str:
    """Colour tier used by both UIs: good, fair or poor."""
    if score_percent >= 80:
        return "good"
    if score_percent >= 60:
        return "fair"
    return "poor"


def bucket_percent(count: int, summary: ScoreSummary) -> int:
    return percent(count, summary.total)


def accuracy_percent(summary: ScoreSummary) -> int:
    """Share of attempted questions answered correctly."""
    return percent(summary.correct, summary.correct + summary.incorrect)


def share_text(summary: ScoreSummary) -> str:
    return (
        f"I just scored {summary.score_percent}% on a quiz! 🎯\n\n"
        f"✅ Correct: {summary.correct}\n"
        f"❌ Incorrect: {summary.incorrect}\n"
        f"⏭️ Unanswered: {summary.unanswered}\n\n"
        f"{score_message(summary.score_percent)}"
    )
