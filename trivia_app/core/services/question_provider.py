"""Client for the Open Trivia Database question API."""

from __future__ import annotations

import logging
import random
from typing import Any

import httpx

from trivia_app.constants.network_constants import HTTP_TIMEOUT_SECONDS, OPEN_TRIVIA_API_URL
from trivia_app.core.exceptions import QuestionProviderError
from trivia_app.core.models import Question, QuizDefinition, QuizSettings

logger = logging.getLogger(__name__)

_RESPONSE_MESSAGES = {
    1: "Not enough questions are available for these settings. Try fewer questions or another category.",
    2: "The trivia service rejected the quiz settings.",
    3: "The trivia session token was not found.",
    4: "The trivia session token has run out of questions.",
    5: "Too many requests to the trivia service. Wait a few seconds and try again.",
}


class OpenTriviaProvider:
    """Fetches quizzes from opentdb.com and shuffles each question's answers once."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str = OPEN_TRIVIA_API_URL,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        rng: random.Random | None = None,
    ) -> None:
        self._client = client or httpx.Client(timeout=timeout)
        self._owns_client = client is None
        self._base_url = base_url
        self._rng = rng or random.Random()

    def set_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def fetch_quiz(self, settings: QuizSettings) -> QuizDefinition:
        params = build_query(settings)
        logger.info("Fetching %d questions from %s", settings.amount, self._base_url)
        try:
            response = self._client.get(self._base_url, params=params)
        except httpx.HTTPError as exc:
            logger.warning("Question request failed: %s", exc)
            raise QuestionProviderError(
                "Error fetching questions. Please check your internet connection."
            ) from exc

        if not response.is_success:
            raise QuestionProviderError(
                f"Failed to fetch questions (HTTP {response.status_code}). Please try again."
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise QuestionProviderError("The trivia service returned an unreadable response.") from exc

        questions = self._parse_payload(payload)
        return QuizDefinition(questions=questions, time_limit_seconds=settings.time_limit_seconds)

    def _parse_payload(self, payload: Any) -> tuple[Question, ...]:
        if not isinstance(payload, dict):
            raise QuestionProviderError("The trivia service returned an unexpected response.")
        code = payload.get("response_code")
        if code != 0:
            message = _RESPONSE_MESSAGES.get(code, "Failed to fetch questions. Please try again.")
            logger.warning("Trivia service answered with response_code=%r", code)
            raise QuestionProviderError(message)

        results = payload.get("results")
        if not isinstance(results, list) or not results:
            raise QuestionProviderError("The trivia service returned no questions.")
        try:
            return tuple(self._parse_question(item) for item in results)
        except (KeyError, TypeError, ValueError) as exc:
            raise QuestionProviderError(f"The trivia service returned a malformed question: {exc}") from exc

    def _parse_question(self, item: dict[str, Any]) -> Question:
        correct = item["correct_answer"]
        incorrect = item["incorrect_answers"]
        if not isinstance(correct, str) or not isinstance(incorrect, list):
            raise TypeError("answers must be strings")
        options = [str(answer) for answer in incorrect] + [correct]
        self._rng.shuffle(options)
        return Question(
            text=str(item["question"]),
            category=str(item["category"]),
            difficulty=str(item["difficulty"]),
            correct_answer=correct,
            all_answers=tuple(options),
            kind=str(item.get("type", "multiple")),
        )


def build_query(settings: QuizSettings) -> dict[str, str | int]:
    """Query parameters for the API; empty settings mean "any" and are omitted."""
    params: dict[str, str | int] = {"amount": settings.amount}
    if settings.category:
        params["category"] = settings.category
    if settings.difficulty:
        params["difficulty"] = settings.difficulty
    if settings.question_type:
        params["type"] = settings.question_type
    return params
