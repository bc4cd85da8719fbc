import random

import httpx
import pytest

from trivia_app.core.exceptions import QuestionProviderError
from trivia_app.core.models import QuizSettings
from trivia_app.core.services.question_provider import OpenTriviaProvider, build_query

API_URL = "https://trivia.test/api.php"

CAPITAL_QUESTION = {
    "type": "multiple",
    "difficulty": "easy",
    "category": "Geography",
    "question": "What is the capital of France?",
    "correct_answer": "Paris",
    "incorrect_answers": ["London", "Berlin", "Madrid"],
}

BOOLEAN_QUESTION = {
    "type": "boolean",
    "difficulty": "medium",
    "category": "Science &amp; Nature",
    "question": "The &quot;Sun&quot; is a star.",
    "correct_answer": "True",
    "incorrect_answers": ["False"],
}


def make_provider(handler, seed: int = 7) -> OpenTriviaProvider:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return OpenTriviaProvider(client=client, base_url=API_URL, rng=random.Random(seed))


def test_fetch_quiz_builds_questions_and_sends_settings() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200, json={"response_code": 0, "results": [CAPITAL_QUESTION, BOOLEAN_QUESTION]}
        )

    provider = make_provider(handler)
    settings = QuizSettings(amount=2, category="22", difficulty="easy", time_limit_seconds=90)
    quiz = provider.fetch_quiz(settings)

    params = seen[0].url.params
    assert params["amount"] == "2"
    assert params["category"] == "22"
    assert params["difficulty"] == "easy"
    assert "type" not in params

    assert quiz.time_limit_seconds == 90
    assert quiz.question_count == 2
    first, second = quiz.questions
    assert sorted(first.all_answers) == ["Berlin", "London", "Madrid", "Paris"]
    assert first.correct_answer == "Paris"
    assert second.kind == "boolean"
    # Entities are kept as delivered and decoded only for display.
    assert second.text == "The &quot;Sun&quot; is a star."


def test_same_seed_gives_same_option_order() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"response_code": 0, "results": [CAPITAL_QUESTION]})

    first = make_provider(handler, seed=3).fetch_quiz(QuizSettings(amount=1))
    second = make_provider(handler, seed=3).fetch_quiz(QuizSettings(amount=1))
    assert first.questions[0].all_answers == second.questions[0].all_answers


def test_not_enough_questions_is_reported() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"response_code": 1, "results": []})

    with pytest.raises(QuestionProviderError, match="Not enough questions"):
        make_provider(handler).fetch_quiz(QuizSettings(amount=50))


def test_http_error_status_is_reported() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    with pytest.raises(QuestionProviderError, match="HTTP 500"):
        make_provider(handler).fetch_quiz(QuizSettings())


def test_connection_failure_is_reported() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route", request=request)

    with pytest.raises(QuestionProviderError, match="internet connection"):
        make_provider(handler).fetch_quiz(QuizSettings())


@pytest.mark.parametrize(
    "body",
    [
        {"response_code": 0, "results": []},
        {"response_code": 0, "results": [{"question": "Missing answers"}]},
        {"response_code": 0, "results": [dict(CAPITAL_QUESTION, difficulty="impossible")]},
    ],
)
def test_malformed_payload_is_reported(body) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    with pytest.raises(QuestionProviderError):
        make_provider(handler).fetch_quiz(QuizSettings())


def test_unreadable_body_is_reported() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(QuestionProviderError):
        make_provider(handler).fetch_quiz(QuizSettings())


def test_build_query_omits_any_fields() -> None:
    assert build_query(QuizSettings(amount=5)) == {"amount": 5}
    assert build_query(QuizSettings(amount=5, question_type="boolean")) == {
        "amount": 5,
        "type": "boolean",
    }
