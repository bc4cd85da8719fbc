from fastapi.testclient import TestClient
import pytest

from conftest import FakeProvider, make_question
from trivia_app.core.exceptions import QuestionProviderError
from trivia_app.core.models import QuizDefinition
from trivia_app.server.api_server import create_api_app

QUIZ = QuizDefinition(
    questions=(
        make_question("Paris", wrong=("London", "Berlin", "Madrid"), text="Capital of France?"),
        make_question("Rock &amp; Roll", wrong=("Jazz", "Blues"), text="Elvis played &quot;what&quot;?"),
    ),
    time_limit_seconds=120,
)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider(quiz=QUIZ)


@pytest.fixture
def session(make_session):
    return make_session()


@pytest.fixture
def client(session, provider) -> TestClient:
    return TestClient(create_api_app(session, provider))


def login_and_start(client: TestClient) -> dict:
    assert client.post("/api/login", json={"name": "Ada"}).status_code == 200
    response = client.post("/api/quiz", json={"amount": 2, "time_limit_seconds": 120})
    assert response.status_code == 201
    return response.json()


def test_player_page_is_served(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert "TriviaQt" in response.text


def test_initial_state_is_login(client) -> None:
    state = client.get("/api/state").json()
    assert state["screen"] == "login"
    assert state["user"] is None
    assert state["quiz"] is None


def test_options_list_choices_and_limits(client) -> None:
    options = client.get("/api/options").json()
    assert {"value": "", "label": "Any Category"} in options["categories"]
    assert options["limits"]["amount"] == [1, 50]
    assert options["defaults"]["time_limit_seconds"] == 300


def test_login_validation_and_conflict(client) -> None:
    assert client.post("/api/login", json={"name": "  "}).status_code == 422
    assert client.post("/api/login", json={"name": "Ada"}).json()["screen"] == "setup"
    assert client.post("/api/login", json={"name": "Ada"}).status_code == 409


def test_start_quiz_returns_decoded_question(client, provider) -> None:
    state = login_and_start(client)

    assert state["screen"] == "quiz"
    quiz = state["quiz"]
    assert quiz["total"] == 2
    assert quiz["current_index"] == 0
    assert quiz["correct_answer"] is None
    assert quiz["question"]["text"] == "Capital of France?"
    assert quiz["question"]["difficulty_label"] == "Easy"
    assert provider.requests[0].amount == 2
    assert state["time_label"] == "2:00"


def test_quiz_settings_out_of_range_are_rejected(client, provider) -> None:
    client.post("/api/login", json={"name": "Ada"})
    response = client.post("/api/quiz", json={"amount": 0})
    assert response.status_code == 422
    assert provider.requests == []


def test_unknown_category_is_rejected(client) -> None:
    client.post("/api/login", json={"name": "Ada"})
    assert client.post("/api/quiz", json={"category": "999"}).status_code == 422


def test_provider_failure_maps_to_bad_gateway(session) -> None:
    failing = TestClient(
        create_api_app(session, FakeProvider(error=QuestionProviderError("offline")))
    )
    failing.post("/api/login", json={"name": "Ada"})

    response = failing.post("/api/quiz", json={})
    assert response.status_code == 502
    assert response.json()["detail"] == "offline"
    assert failing.get("/api/state").json()["screen"] == "setup"


def test_start_quiz_before_login_conflicts(client) -> None:
    assert client.post("/api/quiz", json={}).status_code == 409


def test_answer_reveals_correct_option(client) -> None:
    login_and_start(client)
    state = client.post("/api/answer", json={"index": 0, "answer": "London"}).json()

    quiz = state["quiz"]
    assert quiz["revealing"] is True
    assert quiz["selected_answer"] == "London"
    assert quiz["correct_answer"] == "Paris"
    assert quiz["answered"] == 1


def test_answer_options_keep_raw_value_and_decoded_label(client, scheduler) -> None:
    login_and_start(client)
    client.post("/api/answer", json={"index": 0, "skip": True})
    scheduler.advance(1.0)

    question = client.get("/api/state").json()["quiz"]["question"]
    assert question["text"] == 'Elvis played "what"?'
    assert {"value": "Rock &amp; Roll", "label": "Rock & Roll"} in question["options"]


def test_answer_errors(client) -> None:
    login_and_start(client)
    assert client.post("/api/answer", json={"index": 0}).status_code == 422
    assert client.post("/api/answer", json={"index": 0, "answer": "Rome"}).status_code == 422
    assert client.post("/api/answer", json={"index": 1, "answer": "Paris"}).status_code == 409

    assert client.post("/api/answer", json={"index": 0, "answer": "Paris"}).status_code == 200
    assert client.post("/api/answer", json={"index": 0, "answer": "Paris"}).status_code == 409


def test_full_round_trip_to_results_and_restart(client, scheduler) -> None:
    login_and_start(client)
    client.post("/api/answer", json={"index": 0, "answer": "Paris"})
    scheduler.advance(1.0)
    client.post("/api/answer", json={"index": 1, "skip": True})
    scheduler.advance(1.5)

    state = client.get("/api/state").json()
    assert state["screen"] == "results"
    assert state["quiz"] is None
    results = state["results"]
    assert (results["correct"], results["incorrect"], results["unanswered"]) == (1, 0, 1)
    assert results["score_percent"] == 50
    assert results["accuracy_percent"] == 100
    assert results["tier"] == "poor"
    assert "50%" in results["share_text"]

    state = client.post("/api/restart").json()
    assert state["screen"] == "setup"
    assert state["results"] is None


def test_restart_outside_results_conflicts(client) -> None:
    login_and_start(client)
    assert client.post("/api/restart").status_code == 409


def test_logout_returns_to_login(client, store) -> None:
    login_and_start(client)
    state = client.post("/api/logout").json()

    assert state["screen"] == "login"
    assert state["user"] is None
    assert store.keys() == []
