"""FastAPI server exposing the quiz session to a browser player."""

from __future__ import annotations

from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
import uvicorn

from trivia_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from trivia_app.constants.quiz_constants import (
    CATEGORIES,
    DEFAULT_QUESTION_COUNT,
    DEFAULT_TIME_LIMIT_SECONDS,
    DIFFICULTIES,
    MAX_QUESTION_COUNT,
    MAX_TIME_LIMIT_SECONDS,
    MIN_QUESTION_COUNT,
    MIN_TIME_LIMIT_SECONDS,
    QUESTION_TYPES,
)
from trivia_app.core import result_feedback
from trivia_app.core.exceptions import QuestionProviderError, SessionStateError
from trivia_app.core.models import SKIPPED, QuizSettings, Screen, SessionSnapshot
from trivia_app.core.session_machine import QuestionProvider, SessionStateMachine

_PLAYER_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>TriviaQt</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #eef2ff; color: #1f2937; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; gap: 1rem; align-items: center; }
      .card { background: #fff; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.1); width: min(44rem, 100%); box-sizing: border-box; }
      .hidden { display: none; }
      header.card { display: flex; justify-content: space-between; align-items: center; }
      button { border: none; border-radius: 0.5rem; padding: 0.75rem 1.25rem; font-size: 1rem; cursor: pointer; }
      button:disabled { opacity: 0.6; cursor: not-allowed; }
      .primary { background: #2563eb; color: #fff; }
      .danger { background: #ef4444; color: #fff; }
      .muted { background: transparent; color: #6b7280; }
      label { display: block; font-size: 0.9rem; margin-top: 0.75rem; }
      input, select { width: 100%; padding: 0.6rem; border: 1px solid #d1d5db; border-radius: 0.5rem; box-sizing: border-box; }
      .option { display: block; width: 100%; text-align: left; margin: 0.5rem 0; background: #f9fafb; border: 2px solid #e5e7eb; }
      .option.correct { border-color: #10b981; background: #ecfdf5; }
      .option.wrong { border-color: #ef4444; background: #fef2f2; }
      .meta { display: flex; justify-content: space-between; color: #4b5563; font-size: 0.9rem; }
      .timer { font-weight: bold; color: #2563eb; }
      .timer.low { color: #dc2626; }
      .tag { display: inline-block; font-size: 0.75rem; padding: 0.15rem 0.5rem; border-radius: 0.25rem; background: #dbeafe; margin-right: 0.5rem; }
      .score { font-size: 2.5rem; font-weight: bold; text-align: center; }
      .score.good { color: #059669; } .score.fair { color: #d97706; } .score.poor { color: #dc2626; }
      .grid { display: grid; grid-template-columns: repeat(3, 1fr); gap: 0.75rem; text-align: center; }
      #error { color: #dc2626; min-height: 1.25rem; }
    </style>
  </head>
  <body>
    <header class="card hidden" id="header">
      <div><strong>TriviaQt</strong><div id="welcome"></div></div>
      <button class="danger" id="logout-button">Logout</button>
    </header>
    <section class="card hidden" id="login-card">
      <h1>Welcome to TriviaQt</h1>
      <label for="name-input">Enter your name to start playing.</label>
      <input id="name-input" placeholder="Your name" />
      <p><button class="primary" id="login-button">Login</button></p>
    </section>
    <section class="card hidden" id="setup-card">
      <h2>Setup Your Quiz</h2>
      <label>Number of Questions <input id="amount-input" type="number" /></label>
      <label>Time Limit (seconds) <input id="time-input" type="number" /></label>
      <label>Category <select id="category-select"></select></label>
      <label>Difficulty <select id="difficulty-select"></select></label>
      <label>Question Type <select id="type-select"></select></label>
      <p><button class="primary" id="start-button">Start Quiz</button></p>
    </section>
    <section class="card hidden" id="quiz-card">
      <div class="meta">
        <span id="progress"></span><span id="answered"></span><span class="timer" id="timer"></span>
      </div>
      <p><span class="tag" id="category"></span><span class="tag" id="difficulty"></span></p>
      <h2 id="question-text"></h2>
      <div id="options"></div>
      <p style="text-align:center"><button class="muted" id="skip-button">Skip Question</button></p>
    </section>
    <section class="card hidden" id="results-card">
      <h2 style="text-align:center">Quiz Complete!</h2>
      <p style="text-align:center" id="score-message"></p>
      <div class="score" id="score"></div>
      <div class="grid">
        <div><strong id="correct"></strong><div>Correct</div></div>
        <div><strong id="incorrect"></strong><div>Incorrect</div></div>
        <div><strong id="unanswered"></strong><div>Unanswered</div></div>
      </div>
      <p id="summary"></p>
      <p style="text-align:center" id="badge"></p>
      <p><button class="primary" id="restart-button">Take Another Quiz</button>
         <button id="copy-button">Copy Results</button></p>
    </section>
    <p id="error"></p>
    <script>
      const $ = (id) => document.getElementById(id);
      const cards = { login: $('login-card'), setup: $('setup-card'), quiz: $('quiz-card'), results: $('results-card') };
      let lastState = null;
      let optionsLoaded = false;

      async function call(method, path, body) {
        const response = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body === undefined ? undefined : JSON.stringify(body),
        });
        const data = await response.json().catch(() => ({}));
        if (!response.ok) {
          const detail = typeof data.detail === 'string' ? data.detail : 'Request failed.';
          throw new Error(detail);
        }
        return data;
      }

      function fillSelect(select, items) {
        select.innerHTML = '';
        for (const item of items) {
          const option = document.createElement('option');
          option.value = item.value;
          option.textContent = item.label;
          select.appendChild(option);
        }
      }

      async function loadOptions() {
        const options = await call('GET', '/api/options');
        fillSelect($('category-select'), options.categories);
        fillSelect($('difficulty-select'), options.difficulties);
        fillSelect($('type-select'), options.types);
        $('amount-input').value = options.defaults.amount;
        $('amount-input').min = options.limits.amount[0];
        $('amount-input').max = options.limits.amount[1];
        $('time-input').value = options.defaults.time_limit_seconds;
        $('time-input').min = options.limits.time_limit_seconds[0];
        $('time-input').max = options.limits.time_limit_seconds[1];
        optionsLoaded = true;
      }

      function renderQuiz(quiz, timeLabel, timeLow) {
        $('progress').textContent = `Question ${quiz.current_index + 1} of ${quiz.total}`;
        $('answered').textContent = `Answered: ${quiz.answered}/${quiz.total}`;
        $('timer').textContent = `⏰ ${timeLabel}`;
        $('timer').classList.toggle('low', timeLow);
        const question = quiz.question;
        $('category').textContent = question.category;
        $('difficulty').textContent = question.difficulty_label;
        $('question-text').textContent = question.text;
        const container = $('options');
        container.innerHTML = '';
        question.options.forEach((option, idx) => {
          const button = document.createElement('button');
          button.className = 'option';
          button.textContent = `${String.fromCharCode(65 + idx)}. ${option.label}`;
          button.disabled = quiz.revealing;
          if (quiz.revealing && option.value === quiz.correct_answer) {
            button.classList.add('correct');
          } else if (quiz.revealing && option.value === quiz.selected_answer) {
            button.classList.add('wrong');
          }
          button.addEventListener('click', () => submit({ index: quiz.current_index, answer: option.value }));
          container.appendChild(button);
        });
        $('skip-button').disabled = quiz.revealing;
        $('skip-button').onclick = () => submit({ index: quiz.current_index, skip: true });
      }

      function renderResults(results) {
        $('score').textContent = `${results.score_percent}%`;
        $('score').className = `score ${results.tier}`;
        $('score-message').textContent = results.message;
        $('correct').textContent = `${results.correct} (${results.correct_percent}%)`;
        $('incorrect').textContent = `${results.incorrect} (${results.incorrect_percent}%)`;
        $('unanswered').textContent = `${results.unanswered} (${results.unanswered_percent}%)`;
        $('summary').textContent =
          `Total Questions: ${results.total} · Attempted: ${results.correct + results.incorrect} · Accuracy: ${results.accuracy_percent}%`;
        $('badge').textContent = results.badge;
        $('copy-button').onclick = () => navigator.clipboard.writeText(results.share_text);
      }

      function render(state) {
        lastState = state;
        for (const [screen, card] of Object.entries(cards)) {
          card.classList.toggle('hidden', screen !== state.screen);
        }
        $('header').classList.toggle('hidden', !state.user);
        $('welcome').textContent = state.user ? `Welcome, ${state.user.name}!` : '';
        if (state.screen === 'setup' && !optionsLoaded) {
          loadOptions().catch((err) => { $('error').textContent = err.message; });
        }
        if (state.screen === 'quiz' && state.quiz) {
          renderQuiz(state.quiz, state.time_label, state.time_low);
        }
        if (state.screen === 'results' && state.results) {
          renderResults(state.results);
        }
      }

      async function refresh() {
        try {
          render(await call('GET', '/api/state'));
        } catch (err) {
          $('error').textContent = err.message;
        }
      }

      async function act(method, path, body) {
        $('error').textContent = '';
        try {
          render(await call(method, path, body));
        } catch (err) {
          $('error').textContent = err.message;
        }
      }

      function submit(payload) {
        act('POST', '/api/answer', payload);
      }

      $('login-button').addEventListener('click', () => act('POST', '/api/login', { name: $('name-input').value }));
      $('logout-button').addEventListener('click', () => act('POST', '/api/logout'));
      $('restart-button').addEventListener('click', () => act('POST', '/api/restart'));
      $('start-button').addEventListener('click', async () => {
        $('start-button').disabled = true;
        $('start-button').textContent = 'Loading Questions...';
        await act('POST', '/api/quiz', {
          amount: Number($('amount-input').value),
          time_limit_seconds: Number($('time-input').value),
          category: $('category-select').value,
          difficulty: $('difficulty-select').value,
          type: $('type-select').value,
        });
        $('start-button').disabled = false;
        $('start-button').textContent = 'Start Quiz';
      });

      refresh();
      setInterval(refresh, 500);
    </script>
  </body>
</html>
"""


class LoginPayload(BaseModel):
    """Payload schema for the login form."""

    name: str


class QuizSettingsPayload(BaseModel):
    """Payload schema for the setup form."""

    amount: int = Field(DEFAULT_QUESTION_COUNT, ge=MIN_QUESTION_COUNT, le=MAX_QUESTION_COUNT)
    category: str = ""
    difficulty: str = ""
    type: str = ""
    time_limit_seconds: int = Field(
        DEFAULT_TIME_LIMIT_SECONDS, ge=MIN_TIME_LIMIT_SECONDS, le=MAX_TIME_LIMIT_SECONDS
    )

    def to_settings(self) -> QuizSettings:
        return QuizSettings(
            amount=self.amount,
            category=self.category,
            difficulty=self.difficulty,
            question_type=self.type,
            time_limit_seconds=self.time_limit_seconds,
        )


class AnswerPayload(BaseModel):
    """Payload schema for submitted answers; ``skip`` records an explicit non-answer."""

    index: int
    answer: str | None = None
    skip: bool = False


def serialize_snapshot(snapshot: SessionSnapshot) -> dict[str, object]:
    """JSON view of the session; the correct answer is sent only while revealing."""
    payload: dict[str, object] = {
        "screen": snapshot.screen.value,
        "user": {"name": snapshot.user.name} if snapshot.user else None,
        "time_remaining": snapshot.time_remaining,
        "time_label": result_feedback.format_time(snapshot.time_remaining),
        "time_low": result_feedback.is_time_low(snapshot.time_remaining),
        "quiz": None,
        "results": None,
    }

    question = snapshot.current_question
    if snapshot.screen is Screen.QUIZ and snapshot.quiz is not None and question is not None:
        selected = snapshot.selected_answer
        payload["quiz"] = {
            "total": snapshot.quiz.question_count,
            "current_index": snapshot.current_index,
            "answered": snapshot.answered_count,
            "revealing": snapshot.revealing,
            "selected_answer": selected if isinstance(selected, str) else None,
            "skipped": selected is SKIPPED,
            "correct_answer": question.correct_answer if snapshot.revealing else None,
            "question": {
                "text": result_feedback.decode_html(question.text),
                "category": result_feedback.decode_html(question.category),
                "difficulty": question.difficulty,
                "difficulty_label": result_feedback.difficulty_label(question.difficulty),
                "options": [
                    {"value": answer, "label": result_feedback.decode_html(answer)}
                    for answer in question.all_answers
                ],
            },
        }

    summary = snapshot.results
    if summary is not None:
        payload["results"] = {
            "correct": summary.correct,
            "incorrect": summary.incorrect,
            "unanswered": summary.unanswered,
            "total": summary.total,
            "score_percent": summary.score_percent,
            "correct_percent": result_feedback.bucket_percent(summary.correct, summary),
            "incorrect_percent": result_feedback.bucket_percent(summary.incorrect, summary),
            "unanswered_percent": result_feedback.bucket_percent(summary.unanswered, summary),
            "accuracy_percent": result_feedback.accuracy_percent(summary),
            "message": result_feedback.score_message(summary.score_percent),
            "badge": result_feedback.performance_badge(summary.score_percent),
            "tier": result_feedback.performance_tier(summary.score_percent),
            "share_text": result_feedback.share_text(summary),
        }
    return payload


def _get_session_dependency(session: SessionStateMachine):
    def dependency() -> SessionStateMachine:
        return session

    return dependency


def create_api_app(session: SessionStateMachine, provider: QuestionProvider) -> FastAPI:
    """Create a FastAPI application wired to the provided session."""
    app = FastAPI(title="TriviaQt API", version="0.1.0")
    session_dep = _get_session_dependency(session)

    @app.get("/", response_class=HTMLResponse)
    def serve_player_page() -> str:
        return _PLAYER_PAGE_HTML

    @app.get("/api/state")
    def get_state(machine: SessionStateMachine = Depends(session_dep)) -> dict[str, object]:
        return serialize_snapshot(machine.snapshot())

    @app.get("/api/options")
    def get_options() -> dict[str, object]:
        def as_items(pairs: tuple[tuple[str, str], ...]) -> list[dict[str, str]]:
            return [{"value": value, "label": label} for value, label in pairs]

        return {
            "categories": as_items(CATEGORIES),
            "difficulties": as_items(DIFFICULTIES),
            "types": as_items(QUESTION_TYPES),
            "defaults": {
                "amount": DEFAULT_QUESTION_COUNT,
                "time_limit_seconds": DEFAULT_TIME_LIMIT_SECONDS,
            },
            "limits": {
                "amount": [MIN_QUESTION_COUNT, MAX_QUESTION_COUNT],
                "time_limit_seconds": [MIN_TIME_LIMIT_SECONDS, MAX_TIME_LIMIT_SECONDS],
            },
        }

    @app.post("/api/login")
    def login(
        payload: LoginPayload,
        machine: SessionStateMachine = Depends(session_dep),
    ) -> dict[str, object]:
        try:
            machine.login(payload.name)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except SessionStateError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return serialize_snapshot(machine.snapshot())

    @app.post("/api/quiz", status_code=201)
    def start_quiz(
        payload: QuizSettingsPayload,
        machine: SessionStateMachine = Depends(session_dep),
    ) -> dict[str, object]:
        try:
            machine.fetch_and_start(provider, payload.to_settings())
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except SessionStateError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except QuestionProviderError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return serialize_snapshot(machine.snapshot())

    @app.post("/api/answer")
    def submit_answer(
        payload: AnswerPayload,
        machine: SessionStateMachine = Depends(session_dep),
    ) -> dict[str, object]:
        if payload.skip:
            value = SKIPPED
        elif payload.answer is None:
            raise HTTPException(status_code=422, detail="Provide an answer or set skip.")
        else:
            value = payload.answer
            question = machine.snapshot().current_question
            if question is not None and value not in question.all_answers:
                raise HTTPException(status_code=422, detail="Answer is not one of the options.")
        try:
            machine.answer(payload.index, value)
        except SessionStateError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return serialize_snapshot(machine.snapshot())

    @app.post("/api/restart")
    def restart(machine: SessionStateMachine = Depends(session_dep)) -> dict[str, object]:
        try:
            machine.restart()
        except SessionStateError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return serialize_snapshot(machine.snapshot())

    @app.post("/api/logout")
    def logout(machine: SessionStateMachine = Depends(session_dep)) -> dict[str, object]:
        machine.logout()
        return serialize_snapshot(machine.snapshot())

    return app


def start_api_server(
    session: SessionStateMachine,
    provider: QuestionProvider,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    daemon: bool = True,
) -> Thread:
    """Start the FastAPI server in a background thread."""
    app = create_api_app(session, provider)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="TriviaApiServer", daemon=daemon)
    thread.start()
    return thread
