"""JSON encoding of the session data kept in the persisted store.

Layout of the stored values:

    quiz_user            {"name": "Ada"}
    quiz_state           {"questions": [{...}, ...], "time_limit_seconds": 300}
    quiz_answers         ["Paris", null, {"skipped": true}]
    quiz_time_remaining  "287"

An absent answer slot is JSON null and a skipped slot is the object
{"skipped": true}, so neither can collide with an answer string.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from trivia_app.core.exceptions import PersistedStateError
from trivia_app.core.models import (
    SKIPPED,
    AnswerSlot,
    Question,
    QuizDefinition,
    UserProfile,
)

_SKIPPED_TOKEN = {"skipped": True}


def encode_user(user: UserProfile) -> str:
    return json.dumps({"name": user.name}, ensure_ascii=False)


def decode_user(raw: str) -> UserProfile:
    payload = _load(raw)
    if not isinstance(payload, dict) or not isinstance(payload.get("name"), str):
        raise PersistedStateError("Stored user must be an object with a name.")
    try:
        return UserProfile.from_name(payload["name"])
    except ValueError as exc:
        raise PersistedStateError(str(exc)) from exc


def encode_quiz(quiz: QuizDefinition) -> str:
    payload = {
        "questions": [_question_to_dict(question) for question in quiz.questions],
        "time_limit_seconds": quiz.time_limit_seconds,
    }
    return json.dumps(payload, ensure_ascii=False)


def decode_quiz(raw: str) -> QuizDefinition:
    payload = _load(raw)
    if not isinstance(payload, dict):
        raise PersistedStateError("Stored quiz must be a JSON object.")
    raw_questions = payload.get("questions")
    if not isinstance(raw_questions, list):
        raise PersistedStateError("Stored quiz has no question list.")
    try:
        questions = tuple(_question_from_dict(item) for item in raw_questions)
        return QuizDefinition(
            questions=questions,
            time_limit_seconds=payload.get("time_limit_seconds"),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise PersistedStateError(f"Stored quiz is malformed: {exc}") from exc


def encode_answers(answers: Sequence[AnswerSlot]) -> str:
    return json.dumps([_slot_to_json(slot) for slot in answers], ensure_ascii=False)


def decode_answers(raw: str) -> list[AnswerSlot]:
    payload = _load(raw)
    if not isinstance(payload, list):
        raise PersistedStateError("Stored answers must be a JSON list.")
    return [_slot_from_json(item) for item in payload]


def encode_time(seconds: int) -> str:
    return str(int(seconds))


def decode_time(raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise PersistedStateError(f"Stored time remaining is not an integer: {raw!r}") from exc


def _load(raw: str) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise PersistedStateError(f"Stored value is not valid JSON: {exc}") from exc


def _question_to_dict(question: Question) -> dict[str, Any]:
    return {
        "text": question.text,
        "category": question.category,
        "difficulty": question.difficulty,
        "correct_answer": question.correct_answer,
        "all_answers": list(question.all_answers),
        "kind": question.kind,
    }


def _question_from_dict(item: Any) -> Question:
    if not isinstance(item, dict):
        raise TypeError("question entry must be an object")
    answers = item["all_answers"]
    if not isinstance(answers, list) or not all(isinstance(answer, str) for answer in answers):
        raise TypeError("all_answers must be a list of strings")
    return Question(
        text=str(item["text"]),
        category=str(item["category"]),
        difficulty=str(item["difficulty"]),
        correct_answer=str(item["correct_answer"]),
        all_answers=tuple(answers),
        kind=str(item.get("kind", "multiple")),
    )


def _slot_to_json(slot: AnswerSlot) -> Any:
    if slot is SKIPPED:
        return dict(_SKIPPED_TOKEN)
    return slot


def _slot_from_json(item: Any) -> AnswerSlot:
    if item is None or isinstance(item, str):
        return item
    if item == _SKIPPED_TOKEN:
        return SKIPPED
    raise PersistedStateError(f"Unrecognized answer slot: {item!r}")
