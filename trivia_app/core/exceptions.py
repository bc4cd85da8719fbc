"""Exceptions raised by the trivia core."""

from __future__ import annotations


class SessionStateError(RuntimeError):
    """Raised when an event is invoked in a state that does not accept it."""


class AnswerRejectedError(SessionStateError):
    """Raised when an answer cannot be recorded for the visible question."""


class QuestionProviderError(Exception):
    """Raised when quiz questions cannot be fetched or parsed."""


class PersistedStateError(Exception):
    """Raised when persisted session data cannot be decoded."""
