"""Environment variable helpers for configuration constants."""

from __future__ import annotations

import os
from pathlib import Path


def env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def env_int(name: str, default: int) -> int:
    """Parse an integer from the environment, falling back on bad input."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def default_data_dir() -> Path:
    """Directory holding the persisted session file."""
    return Path(os.environ.get("TRIVIA_DATA_DIR", Path.home() / ".triviaqt"))
