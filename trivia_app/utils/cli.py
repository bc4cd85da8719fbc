"""Command line options for the TriviaQt launcher."""

from __future__ import annotations

import argparse
from pathlib import Path

from trivia_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from trivia_app.core.services.persisted_store import JsonFileStore, MemoryStore, PersistedStore
from trivia_app.utils.env import default_data_dir

STORE_FILE_NAME = "session_store.json"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play timed trivia quizzes")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Address for the browser player")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port for the browser player")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the saved session (default: ~/.triviaqt)",
    )
    parser.add_argument(
        "--ephemeral",
        action="store_true",
        help="Keep the session in memory only; nothing is resumed on the next start",
    )
    parser.add_argument(
        "--no-window",
        action="store_true",
        help="Run only the browser player without opening the Qt window",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for shuffling answer options")
    return parser.parse_args(argv)


def build_store(args: argparse.Namespace) -> PersistedStore:
    if args.ephemeral:
        return MemoryStore()
    data_dir = args.data_dir or default_data_dir()
    return JsonFileStore(data_dir / STORE_FILE_NAME)
