import logging
from pathlib import Path
from threading import Event

import pytest

from trivia_app.core.scheduler import ThreadScheduler
from trivia_app.core.services.persisted_store import JsonFileStore, MemoryStore
from trivia_app.utils.cli import build_store, parse_args
from trivia_app.utils.env import default_data_dir, env_float, env_int, env_str
from trivia_app.utils.logging_config import configure_logging


def test_thread_scheduler_runs_deferred_callback() -> None:
    fired = Event()
    ThreadScheduler().call_later(0.01, fired.set)
    assert fired.wait(2.0)


def test_thread_scheduler_repeats_until_cancelled() -> None:
    calls: list[int] = []
    third_call = Event()

    def callback() -> None:
        calls.append(1)
        if len(calls) >= 3:
            third_call.set()

    handle = ThreadScheduler().call_every(0.01, callback)
    assert third_call.wait(2.0)
    handle.cancel()


def test_thread_scheduler_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        ThreadScheduler().call_every(0, lambda: None)


def test_env_helpers_fall_back_on_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("TRIVIA_PORT", "not-a-port")
    monkeypatch.setenv("TRIVIA_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("TRIVIA_HOST", "   ")

    assert env_int("TRIVIA_PORT", 8000) == 8000
    assert env_float("TRIVIA_HTTP_TIMEOUT", 10.0) == 2.5
    assert env_str("TRIVIA_HOST", "127.0.0.1") == "127.0.0.1"


def test_default_data_dir_honours_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("TRIVIA_DATA_DIR", str(tmp_path))
    assert default_data_dir() == tmp_path


def test_cli_builds_file_store_in_data_dir(tmp_path) -> None:
    args = parse_args(["--data-dir", str(tmp_path), "--port", "9001", "--no-window"])
    store = build_store(args)

    assert args.port == 9001
    assert args.no_window is True
    assert isinstance(store, JsonFileStore)
    assert store.path == Path(tmp_path) / "session_store.json"


def test_cli_ephemeral_uses_memory_store() -> None:
    assert isinstance(build_store(parse_args(["--ephemeral"])), MemoryStore)


def test_configure_logging_reads_level_from_environment(monkeypatch) -> None:
    monkeypatch.setattr(logging.root, "handlers", [])
    monkeypatch.setattr(logging.root, "level", logging.root.level)
    monkeypatch.setattr(logging.getLogger("httpx"), "level", logging.NOTSET)
    monkeypatch.setenv("TRIVIA_LOG_LEVEL", "debug")

    logger = configure_logging()

    assert logger.name == "trivia_app"
    assert logging.root.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
