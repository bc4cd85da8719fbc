import json

from trivia_app.core.services.persisted_store import JsonFileStore, MemoryStore


def test_memory_store_basic_operations() -> None:
    store = MemoryStore({"a": "1"})
    store.set("b", "2")
    store.delete("a")
    store.delete("missing")

    assert store.get("a") is None
    assert store.get("b") == "2"
    assert store.keys() == ["b"]


def test_json_file_store_persists_between_instances(tmp_path) -> None:
    path = tmp_path / "data" / "session_store.json"
    store = JsonFileStore(path)
    store.set("quiz_user", '{"name": "Ada"}')
    store.set("quiz_time_remaining", "120")
    store.delete("quiz_time_remaining")

    reopened = JsonFileStore(path)
    assert reopened.get("quiz_user") == '{"name": "Ada"}'
    assert reopened.get("quiz_time_remaining") is None
    assert json.loads(path.read_text(encoding="utf-8")) == {"quiz_user": '{"name": "Ada"}'}
    assert not path.with_suffix(".json.tmp").exists()


def test_json_file_store_treats_unreadable_file_as_empty(tmp_path) -> None:
    path = tmp_path / "session_store.json"
    path.write_text("{broken", encoding="utf-8")

    store = JsonFileStore(path)
    assert store.get("quiz_user") is None

    store.set("quiz_user", '{"name": "Ada"}')
    assert json.loads(path.read_text(encoding="utf-8")) == {"quiz_user": '{"name": "Ada"}'}


def test_json_file_store_ignores_non_object_payload(tmp_path) -> None:
    path = tmp_path / "session_store.json"
    path.write_text('["quiz_user"]', encoding="utf-8")

    assert JsonFileStore(path).get("quiz_user") is None
