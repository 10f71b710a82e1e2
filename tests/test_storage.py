import json
from unittest.mock import patch

import pytest

from database import (
    BOOKS_KEY, GOALS_KEY, ROUTINES_KEY, SETTINGS_KEY, SLICE_KEYS, TASKS_KEY,
    JsonFileStorage, MemoryStorage, RecordStore, user_storage_path
)
from models import AppSettings, Book, BookStatus, Goal, GoalType, Language, Routine, Task


class TestRecordStore:
    def test_absent_slots_load_defaults(self, store):
        assert store.load(SETTINGS_KEY) == AppSettings()
        for key in (BOOKS_KEY, TASKS_KEY, GOALS_KEY, ROUTINES_KEY):
            assert store.load(key) == ()

    @pytest.mark.parametrize("key, value", [
        (SETTINGS_KEY, AppSettings(language=Language.EN)),
        (BOOKS_KEY, (Book("b1", "Dune", "Herbert"), Book("b2", "Emma", "Austen", BookStatus.FINISHED))),
        (TASKS_KEY, (Task("t1", "Call mom", True),)),
        (GOALS_KEY, (Goal("g1", "Learn Go", GoalType.LONG_TERM),)),
        (ROUTINES_KEY, (Routine("r1", "Stretch"),)),
    ])
    def test_save_then_load(self, store, key, value):
        store.save(key, value)
        assert store.load(key) == value

    def test_invalid_json_falls_back_to_default(self, memory_storage, store):
        memory_storage.set_item(BOOKS_KEY, "{not json")
        memory_storage.set_item(SETTINGS_KEY, "")
        assert store.load(BOOKS_KEY) == ()
        assert store.load(SETTINGS_KEY) == AppSettings()

    def test_structurally_invalid_data_raises(self, memory_storage, store):
        memory_storage.set_item(BOOKS_KEY, json.dumps([{"title": "no id"}]))
        with pytest.raises(KeyError):
            store.load(BOOKS_KEY)

    def test_unknown_slot(self, store):
        with pytest.raises(KeyError):
            store.load("emo_mood")

    def test_saved_text_is_plain_json(self, memory_storage, store):
        store.save(TASKS_KEY, (Task("t1", "کتاب بخوان"),))
        raw = memory_storage.get_item(TASKS_KEY)
        assert "کتاب بخوان" in raw
        assert json.loads(raw) == [{"id": "t1", "text": "کتاب بخوان", "completed": False}]

    def test_clear_removes_every_slot(self, memory_storage, store):
        for key in SLICE_KEYS:
            memory_storage.set_item(key, "[]")
        store.clear()
        assert memory_storage.keys() == []


class TestJsonFileStorage:
    def test_missing_file_is_empty(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "user_1.json")
        assert storage.get_item(BOOKS_KEY) is None
        assert storage.keys() == []

    def test_writes_survive_reopen(self, tmp_path):
        path = tmp_path / "user_1.json"
        JsonFileStorage(path).set_item(BOOKS_KEY, "[]")

        reopened = JsonFileStorage(path)
        assert reopened.get_item(BOOKS_KEY) == "[]"
        assert not path.with_suffix(".tmp").exists()

    def test_document_holds_string_values(self, tmp_path):
        path = tmp_path / "user_1.json"
        storage = JsonFileStorage(path)
        storage.set_item(SETTINGS_KEY, '{"language": "fa"}')

        document = json.loads(path.read_text(encoding="utf-8"))
        assert document == {SETTINGS_KEY: '{"language": "fa"}'}

    def test_corrupt_file_is_moved_aside(self, tmp_path):
        path = tmp_path / "user_1.json"
        path.write_text("{{{", encoding="utf-8")

        storage = JsonFileStorage(path)
        assert storage.keys() == []
        assert not path.exists()
        assert len(list(tmp_path.glob("user_1.corrupt_*.json"))) == 1

    def test_non_string_values_are_serialized(self, tmp_path):
        path = tmp_path / "user_1.json"
        path.write_text(json.dumps({BOOKS_KEY: []}), encoding="utf-8")
        assert JsonFileStorage(path).get_item(BOOKS_KEY) == "[]"

    def test_set_items_writes_file_once(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "user_1.json")
        with patch.object(storage, "_flush", wraps=storage._flush) as flush:
            storage.set_items({BOOKS_KEY: "[]", TASKS_KEY: "[]"})

        flush.assert_called_once()
        assert JsonFileStorage(tmp_path / "user_1.json").keys() == [BOOKS_KEY, TASKS_KEY]

    def test_remove_and_clear(self, tmp_path):
        path = tmp_path / "user_1.json"
        storage = JsonFileStorage(path)
        storage.set_item(BOOKS_KEY, "[]")
        storage.set_item(TASKS_KEY, "[]")

        storage.remove_item(BOOKS_KEY)
        assert storage.keys() == [TASKS_KEY]

        storage.clear()
        assert not path.exists()
        assert storage.keys() == []


def test_memory_storage_basics():
    storage = MemoryStorage({"a": "1"})
    storage.set_item("b", "2")
    storage.remove_item("a")
    storage.remove_item("missing")
    assert storage.keys() == ["b"]


def test_user_storage_path(tmp_path):
    assert user_storage_path(tmp_path, 42) == tmp_path / "user_42.json"
