# database/manager.py

import json
import logging
from typing import Any, Callable, Dict, Mapping, Tuple

from database.storage import KeyValueStorage
from models import AppSettings, Book, Goal, Routine, Task

logger = logging.getLogger(__name__)

SETTINGS_KEY = "emo_settings"
BOOKS_KEY = "emo_books"
TASKS_KEY = "emo_todos"
GOALS_KEY = "emo_goals"
ROUTINES_KEY = "emo_routines"

# Order in which slices are written on every mutation
SLICE_KEYS: Tuple[str, ...] = (SETTINGS_KEY, BOOKS_KEY, TASKS_KEY, GOALS_KEY, ROUTINES_KEY)

_COLLECTION_TYPES: Dict[str, type] = {
    BOOKS_KEY: Book,
    TASKS_KEY: Task,
    GOALS_KEY: Goal,
    ROUTINES_KEY: Routine,
}


def _default(key: str) -> Any:
    if key == SETTINGS_KEY:
        return AppSettings()
    return ()


class RecordStore:
    """Loads and saves whole slices through a key-value storage.

    Absent slots and slots whose text is not JSON come back as the default
    (settings defaults or an empty collection). Parseable data with the
    wrong structure is not validated and raises from the record's from_dict.
    """

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    def load(self, key: str) -> Any:
        decoder = self._decoder(key)
        raw = self.storage.get_item(key)
        if raw is None:
            return _default(key)

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"⚠️ Slot {key} is not valid JSON ({e}), using default")
            return _default(key)

        return decoder(data)

    def save(self, key: str, value: Any) -> None:
        self.storage.set_item(key, self._encode(key, value))

    def save_all(self, values: Mapping[str, Any]) -> None:
        """Write several slices in one storage update"""
        self.storage.set_items({key: self._encode(key, value) for key, value in values.items()})

    def _encode(self, key: str, value: Any) -> str:
        self._decoder(key)
        if key == SETTINGS_KEY:
            payload = value.to_dict()
        else:
            payload = [record.to_dict() for record in value]
        return json.dumps(payload, ensure_ascii=False)

    def clear(self) -> None:
        self.storage.clear()
        logger.info("🗑️ All slots cleared")

    def _decoder(self, key: str) -> Callable[[Any], Any]:
        if key == SETTINGS_KEY:
            return AppSettings.from_dict
        if key in _COLLECTION_TYPES:
            record_type = _COLLECTION_TYPES[key]
            return lambda items: tuple(record_type.from_dict(item) for item in items)
        raise KeyError(f"Unknown slot: {key}")
