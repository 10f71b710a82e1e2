from .storage import KeyValueStorage, MemoryStorage, JsonFileStorage, user_storage_path
from .manager import (
    RecordStore,
    SETTINGS_KEY,
    BOOKS_KEY,
    TASKS_KEY,
    GOALS_KEY,
    ROUTINES_KEY,
    SLICE_KEYS
)

__all__ = [
    'KeyValueStorage',
    'MemoryStorage',
    'JsonFileStorage',
    'user_storage_path',
    'RecordStore',
    'SETTINGS_KEY',
    'BOOKS_KEY',
    'TASKS_KEY',
    'GOALS_KEY',
    'ROUTINES_KEY',
    'SLICE_KEYS'
]
