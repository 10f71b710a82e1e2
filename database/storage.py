#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Emo Improvement Bot - Storage substrate
Per-user key-value storage (the local-storage equivalent)

Each user owns one JSON document mapping slot names to serialized text.
Values are plain strings; serialization of records is the record store's job.
"""

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from core.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """String key -> string value storage for one user"""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        ...

    def set_items(self, items: Mapping[str, str]) -> None:
        """Write several slots at once"""
        for key, value in items.items():
            self.set_item(key, value)


class MemoryStorage(KeyValueStorage):
    """In-process storage; nothing survives a restart"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def keys(self) -> List[str]:
        return list(self._items)


class JsonFileStorage(KeyValueStorage):
    """All slots of one user in a single JSON file.

    The file is read lazily on first access and rewritten in full on every
    change, through a temporary file that replaces the original.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._items: Optional[Dict[str, str]] = None

    def _load(self) -> Dict[str, str]:
        if self._items is not None:
            return self._items

        if not self.path.exists():
            self._items = {}
            return self._items

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            backup = self.path.with_name(
                f"{self.path.stem}.corrupt_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
            )
            logger.error(f"❌ {self.path} is corrupted ({e}), moved to {backup.name}")
            self.path.replace(backup)
            data = {}
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            logger.error(f"❌ Unexpected document type in {self.path}: {type(data).__name__}")
            data = {}

        self._items = {str(k): v if isinstance(v, str) else json.dumps(v, ensure_ascii=False)
                       for k, v in data.items()}
        return self._items

    def _flush(self) -> None:
        items = self._load()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_file = self.path.with_suffix('.tmp')
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False, indent=2)
            temp_file.replace(self.path)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        self._load()[key] = value
        self._flush()

    def set_items(self, items: Mapping[str, str]) -> None:
        self._load().update(items)
        self._flush()

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._flush()

    def clear(self) -> None:
        self._items = {}
        if self.path.exists():
            try:
                self.path.unlink()
            except OSError as e:
                raise StorageError(f"Cannot delete {self.path}: {e}") from e

    def keys(self) -> List[str]:
        return list(self._load())


def user_storage_path(data_dir: Path, user_id: int) -> Path:
    return Path(data_dir) / f"user_{user_id}.json"
