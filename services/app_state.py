#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Emo Improvement Bot - Application state
One explicit state object per user: settings plus the four collections

Every mutation replaces one slice with a new snapshot and then rewrites all
five slices (no partial writes, last write wins).
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from database import (
    RecordStore, KeyValueStorage, JsonFileStorage, user_storage_path,
    SETTINGS_KEY, BOOKS_KEY, TASKS_KEY, GOALS_KEY, ROUTINES_KEY, SLICE_KEYS
)
from models import AppSettings, Book, BookStatus, Goal, GoalType, Routine, Task
from services import collections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuSummary:
    """Counts shown on the menu cards"""
    books_reading: int
    tasks_pending: int
    routines_pending: int
    goals_reached: int


def _require_text(value: str, field_name: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{field_name} must not be empty")
    return value


class AppState:
    """Settings and collections of one user, bound to a record store"""

    def __init__(self, store: RecordStore):
        self.store = store
        self.settings: AppSettings = AppSettings()
        self.books: Tuple[Book, ...] = ()
        self.tasks: Tuple[Task, ...] = ()
        self.goals: Tuple[Goal, ...] = ()
        self.routines: Tuple[Routine, ...] = ()

    @classmethod
    def load(cls, store: RecordStore) -> "AppState":
        state = cls(store)
        state.settings = store.load(SETTINGS_KEY)
        state.books = store.load(BOOKS_KEY)
        state.tasks = store.load(TASKS_KEY)
        state.goals = store.load(GOALS_KEY)
        state.routines = store.load(ROUTINES_KEY)
        return state

    def persist(self) -> None:
        slices = self._slices()
        self.store.save_all({key: slices[key] for key in SLICE_KEYS})

    def _slices(self) -> Dict[str, object]:
        return {
            SETTINGS_KEY: self.settings,
            BOOKS_KEY: self.books,
            TASKS_KEY: self.tasks,
            GOALS_KEY: self.goals,
            ROUTINES_KEY: self.routines,
        }

    # ===== Books =====

    def add_book(self, title: str, author: str, status: BookStatus = BookStatus.READING) -> Book:
        self.books = collections.add_book(
            self.books, _require_text(title, "title"), (author or "").strip(), status
        )
        self.persist()
        return self.books[-1]

    def toggle_book(self, book_id: str) -> None:
        self.books = collections.toggle_book(self.books, book_id)
        self.persist()

    def delete_book(self, book_id: str) -> None:
        self.books = collections.delete_record(self.books, book_id)
        self.persist()

    # ===== Tasks =====

    def add_task(self, text: str) -> Task:
        self.tasks = collections.add_task(self.tasks, _require_text(text, "text"))
        self.persist()
        return self.tasks[-1]

    def toggle_task(self, task_id: str) -> None:
        self.tasks = collections.toggle_completed(self.tasks, task_id)
        self.persist()

    def delete_task(self, task_id: str) -> None:
        self.tasks = collections.delete_record(self.tasks, task_id)
        self.persist()

    # ===== Routines =====

    def add_routine(self, text: str) -> Routine:
        self.routines = collections.add_routine(self.routines, _require_text(text, "text"))
        self.persist()
        return self.routines[-1]

    def toggle_routine(self, routine_id: str) -> None:
        self.routines = collections.toggle_completed(self.routines, routine_id)
        self.persist()

    def delete_routine(self, routine_id: str) -> None:
        self.routines = collections.delete_record(self.routines, routine_id)
        self.persist()

    # ===== Goals =====

    def add_goal(self, text: str, goal_type: GoalType = GoalType.SHORT_TERM) -> Goal:
        self.goals = collections.add_goal(self.goals, _require_text(text, "text"), GoalType(goal_type))
        self.persist()
        return self.goals[-1]

    def toggle_goal(self, goal_id: str) -> None:
        self.goals = collections.toggle_goal(self.goals, goal_id)
        self.persist()

    def delete_goal(self, goal_id: str) -> None:
        self.goals = collections.delete_record(self.goals, goal_id)
        self.persist()

    # ===== Settings =====

    def update_settings(self, **partial) -> AppSettings:
        self.settings = self.settings.merged(**partial)
        self.persist()
        return self.settings

    def reset(self) -> None:
        """Clear every persisted slot and return to defaults"""
        self.store.clear()
        self.settings = AppSettings()
        self.books = ()
        self.tasks = ()
        self.goals = ()
        self.routines = ()

    # ===== Views =====

    def summary(self) -> MenuSummary:
        return MenuSummary(
            books_reading=sum(1 for b in self.books if b.is_reading),
            tasks_pending=sum(1 for t in self.tasks if not t.completed),
            routines_pending=sum(1 for r in self.routines if not r.completed),
            goals_reached=sum(1 for g in self.goals if g.reached),
        )

    def export(self) -> dict:
        return {
            "export_date": datetime.now().isoformat(),
            "settings": self.settings.to_dict(),
            "books": [b.to_dict() for b in self.books],
            "todos": [t.to_dict() for t in self.tasks],
            "goals": [g.to_dict() for g in self.goals],
            "routines": [r.to_dict() for r in self.routines],
        }


class AppStateRegistry:
    """Per-user AppState cache. Each user gets its own storage document."""

    def __init__(self, data_dir: Path,
                 storage_factory: Optional[Callable[[int], KeyValueStorage]] = None):
        self.data_dir = Path(data_dir)
        self._storage_factory = storage_factory or self._file_storage
        self._states: Dict[int, AppState] = {}

    def _file_storage(self, user_id: int) -> KeyValueStorage:
        return JsonFileStorage(user_storage_path(self.data_dir, user_id))

    def get(self, user_id: int) -> AppState:
        if user_id not in self._states:
            store = RecordStore(self._storage_factory(user_id))
            self._states[user_id] = AppState.load(store)
            logger.info(f"👤 Loaded state for user {user_id} ({len(self)} cached)")
        return self._states[user_id]

    def __len__(self) -> int:
        return len(self._states)
