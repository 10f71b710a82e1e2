"""
CRUD operations over record collections

Collections are tuples. Every operation returns a new tuple and never
mutates its input; unknown ids leave the collection unchanged.
"""

import logging
import uuid
from dataclasses import replace
from typing import Optional, Tuple, TypeVar

from models import Book, BookStatus, Goal, GoalType, Routine, Task

logger = logging.getLogger(__name__)

R = TypeVar("R")


def new_record_id() -> str:
    return uuid.uuid4().hex


def find_record(items: Tuple[R, ...], record_id: str) -> Optional[R]:
    for item in items:
        if item.id == record_id:
            return item
    return None


def delete_record(items: Tuple[R, ...], record_id: str) -> Tuple[R, ...]:
    remaining = tuple(item for item in items if item.id != record_id)
    if len(remaining) == len(items):
        logger.debug(f"delete: id {record_id} not found")
    return remaining


def _toggle(items, record_id, flip):
    found = False
    result = []
    for item in items:
        if item.id == record_id:
            item = flip(item)
            found = True
        result.append(item)
    if not found:
        logger.debug(f"toggle: id {record_id} not found")
        return items
    return tuple(result)


# ===== Books =====

def add_book(books: Tuple[Book, ...], title: str, author: str,
             status: BookStatus = BookStatus.READING) -> Tuple[Book, ...]:
    return books + (Book(id=new_record_id(), title=title, author=author, status=status),)


def toggle_book(books: Tuple[Book, ...], book_id: str) -> Tuple[Book, ...]:
    def flip(book):
        status = BookStatus.FINISHED if book.status == BookStatus.READING else BookStatus.READING
        return replace(book, status=status)
    return _toggle(books, book_id, flip)


# ===== Tasks and routines =====

def add_task(tasks: Tuple[Task, ...], text: str) -> Tuple[Task, ...]:
    return tasks + (Task(id=new_record_id(), text=text),)


def add_routine(routines: Tuple[Routine, ...], text: str) -> Tuple[Routine, ...]:
    return routines + (Routine(id=new_record_id(), text=text),)


def toggle_completed(items, record_id: str):
    """Flip `completed` on a task or routine"""
    return _toggle(items, record_id, lambda item: replace(item, completed=not item.completed))


# ===== Goals =====

def add_goal(goals: Tuple[Goal, ...], text: str, goal_type: GoalType) -> Tuple[Goal, ...]:
    return goals + (Goal(id=new_record_id(), text=text, type=goal_type),)


def toggle_goal(goals: Tuple[Goal, ...], goal_id: str) -> Tuple[Goal, ...]:
    return _toggle(goals, goal_id, lambda goal: replace(goal, reached=not goal.reached))
