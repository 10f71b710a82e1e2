#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Emo Improvement Bot - Models Package
Records and enums shared by the store, services and views
"""

from .enums import (
    AppTab,
    MenuView,
    Language,
    ThemeName,
    BookStatus,
    GoalType,
    Role
)

from .book import Book
from .task import Task, Routine
from .goal import Goal
from .message import Message
from .settings import AppSettings

__all__ = [
    # Enums
    'AppTab',
    'MenuView',
    'Language',
    'ThemeName',
    'BookStatus',
    'GoalType',
    'Role',

    # Records
    'Book',
    'Task',
    'Routine',
    'Goal',
    'Message',
    'AppSettings'
]
