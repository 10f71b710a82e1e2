# models/enums.py

from enum import Enum


class AppTab(Enum):
    MENU = "menu"
    ASSISTANT = "assistant"
    CALENDAR = "calendar"
    ABOUT = "about"
    SETTINGS = "settings"


class MenuView(Enum):
    MAIN = "main"
    BOOKS = "books"
    TODO = "todo"
    GOALS = "goals"
    ROUTINE = "routine"


class Language(Enum):
    FA = "fa"
    EN = "en"


class ThemeName(Enum):
    LIGHT = "light"
    DARK = "dark"


class BookStatus(Enum):
    READING = "reading"
    FINISHED = "finished"


class GoalType(Enum):
    SHORT_TERM = "short-term"
    LONG_TERM = "long-term"


class Role(Enum):
    USER = "user"
    ASSISTANT = "assistant"
