# ui/themes.py

from typing import Union

from models import ThemeName

THEMES = {
    ThemeName.LIGHT: {
        "emoji": "☀️",
        "name": "Light",
        "books": "📙",
        "tasks": "📗",
        "routine": "📘",
        "goals": "🎯",
        "done": "✅",
        "open": "⬜️",
        "divider": "┈┈┈┈┈┈┈┈┈┈",
        "today_marker": "{day:>2}•"
    },
    ThemeName.DARK: {
        "emoji": "🌙",
        "name": "Dark",
        "books": "📕",
        "tasks": "📓",
        "routine": "📔",
        "goals": "🌑",
        "done": "☑️",
        "open": "⬛️",
        "divider": "━━━━━━━━━━",
        "today_marker": "{day:>2}*"
    }
}


def get_theme(theme_name: Union[ThemeName, str]):
    try:
        return THEMES[ThemeName(theme_name)]
    except ValueError:
        return THEMES[ThemeName.LIGHT]
