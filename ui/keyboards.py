from typing import List, Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from models import AppSettings, AppTab, Book, BookStatus, Goal, GoalType, Language, MenuView, ThemeName
from services.app_state import MenuSummary
from services.calendar_service import MonthView, shift_month
from ui.i18n import get_translations, LANGUAGE_NAMES
from ui.themes import get_theme

TAB_EMOJIS = {
    AppTab.MENU: "🏠",
    AppTab.ASSISTANT: "🤖",
    AppTab.CALENDAR: "📅",
    AppTab.ABOUT: "ℹ️",
    AppTab.SETTINGS: "⚙️",
}


# Tab bar (bottom row)
def tab_bar(settings: AppSettings, active: AppTab) -> List[List[InlineKeyboardButton]]:
    t = get_translations(settings.language)
    row = []
    for tab, emoji in TAB_EMOJIS.items():
        label = f"• {t[tab.value]}" if tab == active else emoji
        row.append(InlineKeyboardButton(label, callback_data=f"tab:{tab.value}"))
    return [row]


# Menu cards
def menu_keyboard(settings: AppSettings, summary: MenuSummary) -> InlineKeyboardMarkup:
    t = get_translations(settings.language)
    theme = get_theme(settings.theme)
    keyboard = [
        [InlineKeyboardButton(f"{theme['books']} {t['books']} ({summary.books_reading})",
                              callback_data=f"view:{MenuView.BOOKS.value}"),
         InlineKeyboardButton(f"{theme['tasks']} {t['tasks']} ({summary.tasks_pending})",
                              callback_data=f"view:{MenuView.TODO.value}")],
        [InlineKeyboardButton(f"{theme['routine']} {t['routine']} ({summary.routines_pending})",
                              callback_data=f"view:{MenuView.ROUTINE.value}"),
         InlineKeyboardButton(f"{theme['goals']} {t['goals']} ({summary.goals_reached})",
                              callback_data=f"view:{MenuView.GOALS.value}")],
    ]
    return InlineKeyboardMarkup(keyboard + tab_bar(settings, AppTab.MENU))


def _collection_footer(settings: AppSettings, view: MenuView, add_key: str) -> List[List[InlineKeyboardButton]]:
    t = get_translations(settings.language)
    return [
        [InlineKeyboardButton(f"➕ {t[add_key]}", callback_data=f"{view.value}:add")],
        [InlineKeyboardButton(f"⬅️ {t['back']}", callback_data=f"view:{MenuView.MAIN.value}")],
    ]


def _record_row(view: MenuView, record_id: str, label: str) -> List[InlineKeyboardButton]:
    return [
        InlineKeyboardButton(label[:60], callback_data=f"{view.value}:toggle:{record_id}"),
        InlineKeyboardButton("🗑", callback_data=f"{view.value}:delete:{record_id}"),
    ]


def books_keyboard(settings: AppSettings, books: Sequence[Book]) -> InlineKeyboardMarkup:
    theme = get_theme(settings.theme)
    keyboard = [
        _record_row(MenuView.BOOKS, book.id,
                    f"{theme['open'] if book.is_reading else theme['done']} {book.title}")
        for book in books
    ]
    return InlineKeyboardMarkup(keyboard + _collection_footer(settings, MenuView.BOOKS, "add_book"))


def checklist_keyboard(settings: AppSettings, items, view: MenuView) -> InlineKeyboardMarkup:
    """Tasks (todo) and routines"""
    theme = get_theme(settings.theme)
    add_key = "add_task" if view == MenuView.TODO else "add_routine"
    keyboard = [
        _record_row(view, item.id, f"{theme['done'] if item.completed else theme['open']} {item.text}")
        for item in items
    ]
    return InlineKeyboardMarkup(keyboard + _collection_footer(settings, view, add_key))


def goals_keyboard(settings: AppSettings, goals: Sequence[Goal]) -> InlineKeyboardMarkup:
    theme = get_theme(settings.theme)
    keyboard = [
        _record_row(MenuView.GOALS, goal.id,
                    f"{theme['done'] if goal.reached else theme['open']} {goal.text}")
        for goal in goals
    ]
    return InlineKeyboardMarkup(keyboard + _collection_footer(settings, MenuView.GOALS, "add_goal"))


def cancel_keyboard(settings: AppSettings) -> InlineKeyboardMarkup:
    t = get_translations(settings.language)
    return InlineKeyboardMarkup([[InlineKeyboardButton(f"❌ {t['cancel']}", callback_data="add_cancel")]])


def book_status_keyboard(settings: AppSettings) -> InlineKeyboardMarkup:
    t = get_translations(settings.language)
    theme = get_theme(settings.theme)
    keyboard = [
        [InlineKeyboardButton(f"{theme['open']} {t['reading']}",
                              callback_data=f"book_status:{BookStatus.READING.value}"),
         InlineKeyboardButton(f"{theme['done']} {t['finished']}",
                              callback_data=f"book_status:{BookStatus.FINISHED.value}")],
        [InlineKeyboardButton(f"❌ {t['cancel']}", callback_data="add_cancel")],
    ]
    return InlineKeyboardMarkup(keyboard)


def goal_type_keyboard(settings: AppSettings) -> InlineKeyboardMarkup:
    t = get_translations(settings.language)
    keyboard = [
        [InlineKeyboardButton(f"⏱ {t['short_term']}", callback_data=f"goal_type:{GoalType.SHORT_TERM.value}"),
         InlineKeyboardButton(f"🏔 {t['long_term']}", callback_data=f"goal_type:{GoalType.LONG_TERM.value}")],
        [InlineKeyboardButton(f"❌ {t['cancel']}", callback_data="add_cancel")],
    ]
    return InlineKeyboardMarkup(keyboard)


# Settings
def settings_keyboard(settings: AppSettings) -> InlineKeyboardMarkup:
    t = get_translations(settings.language)
    other_language = Language.EN if settings.language == Language.FA else Language.FA
    other_theme = ThemeName.LIGHT if settings.is_dark else ThemeName.DARK
    theme_label = t['light'] if other_theme == ThemeName.LIGHT else t['dark']
    notifications = "🔕" if settings.notifications else "🔔"
    keyboard = [
        [InlineKeyboardButton(f"🌍 {LANGUAGE_NAMES[other_language]}",
                              callback_data=f"settings:language:{other_language.value}")],
        [InlineKeyboardButton(f"{get_theme(other_theme)['emoji']} {theme_label}",
                              callback_data=f"settings:theme:{other_theme.value}")],
        [InlineKeyboardButton(f"{notifications} {t['notifications']}",
                              callback_data="settings:notifications")],
        [InlineKeyboardButton(f"🗑 {t['reset']}", callback_data="reset:ask")],
    ]
    return InlineKeyboardMarkup(keyboard + tab_bar(settings, AppTab.SETTINGS))


def reset_confirm_keyboard(settings: AppSettings) -> InlineKeyboardMarkup:
    t = get_translations(settings.language)
    return InlineKeyboardMarkup([[
        InlineKeyboardButton(f"✅ {t['yes']}", callback_data="reset:yes"),
        InlineKeyboardButton(f"❌ {t['no']}", callback_data="reset:no"),
    ]])


def calendar_keyboard(settings: AppSettings, view: MonthView) -> InlineKeyboardMarkup:
    t = get_translations(settings.language)
    prev_year, prev_month = shift_month(view.year, view.month, -1)
    next_year, next_month = shift_month(view.year, view.month, 1)
    keyboard = [[
        InlineKeyboardButton(f"◀️ {t['prev_month']}", callback_data=f"cal:{prev_year}-{prev_month}"),
        InlineKeyboardButton(t['today'], callback_data="cal:today"),
        InlineKeyboardButton(f"{t['next_month']} ▶️", callback_data=f"cal:{next_year}-{next_month}"),
    ]]
    return InlineKeyboardMarkup(keyboard + tab_bar(settings, AppTab.CALENDAR))


def tab_only_keyboard(settings: AppSettings, active: AppTab) -> InlineKeyboardMarkup:
    """Assistant and about tabs have no actions of their own"""
    return InlineKeyboardMarkup(tab_bar(settings, active))
