# ui/messages.py
"""
Text rendering for every tab and menu sub-view (HTML parse mode)
"""

from html import escape
from typing import Sequence

from models import AppSettings, Book, Goal, GoalType, Message, Role, Task
from services.app_state import MenuSummary
from services.calendar_service import MonthView
from services.quotes import Quote
from ui.i18n import get_translations, LANGUAGE_NAMES
from ui.themes import get_theme


def menu_message(settings: AppSettings, summary: MenuSummary, quote: Quote) -> str:
    t = get_translations(settings.language)
    theme = get_theme(settings.theme)
    return (
        f"✨ <b>{t['daily_wisdom']}</b>\n"
        f"<i>« {escape(quote.text)} »</i>\n"
        f"- {escape(quote.author)}\n"
        f"{theme['divider']}\n"
        f"{theme['books']} {t['books']}: {summary.books_reading} {t['reading']}\n"
        f"{theme['tasks']} {t['tasks']}: {summary.tasks_pending} {t['pending']}\n"
        f"{theme['routine']} {t['routine']}: {summary.routines_pending} {t['pending']}\n"
        f"{theme['goals']} {t['goals']}: {summary.goals_reached} {t['reached']}"
    )


def books_message(settings: AppSettings, books: Sequence[Book]) -> str:
    t = get_translations(settings.language)
    theme = get_theme(settings.theme)
    header = f"{theme['books']} <b>{t['books']}</b> ({len(books)})"
    if not books:
        return f"{header}\n\n{t['no_books']}"

    lines = []
    for idx, book in enumerate(books, 1):
        finished = not book.is_reading
        status = theme['done'] if finished else theme['open']
        label = t['finished'] if finished else t['reading']
        author = f" · {escape(book.author)}" if book.author else ""
        lines.append(f"{idx}. {status} <b>{escape(book.title)}</b>{author} ({label})")
    return header + "\n\n" + "\n".join(lines)


def checklist_message(settings: AppSettings, items: Sequence[Task], title_key: str,
                      emoji_key: str, empty_key: str) -> str:
    """Tasks and routines share one layout"""
    t = get_translations(settings.language)
    theme = get_theme(settings.theme)
    done = sum(1 for item in items if item.completed)
    header = f"{theme[emoji_key]} <b>{t[title_key]}</b> ({done}/{len(items)})"
    if not items:
        return f"{header}\n\n{t[empty_key]}"

    lines = []
    for idx, item in enumerate(items, 1):
        status = theme['done'] if item.completed else theme['open']
        text = f"<s>{escape(item.text)}</s>" if item.completed else escape(item.text)
        lines.append(f"{idx}. {status} {text}")
    return header + "\n\n" + "\n".join(lines)


def tasks_message(settings: AppSettings, tasks: Sequence[Task]) -> str:
    return checklist_message(settings, tasks, "tasks", "tasks", "no_tasks")


def routines_message(settings: AppSettings, routines: Sequence[Task]) -> str:
    return checklist_message(settings, routines, "routine", "routine", "no_routines")


def goals_message(settings: AppSettings, goals: Sequence[Goal]) -> str:
    t = get_translations(settings.language)
    theme = get_theme(settings.theme)
    reached = sum(1 for goal in goals if goal.reached)
    header = f"{theme['goals']} <b>{t['goals']}</b> ({reached}/{len(goals)})"
    if not goals:
        return f"{header}\n\n{t['no_goals']}"

    sections = []
    for goal_type, key in ((GoalType.SHORT_TERM, 'short_term'), (GoalType.LONG_TERM, 'long_term')):
        group = [goal for goal in goals if goal.type == goal_type]
        if not group:
            continue
        lines = [f"<b>{t[key]}</b>"]
        for goal in group:
            status = theme['done'] if goal.reached else theme['open']
            lines.append(f"{status} {escape(goal.text)}")
        sections.append("\n".join(lines))
    return header + "\n\n" + "\n\n".join(sections)


def assistant_message(settings: AppSettings, history: Sequence[Message], limit: int = 6) -> str:
    """Assistant tab header: greeting when empty, otherwise the recent exchange"""
    t = get_translations(settings.language)
    if not history:
        return f"🤖 <b>{t['help_prompt']}</b>\n\n<i>{t['ask_placeholder']}</i>"

    lines = [f"🤖 <b>{t['assistant']}</b>"]
    for message in history[-limit:]:
        speaker = t['you'] if message.role == Role.USER else t['assistant']
        lines.append(f"<b>{speaker}:</b> {escape(message.content)}")
    lines.append(f"\n<i>{t['ask_placeholder']}</i>")
    return "\n".join(lines)


def calendar_message(settings: AppSettings, view: MonthView) -> str:
    theme = get_theme(settings.theme)
    # Every cell is three characters wide
    rows = ["".join(f"{name:>2} " for name in view.weekday_header).rstrip()]
    for week in view.weeks:
        cells = []
        for day in week:
            if day == 0:
                cells.append("   ")
            elif day == view.today:
                cells.append(theme['today_marker'].format(day=day))
            else:
                cells.append(f"{day:>2} ")
        rows.append("".join(cells).rstrip())
    grid = "\n".join(rows)
    return f"📅 <b>{escape(view.title)}</b>\n<pre>{grid}</pre>"


def settings_message(settings: AppSettings) -> str:
    t = get_translations(settings.language)
    theme = get_theme(settings.theme)
    theme_label = t['dark'] if settings.is_dark else t['light']
    notifications = t['enabled'] if settings.notifications else t['disabled']
    return (
        f"⚙️ <b>{t['settings']}</b>\n\n"
        f"🌍 {t['language']}: <b>{LANGUAGE_NAMES[settings.language]}</b>\n"
        f"{theme['emoji']} {t['theme']}: <b>{theme_label}</b>\n"
        f"🔔 {t['notifications']}: <b>{notifications}</b>"
    )


def reset_confirm_message(settings: AppSettings) -> str:
    t = get_translations(settings.language)
    return f"⚠️ <b>{t['reset']}</b>\n\n{t['reset_confirm']}"


def about_message(settings: AppSettings) -> str:
    t = get_translations(settings.language)
    return f"🌱 <b>Emo Improvement</b>\n\n{t['about_text']}"


def help_message(settings: AppSettings) -> str:
    t = get_translations(settings.language)
    return f"🛠 <b>Emo Improvement</b>\n\n{t['help']}"
