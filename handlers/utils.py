# ===== handlers/utils.py =====
"""
Shared helpers for handlers: per-user session objects and view rendering
"""

import logging
from datetime import date
from typing import Tuple

from telegram import InlineKeyboardMarkup, Update
from telegram.constants import ParseMode
from telegram.error import BadRequest
from telegram.ext import ContextTypes

from models import AppTab, MenuView
from services import AppState, AppStateRegistry, AssistantConversation, ViewRouter, pick_quote
from services.calendar_service import month_view
from services.quotes import Quote
from ui import keyboards, messages

logger = logging.getLogger(__name__)

# bot_data keys
REGISTRY = "registry"
ASSISTANT_CLIENT = "assistant_client"
QUOTE_RNG = "quote_rng"

# user_data keys
ROUTER = "router"
CONVERSATION = "conversation"
QUOTE = "quote"
CALENDAR_MONTH = "calendar_month"
PENDING = "pending"


def get_state(update: Update, context: ContextTypes.DEFAULT_TYPE) -> AppState:
    registry: AppStateRegistry = context.bot_data[REGISTRY]
    return registry.get(update.effective_user.id)


def get_router(context: ContextTypes.DEFAULT_TYPE) -> ViewRouter:
    return context.user_data.setdefault(ROUTER, ViewRouter())


def get_conversation(context: ContextTypes.DEFAULT_TYPE) -> AssistantConversation:
    if CONVERSATION not in context.user_data:
        context.user_data[CONVERSATION] = AssistantConversation(context.bot_data[ASSISTANT_CLIENT])
    return context.user_data[CONVERSATION]


def current_quote(context: ContextTypes.DEFAULT_TYPE, state: AppState) -> Quote:
    """Keep one quote per language; pick a new one when the language changes"""
    language = state.settings.language
    cached = context.user_data.get(QUOTE)
    if cached is None or cached[0] != language:
        cached = (language, pick_quote(language, context.bot_data.get(QUOTE_RNG)))
        context.user_data[QUOTE] = cached
    return cached[1]


def restart_session(context: ContextTypes.DEFAULT_TYPE) -> None:
    """Back to the initial navigation state with an empty chat"""
    context.user_data[ROUTER] = ViewRouter()
    if CONVERSATION in context.user_data:
        context.user_data[CONVERSATION].reset()
    for key in (QUOTE, CALENDAR_MONTH, PENDING):
        context.user_data.pop(key, None)


def render_view(state: AppState, context: ContextTypes.DEFAULT_TYPE) -> Tuple[str, InlineKeyboardMarkup]:
    """Text and keyboard for the active tab / sub-view"""
    router = get_router(context)
    settings = state.settings

    if router.tab == AppTab.MENU:
        if router.view == MenuView.BOOKS:
            return messages.books_message(settings, state.books), keyboards.books_keyboard(settings, state.books)
        if router.view == MenuView.TODO:
            return (messages.tasks_message(settings, state.tasks),
                    keyboards.checklist_keyboard(settings, state.tasks, MenuView.TODO))
        if router.view == MenuView.ROUTINE:
            return (messages.routines_message(settings, state.routines),
                    keyboards.checklist_keyboard(settings, state.routines, MenuView.ROUTINE))
        if router.view == MenuView.GOALS:
            return messages.goals_message(settings, state.goals), keyboards.goals_keyboard(settings, state.goals)

        summary = state.summary()
        quote = current_quote(context, state)
        return messages.menu_message(settings, summary, quote), keyboards.menu_keyboard(settings, summary)

    if router.tab == AppTab.ASSISTANT:
        history = get_conversation(context).messages
        return messages.assistant_message(settings, history), keyboards.tab_only_keyboard(settings, AppTab.ASSISTANT)

    if router.tab == AppTab.CALENDAR:
        today = date.today()
        year, month = context.user_data.get(CALENDAR_MONTH, (today.year, today.month))
        view = month_view(year, month, settings.language, today=today)
        return messages.calendar_message(settings, view), keyboards.calendar_keyboard(settings, view)

    if router.tab == AppTab.SETTINGS:
        return messages.settings_message(settings), keyboards.settings_keyboard(settings)

    return messages.about_message(settings), keyboards.tab_only_keyboard(settings, AppTab.ABOUT)


async def show_view(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Re-render the current view: edit in place for buttons, new message otherwise"""
    state = get_state(update, context)
    text, markup = render_view(state, context)

    query = update.callback_query
    if query is not None:
        try:
            await query.edit_message_text(text, reply_markup=markup, parse_mode=ParseMode.HTML)
        except BadRequest as e:
            if "not modified" not in str(e).lower():
                raise
        return

    await update.effective_message.reply_text(text, reply_markup=markup, parse_mode=ParseMode.HTML)
