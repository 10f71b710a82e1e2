# handlers/add_records.py
"""
Step-by-step creation of books, tasks, routines and goals (ConversationHandler)

Books: title -> author -> status. Goals: text -> type. Tasks and routines
take a single text. Any navigation (tab, view, settings, calendar, record
buttons or a navigation command) leaves the dialog without adding anything.
"""

import logging

from telegram import Update
from telegram.ext import (
    Application, CallbackQueryHandler, CommandHandler, ContextTypes,
    ConversationHandler, MessageHandler, filters
)

from models import AppTab, BookStatus, GoalType, MenuView
from handlers.callbacks.calendar import CALENDAR_PATTERN, calendar_callback
from handlers.callbacks.main_menu import TAB_PATTERN, VIEW_PATTERN, tab_callback, view_callback
from handlers.callbacks.records import RECORD_PATTERN, record_callback
from handlers.callbacks.settings import (
    RESET_ASK_PATTERN, RESET_CONFIRM_PATTERN, SETTINGS_PATTERN,
    handle_reset_ask, handle_reset_confirm, handle_settings_change
)
from handlers.commands.basic import (
    about_command, assistant_command, calendar_command, settings_command, start_command
)
from handlers.messages import text_message
from handlers.utils import PENDING, get_router, get_state, show_view
from ui.i18n import get_translations
from ui.keyboards import book_status_keyboard, cancel_keyboard, goal_type_keyboard

logger = logging.getLogger(__name__)

# Conversation states
ADD_TEXT, ADD_AUTHOR, ADD_BOOK_STATUS, ADD_GOAL_TYPE = range(4)

PROMPTS = {
    MenuView.BOOKS: "enter_book_title",
    MenuView.TODO: "enter_task",
    MenuView.ROUTINE: "enter_routine",
    MenuView.GOALS: "enter_goal",
}


def _still_adding(context: ContextTypes.DEFAULT_TYPE, pending) -> bool:
    """The dialog is live only while its list is the visible view"""
    if pending is None:
        return False
    router = get_router(context)
    return router.in_menu_view and router.view == pending["view"]


async def add_start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """<view>:add - ask for the first field"""
    query = update.callback_query
    await query.answer()

    view = MenuView(query.data.split(":", 1)[0])
    context.user_data[PENDING] = {"view": view}
    router = get_router(context)
    router.select_tab(AppTab.MENU)
    router.open_view(view)
    settings = get_state(update, context).settings

    await query.edit_message_text(
        get_translations(settings.language)[PROMPTS[view]],
        reply_markup=cancel_keyboard(settings)
    )
    return ADD_TEXT


async def _abandon(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """User navigated away: the text is an ordinary message again"""
    context.user_data.pop(PENDING, None)
    logger.info(f"↩️ User {update.effective_user.id} left the add dialog")
    await text_message(update, context)
    return ConversationHandler.END


async def add_text(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Main text: book title, task, routine or goal"""
    pending = context.user_data.get(PENDING)
    if not _still_adding(context, pending):
        return await _abandon(update, context)

    state = get_state(update, context)
    settings = state.settings
    t = get_translations(settings.language)
    text = update.message.text.strip()

    if not text:
        await update.message.reply_text(t['empty_input'], reply_markup=cancel_keyboard(settings))
        return ADD_TEXT

    view = pending["view"]
    if view == MenuView.BOOKS:
        pending["title"] = text
        await update.message.reply_text(t['enter_book_author'], reply_markup=cancel_keyboard(settings))
        return ADD_AUTHOR

    if view == MenuView.GOALS:
        pending["text"] = text
        await update.message.reply_text(t['choose_goal_type'], reply_markup=goal_type_keyboard(settings))
        return ADD_GOAL_TYPE

    if view == MenuView.TODO:
        record = state.add_task(text)
    else:
        record = state.add_routine(text)

    return await _finish(update, context, view, record.id)


async def add_author(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Second step for books"""
    pending = context.user_data.get(PENDING)
    if not _still_adding(context, pending):
        return await _abandon(update, context)

    settings = get_state(update, context).settings
    t = get_translations(settings.language)
    author = update.message.text.strip()
    if not author:
        await update.message.reply_text(t['empty_input'], reply_markup=cancel_keyboard(settings))
        return ADD_AUTHOR

    pending["author"] = author
    await update.message.reply_text(t['choose_book_status'], reply_markup=book_status_keyboard(settings))
    return ADD_BOOK_STATUS


async def add_book_status(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """book_status:<reading|finished> - last step for books"""
    query = update.callback_query
    pending = context.user_data.get(PENDING)
    if pending is None:
        await query.answer()
        return ConversationHandler.END

    state = get_state(update, context)
    status = BookStatus(query.data.split(":", 1)[1])
    book = state.add_book(pending["title"], pending["author"], status)
    await query.answer(get_translations(state.settings.language)['added'])
    return await _finish(update, context, MenuView.BOOKS, book.id)


async def add_goal_type(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """goal_type:<short-term|long-term> - last step for goals"""
    query = update.callback_query
    pending = context.user_data.get(PENDING)
    if pending is None:
        await query.answer()
        return ConversationHandler.END

    state = get_state(update, context)
    goal_type = GoalType(query.data.split(":", 1)[1])
    goal = state.add_goal(pending["text"], goal_type)
    await query.answer(get_translations(state.settings.language)['added'])
    return await _finish(update, context, MenuView.GOALS, goal.id)


async def _finish(update: Update, context: ContextTypes.DEFAULT_TYPE, view: MenuView, record_id: str):
    context.user_data.pop(PENDING, None)
    logger.info(f"➕ User {update.effective_user.id} added {view.value} {record_id}")

    router = get_router(context)
    router.select_tab(AppTab.MENU)
    router.open_view(view)
    await show_view(update, context)
    return ConversationHandler.END


async def add_cancel(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """/cancel or the cancel button: drop the draft and show the list again"""
    pending = context.user_data.pop(PENDING, None)
    settings = get_state(update, context).settings

    if update.callback_query:
        await update.callback_query.answer(get_translations(settings.language)['cancelled'])
    else:
        await update.message.reply_text(get_translations(settings.language)['cancelled'])

    if pending is not None:
        get_router(context).open_view(pending["view"])
    await show_view(update, context)
    return ConversationHandler.END


def leaving(handler):
    """Wrap a navigation handler so that it also ends the add dialog"""
    async def leave(update: Update, context: ContextTypes.DEFAULT_TYPE):
        context.user_data.pop(PENDING, None)
        await handler(update, context)
        return ConversationHandler.END
    return leave


def build_add_conversation() -> ConversationHandler:
    text_input = filters.TEXT & ~filters.COMMAND
    return ConversationHandler(
        entry_points=[
            CallbackQueryHandler(add_start, pattern="^(books|todo|goals|routine):add$")
        ],
        states={
            ADD_TEXT: [MessageHandler(text_input, add_text)],
            ADD_AUTHOR: [MessageHandler(text_input, add_author)],
            ADD_BOOK_STATUS: [CallbackQueryHandler(add_book_status, pattern="^book_status:(reading|finished)$")],
            ADD_GOAL_TYPE: [CallbackQueryHandler(add_goal_type, pattern="^goal_type:(short-term|long-term)$")],
        },
        fallbacks=[
            CommandHandler("cancel", add_cancel),
            CallbackQueryHandler(add_cancel, pattern="^add_cancel$"),

            # Navigation leaves the dialog
            CallbackQueryHandler(leaving(tab_callback), pattern=TAB_PATTERN),
            CallbackQueryHandler(leaving(view_callback), pattern=VIEW_PATTERN),
            CallbackQueryHandler(leaving(record_callback), pattern=RECORD_PATTERN),
            CallbackQueryHandler(leaving(handle_settings_change), pattern=SETTINGS_PATTERN),
            CallbackQueryHandler(leaving(handle_reset_ask), pattern=RESET_ASK_PATTERN),
            CallbackQueryHandler(leaving(handle_reset_confirm), pattern=RESET_CONFIRM_PATTERN),
            CallbackQueryHandler(leaving(calendar_callback), pattern=CALENDAR_PATTERN),
            CommandHandler(["start", "menu"], leaving(start_command)),
            CommandHandler("assistant", leaving(assistant_command)),
            CommandHandler("calendar", leaving(calendar_command)),
            CommandHandler("settings", leaving(settings_command)),
            CommandHandler("about", leaving(about_command)),
        ],
        allow_reentry=True
    )


def register_add_handlers(application: Application):
    application.add_handler(build_add_conversation())
