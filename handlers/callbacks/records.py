# handlers/callbacks/records.py

import logging

from telegram import Update
from telegram.ext import Application, CallbackQueryHandler, ContextTypes

from models import AppTab, MenuView
from services import AppState
from handlers.utils import get_router, get_state, show_view

logger = logging.getLogger(__name__)

RECORD_PATTERN = r"^(books|todo|goals|routine):(toggle|delete):(\w+)$"

OPERATIONS = {
    (MenuView.BOOKS, "toggle"): AppState.toggle_book,
    (MenuView.BOOKS, "delete"): AppState.delete_book,
    (MenuView.TODO, "toggle"): AppState.toggle_task,
    (MenuView.TODO, "delete"): AppState.delete_task,
    (MenuView.ROUTINE, "toggle"): AppState.toggle_routine,
    (MenuView.ROUTINE, "delete"): AppState.delete_routine,
    (MenuView.GOALS, "toggle"): AppState.toggle_goal,
    (MenuView.GOALS, "delete"): AppState.delete_goal,
}


async def record_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """<view>:toggle:<id> and <view>:delete:<id>"""
    query = update.callback_query
    await query.answer()

    view_name, action, record_id = query.data.split(":", 2)
    view = MenuView(view_name)
    state = get_state(update, context)
    OPERATIONS[(view, action)](state, record_id)
    logger.info(f"📝 User {update.effective_user.id}: {view.value} {action} {record_id}")

    router = get_router(context)
    router.select_tab(AppTab.MENU)
    router.open_view(view)
    await show_view(update, context)


def register_record_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(record_callback, pattern=RECORD_PATTERN))
