# handlers/callbacks/main_menu.py

import logging

from telegram import Update
from telegram.ext import Application, CallbackQueryHandler, ContextTypes

from handlers.utils import get_router, show_view

logger = logging.getLogger(__name__)

TAB_PATTERN = "^tab:(menu|assistant|calendar|about|settings)$"
VIEW_PATTERN = "^view:(main|books|todo|goals|routine)$"


async def tab_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """tab:<tab> - switch the active tab"""
    query = update.callback_query
    await query.answer()
    get_router(context).select_tab(query.data.split(":", 1)[1])
    await show_view(update, context)


async def view_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """view:<sub-view> - open a menu card, or view:main to go back"""
    query = update.callback_query
    await query.answer()
    get_router(context).open_view(query.data.split(":", 1)[1])
    await show_view(update, context)


def register_main_menu_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(tab_callback, pattern=TAB_PATTERN))
    application.add_handler(CallbackQueryHandler(view_callback, pattern=VIEW_PATTERN))
