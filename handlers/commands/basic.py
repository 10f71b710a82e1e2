# handlers/commands/basic.py

import logging

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import Application, CommandHandler, ContextTypes

from models import AppTab, MenuView
from handlers.utils import PENDING, get_router, get_state, show_view
from ui.i18n import get_translations
from ui.messages import help_message

logger = logging.getLogger(__name__)


async def _open_tab(update: Update, context: ContextTypes.DEFAULT_TYPE, tab: AppTab):
    get_router(context).select_tab(tab)
    await show_view(update, context)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """/start and /menu - the home screen"""
    user = update.effective_user
    state = get_state(update, context)
    logger.info(f"👋 /start from user {user.id} (language: {state.settings.language.value})")

    router = get_router(context)
    router.select_tab(AppTab.MENU)
    router.open_view(MenuView.MAIN)
    await show_view(update, context)


async def assistant_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await _open_tab(update, context, AppTab.ASSISTANT)


async def calendar_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await _open_tab(update, context, AppTab.CALENDAR)


async def settings_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await _open_tab(update, context, AppTab.SETTINGS)


async def about_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await _open_tab(update, context, AppTab.ABOUT)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    settings = get_state(update, context).settings
    await update.message.reply_text(help_message(settings), parse_mode=ParseMode.HTML)


async def cancel_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """/cancel outside of an add dialog: nothing to cancel"""
    context.user_data.pop(PENDING, None)
    settings = get_state(update, context).settings
    await update.message.reply_text(get_translations(settings.language)['cancelled'])


def register_basic_handlers(application: Application):
    application.add_handler(CommandHandler(["start", "menu"], start_command))
    application.add_handler(CommandHandler("assistant", assistant_command))
    application.add_handler(CommandHandler("calendar", calendar_command))
    application.add_handler(CommandHandler("settings", settings_command))
    application.add_handler(CommandHandler("about", about_command))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("cancel", cancel_command))
