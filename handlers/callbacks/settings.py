# ==========================================
# handlers/callbacks/settings.py
# ==========================================

"""
Settings-related callback handlers: language, theme, notifications, reset
"""

import logging

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import Application, CallbackQueryHandler, ContextTypes

from handlers.utils import get_state, restart_session, show_view
from ui.i18n import get_translations
from ui.keyboards import reset_confirm_keyboard
from ui.messages import reset_confirm_message

logger = logging.getLogger(__name__)

SETTINGS_PATTERN = "^settings:(language:(fa|en)|theme:(light|dark)|notifications)$"
RESET_ASK_PATTERN = "^reset:ask$"
RESET_CONFIRM_PATTERN = "^reset:(yes|no)$"


async def handle_settings_change(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Callback format: settings:language:<fa|en>, settings:theme:<light|dark>,
    settings:notifications
    """
    query = update.callback_query
    state = get_state(update, context)
    parts = query.data.split(":")

    if parts[1] == "notifications":
        state.update_settings(notifications=not state.settings.notifications)
    else:
        state.update_settings(**{parts[1]: parts[2]})

    logger.info(f"⚙️ User {update.effective_user.id} settings: {state.settings.to_dict()}")
    await query.answer()
    await show_view(update, context)


async def handle_reset_ask(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.callback_query
    await query.answer()
    settings = get_state(update, context).settings
    await query.edit_message_text(
        reset_confirm_message(settings),
        reply_markup=reset_confirm_keyboard(settings),
        parse_mode=ParseMode.HTML
    )


async def handle_reset_confirm(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """reset:yes wipes every slot and restarts the session; reset:no goes back"""
    query = update.callback_query
    state = get_state(update, context)

    if query.data == "reset:no":
        await query.answer()
        await show_view(update, context)
        return

    state.reset()
    restart_session(context)
    logger.warning(f"🗑️ User {update.effective_user.id} reset all data")

    await query.answer(get_translations(state.settings.language)['reset_done'], show_alert=True)
    await show_view(update, context)


def register_settings_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(handle_settings_change, pattern=SETTINGS_PATTERN))
    application.add_handler(CallbackQueryHandler(handle_reset_ask, pattern=RESET_ASK_PATTERN))
    application.add_handler(CallbackQueryHandler(handle_reset_confirm, pattern=RESET_CONFIRM_PATTERN))
