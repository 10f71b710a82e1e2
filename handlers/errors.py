# handlers/errors.py

import logging

from telegram import Update
from telegram.error import Conflict, NetworkError, TelegramError, TimedOut
from telegram.ext import ContextTypes

from core.exceptions import StorageError

logger = logging.getLogger(__name__)

FALLBACK_TEXT = "⚠️ Something went wrong. Please try again. / خطایی رخ داد. لطفاً دوباره تلاش کن."


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Global error handler"""
    error = context.error

    if isinstance(error, Conflict):
        logger.error(f"❌ getUpdates conflict, is another instance running? {error}")
        return
    if isinstance(error, (TimedOut, NetworkError)):
        logger.warning(f"⚠️ Temporary network error: {error}")
        return

    if isinstance(error, StorageError):
        logger.error(f"💾 Storage failure: {error}")
    else:
        logger.error("❌ Unexpected error while handling an update", exc_info=error)

    # Tell the user if there is someone to tell
    if isinstance(update, Update) and update.effective_user:
        try:
            if update.callback_query:
                await update.callback_query.answer(FALLBACK_TEXT, show_alert=True)
            elif update.effective_message:
                await update.effective_message.reply_text(FALLBACK_TEXT)
        except TelegramError as e:
            logger.error(f"❌ Could not notify user about the error: {e}")
