import logging

from telegram import Update
from telegram.ext import Application, ContextTypes, TypeHandler

logger = logging.getLogger(__name__)


# === Update logging ===

async def log_update(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Runs before every other handler (group -1) and never stops processing"""
    user = update.effective_user
    if update.callback_query:
        logger.debug(f"🔘 {user.id if user else '-'}: callback {update.callback_query.data}")
    elif update.effective_message and update.effective_message.text:
        logger.debug(f"💬 {user.id if user else '-'}: {update.effective_message.text[:50]}")


# === Attach middlewares to Application ===

def setup_middlewares(application: Application):
    application.add_handler(TypeHandler(Update, log_update), group=-1)
