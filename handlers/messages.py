# handlers/messages.py

import logging

from telegram import Update
from telegram.constants import ChatAction
from telegram.ext import Application, ContextTypes, MessageHandler, filters

from core.exceptions import AssistantError, AssistantUnavailableError
from models import AppTab
from handlers.utils import get_conversation, get_router, get_state
from ui.i18n import get_translations

logger = logging.getLogger(__name__)


async def text_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Free text goes to the assistant while its tab is open"""
    state = get_state(update, context)
    t = get_translations(state.settings.language)

    if get_router(context).tab != AppTab.ASSISTANT:
        await update.message.reply_text(t['use_buttons'])
        return

    conversation = get_conversation(context)
    if conversation.in_flight:
        await update.message.reply_text(t['assistant_busy'])
        return

    await context.bot.send_chat_action(chat_id=update.effective_chat.id, action=ChatAction.TYPING)

    try:
        reply = await conversation.send(update.message.text, state.settings.language)
    except AssistantUnavailableError:
        logger.warning("⚠️ Assistant requested but no API key is configured")
        await update.message.reply_text(t['assistant_unavailable'])
        return
    except AssistantError as e:
        logger.error(f"❌ Assistant error for user {update.effective_user.id}: {e}")
        await update.message.reply_text(t['assistant_unavailable'])
        return

    if reply is None:
        await update.message.reply_text(t['assistant_busy'])
        return

    await update.message.reply_text(reply.content)


def register_message_handlers(application: Application):
    """Must be registered after the add-record conversation"""
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, text_message))
