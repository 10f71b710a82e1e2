"""
/export - download every slot of the user's data as one JSON file
"""

import io
import json
import logging
from datetime import datetime

from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from handlers.utils import get_state
from ui.i18n import get_translations

logger = logging.getLogger(__name__)


async def export_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    user_id = update.effective_user.id
    state = get_state(update, context)
    t = get_translations(state.settings.language)

    export_json = json.dumps(state.export(), ensure_ascii=False, indent=2)
    file_buffer = io.BytesIO(export_json.encode('utf-8'))
    file_buffer.name = f"emo_export_{user_id}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"

    await update.message.reply_document(
        document=file_buffer,
        caption=f"📦 {t['export_caption']}",
        filename=file_buffer.name
    )
    logger.info(f"📦 Data export for user {user_id}")


def register_export_handlers(application: Application):
    application.add_handler(CommandHandler("export", export_command))
