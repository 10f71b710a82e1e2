# handlers/callbacks/calendar.py

from telegram import Update
from telegram.ext import Application, CallbackQueryHandler, ContextTypes

from handlers.utils import CALENDAR_MONTH, show_view

CALENDAR_PATTERN = r"^cal:(today|\d{1,4}-(1[0-2]|[1-9]))$"


async def calendar_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """cal:<year>-<month> pages the calendar, cal:today jumps back"""
    query = update.callback_query
    await query.answer()

    target = query.data.split(":", 1)[1]
    if target == "today":
        context.user_data.pop(CALENDAR_MONTH, None)
    else:
        year, month = target.split("-")
        context.user_data[CALENDAR_MONTH] = (int(year), int(month))

    await show_view(update, context)


def register_calendar_callbacks(application: Application):
    application.add_handler(CallbackQueryHandler(calendar_callback, pattern=CALENDAR_PATTERN))
