# handlers/router.py

from telegram.ext import Application

from handlers.add_records import register_add_handlers
from handlers.commands.basic import register_basic_handlers
from handlers.commands.export_data import register_export_handlers
from handlers.callbacks.main_menu import register_main_menu_callbacks
from handlers.callbacks.records import register_record_callbacks
from handlers.callbacks.settings import register_settings_callbacks
from handlers.callbacks.calendar import register_calendar_callbacks
from handlers.errors import error_handler
from handlers.messages import register_message_handlers


def register_handlers(application: Application):
    """Attach every handler to the Application.

    The add-record conversation goes first so that its text steps and its
    /cancel win over the generic command and text handlers.
    """
    register_add_handlers(application)

    register_basic_handlers(application)
    register_export_handlers(application)

    register_main_menu_callbacks(application)
    register_record_callbacks(application)
    register_settings_callbacks(application)
    register_calendar_callbacks(application)

    register_message_handlers(application)
    application.add_error_handler(error_handler)
