import json
from unittest.mock import AsyncMock, MagicMock

from telegram import Update
from telegram.constants import ParseMode
from telegram.error import NetworkError
from telegram.ext import CallbackQueryHandler, CommandHandler, ConversationHandler

from bot.application import build_application
from config import load_config
from core.exceptions import AssistantError
from handlers import add_records
from handlers.callbacks.calendar import calendar_callback
from handlers.callbacks.main_menu import tab_callback, view_callback
from handlers.callbacks.records import record_callback
from handlers.callbacks.settings import handle_reset_ask, handle_reset_confirm, handle_settings_change
from handlers.commands.basic import help_command, start_command
from handlers.commands.export_data import export_command
from handlers.errors import error_handler
from handlers.messages import text_message
from handlers.utils import CALENDAR_MONTH, PENDING, REGISTRY, ROUTER, get_conversation, get_router
from models import AppTab, BookStatus, GoalType, Language, MenuView

from tests.conftest import USER_ID, make_callback_update, make_message_update


def _state(context):
    return context.bot_data[REGISTRY].get(USER_ID)


def _edited_text(update):
    return update.callback_query.edit_message_text.call_args.args[0]


class TestNavigation:
    async def test_start_shows_menu(self, context):
        update = make_message_update("/start")
        await start_command(update, context)

        kwargs = update.message.reply_text.call_args.kwargs
        assert kwargs["parse_mode"] == ParseMode.HTML
        assert "حکمت روز" in update.message.reply_text.call_args.args[0]
        assert get_router(context).tab == AppTab.MENU

    async def test_start_resets_sub_view(self, context):
        get_router(context).open_view(MenuView.GOALS)
        await start_command(make_message_update("/start"), context)
        assert get_router(context).view == MenuView.MAIN

    async def test_tab_switch_edits_message(self, context):
        update = make_callback_update("tab:settings")
        await tab_callback(update, context)

        update.callback_query.answer.assert_awaited_once()
        assert get_router(context).tab == AppTab.SETTINGS
        assert "تنظیمات" in _edited_text(update)

    async def test_open_books_view(self, context):
        _state(context).add_book("Dune", "Herbert")
        update = make_callback_update("view:books")
        await view_callback(update, context)

        assert get_router(context).view == MenuView.BOOKS
        assert "Dune" in _edited_text(update)

    async def test_help(self, context):
        _state(context).update_settings(language="en")
        update = make_message_update("/help")
        await help_command(update, context)
        assert "/export" in update.message.reply_text.call_args.args[0]


class TestRecords:
    async def test_toggle_book(self, context):
        book = _state(context).add_book("Dune", "Herbert")
        update = make_callback_update(f"books:toggle:{book.id}")
        await record_callback(update, context)

        assert _state(context).books[0].status == BookStatus.FINISHED
        assert get_router(context).view == MenuView.BOOKS

    async def test_delete_goal(self, context):
        goal = _state(context).add_goal("Ship it")
        await record_callback(make_callback_update(f"goals:delete:{goal.id}"), context)
        assert _state(context).goals == ()

    async def test_unknown_id_is_ignored(self, context):
        task = _state(context).add_task("keep me")
        await record_callback(make_callback_update("todo:delete:missing"), context)
        assert _state(context).tasks == (task,)


class TestAddConversation:
    async def test_add_task(self, context):
        step = await add_records.add_start(make_callback_update("todo:add"), context)
        assert step == add_records.ADD_TEXT

        update = make_message_update("Buy milk")
        step = await add_records.add_text(update, context)

        assert step == ConversationHandler.END
        assert [t.text for t in _state(context).tasks] == ["Buy milk"]
        assert get_router(context).view == MenuView.TODO

    async def test_add_routine(self, context):
        await add_records.add_start(make_callback_update("routine:add"), context)
        await add_records.add_text(make_message_update("Stretch"), context)
        assert [r.text for r in _state(context).routines] == ["Stretch"]

    async def test_add_book_asks_for_author(self, context):
        await add_records.add_start(make_callback_update("books:add"), context)
        step = await add_records.add_text(make_message_update("Dune"), context)
        assert step == add_records.ADD_AUTHOR

        update = make_message_update("Frank Herbert")
        step = await add_records.add_author(update, context)
        assert step == add_records.ADD_BOOK_STATUS
        assert _state(context).books == ()
        markup = update.message.reply_text.call_args.kwargs["reply_markup"]
        data = [b.callback_data for row in markup.inline_keyboard for b in row]
        assert data == ["book_status:reading", "book_status:finished", "add_cancel"]

        step = await add_records.add_book_status(make_callback_update("book_status:reading"), context)
        assert step == ConversationHandler.END
        book = _state(context).books[0]
        assert (book.title, book.author, book.status) == ("Dune", "Frank Herbert", BookStatus.READING)

    async def test_add_finished_book(self, context):
        await add_records.add_start(make_callback_update("books:add"), context)
        await add_records.add_text(make_message_update("Emma"), context)
        await add_records.add_author(make_message_update("Jane Austen"), context)
        await add_records.add_book_status(make_callback_update("book_status:finished"), context)

        book = _state(context).books[0]
        assert (book.title, book.status) == ("Emma", BookStatus.FINISHED)
        assert _state(context).summary().books_reading == 0

    async def test_add_goal_asks_for_type(self, context):
        await add_records.add_start(make_callback_update("goals:add"), context)
        step = await add_records.add_text(make_message_update("Learn Persian"), context)
        assert step == add_records.ADD_GOAL_TYPE

        step = await add_records.add_goal_type(make_callback_update("goal_type:long-term"), context)
        assert step == ConversationHandler.END
        assert _state(context).goals[0].type == GoalType.LONG_TERM

    async def test_blank_text_asks_again(self, context):
        await add_records.add_start(make_callback_update("todo:add"), context)
        update = make_message_update("   ")
        step = await add_records.add_text(update, context)

        assert step == add_records.ADD_TEXT
        assert _state(context).tasks == ()
        update.message.reply_text.assert_awaited_once()

    async def test_cancel_adds_nothing(self, context):
        await add_records.add_start(make_callback_update("books:add"), context)
        step = await add_records.add_cancel(make_callback_update("add_cancel"), context)

        assert step == ConversationHandler.END
        assert _state(context).books == ()
        assert get_router(context).view == MenuView.BOOKS

    async def test_switching_tab_leaves_dialog(self, context, openai_client):
        await add_records.add_start(make_callback_update("todo:add"), context)

        step = await add_records.leaving(tab_callback)(make_callback_update("tab:assistant"), context)
        assert step == ConversationHandler.END
        assert PENDING not in context.user_data
        assert get_router(context).tab == AppTab.ASSISTANT

        await text_message(make_message_update("How do I stay focused?"), context)
        assert _state(context).tasks == ()
        openai_client.chat.completions.create.assert_awaited_once()

    async def test_text_after_navigation_goes_to_assistant(self, context, openai_client):
        await add_records.add_start(make_callback_update("routine:add"), context)
        get_router(context).select_tab(AppTab.ASSISTANT)

        update = make_message_update("How do I stay focused?")
        step = await add_records.add_text(update, context)

        assert step == ConversationHandler.END
        assert _state(context).routines == ()
        assert PENDING not in context.user_data
        openai_client.chat.completions.create.assert_awaited_once()
        update.message.reply_text.assert_awaited_once_with("Keep going!")

    def test_navigation_is_a_fallback(self, context):
        conversation = add_records.build_add_conversation()
        patterns = [h.pattern for h in conversation.fallbacks if isinstance(h, CallbackQueryHandler)]
        for data in ("tab:assistant", "view:main", "settings:theme:dark", "reset:ask",
                     "reset:yes", "cal:today", "cal:2026-3", "books:delete:abc"):
            assert any(p.match(data) for p in patterns), data

        commands = set()
        for h in conversation.fallbacks:
            if isinstance(h, CommandHandler):
                commands |= h.commands
        assert {"start", "menu", "assistant", "calendar", "settings", "about", "cancel"} <= commands
        assert get_router(context).view == MenuView.BOOKS


class TestSettings:
    async def test_change_language(self, context):
        update = make_callback_update("settings:language:en")
        await handle_settings_change(update, context)

        assert _state(context).settings.language == Language.EN
        assert "Settings" in _edited_text(update)

    async def test_toggle_notifications(self, context):
        await handle_settings_change(make_callback_update("settings:notifications"), context)
        assert _state(context).settings.notifications is False

    async def test_reset_asks_for_confirmation(self, context):
        _state(context).add_task("x")
        update = make_callback_update("reset:ask")
        await handle_reset_ask(update, context)

        assert _state(context).tasks != ()
        markup = update.callback_query.edit_message_text.call_args.kwargs["reply_markup"]
        data = [b.callback_data for row in markup.inline_keyboard for b in row]
        assert data == ["reset:yes", "reset:no"]

    async def test_reset_confirmed(self, context):
        state = _state(context)
        state.add_task("x")
        state.update_settings(theme="dark")
        get_router(context).select_tab(AppTab.SETTINGS)

        await handle_reset_confirm(make_callback_update("reset:yes"), context)

        assert state.tasks == ()
        assert not state.settings.is_dark
        assert context.user_data[ROUTER].tab == AppTab.MENU

    async def test_reset_declined(self, context):
        _state(context).add_task("x")
        await handle_reset_confirm(make_callback_update("reset:no"), context)
        assert len(_state(context).tasks) == 1


class TestCalendar:
    async def test_paging_and_today(self, context):
        get_router(context).select_tab(AppTab.CALENDAR)
        await calendar_callback(make_callback_update("cal:2026-3"), context)
        assert context.user_data[CALENDAR_MONTH] == (2026, 3)

        await calendar_callback(make_callback_update("cal:today"), context)
        assert CALENDAR_MONTH not in context.user_data


class TestAssistantMessages:
    async def test_outside_assistant_tab_gives_hint(self, context, openai_client):
        update = make_message_update("hello")
        await text_message(update, context)

        update.message.reply_text.assert_awaited_once()
        openai_client.chat.completions.create.assert_not_awaited()

    async def test_reply_from_assistant(self, context):
        get_router(context).select_tab(AppTab.ASSISTANT)
        update = make_message_update("Any advice?")
        await text_message(update, context)

        context.bot.send_chat_action.assert_awaited_once()
        update.message.reply_text.assert_awaited_once_with("Keep going!")
        assert len(get_conversation(context).messages) == 2

    async def test_failure_shows_unavailable(self, context):
        _state(context).update_settings(language="en")
        get_router(context).select_tab(AppTab.ASSISTANT)
        conversation = get_conversation(context)
        conversation.client = MagicMock()
        conversation.client.complete = AsyncMock(side_effect=AssistantError("down"))

        update = make_message_update("hi")
        await text_message(update, context)

        assert "unavailable" in update.message.reply_text.call_args.args[0]
        assert not conversation.in_flight

    async def test_busy_while_in_flight(self, context, openai_client):
        get_router(context).select_tab(AppTab.ASSISTANT)
        get_conversation(context).in_flight = True

        await text_message(make_message_update("hi"), context)
        openai_client.chat.completions.create.assert_not_awaited()


async def test_export_sends_json_document(context):
    _state(context).add_book("Dune", "Herbert")
    update = make_message_update("/export")
    await export_command(update, context)

    document = update.message.reply_document.call_args.kwargs["document"]
    data = json.loads(document.getvalue().decode("utf-8"))
    assert data["books"][0]["title"] == "Dune"
    assert document.name.endswith(".json")


class TestErrorHandler:
    def _update(self):
        update = MagicMock(spec=Update)
        update.effective_user = MagicMock()
        update.callback_query = MagicMock()
        update.callback_query.answer = AsyncMock()
        return update

    async def test_unexpected_error_notifies_user(self, context):
        update = self._update()
        context.error = RuntimeError("boom")
        await error_handler(update, context)
        update.callback_query.answer.assert_awaited_once()

    async def test_network_errors_are_only_logged(self, context):
        update = self._update()
        context.error = NetworkError("flaky")
        await error_handler(update, context)
        update.callback_query.answer.assert_not_awaited()


def test_build_application_wires_services(registry, assistant_client):
    config = load_config({"BOT_TOKEN": "123456:ABC-test-token", "LOG_TO_FILE": "false"})
    application = build_application(config, registry=registry, assistant_client=assistant_client)

    assert application.bot_data[REGISTRY] is registry
    assert application.error_handlers
    handler_types = {type(h).__name__ for group in application.handlers.values() for h in group}
    assert {"ConversationHandler", "CommandHandler", "CallbackQueryHandler", "MessageHandler"} <= handler_types
