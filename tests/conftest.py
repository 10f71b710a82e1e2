"""
Shared fixtures: in-memory state, fake assistant client and mocked
Telegram updates/contexts for handler tests.
"""
import random
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Flat layout: make the project root importable when running from anywhere
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config import AIConfig  # noqa: E402
from database import MemoryStorage, RecordStore  # noqa: E402
from handlers.utils import ASSISTANT_CLIENT, QUOTE_RNG, REGISTRY  # noqa: E402
from services import AppState, AppStateRegistry  # noqa: E402
from services.ai import AssistantClient  # noqa: E402

USER_ID = 424242


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def store(memory_storage):
    return RecordStore(memory_storage)


@pytest.fixture
def state(store):
    return AppState.load(store)


@pytest.fixture
def registry(tmp_path):
    storages = {}

    def factory(user_id):
        return storages.setdefault(user_id, MemoryStorage())

    return AppStateRegistry(tmp_path, storage_factory=factory)


@pytest.fixture
def openai_client():
    """Stand-in for AsyncOpenAI: only chat.completions.create is used"""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=make_completion("Keep going!"))
    return client


@pytest.fixture
def assistant_client(openai_client):
    return AssistantClient(AIConfig(openai_api_key="sk-test"), client=openai_client)


@pytest.fixture
def context(registry, assistant_client):
    ctx = MagicMock()
    ctx.bot_data = {
        REGISTRY: registry,
        ASSISTANT_CLIENT: assistant_client,
        QUOTE_RNG: random.Random(7),
    }
    ctx.user_data = {}
    ctx.bot.send_chat_action = AsyncMock()
    return ctx


def make_completion(content):
    response = MagicMock()
    choice = MagicMock()
    choice.message.content = content
    response.choices = [choice]
    return response


def make_message_update(text="hello", user_id=USER_ID):
    update = MagicMock()
    update.effective_user.id = user_id
    update.effective_chat.id = user_id
    update.callback_query = None

    message = MagicMock()
    message.text = text
    message.reply_text = AsyncMock()
    message.reply_document = AsyncMock()
    update.message = message
    update.effective_message = message
    return update


def make_callback_update(data, user_id=USER_ID):
    update = MagicMock()
    update.effective_user.id = user_id
    update.effective_chat.id = user_id

    query = MagicMock()
    query.data = data
    query.answer = AsyncMock()
    query.edit_message_text = AsyncMock()
    update.callback_query = query
    update.message = None
    return update
