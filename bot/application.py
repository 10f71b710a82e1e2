import logging
from typing import Optional

from telegram.ext import Application, ApplicationBuilder

from bot.middleware import setup_middlewares
from config import BotConfig
from handlers.router import register_handlers
from handlers.utils import ASSISTANT_CLIENT, REGISTRY
from services import AppStateRegistry
from services.ai import AssistantClient

logger = logging.getLogger(__name__)


def build_application(config: BotConfig,
                      registry: Optional[AppStateRegistry] = None,
                      assistant_client: Optional[AssistantClient] = None) -> Application:
    application = (
        ApplicationBuilder()
        .token(config.telegram.bot_token)
        .concurrent_updates(config.telegram.concurrent_updates)
        .build()
    )

    # Shared services for handlers
    if registry is None:
        registry = AppStateRegistry(config.storage.data_dir)
    if assistant_client is None:
        assistant_client = AssistantClient(config.ai)
    application.bot_data[REGISTRY] = registry
    application.bot_data[ASSISTANT_CLIENT] = assistant_client

    if not config.ai.enabled:
        logger.warning("⚠️ OPENAI_API_KEY not set - assistant replies are disabled")

    setup_middlewares(application)
    register_handlers(application)

    total_handlers = sum(len(handlers) for handlers in application.handlers.values())
    logger.info(f"✅ {total_handlers} handlers registered")
    return application
