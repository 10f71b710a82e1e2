#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Emo Improvement Bot
Telegram companion for personal growth: books, tasks, routines, goals,
an AI assistant and a calendar
"""

import sys

from bot.application import build_application
from config import load_config
from core.exceptions import ConfigError
from utils.logger import setup_logging


def main():
    """Entry point: configure, build and run polling"""
    try:
        config = load_config()
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    logger = setup_logging(config)
    config.ensure_directories()

    logger.info(f"🚀 Starting Emo Improvement bot ({config.environment.value})")
    if config.is_development():
        logger.info(f"⚙️ Config: {config.to_dict()}")

    application = build_application(config)

    try:
        logger.info("🎯 Polling...")
        application.run_polling(
            allowed_updates=config.telegram.allowed_updates,
            drop_pending_updates=True
        )
    except KeyboardInterrupt:
        logger.info("⌨️ Interrupted from keyboard")
    except Exception as e:
        logger.critical(f"💥 Fatal error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        logger.info("🛑 Bot stopped")


if __name__ == "__main__":
    main()
