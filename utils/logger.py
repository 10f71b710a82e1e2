import logging
import logging.config
from pathlib import Path


def setup_logging(config) -> logging.Logger:
    """Apply the BotConfig logging section (console + rotating file)"""
    if config.logging.to_file:
        Path(config.logging.log_dir).mkdir(exist_ok=True, parents=True)
    logging.config.dictConfig(config.get_logging_config())

    # Quiet the chatty HTTP client logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("telegram.ext").setLevel(logging.WARNING)

    return logging.getLogger("emo_bot")
