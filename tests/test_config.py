from pathlib import Path

import pytest

from config import Environment, LogLevel, load_config
from core.exceptions import ConfigError

TOKEN = "123456:ABC-test-token"


def test_defaults():
    config = load_config({"BOT_TOKEN": TOKEN})
    assert config.environment == Environment.DEVELOPMENT
    assert config.is_development()
    assert config.telegram.concurrent_updates is True
    assert config.ai.openai_model == "gpt-4o-mini"
    assert config.ai.openai_max_tokens == 1000
    assert config.ai.temperature == 0.7
    assert not config.ai.enabled
    assert config.storage.data_dir == Path("data")
    assert config.logging.level == LogLevel.INFO


def test_environment_overrides():
    config = load_config({
        "BOT_TOKEN": TOKEN,
        "OPENAI_API_KEY": "sk-123",
        "OPENAI_MODEL": "gpt-4o",
        "OPENAI_TEMPERATURE": "0.2",
        "DATA_DIR": "/tmp/emo",
        "LOG_LEVEL": "DEBUG",
        "USE_CONCURRENT_UPDATES": "false",
        "ENVIRONMENT": "production",
    })
    assert config.ai.enabled
    assert config.ai.openai_model == "gpt-4o"
    assert config.ai.temperature == 0.2
    assert config.storage.data_dir == Path("/tmp/emo")
    assert config.logging.level == LogLevel.DEBUG
    assert config.telegram.concurrent_updates is False
    assert config.environment == Environment.PRODUCTION
    assert not config.is_development()


def test_missing_token():
    with pytest.raises(ConfigError):
        load_config({})


@pytest.mark.parametrize("env", [
    {"BOT_TOKEN": "no-colon"},
    {"BOT_TOKEN": TOKEN, "OPENAI_MAX_TOKENS": "0"},
    {"BOT_TOKEN": TOKEN, "OPENAI_MAX_TOKENS": "many"},
    {"BOT_TOKEN": TOKEN, "OPENAI_TEMPERATURE": "3"},
    {"BOT_TOKEN": TOKEN, "LOG_LEVEL": "LOUD"},
    {"BOT_TOKEN": TOKEN, "ENVIRONMENT": "moon"},
])
def test_invalid_values(env):
    with pytest.raises(ConfigError):
        load_config(env)


def test_openai_key_equal_to_bot_token_is_dropped():
    config = load_config({"BOT_TOKEN": TOKEN, "OPENAI_API_KEY": TOKEN})
    assert not config.ai.enabled


def test_logging_config_file_handler_is_optional(tmp_path):
    config = load_config({"BOT_TOKEN": TOKEN, "LOG_TO_FILE": "false"})
    assert "file" not in config.get_logging_config()["handlers"]

    config = load_config({"BOT_TOKEN": TOKEN, "LOG_DIR": str(tmp_path)})
    file_handler = config.get_logging_config()["handlers"]["file"]
    assert file_handler["class"] == "logging.handlers.RotatingFileHandler"
    assert file_handler["filename"].endswith("bot_development.log")


def test_to_dict_hides_token():
    summary = load_config({"BOT_TOKEN": TOKEN}).to_dict()
    assert TOKEN not in str(summary)
