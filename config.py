#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Emo Improvement Bot - Configuration
Centralized configuration loaded from environment variables, with validation
"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Mapping
from dataclasses import dataclass, field
from enum import Enum

from core.exceptions import ConfigError


class Environment(Enum):
    """Runtime environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(Enum):
    """Logging levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class TelegramConfig:
    """Telegram bot settings"""
    bot_token: str
    concurrent_updates: bool = True
    allowed_updates: list = field(default_factory=lambda: ['message', 'callback_query'])


@dataclass
class AIConfig:
    """Assistant (OpenAI) settings"""
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_max_tokens: int = 1000
    temperature: float = 0.7
    request_timeout: int = 30
    base_url: Optional[str] = None

    @property
    def enabled(self) -> bool:
        return bool(self.openai_api_key)


@dataclass
class StorageConfig:
    """Per-user JSON documents"""
    data_dir: Path = Path("data")


@dataclass
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    to_file: bool = True
    log_dir: Path = Path("logs")
    format: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5


class BotConfig:
    """Main configuration object"""

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        self._env = os.environ if env is None else env
        self.environment = self._parse_enum(Environment, 'ENVIRONMENT', 'development')
        self._load_config()
        self._validate_config()

    def _get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._env.get(key)
        return default if value in (None, "") else value

    def _get_required_env(self, key: str) -> str:
        """Required environment variable"""
        value = self._get(key)
        if not value:
            raise ConfigError(f"Required environment variable {key} is not set")
        return value

    def _get_bool(self, key: str, default: bool) -> bool:
        return str(self._get(key, str(default))).lower() in ('1', 'true', 'yes', 'on')

    def _get_int(self, key: str, default: int) -> int:
        try:
            return int(self._get(key, str(default)))
        except ValueError:
            raise ConfigError(f"{key} must be an integer")

    def _get_float(self, key: str, default: float) -> float:
        try:
            return float(self._get(key, str(default)))
        except ValueError:
            raise ConfigError(f"{key} must be a number")

    def _parse_enum(self, enum_cls, key: str, default: str):
        value = self._get(key, default)
        try:
            return enum_cls(value)
        except ValueError:
            allowed = ", ".join(item.value for item in enum_cls)
            raise ConfigError(f"{key}={value!r} is invalid (allowed: {allowed})")

    def _load_config(self):
        """Read every section from the environment"""
        self.telegram = TelegramConfig(
            bot_token=self._get_required_env('BOT_TOKEN'),
            concurrent_updates=self._get_bool('USE_CONCURRENT_UPDATES', True)
        )

        self.ai = AIConfig(
            openai_api_key=self._get('OPENAI_API_KEY'),
            openai_model=self._get('OPENAI_MODEL', 'gpt-4o-mini'),
            openai_max_tokens=self._get_int('OPENAI_MAX_TOKENS', 1000),
            temperature=self._get_float('OPENAI_TEMPERATURE', 0.7),
            request_timeout=self._get_int('AI_TIMEOUT', 30),
            base_url=self._get('OPENAI_BASE_URL')
        )

        self.storage = StorageConfig(data_dir=Path(self._get('DATA_DIR', 'data')))

        self.logging = LoggingConfig(
            level=self._parse_enum(LogLevel, 'LOG_LEVEL', 'INFO'),
            to_file=self._get_bool('LOG_TO_FILE', True),
            log_dir=Path(self._get('LOG_DIR', 'logs')),
            format=self._get('LOG_FORMAT', LoggingConfig.format)
        )

    def _validate_config(self):
        """Validate loaded values"""
        errors = []

        if ':' not in self.telegram.bot_token:
            errors.append("BOT_TOKEN has an invalid format")

        if self.ai.openai_api_key and self.ai.openai_api_key == self.telegram.bot_token:
            logging.warning("⚠️ OPENAI_API_KEY equals BOT_TOKEN - assistant disabled")
            self.ai.openai_api_key = None

        if self.ai.openai_max_tokens <= 0:
            errors.append("OPENAI_MAX_TOKENS must be positive")

        if not 0.0 <= self.ai.temperature <= 2.0:
            errors.append("OPENAI_TEMPERATURE must be between 0 and 2")

        if self.ai.request_timeout <= 0:
            errors.append("AI_TIMEOUT must be positive")

        if errors:
            raise ConfigError("Configuration errors:\n" + "\n".join(f"• {error}" for error in errors))

    def ensure_directories(self):
        """Create data and log directories"""
        directories = [self.storage.data_dir]
        if self.logging.to_file:
            directories.append(self.logging.log_dir)

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

    def get_logging_config(self) -> Dict[str, Any]:
        """dictConfig-style logging configuration"""
        handlers = ['console']
        if self.logging.to_file:
            handlers.append('file')

        level = self.logging.level.value
        config: Dict[str, Any] = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.logging.format,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'level': level,
                    'formatter': 'default',
                    'stream': sys.stdout
                }
            },
            'loggers': {
                '': {
                    'level': level,
                    'handlers': handlers,
                    'propagate': False
                },
                'httpx': {
                    'level': 'WARNING',
                    'handlers': handlers,
                    'propagate': False
                },
                'telegram': {
                    'level': 'WARNING',
                    'handlers': handlers,
                    'propagate': False
                }
            }
        }

        if self.logging.to_file:
            config['handlers']['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': level,
                'formatter': 'default',
                'filename': str(self.logging.log_dir / f"bot_{self.environment.value}.log"),
                'maxBytes': self.logging.max_bytes,
                'backupCount': self.logging.backup_count,
                'encoding': 'utf-8'
            }

        return config

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    def to_dict(self) -> Dict[str, Any]:
        """Serializable summary, secrets hidden"""
        return {
            'environment': self.environment.value,
            'telegram': {
                'bot_token': self.telegram.bot_token[:10] + "...",
                'concurrent_updates': self.telegram.concurrent_updates
            },
            'ai_enabled': self.ai.enabled,
            'ai_model': self.ai.openai_model,
            'data_dir': str(self.storage.data_dir),
            'log_level': self.logging.level.value
        }


def load_config(env: Optional[Mapping[str, str]] = None) -> BotConfig:
    """Build the configuration from `env` (defaults to os.environ)"""
    return BotConfig(env)


__all__ = [
    'BotConfig',
    'load_config',
    'Environment',
    'LogLevel',
    'TelegramConfig',
    'AIConfig',
    'StorageConfig',
    'LoggingConfig'
]
