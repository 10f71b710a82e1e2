from .exceptions import (
    EmoBotError,
    ConfigError,
    StorageError,
    AssistantError,
    AssistantUnavailableError
)

__all__ = [
    'EmoBotError',
    'ConfigError',
    'StorageError',
    'AssistantError',
    'AssistantUnavailableError'
]
