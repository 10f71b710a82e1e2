# core/exceptions.py
"""
Emo Improvement Bot - exceptions
"""


class EmoBotError(Exception):
    """Base error for the bot"""
    pass


class ConfigError(EmoBotError):
    """Missing or invalid configuration"""
    pass


class StorageError(EmoBotError):
    """The storage substrate could not be read or written"""
    pass


class AssistantError(EmoBotError):
    """The remote assistant call failed"""
    pass


class AssistantUnavailableError(AssistantError):
    """The assistant is not configured (no API key)"""
    pass
