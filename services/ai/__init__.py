from .client import AssistantClient, SYSTEM_PROMPTS

__all__ = ['AssistantClient', 'SYSTEM_PROMPTS']
