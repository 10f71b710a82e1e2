"""
Emo Improvement Bot - Services
State, navigation, assistant and helper services
"""

from .app_state import AppState, AppStateRegistry, MenuSummary
from .navigation import ViewRouter
from .ai_service import AssistantConversation
from .quotes import Quote, pick_quote

__all__ = [
    'AppState',
    'AppStateRegistry',
    'MenuSummary',
    'ViewRouter',
    'AssistantConversation',
    'Quote',
    'pick_quote'
]
