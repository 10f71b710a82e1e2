"""
Assistant conversation: message history with a single in-flight call
"""

import logging
from contextlib import contextmanager
from typing import Optional, Tuple

from core.exceptions import AssistantError
from models import Language, Message, Role
from services.ai.client import AssistantClient

logger = logging.getLogger(__name__)


class AssistantConversation:
    """Ordered chat history for one user.

    At most one remote call is outstanding. A send that arrives while a call
    is in flight, or with blank text, is dropped (not queued) and returns None.
    A reply that arrives after `reset` belongs to the old history and is
    discarded.
    """

    def __init__(self, client: AssistantClient):
        self.client = client
        self.messages: Tuple[Message, ...] = ()
        self.in_flight = False
        self._generation = 0

    @contextmanager
    def _in_flight(self):
        self.in_flight = True
        try:
            yield
        finally:
            self.in_flight = False

    async def send(self, text: str, language: Language = Language.FA) -> Optional[Message]:
        if not text or not text.strip():
            return None
        if self.in_flight:
            logger.info("⏳ Assistant call already in flight, message dropped")
            return None

        generation = self._generation
        self.messages = self.messages + (Message(Role.USER, text),)
        with self._in_flight():
            try:
                content = await self.client.complete(self.messages, language)
            except AssistantError:
                raise
            except Exception as e:
                raise AssistantError(f"Assistant call failed: {e}") from e

        if generation != self._generation:
            logger.info("🗑️ Conversation was reset during the call, reply discarded")
            return None

        reply = Message(Role.ASSISTANT, content)
        self.messages = self.messages + (reply,)
        return reply

    def reset(self) -> None:
        """Clear the history; an outstanding call keeps the gate until it returns"""
        self.messages = ()
        self._generation += 1
