# services/ai/client.py

import logging
from typing import List, Optional, Sequence

from openai import AsyncOpenAI, OpenAIError

from config import AIConfig
from core.exceptions import AssistantError, AssistantUnavailableError
from models import Language, Message

logger = logging.getLogger(__name__)

SYSTEM_PROMPTS = {
    Language.EN: (
        "You are the assistant of Emo Improvement, a personal growth app. "
        "Help the user with reading, daily tasks, routines and goals. "
        "Be warm, concise and practical. Answer in English."
    ),
    Language.FA: (
        "تو دستیار اپلیکیشن Emo Improvement برای رشد فردی هستی. "
        "به کاربر در مطالعه، کارهای روزانه، روتین‌ها و اهداف کمک کن. "
        "گرم، کوتاه و کاربردی پاسخ بده. به زبان فارسی جواب بده."
    ),
}


class AssistantClient:
    """OpenAI chat completions behind a single `complete` call"""

    def __init__(self, ai_config: AIConfig, client: Optional[AsyncOpenAI] = None):
        self.config = ai_config
        self.client = client
        if self.client is None and ai_config.openai_api_key:
            self.client = AsyncOpenAI(
                api_key=ai_config.openai_api_key,
                base_url=ai_config.base_url,
                timeout=ai_config.request_timeout
            )
            logger.info(f"🤖 Assistant client ready (model {ai_config.openai_model})")
        elif self.client is None:
            logger.warning("⚠️ Assistant disabled (no OPENAI_API_KEY)")

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def build_messages(self, history: Sequence[Message], language: Language) -> List[dict]:
        messages = [{"role": "system", "content": SYSTEM_PROMPTS[Language(language)]}]
        messages.extend(message.to_dict() for message in history)
        return messages

    async def complete(self, history: Sequence[Message], language: Language = Language.FA) -> str:
        """Send the whole history, return the assistant's reply text"""
        if not self.enabled:
            raise AssistantUnavailableError("OPENAI_API_KEY is not configured")

        try:
            response = await self.client.chat.completions.create(
                model=self.config.openai_model,
                messages=self.build_messages(history, language),
                max_tokens=self.config.openai_max_tokens,
                temperature=self.config.temperature
            )
        except OpenAIError as e:
            raise AssistantError(f"OpenAI request failed: {e}") from e

        content = (response.choices[0].message.content or "").strip() if response.choices else ""
        if not content:
            raise AssistantError("Empty reply from the model")
        return content
