"""Anthropic (Claude) provider over the Messages REST API."""
from typing import List

import httpx

from omniplan.ai.parsing import clean_focus, parse_schedule
from omniplan.ai.types import AIProvider, AIProviderError, ScheduleItem
from omniplan.utilities.config import AI_TIMEOUT_SECONDS, ANTHROPIC_MODEL
from omniplan.utilities.constants import (
    FOCUS_SYSTEM_PROMPT, FOCUS_USER_PROMPT, SCHEDULE_SYSTEM_PROMPT, SCHEDULE_USER_PROMPT
)

ANTHROPIC_API_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"


class AnthropicProvider(AIProvider):
    id = "anthropic"

    def __init__(self, api_key: str, model: str = ANTHROPIC_MODEL, client: httpx.Client = None):
        self.api_key = api_key
        self.model = model
        self.client = client or httpx.Client(timeout=AI_TIMEOUT_SECONDS)

    def _create_message(self, system: str, prompt: str) -> str:
        try:
            response = self.client.post(
                ANTHROPIC_API_URL,
                headers={
                    "x-api-key": self.api_key,
                    "anthropic-version": ANTHROPIC_VERSION,
                    "content-type": "application/json",
                },
                json={
                    "model": self.model,
                    "max_tokens": 1024,
                    "system": system,
                    "messages": [{"role": "user", "content": prompt}],
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise AIProviderError(f"Anthropic API error: {e.response.status_code} - {e.response.text}") from e
        except httpx.HTTPError as e:
            raise AIProviderError(f"Anthropic API request failed: {e}") from e

        blocks = response.json().get("content") or []
        text = next((b.get("text", "") for b in blocks if b.get("type") == "text"), "")
        return text.strip()

    def predict_daily_focus(self, past_themes: List[str], todo_texts: List[str]) -> str:
        prompt = FOCUS_USER_PROMPT.format(past_themes=", ".join(past_themes), todos=", ".join(todo_texts))
        return clean_focus(self._create_message(FOCUS_SYSTEM_PROMPT, prompt))

    def generate_schedule(self, todo_text: str) -> List[ScheduleItem]:
        prompt = SCHEDULE_USER_PROMPT.format(todo_text=todo_text)
        return parse_schedule(self._create_message(SCHEDULE_SYSTEM_PROMPT, prompt))

    def close(self) -> None:
        self.client.close()
