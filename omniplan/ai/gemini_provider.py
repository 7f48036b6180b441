"""Google Gemini provider over the generateContent REST API."""
from typing import List

import httpx

from omniplan.ai.parsing import clean_focus, parse_schedule
from omniplan.ai.types import AIProvider, AIProviderError, ScheduleItem
from omniplan.utilities.config import AI_TIMEOUT_SECONDS, GEMINI_MODEL
from omniplan.utilities.constants import (
    FOCUS_SYSTEM_PROMPT, FOCUS_USER_PROMPT, SCHEDULE_SYSTEM_PROMPT, SCHEDULE_USER_PROMPT
)

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class GeminiProvider(AIProvider):
    id = "gemini"

    def __init__(self, api_key: str, model: str = GEMINI_MODEL, client: httpx.Client = None):
        self.api_key = api_key
        self.model = model
        self.client = client or httpx.Client(timeout=AI_TIMEOUT_SECONDS)

    def _generate(self, system: str, prompt: str, temperature: float) -> str:
        try:
            response = self.client.post(
                GEMINI_API_URL.format(model=self.model),
                headers={"x-goog-api-key": self.api_key},
                json={
                    "systemInstruction": {"parts": [{"text": system}]},
                    "contents": [{"parts": [{"text": prompt}]}],
                    "generationConfig": {"temperature": temperature},
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise AIProviderError(f"Gemini API error: {e.response.status_code} - {e.response.text}") from e
        except httpx.HTTPError as e:
            raise AIProviderError(f"Gemini API request failed: {e}") from e

        candidates = response.json().get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(p.get("text", "") for p in parts).strip()

    def predict_daily_focus(self, past_themes: List[str], todo_texts: List[str]) -> str:
        prompt = FOCUS_USER_PROMPT.format(past_themes=", ".join(past_themes), todos=", ".join(todo_texts))
        return clean_focus(self._generate(FOCUS_SYSTEM_PROMPT, prompt, temperature=0.8))

    def generate_schedule(self, todo_text: str) -> List[ScheduleItem]:
        prompt = SCHEDULE_USER_PROMPT.format(todo_text=todo_text)
        return parse_schedule(self._generate(SCHEDULE_SYSTEM_PROMPT, prompt, temperature=0.7))

    def close(self) -> None:
        self.client.close()
