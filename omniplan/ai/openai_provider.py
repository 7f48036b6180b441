"""OpenAI (GPT) provider using the official SDK."""
from typing import List

from openai import OpenAI, OpenAIError

from omniplan.ai.parsing import clean_focus, parse_schedule
from omniplan.ai.types import AIProvider, AIProviderError, ScheduleItem
from omniplan.utilities.config import AI_TIMEOUT_SECONDS, OPENAI_MODEL
from omniplan.utilities.constants import (
    FOCUS_SYSTEM_PROMPT, FOCUS_USER_PROMPT, SCHEDULE_SYSTEM_PROMPT, SCHEDULE_USER_PROMPT
)


class OpenAIProvider(AIProvider):
    id = "openai"

    def __init__(self, api_key: str, model: str = OPENAI_MODEL, client: OpenAI = None):
        self.model = model
        self.client = client or OpenAI(api_key=api_key, timeout=AI_TIMEOUT_SECONDS)

    def _respond(self, instructions: str, prompt: str, temperature: float) -> str:
        try:
            response = self.client.responses.create(
                model=self.model,
                instructions=instructions,
                input=prompt,
                temperature=temperature,
            )
        except OpenAIError as e:
            raise AIProviderError(f"OpenAI API error: {e}") from e
        return (response.output_text or "").strip()

    def predict_daily_focus(self, past_themes: List[str], todo_texts: List[str]) -> str:
        prompt = FOCUS_USER_PROMPT.format(past_themes=", ".join(past_themes), todos=", ".join(todo_texts))
        return clean_focus(self._respond(FOCUS_SYSTEM_PROMPT, prompt, temperature=0.8))

    def generate_schedule(self, todo_text: str) -> List[ScheduleItem]:
        prompt = SCHEDULE_USER_PROMPT.format(todo_text=todo_text)
        return parse_schedule(self._respond(SCHEDULE_SYSTEM_PROMPT, prompt, temperature=0.7))

    def close(self) -> None:
        self.client.close()
