"""AI provider abstraction.

Add a provider by subclassing AIProvider, registering its id in AI_PROVIDERS
and adding a branch to ``omniplan.ai.create_provider``.
"""
from typing import Dict, List


class AIProviderError(RuntimeError):
    """A provider call failed (HTTP error, unusable reply, ...)."""


class ScheduleItem:
    def __init__(self, title: str, start: float, duration: float):
        self.title = title
        self.start = start  # decimal hour, 9.5 = 9:30 AM
        self.duration = duration

    def __eq__(self, other):
        return isinstance(other, ScheduleItem) and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.title} @ {self.start}h for {self.duration}h"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Validates one schedule entry from a model reply; raises ValueError when unusable.'''
        if not isinstance(data, dict):
            raise ValueError(f"Schedule item is not an object: {data!r}")
        title = str(data.get("title") or "").strip()
        try:
            start = float(data.get("start", data.get("startHour")))
            duration = float(data.get("duration", data.get("durationHours")))
        except (TypeError, ValueError):
            raise ValueError(f"Schedule item has no numeric start/duration: {data!r}") from None
        if not title or duration <= 0 or not 0 <= start < 24:
            raise ValueError(f"Schedule item out of range: {data!r}")
        return ScheduleItem(title, start, duration)

    def to_dict(self):
        return {"title": self.title, "start": self.start, "duration": self.duration}


class AIProvider:
    id = "none"

    def predict_daily_focus(self, past_themes: List[str], todo_texts: List[str]) -> str:
        '''Single most high-impact focus theme for a day.'''
        raise NotImplementedError

    def generate_schedule(self, todo_text: str) -> List[ScheduleItem]:
        '''Time blocks for a day built from its todo list.'''
        raise NotImplementedError

    def close(self) -> None:
        '''Release the HTTP client, if any.'''


AI_PROVIDERS: Dict[str, Dict[str, str]] = {
    "gemini": {
        "id": "gemini",
        "name": "Google Gemini",
        "description": "Free tier available. Good for general planning.",
        "apiKeyPlaceholder": "AIza...",
        "docsUrl": "https://aistudio.google.com/apikey",
    },
    "openai": {
        "id": "openai",
        "name": "OpenAI (GPT)",
        "description": "ChatGPT models. Requires paid API key.",
        "apiKeyPlaceholder": "sk-...",
        "docsUrl": "https://platform.openai.com/api-keys",
    },
    "anthropic": {
        "id": "anthropic",
        "name": "Anthropic (Claude)",
        "description": "Claude models. Requires API key.",
        "apiKeyPlaceholder": "sk-ant-...",
        "docsUrl": "https://console.anthropic.com/settings/keys",
    },
    "none": {
        "id": "none",
        "name": "None (Disabled)",
        "description": "AI features will be disabled.",
        "apiKeyPlaceholder": "",
        "docsUrl": "",
    },
}
