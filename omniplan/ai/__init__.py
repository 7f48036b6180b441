"""AI focus and schedule suggestions.

The planner core receives a provider (or None) and always goes through
``predict_main_event`` / ``generate_schedule``, which turn a missing provider
or a failing one into fixed fallback values instead of exceptions.
"""
import logging
from typing import List, Optional

from omniplan.ai.anthropic_provider import AnthropicProvider
from omniplan.ai.gemini_provider import GeminiProvider
from omniplan.ai.openai_provider import OpenAIProvider
from omniplan.ai.types import AI_PROVIDERS, AIProvider, AIProviderError, ScheduleItem
from omniplan.utilities.constants import AI_ERROR_FOCUS, AI_NOT_CONFIGURED_FOCUS

logger = logging.getLogger(__name__)


def create_provider(provider_id: str, api_key: str) -> Optional[AIProvider]:
    '''Build the provider for a settings pair; None when disabled or missing a key.'''
    if provider_id == "none" or not api_key:
        return None
    if provider_id == "openai":
        return OpenAIProvider(api_key)
    if provider_id == "anthropic":
        return AnthropicProvider(api_key)
    if provider_id == "gemini":
        return GeminiProvider(api_key)
    logger.warning(f"Unknown AI provider '{provider_id}'; AI features disabled")
    return None


def predict_main_event(provider: Optional[AIProvider], past_themes: List[str], todo_texts: List[str]) -> str:
    if provider is None:
        return AI_NOT_CONFIGURED_FOCUS
    try:
        return provider.predict_daily_focus(past_themes, todo_texts)
    except Exception:
        logger.exception("AI prediction error")
        return AI_ERROR_FOCUS


def generate_schedule(provider: Optional[AIProvider], todo_text: str) -> List[ScheduleItem]:
    if provider is None:
        return []
    try:
        return provider.generate_schedule(todo_text)
    except Exception:
        logger.exception("AI schedule error")
        return []


__all__ = [
    'AI_PROVIDERS', 'AIProvider', 'AIProviderError', 'ScheduleItem',
    'create_provider', 'predict_main_event', 'generate_schedule',
]
