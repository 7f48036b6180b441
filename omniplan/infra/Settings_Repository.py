import logging
import threading
from typing import Optional, Tuple

from pydantic import ValidationError

from omniplan.ai import AIProvider, create_provider
from omniplan.infra.Local_Storage import LocalStorage
from omniplan.utilities import config
from omniplan.utilities.constants import SLOT_AI_SETTINGS
from omniplan.utilities.validators import AISettings

logger = logging.getLogger(__name__)

_ENV_KEYS = {
    "gemini": lambda: config.GEMINI_API_KEY,
    "openai": lambda: config.OPENAI_API_KEY,
    "anthropic": lambda: config.ANTHROPIC_API_KEY,
}

# One live provider per process, rebuilt when the settings change
_provider_lock = threading.Lock()
_provider: Optional[AIProvider] = None
_provider_settings: Optional[Tuple[str, str]] = None


def settings_from_env() -> AISettings:
    """AI settings implied by the environment.

    An explicit AI_PROVIDER wins; otherwise the first key found selects its
    provider (Gemini first, so a legacy API_KEY keeps working).
    """
    if config.AI_PROVIDER == "none":
        return AISettings()
    if config.AI_PROVIDER in _ENV_KEYS:
        return AISettings(provider=config.AI_PROVIDER, api_key=_ENV_KEYS[config.AI_PROVIDER]())
    if config.AI_PROVIDER:
        logger.warning(f"Ignoring unknown AI_PROVIDER '{config.AI_PROVIDER}'")
    for provider, key in _ENV_KEYS.items():
        if key():
            return AISettings(provider=provider, api_key=key())
    return AISettings()


class SettingsRepository:
    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def load_ai_settings(self) -> AISettings:
        '''Persisted settings when present and valid, else the environment's.'''
        raw = self.storage.get_item(SLOT_AI_SETTINGS)
        if raw is not None:
            try:
                return AISettings.model_validate(raw)
            except ValidationError as e:
                logger.error(f"Stored AI settings are invalid, falling back to environment: {e}")
        return settings_from_env()

    def save_ai_settings(self, settings: AISettings) -> AISettings:
        self.storage.set_item(SLOT_AI_SETTINGS, settings.model_dump(by_alias=True))
        logger.info(f"AI provider set to {settings.provider}")
        return settings

    def get_provider(self) -> Optional[AIProvider]:
        '''Provider for the current settings, reused until they change.'''
        global _provider, _provider_settings
        settings = self.load_ai_settings()
        current = (settings.provider, settings.api_key)
        with _provider_lock:
            if current != _provider_settings:
                if _provider is not None:
                    _provider.close()
                _provider = create_provider(*current)
                _provider_settings = current
            return _provider
