"""Shared FastAPI dependencies: the process-wide week store and the configured AI provider."""
import logging
from typing import Optional

from fastapi import Depends

from omniplan.ai import AIProvider
from omniplan.infra.Settings_Repository import SettingsRepository
from omniplan.infra.Week_Store import WeekStore

logger = logging.getLogger(__name__)

_store: Optional[WeekStore] = None


def get_store() -> WeekStore:
    global _store
    if _store is None:
        _store = WeekStore.open()
        logger.info(f"Opened store at {_store.storage.path} ({len(_store)} weeks)")
    return _store


def get_settings_repository(store: WeekStore = Depends(get_store)) -> SettingsRepository:
    return SettingsRepository(store.storage)


def get_ai_provider(settings: SettingsRepository = Depends(get_settings_repository)) -> Optional[AIProvider]:
    return settings.get_provider()
