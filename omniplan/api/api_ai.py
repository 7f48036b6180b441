from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends

from omniplan.ai import AI_PROVIDERS, AIProvider
from omniplan.api.dependencies import get_ai_provider, get_settings_repository, get_store
from omniplan.infra.Settings_Repository import SettingsRepository
from omniplan.infra.Week_Store import WeekStore
from omniplan.logic.planning.optimizer import optimize_week_focus, schedule_day_from_todos
from omniplan.logic.weeks.lifecycle import get_or_create_week
from omniplan.utilities.validators import AISettings


# === FastAPI Endpoints ===
router = APIRouter(prefix="/api")


@router.post("/weeks/{day}/optimize")
def optimize_week(day: date, store: WeekStore = Depends(get_store),
                  provider: Optional[AIProvider] = Depends(get_ai_provider)):
    """Fill the blank day focus themes of the week and save it."""
    week = optimize_week_focus(get_or_create_week(day, store), provider)
    stored = store.update_week(week.storage_key, week)
    return {"weekKey": stored.storage_key, "week": stored.to_dict()}


@router.post("/weeks/{day}/schedule/{day_key}")
def schedule_day(day: date, day_key: str, store: WeekStore = Depends(get_store),
                 provider: Optional[AIProvider] = Depends(get_ai_provider)):
    """Turn the day's todos into time blocks on that day."""
    week = get_or_create_week(day, store)
    scheduled = schedule_day_from_todos(week, day_key, provider)
    if scheduled is not week:
        week = store.update_week(scheduled.storage_key, scheduled)
    return {"weekKey": week.storage_key, "week": week.to_dict()}


# === AI settings ===
@router.get("/settings/ai/providers")
def list_providers():
    return list(AI_PROVIDERS.values())


@router.get("/settings/ai")
def read_ai_settings(settings: SettingsRepository = Depends(get_settings_repository)):
    return settings.load_ai_settings().masked()


@router.put("/settings/ai")
def write_ai_settings(payload: AISettings, settings: SettingsRepository = Depends(get_settings_repository)):
    return settings.save_ai_settings(payload).masked()
