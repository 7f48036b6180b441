"""
Input validation schemas using Pydantic: API request bodies, AI settings and
the two accepted backup file shapes.
"""
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

ProviderId = Literal["gemini", "openai", "anthropic", "none"]


class AISettings(BaseModel):
    """Schema for the persisted AI provider choice."""
    provider: ProviderId = "none"
    api_key: str = Field(default="", alias="apiKey")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('api_key')
    @classmethod
    def strip_key(cls, v):
        return v.strip()

    def masked(self) -> dict:
        '''Settings safe to return over the API (key reduced to its last 4 characters).'''
        hint = f"...{self.api_key[-4:]}" if len(self.api_key) > 4 else ""
        return {"provider": self.provider, "apiKeyHint": hint, "configured": bool(self.api_key)}


# --- Backup shapes -------------------------------------------------------------

class BackupPayload(BaseModel):
    """The ``data`` object of a current (2.0) backup; absent keys default to empty."""
    all_weeks: Dict[str, Dict[str, Any]] = Field(default_factory=dict, alias="allWeeks")
    emails: List[Dict[str, Any]] = Field(default_factory=list)
    life_goals: Dict[str, Any] = Field(default_factory=dict, alias="lifeGoals")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator('all_weeks', 'emails', 'life_goals', mode='before')
    @classmethod
    def null_is_empty(cls, v, info):
        if v is None:
            return [] if info.field_name == 'emails' else {}
        return v


class CurrentBackup(BaseModel):
    """``{version, exportDate, data: {...}}``"""
    kind: Literal["current"] = "current"
    version: Optional[str] = None
    export_date: Optional[str] = Field(default=None, alias="exportDate")
    data: BackupPayload

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LegacyBackup(BackupPayload):
    """Older files: the collections sit at the top level beside ``version``/``timestamp``."""
    kind: Literal["legacy"] = "legacy"
    version: Optional[str] = None
    timestamp: Optional[str] = None


BackupFile = Union[CurrentBackup, LegacyBackup]


# --- API request bodies ----------------------------------------------------------

class WeekInput(BaseModel):
    """A full week record in its JSON form (camelCase keys)."""
    week: Dict[str, Any]


class HabitCreateInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        if not v.strip():
            raise ValueError('Habit name cannot be empty')
        return v.strip()


class HabitToggleInput(BaseModel):
    day_key: str = Field(..., alias="dayKey", pattern=r'^\d{4}-\d{2}-\d{2}$')

    model_config = ConfigDict(populate_by_name=True)


class EventInput(BaseModel):
    """Create (no id) or edit (id given) a calendar event."""
    id: Optional[Union[str, int]] = None
    title: str = ""
    start_hour: float = Field(9, alias="startHour", ge=0, lt=24)
    duration: float = Field(1, gt=0, le=24)
    repeating: Optional[bool] = None
    color: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('title')
    @classmethod
    def strip_title(cls, v):
        return v.strip()


class FocusInput(BaseModel):
    focus: str = Field("", max_length=500)


class TodoInput(BaseModel):
    text: str = Field("", max_length=2000)


class GoalsInput(BaseModel):
    business: Optional[List[str]] = None
    personal: Optional[List[str]] = None

    @field_validator('business', 'personal')
    @classmethod
    def strip_goals(cls, v):
        return [g.strip() for g in v] if v is not None else None


class NotesInput(BaseModel):
    notes: str = ""
