from typing import Final

DAY_KEY_FORMAT: Final[str] = "%Y-%m-%d"
DAYS: Final[list[str]] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTHS: Final[list[str]] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Calendar grid (decimal hours)
START_HOUR: Final[float] = 0
END_HOUR: Final[float] = 24
STEP: Final[float] = 0.5

# Week lifecycle
WEEK_KEY_PREFIX: Final[str] = "omni_week"
LOOKBACK_WEEKS: Final[int] = 520  # ~10 years
STALE_HABIT_DAYS: Final[int] = 14
MS_PER_DAY: Final[int] = 24 * 60 * 60 * 1000

# Persistence slots
SLOT_ALL_WEEKS: Final[str] = "omni_all_weeks"
SLOT_EMAILS: Final[str] = "omni_emails"
SLOT_LIFE_GOALS: Final[str] = "omni_lifegoals"
SLOT_AI_SETTINGS: Final[str] = "omni_ai_settings"

BACKUP_VERSION: Final[str] = "2.0"

DEFAULT_EVENT_TITLE: Final[str] = "New Session"
DEFAULT_EVENT_COLOR: Final[str] = "bg-blue-50 border-blue-200 text-blue-700 shadow-sm"

# AI sentinels
AI_NOT_CONFIGURED_FOCUS: Final[str] = "Configure AI in Settings to enable this"
AI_ERROR_FOCUS: Final[str] = "AI error — check your API key in Settings"
AI_EMPTY_FOCUS: Final[str] = "Deep Work Session"
PAST_THEMES_LIMIT: Final[int] = 15

FOCUS_SYSTEM_PROMPT: Final[str] = (
    "You are an executive performance coach. Return ONLY a short (max 60 chars) "
    "daily focus theme. No explanation or quotes."
)
FOCUS_USER_PROMPT: Final[str] = (
    "Past Themes: {past_themes}\n"
    "Current Tasks: {todos}\n\n"
    "Predict the single most high-impact focus for today."
)
SCHEDULE_SYSTEM_PROMPT: Final[str] = (
    "You are a scheduling assistant. Return ONLY a raw JSON array. "
    "No markdown, no backticks, no explanation."
)
SCHEDULE_USER_PROMPT: Final[str] = (
    """
Create a realistic schedule for today starting at 9 AM for these tasks: "{todo_text}"

Each item: {{"title": string, "start": number (decimal hour), "duration": number (hours)}}
Example output format:
[{{"title": "Morning Coffee & Plan", "start": 9, "duration": 0.5}}, {{"title": "Work Block", "start": 9.5, "duration": 2}}]
    """
)

WELCOME_EMAIL: Final[dict] = {
    "id": 1,
    "provider": "internal",
    "sender": "OmniPlan Core",
    "subject": "Executive System Ready",
    "preview": "Your dashboard is ready...",
    "body": (
        "Welcome to OmniPlan!\n\n"
        "Your weekly planner, monthly overview, and life vision board are now active.\n\n"
        "Use the 'AI Optimize Week' feature to automatically generate focus themes "
        "based on your historical data and current tasks.\n\n"
        "Best,\nOmniPlan Team"
    ),
    "time": "09:00 AM",
    "read": False,
}
