"""AI-assisted planning: daily focus themes for a week and schedules from a day's todos."""
import logging
from typing import List, Optional
from uuid import uuid4

from omniplan.ai import AIProvider, generate_schedule, predict_main_event
from omniplan.domain.CalendarEvent import CalendarEvent
from omniplan.domain.Week import Week
from omniplan.utilities.constants import DEFAULT_EVENT_COLOR, END_HOUR, PAST_THEMES_LIMIT, STEP

logger = logging.getLogger(__name__)


def past_themes(week: Week) -> List[str]:
    '''The latest non-empty day notes of the week, in day order.'''
    notes = [week.daily_plans[key].notes for key in week.day_keys if week.daily_plans[key].notes]
    return notes[-PAST_THEMES_LIMIT:]


def optimize_week_focus(week: Week, provider: Optional[AIProvider]) -> Week:
    """Fill every blank day focus of the week with an AI prediction.

    Days are processed one at a time, Monday first. Days that already have a
    focus are left alone. Failures come back as the facade's fallback text, so
    the pass always completes.
    """
    themes = past_themes(week)
    for day_key in week.day_keys:
        plan = week.day_plan(day_key)
        if plan.has_focus():
            continue
        prediction = predict_main_event(provider, themes, [t.text for t in plan.todos])
        week = week.with_day_plan(day_key, plan.copy(focus=prediction))
        logger.debug(f"Focus for {day_key}: {prediction}")
    return week


def _snap_to_grid(hour: float) -> float:
    return round(hour / STEP) * STEP


def schedule_day_from_todos(week: Week, day_key: str, provider: Optional[AIProvider]) -> Week:
    """Append the AI schedule for a day's todos to that day as non-repeating events.

    Start hours are snapped to the half-hour grid; items that end up outside
    the day are skipped. Returns the week unchanged when there is nothing to add.
    """
    plan = week.day_plan(day_key)
    todo_text = ", ".join(t.text for t in plan.todos if t.text.strip())
    if not todo_text:
        return week

    events = []
    for item in generate_schedule(provider, todo_text):
        start = _snap_to_grid(item.start)
        if not 0 <= start < END_HOUR:
            logger.warning(f"Skipping schedule item outside the day: {item}")
            continue
        events.append(CalendarEvent(
            id=f"e-{uuid4().hex[:12]}",
            title=item.title,
            start_hour=start,
            duration=item.duration,
            color=DEFAULT_EVENT_COLOR,
            repeating=False,
        ))
    if not events:
        return week
    logger.info(f"Scheduled {len(events)} events on {day_key}")
    return week.with_day_plan(day_key, plan.copy(events=plan.events + events))
