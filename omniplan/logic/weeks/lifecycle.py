"""Week record lifecycle: lazy creation, habit carry-forward, recurring events, month aggregation.

Every function here reads a week-key -> Week mapping (a WeekStore or a plain
dict) and never writes to it. A week built on demand is only kept once the
caller commits it through ``WeekStore.update_week``.
"""
import logging
import uuid
from collections import OrderedDict
from datetime import timedelta
from typing import Dict, List, Mapping, Optional

from omniplan.domain.CalendarEvent import CalendarEvent
from omniplan.domain.DailyPlan import DailyPlan
from omniplan.domain.Habit import Habit
from omniplan.domain.Week import Week
from omniplan.utilities.constants import LOOKBACK_WEEKS
from omniplan.utilities.dates import (
    as_date, format_day_key, get_month_range, get_week_days, get_week_start, get_week_storage_key, now_ms
)

logger = logging.getLogger(__name__)

# Namespace for identifiers of events copied into a new week
_EVENT_COPY_NAMESPACE = uuid.UUID("6f1c2a8e-3b7d-4c55-9a0e-5d2f7b9c4e11")


def _previous_weeks(day, weeks: Mapping[str, Week]):
    '''Yield the stored weeks before the week of ``day``, nearest first, within the lookback.'''
    monday = get_week_start(day)
    for i in range(1, LOOKBACK_WEEKS + 1):
        week = weeks.get(get_week_storage_key(monday - timedelta(weeks=i)))
        if week is not None:
            yield week


def carry_forward_habits(day, weeks: Mapping[str, Week]) -> List[Habit]:
    """Collect the habits a new week starting at ``day``'s Monday inherits.

    Scanning backward, deleted copies are skipped and the first (most recent)
    remaining occurrence of each habit id wins.
    """
    latest: Dict[str, Habit] = OrderedDict()
    for week in _previous_weeks(day, weeks):
        for habit in week.habits:
            if not habit.is_deleted and habit.id not in latest:
                latest[habit.id] = habit
    return [h.carried_forward() for h in latest.values()]


def _copied_event_id(event: CalendarEvent, day_key: str) -> str:
    return uuid.uuid5(_EVENT_COPY_NAMESPACE, f"{event.id}@{day_key}").hex


def propagate_recurring_events(day, weeks: Mapping[str, Week]) -> Dict[str, List[CalendarEvent]]:
    """Repeating events of the nearest earlier stored week, re-keyed onto the week of ``day``.

    Only that single week is used. Returns day key -> events for the new week.
    """
    new_days = [format_day_key(d) for d in get_week_days(day)]
    source = next(_previous_weeks(day, weeks), None)
    if source is None:
        return {}

    copied = {}
    for index, source_key in enumerate(source.day_keys):
        plan = source.daily_plans.get(source_key)
        if plan is None:
            continue
        target_key = new_days[index]
        events = [e.copy(id=_copied_event_id(e, target_key)) for e in plan.events if e.propagates]
        if events:
            copied[target_key] = events
    logger.debug(f"Propagating events from week {source.week_start_date} into {new_days[0]}")
    return copied


def create_empty_week(day, now: Optional[int] = None) -> Week:
    return Week.empty(day, now if now is not None else now_ms())


def get_or_create_week(day, weeks: Mapping[str, Week], now: Optional[int] = None) -> Week:
    """Return the week record containing ``day``, building it from earlier weeks when missing.

    An existing record is returned as stored. A new record gets the carried-forward
    habits and the recurring events of the nearest earlier week; it is not saved.
    """
    day = as_date(day)
    existing = weeks.get(get_week_storage_key(day))
    if existing is not None:
        return existing

    week = create_empty_week(day, now)
    week = week.copy(habits=carry_forward_habits(day, weeks))
    for day_key, events in propagate_recurring_events(day, weeks).items():
        week = week.with_day_plan(day_key, week.day_plan(day_key).copy(events=events))
    return week


def get_weeks_in_range(start, end, weeks: Mapping[str, Week], now: Optional[int] = None) -> List[Week]:
    """All week records overlapping [start, end], once each, in ascending order.

    Steps a week at a time from the Monday of ``start`` so weeks straddling either
    boundary are included.
    """
    result: List[Week] = []
    seen = set()
    current = get_week_start(start)
    end = as_date(end)
    while current <= end:
        week = get_or_create_week(current, weeks, now=now)
        if week.week_start_date not in seen:
            seen.add(week.week_start_date)
            result.append(week)
        current += timedelta(days=7)
    return result


def get_month_weeks(year: int, month: int, weeks: Mapping[str, Week], now: Optional[int] = None) -> List[Week]:
    first, last = get_month_range(year, month)
    return get_weeks_in_range(first, last, weeks, now=now)


def find_daily_plan(weeks: List[Week], day_key: str) -> Optional[DailyPlan]:
    for week in weeks:
        if day_key in week.daily_plans:
            return week.daily_plans[day_key]
    return None


def get_week_summary(week: Week) -> dict:
    plans = list(week.daily_plans.values())
    return {
        "weekStart": week.week_start_date,
        "weekEnd": week.week_end_date,
        "businessGoals": list(week.goals.business),
        "personalGoals": list(week.goals.personal),
        "totalTodos": sum(len(p.todos) for p in plans),
        "totalEvents": sum(len(p.events) for p in plans),
        "completedTodos": sum(1 for p in plans for t in p.todos if t.done),
    }
