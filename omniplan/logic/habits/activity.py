"""Habit visibility and habit operations on a week.

Deletion is forward-only: a deleted habit keeps showing in every week whose
window ends before the deletion instant.
"""
import logging
from typing import List, Optional

from omniplan.domain.Habit import Habit
from omniplan.domain.Week import Week, WeekEditError
from omniplan.utilities.constants import MS_PER_DAY, STALE_HABIT_DAYS
from omniplan.utilities.dates import now_ms, parse_day_key, week_end_ms

logger = logging.getLogger(__name__)


def get_active_habits_for_week(habits: List[Habit], week_start_date: str) -> List[Habit]:
    end_ms = week_end_ms(parse_day_key(week_start_date))
    return [
        h for h in habits
        if (h.created_at or 0) <= end_ms and (h.deleted_at is None or h.deleted_at > end_ms)
    ]


def get_visible_habits(week: Week) -> List[Habit]:
    return [h for h in get_active_habits_for_week(week.habits, week.week_start_date) if not h.archived]


def add_habit(week: Week, name: str, now: Optional[int] = None) -> Week:
    name = (name or "").strip()
    if not name:
        raise ValueError("Habit name cannot be empty")
    now = now if now is not None else now_ms()
    habit = Habit(id=f"h-{now}", name=name, created_at=now, last_used_at=now, archived=False)
    return week.copy(habits=week.habits + [habit])


def toggle_habit(week: Week, habit_id: str, day_key: str, now: Optional[int] = None) -> Week:
    habit = week.find_habit(habit_id)
    if habit is None:
        raise WeekEditError(f"Habit {habit_id} not found in week {week.week_start_date}")
    week.day_plan(day_key)  # rejects days outside the week
    return week.with_habit(habit.toggled(day_key, now if now is not None else now_ms()))


def delete_habit(habit: Habit, now: Optional[int] = None) -> Habit:
    '''Marks the habit deleted as of now; history before that instant is untouched.'''
    return habit.deleted(now if now is not None else now_ms())


def delete_habit_from_week(week: Week, habit_id: str, now: Optional[int] = None) -> Week:
    habit = week.find_habit(habit_id)
    if habit is None:
        raise WeekEditError(f"Habit {habit_id} not found in week {week.week_start_date}")
    return week.with_habit(delete_habit(habit, now))


def archive_stale_habits(week: Week, now: Optional[int] = None) -> Week:
    """Archive habits not used for more than STALE_HABIT_DAYS.

    Returns the week unchanged (same object) when nothing is stale.
    """
    now = now if now is not None else now_ms()
    stale_limit = STALE_HABIT_DAYS * MS_PER_DAY
    stale_ids = {
        h.id for h in week.habits
        if not h.archived and h.last_used_at and now - h.last_used_at > stale_limit
    }
    if not stale_ids:
        return week
    logger.info(f"Archiving {len(stale_ids)} stale habit(s) in week {week.week_start_date}")
    return week.copy(habits=[h.copy(archived=True) if h.id in stale_ids else h for h in week.habits])
