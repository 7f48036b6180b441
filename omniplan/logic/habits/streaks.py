"""Habit streak statistics over a window of dates."""
from datetime import date
from typing import Optional, Sequence

from omniplan.domain.Habit import Habit
from omniplan.domain.HabitStreak import HabitStreak
from omniplan.utilities.dates import format_day_key


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def calculate_habit_streak(habit: Habit, dates: Sequence[date], today: Optional[date] = None) -> HabitStreak:
    """Streak statistics for ``habit`` over ``dates`` (in order).

    ``current`` is the run of completed days ending at today when today is in
    the window, otherwise at the last date of the window.
    """
    day_keys = [format_day_key(d) for d in dates]
    if not day_keys:
        return HabitStreak()

    completions = [habit.is_done(key) for key in day_keys]
    total_days = sum(completions)

    longest = run = 0
    for done in completions:
        run = run + 1 if done else 0
        longest = max(longest, run)

    today_key = format_day_key(today or date.today())
    end_index = day_keys.index(today_key) if today_key in day_keys else len(day_keys) - 1
    current = 0
    for done in reversed(completions[:end_index + 1]):
        if not done:
            break
        current += 1

    return HabitStreak(
        current=current,
        longest=longest,
        total_days=total_days,
        percentage_complete=_round_half_up(total_days / len(day_keys) * 100),
    )
