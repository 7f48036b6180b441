"""Date and week key helpers.

Weeks are Monday-anchored (ISO weekday numbering). A day is identified by its
``YYYY-MM-DD`` day key and a week by the storage key of its Monday.
"""
import calendar
import time
from datetime import date, datetime, timedelta
from typing import List, Tuple

from omniplan.utilities.constants import (
    DAY_KEY_FORMAT, END_HOUR, MS_PER_DAY, START_HOUR, STEP, WEEK_KEY_PREFIX
)


def as_date(value) -> date:
    '''Reduce a date or datetime to its calendar date.'''
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date, got {type(value).__name__}")


def format_day_key(value) -> str:
    return as_date(value).strftime(DAY_KEY_FORMAT)


def parse_day_key(day_key: str) -> date:
    '''Parse a YYYY-MM-DD key; raises ValueError on anything else.'''
    return datetime.strptime(day_key, DAY_KEY_FORMAT).date()


def get_week_start(value) -> date:
    d = as_date(value)
    return d - timedelta(days=d.isoweekday() - 1)


def get_week_days(value) -> List[date]:
    monday = get_week_start(value)
    return [monday + timedelta(days=i) for i in range(7)]


def get_week_storage_key(value) -> str:
    return f"{WEEK_KEY_PREFIX}_{format_day_key(get_week_start(value))}"


def get_month_range(year: int, month: int) -> Tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def format_hour(hour: float) -> str:
    '''Render a decimal hour (e.g. 13.5) as a 12h clock label ("1:30 PM").'''
    h = int(hour)
    minutes = '30' if hour % 1 == 0.5 else '00'
    ampm = 'PM' if 12 <= h < 24 else 'AM'
    h12 = h % 12 or 12
    return f"{h12}:{minutes} {ampm}"


def generate_time_slots() -> List[float]:
    slots = []
    hour = START_HOUR
    while hour < END_HOUR:
        slots.append(hour)
        hour += STEP
    return slots


def now_ms() -> int:
    return int(time.time() * 1000)


def local_midnight_ms(value) -> int:
    '''Epoch milliseconds of local midnight at the start of the given day.'''
    midnight = datetime.combine(as_date(value), datetime.min.time())
    return int(midnight.timestamp() * 1000)


def week_end_ms(week_start) -> int:
    '''Last millisecond of the 7-day window starting at local midnight of week_start.'''
    return local_midnight_ms(week_start) + 7 * MS_PER_DAY - 1
