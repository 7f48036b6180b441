"""Week domain entity: one ISO week of goals, daily plans, meetings, notes and habits."""
from typing import Dict, List, Optional

from omniplan.domain.DailyPlan import DailyPlan
from omniplan.domain.Habit import Habit
from omniplan.domain.Todo import Todo
from omniplan.utilities.dates import format_day_key, get_week_days, get_week_storage_key, parse_day_key


class WeekEditError(ValueError):
    """Raised when an edit targets a day, habit, todo or event the week does not have."""


class WeeklyGoals:
    def __init__(self, business: Optional[List[str]] = None, personal: Optional[List[str]] = None):
        self.business = business[:] if business else []
        self.personal = personal[:] if personal else []

    def copy(self, **changes) -> "WeeklyGoals":
        fields = {"business": self.business, "personal": self.personal}
        fields.update(changes)
        return WeeklyGoals(**fields)

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return WeeklyGoals(
            business=[str(g) for g in d.get("business") or []],
            personal=[str(g) for g in d.get("personal") or []],
        )

    def to_dict(self):
        return {"business": list(self.business), "personal": list(self.personal)}


class Week:
    def __init__(self, week_start_date: str, week_end_date: str, goals: Optional[WeeklyGoals] = None,
                 daily_plans: Optional[Dict[str, DailyPlan]] = None, meetings: Optional[List[Todo]] = None,
                 notes: str = "", habits: Optional[List[Habit]] = None,
                 created_at: int = 0, updated_at: int = 0):
        self.week_start_date = week_start_date
        self.week_end_date = week_end_date
        self.goals = goals or WeeklyGoals()
        self.daily_plans = dict(daily_plans) if daily_plans else {}
        self.meetings = meetings[:] if meetings else []
        self.notes = notes
        self.habits = habits[:] if habits else []
        self.created_at = created_at
        self.updated_at = updated_at

    @staticmethod
    def empty(day, now: int) -> "Week":
        '''Creates the empty week containing ``day``: 7 blank daily plans, no goals, no habits.'''
        days = get_week_days(day)
        return Week(
            week_start_date=format_day_key(days[0]),
            week_end_date=format_day_key(days[6]),
            daily_plans={format_day_key(d): DailyPlan() for d in days},
            created_at=now,
            updated_at=now,
        )

    @property
    def storage_key(self) -> str:
        return get_week_storage_key(parse_day_key(self.week_start_date))

    @property
    def day_keys(self) -> List[str]:
        return [format_day_key(d) for d in get_week_days(parse_day_key(self.week_start_date))]

    def day_plan(self, day_key: str) -> DailyPlan:
        try:
            return self.daily_plans[day_key]
        except KeyError:
            raise WeekEditError(f"Day {day_key} is not part of week {self.week_start_date}") from None

    def find_habit(self, habit_id: str) -> Optional[Habit]:
        for habit in self.habits:
            if habit.id == habit_id:
                return habit
        return None

    # --- Copy-on-write constructors ----------------------------------------
    def copy(self, **changes) -> "Week":
        fields = {
            "week_start_date": self.week_start_date,
            "week_end_date": self.week_end_date,
            "goals": self.goals,
            "daily_plans": self.daily_plans,
            "meetings": self.meetings,
            "notes": self.notes,
            "habits": self.habits,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
        fields.update(changes)
        return Week(**fields)

    def with_day_plan(self, day_key: str, plan: DailyPlan) -> "Week":
        plans = dict(self.daily_plans)
        plans[day_key] = plan
        return self.copy(daily_plans=plans)

    def with_habit(self, habit: Habit) -> "Week":
        '''Replaces the habit with the same id, or appends it if the week does not have it yet.'''
        habits = [habit if h.id == habit.id else h for h in self.habits]
        if not any(h.id == habit.id for h in self.habits):
            habits.append(habit)
        return self.copy(habits=habits)

    def __eq__(self, other):
        return isinstance(other, Week) and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return (f"Week {self.week_start_date}..{self.week_end_date} - "
                f"{len(self.habits)} habits - {sum(len(p.events) for p in self.daily_plans.values())} events")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Week from its JSON form.

        ``weekStartDate`` is required (ValueError otherwise). The 7-day invariant
        is restored on read: missing days get an empty plan and keys outside the
        week are dropped.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        start = parse_day_key(str(d.get("weekStartDate", "")))
        days = [format_day_key(day) for day in get_week_days(start)]
        raw_plans = d.get("dailyPlans") if isinstance(d.get("dailyPlans"), dict) else {}
        plans = {key: DailyPlan.from_dict(raw_plans[key]) if key in raw_plans else DailyPlan() for key in days}
        return Week(
            week_start_date=days[0],
            week_end_date=days[6],
            goals=WeeklyGoals.from_dict(d.get("goals")),
            daily_plans=plans,
            meetings=[Todo.from_dict(m) for m in d.get("meetings") or []],
            notes=d.get("notes") or "",
            habits=[Habit.from_dict(h) for h in d.get("habits") or []],
            created_at=d.get("createdAt") or 0,
            updated_at=d.get("updatedAt") or 0,
        )

    def to_dict(self):
        return {
            "weekStartDate": self.week_start_date,
            "weekEndDate": self.week_end_date,
            "goals": self.goals.to_dict(),
            "dailyPlans": {key: plan.to_dict() for key, plan in self.daily_plans.items()},
            "meetings": [m.to_dict() for m in self.meetings],
            "notes": self.notes,
            "habits": [h.to_dict() for h in self.habits],
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
