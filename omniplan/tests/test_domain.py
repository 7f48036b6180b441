from datetime import date
import unittest

from omniplan.domain.CalendarEvent import CalendarEvent
from omniplan.domain.DailyPlan import DailyPlan
from omniplan.domain.Habit import Habit
from omniplan.domain.LifeGoals import LifeGoals
from omniplan.domain.Week import Week, WeekEditError


class TestWeek(unittest.TestCase):

    def test_from_dict_restores_seven_days(self):
        week = Week.from_dict({
            "weekStartDate": "2024-01-01",
            "dailyPlans": {
                "2024-01-02": {"focus": "Sales", "todos": [{"id": 1, "text": "Call", "done": True}]},
                "2023-12-31": {"focus": "Stray"},
            },
        })
        self.assertEqual(sorted(week.daily_plans), week.day_keys)
        self.assertEqual(week.week_end_date, "2024-01-07")
        self.assertEqual(week.daily_plans["2024-01-02"].focus, "Sales")
        self.assertTrue(week.daily_plans["2024-01-02"].todos[0].done)

    def test_from_dict_requires_start(self):
        with self.assertRaises(ValueError):
            Week.from_dict({"dailyPlans": {}})

    def test_storage_key(self):
        self.assertEqual(Week.empty(date(2024, 1, 4), 0).storage_key, "omni_week_2024-01-01")

    def test_day_plan_outside_week(self):
        with self.assertRaises(WeekEditError):
            Week.empty(date(2024, 1, 4), 0).day_plan("2024-01-08")

    def test_with_habit_replaces_or_appends(self):
        week = Week.empty(date(2024, 1, 1), 0).with_habit(Habit(id="h-1", name="Run"))
        week = week.with_habit(Habit(id="h-1", name="Run 5k"))
        week = week.with_habit(Habit(id="h-2", name="Read"))
        self.assertEqual([h.name for h in week.habits], ["Run 5k", "Read"])


class TestEntities(unittest.TestCase):

    def test_event_optional_fields_omitted(self):
        data = CalendarEvent(id="e-1", title="Sync").to_dict()
        self.assertNotIn("repeating", data)
        self.assertNotIn("description", data)
        self.assertTrue(CalendarEvent.from_dict(data).propagates)
        self.assertFalse(CalendarEvent.from_dict({"id": "e-2", "repeating": False}).propagates)

    def test_daily_plan_without_focus(self):
        plan = DailyPlan.from_dict({"todos": [], "notes": "", "events": []})
        self.assertIsNone(plan.focus)
        self.assertFalse(plan.has_focus())
        self.assertNotIn("focus", plan.to_dict())

    def test_habit_carried_forward_keeps_identity(self):
        habit = Habit(id="h-1", name="Run", completions={"2024-01-01": True}, created_at=5, archived=True)
        carried = habit.carried_forward()
        self.assertEqual(carried.id, "h-1")
        self.assertEqual(carried.completions, {})
        self.assertTrue(carried.archived)
        self.assertEqual(habit.completions, {"2024-01-01": True})

    def test_life_goals_unknown_horizon(self):
        with self.assertRaises(ValueError):
            LifeGoals().with_entry("7", "x", "y")


if __name__ == '__main__':
    unittest.main()
