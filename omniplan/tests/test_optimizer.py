from datetime import date
import unittest

from omniplan.ai import AIProvider, AIProviderError, ScheduleItem
from omniplan.domain.Week import Week
from omniplan.logic.planning.editing import add_todo, set_day_notes, set_focus
from omniplan.logic.planning.optimizer import optimize_week_focus, past_themes, schedule_day_from_todos
from omniplan.utilities.constants import AI_ERROR_FOCUS, AI_NOT_CONFIGURED_FOCUS

NOW = 1_700_000_000_000


class RecordingProvider(AIProvider):
    id = "fake"

    def __init__(self, schedule=None):
        self.calls = []
        self.schedule = schedule or []

    def predict_daily_focus(self, past_themes, todo_texts):
        self.calls.append((list(past_themes), list(todo_texts)))
        return f"Focus {len(self.calls)}"

    def generate_schedule(self, todo_text):
        self.calls.append(todo_text)
        return list(self.schedule)


class FailingProvider(AIProvider):
    def predict_daily_focus(self, past_themes, todo_texts):
        raise AIProviderError("quota exceeded")

    def generate_schedule(self, todo_text):
        raise AIProviderError("quota exceeded")


class TestOptimizeWeekFocus(unittest.TestCase):

    def setUp(self):
        self.week = Week.empty(date(2024, 1, 1), NOW)

    def test_fills_only_blank_days_in_order(self):
        week = set_focus(self.week, "2024-01-02", "Already set")
        week = add_todo(week, "2024-01-01", "Budget review", todo_id="t-1")
        provider = RecordingProvider()
        result = optimize_week_focus(week, provider)

        self.assertEqual(len(provider.calls), 6)
        self.assertEqual(provider.calls[0][1], ["Budget review"])
        self.assertEqual(result.daily_plans["2024-01-01"].focus, "Focus 1")
        self.assertEqual(result.daily_plans["2024-01-02"].focus, "Already set")
        self.assertEqual(result.daily_plans["2024-01-07"].focus, "Focus 6")
        self.assertEqual(week.daily_plans["2024-01-01"].focus, "")

    def test_past_themes_from_day_notes(self):
        week = set_day_notes(self.week, "2024-01-01", "Sales push")
        week = set_day_notes(week, "2024-01-03", "Hiring")
        self.assertEqual(past_themes(week), ["Sales push", "Hiring"])
        provider = RecordingProvider()
        optimize_week_focus(week, provider)
        self.assertEqual(provider.calls[0][0], ["Sales push", "Hiring"])

    def test_without_provider(self):
        result = optimize_week_focus(self.week, None)
        self.assertTrue(all(p.focus == AI_NOT_CONFIGURED_FOCUS for p in result.daily_plans.values()))

    def test_failures_do_not_abort(self):
        result = optimize_week_focus(self.week, FailingProvider())
        self.assertTrue(all(p.focus == AI_ERROR_FOCUS for p in result.daily_plans.values()))


class TestScheduleDay(unittest.TestCase):

    def setUp(self):
        week = Week.empty(date(2024, 1, 1), NOW)
        week = add_todo(week, "2024-01-02", "Write memo", todo_id="t-1")
        self.week = add_todo(week, "2024-01-02", "Call bank", todo_id="t-2")

    def test_items_become_events(self):
        provider = RecordingProvider(schedule=[
            ScheduleItem("Write memo", 9, 1.5),
            ScheduleItem("Call bank", 10.6, 0.5),
            ScheduleItem("Late", 23.9, 1),
        ])
        result = schedule_day_from_todos(self.week, "2024-01-02", provider)
        events = result.daily_plans["2024-01-02"].events
        self.assertEqual(provider.calls, ["Write memo, Call bank"])
        self.assertEqual([(e.title, e.start_hour) for e in events], [("Write memo", 9), ("Call bank", 10.5)])
        self.assertTrue(all(e.repeating is False for e in events))

    def test_no_todos_no_call(self):
        provider = RecordingProvider(schedule=[ScheduleItem("X", 9, 1)])
        result = schedule_day_from_todos(self.week, "2024-01-03", provider)
        self.assertIs(result, self.week)
        self.assertEqual(provider.calls, [])

    def test_failure_leaves_week_unchanged(self):
        self.assertIs(schedule_day_from_todos(self.week, "2024-01-02", FailingProvider()), self.week)


if __name__ == '__main__':
    unittest.main()
