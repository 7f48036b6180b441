"""Copy-on-write edits of a week's goals, notes, todos, meetings and events.

Each operation returns a new Week and leaves its argument untouched; the caller
commits the result through the store. Todo operations target a day's todos, or
the weekly meetings list when ``day_key`` is None. Ids match by their string
form, so ids from older numeric records can be addressed from a URL.
"""
from typing import Callable, List, Optional
from uuid import uuid4

from omniplan.domain.CalendarEvent import CalendarEvent, EventId
from omniplan.domain.Todo import Todo, TodoId
from omniplan.domain.Week import Week, WeekEditError
from omniplan.utilities.constants import DEFAULT_EVENT_COLOR, DEFAULT_EVENT_TITLE, END_HOUR, START_HOUR, STEP
from omniplan.utilities.dates import generate_time_slots


def _with_todos(week: Week, day_key: Optional[str], change: Callable[[List[Todo]], List[Todo]]) -> Week:
    if day_key is None:
        return week.copy(meetings=change(list(week.meetings)))
    plan = week.day_plan(day_key)
    return week.with_day_plan(day_key, plan.copy(todos=change(list(plan.todos))))


def _require_todo(todos: List[Todo], todo_id: TodoId) -> int:
    for index, todo in enumerate(todos):
        if str(todo.id) == str(todo_id):
            return index
    raise WeekEditError(f"Todo {todo_id} not found")


def add_todo(week: Week, day_key: Optional[str], text: str, todo_id: Optional[TodoId] = None) -> Week:
    prefix = "m" if day_key is None else "t"
    todo = Todo(id=todo_id if todo_id is not None else f"{prefix}-{uuid4().hex[:12]}", text=text)
    return _with_todos(week, day_key, lambda todos: todos + [todo])


def update_todo(week: Week, day_key: Optional[str], todo_id: TodoId, text: str) -> Week:
    def change(todos):
        index = _require_todo(todos, todo_id)
        todos[index] = todos[index].copy(text=text)
        return todos
    return _with_todos(week, day_key, change)


def toggle_todo(week: Week, day_key: Optional[str], todo_id: TodoId) -> Week:
    def change(todos):
        index = _require_todo(todos, todo_id)
        todos[index] = todos[index].copy(done=not todos[index].done)
        return todos
    return _with_todos(week, day_key, change)


def remove_todo(week: Week, day_key: Optional[str], todo_id: TodoId) -> Week:
    def change(todos):
        index = _require_todo(todos, todo_id)
        return todos[:index] + todos[index + 1:]
    return _with_todos(week, day_key, change)


def set_focus(week: Week, day_key: str, focus: str) -> Week:
    return week.with_day_plan(day_key, week.day_plan(day_key).copy(focus=focus))


def set_day_notes(week: Week, day_key: str, notes: str) -> Week:
    return week.with_day_plan(day_key, week.day_plan(day_key).copy(notes=notes))


def set_week_notes(week: Week, notes: str) -> Week:
    return week.copy(notes=notes)


def set_goals(week: Week, business: Optional[List[str]] = None, personal: Optional[List[str]] = None) -> Week:
    changes = {}
    if business is not None:
        changes["business"] = list(business)
    if personal is not None:
        changes["personal"] = list(personal)
    return week.copy(goals=week.goals.copy(**changes))


def _check_event_times(start_hour: float, duration: float) -> None:
    if start_hour not in generate_time_slots():
        raise ValueError(
            f"Start hour {start_hour} must be a multiple of {STEP} between {START_HOUR} and {END_HOUR}"
        )
    if duration <= 0:
        raise ValueError(f"Duration must be positive, got {duration}")


def save_event(week: Week, day_key: str, title: str = "", start_hour: float = 9, duration: float = 1,
               event_id: Optional[EventId] = None, repeating: Optional[bool] = None,
               color: Optional[str] = None, description: Optional[str] = None) -> Week:
    """Create an event (``event_id`` None) or edit an existing one on ``day_key``.

    A new event without an explicit ``repeating`` flag does not repeat; an edit
    without one keeps the stored flag. Blank titles become "New Session".
    """
    _check_event_times(start_hour, duration)
    plan = week.day_plan(day_key)
    events = list(plan.events)

    if event_id is None:
        event = CalendarEvent(
            id=f"e-{uuid4().hex[:12]}",
            title=title or DEFAULT_EVENT_TITLE,
            start_hour=start_hour,
            duration=duration,
            color=color or DEFAULT_EVENT_COLOR,
            description=description,
            repeating=bool(repeating),
        )
        events.append(event)
    else:
        index = next((i for i, e in enumerate(events) if str(e.id) == str(event_id)), None)
        if index is None:
            raise WeekEditError(f"Event {event_id} not found on {day_key}")
        existing = events[index]
        events[index] = existing.copy(
            title=title or DEFAULT_EVENT_TITLE,
            start_hour=start_hour,
            duration=duration,
            color=color or existing.color,
            description=description if description is not None else existing.description,
            repeating=repeating if repeating is not None else existing.repeating,
        )
    return week.with_day_plan(day_key, plan.copy(events=events))


def delete_event(week: Week, day_key: str, event_id: EventId) -> Week:
    plan = week.day_plan(day_key)
    events = [e for e in plan.events if str(e.id) != str(event_id)]
    if len(events) == len(plan.events):
        raise WeekEditError(f"Event {event_id} not found on {day_key}")
    return week.with_day_plan(day_key, plan.copy(events=events))
