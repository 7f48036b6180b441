"""DailyPlan domain entity: focus theme, todos, notes and events of a single day."""
from typing import List, Optional

from omniplan.domain.CalendarEvent import CalendarEvent
from omniplan.domain.Todo import Todo


class DailyPlan:
    def __init__(self, focus: Optional[str] = "", todos: Optional[List[Todo]] = None,
                 notes: str = "", events: Optional[List[CalendarEvent]] = None):
        self.focus = focus
        self.todos = todos[:] if todos else []
        self.notes = notes
        # Insertion order is display order, not time order
        self.events = events[:] if events else []

    def has_focus(self) -> bool:
        return bool(self.focus and self.focus.strip())

    def copy(self, **changes) -> "DailyPlan":
        fields = {"focus": self.focus, "todos": self.todos, "notes": self.notes, "events": self.events}
        fields.update(changes)
        return DailyPlan(**fields)

    def __eq__(self, other):
        return isinstance(other, DailyPlan) and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"Focus: {self.focus or '-'} - {len(self.todos)} todos - {len(self.events)} events"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        focus = d.get("focus")
        return DailyPlan(
            focus=focus if isinstance(focus, str) else None,
            todos=[Todo.from_dict(t) for t in d.get("todos") or []],
            notes=d.get("notes") or "",
            events=[CalendarEvent.from_dict(e) for e in d.get("events") or []],
        )

    def to_dict(self):
        data = {}
        if self.focus is not None:
            data["focus"] = self.focus
        data["todos"] = [t.to_dict() for t in self.todos]
        data["notes"] = self.notes
        data["events"] = [e.to_dict() for e in self.events]
        return data
