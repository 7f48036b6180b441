"""CalendarEvent domain entity: a time block on one day of a week."""
from typing import Optional, Union

from omniplan.utilities.constants import DEFAULT_EVENT_COLOR, DEFAULT_EVENT_TITLE

EventId = Union[str, int]


class CalendarEvent:
    def __init__(self, id: EventId = "", title: str = DEFAULT_EVENT_TITLE, start_hour: float = 9,
                 duration: float = 1, color: str = DEFAULT_EVENT_COLOR,
                 description: Optional[str] = None, repeating: Optional[bool] = None):
        self.id = id
        self.title = title
        self.start_hour = start_hour
        self.duration = duration
        self.color = color
        self.description = description
        # None = never set; only an explicit False stops propagation to later weeks
        self.repeating = repeating

    @property
    def propagates(self) -> bool:
        return self.repeating is not False

    def copy(self, **changes) -> "CalendarEvent":
        fields = {
            "id": self.id,
            "title": self.title,
            "start_hour": self.start_hour,
            "duration": self.duration,
            "color": self.color,
            "description": self.description,
            "repeating": self.repeating,
        }
        fields.update(changes)
        return CalendarEvent(**fields)

    def __eq__(self, other):
        return isinstance(other, CalendarEvent) and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.title} @ {self.start_hour}h for {self.duration}h"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a CalendarEvent from its JSON form. Missing optional fields stay unset.'''
        d = dict(data) if isinstance(data, dict) else {}
        repeating = d.get("repeating")
        return CalendarEvent(
            id=d.get("id", ""),
            title=d.get("title") or DEFAULT_EVENT_TITLE,
            start_hour=d.get("startHour", 9),
            duration=d.get("duration", 1),
            color=d.get("color") or DEFAULT_EVENT_COLOR,
            description=d.get("description"),
            repeating=repeating if isinstance(repeating, bool) else None,
        )

    def to_dict(self):
        data = {
            "id": self.id,
            "title": self.title,
            "startHour": self.start_hour,
            "duration": self.duration,
            "color": self.color,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.repeating is not None:
            data["repeating"] = self.repeating
        return data
