"""Todo domain entity: identifier, text and done flag (daily todos and weekly meetings)."""
from typing import Union

TodoId = Union[str, int]


class Todo:
    def __init__(self, id: TodoId = "", text: str = "", done: bool = False):
        self.id = id
        self.text = text
        self.done = done

    def copy(self, **changes) -> "Todo":
        '''Returns a new Todo with the given fields replaced.'''
        fields = {"id": self.id, "text": self.text, "done": self.done}
        fields.update(changes)
        return Todo(**fields)

    def __eq__(self, other):
        return isinstance(other, Todo) and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"[{'x' if self.done else ' '}] {self.text}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Todo(
            id=d.get("id", ""),
            text=d.get("text") or "",
            done=bool(d.get("done", False)),
        )

    def to_dict(self):
        return {"id": self.id, "text": self.text, "done": self.done}
