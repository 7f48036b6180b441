"""Habit domain entity.

A habit's identity is its ``id``, which persists across weeks. The object itself
belongs to one week: completions are local to that week and are reset when the
habit is carried forward into a new week.
"""
from typing import Dict, Optional


class Habit:
    def __init__(self, id: str = "", name: str = "", completions: Optional[Dict[str, bool]] = None,
                 created_at: int = 0, deleted_at: Optional[int] = None,
                 last_used_at: Optional[int] = None, archived: Optional[bool] = None):
        self.id = id
        self.name = name
        self.completions = dict(completions) if completions else {}
        self.created_at = created_at
        self.deleted_at = deleted_at
        self.last_used_at = last_used_at
        self.archived = archived

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_done(self, day_key: str) -> bool:
        return bool(self.completions.get(day_key))

    def copy(self, **changes) -> "Habit":
        fields = {
            "id": self.id,
            "name": self.name,
            "completions": self.completions,
            "created_at": self.created_at,
            "deleted_at": self.deleted_at,
            "last_used_at": self.last_used_at,
            "archived": self.archived,
        }
        fields.update(changes)
        return Habit(**fields)

    def carried_forward(self) -> "Habit":
        '''Clone for a new week: same identity and flags, no completions.'''
        return self.copy(completions={})

    def toggled(self, day_key: str, now: int) -> "Habit":
        completions = dict(self.completions)
        completions[day_key] = not completions.get(day_key, False)
        return self.copy(completions=completions, last_used_at=now)

    def deleted(self, now: int) -> "Habit":
        return self.copy(deleted_at=now)

    def __eq__(self, other):
        return isinstance(other, Habit) and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        state = "deleted" if self.is_deleted else ("archived" if self.archived else "active")
        return f"{self.name} ({self.id}) - {state}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Habit from its JSON form; older records without timestamps default to 0/unset.'''
        d = dict(data) if isinstance(data, dict) else {}
        completions = d.get("completions") if isinstance(d.get("completions"), dict) else {}
        archived = d.get("archived")
        return Habit(
            id=str(d.get("id", "")),
            name=d.get("name") or "",
            completions={k: bool(v) for k, v in completions.items()},
            created_at=d.get("createdAt") or 0,
            deleted_at=d.get("deletedAt"),
            last_used_at=d.get("lastUsedAt"),
            archived=archived if isinstance(archived, bool) else None,
        )

    def to_dict(self):
        data = {
            "id": self.id,
            "name": self.name,
            "completions": dict(self.completions),
            "createdAt": self.created_at,
        }
        if self.deleted_at is not None:
            data["deletedAt"] = self.deleted_at
        if self.last_used_at is not None:
            data["lastUsedAt"] = self.last_used_at
        if self.archived is not None:
            data["archived"] = self.archived
        return data
