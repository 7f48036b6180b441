"""HabitStreak: derived streak statistics for a habit over a date window (never persisted)."""


class HabitStreak:
    def __init__(self, current: int = 0, longest: int = 0, total_days: int = 0, percentage_complete: int = 0):
        self.current = current
        self.longest = longest
        self.total_days = total_days
        self.percentage_complete = percentage_complete

    def __eq__(self, other):
        return isinstance(other, HabitStreak) and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return (f"current={self.current} longest={self.longest} "
                f"total={self.total_days} ({self.percentage_complete}%)")

    __repr__ = __str__

    def to_dict(self):
        return {
            "current": self.current,
            "longest": self.longest,
            "totalDays": self.total_days,
            "percentageComplete": self.percentage_complete,
        }
