"""BackupData: the canonical in-memory shape of everything a backup carries."""
from typing import Dict, List, Optional

from omniplan.domain.Email import Email
from omniplan.domain.LifeGoals import LifeGoals
from omniplan.domain.Week import Week


class BackupData:
    def __init__(self, all_weeks: Optional[Dict[str, Week]] = None, emails: Optional[List[Email]] = None,
                 life_goals: Optional[LifeGoals] = None):
        self.all_weeks = dict(all_weeks) if all_weeks else {}
        self.emails = emails[:] if emails else []
        self.life_goals = life_goals or LifeGoals()

    def __eq__(self, other):
        return isinstance(other, BackupData) and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{len(self.all_weeks)} weeks - {len(self.emails)} emails - goals: {self.life_goals}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Builds BackupData from plain collections. Raises ValueError on a record that cannot be read.'''
        d = data if isinstance(data, dict) else {}
        weeks = {}
        for key, raw in (d.get("allWeeks") or {}).items():
            try:
                weeks[key] = Week.from_dict(raw)
            except (ValueError, TypeError) as e:
                raise ValueError(f"Week '{key}' is not a valid week record: {e}") from e
        return BackupData(
            all_weeks=weeks,
            emails=[Email.from_dict(e) for e in d.get("emails") or []],
            life_goals=LifeGoals.from_dict(d.get("lifeGoals")),
        )

    def to_dict(self):
        return {
            "allWeeks": {key: week.to_dict() for key, week in self.all_weeks.items()},
            "emails": [e.to_dict() for e in self.emails],
            "lifeGoals": self.life_goals.to_dict(),
        }
