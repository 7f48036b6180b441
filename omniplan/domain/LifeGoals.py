"""LifeGoals: long-horizon vision board (10, 5, 3 and 1 year horizons)."""
from typing import Dict, Optional

HORIZONS = ("10", "5", "3", "1")


class LifeGoals:
    def __init__(self, horizons: Optional[Dict[str, dict]] = None):
        # "5" maps a year to {"goal", "action"}; the other horizons map a key to free text
        source = horizons or {}
        self.horizons = {h: dict(source.get(h) or {}) for h in HORIZONS}

    def get(self, horizon: str) -> dict:
        return self.horizons[horizon]

    def with_entry(self, horizon: str, key: str, value) -> "LifeGoals":
        '''Returns new LifeGoals with one horizon entry replaced.'''
        if horizon not in HORIZONS:
            raise ValueError(f"Unknown life goal horizon: {horizon}")
        horizons = {h: dict(v) for h, v in self.horizons.items()}
        horizons[horizon][key] = value
        return LifeGoals(horizons)

    def __eq__(self, other):
        return isinstance(other, LifeGoals) and self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return ", ".join(f"{h}y: {len(v)}" for h, v in self.horizons.items())

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        return LifeGoals({h: d.get(h) if isinstance(d.get(h), dict) else {} for h in HORIZONS})

    def to_dict(self):
        return {h: dict(v) for h, v in self.horizons.items()}
