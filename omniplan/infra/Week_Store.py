"""Week store: owner of all week records, the inbox and the life goals.

Reads go through the Mapping interface (week key -> Week). Every mutation is a
full replace of the affected collection followed by a synchronous write, so the
store on disk always matches what callers were handed back.
"""
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from omniplan.domain.BackupData import BackupData
from omniplan.domain.Email import Email
from omniplan.domain.LifeGoals import LifeGoals
from omniplan.domain.Week import Week
from omniplan.infra.Local_Storage import LocalStorage
from omniplan.infra.paths import STORE_FILE
from omniplan.utilities.constants import SLOT_ALL_WEEKS, SLOT_EMAILS, SLOT_LIFE_GOALS, WELCOME_EMAIL
from omniplan.utilities.dates import now_ms

logger = logging.getLogger(__name__)


class WeekStore(Mapping):
    def __init__(self, storage: LocalStorage):
        self.storage = storage
        # Records that could not be parsed are written back untouched
        self._unreadable: Dict[str, object] = {}
        self._weeks: Dict[str, Week] = self._read_weeks()
        self._emails: List[Email] = self._read_emails()
        self._life_goals: LifeGoals = LifeGoals.from_dict(storage.get_item(SLOT_LIFE_GOALS))

    @classmethod
    def open(cls, path: Optional[Path] = None) -> "WeekStore":
        return cls(LocalStorage(path or STORE_FILE))

    # --- Loading ---------------------------------------------------------------
    def _read_weeks(self) -> Dict[str, Week]:
        raw = self.storage.get_item(SLOT_ALL_WEEKS, {})
        if not isinstance(raw, dict):
            logger.error(f"Slot {SLOT_ALL_WEEKS} does not hold a mapping; starting with no weeks")
            return {}
        weeks = {}
        for key, record in raw.items():
            try:
                weeks[key] = Week.from_dict(record)
            except (ValueError, TypeError) as e:
                logger.error(f"Skipping unreadable week record {key}: {e}")
                self._unreadable[key] = record
        return weeks

    def _read_emails(self) -> List[Email]:
        if not self.storage.has_item(SLOT_EMAILS):
            return [Email.from_dict(WELCOME_EMAIL)]
        raw = self.storage.get_item(SLOT_EMAILS)
        if not isinstance(raw, list):
            logger.error(f"Slot {SLOT_EMAILS} does not hold a list; starting with an empty inbox")
            return []
        return [Email.from_dict(e) for e in raw]

    # --- Mapping interface (week key -> Week) ----------------------------------
    def __getitem__(self, key: str) -> Week:
        return self._weeks[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weeks)

    def __len__(self) -> int:
        return len(self._weeks)

    @property
    def emails(self) -> List[Email]:
        return list(self._emails)

    @property
    def life_goals(self) -> LifeGoals:
        return self._life_goals

    # --- Mutations ---------------------------------------------------------------
    def update_week(self, week_key: str, week: Week, now: Optional[int] = None) -> Week:
        '''Commit a week record under its key, stamping updatedAt. Returns the stored record.'''
        if week.storage_key != week_key:
            raise ValueError(f"Week starting {week.week_start_date} does not belong under key {week_key}")
        stored = week.copy(updated_at=now if now is not None else now_ms())
        weeks = dict(self._weeks)
        weeks[week_key] = stored
        self.storage.set_item(SLOT_ALL_WEEKS, self._serialize_weeks(weeks))
        self._weeks = weeks
        self._unreadable.pop(week_key, None)
        logger.debug(f"Committed {week_key}")
        return stored

    def save_week(self, week: Week, now: Optional[int] = None) -> Week:
        return self.update_week(week.storage_key, week, now=now)

    def set_emails(self, emails: List[Email]) -> None:
        self.storage.set_item(SLOT_EMAILS, [e.to_dict() for e in emails])
        self._emails = list(emails)

    def set_life_goals(self, life_goals: LifeGoals) -> None:
        self.storage.set_item(SLOT_LIFE_GOALS, life_goals.to_dict())
        self._life_goals = life_goals

    def to_backup_data(self) -> BackupData:
        if self._unreadable:
            logger.warning(f"Backup skips {len(self._unreadable)} unreadable week records: {sorted(self._unreadable)}")
        return BackupData(all_weeks=self._weeks, emails=self._emails, life_goals=self._life_goals)

    def replace_all(self, data: BackupData) -> None:
        '''Replace weeks, inbox and goals with imported data in one write.'''
        self.storage.set_items({
            SLOT_ALL_WEEKS: {key: week.to_dict() for key, week in data.all_weeks.items()},
            SLOT_EMAILS: [e.to_dict() for e in data.emails],
            SLOT_LIFE_GOALS: data.life_goals.to_dict(),
        })
        self._weeks = dict(data.all_weeks)
        self._emails = list(data.emails)
        self._life_goals = data.life_goals
        self._unreadable = {}
        logger.info(f"Store replaced: {data}")

    def clear_all(self) -> None:
        self.storage.remove_items(SLOT_ALL_WEEKS, SLOT_EMAILS, SLOT_LIFE_GOALS)
        self._weeks = {}
        self._emails = [Email.from_dict(WELCOME_EMAIL)]
        self._life_goals = LifeGoals()
        self._unreadable = {}
        logger.info("Store cleared")

    def _serialize_weeks(self, weeks: Dict[str, Week]) -> dict:
        data = dict(self._unreadable)
        data.update({key: week.to_dict() for key, week in weeks.items()})
        return data
