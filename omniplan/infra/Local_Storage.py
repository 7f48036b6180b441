"""Slot-based JSON file persistence.

The whole store is one JSON document whose top-level keys are named slots
(``omni_all_weeks``, ``omni_emails``, ...). Every write replaces the file
atomically before returning.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from omniplan.utilities.backup import BackupManager

logger = logging.getLogger(__name__)


class LocalStorage:
    def __init__(self, path: Path, backups: Optional[BackupManager] = None):
        self.path = Path(path)
        self.backups = backups or BackupManager(self.path.parent)
        self._slots: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Store file {self.path} is corrupt ({e}); keeping a copy and starting empty")
            self.backups.create_backup(self.path.name, tag="corrupt")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Store file {self.path} does not hold a JSON object; keeping a copy and starting empty")
            self.backups.create_backup(self.path.name, tag="corrupt")
            return {}
        return data

    def get_item(self, slot: str, default: Any = None) -> Any:
        return self._slots.get(slot, default)

    def has_item(self, slot: str) -> bool:
        return slot in self._slots

    def set_item(self, slot: str, value: Any) -> None:
        self.set_items({slot: value})

    def set_items(self, values: Dict[str, Any]) -> None:
        '''Replace several slots in a single durable write.'''
        slots = dict(self._slots)
        slots.update(values)
        self._atomic_write(slots)
        self._slots = slots

    def remove_items(self, *slots: str) -> None:
        remaining = {k: v for k, v in self._slots.items() if k not in slots}
        self._atomic_write(remaining)
        self._slots = remaining

    def snapshot(self, tag: str = "") -> Optional[Path]:
        '''Timestamped copy of the current store file (None when nothing is saved yet).'''
        if not self.path.exists():
            return None
        return self.backups.create_backup(self.path.name, tag=tag)

    def _atomic_write(self, slots: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".omniplan_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(slots, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
