"""
Export and Import of full OmniPlan backups (weeks, inbox and life goals).
"""
import json
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from omniplan.domain.BackupData import BackupData
from omniplan.infra.Week_Store import WeekStore
from omniplan.utilities.constants import BACKUP_VERSION
from omniplan.utilities.validators import BackupFile, CurrentBackup, LegacyBackup

logger = logging.getLogger(__name__)

_COLLECTION_KEYS = ("allWeeks", "emails", "lifeGoals")


class BackupImportError(ValueError):
    """The backup file was rejected; nothing has been applied."""


def backup_file_name(day: Optional[date] = None) -> str:
    return f"omniplan-backup-{(day or date.today()).isoformat()}.json"


class DataExporter:
    """Export the store as a version 2.0 backup document."""

    def __init__(self, store: WeekStore):
        self.store = store

    def export_backup(self) -> dict:
        export_date = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return {
            "version": BACKUP_VERSION,
            "exportDate": export_date,
            "data": self.store.to_backup_data().to_dict(),
        }

    def write_backup(self, output_path: Optional[Path] = None) -> Path:
        """Write the backup as indented JSON; a directory gets the dated default file name."""
        output_path = Path(output_path) if output_path else Path(backup_file_name())
        if output_path.is_dir():
            output_path = output_path / backup_file_name()
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.export_backup(), f, indent=2, ensure_ascii=False)
        logger.info(f"Exported {len(self.store)} weeks to {output_path}")
        return output_path


def _read_shape(root: dict) -> BackupFile:
    '''Tag the document as current (``data`` object) or legacy (collections at the top level).'''
    if "data" in root:
        if not isinstance(root["data"], dict):
            raise BackupImportError("Backup 'data' must be an object")
        return CurrentBackup.model_validate(root)
    if any(key in root for key in _COLLECTION_KEYS):
        return LegacyBackup.model_validate(root)
    raise BackupImportError("Not an OmniPlan backup: expected 'data' or 'allWeeks'/'emails'/'lifeGoals'")


def parse_backup(text: str) -> BackupData:
    """Parse backup text into BackupData, accepting both the current and the legacy shape.

    Raises BackupImportError with a readable message for anything that cannot be
    imported as a whole.
    """
    if text is None or not text.strip():
        raise BackupImportError("Backup file is empty")
    try:
        root = json.loads(text)
    except json.JSONDecodeError as e:
        raise BackupImportError(f"Backup is not valid JSON: {e}") from e
    if not isinstance(root, dict):
        raise BackupImportError("Backup root must be a JSON object")

    try:
        shape = _read_shape(root)
    except ValidationError as e:
        raise BackupImportError(f"Backup collections have the wrong type: {e}") from e
    payload = shape.data if isinstance(shape, CurrentBackup) else shape
    if isinstance(shape, LegacyBackup):
        logger.info("Importing legacy backup format")

    try:
        return BackupData.from_dict(payload.model_dump(by_alias=True))
    except (ValueError, TypeError) as e:
        raise BackupImportError(str(e)) from e


class DataImporter:
    """Import a backup into the store, replacing weeks, inbox and life goals."""

    def __init__(self, store: WeekStore):
        self.store = store

    def import_backup(self, text: str) -> BackupData:
        data = parse_backup(text)
        self.store.storage.snapshot(tag="import")
        self.store.replace_all(data)
        logger.info(f"Imported backup: {data}")
        return data

    def import_file(self, input_path: Path) -> BackupData:
        try:
            with open(input_path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise BackupImportError(f"Cannot read {input_path}: {e}") from e
        return self.import_backup(text)


# CLI interface
if __name__ == "__main__":
    import argparse
    from omniplan.infra.paths import BACKUPS_DIR, DATA_DIR, STORE_FILE_NAME
    from omniplan.utilities.backup import BackupManager

    parser = argparse.ArgumentParser(description='Export/Import OmniPlan data')
    parser.add_argument('action', choices=['export', 'import', 'snapshots', 'restore'], help='Action to perform')
    parser.add_argument('--file', help='Input/output file path, or snapshot name for restore')

    args = parser.parse_args()

    if args.action == 'export':
        result = DataExporter(WeekStore.open()).write_backup(Path(args.file) if args.file else None)
        print(f"✓ Exported to: {result}")

    elif args.action == 'import':
        if not args.file:
            print("Error: --file is required for import")
            exit(1)
        try:
            imported = DataImporter(WeekStore.open()).import_file(Path(args.file))
        except BackupImportError as e:
            print(f"✗ Import failed: {e}")
            exit(1)
        print(f"✓ Imported {imported} from: {args.file}")

    elif args.action == 'snapshots':
        for snapshot in BackupManager(DATA_DIR, BACKUPS_DIR).list_backups(STORE_FILE_NAME):
            print(f"{snapshot['name']}  {snapshot['size']:>10}  {snapshot['created']}")

    elif args.action == 'restore':
        if not args.file:
            print("Error: --file is required for restore (see 'snapshots')")
            exit(1)
        if BackupManager(DATA_DIR, BACKUPS_DIR).restore_backup(args.file, STORE_FILE_NAME):
            print(f"✓ Restored {args.file}")
        else:
            print(f"✗ Restore failed")
            exit(1)
