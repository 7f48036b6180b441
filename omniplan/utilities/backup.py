"""
Safety snapshots of the store file.
A timestamped copy is taken before an import replaces the store, and a corrupt
store file is copied aside before the store starts over.
"""
import shutil
from datetime import datetime
from pathlib import Path
from typing import Optional
import logging

from omniplan.utilities.config import BACKUPS_KEEP

logger = logging.getLogger(__name__)


class BackupManager:
    """Manages timestamped snapshots of data files."""

    def __init__(self, data_dir: Path, backup_dir: Optional[Path] = None, keep: int = BACKUPS_KEEP):
        self.data_dir = Path(data_dir)
        self.backup_dir = Path(backup_dir) if backup_dir else (self.data_dir / 'backups')
        self.keep = keep

    def create_backup(self, filename: str, tag: str = "") -> Optional[Path]:
        """Copy a data file to the backup directory; returns the snapshot path or None."""
        source = self.data_dir / filename
        if not source.exists():
            logger.warning(f"File not found for backup: {filename}")
            return None

        try:
            self.backup_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            label = f"{timestamp}-{tag}" if tag else timestamp
            destination = self.backup_dir / f"{source.stem}_{label}{source.suffix}"
            shutil.copy2(source, destination)
            logger.info(f"Backup created: {destination.name}")
        except OSError as e:
            logger.error(f"Backup failed for {filename}: {e}")
            return None

        self._cleanup_old_backups(source.name)
        return destination

    def _cleanup_old_backups(self, filename: str):
        """Remove old snapshots, keeping only the most recent ones."""
        pattern = f"{Path(filename).stem}_*{Path(filename).suffix}"
        backups = sorted(self.backup_dir.glob(pattern), key=lambda p: p.name)

        for backup in backups[:-self.keep] if self.keep > 0 else []:
            try:
                backup.unlink()
                logger.info(f"Removed old backup: {backup.name}")
            except OSError as e:
                logger.error(f"Failed to remove old backup {backup.name}: {e}")

    def restore_backup(self, backup_filename: str, filename: str) -> bool:
        """Restore a snapshot over ``filename``, snapshotting the current file first."""
        backup_path = self.backup_dir / backup_filename
        if not backup_path.exists():
            logger.error(f"Backup not found: {backup_filename}")
            return False

        destination = self.data_dir / filename
        if destination.exists():
            self.create_backup(filename, tag="pre-restore")

        try:
            shutil.copy2(backup_path, destination)
        except OSError as e:
            logger.error(f"Restore failed for {backup_filename}: {e}")
            return False
        logger.info(f"Restored backup: {backup_filename} -> {filename}")
        return True

    def list_backups(self, filename: Optional[str] = None) -> list:
        """List all snapshots, or the snapshots of one file, newest first."""
        if not self.backup_dir.exists():
            return []
        if filename:
            pattern = f"{Path(filename).stem}_*{Path(filename).suffix}"
        else:
            pattern = "*"

        backups = sorted(self.backup_dir.glob(pattern), key=lambda p: p.name, reverse=True)

        return [
            {
                'name': b.name,
                'size': b.stat().st_size,
                'created': datetime.fromtimestamp(b.stat().st_mtime).strftime('%Y-%m-%d %H:%M:%S')
            }
            for b in backups
        ]
