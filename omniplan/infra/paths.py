from pathlib import Path

from omniplan.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
STORE_FILE_NAME = 'omniplan_store.json'
STORE_FILE: Path = DATA_DIR / STORE_FILE_NAME
BACKUPS_DIR: Path = DATA_DIR / 'backups'

__all__ = ['DATA_DIR', 'STORE_FILE_NAME', 'STORE_FILE', 'BACKUPS_DIR']
