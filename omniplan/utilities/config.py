"""Configuration management for OmniPlan."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('OMNIPLAN_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
BACKUPS_KEEP: Final[int] = int(os.getenv('OMNIPLAN_BACKUPS_KEEP', '10'))

# AI Configuration ('none', 'openai', 'anthropic', 'gemini'); empty means "decide from keys"
AI_PROVIDER: Final[str] = os.getenv('AI_PROVIDER', '').strip().lower()
OPENAI_API_KEY: Final[str] = os.getenv('OPENAI_API_KEY', '')
ANTHROPIC_API_KEY: Final[str] = os.getenv('ANTHROPIC_API_KEY', '')
# API_KEY is the older name the Gemini key was stored under
GEMINI_API_KEY: Final[str] = os.getenv('GEMINI_API_KEY', '') or os.getenv('API_KEY', '')

OPENAI_MODEL: Final[str] = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')
ANTHROPIC_MODEL: Final[str] = os.getenv('ANTHROPIC_MODEL', 'claude-sonnet-4-20250514')
GEMINI_MODEL: Final[str] = os.getenv('GEMINI_MODEL', 'gemini-2.0-flash')
AI_TIMEOUT_SECONDS: Final[float] = float(os.getenv('AI_TIMEOUT_SECONDS', '30'))
