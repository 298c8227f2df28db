"""Configuration management for the famealy application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Daily reset marker, compared as a local calendar date string
RESET_DATE_FORMAT: Final[str] = os.getenv('RESET_DATE_FORMAT', '%d-%m-%Y')

# Family members refresh on the dashboard
POLL_INTERVAL_SECONDS: Final[float] = float(os.getenv('POLL_INTERVAL_SECONDS', '3'))

# Families
INVITE_CODE_LENGTH: Final[int] = int(os.getenv('INVITE_CODE_LENGTH', '6'))

# Local identity provider
BCRYPT_ROUNDS: Final[int] = int(os.getenv('BCRYPT_ROUNDS', '12'))
REQUIRE_EMAIL_CONFIRMATION: Final[bool] = os.getenv('REQUIRE_EMAIL_CONFIRMATION', 'False').lower() == 'true'

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('FAMEALY_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
