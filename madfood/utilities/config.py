"""Configuration management for the MadFood application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

APP_NAME: Final[str] = os.getenv('APP_NAME', 'MadFood')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Reminder function (SMS dispatch lives behind this endpoint)
REMINDER_FUNCTION_URL: Final[str] = os.getenv('REMINDER_FUNCTION_URL', '')
REMINDER_FUNCTION_TOKEN: Final[str] = os.getenv('REMINDER_FUNCTION_TOKEN', '')
REMINDER_TIMEOUT: Final[float] = float(os.getenv('REMINDER_TIMEOUT', '10'))
REMINDER_MAX_SHOPPING_LINES: Final[int] = int(os.getenv('REMINDER_MAX_SHOPPING_LINES', '20'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('MADFOOD_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
