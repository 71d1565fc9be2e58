from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "Schedule Assistant"
APP_AUTHOR = "ScheduleAssistant"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))
CACHE_FILE = DATA_DIR / "schedule.json"
EXPORT_DIR = DATA_DIR / "exports"
LOG_DIR = DATA_DIR / "logs"
