from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..core.config import CACHE_FILE, EXPORT_DIR, LOG_DIR

load_dotenv()

DEFAULT_IDENTITY = "チュン"
DEFAULT_LANGUAGE_PROMPT = (
    "必ず日本語で返答し、日本語で音声応答も行ってください。"
    "短く明確に説明し、必要な場合は表や箇条書きで整理してください。"
)


@dataclass(frozen=True)
class StoreSettings:
    remote_url: str
    cache_file: Path
    export_dir: Path
    export_name: str
    fetch_timeout: float


@dataclass(frozen=True)
class LiveSettings:
    model: str
    voice: str
    language_prompt: str
    timezone: Optional[str]


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    store: StoreSettings
    live: LiveSettings
    logging: LoggingSettings
    default_name: str


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    store = StoreSettings(
        remote_url=os.getenv("SCHEDULE_REMOTE_URL", "http://127.0.0.1:3000/shedule.txt"),
        cache_file=Path(os.getenv("SCHEDULE_CACHE_FILE", CACHE_FILE)),
        export_dir=Path(os.getenv("SCHEDULE_EXPORT_DIR", EXPORT_DIR)),
        export_name=os.getenv("SCHEDULE_EXPORT_NAME", "shedule.txt"),
        fetch_timeout=_float_from_env("SCHEDULE_FETCH_TIMEOUT", 10.0),
    )

    live = LiveSettings(
        model=os.getenv("LIVE_MODEL", "models/gemini-2.0-flash-exp"),
        voice=os.getenv("LIVE_VOICE", "Fenrir"),
        language_prompt=os.getenv("LIVE_RESPONSE_LANGUAGE_PROMPT", DEFAULT_LANGUAGE_PROMPT),
        timezone=os.getenv("SCHEDULE_TIMEZONE") or None,
    )

    logging = LoggingSettings(
        level=os.getenv("SCHEDULE_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("SCHEDULE_LOG_DIR", LOG_DIR)),
    )

    return AppSettings(
        store=store,
        live=live,
        logging=logging,
        default_name=os.getenv("SCHEDULE_DEFAULT_NAME", DEFAULT_IDENTITY),
    )
