"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, LiveSettings, LoggingSettings, StoreSettings, get_settings
from .theme import AppPalette

__all__ = ["AppPalette", "AppSettings", "LiveSettings", "LoggingSettings", "StoreSettings", "get_settings"]
