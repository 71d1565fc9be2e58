"""Data access layer."""

from __future__ import annotations

from .store import DatasetUnavailableError, ScheduleError, ScheduleStore

__all__ = ["DatasetUnavailableError", "ScheduleError", "ScheduleStore"]
