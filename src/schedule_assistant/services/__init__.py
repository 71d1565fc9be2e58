"""Schedule services: resolution, filtering, projection and dispatch."""

from __future__ import annotations

from .calendar import project_calendar
from .context import ServiceContext
from .dispatcher import GET_SCHEDULE_DETAILS, UPDATE_SCHEDULE, ScheduleValidationError, ToolCallDispatcher
from .filters import filter_by_date_range
from .resolver import resolve_person, upsert_person

__all__ = [
    "GET_SCHEDULE_DETAILS",
    "ScheduleValidationError",
    "ServiceContext",
    "ToolCallDispatcher",
    "UPDATE_SCHEDULE",
    "filter_by_date_range",
    "project_calendar",
    "resolve_person",
    "upsert_person",
]
