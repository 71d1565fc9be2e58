"""Domain models for schedule data."""

from .enums import UpdateOperation
from .models import CalendarCell, CalendarProjection, Person, ScheduleDataset, ScheduleEntry

__all__ = ["CalendarCell", "CalendarProjection", "Person", "ScheduleDataset", "ScheduleEntry", "UpdateOperation"]
