from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ..data import ScheduleStore
from ..domain import CalendarCell, CalendarProjection, UpdateOperation
from ..services.dispatcher import UPDATE_SCHEDULE, ToolCallDispatcher


logger = logging.getLogger(__name__)

QUICK_WORK_TYPES = ("8:30出社", "10:00出社", "直行/直帰", "休暇")
WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass
class SchedulePresenter:
    """View state for the calendar window.

    The presenter is the dispatcher's view, so agent calls and the quick-action
    form both update it. Edits made here are sent back through the dispatcher
    as ordinary ``update_schedule`` calls.
    """

    dispatcher: ToolCallDispatcher
    store: ScheduleStore
    display_name: str = ""
    calendar_title: str = ""
    calendar_weeks: List[List[CalendarCell]] = field(default_factory=list)
    selected_date: str = ""
    quick_work_type: str = ""
    quick_content: str = ""
    _listeners: List[Callable[[], None]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.dispatcher.view = self

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()

    @property
    def has_calendar(self) -> bool:
        return bool(self.calendar_weeks)

    @property
    def heading(self) -> str:
        return f"{self.display_name} {self.calendar_title}".strip()

    @staticmethod
    def cell_lines(cell: CalendarCell) -> List[str]:
        lines = [cell.date[-2:]]
        if cell.work_type:
            lines.append(cell.work_type)
        if cell.content:
            lines.append(cell.content)
        return lines

    # ------------------------------------------------------------------ view protocol

    def set_display_name(self, name: str) -> None:
        self.display_name = name
        self._notify()

    def show_calendar(self, projection: CalendarProjection) -> None:
        self.calendar_title = projection.title
        self.calendar_weeks = projection.weeks
        self._notify()

    def clear_calendar(self) -> None:
        self.calendar_title = ""
        self.calendar_weeks = []
        self._notify()

    def select_date(self, iso_date: str) -> None:
        self.selected_date = iso_date
        self._notify()

    # ------------------------------------------------------------------ user actions

    def select_cell(self, iso_date: str) -> None:
        self.select_date(iso_date)

    def choose_preset(self, work_type: str) -> None:
        self.quick_work_type = work_type
        self._notify()

    def effective_date(self) -> str:
        return self.selected_date or self.dispatcher.today_iso()

    def apply(self) -> Dict[str, Any]:
        arguments = {
            "name": self.display_name or self.dispatcher.default_name,
            "date": self.effective_date(),
            "workType": self.quick_work_type,
            "content": self.quick_content,
            "operation": UpdateOperation.SET.value,
        }
        output = self.dispatcher.dispatch_one(UPDATE_SCHEDULE, arguments)
        if not output.get("success"):
            logger.warning("Quick update failed: %s", output.get("error"))
        return output

    def download(self, destination: Optional[Path] = None) -> Path:
        return self.store.export(self.store.load(), destination)


__all__ = ["QUICK_WORK_TYPES", "SchedulePresenter", "WEEKDAY_LABELS"]
