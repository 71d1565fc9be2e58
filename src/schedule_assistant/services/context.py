from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import ScheduleStore
from .dispatcher import ToolCallDispatcher


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root sharing settings, the store and the dispatcher."""

    settings: AppSettings = field(default_factory=get_settings)
    store: ScheduleStore = field(init=False)
    dispatcher: ToolCallDispatcher = field(init=False)

    def __post_init__(self) -> None:
        self.store = ScheduleStore(self.settings.store)
        self.dispatcher = ToolCallDispatcher(self.store, default_name=self.settings.default_name)
