from __future__ import annotations

from dataclasses import dataclass, field

from ..services import ServiceContext, ToolCallDispatcher
from ..data import ScheduleStore


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)

    @property
    def store(self) -> ScheduleStore:
        return self.context.store

    @property
    def dispatcher(self) -> ToolCallDispatcher:
        return self.context.dispatcher


api_state = ApiState()
