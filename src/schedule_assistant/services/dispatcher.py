from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Union

from ..data import ScheduleStore
from ..domain import CalendarProjection, ScheduleDataset, ScheduleEntry, UpdateOperation
from ..session.models import FunctionCall, FunctionResponse, ToolCall, ToolResponse
from .calendar import parse_iso_date, project_calendar
from .filters import filter_by_date_range
from .resolver import effective_name, resolve_person, upsert_person


logger = logging.getLogger(__name__)

GET_SCHEDULE_DETAILS = "get_schedule_details"
UPDATE_SCHEDULE = "update_schedule"


class ScheduleValidationError(ValueError):
    """Raised when a call is missing a required field or carries a malformed date."""


class ScheduleView(Protocol):
    """Receiver for the UI-visible side effects of a dispatched call."""

    def set_display_name(self, name: str) -> None: ...

    def show_calendar(self, projection: CalendarProjection) -> None: ...

    def clear_calendar(self) -> None: ...

    def select_date(self, iso_date: str) -> None: ...


class NullView:
    def set_display_name(self, name: str) -> None:
        return None

    def show_calendar(self, projection: CalendarProjection) -> None:
        return None

    def clear_calendar(self) -> None:
        return None

    def select_date(self, iso_date: str) -> None:
        return None


@dataclass
class BatchPlan:
    reads: List[FunctionCall] = field(default_factory=list)
    writes: List[FunctionCall] = field(default_factory=list)
    ignored: List[FunctionCall] = field(default_factory=list)

    @property
    def calls(self) -> List[FunctionCall]:
        return [*self.reads, *self.writes]

    @property
    def is_empty(self) -> bool:
        return not self.reads and not self.writes


def _optional_str(args: Dict[str, Any], key: str) -> Optional[str]:
    value = args.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _validated_date(value: Optional[str], field_name: str) -> Optional[str]:
    if value is None:
        return None
    try:
        return parse_iso_date(value).isoformat()
    except ValueError as exc:
        raise ScheduleValidationError(f"{field_name} must be formatted YYYY-MM-DD, got {value!r}") from exc


def _first_iso_date(*candidates: Optional[str]) -> Optional[str]:
    for candidate in candidates:
        if candidate is None:
            continue
        try:
            return parse_iso_date(candidate).isoformat()
        except ValueError:
            continue
    return None


class ToolCallDispatcher:
    """Fulfils batches of schedule function calls against one working copy.

    Every batch loads the dataset once. Write calls mutate that copy in place and
    persist it before the batch responds. Any exception fails every recognised
    call in the batch with ``{"success": False, "error": ...}``.
    """

    def __init__(
        self,
        store: ScheduleStore,
        *,
        default_name: str,
        view: Optional[ScheduleView] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.store = store
        self.default_name = default_name
        self.view: ScheduleView = view or NullView()
        self._today = today or date.today

    def today_iso(self) -> str:
        return self._today().isoformat()

    def partition(self, calls: Sequence[FunctionCall]) -> BatchPlan:
        plan = BatchPlan()
        for call in calls:
            if call.name == GET_SCHEDULE_DETAILS:
                plan.reads.append(call)
            elif call.name == UPDATE_SCHEDULE:
                plan.writes.append(call)
            else:
                plan.ignored.append(call)
        return plan

    def handle(self, tool_call: Union[ToolCall, Sequence[FunctionCall]]) -> ToolResponse:
        calls = tool_call.function_calls if isinstance(tool_call, ToolCall) else list(tool_call)
        plan = self.partition(calls)
        for call in plan.ignored:
            logger.warning("Ignoring undeclared function call %s (%s)", call.name, call.id)
        if plan.is_empty:
            return ToolResponse()

        logger.debug("Handling tool call batch: %d read(s), %d write(s)", len(plan.reads), len(plan.writes))
        try:
            dataset = self.store.load()
            responses = [FunctionResponse.for_call(call, self._read(dataset, call)) for call in plan.reads]
            responses.extend(FunctionResponse.for_call(call, self._write(dataset, call)) for call in plan.writes)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Tool call batch failed")
            message = str(exc) or exc.__class__.__name__
            responses = [
                FunctionResponse.for_call(call, {"success": False, "error": message}) for call in plan.calls
            ]
        return ToolResponse(function_responses=responses)

    def dispatch_one(self, name: str, args: Dict[str, Any]) -> Dict[str, Any]:
        """Run a single call through the batch path and return its output."""

        response = self.handle([FunctionCall(name=name, args=args)])
        if not response.function_responses:
            raise KeyError(f"Function '{name}' is not declared.")
        return response.function_responses[0].output

    # ------------------------------------------------------------------ read path

    def _read(self, dataset: ScheduleDataset, call: FunctionCall) -> Dict[str, Any]:
        args = call.args
        name = effective_name(_optional_str(args, "name"), self.default_name)
        # Lookups compare keys as given; a malformed date is simply a miss.
        target_date = _optional_str(args, "date")
        start = _optional_str(args, "start_date")
        end = _optional_str(args, "end_date")

        person = resolve_person(name, dataset.users, default_name=self.default_name)
        results: List[ScheduleEntry] = (
            filter_by_date_range(person.schedule, target_date, start, end) if person else []
        )

        self.view.set_display_name(person.name if person else name)
        if person is not None:
            first_result = results[0].date if results else None
            anchor = _first_iso_date(target_date, start, first_result) or self.today_iso()
            self.view.show_calendar(project_calendar(person.schedule, anchor, today=self._today))
        else:
            logger.info("No schedule found for %r", name)
            self.view.clear_calendar()

        return {
            "success": True,
            "name": name,
            "count": len(results),
            "results": [entry.to_record() for entry in results],
            "source": self.store.remote_label,
        }

    # ------------------------------------------------------------------ write path

    def _write(self, dataset: ScheduleDataset, call: FunctionCall) -> Dict[str, Any]:
        args = call.args
        target_date = _validated_date(_optional_str(args, "date"), "date")
        if target_date is None:
            raise ScheduleValidationError(f"{UPDATE_SCHEDULE} requires 'date' (YYYY-MM-DD).")
        work_type = str(args.get("workType") or "")
        content = str(args.get("content") or "")
        operation = UpdateOperation.parse(args.get("operation"))

        person, created = upsert_person(dataset, _optional_str(args, "name"), default_name=self.default_name)
        if created:
            logger.info("Created schedule for new person %r", person.name)

        if operation is UpdateOperation.CLEAR:
            person.schedule.pop(target_date, None)
        else:
            person.schedule[target_date] = ScheduleEntry(date=target_date, work_type=work_type, content=content)

        self.store.persist(dataset)

        self.view.set_display_name(person.name)
        self.view.select_date(target_date)
        self.view.show_calendar(project_calendar(person.schedule, target_date, today=self._today))

        return {
            "success": True,
            "created": created,
            "updated": {
                "name": person.name,
                "date": target_date,
                "workType": work_type,
                "content": content,
                "operation": operation.value,
            },
            "source": self.store.cache_label,
        }


__all__ = [
    "BatchPlan",
    "GET_SCHEDULE_DETAILS",
    "NullView",
    "ScheduleValidationError",
    "ScheduleView",
    "ToolCallDispatcher",
    "UPDATE_SCHEDULE",
]
