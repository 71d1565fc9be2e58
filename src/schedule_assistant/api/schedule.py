from __future__ import annotations

from typing import Any, Dict, Optional

from ..services import GET_SCHEDULE_DETAILS, UPDATE_SCHEDULE
from .registry import register_api
from .state import api_state


def _drop_unset(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in arguments.items() if value is not None}


@register_api(
    GET_SCHEDULE_DETAILS,
    description="Looks up a person's schedule and returns details for a date or range.",
    category="schedule",
    tags=("read",),
    parameter_docs={
        "name": "Full display name to search (exact match preferred)",
        "date": "Specific date in YYYY-MM-DD. If provided, return that day only.",
        "start_date": "Start of range in YYYY-MM-DD. Use with end_date to return a range.",
        "end_date": "End of range in YYYY-MM-DD. Use with start_date to return a range.",
    },
)
def get_schedule_details(
    name: str,
    date: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> Dict[str, Any]:
    arguments = {"name": name, "date": date, "start_date": start_date, "end_date": end_date}
    return api_state.dispatcher.dispatch_one(GET_SCHEDULE_DETAILS, _drop_unset(arguments))


@register_api(
    UPDATE_SCHEDULE,
    description="Creates or updates a person's schedule entry for a specific date.",
    category="schedule",
    tags=("write",),
    parameter_docs={
        "date": "Target date YYYY-MM-DD",
        "name": "Display name to update. Defaults to the configured identity when omitted",
        "workType": "Work type label",
        "content": "Free text details",
        "operation": "set|clear (default set)",
    },
)
def update_schedule(
    date: str,
    name: Optional[str] = None,
    workType: Optional[str] = None,  # noqa: N803
    content: Optional[str] = None,
    operation: Optional[str] = None,
) -> Dict[str, Any]:
    arguments = {"date": date, "name": name, "workType": workType, "content": content, "operation": operation}
    return api_state.dispatcher.dispatch_one(UPDATE_SCHEDULE, _drop_unset(arguments))
