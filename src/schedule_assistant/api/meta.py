from __future__ import annotations

from typing import Any, Dict, List

from .registry import get_api_functions, register_api


def schedule_declarations() -> List[Dict[str, Any]]:
    return [func.as_function_declaration() for func in get_api_functions(category="schedule")]


@register_api(
    "list_available_tools",
    description="Return the function declarations the live session is configured with.",
    category="meta",
    tags=("tools", "session"),
)
def list_available_tools() -> Dict[str, List[Dict[str, Any]]]:
    return {"functionDeclarations": schedule_declarations()}
