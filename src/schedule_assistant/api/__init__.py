"""Public API surface for the live session, HTTP, MCP and the GUI."""

from __future__ import annotations

from .registry import ApiFunction, call_api, get_api_functions, register_api
from .state import api_state

# Import modules so decorators run at module import time.
from . import meta, schedule  # noqa: F401

__all__ = ["ApiFunction", "api_state", "call_api", "get_api_functions", "register_api"]
