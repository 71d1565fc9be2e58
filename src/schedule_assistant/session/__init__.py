"""Wire format and configuration for the live agent session."""

from __future__ import annotations

from .models import FunctionCall, FunctionResponse, ToolCall, ToolResponse

__all__ = ["FunctionCall", "FunctionResponse", "ToolCall", "ToolResponse"]
