"""MCP server entry points."""

from __future__ import annotations

from .server import run_mcp_server, server

__all__ = ["run_mcp_server", "server"]
