"""HTTP server entry points."""

from __future__ import annotations

from .server import app, run_local_server

__all__ = ["app", "run_local_server"]
