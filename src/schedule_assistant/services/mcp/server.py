from __future__ import annotations

import logging

from fastmcp import FastMCP

from ...api import get_api_functions
from ...logging import configure_logging

INSTRUCTIONS = (
    "Schedule Assistant MCP server reads and updates people's work schedules. "
    "Use get_schedule_details for lookups and update_schedule to set or clear a day."
)

logger = logging.getLogger(__name__)

server = FastMCP(name="schedule-assistant", instructions=INSTRUCTIONS)

# Dynamically register all API functions as MCP tools.
for api_function in get_api_functions():
    logger.debug("Registering MCP tool: %s", api_function.name)
    server.tool(
        api_function.func,
        name=api_function.name,
        description=api_function.description,
        tags=set(api_function.tags),
    )


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    import asyncio

    configure_logging()
    asyncio.run(server.run_streamable_http_async(host=host, port=port))
