from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import orjson
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from hypercorn.asyncio import serve
from hypercorn.config import Config
from pydantic import BaseModel, Field

from ...api import ApiFunction, api_state, call_api, get_api_functions
from ...data import DatasetUnavailableError
from ...logging import configure_logging
from ...services.calendar import project_calendar
from ...services.resolver import resolve_person
from ...session import ToolCall
from ...session.config import build_live_config


logger = logging.getLogger(__name__)

app = FastAPI(title="Schedule Assistant Local API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


def _serialize_api_function(api_function: ApiFunction) -> dict:
    return {
        "name": api_function.name,
        "description": api_function.description,
        "category": api_function.category,
        "tags": list(api_function.tags),
        "parameters": api_function.parameter_schema(),
    }


@app.get("/api/functions")
async def list_api_functions() -> JSONResponse:
    functions = [_serialize_api_function(func) for func in get_api_functions()]
    return JSONResponse({"functions": functions})


@app.post("/api/functions/{function_name}")
def invoke_api_function(function_name: str, request: ApiCallRequest) -> JSONResponse:
    try:
        result = call_api(function_name, **request.arguments)
    except KeyError as exc:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("API function %s failed", function_name)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return JSONResponse({"name": function_name, "result": result})


@app.post("/api/toolcall")
def handle_tool_call(tool_call: ToolCall) -> JSONResponse:
    """Fulfil a tool-call batch forwarded by the live session host."""

    response = api_state.dispatcher.handle(tool_call)
    return JSONResponse(response.to_wire())


@app.get("/api/session/config")
async def session_config() -> JSONResponse:
    return JSONResponse(build_live_config(api_state.context.settings))


@app.get("/api/schedule/export")
def export_schedule() -> Response:
    try:
        dataset = api_state.store.load()
    except DatasetUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    filename = api_state.context.settings.store.export_name
    return Response(
        content=orjson.dumps(dataset.to_record()),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/api/schedule/calendar")
def calendar_view(name: Optional[str] = None, date: Optional[str] = None) -> JSONResponse:
    """Project a person's month grid for the render path, without going through the agent."""

    dispatcher = api_state.dispatcher
    try:
        dataset = api_state.store.load()
    except DatasetUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    person = resolve_person(name, dataset.users, default_name=dispatcher.default_name)
    if person is None:
        raise HTTPException(status_code=404, detail=f"No schedule found for {name!r}")
    try:
        projection = project_calendar(person.schedule, date or dispatcher.today_iso())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return JSONResponse({"name": person.name, **projection.to_record()})


async def _serve(config: Config, *, install_signal_handlers: bool) -> None:
    if install_signal_handlers:
        await serve(app, config)
    else:
        # Signal handlers can only be installed on the main thread.
        await serve(app, config, shutdown_trigger=asyncio.Event().wait)


def run_local_server(host: str = "127.0.0.1", port: int = 8000, *, install_signal_handlers: bool = True) -> None:
    configure_logging()
    config = Config()
    config.bind = [f"{host}:{port}"]
    asyncio.run(_serve(config, install_signal_handlers=install_signal_handlers))
