"""Shared fixtures: temporary cache files, a mocked remote dataset and a recording view."""
from __future__ import annotations

from copy import deepcopy
from datetime import date
from pathlib import Path
from typing import Any, Dict, List

import httpx
import orjson
import pytest

from schedule_assistant.config.settings import AppSettings, LiveSettings, LoggingSettings, StoreSettings
from schedule_assistant.data import ScheduleStore
from schedule_assistant.domain import CalendarProjection
from schedule_assistant.services import ToolCallDispatcher

REMOTE_URL = "https://schedule.example.test/shedule.txt"
DEFAULT_NAME = "チュン"
FROZEN_TODAY = date(2024, 3, 20)

SAMPLE_DATASET: Dict[str, Any] = {
    "dates": ["2024-03-01", "2024-03-05", "2024-03-15", "2024-04-02"],
    "users": [
        {
            "name": "チュン",
            "schedule": {
                "2024-03-15": {"date": "2024-03-15", "workType": "10:00出社", "content": "客先訪問"},
                "2024-03-01": {"date": "2024-03-01", "workType": "8:30出社", "content": "定例会議"},
                "2024-04-02": {"date": "2024-04-02", "workType": "休暇", "content": ""},
                "2024-03-05": {"date": "2024-03-05", "workType": "直行/直帰", "content": "現場"},
            },
        },
        {
            "name": "Tanaka Hanako",
            "schedule": {
                "2024-03-15": {"date": "2024-03-15", "workType": "休暇", "content": "有給"},
            },
        },
        {"name": "Hanako Suzuki", "schedule": {}},
    ],
}


class RecordingView:
    """Captures the UI side effects emitted by the dispatcher."""

    def __init__(self) -> None:
        self.display_names: List[str] = []
        self.calendars: List[CalendarProjection] = []
        self.selected: List[str] = []
        self.cleared = 0

    def set_display_name(self, name: str) -> None:
        self.display_names.append(name)

    def show_calendar(self, projection: CalendarProjection) -> None:
        self.calendars.append(projection)

    def clear_calendar(self) -> None:
        self.cleared += 1

    def select_date(self, iso_date: str) -> None:
        self.selected.append(iso_date)


@pytest.fixture
def sample_dataset() -> Dict[str, Any]:
    return deepcopy(SAMPLE_DATASET)


@pytest.fixture
def store_settings(tmp_path: Path) -> StoreSettings:
    return StoreSettings(
        remote_url=REMOTE_URL,
        cache_file=tmp_path / "cache" / "schedule.json",
        export_dir=tmp_path / "exports",
        export_name="shedule.txt",
        fetch_timeout=1.0,
    )


@pytest.fixture
def app_settings(store_settings: StoreSettings, tmp_path: Path) -> AppSettings:
    return AppSettings(
        store=store_settings,
        live=LiveSettings(
            model="models/test-live",
            voice="Fenrir",
            language_prompt="必ず日本語で返答してください。",
            timezone="Asia/Tokyo",
        ),
        logging=LoggingSettings(level="DEBUG", directory=tmp_path / "logs"),
        default_name=DEFAULT_NAME,
    )


@pytest.fixture
def remote_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def remote_client(sample_dataset: Dict[str, Any], remote_requests: List[httpx.Request]) -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        remote_requests.append(request)
        return httpx.Response(200, content=orjson.dumps(sample_dataset))

    client = httpx.Client(transport=httpx.MockTransport(handler))
    yield client
    client.close()


@pytest.fixture
def store(store_settings: StoreSettings, remote_client: httpx.Client) -> ScheduleStore:
    return ScheduleStore(store_settings, client=remote_client)


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def dispatcher(store: ScheduleStore, view: RecordingView) -> ToolCallDispatcher:
    return ToolCallDispatcher(store, default_name=DEFAULT_NAME, view=view, today=lambda: FROZEN_TODAY)
