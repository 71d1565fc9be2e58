"""Tests for the six-week calendar projection."""
from __future__ import annotations

from datetime import date

import pytest

from schedule_assistant.domain import ScheduleEntry
from schedule_assistant.services.calendar import grid_anchor, project_calendar


def _today():
    return date(2024, 3, 20)


def test_march_2024_grid_shape():
    projection = project_calendar({}, "2024-03-15", today=_today)

    assert projection.title == "2024-03"
    assert len(projection.weeks) == 6
    assert all(len(week) == 7 for week in projection.weeks)
    assert len(projection.cells) == 42
    first = date.fromisoformat(projection.cells[0].date)
    assert first == date(2024, 2, 25)
    assert first.weekday() == 6


def test_in_month_flags_cover_the_whole_month():
    projection = project_calendar({}, "2024-03-15", today=_today)

    march = [cell for cell in projection.cells if cell.date.startswith("2024-03-")]
    assert len(march) == 31
    assert all(cell.in_month for cell in march)
    assert not any(cell.in_month for cell in projection.cells if not cell.date.startswith("2024-03-"))


def test_cells_are_consecutive_days():
    projection = project_calendar({}, "2024-02-10", today=_today)
    ordinals = [date.fromisoformat(cell.date).toordinal() for cell in projection.cells]
    assert ordinals == list(range(ordinals[0], ordinals[0] + 42))


def test_month_starting_on_sunday_anchors_on_the_first():
    assert grid_anchor(date(2024, 9, 18)) == date(2024, 9, 1)
    projection = project_calendar({}, "2024-09-18", today=_today)
    assert projection.cells[0].date == "2024-09-01"
    assert projection.cells[-1].date == "2024-10-12"


def test_entries_attached_to_matching_cells():
    schedule = {"2024-03-05": ScheduleEntry(date="2024-03-05", work_type="休暇", content="有給")}

    projection = project_calendar(schedule, "2024-03-01", today=_today)

    cell = next(cell for cell in projection.cells if cell.date == "2024-03-05")
    assert (cell.work_type, cell.content) == ("休暇", "有給")
    others = [cell for cell in projection.cells if cell.date != "2024-03-05"]
    assert all(cell.work_type is None and cell.content is None for cell in others)


def test_today_marker():
    projection = project_calendar({}, "2024-03-01", today=_today)

    marked = [cell.date for cell in projection.cells if cell.is_today]
    assert marked == ["2024-03-20"]


def test_today_outside_grid_is_not_marked():
    projection = project_calendar({}, "2023-01-10", today=_today)
    assert not any(cell.is_today for cell in projection.cells)


def test_to_record_uses_wire_field_names():
    schedule = {"2024-03-05": ScheduleEntry(date="2024-03-05", work_type="休暇", content="")}
    record = project_calendar(schedule, "2024-03-05", today=_today).to_record()

    assert record["title"] == "2024-03"
    cell = record["weeks"][1][2]
    assert cell == {"date": "2024-03-05", "inMonth": True, "isToday": False, "workType": "休暇", "content": ""}
    assert "workType" not in record["weeks"][0][0]


def test_invalid_target_date():
    with pytest.raises(ValueError):
        project_calendar({}, "2024-13-01", today=_today)
