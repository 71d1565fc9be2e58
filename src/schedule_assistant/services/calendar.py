from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, List, Mapping, Optional

from ..domain import CalendarCell, CalendarProjection, ScheduleEntry

GRID_WEEKS = 6
DAYS_PER_WEEK = 7


def parse_iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as exc:  # noqa: TRY003
        raise ValueError(f"Invalid ISO date: {value!r}") from exc


def grid_anchor(target: date) -> date:
    """Sunday on or before the first day of ``target``'s month."""

    first = target.replace(day=1)
    # date.weekday(): Monday == 0 ... Sunday == 6
    return first - timedelta(days=(first.weekday() + 1) % DAYS_PER_WEEK)


def project_calendar(
    schedule: Mapping[str, ScheduleEntry],
    target_date: str,
    *,
    today: Optional[Callable[[], date]] = None,
) -> CalendarProjection:
    """Build the fixed six-week month grid around ``target_date``.

    The grid always has 42 cells, even for months that fit in five weeks.
    """

    target = parse_iso_date(target_date)
    anchor = grid_anchor(target)
    today_iso = (today or date.today)().isoformat()

    cells: List[CalendarCell] = []
    for offset in range(GRID_WEEKS * DAYS_PER_WEEK):
        day = anchor + timedelta(days=offset)
        iso = day.isoformat()
        entry = schedule.get(iso)
        cells.append(
            CalendarCell(
                date=iso,
                in_month=day.month == target.month,
                is_today=iso == today_iso,
                work_type=entry.work_type if entry else None,
                content=entry.content if entry else None,
            )
        )

    weeks = [cells[index : index + DAYS_PER_WEEK] for index in range(0, len(cells), DAYS_PER_WEEK)]
    return CalendarProjection(title=f"{target.year:04d}-{target.month:02d}", weeks=weeks)


__all__ = ["grid_anchor", "parse_iso_date", "project_calendar"]
