from __future__ import annotations

from typing import List, Mapping, Optional

from ..domain import ScheduleEntry


def filter_by_date_range(
    entries: Mapping[str, ScheduleEntry],
    date: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> List[ScheduleEntry]:
    """Select entries for one day, an inclusive range, or everything.

    ISO ``YYYY-MM-DD`` keys sort chronologically, so plain string comparison is
    used for the range bounds. A range needs both ``start`` and ``end``; with only
    one of them every entry is returned.
    """

    if date:
        entry = entries.get(date)
        return [entry] if entry is not None else []
    if start and end:
        return [entries[key] for key in sorted(entries) if start <= key <= end]
    return list(entries.values())


__all__ = ["filter_by_date_range"]
