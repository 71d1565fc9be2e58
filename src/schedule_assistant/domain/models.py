from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class ScheduleEntry:
    date: str
    work_type: str = ""
    content: str = ""

    @classmethod
    def from_record(cls, record: Dict[str, Any], *, key: Optional[str] = None) -> "ScheduleEntry":
        # The storage key is authoritative for the date.
        return cls(
            date=str(key or record.get("date") or ""),
            work_type=str(record.get("workType") or ""),
            content=str(record.get("content") or ""),
        )

    def to_record(self) -> Dict[str, Any]:
        return {"date": self.date, "workType": self.work_type, "content": self.content}


@dataclass(slots=True)
class Person:
    name: str
    schedule: Dict[str, ScheduleEntry] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Person":
        raw_schedule = record.get("schedule") or {}
        return cls(
            name=str(record["name"]),
            schedule={
                str(key): ScheduleEntry.from_record(value or {}, key=str(key))
                for key, value in raw_schedule.items()
            },
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "schedule": {key: entry.to_record() for key, entry in self.schedule.items()},
        }


@dataclass(slots=True)
class ScheduleDataset:
    """Working copy of every person's schedule plus the informational date index."""

    dates: List[str] = field(default_factory=list)
    users: List[Person] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "ScheduleDataset":
        if not isinstance(record, dict):
            raise ValueError("Schedule dataset must be a JSON object.")
        return cls(
            dates=[str(value) for value in record.get("dates") or []],
            users=[Person.from_record(user) for user in record.get("users") or []],
        )

    def to_record(self) -> Dict[str, Any]:
        return {"dates": list(self.dates), "users": [user.to_record() for user in self.users]}


@dataclass(slots=True)
class CalendarCell:
    date: str
    in_month: bool
    is_today: bool = False
    work_type: Optional[str] = None
    content: Optional[str] = None

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"date": self.date, "inMonth": self.in_month, "isToday": self.is_today}
        if self.work_type is not None:
            record["workType"] = self.work_type
        if self.content is not None:
            record["content"] = self.content
        return record


@dataclass(slots=True)
class CalendarProjection:
    title: str
    weeks: List[List[CalendarCell]]

    @property
    def cells(self) -> List[CalendarCell]:
        return [cell for week in self.weeks for cell in week]

    def to_record(self) -> Dict[str, Any]:
        return {"title": self.title, "weeks": [[cell.to_record() for cell in week] for week in self.weeks]}
