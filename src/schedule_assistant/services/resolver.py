"""Best-effort matching of a requested display name to a known person.

Exact matches on the normalized form win over substring matches. Among several
substring matches the first one in dataset order is returned; which person that
is depends only on the order of ``users`` and is otherwise unspecified.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple

from ..domain import Person, ScheduleDataset

_WHITESPACE = re.compile(r"\s+")


def normalize_name(value: str) -> str:
    return _WHITESPACE.sub("", value or "").casefold()


def effective_name(requested: Optional[str], default_name: str) -> str:
    if requested is None or not str(requested).strip():
        return default_name
    return str(requested)


def resolve_person(
    requested: Optional[str],
    people: Iterable[Person],
    *,
    default_name: str,
) -> Optional[Person]:
    target = normalize_name(effective_name(requested, default_name))
    candidates = list(people)
    for person in candidates:
        if normalize_name(person.name) == target:
            return person
    for person in candidates:
        if target in normalize_name(person.name):
            return person
    return None


def upsert_person(
    dataset: ScheduleDataset,
    requested: Optional[str],
    *,
    default_name: str,
) -> Tuple[Person, bool]:
    """Return the matching person, appending a new one when nothing matches."""

    person = resolve_person(requested, dataset.users, default_name=default_name)
    if person is not None:
        return person, False
    person = Person(name=effective_name(requested, default_name))
    dataset.users.append(person)
    return person, True


__all__ = ["effective_name", "normalize_name", "resolve_person", "upsert_person"]
