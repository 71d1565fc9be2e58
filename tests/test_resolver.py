"""Tests for person resolution and implicit creation."""
from __future__ import annotations

from schedule_assistant.domain import Person, ScheduleDataset
from schedule_assistant.services.resolver import effective_name, normalize_name, resolve_person, upsert_person

DEFAULT = "チュン"


def _people():
    return [Person(name="チュン"), Person(name="Tanaka Hanako"), Person(name="Hanako Suzuki")]


def test_normalize_strips_whitespace_and_case():
    assert normalize_name("  Tanaka　 Hanako ") == "tanakahanako"


def test_exact_match():
    assert resolve_person("Hanako Suzuki", _people(), default_name=DEFAULT).name == "Hanako Suzuki"


def test_exact_match_wins_over_earlier_substring_match():
    people = [Person(name="Hanako Suzuki Jr"), Person(name="hanako suzuki")]
    assert resolve_person("Hanako Suzuki", people, default_name=DEFAULT).name == "hanako suzuki"


def test_substring_match_takes_first_in_dataset_order():
    assert resolve_person("hanako", _people(), default_name=DEFAULT).name == "Tanaka Hanako"


def test_match_ignores_spacing_and_case():
    assert resolve_person("TANAKAHANAKO", _people(), default_name=DEFAULT).name == "Tanaka Hanako"


def test_empty_request_uses_default_identity():
    assert resolve_person("", _people(), default_name=DEFAULT).name == "チュン"
    assert resolve_person(None, _people(), default_name=DEFAULT).name == "チュン"
    assert effective_name("   ", DEFAULT) == DEFAULT


def test_romanized_name_does_not_match_katakana():
    assert resolve_person("Jun", _people(), default_name=DEFAULT) is None


def test_upsert_returns_existing_person():
    dataset = ScheduleDataset(users=_people())

    person, created = upsert_person(dataset, "tanaka", default_name=DEFAULT)

    assert created is False
    assert person is dataset.users[1]
    assert len(dataset.users) == 3


def test_upsert_creates_person_with_requested_name():
    dataset = ScheduleDataset(users=_people())

    person, created = upsert_person(dataset, "Sato Ken", default_name=DEFAULT)

    assert created is True
    assert person.name == "Sato Ken"
    assert person.schedule == {}
    assert dataset.users[-1] is person


def test_upsert_creates_default_identity_in_empty_dataset():
    dataset = ScheduleDataset()

    person, created = upsert_person(dataset, None, default_name=DEFAULT)

    assert created is True
    assert person.name == DEFAULT
