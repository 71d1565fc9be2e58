"""Tests for the cache-or-remote schedule store."""
from __future__ import annotations

from dataclasses import replace

import httpx
import orjson
import pytest

from schedule_assistant.data import DatasetUnavailableError, ScheduleStore
from schedule_assistant.domain import ScheduleEntry


class TestLoad:
    def test_fetches_remote_when_cache_missing(self, store, remote_requests):
        dataset = store.load()

        assert len(remote_requests) == 1
        assert str(remote_requests[0].url) == "https://schedule.example.test/shedule.txt"
        assert [user.name for user in dataset.users] == ["チュン", "Tanaka Hanako", "Hanako Suzuki"]
        assert dataset.dates[0] == "2024-03-01"

    def test_remote_fetch_does_not_populate_cache(self, store):
        store.load()
        assert not store.cache_path.exists()

    def test_prefers_cache_over_remote(self, store, remote_requests):
        dataset = store.load()
        dataset.users[0].schedule["2024-03-20"] = ScheduleEntry(date="2024-03-20", work_type="休暇")
        store.persist(dataset)
        remote_requests.clear()

        reloaded = store.load()

        assert remote_requests == []
        assert reloaded.users[0].schedule["2024-03-20"].work_type == "休暇"

    def test_each_load_returns_independent_copy(self, store):
        first = store.load()
        first.users.clear()
        assert len(store.load().users) == 3

    def test_empty_cache_file_falls_back_to_remote(self, store, remote_requests):
        store.cache_path.parent.mkdir(parents=True)
        store.cache_path.write_bytes(b"")

        dataset = store.load()

        assert len(remote_requests) == 1
        assert len(dataset.users) == 3

    def test_corrupt_cache_is_reported(self, store):
        store.cache_path.parent.mkdir(parents=True)
        store.cache_path.write_bytes(b"{not json")

        with pytest.raises(DatasetUnavailableError):
            store.load()


class TestRemoteFailures:
    def _store(self, store_settings, handler):
        return ScheduleStore(store_settings, client=httpx.Client(transport=httpx.MockTransport(handler)))

    def test_non_success_status(self, store_settings):
        store = self._store(store_settings, lambda request: httpx.Response(404))

        with pytest.raises(DatasetUnavailableError, match="404"):
            store.load()

    def test_invalid_json(self, store_settings):
        store = self._store(store_settings, lambda request: httpx.Response(200, content=b"<html>"))

        with pytest.raises(DatasetUnavailableError):
            store.load()

    def test_transport_error(self, store_settings):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        store = self._store(store_settings, handler)

        with pytest.raises(DatasetUnavailableError, match="connection refused"):
            store.load()

    def test_static_file_resource(self, store_settings, sample_dataset, tmp_path):
        resource = tmp_path / "static" / "shedule.txt"
        resource.parent.mkdir()
        resource.write_bytes(orjson.dumps(sample_dataset))
        settings = replace(store_settings, remote_url=str(resource))

        dataset = ScheduleStore(settings).load()

        assert dataset.users[1].name == "Tanaka Hanako"

    def test_missing_static_file(self, store_settings, tmp_path):
        settings = replace(store_settings, remote_url=str(tmp_path / "nope.txt"))

        with pytest.raises(DatasetUnavailableError):
            ScheduleStore(settings).load()


class TestPersistAndExport:
    def test_persist_replaces_cache_without_leftovers(self, store):
        dataset = store.load()
        store.persist(dataset)
        dataset.users[0].schedule.pop("2024-03-01")
        store.persist(dataset)

        stored = orjson.loads(store.cache_path.read_bytes())
        assert "2024-03-01" not in stored["users"][0]["schedule"]
        assert list(store.cache_path.parent.iterdir()) == [store.cache_path]

    def test_persisted_entries_use_wire_field_names(self, store):
        store.persist(store.load())

        stored = orjson.loads(store.cache_path.read_bytes())
        assert stored["users"][0]["schedule"]["2024-03-15"] == {
            "date": "2024-03-15",
            "workType": "10:00出社",
            "content": "客先訪問",
        }

    def test_failed_replace_keeps_old_cache_and_removes_temp_file(self, store, monkeypatch):
        dataset = store.load()
        store.persist(dataset)
        before = store.cache_path.read_bytes()

        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("schedule_assistant.data.store.os.replace", fail_replace)
        dataset.users[0].schedule.pop("2024-03-01")

        with pytest.raises(OSError, match="disk full"):
            store.persist(dataset)

        assert store.cache_path.read_bytes() == before
        assert list(store.cache_path.parent.iterdir()) == [store.cache_path]

    def test_export_writes_default_file(self, store):
        path = store.export(store.load())

        assert path == store.settings.export_dir / "shedule.txt"
        exported = orjson.loads(path.read_bytes())
        assert exported["dates"] == ["2024-03-01", "2024-03-05", "2024-03-15", "2024-04-02"]

    def test_export_to_explicit_destination(self, store, tmp_path):
        target = tmp_path / "backup" / "copy.json"
        assert store.export(store.load(), target) == target
        assert target.exists()

    def test_clear_cache(self, store):
        assert store.clear_cache() is False
        store.persist(store.load())
        assert store.clear_cache() is True
        assert not store.cache_path.exists()
