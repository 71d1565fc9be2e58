from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
import orjson

from ..config.settings import StoreSettings
from ..domain import ScheduleDataset


logger = logging.getLogger(__name__)


class ScheduleError(RuntimeError):
    """Base class for schedule data failures."""


class DatasetUnavailableError(ScheduleError):
    """Raised when neither the cache nor the remote resource yields a dataset."""


@dataclass
class ScheduleStore:
    """Cache-or-remote access to the schedule dataset.

    ``load`` prefers the cache file and otherwise fetches the canonical dataset
    once, without writing it back. Nothing is saved until ``persist`` is called.
    """

    settings: StoreSettings
    client: Optional[httpx.Client] = None

    @property
    def cache_path(self) -> Path:
        return self.settings.cache_file

    @property
    def remote_label(self) -> str:
        return self.settings.remote_url

    @property
    def cache_label(self) -> str:
        return f"cache({self.cache_path.name})"

    def load(self) -> ScheduleDataset:
        cached = self._read_cache()
        if cached is not None:
            logger.debug("Loaded schedule dataset from cache %s", self.cache_path)
            return self._decode(cached, origin=str(self.cache_path))
        logger.debug("Cache miss at %s; fetching %s", self.cache_path, self.remote_label)
        return self.fetch_remote()

    def fetch_remote(self) -> ScheduleDataset:
        url = self.settings.remote_url
        if not url.startswith(("http://", "https://")):
            return self._read_static(Path(url))
        try:
            if self.client is not None:
                response = self.client.get(url)
            else:
                with httpx.Client(timeout=self.settings.fetch_timeout) as client:
                    response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise DatasetUnavailableError(f"Failed to fetch schedule: {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise DatasetUnavailableError(f"Failed to fetch schedule: {exc}") from exc
        logger.info("Fetched schedule dataset from %s", url)
        return self._decode(response.content, origin=url)

    def persist(self, dataset: ScheduleDataset) -> None:
        path = self.cache_path
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = orjson.dumps(dataset.to_record())
        # Replace atomically so readers never observe a half-written cache.
        temp_path = path.with_name(path.name + ".tmp")
        try:
            temp_path.write_bytes(payload)
            os.replace(temp_path, path)
        finally:
            temp_path.unlink(missing_ok=True)
        logger.debug("Persisted schedule dataset (%d users) to %s", len(dataset.users), path)

    def export(self, dataset: ScheduleDataset, destination: Optional[Path] = None) -> Path:
        target = destination or self.settings.export_dir / self.settings.export_name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(orjson.dumps(dataset.to_record()))
        logger.info("Exported schedule dataset to %s", target)
        return target

    def clear_cache(self) -> bool:
        if not self.cache_path.exists():
            return False
        self.cache_path.unlink()
        return True

    def _read_cache(self) -> Optional[bytes]:
        if not self.cache_path.exists():
            return None
        raw = self.cache_path.read_bytes()
        return raw or None

    def _read_static(self, path: Path) -> ScheduleDataset:
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise DatasetUnavailableError(f"Failed to read schedule: {exc}") from exc
        return self._decode(raw, origin=str(path))

    @staticmethod
    def _decode(raw: bytes, *, origin: str) -> ScheduleDataset:
        try:
            record: Dict[str, Any] = orjson.loads(raw)
            return ScheduleDataset.from_record(record)
        except (orjson.JSONDecodeError, ValueError, KeyError, TypeError, AttributeError) as exc:
            raise DatasetUnavailableError(f"Schedule data at {origin} is not valid: {exc}") from exc


__all__ = ["DatasetUnavailableError", "ScheduleError", "ScheduleStore"]
