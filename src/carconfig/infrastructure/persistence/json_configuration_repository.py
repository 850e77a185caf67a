"""JSON-file-backed implementation of ConfigurationRepository."""

from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path

from carconfig.domain.exceptions import PersistenceError, ValidationError
from carconfig.domain.model.configuration import SavedConfiguration
from carconfig.domain.repository.configuration_repository import ConfigurationRepository

logger = logging.getLogger(__name__)


class JsonConfigurationRepository(ConfigurationRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ConfigurationRepository interface ------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def list_all(self) -> list[SavedConfiguration]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def get_by_id(self, config_id: str) -> SavedConfiguration | None:
        for raw in self._load_raw():
            if raw["id"] == config_id:
                return self._to_domain(raw)
        return None

    def save(self, saved: SavedConfiguration) -> str:
        records = self._load_raw()

        if saved.id is None:
            saved.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == saved.id:
                records[i] = self._to_raw(saved)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(saved))

        self._persist_raw(records)
        return saved.id

    def delete_by_id(self, config_id: str) -> bool:
        records = self._load_raw()
        remaining = [raw for raw in records if raw["id"] != config_id]
        if len(remaining) == len(records):
            return False
        self._persist_raw(remaining)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(saved: SavedConfiguration) -> dict:
        return saved.to_record()

    def _to_domain(self, raw: dict) -> SavedConfiguration:
        try:
            return SavedConfiguration.from_record(raw)
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as exc:
            raise PersistenceError(
                f"Corrupt saved configuration {raw['id']!r} "
                f"in {self._file_path}"
            ) from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        # Every record must at least be an object carrying its id.
        if not isinstance(records, list) or not all(
            isinstance(raw, dict) and isinstance(raw.get("id"), str) for raw in records
        ):
            raise PersistenceError(
                f"Corrupt saved configurations file {self._file_path}: "
                "expected a list of records with string ids"
            )
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc
        logger.debug("Wrote %d saved configurations to %s", len(records), self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
            except OSError as exc:
                raise PersistenceError(f"Cannot create {self._file_path}: {exc}") from exc
