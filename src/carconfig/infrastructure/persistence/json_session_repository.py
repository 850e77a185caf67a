"""JSON-file-backed implementation of SessionRepository."""

from __future__ import annotations

import json
from pathlib import Path

from carconfig.domain.exceptions import PersistenceError, ValidationError
from carconfig.domain.model.configuration import Configuration, SavedConfiguration
from carconfig.domain.repository.session_repository import SessionRepository, SessionState


class JsonSessionRepository(SessionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- SessionRepository interface ------------------------------------------

    def load(self) -> SessionState | None:
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return SessionState(
                configuration=Configuration.from_record(raw["configuration"]),
                history=[SavedConfiguration.from_record(item) for item in raw.get("history", [])],
            )
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as exc:
            raise PersistenceError(f"Corrupt session file {self._file_path}") from exc

    def save(self, state: SessionState) -> None:
        raw = {
            "configuration": state.configuration.to_record(),
            "history": [item.to_record() for item in state.history],
        }
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc
