"""Composition root — wires concrete implementations to domain interfaces.

The CLI builds its stores and repositories through these factories, so
the application layer only ever sees the repository interfaces.  Nothing
here is a process-wide singleton.

Settings come from the environment and are read on each call:

- ``CARCONFIG_DATA_DIR``  directory holding saved configurations and the session
- ``CARCONFIG_CATALOG``   optional JSON catalog replacing the built-in one
- ``CARCONFIG_LOG_LEVEL`` logging level name
"""

from __future__ import annotations

import os
from pathlib import Path

from carconfig.application.configuration_store import ConfigurationStore
from carconfig.domain.model.catalog import Catalog
from carconfig.infrastructure.catalog_data import DEFAULT_CATALOG
from carconfig.infrastructure.persistence.json_catalog_loader import load_catalog
from carconfig.infrastructure.persistence.json_configuration_repository import (
    JsonConfigurationRepository,
)
from carconfig.infrastructure.persistence.json_session_repository import (
    JsonSessionRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.environ.get("CARCONFIG_DATA_DIR", _DEFAULT_DATA_DIR))


def log_level() -> str:
    return os.environ.get("CARCONFIG_LOG_LEVEL", "WARNING")


def catalog() -> Catalog:
    catalog_path = os.environ.get("CARCONFIG_CATALOG")
    if catalog_path:
        return load_catalog(Path(catalog_path))
    return Catalog.from_records(DEFAULT_CATALOG)


def configuration_repository() -> JsonConfigurationRepository:
    return JsonConfigurationRepository(data_dir() / "saved_configurations.json")


def session_repository() -> JsonSessionRepository:
    return JsonSessionRepository(data_dir() / "session.json")


def configuration_store(
    session_repo: JsonSessionRepository | None = None,
) -> ConfigurationStore:
    """Build a store, restoring the working session when one is given."""
    state = session_repo.load() if session_repo is not None else None
    return ConfigurationStore(
        catalog=catalog(),
        repository=configuration_repository(),
        configuration=state.configuration if state else None,
        history=state.history if state else None,
    )
