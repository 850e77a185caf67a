"""Load a catalog from a JSON file in the category -> records format."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from carconfig.domain.exceptions import ValidationError
from carconfig.domain.model.catalog import Catalog

logger = logging.getLogger(__name__)


def load_catalog(file_path: Path) -> Catalog:
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValidationError(f"Cannot load catalog from {file_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValidationError(f"Catalog file {file_path} must contain a JSON object")
    catalog = Catalog.from_records(data)
    logger.info("Loaded catalog from %s (%d variants)", file_path, len(catalog.variants))
    return catalog
