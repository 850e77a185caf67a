"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from carconfig.domain.exceptions import ValidationError
from carconfig.domain.model.catalog import CATEGORY_PARSERS, Catalog


@dataclass(frozen=True)
class CatalogLineDTO:
    category: str
    id: str
    name: str
    price: str
    compatible_with: str  # "" when the option fits every variant


class ShowCatalogHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self, category: str | None = None) -> list[CatalogLineDTO]:
        if category is not None and category not in CATEGORY_PARSERS:
            raise ValidationError(
                f"Unknown category '{category}' "
                f"(expected one of: {', '.join(CATEGORY_PARSERS)})"
            )
        categories = [category] if category else list(CATEGORY_PARSERS)
        return [
            CatalogLineDTO(
                category=name,
                id=option.id,
                name=option.name,
                price=str(option.price),
                compatible_with=", ".join(sorted(getattr(option, "compatible_with", None) or ())),
            )
            for name in categories
            for option in getattr(self._catalog, name)
        ]
