"""Application service: List Saved Configurations use case (query)."""

from __future__ import annotations

from carconfig.application.configuration_store import ConfigurationStore
from carconfig.application.dto import SavedConfigurationDTO
from carconfig.domain.model.configuration import SavedConfiguration
from carconfig.domain.model.value_objects import format_price


class ListSavedConfigurationsHandler:

    def __init__(self, store: ConfigurationStore) -> None:
        self._store = store

    def handle(self, history_only: bool = False) -> list[SavedConfigurationDTO]:
        """Saved configurations, oldest first.

        With ``history_only`` only the recent in-session saves are listed.
        """
        if history_only:
            saved = self._store.history
        else:
            saved = self._store.list_saved_configurations()
        return [self._to_dto(item) for item in saved]

    @staticmethod
    def _to_dto(saved: SavedConfiguration) -> SavedConfigurationDTO:
        return SavedConfigurationDTO(
            id=saved.id,  # type: ignore[arg-type]
            created_at=saved.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            variant=saved.variant.name,
            color=saved.color.name,
            roof=saved.roof.name,
            wheels=saved.wheels.name,
            total_price=saved.total_price,
            formatted_price=format_price(saved.total_price),
        )
