"""Application service: the Configuration Store.

Holds the configuration being edited and applies the user's intents to
it.  Every operation follows the same steps:

  1. read the current snapshot,
  2. apply the change and any cascading repair,
  3. recompute price and validation into a new ``ConfigurationView``,
  4. publish the view with a single reference swap.

Readers therefore only ever see complete, consistent views.  Repairs only
happen for roofs and add-ons; wheels are left alone on a variant change
even when they no longer fit.

Compatibility problems never block a mutation: they surface as errors on
``view.validation`` and the caller decides what to do with them.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import replace
from typing import TypeVar

from carconfig.application.dto import CompatibleOptions, ConfigSummary, ConfigurationView
from carconfig.domain.model.catalog import Catalog
from carconfig.domain.model.configuration import (
    HARDTOP_ROOF_ID,
    ROOF_CARRIER_ID,
    Configuration,
    SavedConfiguration,
    new_config_token,
)
from carconfig.domain.model.options import (
    AddOn,
    Color,
    Decal,
    InteriorOption,
    Roof,
    TechPack,
    Variant,
    Wheel,
)
from carconfig.domain.repository.configuration_repository import ConfigurationRepository
from carconfig.domain.repository.session_repository import SessionState
from carconfig.domain.service.comparison import ConfigurationComparison, compare_configurations
from carconfig.domain.service.compatibility_validator import validate
from carconfig.domain.service.pricing_engine import compute_breakdown, price_line_items

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 10

T = TypeVar("T", InteriorOption, AddOn, TechPack, Decal)


class ConfigurationStore:

    def __init__(
        self,
        catalog: Catalog,
        repository: ConfigurationRepository,
        configuration: Configuration | None = None,
        history: list[SavedConfiguration] | None = None,
    ) -> None:
        self._catalog = catalog
        self._repository = repository
        self._history: deque[SavedConfiguration] = deque(history or [], maxlen=HISTORY_LIMIT)
        self._view = self._build_view(configuration or catalog.default_configuration())

    # --- Read model -----------------------------------------------------------

    @property
    def view(self) -> ConfigurationView:
        return self._view

    @property
    def configuration(self) -> Configuration:
        return self._view.configuration

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def history(self) -> list[SavedConfiguration]:
        """Recently saved configurations, oldest first."""
        return list(self._history)

    def session_state(self) -> SessionState:
        return SessionState(configuration=self.configuration, history=self.history)

    # --- Single-select mutations ----------------------------------------------

    def set_variant(self, variant: Variant) -> ConfigurationView:
        """Switch variant, repairing the roof and add-ons that no longer fit.

        The roof falls back to the first catalog roof compatible with the
        new variant.  Add-ons incompatible with the variant, and the roof
        carrier on anything but a hardtop, are dropped.  Wheels are kept
        as they are.
        """
        current = self.configuration

        roof = current.roof
        if not roof.is_compatible_with(variant.id):
            roof = self._catalog.first_compatible_roof(variant.id)
            logger.info(
                "Roof '%s' does not fit variant '%s', replaced by '%s'",
                current.roof.id, variant.id, roof.id,
            )

        add_ons = tuple(
            add_on
            for add_on in current.add_ons
            if add_on.is_compatible_with(variant.id)
            and (add_on.id != ROOF_CARRIER_ID or roof.id == HARDTOP_ROOF_ID)
        )
        self._log_dropped(current.add_ons, add_ons, f"variant '{variant.id}'")

        return self._publish(replace(current, variant=variant, roof=roof, add_ons=add_ons))

    def set_color(self, color: Color) -> ConfigurationView:
        return self._publish(replace(self.configuration, color=color))

    def set_roof(self, roof: Roof) -> ConfigurationView:
        """Switch roof; the roof carrier is dropped unless the roof is a hardtop."""
        current = self.configuration
        add_ons = tuple(
            add_on
            for add_on in current.add_ons
            if add_on.id != ROOF_CARRIER_ID or roof.id == HARDTOP_ROOF_ID
        )
        self._log_dropped(current.add_ons, add_ons, f"roof '{roof.id}'")
        return self._publish(replace(current, roof=roof, add_ons=add_ons))

    def set_wheels(self, wheels: Wheel) -> ConfigurationView:
        return self._publish(replace(self.configuration, wheels=wheels))

    # --- Multi-select toggles -------------------------------------------------
    # Toggling never checks compatibility; an incompatible choice shows up
    # as a validation error instead.

    def toggle_interior(self, item: InteriorOption) -> ConfigurationView:
        current = self.configuration
        return self._publish(replace(current, interior=_toggle(current.interior, item)))

    def toggle_add_on(self, item: AddOn) -> ConfigurationView:
        current = self.configuration
        return self._publish(replace(current, add_ons=_toggle(current.add_ons, item)))

    def toggle_tech_pack(self, item: TechPack) -> ConfigurationView:
        current = self.configuration
        return self._publish(replace(current, tech_packs=_toggle(current.tech_packs, item)))

    def toggle_decal(self, item: Decal) -> ConfigurationView:
        current = self.configuration
        return self._publish(replace(current, decals=_toggle(current.decals, item)))

    # --- Other mutations ------------------------------------------------------

    def set_custom_plate(self, plate: str) -> ConfigurationView:
        """Replace the plate text.  Length limits are an input concern."""
        return self._publish(replace(self.configuration, custom_plate=plate))

    def reset_configuration(self) -> ConfigurationView:
        return self._publish(self._catalog.default_configuration())

    # --- Saving and loading ---------------------------------------------------

    def save_configuration(self) -> SavedConfiguration:
        """Persist the current snapshot under a new stable id.

        If the repository fails, the error propagates and neither the
        history nor the current configuration changes.
        """
        view = self._view
        saved = SavedConfiguration(
            id=self._repository.next_id(),
            configuration=view.configuration,
            total_price=view.total_price,
        )
        self._repository.save(saved)
        self._history.append(saved)
        logger.info("Saved configuration '%s' (%s)", saved.id, view.formatted_price)
        return saved

    def load_configuration(
        self, config: Configuration | SavedConfiguration
    ) -> ConfigurationView:
        """Adopt a snapshot verbatim.

        No repair is applied: whatever the snapshot holds is what the
        user gets, with validation recomputed for display.  A saved
        snapshot's stable id becomes the current identity.
        """
        if isinstance(config, SavedConfiguration):
            snapshot = replace(config.configuration, id=config.id)
        else:
            snapshot = config
        self._view = self._build_view(snapshot)
        logger.debug("Loaded configuration '%s'", snapshot.id)
        return self._view

    def load_configuration_by_id(self, config_id: str) -> ConfigurationView | None:
        """Load a saved configuration.  An unknown id is a silent no-op."""
        saved = self._repository.get_by_id(config_id)
        if saved is None:
            logger.info("No saved configuration '%s'; nothing loaded", config_id)
            return None
        return self.load_configuration(saved)

    def get_saved_configuration(self, config_id: str) -> SavedConfiguration | None:
        return self._repository.get_by_id(config_id)

    def list_saved_configurations(self) -> list[SavedConfiguration]:
        return self._repository.list_all()

    def delete_configuration(self, config_id: str) -> bool:
        deleted = self._repository.delete_by_id(config_id)
        if deleted:
            self._history = deque(
                (saved for saved in self._history if saved.id != config_id),
                maxlen=HISTORY_LIMIT,
            )
            logger.info("Deleted saved configuration '%s'", config_id)
        return deleted

    @staticmethod
    def compare_configurations(
        first: Configuration | SavedConfiguration,
        second: Configuration | SavedConfiguration,
    ) -> ConfigurationComparison:
        return compare_configurations(first, second)

    # --- Internal helpers -----------------------------------------------------

    def _publish(self, config: Configuration) -> ConfigurationView:
        config = replace(config, id=new_config_token())
        self._view = self._build_view(config)
        logger.debug(
            "Configuration %s: total=%s errors=%d warnings=%d",
            config.id,
            self._view.formatted_price,
            len(self._view.validation.errors),
            len(self._view.validation.warnings),
        )
        return self._view

    def _build_view(self, config: Configuration) -> ConfigurationView:
        breakdown = compute_breakdown(config)
        total = breakdown.total
        return ConfigurationView(
            configuration=config,
            price_breakdown=breakdown,
            line_items=tuple(price_line_items(config)),
            total_price=total.amount,
            formatted_price=str(total),
            validation=validate(config),
            summary=ConfigSummary(
                config_id=config.id,
                variant_id=config.variant.id,
                variant=config.variant.name,
                color_id=config.color.id,
                color=config.color.name,
                roof_id=config.roof.id,
                roof=config.roof.name,
                wheels_id=config.wheels.id,
                wheels=config.wheels.name,
                interior=tuple(item.name for item in config.interior),
                add_ons=tuple(item.name for item in config.add_ons),
                tech_packs=tuple(item.name for item in config.tech_packs),
                decals=tuple(item.name for item in config.decals),
                custom_plate=config.custom_plate,
                total_price=total.amount,
                formatted_price=str(total),
            ),
            compatible_options=CompatibleOptions(
                roofs=tuple(self._catalog.compatible_roofs(config.variant.id)),
                add_ons=tuple(
                    self._catalog.compatible_add_ons(config.variant.id, config.roof.id)
                ),
                tech_packs=self._catalog.tech_packs,
                decals=self._catalog.decals,
            ),
        )

    @staticmethod
    def _log_dropped(before: tuple[AddOn, ...], after: tuple[AddOn, ...], cause: str) -> None:
        dropped = [add_on.id for add_on in before if add_on not in after]
        if dropped:
            logger.info("Dropped add-ons %s incompatible with %s", ", ".join(dropped), cause)


def _toggle(items: tuple[T, ...], item: T) -> tuple[T, ...]:
    """Remove the option if an option with the same id is selected, else append it."""
    if any(existing.id == item.id for existing in items):
        return tuple(existing for existing in items if existing.id != item.id)
    return items + (item,)
