"""Data Transfer Objects — the read model handed to the presentation layer.

A ``ConfigurationView`` is computed once per mutation and is immutable,
so the price, validation and summary it carries always describe exactly
the configuration it was built from.
"""

from __future__ import annotations

from dataclasses import dataclass

from carconfig.domain.model.configuration import Configuration
from carconfig.domain.model.options import AddOn, Decal, Roof, TechPack
from carconfig.domain.service.compatibility_validator import ConfigurationValidation
from carconfig.domain.service.pricing_engine import PriceBreakdown, PriceLineItem


@dataclass(frozen=True)
class ConfigSummary:
    """Flattened names and ids of the current selection."""

    config_id: str
    variant_id: str
    variant: str
    color_id: str
    color: str
    roof_id: str
    roof: str
    wheels_id: str
    wheels: str
    interior: tuple[str, ...]
    add_ons: tuple[str, ...]
    tech_packs: tuple[str, ...]
    decals: tuple[str, ...]
    custom_plate: str
    total_price: int
    formatted_price: str


@dataclass(frozen=True)
class CompatibleOptions:
    """Options the presentation layer may offer for the current selection."""

    roofs: tuple[Roof, ...]
    add_ons: tuple[AddOn, ...]
    tech_packs: tuple[TechPack, ...]
    decals: tuple[Decal, ...]


@dataclass(frozen=True)
class ConfigurationView:
    configuration: Configuration
    price_breakdown: PriceBreakdown
    line_items: tuple[PriceLineItem, ...]
    total_price: int
    formatted_price: str
    validation: ConfigurationValidation
    summary: ConfigSummary
    compatible_options: CompatibleOptions


@dataclass(frozen=True)
class SavedConfigurationDTO:
    """Output: one saved configuration as listed to the user."""

    id: str
    created_at: str
    variant: str
    color: str
    roof: str
    wheels: str
    total_price: int
    formatted_price: str
