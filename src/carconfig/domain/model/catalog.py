"""Catalog — the static reference data every configuration is built from.

Loaded once at start-up and shared read-only by every store.  Order
within a category matters: the first variant/color/roof/wheel is the
factory default, and the first compatible roof wins on repair.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from carconfig.domain.exceptions import EntityNotFoundError, ValidationError
from carconfig.domain.model.configuration import (
    HARDTOP_ROOF_ID,
    ROOF_CARRIER_ID,
    Configuration,
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

T = TypeVar("T")

# Category key -> record parser.  Keys are the catalog data format.
CATEGORY_PARSERS: dict[str, Callable[[dict], object]] = {
    "variants": Variant.from_record,
    "colors": Color.from_record,
    "roofs": Roof.from_record,
    "wheels": Wheel.from_record,
    "interior": InteriorOption.from_record,
    "add_ons": AddOn.from_record,
    "tech_packs": TechPack.from_record,
    "decals": Decal.from_record,
}

SINGLE_SELECT_CATEGORIES = ("variants", "colors", "roofs", "wheels")


@dataclass(frozen=True)
class Catalog:
    variants: tuple[Variant, ...]
    colors: tuple[Color, ...]
    roofs: tuple[Roof, ...]
    wheels: tuple[Wheel, ...]
    interior: tuple[InteriorOption, ...] = ()
    add_ons: tuple[AddOn, ...] = ()
    tech_packs: tuple[TechPack, ...] = ()
    decals: tuple[Decal, ...] = ()

    def __post_init__(self) -> None:
        for category in CATEGORY_PARSERS:
            options = getattr(self, category)
            if category in SINGLE_SELECT_CATEGORIES and not options:
                raise ValidationError(f"Catalog must define at least one entry in '{category}'")
            seen: set[str] = set()
            for option in options:
                if option.id in seen:
                    raise ValidationError(
                        f"Duplicate id '{option.id}' in catalog category '{category}'"
                    )
                seen.add(option.id)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_records(data: dict[str, list[dict]]) -> Catalog:
        """Build a catalog from the category -> ordered records format."""
        unknown = set(data) - set(CATEGORY_PARSERS)
        if unknown:
            raise ValidationError(
                f"Unknown catalog categories: {', '.join(sorted(unknown))}"
            )
        parsed = {
            category: tuple(parse(raw) for raw in data.get(category, []))
            for category, parse in CATEGORY_PARSERS.items()
        }
        return Catalog(**parsed)

    def to_records(self) -> dict[str, list[dict]]:
        return {
            category: [option.to_record() for option in getattr(self, category)]
            for category in CATEGORY_PARSERS
        }

    # --- Lookup ---------------------------------------------------------------

    def variant(self, variant_id: str) -> Variant:
        return self._find(self.variants, variant_id, "Variant")

    def color(self, color_id: str) -> Color:
        return self._find(self.colors, color_id, "Color")

    def roof(self, roof_id: str) -> Roof:
        return self._find(self.roofs, roof_id, "Roof")

    def wheel(self, wheel_id: str) -> Wheel:
        return self._find(self.wheels, wheel_id, "Wheel")

    def interior_option(self, option_id: str) -> InteriorOption:
        return self._find(self.interior, option_id, "Interior option")

    def add_on(self, add_on_id: str) -> AddOn:
        return self._find(self.add_ons, add_on_id, "Add-on")

    def tech_pack(self, tech_pack_id: str) -> TechPack:
        return self._find(self.tech_packs, tech_pack_id, "Tech pack")

    def decal(self, decal_id: str) -> Decal:
        return self._find(self.decals, decal_id, "Decal")

    # --- Compatibility queries ------------------------------------------------

    def compatible_roofs(self, variant_id: str) -> list[Roof]:
        return [roof for roof in self.roofs if roof.is_compatible_with(variant_id)]

    def compatible_add_ons(self, variant_id: str, roof_id: str) -> list[AddOn]:
        return [
            add_on
            for add_on in self.add_ons
            if add_on.is_compatible_with(variant_id)
            and (add_on.id != ROOF_CARRIER_ID or roof_id == HARDTOP_ROOF_ID)
        ]

    def first_compatible_roof(self, variant_id: str) -> Roof:
        """First roof fitting the variant, falling back to the first roof."""
        compatible = self.compatible_roofs(variant_id)
        return compatible[0] if compatible else self.roofs[0]

    # --- Defaults -------------------------------------------------------------

    def default_configuration(self) -> Configuration:
        return Configuration(
            variant=self.variants[0],
            color=self.colors[0],
            roof=self.roofs[0],
            wheels=self.wheels[0],
        )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _find(options: tuple[T, ...], option_id: str, label: str) -> T:
        for option in options:
            if option.id == option_id:  # type: ignore[attr-defined]
                return option
        raise EntityNotFoundError(f"{label} '{option_id}' not found in catalog")
