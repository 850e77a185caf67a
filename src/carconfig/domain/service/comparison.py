"""Domain service: side-by-side comparison of two configurations."""

from __future__ import annotations

from dataclasses import dataclass

from carconfig.domain.model.configuration import Configuration, SavedConfiguration
from carconfig.domain.model.value_objects import format_price
from carconfig.domain.service.pricing_engine import compute_total


@dataclass(frozen=True)
class ConfigurationComparison:
    price_difference: int  # first minus second, may be negative
    formatted_price_difference: str  # absolute value
    is_more_expensive: bool
    differences: dict[str, bool]

    @property
    def differing_fields(self) -> list[str]:
        return [name for name, differs in self.differences.items() if differs]


def compare_configurations(
    first: Configuration | SavedConfiguration,
    second: Configuration | SavedConfiguration,
) -> ConfigurationComparison:
    """Compare two configurations without touching any state.

    Single-select fields are compared by option id.  Collections are
    compared by length only, so two different add-on sets of the same
    size are reported as "not different".
    """
    a = _unwrap(first)
    b = _unwrap(second)
    difference = compute_total(a).amount - compute_total(b).amount

    return ConfigurationComparison(
        price_difference=difference,
        formatted_price_difference=format_price(abs(difference)),
        is_more_expensive=difference > 0,
        differences={
            "variant": a.variant.id != b.variant.id,
            "color": a.color.id != b.color.id,
            "roof": a.roof.id != b.roof.id,
            "wheels": a.wheels.id != b.wheels.id,
            "interior": len(a.interior) != len(b.interior),
            "add_ons": len(a.add_ons) != len(b.add_ons),
            "tech_packs": len(a.tech_packs) != len(b.tech_packs),
            "decals": len(a.decals) != len(b.decals),
        },
    )


def _unwrap(config: Configuration | SavedConfiguration) -> Configuration:
    if isinstance(config, SavedConfiguration):
        return config.configuration
    return config
