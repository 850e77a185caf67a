"""Domain service: Pricing Engine.

Pure functions from a configuration to its itemised price.  Nothing is
cached here; the store calls ``compute_breakdown`` once per mutation and
keeps the result on the published view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from carconfig.domain.model.configuration import Configuration
from carconfig.domain.model.value_objects import Money

# Flat fee for a personalised number plate, independent of the catalog.
CUSTOM_PLATE_FEE = Money(5000)


@dataclass(frozen=True)
class PriceBreakdown:
    base: Money
    color: Money
    roof: Money
    wheels: Money
    interior: Money
    add_ons: Money
    tech_packs: Money
    decals: Money
    custom_plate: Money

    @property
    def total(self) -> Money:
        return (
            self.base
            + self.color
            + self.roof
            + self.wheels
            + self.interior
            + self.add_ons
            + self.tech_packs
            + self.decals
            + self.custom_plate
        )

    def as_dict(self) -> dict[str, int]:
        return {
            "base": self.base.amount,
            "color": self.color.amount,
            "roof": self.roof.amount,
            "wheels": self.wheels.amount,
            "interior": self.interior.amount,
            "add_ons": self.add_ons.amount,
            "tech_packs": self.tech_packs.amount,
            "decals": self.decals.amount,
            "custom_plate": self.custom_plate.amount,
            "total": self.total.amount,
        }


@dataclass(frozen=True)
class PriceLineItem:
    label: str
    amount: Money
    category: str  # base / exterior / interior / accessories / technology


def compute_breakdown(config: Configuration) -> PriceBreakdown:
    return PriceBreakdown(
        base=config.variant.base_price,
        color=config.color.price,
        roof=config.roof.price,
        wheels=config.wheels.price,
        interior=_sum(item.price for item in config.interior),
        add_ons=_sum(item.price for item in config.add_ons),
        tech_packs=_sum(item.price for item in config.tech_packs),
        decals=_sum(item.price for item in config.decals),
        custom_plate=CUSTOM_PLATE_FEE if config.custom_plate else Money.zero(),
    )


def compute_total(config: Configuration) -> Money:
    return compute_breakdown(config).total


def price_line_items(config: Configuration) -> list[PriceLineItem]:
    """One line per priced element, in price-panel order."""
    lines = [
        PriceLineItem("Base Price", config.variant.base_price, "base"),
        PriceLineItem("Color", config.color.price, "exterior"),
        PriceLineItem("Roof", config.roof.price, "exterior"),
        PriceLineItem("Wheels", config.wheels.price, "exterior"),
    ]
    lines += [PriceLineItem(item.name, item.price, "interior") for item in config.interior]
    lines += [PriceLineItem(item.name, item.price, "accessories") for item in config.add_ons]
    lines += [PriceLineItem(item.name, item.price, "technology") for item in config.tech_packs]
    lines += [PriceLineItem(item.name, item.price, "exterior") for item in config.decals]
    if config.custom_plate:
        lines.append(PriceLineItem("Custom Plate", CUSTOM_PLATE_FEE, "exterior"))
    return lines


def _sum(prices: Iterable[Money]) -> Money:
    result = Money.zero()
    for price in prices:
        result = result + price
    return result
