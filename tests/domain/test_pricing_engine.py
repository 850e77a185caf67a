"""Unit tests for the Pricing Engine."""

from dataclasses import replace

from carconfig.domain.model.catalog import Catalog
from carconfig.domain.model.value_objects import Money
from carconfig.domain.service.pricing_engine import (
    CUSTOM_PLATE_FEE,
    compute_breakdown,
    compute_total,
    price_line_items,
)
from carconfig.infrastructure.catalog_data import DEFAULT_CATALOG

CATALOG = Catalog.from_records(DEFAULT_CATALOG)


def _loaded_configuration():
    """x variant with something picked in every category."""
    return replace(
        CATALOG.default_configuration(),
        variant=CATALOG.variant("x"),
        color=CATALOG.color("galaxy-grey"),
        roof=CATALOG.roof("convertible"),
        wheels=CATALOG.wheel("alloy-r18"),
        interior=(CATALOG.interior_option("leather-seats"), CATALOG.interior_option("red-stitching")),
        add_ons=(CATALOG.add_on("winch-mount"),),
        tech_packs=(CATALOG.tech_pack("sony-audio"),),
        decals=(CATALOG.decal("retro-stripe"),),
        custom_plate="THAR 4X4",
    )


class TestBreakdown:

    def test_default_configuration_costs_base_price(self):
        breakdown = compute_breakdown(CATALOG.default_configuration())
        assert breakdown.total == Money(1500000)
        assert breakdown.base == Money(1500000)
        assert breakdown.interior == Money(0)
        assert breakdown.custom_plate == Money(0)

    def test_subtotals_per_category(self):
        breakdown = compute_breakdown(_loaded_configuration())
        assert breakdown.as_dict() == {
            "base": 2000000,
            "color": 15000,
            "roof": 50000,
            "wheels": 45000,
            "interior": 75000,
            "add_ons": 55000,
            "tech_packs": 45000,
            "decals": 15000,
            "custom_plate": 5000,
            "total": 2305000,
        }

    def test_total_is_sum_of_subtotals(self):
        breakdown = compute_breakdown(_loaded_configuration())
        subtotals = breakdown.as_dict()
        total = subtotals.pop("total")
        assert total == sum(subtotals.values())

    def test_custom_plate_is_flat_fee(self):
        short = replace(CATALOG.default_configuration(), custom_plate="A")
        long = replace(CATALOG.default_configuration(), custom_plate="ABCDEFGHIJ")
        assert compute_breakdown(short).custom_plate == CUSTOM_PLATE_FEE
        assert compute_total(short) == compute_total(long) == Money(1505000)

    def test_deterministic(self):
        config = _loaded_configuration()
        assert compute_breakdown(config) == compute_breakdown(config)


class TestLineItems:

    def test_default_has_four_fixed_lines(self):
        lines = price_line_items(CATALOG.default_configuration())
        assert [line.label for line in lines] == ["Base Price", "Color", "Roof", "Wheels"]

    def test_one_line_per_selected_item(self):
        lines = price_line_items(_loaded_configuration())
        labels = [line.label for line in lines]
        assert labels[4:] == [
            "Leather Seat Upgrade",
            "Red Stitching Trim",
            "Winch Mount",
            "Sony Audio System",
            "Retro Stripe Decal",
            "Custom Plate",
        ]
        assert lines[6].category == "accessories"

    def test_line_items_add_up_to_total(self):
        config = _loaded_configuration()
        assert sum(line.amount.amount for line in price_line_items(config)) == compute_total(config).amount
