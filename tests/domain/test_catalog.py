"""Unit tests for the Catalog and option records."""

import copy

import pytest

from carconfig.domain.exceptions import EntityNotFoundError, ValidationError
from carconfig.domain.model.catalog import Catalog
from carconfig.domain.model.options import AddOnCategory, Wheel, WheelType
from carconfig.domain.model.value_objects import Money
from carconfig.infrastructure.catalog_data import DEFAULT_CATALOG


def _records() -> dict:
    return copy.deepcopy(DEFAULT_CATALOG)


class TestCatalogLoading:

    def test_builtin_catalog_loads(self):
        catalog = Catalog.from_records(_records())
        assert [v.id for v in catalog.variants] == ["ax", "lx", "x"]
        assert len(catalog.colors) == 5
        assert len(catalog.add_ons) == 6
        assert len(catalog.decals) == 4

    def test_prices_become_money(self):
        catalog = Catalog.from_records(_records())
        assert catalog.variant("lx").base_price == Money(1800000)
        assert catalog.add_on("winch-mount").price == Money(55000)

    def test_enums_are_parsed(self):
        catalog = Catalog.from_records(_records())
        assert catalog.wheel("alloy-r18").type is WheelType.ALLOY
        assert catalog.add_on("front-bullbar").category is AddOnCategory.PROTECTION

    def test_duplicate_id_rejected(self):
        records = _records()
        records["colors"].append(dict(records["colors"][0]))
        with pytest.raises(ValidationError, match="Duplicate id 'napoli-black'"):
            Catalog.from_records(records)

    def test_empty_single_select_category_rejected(self):
        records = _records()
        records["roofs"] = []
        with pytest.raises(ValidationError, match="at least one entry in 'roofs'"):
            Catalog.from_records(records)

    def test_empty_multi_select_category_allowed(self):
        records = _records()
        records["decals"] = []
        assert Catalog.from_records(records).decals == ()

    def test_unknown_category_rejected(self):
        records = _records()
        records["spoilers"] = []
        with pytest.raises(ValidationError, match="Unknown catalog categories: spoilers"):
            Catalog.from_records(records)

    def test_negative_price_rejected(self):
        records = _records()
        records["colors"][1]["price"] = -1
        with pytest.raises(ValidationError, match="cannot be negative"):
            Catalog.from_records(records)

    def test_unknown_enum_value_rejected(self):
        records = _records()
        records["decals"][0]["type"] = "sticker"
        with pytest.raises(ValidationError, match="Unknown DecalType 'sticker'"):
            Catalog.from_records(records)

    def test_missing_field_rejected(self):
        records = _records()
        del records["roofs"][0]["compatible_with"]
        with pytest.raises(ValidationError, match="missing 'compatible_with'"):
            Catalog.from_records(records)

    @pytest.mark.parametrize(
        "category, index, value",
        [("roofs", 1, "lx"), ("add_ons", 0, ["ax", 3]), ("wheels", 0, "x")],
    )
    def test_compatible_with_must_be_a_list_of_ids(self, category, index, value):
        records = _records()
        records[category][index]["compatible_with"] = value
        with pytest.raises(ValidationError, match="invalid 'compatible_with'"):
            Catalog.from_records(records)

    def test_records_round_trip(self):
        catalog = Catalog.from_records(_records())
        assert Catalog.from_records(catalog.to_records()) == catalog


class TestCatalogLookup:

    def test_lookup_by_id(self):
        catalog = Catalog.from_records(_records())
        assert catalog.roof("soft-top").name == "Soft Top"
        assert catalog.decal("matte-wrap").price == Money(120000)

    def test_unknown_id_raises_not_found(self):
        catalog = Catalog.from_records(_records())
        with pytest.raises(EntityNotFoundError, match="Variant 'zx' not found"):
            catalog.variant("zx")


class TestCompatibility:

    def test_compatible_roofs_for_ax_excludes_convertible(self):
        catalog = Catalog.from_records(_records())
        assert [r.id for r in catalog.compatible_roofs("ax")] == ["hardtop", "soft-top"]

    def test_compatible_add_ons_on_hardtop(self):
        catalog = Catalog.from_records(_records())
        ids = [a.id for a in catalog.compatible_add_ons("ax", "hardtop")]
        assert ids == ["front-bullbar", "roof-carrier", "underbody-protection"]

    def test_roof_carrier_hidden_without_hardtop(self):
        catalog = Catalog.from_records(_records())
        ids = [a.id for a in catalog.compatible_add_ons("x", "soft-top")]
        assert "roof-carrier" not in ids
        assert "winch-mount" in ids

    def test_first_compatible_roof(self):
        catalog = Catalog.from_records(_records())
        assert catalog.first_compatible_roof("lx").id == "hardtop"

    def test_first_compatible_roof_falls_back_to_first_roof(self):
        catalog = Catalog.from_records(_records())
        assert catalog.first_compatible_roof("unknown-variant").id == "hardtop"

    def test_wheel_without_restriction_fits_everything(self):
        wheel = Wheel(id="w", name="W", price=Money(0))
        assert wheel.is_compatible_with("anything")


class TestDefaultConfiguration:

    def test_default_uses_first_entries(self):
        config = Catalog.from_records(_records()).default_configuration()
        assert config.variant.id == "ax"
        assert config.color.id == "napoli-black"
        assert config.roof.id == "hardtop"
        assert config.wheels.id == "standard-r17"
        assert config.interior == ()
        assert config.add_ons == ()
        assert config.custom_plate == ""

    def test_each_default_gets_its_own_token(self):
        catalog = Catalog.from_records(_records())
        assert catalog.default_configuration().id != catalog.default_configuration().id
