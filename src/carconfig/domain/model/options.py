"""Catalog options — one immutable type per configurator category.

Options are reference data: the store never mutates them, it only swaps
which option a configuration points at.  Every option knows how to turn
itself into a plain JSON-friendly record and back, which is the format
used both by catalog files and by saved configurations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from carconfig.domain.exceptions import ValidationError
from carconfig.domain.model.value_objects import Money


class WheelType(Enum):
    STANDARD = "standard"
    ALLOY = "alloy"
    OFFROAD = "offroad"


class InteriorCategory(Enum):
    DASHBOARD = "dashboard"
    SEATS = "seats"
    TRIM = "trim"
    LIGHTING = "lighting"


class AddOnCategory(Enum):
    PROTECTION = "protection"
    UTILITY = "utility"
    STYLE = "style"


class DecalType(Enum):
    STRIPE = "stripe"
    WRAP = "wrap"
    PLATE = "plate"
    TINT = "tint"


@dataclass(frozen=True)
class Variant:
    id: str
    name: str
    base_price: Money
    description: str = ""
    features: tuple[str, ...] = ()

    @property
    def price(self) -> Money:
        return self.base_price

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "base_price": self.base_price.amount,
            "description": self.description,
            "features": list(self.features),
        }

    @staticmethod
    def from_record(raw: dict) -> Variant:
        return Variant(
            id=_require(raw, "id"),
            name=_require(raw, "name"),
            base_price=Money.of(_require(raw, "base_price")),
            description=raw.get("description", ""),
            features=tuple(raw.get("features", ())),
        )


@dataclass(frozen=True)
class Color:
    id: str
    name: str
    price: Money
    hex: str = ""

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price.amount,
            "hex": self.hex,
        }

    @staticmethod
    def from_record(raw: dict) -> Color:
        return Color(
            id=_require(raw, "id"),
            name=_require(raw, "name"),
            price=Money.of(_require(raw, "price")),
            hex=raw.get("hex", ""),
        )


@dataclass(frozen=True)
class Roof:
    id: str
    name: str
    price: Money
    compatible_with: frozenset[str] = frozenset()

    def is_compatible_with(self, variant_id: str) -> bool:
        return variant_id in self.compatible_with

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price.amount,
            "compatible_with": sorted(self.compatible_with),
        }

    @staticmethod
    def from_record(raw: dict) -> Roof:
        return Roof(
            id=_require(raw, "id"),
            name=_require(raw, "name"),
            price=Money.of(_require(raw, "price")),
            compatible_with=_variant_ids(raw, _require(raw, "compatible_with")),
        )


@dataclass(frozen=True)
class Wheel:
    """A wheel option.

    ``compatible_with`` is ``None`` when the wheel fits every variant.
    Nothing repairs or validates wheels against the variant.
    """

    id: str
    name: str
    price: Money
    size: str = ""
    type: WheelType = WheelType.STANDARD
    compatible_with: frozenset[str] | None = None

    def is_compatible_with(self, variant_id: str) -> bool:
        return self.compatible_with is None or variant_id in self.compatible_with

    def to_record(self) -> dict:
        record = {
            "id": self.id,
            "name": self.name,
            "price": self.price.amount,
            "size": self.size,
            "type": self.type.value,
        }
        if self.compatible_with is not None:
            record["compatible_with"] = sorted(self.compatible_with)
        return record

    @staticmethod
    def from_record(raw: dict) -> Wheel:
        compatible = raw.get("compatible_with")
        return Wheel(
            id=_require(raw, "id"),
            name=_require(raw, "name"),
            price=Money.of(_require(raw, "price")),
            size=raw.get("size", ""),
            type=_enum(WheelType, raw.get("type", "standard")),
            compatible_with=_variant_ids(raw, compatible) if compatible is not None else None,
        )


@dataclass(frozen=True)
class InteriorOption:
    id: str
    name: str
    price: Money
    category: InteriorCategory

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price.amount,
            "category": self.category.value,
        }

    @staticmethod
    def from_record(raw: dict) -> InteriorOption:
        return InteriorOption(
            id=_require(raw, "id"),
            name=_require(raw, "name"),
            price=Money.of(_require(raw, "price")),
            category=_enum(InteriorCategory, _require(raw, "category")),
        )


@dataclass(frozen=True)
class AddOn:
    id: str
    name: str
    price: Money
    category: AddOnCategory
    compatible_with: frozenset[str] = frozenset()

    def is_compatible_with(self, variant_id: str) -> bool:
        return variant_id in self.compatible_with

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price.amount,
            "category": self.category.value,
            "compatible_with": sorted(self.compatible_with),
        }

    @staticmethod
    def from_record(raw: dict) -> AddOn:
        return AddOn(
            id=_require(raw, "id"),
            name=_require(raw, "name"),
            price=Money.of(_require(raw, "price")),
            category=_enum(AddOnCategory, _require(raw, "category")),
            compatible_with=_variant_ids(raw, _require(raw, "compatible_with")),
        )


@dataclass(frozen=True)
class TechPack:
    id: str
    name: str
    price: Money
    features: tuple[str, ...] = ()

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price.amount,
            "features": list(self.features),
        }

    @staticmethod
    def from_record(raw: dict) -> TechPack:
        return TechPack(
            id=_require(raw, "id"),
            name=_require(raw, "name"),
            price=Money.of(_require(raw, "price")),
            features=tuple(raw.get("features", ())),
        )


@dataclass(frozen=True)
class Decal:
    id: str
    name: str
    price: Money
    type: DecalType

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price.amount,
            "type": self.type.value,
        }

    @staticmethod
    def from_record(raw: dict) -> Decal:
        return Decal(
            id=_require(raw, "id"),
            name=_require(raw, "name"),
            price=Money.of(_require(raw, "price")),
            type=_enum(DecalType, _require(raw, "type")),
        )


# --- Record helpers -----------------------------------------------------------


def _require(raw: dict, key: str):
    try:
        return raw[key]
    except KeyError:
        raise ValidationError(
            f"Option record {raw.get('id', '<no id>')!r} is missing '{key}'"
        ) from None


def _enum(enum_cls: type[Enum], value: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            f"Unknown {enum_cls.__name__} {value!r} (expected one of: {allowed})"
        ) from None


def _variant_ids(raw: dict, value) -> frozenset[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValidationError(
            f"Option record {raw.get('id', '<no id>')!r} has invalid 'compatible_with' "
            f"{value!r} (expected a list of variant ids)"
        )
    return frozenset(value)
