"""Configuration aggregate — the customer's current selection.

A ``Configuration`` is an immutable snapshot.  The store "mutates" the
selection by building a new snapshot with ``dataclasses.replace`` and
publishing it, so a reader never sees a half-applied change.

The ``id`` carried by a Configuration is a mutation token: it changes on
every change of the selection and does NOT identify a saved configuration.
Saved configurations get their own stable id (see ``SavedConfiguration``).
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

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

MAX_CUSTOM_PLATE_LENGTH = 10

ROOF_CARRIER_ID = "roof-carrier"
HARDTOP_ROOF_ID = "hardtop"


def new_config_token() -> str:
    """Fresh opaque identity token for a mutated configuration."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Configuration:
    """Exactly one variant, color, roof and wheel set; zero or more of the rest."""

    variant: Variant
    color: Color
    roof: Roof
    wheels: Wheel
    interior: tuple[InteriorOption, ...] = ()
    add_ons: tuple[AddOn, ...] = ()
    tech_packs: tuple[TechPack, ...] = ()
    decals: tuple[Decal, ...] = ()
    custom_plate: str = ""
    id: str = field(default_factory=new_config_token)

    def has_add_on(self, add_on_id: str) -> bool:
        return any(item.id == add_on_id for item in self.add_ons)

    def has_decal(self, decal_id: str) -> bool:
        return any(item.id == decal_id for item in self.decals)

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "variant": self.variant.to_record(),
            "color": self.color.to_record(),
            "roof": self.roof.to_record(),
            "wheels": self.wheels.to_record(),
            "interior": [item.to_record() for item in self.interior],
            "add_ons": [item.to_record() for item in self.add_ons],
            "tech_packs": [item.to_record() for item in self.tech_packs],
            "decals": [item.to_record() for item in self.decals],
            "custom_plate": self.custom_plate,
        }

    @staticmethod
    def from_record(raw: dict) -> Configuration:
        """Rebuild a snapshot from its record without re-validating it.

        Option records are restored as they were saved (price snapshot),
        independent of the current catalog.
        """
        return Configuration(
            id=raw["id"],
            variant=Variant.from_record(raw["variant"]),
            color=Color.from_record(raw["color"]),
            roof=Roof.from_record(raw["roof"]),
            wheels=Wheel.from_record(raw["wheels"]),
            interior=tuple(InteriorOption.from_record(r) for r in raw.get("interior", [])),
            add_ons=tuple(AddOn.from_record(r) for r in raw.get("add_ons", [])),
            tech_packs=tuple(TechPack.from_record(r) for r in raw.get("tech_packs", [])),
            decals=tuple(Decal.from_record(r) for r in raw.get("decals", [])),
            custom_plate=raw.get("custom_plate") or "",
        )


@dataclass
class SavedConfiguration:
    """A configuration snapshot persisted under a stable id.

    ``id`` is ``None`` until the repository assigns one, the same way a
    freshly created order has no id until it is saved.
    """

    id: str | None
    configuration: Configuration
    total_price: int
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "total_price": self.total_price,
            "configuration": self.configuration.to_record(),
        }

    @staticmethod
    def from_record(raw: dict) -> SavedConfiguration:
        return SavedConfiguration(
            id=raw["id"],
            configuration=Configuration.from_record(raw["configuration"]),
            total_price=raw["total_price"],
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    @property
    def variant(self) -> Variant:
        return self.configuration.variant

    @property
    def color(self) -> Color:
        return self.configuration.color

    @property
    def roof(self) -> Roof:
        return self.configuration.roof

    @property
    def wheels(self) -> Wheel:
        return self.configuration.wheels
