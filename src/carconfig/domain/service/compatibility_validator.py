"""Domain service: Compatibility Validator.

Checks a configuration against every cross-option rule and reports the
problems as human-readable messages.  Rules never short-circuit: every
call evaluates all of them, in a fixed order, so the same configuration
always yields the same lists.

Validation problems are data, not exceptions.  ``validate`` never raises.
"""

from __future__ import annotations

from dataclasses import dataclass

from carconfig.domain.model.configuration import HARDTOP_ROOF_ID, ROOF_CARRIER_ID, Configuration
from carconfig.domain.model.value_objects import Money
from carconfig.domain.service.pricing_engine import compute_total

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
PREMIUM_BUDGET_LIMIT = Money(2_500_000)
MAX_ADD_ONS_WITHOUT_WARNING = 4

WINCH_MOUNT_ID = "winch-mount"
SNORKEL_KIT_ID = "snorkel-kit"
REAR_LADDER_ID = "rear-ladder"
MATTE_WRAP_ID = "matte-wrap"

OFFROAD_VARIANT_ID = "x"
REAR_LADDER_VARIANT_IDS = frozenset({"lx", "x"})


@dataclass(frozen=True)
class ConfigurationValidation:
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate(config: Configuration) -> ConfigurationValidation:
    errors: list[str] = []
    warnings: list[str] = []
    variant = config.variant

    if not config.roof.is_compatible_with(variant.id):
        errors.append(f"{config.roof.name} is not compatible with {variant.name}")

    for add_on in config.add_ons:
        if not add_on.is_compatible_with(variant.id):
            errors.append(f"{add_on.name} is not compatible with {variant.name}")

    # Add-on specific rules.  These may repeat a variant mismatch already
    # reported above; both messages are kept.
    if config.has_add_on(ROOF_CARRIER_ID) and config.roof.id != HARDTOP_ROOF_ID:
        errors.append("Roof carrier is only compatible with hardtop")

    if config.has_add_on(WINCH_MOUNT_ID) and variant.id != OFFROAD_VARIANT_ID:
        errors.append("Winch mount is only available on X variant")

    if config.has_add_on(SNORKEL_KIT_ID) and variant.id != OFFROAD_VARIANT_ID:
        errors.append("Snorkel kit is only available on X variant")

    if config.has_add_on(REAR_LADDER_ID) and variant.id not in REAR_LADDER_VARIANT_IDS:
        errors.append("Rear ladder is only available on LX and X variants")

    # Advisory rules
    if config.has_decal(MATTE_WRAP_ID) and config.color.price.amount > 0:
        warnings.append("Matte wrap will cover your selected color")

    if len(config.add_ons) > MAX_ADD_ONS_WITHOUT_WARNING:
        warnings.append("Multiple add-ons may affect vehicle performance")

    if compute_total(config) > PREMIUM_BUDGET_LIMIT:
        warnings.append("Configuration exceeds premium budget range")

    return ConfigurationValidation(errors=tuple(errors), warnings=tuple(warnings))
