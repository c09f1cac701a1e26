"""
Static truck catalog for the fleet tool.

Holds the manufacturers the fleet runs, the models each one contributes,
and the sample VIN and engine number generators used to prefill new truck
forms.
"""

import random
from enum import Enum


class TruckManufacturer(str, Enum):
    KENWORTH = "KENWORTH"
    INTERNATIONAL = "INTERNATIONAL"
    VOLVO = "VOLVO"
    FREIGHTLINER = "FREIGHTLINER"
    PETERBILT = "PETERBILT"


# Models actually present in the fleet, per manufacturer
FLEET_MODELS: dict[TruckManufacturer, tuple[str, ...]] = {
    TruckManufacturer.KENWORTH: ("T660", "T680"),
    TruckManufacturer.INTERNATIONAL: ("LoneStar", "LT625"),
    TruckManufacturer.VOLVO: ("VNL64T", "VNL760"),
    TruckManufacturer.FREIGHTLINER: ("Cascadia",),
    TruckManufacturer.PETERBILT: ("579",),
}

# VIN alphabet (I, O, Q excluded)
VIN_ALPHABET = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"

_SAMPLE_VIN_PREFIX = "WDB9630421L"
_SAMPLE_ENGINE_PREFIX = "OM471LA-"


def models_for_manufacturer(manufacturer: TruckManufacturer | str | None) -> list[str]:
    """Fleet models for a manufacturer. Unknown manufacturers return an empty list."""
    if not manufacturer:
        return []
    if isinstance(manufacturer, TruckManufacturer):
        return list(FLEET_MODELS[manufacturer])
    try:
        key = TruckManufacturer(manufacturer.upper())
    except ValueError:
        return []
    return list(FLEET_MODELS.get(key, ()))


def generate_sample_vin(rng: random.Random | None = None) -> str:
    """
    Generate a well-formed placeholder VIN for a new truck form.

    The fixed prefix keeps the model year at 2001 (position 10 = "1");
    the last six characters are random. The check digit is not computed.
    """
    rng = rng or random
    suffix = "".join(rng.choice(VIN_ALPHABET) for _ in range(17 - len(_SAMPLE_VIN_PREFIX)))
    return _SAMPLE_VIN_PREFIX + suffix


def generate_sample_engine_number(rng: random.Random | None = None) -> str:
    """Placeholder engine number for a new truck form: "OM471LA-" plus three digits."""
    rng = rng or random
    return _SAMPLE_ENGINE_PREFIX + "".join(rng.choice("0123456789") for _ in range(3))
