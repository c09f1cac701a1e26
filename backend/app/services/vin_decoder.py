"""
Offline VIN decoder for heavy-duty trucks.

Decodes a 17-character VIN to manufacturer/model/year/country/engine using
static lookup tables. No network, no cache: every call builds a fresh result.

Model inference is a best-effort heuristic. Truck makers do not publish a
stable VDS layout, so the model is guessed from fragments found anywhere in
characters 4-9 and falls back to the manufacturer's most common model.
Treat it as a plausible prefill, not a decode.
"""

import logging
import re
from dataclasses import dataclass

from app.data.truck_catalog import TruckManufacturer

logger = logging.getLogger(__name__)

_VIN_RE = re.compile(r"[A-HJ-NPR-Z0-9]{17}")
_NOT_VIN_CHAR_RE = re.compile(r"[^A-HJ-NPR-Z0-9]")

INVALID_VIN_MESSAGE = "Invalid VIN format"

# World Manufacturer Identifier (positions 1-3) -> manufacturer
_WMI_MANUFACTURERS = {
    "1XK": TruckManufacturer.KENWORTH,
    "1NP": TruckManufacturer.PETERBILT,
    "1XP": TruckManufacturer.PETERBILT,
    "1FU": TruckManufacturer.FREIGHTLINER,
    "1FV": TruckManufacturer.FREIGHTLINER,
    "3AK": TruckManufacturer.FREIGHTLINER,
    "1HT": TruckManufacturer.INTERNATIONAL,
    "1HS": TruckManufacturer.INTERNATIONAL,
    "3HM": TruckManufacturer.INTERNATIONAL,
    "4V4": TruckManufacturer.VOLVO,
    "4V1": TruckManufacturer.VOLVO,
    "4VL": TruckManufacturer.VOLVO,
}

# Position 10 -> model year. I, O, Q, U, Z and 0 are never year codes.
_YEAR_CODES = {
    "A": 2010, "B": 2011, "C": 2012, "D": 2013, "E": 2014,
    "F": 2015, "G": 2016, "H": 2017, "J": 2018, "K": 2019,
    "L": 2020, "M": 2021, "N": 2022, "P": 2023, "R": 2024,
    "S": 2025, "T": 2026, "V": 2027, "W": 2028, "X": 2029,
    "Y": 2030,
    "1": 2001, "2": 2002, "3": 2003, "4": 2004, "5": 2005,
    "6": 2006, "7": 2007, "8": 2008, "9": 2009,
}

# WMI first character -> region, checked in order
_COUNTRY_PREFIXES = (
    ("145", "United States"),
    ("2", "Canada"),
    ("3", "Mexico"),
    ("J", "Japan"),
    ("KLMNP", "Asia"),
    ("STUVWXYZ", "Europe"),
)

_ENGINE_FAMILIES = {
    TruckManufacturer.KENWORTH: "PACCAR MX / Cummins",
    TruckManufacturer.PETERBILT: "PACCAR MX / Cummins",
    TruckManufacturer.FREIGHTLINER: "Detroit Diesel",
    TruckManufacturer.INTERNATIONAL: "Navistar / Cummins",
    TruckManufacturer.VOLVO: "Volvo D-Series",
}


@dataclass(frozen=True)
class _ModelRule:
    """
    VDS heuristics for one manufacturer.

    fragments are tried in order against the whole VDS, then fallbacks,
    then default. Order matters: the first hit wins.
    """

    fragments: tuple[tuple[str, str], ...]
    fallbacks: tuple[tuple[str, str], ...]
    default: str
    fallback_prefix_only: bool = False


_MODEL_RULES = {
    # Kenworth fragments are the first three characters of the model name
    TruckManufacturer.KENWORTH: _ModelRule(
        fragments=(
            ("T68", "T680"),
            ("T88", "T880"),
            ("W90", "W900"),
            ("T80", "T800"),
            ("T37", "T370"),
            ("T27", "T270"),
            ("C50", "C500"),
        ),
        fallbacks=(("T6", "T680"), ("T8", "T880"), ("W9", "W900")),
        default="T680",
        fallback_prefix_only=True,
    ),
    TruckManufacturer.PETERBILT: _ModelRule(
        fragments=(
            ("579", "579"),
            ("389", "389"),
            ("367", "367"),
            ("348", "348"),
            ("337", "337"),
            ("220", "220"),
        ),
        fallbacks=(("57", "579"), ("38", "389"), ("36", "367")),
        default="579",
    ),
    TruckManufacturer.FREIGHTLINER: _ModelRule(
        fragments=(
            ("CASC", "Cascadia"),
            ("M2", "M2 106"),
            ("114", "114SD"),
            ("108", "108SD"),
        ),
        fallbacks=(("CA", "Cascadia"), ("SC", "Cascadia")),
        default="Cascadia",
    ),
    TruckManufacturer.INTERNATIONAL: _ModelRule(
        fragments=(("LT", "LT"), ("RH", "RH"), ("HX", "HX")),
        fallbacks=(),
        default="LT",
    ),
    TruckManufacturer.VOLVO: _ModelRule(
        fragments=(("VNL", "VNL"), ("VNR", "VNR"), ("VHD", "VHD"), ("VAH", "VAH")),
        fallbacks=(("VN", "VNL"), ("VH", "VHD")),
        default="VNL",
    ),
}

# Check digit transliteration and position weights (position 9 weighs 0)
_TRANSLITERATION = {
    **{str(d): d for d in range(10)},
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8,
    "J": 1, "K": 2, "L": 3, "M": 4, "N": 5, "P": 7, "R": 9,
    "S": 2, "T": 3, "U": 4, "V": 5, "W": 6, "X": 7, "Y": 8, "Z": 9,
}
_WEIGHTS = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)


@dataclass(frozen=True)
class DecodedVin:
    is_valid: bool
    manufacturer: TruckManufacturer | None = None
    model: str | None = None
    model_year: int | None = None
    country: str | None = None
    check_digit: str | None = None
    engine_type: str | None = None


def is_valid_vin_format(vin: str | None) -> bool:
    """True if vin is 17 characters from the VIN alphabet (case-insensitive)."""
    if not vin or len(vin) != 17:
        return False
    # uppercasing can change the length (e.g. "\u00df" -> "SS"), so measure both
    upper = vin.upper()
    return len(upper) == 17 and _VIN_RE.fullmatch(upper) is not None


def normalize_vin(vin: str | None) -> str:
    """Uppercase and drop every character that cannot appear in a VIN."""
    if not vin:
        return ""
    return _NOT_VIN_CHAR_RE.sub("", vin.upper())


def decode_vin(vin: str | None) -> DecodedVin:
    """
    Decode a VIN offline.

    Malformed input returns DecodedVin(is_valid=False) and never raises.
    A well-formed VIN with an unknown WMI is still valid; only the fields
    that could be resolved are set.
    """
    if not is_valid_vin_format(vin):
        return DecodedVin(is_valid=False)

    vin = vin.upper()
    try:
        wmi = vin[:3]
        vds = vin[3:9]
        manufacturer = _WMI_MANUFACTURERS.get(wmi)
        return DecodedVin(
            is_valid=True,
            manufacturer=manufacturer,
            model=_model_from_vds(manufacturer, vds),
            model_year=_YEAR_CODES.get(vin[9]),
            country=_country_from_wmi(wmi),
            check_digit=vin[8],
            engine_type=_ENGINE_FAMILIES.get(manufacturer) if manufacturer else None,
        )
    except Exception as e:
        logger.exception(f"Error decoding VIN {vin}: {e}")
        return DecodedVin(is_valid=False)


def describe_vin(decoded: DecodedVin) -> str:
    """Human-readable one-line summary of a decode result."""
    if not decoded.is_valid:
        return INVALID_VIN_MESSAGE

    info = []
    if decoded.manufacturer:
        info.append(f"Manufacturer: {decoded.manufacturer.value}")
    if decoded.model:
        info.append(f"Model: {decoded.model}")
    if decoded.model_year:
        info.append(f"Year: {decoded.model_year}")
    if decoded.country:
        info.append(f"Country: {decoded.country}")
    return ", ".join(info) or "VIN decoded successfully"


def compute_check_digit(vin: str | None) -> str | None:
    """
    Standard weighted modulo-11 check digit for a well-formed VIN.

    Returns "0"-"9" or "X", or None when the VIN is malformed. This is
    informational only: decode_vin never rejects a VIN on its check digit,
    since many fleet and non-North-American VINs do not carry one.
    """
    if not is_valid_vin_format(vin):
        return None
    total = sum(_TRANSLITERATION[c] * w for c, w in zip(vin.upper(), _WEIGHTS))
    remainder = total % 11
    return "X" if remainder == 10 else str(remainder)


def check_digit_matches(vin: str | None) -> bool | None:
    """Whether position 9 equals the computed check digit. None for malformed VINs."""
    expected = compute_check_digit(vin)
    if expected is None:
        return None
    return vin.upper()[8] == expected


def _model_from_vds(manufacturer: TruckManufacturer | None, vds: str) -> str | None:
    rule = _MODEL_RULES.get(manufacturer) if manufacturer else None
    if rule is None or not vds:
        return None

    for fragment, model in rule.fragments:
        if fragment in vds:
            return model

    for fragment, model in rule.fallbacks:
        hit = vds.startswith(fragment) if rule.fallback_prefix_only else fragment in vds
        if hit:
            return model

    return rule.default


def _country_from_wmi(wmi: str) -> str:
    first = wmi[:1]
    if first:
        for prefixes, country in _COUNTRY_PREFIXES:
            if first in prefixes:
                return country
    return "Unknown"
