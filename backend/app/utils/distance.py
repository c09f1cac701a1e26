"""
Odometer distance units and conversions.
"""

from enum import Enum

KM_PER_MILE = 1.60934


class DistanceUnit(str, Enum):
    MILES = "MILES"
    KILOMETERS = "KILOMETERS"


_SHORT_UNITS = {
    DistanceUnit.MILES: "mi",
    DistanceUnit.KILOMETERS: "km",
}


def convert_miles_to_km(miles: float) -> float:
    return miles * KM_PER_MILE


def convert_km_to_miles(km: float) -> float:
    return km / KM_PER_MILE


def distance_in_unit(distance: float, current: DistanceUnit, preferred: DistanceUnit) -> float:
    """Express distance (measured in current) in the preferred unit."""
    if current == preferred:
        return distance
    if current == DistanceUnit.MILES:
        return convert_miles_to_km(distance)
    return convert_km_to_miles(distance)


def format_distance(distance: float, unit: DistanceUnit, decimals: int = 0) -> str:
    """e.g. format_distance(1234.4, DistanceUnit.MILES) -> "1234 mi" """
    return f"{distance:.{decimals}f} {_SHORT_UNITS[unit]}"
