# line_offset/domain/units.py
"""
Distance normalization: turns a linear distance + unit name into the angular
distance used by coordinates expressed in degrees.

Everything goes through radians on a spherical earth of radius EARTH_RADIUS_M.
"""

import math
from typing import Literal

from line_offset.errors import InvalidOffsetError, UnknownUnitError

EARTH_RADIUS_M = 6371008.8

Units = Literal[
    "degrees",
    "radians",
    "miles",
    "nauticalmiles",
    "kilometers",
    "kilometres",
    "meters",
    "metres",
    "centimeters",
    "centimetres",
    "millimeters",
    "millimetres",
    "feet",
    "inches",
    "yards",
]

DEFAULT_UNITS: Units = "kilometers"

# units per radian of arc
FACTORS: dict[str, float] = {
    "degrees": 180.0 / math.pi,
    "radians": 1.0,
    "miles": EARTH_RADIUS_M / 1609.344,
    "nauticalmiles": EARTH_RADIUS_M / 1852.0,
    "kilometers": EARTH_RADIUS_M / 1000.0,
    "kilometres": EARTH_RADIUS_M / 1000.0,
    "meters": EARTH_RADIUS_M,
    "metres": EARTH_RADIUS_M,
    "centimeters": EARTH_RADIUS_M * 100.0,
    "centimetres": EARTH_RADIUS_M * 100.0,
    "millimeters": EARTH_RADIUS_M * 1000.0,
    "millimetres": EARTH_RADIUS_M * 1000.0,
    "feet": EARTH_RADIUS_M * 3.28084,
    "inches": EARTH_RADIUS_M * 39.370,
    "yards": EARTH_RADIUS_M * 1.0936,
}


def factor(units: str | None) -> float:
    units = DEFAULT_UNITS if units is None else units
    try:
        return FACTORS[units]
    except (KeyError, TypeError):
        raise UnknownUnitError(units, FACTORS) from None


def _finite(value, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidOffsetError(f"{what} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidOffsetError(f"{what} must be finite, got {value}")
    return float(value)


def radians_to_degrees(radians: float) -> float:
    # wraps at a full turn, keeping the sign
    return math.degrees(math.fmod(radians, 2 * math.pi))


def length_to_radians(distance: float, units: Units | None = DEFAULT_UNITS) -> float:
    f = factor(units)
    distance = _finite(distance, "distance")
    if units == "degrees":
        return math.radians(distance)
    return distance / f


def distance_to_degrees(distance: float, units: Units | None = DEFAULT_UNITS) -> float:
    """
    Angular size, in degrees, of `distance` measured along a great circle.
    """
    return radians_to_degrees(length_to_radians(distance, units))
