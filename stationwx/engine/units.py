# stationwx/engine/units.py
"""
Unit conversion from NWS SI units to aviation display units.

All functions are total: None in, None out. Zero converts like any other
number, except pressure: 0 Pa is not a real reading and maps to None.
"""

import math
from typing import Optional

KNOTS_PER_MPS = 1.94384
PA_PER_INHG = 3386.389
METERS_PER_STATUTE_MILE = 1609.34
METERS_PER_FOOT = 0.3048


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def celsius_to_fahrenheit(celsius: Optional[float]) -> Optional[int]:
    """Temperature in whole degrees Fahrenheit."""
    if celsius is None:
        return None
    return round_half_up(celsius * 9 / 5 + 32)


def mps_to_knots(speed_mps: Optional[float]) -> Optional[float]:
    """Wind speed in knots, unrounded so comparisons keep full precision."""
    if speed_mps is None:
        return None
    return speed_mps * KNOTS_PER_MPS


def pascals_to_inhg(pressure_pa: Optional[float]) -> Optional[str]:
    """
    Altimeter setting formatted to two decimals.

    Args:
        pressure_pa: Pressure in pascals

    Returns:
        e.g. "29.92", or None when pressure is not reported
    """
    if not pressure_pa:
        return None
    return f"{pressure_pa / PA_PER_INHG:.2f}"


def meters_to_statute_miles(meters: Optional[float]) -> Optional[float]:
    if meters is None:
        return None
    return meters / METERS_PER_STATUTE_MILE


def meters_to_feet(meters: Optional[float]) -> Optional[float]:
    if meters is None:
        return None
    return meters / METERS_PER_FOOT
