# stationwx/engine/wind.py
"""
Wind vector decomposition and wind labels.

Headwind is signed (negative = tailwind), crosswind is a magnitude.
Nothing here rounds; rounding is left to the advisory assembler.
"""

import math
from typing import Optional, Tuple
from dataclasses import dataclass

from .models import WindComponents, ZERO_WIND
from .units import round_half_up

# Below this speed (knots) the wind is reported as calm
CALM_THRESHOLD_KT = 1.0


@dataclass(frozen=True)
class CompassRose:
    """Immutable table of cardinal labels, one per equal sector."""
    labels: Tuple[str, ...]

    @property
    def sector_deg(self) -> float:
        return 360.0 / len(self.labels)

    def label_for(self, direction_deg: Optional[float]) -> str:
        if direction_deg is None:
            return ""
        index = round_half_up(direction_deg / self.sector_deg) % len(self.labels)
        return self.labels[index]


COMPASS_ROSE_16 = CompassRose(labels=(
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
))


def to_cardinal(direction_deg: Optional[float], rose: CompassRose = COMPASS_ROSE_16) -> str:
    """Cardinal label for a wind direction, "" when unknown."""
    return rose.label_for(direction_deg)


def relative_angle(wind_direction_deg: float, runway_heading_deg: float) -> float:
    """
    Angle of the wind relative to the runway centerline.

    Returns:
        Degrees in (-180, 180]; 0 is straight down the runway, 180 is behind it
    """
    angle = (wind_direction_deg - runway_heading_deg) % 360.0
    if angle > 180.0:
        angle -= 360.0
    return angle


def decompose_wind(
    runway_heading_deg: float,
    wind_direction_deg: Optional[float],
    wind_speed_kt: Optional[float],
) -> WindComponents:
    """
    Resolve a wind into headwind and crosswind for one runway heading.

    Args:
        runway_heading_deg: Runway heading in degrees
        wind_direction_deg: Direction the wind blows from, None if unreported
        wind_speed_kt: Wind speed in knots

    Returns:
        WindComponents; the zero vector when direction is unknown or speed is 0
    """
    if wind_direction_deg is None or not wind_speed_kt:
        return ZERO_WIND

    radians = math.radians(relative_angle(wind_direction_deg, runway_heading_deg))
    return WindComponents(
        headwind_kt=wind_speed_kt * math.cos(radians),
        crosswind_kt=abs(wind_speed_kt * math.sin(radians)),
    )


def is_calm(
    wind_speed_kt: Optional[float],
    wind_direction_deg: Optional[float],
    threshold_kt: float = CALM_THRESHOLD_KT,
) -> bool:
    """Calm when the wind is negligible or its direction was not reported."""
    if wind_direction_deg is None:
        return True
    return (wind_speed_kt or 0.0) < threshold_kt
