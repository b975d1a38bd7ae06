# stationwx/render/colors.py
"""
Banner color presets.

Each scale is an ordered tuple of (limit, color) steps; the first step
whose limit test passes supplies the color.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

GREEN = "#4caf50"
AMBER = "#ffb300"
RED = "#ff5252"
WHITE = "#ffffff"
CLOUD_BLUE = "#81d4fa"


@dataclass(frozen=True)
class ColorScale:
    """
    Step scale mapping a number to a color.

    steps: (limit, color) pairs in order; with `ascending` the first limit
    the value is <= wins, otherwise the first limit the value is >= wins
    (or > when `strict`).
    """
    steps: Tuple[Tuple[float, str], ...]
    default: str
    ascending: bool = True
    strict: bool = False
    unknown: str = WHITE

    def color_for(self, value: Optional[float]) -> str:
        if value is None:
            return self.unknown
        for limit, color in self.steps:
            if self.ascending and value <= limit:
                return color
            if not self.ascending and (value > limit if self.strict else value >= limit):
                return color
        return self.default


# Degrees Fahrenheit
TEMPERATURE_SCALE = ColorScale(
    steps=((32, "#00b0ff"), (60, "#4fc3f7"), (80, GREEN), (95, AMBER)),
    default=RED,
)

# Wind speed, knots
WIND_SCALE = ColorScale(steps=((5, GREEN), (15, AMBER)), default=RED)

# Crosswind on the preferred runway, knots
CROSSWIND_SCALE = ColorScale(steps=((15, RED), (8, AMBER)), default=GREEN, ascending=False)

# Tailwind on the preferred runway, knots
TAILWIND_SCALE = ColorScale(steps=((5, RED), (3, AMBER)), default=GREEN, ascending=False, strict=True)


@dataclass(frozen=True)
class BannerPalette:
    """All color scales used by the renderer."""
    temperature: ColorScale = TEMPERATURE_SCALE
    wind: ColorScale = WIND_SCALE
    crosswind: ColorScale = CROSSWIND_SCALE
    tailwind: ColorScale = TAILWIND_SCALE
    clouds: str = CLOUD_BLUE
    calm: str = GREEN
    text: str = WHITE
    background: str = "#000000"


DEFAULT_PALETTE = BannerPalette()
