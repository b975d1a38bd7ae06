# stationwx/engine/models.py
"""
Engine data model.

Every observation field is Optional: None means "not reported" and is
never the same thing as zero. The engine propagates None all the way to
the Advisory, where the renderer shows a placeholder for it.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass
from datetime import datetime


class CloudAmount(Enum):
    """
    Sky cover amount of a single cloud layer.

    Value is the METAR abbreviation used in the cloud summary.
    """
    FEW = "FEW"
    SCATTERED = "SCT"
    BROKEN = "BKN"
    OVERCAST = "OVC"
    CLEAR = "CLR"
    VERTICAL_VISIBILITY = "VV"
    UNRECOGNIZED = "???"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "CloudAmount":
        """Map an NWS amount string (abbreviated or spelled out) to a CloudAmount."""
        if not raw:
            return cls.UNRECOGNIZED
        return _AMOUNT_ALIASES.get(raw.strip().upper(), cls.UNRECOGNIZED)

    @property
    def forms_ceiling(self) -> bool:
        return self in (CloudAmount.BROKEN, CloudAmount.OVERCAST, CloudAmount.VERTICAL_VISIBILITY)


_AMOUNT_ALIASES = {
    "FEW": CloudAmount.FEW,
    "SCT": CloudAmount.SCATTERED,
    "SCATTERED": CloudAmount.SCATTERED,
    "BKN": CloudAmount.BROKEN,
    "BROKEN": CloudAmount.BROKEN,
    "OVC": CloudAmount.OVERCAST,
    "OVERCAST": CloudAmount.OVERCAST,
    "CLR": CloudAmount.CLEAR,
    "SKC": CloudAmount.CLEAR,
    "CLEAR": CloudAmount.CLEAR,
    "VV": CloudAmount.VERTICAL_VISIBILITY,
    "VERTICAL_VISIBILITY": CloudAmount.VERTICAL_VISIBILITY,
}


class FlightCategory(Enum):
    """
    FAA flight category.

    Declared from most to least restrictive; `rank` follows that order.
    """
    LIFR = "LIFR"
    IFR = "IFR"
    MVFR = "MVFR"
    VFR = "VFR"

    @property
    def rank(self) -> int:
        """0 for LIFR up to 3 for VFR."""
        return list(FlightCategory).index(self)


@dataclass(frozen=True)
class CloudLayer:
    """One reported cloud layer."""
    amount: CloudAmount
    base_m: Optional[float] = None  # meters AGL
    raw_amount: str = ""


@dataclass(frozen=True)
class Observation:
    """A single point-in-time station observation in SI units."""
    station: str
    temperature_c: Optional[float] = None
    wind_speed_mps: Optional[float] = None
    wind_direction_deg: Optional[float] = None
    barometric_pressure_pa: Optional[float] = None
    sea_level_pressure_pa: Optional[float] = None
    visibility_m: Optional[float] = None
    cloud_layers: Tuple[CloudLayer, ...] = ()
    timestamp: Optional[datetime] = None
    text_description: Optional[str] = None

    @property
    def pressure_pa(self) -> Optional[float]:
        """Station pressure, falling back to sea-level pressure only when it is missing."""
        if self.barometric_pressure_pa is not None:
            return self.barometric_pressure_pa
        return self.sea_level_pressure_pa


@dataclass(frozen=True)
class WindComponents:
    """Wind resolved against one runway heading."""
    headwind_kt: float  # negative = tailwind
    crosswind_kt: float  # always >= 0

    @property
    def tailwind_kt(self) -> float:
        return -self.headwind_kt if self.headwind_kt < 0 else 0.0


ZERO_WIND = WindComponents(headwind_kt=0.0, crosswind_kt=0.0)


@dataclass(frozen=True)
class RunwayPair:
    """
    Two candidate runway ends.

    Headings are not required to be 180 degrees apart.
    """
    first_heading: int
    second_heading: int
    first_designator: str
    second_designator: str


@dataclass(frozen=True)
class RunwayRecommendation:
    """Display-ready runway preference."""
    designator: Optional[str]  # None when calm
    calm: bool
    headwind_kt: int = 0
    tailwind_kt: int = 0
    crosswind_kt: int = 0
    text: str = ""


@dataclass(frozen=True)
class Advisory:
    """
    Display-ready advisory for one observation.

    Numbers are already converted and rounded; text fields are ready
    to be laid out by a renderer without further computation.
    """
    station: str
    observed_at: datetime
    zulu_time: str
    local_time: str
    local_tz_label: str
    temperature_f: Optional[int]
    wind_speed_kt: int
    wind_direction_deg: Optional[int]
    wind_cardinal: str
    calm: bool
    wind_text: str
    cloud_summary: str
    ceiling_ft: Optional[int]
    visibility_sm: Optional[float]
    flight_category: FlightCategory
    flight_category_color: str
    altimeter_inhg: Optional[str]
    description: Optional[str] = None
    runway: Optional[RunwayRecommendation] = None

    @property
    def ceiling_text(self) -> str:
        return f"{self.ceiling_ft} ft" if self.ceiling_ft is not None else "—"

    @property
    def visibility_text(self) -> str:
        if self.visibility_sm is None:
            return "—"
        if self.visibility_sm < 10:
            return f"{self.visibility_sm:.1f} sm"
        return f"{self.visibility_sm:.0f} sm"

    @property
    def altimeter_text(self) -> str:
        return f"{self.altimeter_inhg} inHg" if self.altimeter_inhg else "—"

    @property
    def temperature_text(self) -> str:
        return f"{self.temperature_f if self.temperature_f is not None else '–'}°F"
