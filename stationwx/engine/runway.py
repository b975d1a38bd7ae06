# stationwx/engine/runway.py
"""
Runway preference between two runway ends.

Selection rule:
1. If the headwinds differ by more than HEADWIND_MARGIN_KT, the end with
   more headwind (less tailwind) wins.
2. Otherwise the end with less or equal crosswind wins. An exact tie
   goes to the first-listed runway.

Runway pairs are accepted as configured; the two headings are not
checked to be opposite ends of one strip.
"""

from typing import Optional, Tuple

from ..logging import get_logger
from .models import RunwayPair, WindComponents
from .units import round_half_up

logger = get_logger(__name__)

HEADWIND_MARGIN_KT = 2.0

# Pairs where both numbers are <= this are runway designators, not headings
MAX_DESIGNATOR = 36

RunwayCandidate = Tuple[str, WindComponents]


class InvalidRunwaySpec(ValueError):
    """Raised when a runway pair cannot be parsed."""
    pass


def select_runway(
    first: RunwayCandidate,
    second: RunwayCandidate,
    margin_kt: float = HEADWIND_MARGIN_KT,
) -> RunwayCandidate:
    """
    Pick the preferred runway end.

    Args:
        first: (designator, components) of the first-listed runway
        second: (designator, components) of the second runway
        margin_kt: Headwind difference below which the ends count as tied

    Returns:
        The winning (designator, components) candidate
    """
    first_wind = first[1]
    second_wind = second[1]

    if abs(first_wind.headwind_kt - second_wind.headwind_kt) > margin_kt:
        return first if first_wind.headwind_kt > second_wind.headwind_kt else second

    return first if first_wind.crosswind_kt <= second_wind.crosswind_kt else second


def heading_to_designator(heading_deg: int) -> str:
    """Runway number for a heading, e.g. 160 -> "16", 0 -> "36"."""
    number = round_half_up(heading_deg / 10) % 36
    return f"{number or 36:02d}"


def parse_runway_pair(text: str) -> RunwayPair:
    """
    Parse a runway pair such as "160,340" (headings) or "16,34" (designators).

    Raises:
        InvalidRunwaySpec: If the text is not two integers in 0-360
    """
    parts = [p.strip() for p in (text or "").split(",")]
    if len(parts) != 2 or not all(parts):
        raise InvalidRunwaySpec(f"Expected two comma-separated runways, got {text!r}")

    try:
        values = [int(p) for p in parts]
    except ValueError:
        raise InvalidRunwaySpec(f"Runways must be integers, got {text!r}")

    for value in values:
        if not 0 <= value <= 360:
            raise InvalidRunwaySpec(f"Runway heading out of range: {value}")

    if all(v <= MAX_DESIGNATOR for v in values):
        headings = [(v * 10) % 360 for v in values]
    else:
        headings = values

    return RunwayPair(
        first_heading=headings[0],
        second_heading=headings[1],
        first_designator=heading_to_designator(headings[0]),
        second_designator=heading_to_designator(headings[1]),
    )


def runway_pair_from_config(text: Optional[str]) -> Optional[RunwayPair]:
    """
    Runway pair from configuration, or None when it is absent or malformed.

    A malformed value only disables the runway recommendation.
    """
    if not text or not text.strip():
        return None
    try:
        return parse_runway_pair(text)
    except InvalidRunwaySpec as e:
        logger.warning("runway_spec_invalid", runways=text, error=str(e))
        return None
