# stationwx/engine/advisory.py
"""
Advisory assembly.

Turns one Observation into a display-ready Advisory:
unit conversion -> wind labels and calm state -> runway preference
-> ceiling and flight category. Pure and synchronous; no I/O.
"""

from datetime import datetime, timezone, tzinfo
from typing import Optional

from ..logging import get_logger
from .clouds import extract_ceiling_ft, summarize_clouds
from .flight_category import FlightCategoryClassifier
from .models import Advisory, Observation, RunwayPair, RunwayRecommendation
from .runway import select_runway
from .units import (
    celsius_to_fahrenheit,
    meters_to_statute_miles,
    mps_to_knots,
    pascals_to_inhg,
    round_half_up,
)
from .wind import (
    CALM_THRESHOLD_KT,
    COMPASS_ROSE_16,
    CompassRose,
    decompose_wind,
    is_calm,
)

logger = get_logger(__name__)

CALM_TEXT = "Calm"
CALM_RUNWAY_TEXT = "Preferred: Either (calm)"


class AdvisoryAssembler:
    """
    Builds an Advisory from an Observation.

    Usage:
        assembler = AdvisoryAssembler()
        advisory = assembler.assemble(observation, runways=pair)
    """

    def __init__(
        self,
        classifier: Optional[FlightCategoryClassifier] = None,
        compass_rose: CompassRose = COMPASS_ROSE_16,
        calm_threshold_kt: float = CALM_THRESHOLD_KT,
    ):
        self.classifier = classifier or FlightCategoryClassifier()
        self.compass_rose = compass_rose
        self.calm_threshold_kt = calm_threshold_kt

    def assemble(
        self,
        observation: Observation,
        runways: Optional[RunwayPair] = None,
        local_tz: tzinfo = timezone.utc,
        now: Optional[datetime] = None,
    ) -> Advisory:
        """
        Assemble the advisory for one observation.

        Args:
            observation: Observation to convert
            runways: Runway pair, None disables the runway recommendation
            local_tz: Time zone for the local time label
            now: Time used when the observation has no timestamp

        Returns:
            Advisory with every value converted and rounded for display
        """
        observed_at = observation.timestamp or now or datetime.now(timezone.utc)
        if observed_at.tzinfo is None:
            observed_at = observed_at.replace(tzinfo=timezone.utc)
        local = observed_at.astimezone(local_tz)

        wind_kt = mps_to_knots(observation.wind_speed_mps) or 0.0
        direction = observation.wind_direction_deg
        direction_display = round_half_up(direction) if direction is not None else None
        cardinal = self.compass_rose.label_for(direction_display)
        calm = is_calm(wind_kt, direction, self.calm_threshold_kt)

        ceiling_ft = extract_ceiling_ft(observation.cloud_layers)
        visibility_sm = meters_to_statute_miles(observation.visibility_m)
        category = self.classifier.classify(ceiling_ft, visibility_sm)

        advisory = Advisory(
            station=observation.station,
            observed_at=observed_at,
            zulu_time=observed_at.astimezone(timezone.utc).strftime("%H:%MZ"),
            local_time=local.strftime("%H:%M"),
            local_tz_label=local.strftime("%Z"),
            temperature_f=celsius_to_fahrenheit(observation.temperature_c),
            wind_speed_kt=round_half_up(wind_kt),
            wind_direction_deg=direction_display,
            wind_cardinal=cardinal,
            calm=calm,
            wind_text=self._wind_text(calm, direction_display, cardinal, wind_kt),
            cloud_summary=summarize_clouds(observation.cloud_layers),
            ceiling_ft=ceiling_ft,
            visibility_sm=_display_visibility(visibility_sm),
            flight_category=category,
            flight_category_color=self.classifier.color_for(category),
            altimeter_inhg=pascals_to_inhg(observation.pressure_pa),
            description=observation.text_description,
            runway=self._recommend_runway(runways, calm, direction, wind_kt),
        )

        logger.info(
            "advisory_assembled",
            station=advisory.station,
            flight_category=category.value,
            calm=calm,
            runway=advisory.runway.designator if advisory.runway else None,
        )
        return advisory

    def _wind_text(
        self,
        calm: bool,
        direction: Optional[int],
        cardinal: str,
        wind_kt: float,
    ) -> str:
        if calm:
            return CALM_TEXT
        label = f"({cardinal}) " if cardinal else ""
        return f"{direction}° {label}{round_half_up(wind_kt)} kt"

    def _recommend_runway(
        self,
        runways: Optional[RunwayPair],
        calm: bool,
        direction: Optional[float],
        wind_kt: float,
    ) -> Optional[RunwayRecommendation]:
        if runways is None:
            return None
        if calm:
            return RunwayRecommendation(designator=None, calm=True, text=CALM_RUNWAY_TEXT)

        designator, wind = select_runway(
            (runways.first_designator, decompose_wind(runways.first_heading, direction, wind_kt)),
            (runways.second_designator, decompose_wind(runways.second_heading, direction, wind_kt)),
        )

        tailwind = round_half_up(wind.tailwind_kt)
        headwind = round_half_up(max(0.0, wind.headwind_kt))
        crosswind = round_half_up(wind.crosswind_kt)
        along = f"TW {tailwind} kt" if tailwind else f"HW {headwind} kt"

        return RunwayRecommendation(
            designator=designator,
            calm=False,
            headwind_kt=headwind,
            tailwind_kt=tailwind,
            crosswind_kt=crosswind,
            text=f"Preferred: RWY {designator} ({along}, XW {crosswind} kt)",
        )


def _display_visibility(visibility_sm: Optional[float]) -> Optional[float]:
    if visibility_sm is None:
        return None
    if visibility_sm < 10:
        return round_half_up(visibility_sm * 10) / 10
    return float(round_half_up(visibility_sm))


def assemble_advisory(
    observation: Observation,
    runways: Optional[RunwayPair] = None,
    local_tz: tzinfo = timezone.utc,
) -> Advisory:
    """Assemble with the default tables."""
    return AdvisoryAssembler().assemble(observation, runways=runways, local_tz=local_tz)
