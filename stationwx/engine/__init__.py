# Engine module - observation to advisory computation
from .models import (
    Advisory,
    CloudAmount,
    CloudLayer,
    FlightCategory,
    Observation,
    RunwayPair,
    RunwayRecommendation,
    WindComponents,
)
from .units import (
    celsius_to_fahrenheit,
    mps_to_knots,
    pascals_to_inhg,
    meters_to_statute_miles,
    meters_to_feet,
    round_half_up,
)
from .wind import COMPASS_ROSE_16, CompassRose, decompose_wind, is_calm, relative_angle, to_cardinal
from .runway import InvalidRunwaySpec, parse_runway_pair, runway_pair_from_config, select_runway
from .clouds import extract_ceiling_ft, summarize_clouds
from .flight_category import FlightCategoryClassifier, classify_flight_category
from .advisory import AdvisoryAssembler, assemble_advisory

__all__ = [
    "Advisory",
    "CloudAmount",
    "CloudLayer",
    "FlightCategory",
    "Observation",
    "RunwayPair",
    "RunwayRecommendation",
    "WindComponents",
    "celsius_to_fahrenheit",
    "mps_to_knots",
    "pascals_to_inhg",
    "meters_to_statute_miles",
    "meters_to_feet",
    "round_half_up",
    "COMPASS_ROSE_16",
    "CompassRose",
    "decompose_wind",
    "is_calm",
    "relative_angle",
    "to_cardinal",
    "InvalidRunwaySpec",
    "parse_runway_pair",
    "runway_pair_from_config",
    "select_runway",
    "extract_ceiling_ft",
    "summarize_clouds",
    "FlightCategoryClassifier",
    "classify_flight_category",
    "AdvisoryAssembler",
    "assemble_advisory",
]
