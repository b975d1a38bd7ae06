# stationwx/engine/flight_category.py
"""
FAA flight category from ceiling and visibility.

Thresholds are checked from most to least restrictive. Either measurement
alone is enough to place a category; an unknown measurement never does.
With neither measurement reported the result is VFR.

    LIFR: ceiling < 500 ft   or visibility < 1 sm
    IFR:  ceiling < 1000 ft  or visibility < 3 sm
    MVFR: ceiling < 3000 ft  or visibility < 5 sm
    VFR:  otherwise
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple
from dataclasses import dataclass

from .models import FlightCategory


@dataclass(frozen=True)
class CategoryThreshold:
    """Upper bounds (exclusive) for one category."""
    category: FlightCategory
    ceiling_below_ft: float
    visibility_below_sm: float


DEFAULT_THRESHOLDS: Tuple[CategoryThreshold, ...] = (
    CategoryThreshold(FlightCategory.LIFR, 500, 1),
    CategoryThreshold(FlightCategory.IFR, 1000, 3),
    CategoryThreshold(FlightCategory.MVFR, 3000, 5),
)

CATEGORY_COLORS: Mapping[FlightCategory, str] = MappingProxyType({
    FlightCategory.VFR: "#00e676",   # green
    FlightCategory.MVFR: "#1e88e5",  # blue
    FlightCategory.IFR: "#e53935",   # red
    FlightCategory.LIFR: "#9c27b0",  # magenta
})


class FlightCategoryClassifier:
    """
    Classifies ceiling/visibility pairs.

    Threshold and color tables are injected so tests can substitute them.
    """

    def __init__(
        self,
        thresholds: Tuple[CategoryThreshold, ...] = DEFAULT_THRESHOLDS,
        colors: Mapping[FlightCategory, str] = CATEGORY_COLORS,
        fallback: FlightCategory = FlightCategory.VFR,
    ):
        self.thresholds = tuple(thresholds)
        self.colors = colors
        self.fallback = fallback

    def classify(
        self,
        ceiling_ft: Optional[float],
        visibility_sm: Optional[float],
    ) -> FlightCategory:
        """
        Classify one observation.

        Args:
            ceiling_ft: Ceiling in feet, None if there is no ceiling
            visibility_sm: Visibility in statute miles, None if unreported

        Returns:
            The first (most restrictive) matching category
        """
        for threshold in self.thresholds:
            if ceiling_ft is not None and ceiling_ft < threshold.ceiling_below_ft:
                return threshold.category
            if visibility_sm is not None and visibility_sm < threshold.visibility_below_sm:
                return threshold.category
        return self.fallback

    def color_for(self, category: FlightCategory) -> str:
        return self.colors[category]


_default_classifier = FlightCategoryClassifier()


def classify_flight_category(
    ceiling_ft: Optional[float],
    visibility_sm: Optional[float],
) -> FlightCategory:
    """Classify with the standard FAA thresholds."""
    return _default_classifier.classify(ceiling_ft, visibility_sm)
