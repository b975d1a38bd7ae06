# tests/test_runway.py
"""
Test runway preference selection and runway pair parsing.
"""

import logging

import pytest

from stationwx.engine.models import WindComponents
from stationwx.engine.runway import (
    InvalidRunwaySpec,
    heading_to_designator,
    parse_runway_pair,
    runway_pair_from_config,
    select_runway,
)
from stationwx.engine.wind import decompose_wind


class TestSelectRunway:
    """Tests for the two-stage selection rule."""

    def test_headwind_beyond_margin_wins(self):
        """Wind 200 at 20 kt: runway 16 has headwind, 34 has tailwind."""
        rwy16 = ("16", decompose_wind(160, 200, 20))
        rwy34 = ("34", decompose_wind(340, 200, 20))

        assert rwy16[1].headwind_kt == pytest.approx(-rwy34[1].headwind_kt)
        assert rwy16[1].crosswind_kt == pytest.approx(rwy34[1].crosswind_kt)
        assert select_runway(rwy16, rwy34)[0] == "16"

    def test_more_headwind_wins_even_with_more_crosswind(self):
        a = ("A", WindComponents(headwind_kt=10.0, crosswind_kt=12.0))
        b = ("B", WindComponents(headwind_kt=7.0, crosswind_kt=1.0))
        assert select_runway(a, b)[0] == "A"

    def test_within_margin_less_crosswind_wins(self):
        a = ("A", WindComponents(headwind_kt=5.0, crosswind_kt=9.0))
        b = ("B", WindComponents(headwind_kt=3.5, crosswind_kt=4.0))
        assert select_runway(a, b)[0] == "B"

    def test_margin_is_strict(self):
        """A difference of exactly 2 kt counts as a tie on headwind."""
        a = ("A", WindComponents(headwind_kt=6.0, crosswind_kt=5.0))
        b = ("B", WindComponents(headwind_kt=4.0, crosswind_kt=3.0))
        assert select_runway(a, b)[0] == "B"

    def test_exact_tie_goes_to_first_listed(self):
        wind = WindComponents(headwind_kt=0.0, crosswind_kt=20.0)
        assert select_runway(("16", wind), ("34", wind))[0] == "16"
        assert select_runway(("34", wind), ("16", wind))[0] == "34"

    def test_perpendicular_wind_is_exact_tie(self):
        rwy16 = ("16", decompose_wind(160, 250, 20))
        rwy34 = ("34", decompose_wind(340, 250, 20))
        assert select_runway(rwy16, rwy34)[0] == "16"
        assert select_runway(rwy34, rwy16)[0] == "34"

    def test_order_does_not_change_choice(self):
        """Swapping the candidates picks the same runway end when there is no exact tie."""
        for direction in range(0, 360, 7):
            rwy16 = ("16", decompose_wind(160, direction, 18))
            rwy34 = ("34", decompose_wind(340, direction, 18))
            if rwy16[1].crosswind_kt == rwy34[1].crosswind_kt:
                continue  # exact tie, first-listed wins
            assert select_runway(rwy16, rwy34)[0] == select_runway(rwy34, rwy16)[0]

    def test_returns_components_of_winner(self):
        a = ("A", WindComponents(headwind_kt=12.0, crosswind_kt=2.0))
        b = ("B", WindComponents(headwind_kt=-12.0, crosswind_kt=2.0))
        assert select_runway(b, a) == a


class TestParseRunwayPair:
    """Tests for runway pair configuration."""

    def test_headings(self):
        pair = parse_runway_pair("160,340")
        assert (pair.first_heading, pair.second_heading) == (160, 340)
        assert (pair.first_designator, pair.second_designator) == ("16", "34")

    def test_designators(self):
        pair = parse_runway_pair("16,34")
        assert (pair.first_heading, pair.second_heading) == (160, 340)
        assert (pair.first_designator, pair.second_designator) == ("16", "34")

    def test_whitespace_tolerated(self):
        pair = parse_runway_pair(" 90 , 270 ")
        assert (pair.first_designator, pair.second_designator) == ("09", "27")

    def test_runway_36(self):
        pair = parse_runway_pair("18,36")
        assert pair.second_heading == 0
        assert pair.second_designator == "36"

    def test_not_required_to_be_opposite(self):
        pair = parse_runway_pair("160,250")
        assert (pair.first_heading, pair.second_heading) == (160, 250)

    @pytest.mark.parametrize("text", ["", "160", "160,", "160,340,90", "abc,340", "160,400", "-10,170"])
    def test_invalid(self, text):
        with pytest.raises(InvalidRunwaySpec):
            parse_runway_pair(text)

    def test_designator_rounding(self):
        assert heading_to_designator(0) == "36"
        assert heading_to_designator(360) == "36"
        assert heading_to_designator(45) == "05"
        assert heading_to_designator(174) == "17"


class TestRunwayPairFromConfig:
    """Tests for the configuration seam."""

    def test_absent_disables(self):
        assert runway_pair_from_config(None) is None
        assert runway_pair_from_config("  ") is None

    def test_malformed_disables_and_warns(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert runway_pair_from_config("16;34") is None
        assert any(r.getMessage() == "runway_spec_invalid" for r in caplog.records)

    def test_valid(self):
        assert runway_pair_from_config("17,35").first_heading == 170
