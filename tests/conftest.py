# tests/conftest.py
"""
Pytest configuration and fixtures.

No test touches the network: the NWS client is exercised through
httpx.MockTransport and the CLI through a fake client.
"""

import copy
from datetime import datetime, timezone

import pytest

from stationwx.engine.models import CloudAmount, CloudLayer, Observation
from stationwx.engine.units import KNOTS_PER_MPS, METERS_PER_FOOT

# Latest-observation body as returned by api.weather.gov (trimmed)
NWS_PAYLOAD = {
    "id": "https://api.weather.gov/stations/KGOK/observations/2026-01-15T14:53:00+00:00",
    "type": "Feature",
    "properties": {
        "station": "https://api.weather.gov/stations/KGOK",
        "timestamp": "2026-01-15T14:53:00+00:00",
        "textDescription": "Mostly Cloudy",
        "temperature": {"unitCode": "wmoUnit:degC", "value": 20.0, "qualityControl": "V"},
        "windDirection": {"unitCode": "wmoUnit:degree_(angle)", "value": 200, "qualityControl": "V"},
        "windSpeed": {"unitCode": "wmoUnit:m_s-1", "value": 10.288914, "qualityControl": "V"},
        "barometricPressure": {"unitCode": "wmoUnit:Pa", "value": 101325, "qualityControl": "V"},
        "seaLevelPressure": {"unitCode": "wmoUnit:Pa", "value": 101400, "qualityControl": "V"},
        "visibility": {"unitCode": "wmoUnit:m", "value": 16090, "qualityControl": "C"},
        "cloudLayers": [
            {"base": {"unitCode": "wmoUnit:m", "value": 762}, "amount": "FEW"},
            {"base": {"unitCode": "wmoUnit:m", "value": 1219.2}, "amount": "BKN"},
        ],
    },
}


@pytest.fixture
def nws_payload():
    """Fresh copy of a realistic NWS observation body."""
    return copy.deepcopy(NWS_PAYLOAD)


def knots(kt: float) -> float:
    """Knots expressed in m/s, as the NWS reports wind speed."""
    return kt / KNOTS_PER_MPS


def feet(ft: float) -> float:
    """Feet expressed in meters, as the NWS reports cloud bases."""
    return ft * METERS_PER_FOOT


def layer(amount: str, base_ft=None) -> CloudLayer:
    return CloudLayer(
        amount=CloudAmount.parse(amount),
        base_m=feet(base_ft) if base_ft is not None else None,
        raw_amount=amount,
    )


@pytest.fixture
def make_observation():
    """Factory for observations with sensible defaults."""
    def _make(**overrides) -> Observation:
        fields = dict(
            station="KGOK",
            temperature_c=20.0,
            wind_speed_mps=knots(20),
            wind_direction_deg=200.0,
            barometric_pressure_pa=101325.0,
            visibility_m=16090.0,
            cloud_layers=(),
            timestamp=datetime(2026, 1, 15, 14, 53, tzinfo=timezone.utc),
        )
        fields.update(overrides)
        return Observation(**fields)
    return _make
