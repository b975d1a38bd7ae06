# tests/test_nws_observations.py
"""
Test NWS observation parsing and fetching.

HTTP is served by httpx.MockTransport; nothing leaves the process.
"""

from datetime import datetime, timezone

import httpx
import pytest

from stationwx.engine.models import CloudAmount
from stationwx.ingestion import http
from stationwx.ingestion.http import HttpClientError, HttpStatusError, HttpTimeoutError
from stationwx.ingestion.nws_observations import (
    NWSObservationsClient,
    ObservationFormatError,
    parse_observation,
)


class TestParseObservation:
    """Tests for GeoJSON body to Observation."""

    def test_full_body(self, nws_payload):
        obs = parse_observation(nws_payload, "KGOK")

        assert obs.station == "KGOK"
        assert obs.temperature_c == 20.0
        assert obs.wind_direction_deg == 200.0
        assert obs.wind_speed_mps == pytest.approx(10.288914)
        assert obs.barometric_pressure_pa == 101325.0
        assert obs.sea_level_pressure_pa == 101400.0
        assert obs.visibility_m == 16090.0
        assert obs.timestamp == datetime(2026, 1, 15, 14, 53, tzinfo=timezone.utc)
        assert obs.text_description == "Mostly Cloudy"
        assert [cloud.amount for cloud in obs.cloud_layers] == [CloudAmount.FEW, CloudAmount.BROKEN]
        assert obs.cloud_layers[1].base_m == 1219.2

    def test_null_values_are_unknown(self, nws_payload):
        props = nws_payload["properties"]
        props["temperature"]["value"] = None
        props["windDirection"]["value"] = None
        props["visibility"] = {"unitCode": "wmoUnit:m", "value": None}

        obs = parse_observation(nws_payload, "KGOK")
        assert obs.temperature_c is None
        assert obs.wind_direction_deg is None
        assert obs.visibility_m is None

    def test_non_numeric_values_are_unknown(self, nws_payload):
        props = nws_payload["properties"]
        props["temperature"]["value"] = "20"
        props["windSpeed"]["value"] = True
        del props["barometricPressure"]
        props["seaLevelPressure"] = "101325"

        obs = parse_observation(nws_payload, "KGOK")
        assert obs.temperature_c is None
        assert obs.wind_speed_mps is None
        assert obs.barometric_pressure_pa is None
        assert obs.sea_level_pressure_pa is None

    def test_zero_is_a_value(self, nws_payload):
        nws_payload["properties"]["windSpeed"]["value"] = 0
        assert parse_observation(nws_payload, "KGOK").wind_speed_mps == 0.0

    def test_wind_speed_in_kmh(self, nws_payload):
        nws_payload["properties"]["windSpeed"] = {"unitCode": "wmoUnit:km_h-1", "value": 36.0}
        assert parse_observation(nws_payload, "KGOK").wind_speed_mps == pytest.approx(10.0)

    def test_cloud_layers_tolerate_garbage(self, nws_payload):
        nws_payload["properties"]["cloudLayers"] = [
            {"amount": "OVC", "base": {"value": None}},
            {"amount": None},
            "BKN010",
        ]
        obs = parse_observation(nws_payload, "KGOK")
        assert len(obs.cloud_layers) == 2
        assert obs.cloud_layers[0].amount is CloudAmount.OVERCAST
        assert obs.cloud_layers[0].base_m is None
        assert obs.cloud_layers[1].amount is CloudAmount.UNRECOGNIZED

    def test_missing_cloud_layers_and_timestamp(self, nws_payload):
        props = nws_payload["properties"]
        del props["cloudLayers"]
        props["timestamp"] = "not a time"

        obs = parse_observation(nws_payload, "KGOK")
        assert obs.cloud_layers == ()
        assert obs.timestamp is None

    @pytest.mark.parametrize("payload", [None, [], {}, {"properties": None}, {"properties": []}])
    def test_malformed_body(self, payload):
        with pytest.raises(ObservationFormatError):
            parse_observation(payload, "KGOK")


def _client(handler, max_attempts: int = 1) -> NWSObservationsClient:
    return NWSObservationsClient(
        transport=httpx.MockTransport(handler),
        user_agent="test-agent",
        max_attempts=max_attempts,
    )


class TestNWSObservationsClient:
    """Tests for the fetch collaborator."""

    def test_fetch_latest(self, nws_payload):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["user_agent"] = request.headers.get("User-Agent")
            return httpx.Response(200, json=nws_payload)

        obs = _client(handler).fetch_latest("kgok")

        assert seen["url"] == "https://api.weather.gov/stations/KGOK/observations/latest"
        assert seen["user_agent"] == "test-agent"
        assert obs.station == "KGOK"
        assert obs.temperature_c == 20.0

    def test_status_error(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503, json={"title": "unavailable"})

        with pytest.raises(HttpStatusError) as exc_info:
            _client(handler).fetch_latest("KGOK")
        assert exc_info.value.status_code == 503
        assert len(calls) == 1

    def test_timeout(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(HttpTimeoutError):
            _client(handler).fetch_latest("KGOK")

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(HttpClientError):
            _client(handler).fetch_latest("KGOK")

    def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, text="<html>oops</html>")

        with pytest.raises(HttpClientError):
            _client(handler).fetch_latest("KGOK")

    def test_missing_properties(self):
        def handler(request):
            return httpx.Response(200, json={"type": "Feature"})

        with pytest.raises(ObservationFormatError):
            _client(handler).fetch_latest("KGOK")


class TestFetchRetries:
    """Tests for FETCH_MAX_ATTEMPTS retries."""

    @pytest.fixture(autouse=True)
    def no_backoff(self, monkeypatch):
        monkeypatch.setattr(http, "DEFAULT_WAIT_MIN", 0)
        monkeypatch.setattr(http, "DEFAULT_WAIT_MAX", 0)

    def test_recovers_after_one_failure(self, nws_payload):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) == 1:
                return httpx.Response(503, json={"title": "unavailable"})
            return httpx.Response(200, json=nws_payload)

        obs = _client(handler, max_attempts=2).fetch_latest("KGOK")

        assert len(calls) == 2
        assert obs.station == "KGOK"
        assert obs.temperature_c == 20.0

    def test_gives_up_after_max_attempts(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503, json={"title": "unavailable"})

        with pytest.raises(HttpStatusError) as exc_info:
            _client(handler, max_attempts=2).fetch_latest("KGOK")
        assert exc_info.value.status_code == 503
        assert len(calls) == 2

    def test_format_errors_are_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"type": "Feature"})

        with pytest.raises(ObservationFormatError):
            _client(handler, max_attempts=3).fetch_latest("KGOK")
        assert len(calls) == 1
