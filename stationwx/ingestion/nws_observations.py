# stationwx/ingestion/nws_observations.py
"""
National Weather Service (NWS) latest station observation.

Source: https://api.weather.gov/stations/{station}/observations/latest

The response is GeoJSON; everything of interest lives under `properties`,
with each measurement wrapped as {"value": ..., "unitCode": ...}:
- temperature: degC
- windSpeed: m/s (NWS reports km/h for some stations, see _speed_mps)
- windDirection: degrees true
- barometricPressure / seaLevelPressure: Pa
- visibility: m
- cloudLayers: [{"amount": "BKN", "base": {"value": 1200}}]

A value that is null or not a number is treated as not reported.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..engine.models import CloudAmount, CloudLayer, Observation
from ..logging import get_logger
from .http import DEFAULT_MAX_ATTEMPTS, DEFAULT_TIMEOUT, HttpClient, HttpClientError

logger = get_logger(__name__)

NWS_OBSERVATION_URL = "https://api.weather.gov/stations/{station}/observations/latest"

DEFAULT_USER_AGENT = "stationwx/1.0 (station weather banner)"

# km/h -> m/s
_KMH_TO_MPS = 1 / 3.6

_MEASUREMENTS = (
    "temperature",
    "windSpeed",
    "windDirection",
    "barometricPressure",
    "seaLevelPressure",
    "visibility",
)


class ObservationFormatError(HttpClientError):
    """Raised when the observation body is not the expected GeoJSON shape."""
    pass


def _number(measurement: Any) -> Optional[float]:
    """Numeric `value` of an NWS measurement, None when absent or non-numeric."""
    if not isinstance(measurement, dict):
        return None
    value = measurement.get("value")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _speed_mps(measurement: Any) -> Optional[float]:
    value = _number(measurement)
    if value is None:
        return None
    if str(measurement.get("unitCode", "")).endswith("km_h-1"):
        return value * _KMH_TO_MPS
    return value


def _parse_timestamp(raw: Any) -> Optional[datetime]:
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_cloud_layers(raw_layers: Any) -> List[CloudLayer]:
    if not isinstance(raw_layers, list):
        return []
    layers = []
    for raw in raw_layers:
        if not isinstance(raw, dict):
            continue
        raw_amount = raw.get("amount") if isinstance(raw.get("amount"), str) else ""
        layers.append(CloudLayer(
            amount=CloudAmount.parse(raw_amount),
            base_m=_number(raw.get("base")),
            raw_amount=raw_amount,
        ))
    return layers


def parse_observation(payload: Any, station: str) -> Observation:
    """
    Convert an NWS observation body into an Observation.

    Args:
        payload: Decoded JSON body
        station: Station identifier the observation was requested for

    Returns:
        Observation with None for every field that was not reported

    Raises:
        ObservationFormatError: If the body has no `properties` object
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("properties"), dict):
        raise ObservationFormatError(f"Observation for {station} has no properties object")

    props: Dict[str, Any] = payload["properties"]

    for name in _MEASUREMENTS:
        if _number(props.get(name)) is None:
            logger.debug("observation_field_missing", station=station, field=name)

    description = props.get("textDescription")

    return Observation(
        station=station,
        temperature_c=_number(props.get("temperature")),
        wind_speed_mps=_speed_mps(props.get("windSpeed")),
        wind_direction_deg=_number(props.get("windDirection")),
        barometric_pressure_pa=_number(props.get("barometricPressure")),
        sea_level_pressure_pa=_number(props.get("seaLevelPressure")),
        visibility_m=_number(props.get("visibility")),
        cloud_layers=tuple(_parse_cloud_layers(props.get("cloudLayers"))),
        timestamp=_parse_timestamp(props.get("timestamp")),
        text_description=description if isinstance(description, str) and description else None,
    )


class NWSObservationsClient:
    """
    Client for the NWS latest-observation endpoint.

    api.weather.gov requires a User-Agent identifying the caller.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        transport=None,
    ):
        self.client = HttpClient(
            timeout=timeout,
            headers={"User-Agent": user_agent, "Accept": "application/geo+json"},
            max_attempts=max_attempts,
            transport=transport,
        )

    def fetch_latest(self, station: str) -> Observation:
        """
        Fetch the latest observation for a station.

        Args:
            station: Station identifier, e.g. "KGOK"

        Returns:
            Parsed Observation

        Raises:
            HttpClientError: On network, status or format failure
        """
        station = station.upper()
        data = self.client.get_json(NWS_OBSERVATION_URL.format(station=station))
        observation = parse_observation(data, station)
        logger.info(
            "observation_fetched",
            station=station,
            timestamp=observation.timestamp,
            cloud_layers=len(observation.cloud_layers),
        )
        return observation

