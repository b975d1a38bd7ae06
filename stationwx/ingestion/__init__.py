# Ingestion module - fetching the raw station observation
from .http import HttpClient, HttpClientError, HttpStatusError, HttpTimeoutError, fetch_with_retry
from .nws_observations import (
    NWSObservationsClient,
    ObservationFormatError,
    parse_observation,
)

__all__ = [
    "HttpClient",
    "HttpClientError",
    "HttpStatusError",
    "HttpTimeoutError",
    "fetch_with_retry",
    "NWSObservationsClient",
    "ObservationFormatError",
    "parse_observation",
]
