# stationwx/ingestion/http.py
"""
HTTP client for the observation fetch.

Uses httpx for requests and tenacity for optional retries. The default is
a single attempt; any failure after the last attempt is raised as an
HttpClientError and ends the run.
"""

import httpx
from typing import Optional, Dict, Any
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 10.0

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 1
DEFAULT_WAIT_MIN = 1
DEFAULT_WAIT_MAX = 10


class HttpClientError(Exception):
    """Base exception for HTTP client errors."""
    pass


class HttpTimeoutError(HttpClientError):
    """Raised when request times out."""
    pass


class HttpStatusError(HttpClientError):
    """Raised when response has non-2xx status."""
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: {message}")


@retry(
    stop=stop_after_attempt(DEFAULT_MAX_ATTEMPTS),
    wait=wait_exponential(
        multiplier=1,
        min=DEFAULT_WAIT_MIN,
        max=DEFAULT_WAIT_MAX
    ),
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.HTTPStatusError)),
    reraise=True,  # Re-raise the last exception after retries exhausted
)
def _fetch_with_retry_inner(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Response:
    """
    Single GET attempt.

    DO NOT catch exceptions here - that would prevent tenacity from retrying.
    """
    with httpx.Client(timeout=timeout, transport=transport) as client:
        response = client.get(url, params=params, headers=headers)
        response.raise_for_status()
        return response


def fetch_with_retry(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Response:
    """
    GET a URL, retrying timeouts and status errors up to max_attempts.

    Args:
        url: URL to fetch
        params: Query parameters
        headers: HTTP headers
        timeout: Request timeout in seconds
        max_attempts: Total attempts, 1 means no retry
        transport: Optional httpx transport (tests use httpx.MockTransport)

    Returns:
        httpx.Response object

    Raises:
        HttpTimeoutError: After all attempts timed out
        HttpStatusError: After all attempts returned an error status
        HttpClientError: On any other transport failure
    """
    attempts = max(1, max_attempts)
    fetch = _fetch_with_retry_inner.retry_with(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=1, min=DEFAULT_WAIT_MIN, max=DEFAULT_WAIT_MAX),
    )
    try:
        return fetch(url, params, headers, timeout, transport)
    except httpx.TimeoutException as e:
        raise HttpTimeoutError(f"Timeout fetching {url} after {attempts} attempts: {e}")
    except httpx.HTTPStatusError as e:
        raise HttpStatusError(e.response.status_code, f"HTTP error after {attempts} attempts: {e}")
    except httpx.HTTPError as e:
        raise HttpClientError(f"Request to {url} failed: {e}")


class HttpClient:
    """
    HTTP client for external API calls.

    Provides a consistent interface for fetching data from
    external sources with retry logic and error handling.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            timeout: Default timeout in seconds
            headers: Default headers for all requests
            max_attempts: Attempts per request
            transport: Optional httpx transport
        """
        self.timeout = timeout
        self.headers = headers or {}
        self.max_attempts = max_attempts
        self.transport = transport

    def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        merged_headers = {**self.headers, **(headers or {})}
        return fetch_with_retry(
            url=url,
            params=params,
            headers=merged_headers,
            timeout=self.timeout,
            max_attempts=self.max_attempts,
            transport=self.transport,
        )

    def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        GET request returning JSON.

        Raises:
            HttpClientError: If the body is not valid JSON
        """
        response = self.get(url, params, headers)
        try:
            return response.json()
        except ValueError as e:
            raise HttpClientError(f"Invalid JSON from {response.url}: {e}")
