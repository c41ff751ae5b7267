"""Current conditions from the WeatherAPI.com ``current.json`` endpoint."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from types import TracebackType
from typing import TYPE_CHECKING

import requests
from pydantic import ValidationError

from weather_now.config import Settings, get_settings
from weather_now.datasources.weatherapi.client import build_current_url, redact_url
from weather_now.datasources.weatherapi.query import normalize_query
from weather_now.errors import ConfigurationError, DecodeError, NetworkError
from weather_now.schemas import ApiErrorEnvelope, Units, WeatherResponse
from weather_now.services.http import session

if TYPE_CHECKING:
    from typing import Self

logger = logging.getLogger(__name__)


def decode_current(body: bytes | str) -> WeatherResponse:
    """
    Decode a ``current.json`` body.

    Raises:
        DecodeError: Body is not JSON, or a required field is missing or mistyped.
    """
    try:
        return WeatherResponse.model_validate_json(body)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<body>" for err in e.errors())
        raise DecodeError(f"Malformed weather response ({fields})", cause=e) from e


def _api_error_message(resp: requests.Response | None) -> str | None:
    """Extract ``error.message`` from a WeatherAPI.com error body, if present."""
    if resp is None or not resp.content:
        return None
    try:
        return ApiErrorEnvelope.model_validate_json(resp.content).error.message
    except ValidationError:
        return None


def fetch_current(
    query: str | None,
    units: Units = Units.CELSIUS,
    *,
    settings: Settings | None = None,
) -> WeatherResponse:
    """
    Fetch current conditions for a place name or ``"lat,lon"`` query.

    One GET, no retries. The query is validated before any network access.

    Args:
        query: Free-text location or coordinate pair.
        units: Sent as the ``units`` parameter; both temperatures come back
            regardless.
        settings: Overrides the process-wide settings (API key, base URL, timeout).

    Raises:
        InvalidQuery: Query is empty or not encodable.
        ConfigurationError: No API key is configured.
        NetworkError: Transport failure or non-2xx status.
        DecodeError: Response body is malformed.
    """
    settings = settings or get_settings()
    normalized = normalize_query(query)

    api_key = settings.api_key.get_secret_value() if settings.api_key else ""
    if not api_key:
        raise ConfigurationError("No API key configured (set WEATHER_NOW_API_KEY)")

    url = build_current_url(normalized, units, api_key, base_url=settings.base_url)
    logger.debug("GET %s", redact_url(url))

    try:
        resp = session.get(url, timeout=settings.http_timeout)
        resp.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        api_message = _api_error_message(e.response)
        logger.warning("Weather API returned %s: %s", status, api_message or "no details")
        raise NetworkError(
            f"Weather API returned HTTP {status}",
            cause=e,
            status_code=status,
            api_message=api_message,
        ) from e
    except requests.RequestException as e:
        logger.warning("Weather request failed: %s", type(e).__name__)
        raise NetworkError(f"Weather request failed: {type(e).__name__}", cause=e) from e

    # raise_for_status() lets 1xx/3xx through; only 2xx carries a payload
    if not 200 <= resp.status_code < 300:
        api_message = _api_error_message(resp)
        logger.warning(
            "Weather API returned %s: %s", resp.status_code, api_message or "no details"
        )
        raise NetworkError(
            f"Weather API returned HTTP {resp.status_code}",
            status_code=resp.status_code,
            api_message=api_message,
        )

    result = decode_current(resp.content)
    logger.info(
        "Fetched weather for %s (code %d)", result.location_name, result.condition_code
    )
    return result


class WeatherClient:
    """
    Runs lookups off the caller's thread.

    Each ``submit`` returns a ``Future`` that resolves exactly once, with the
    decoded response or with the ``WeatherError`` that ended the request.
    """

    def __init__(self, settings: Settings | None = None, *, max_workers: int = 1) -> None:
        self._settings = settings
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="weather-now"
        )

    def fetch(self, query: str | None, units: Units = Units.CELSIUS) -> WeatherResponse:
        """Blocking lookup on the calling thread."""
        return fetch_current(query, units, settings=self._settings)

    def submit(self, query: str | None, units: Units = Units.CELSIUS) -> Future[WeatherResponse]:
        """Schedule a lookup and return its future."""
        return self._executor.submit(fetch_current, query, units, settings=self._settings)

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
