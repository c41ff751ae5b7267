"""WeatherAPI.com current-conditions data source.

Public API:
  - query: normalize_query, coordinates_query (build the ``q`` parameter)
  - current: fetch_current, decode_current, WeatherClient
  - client: endpoint constants, build_current_url, redact_url
"""

from weather_now.datasources.weatherapi.client import (
    CURRENT_ENDPOINT,
    WEATHERAPI_BASE_URL,
    build_current_url,
    redact_url,
)
from weather_now.datasources.weatherapi.current import (
    WeatherClient,
    decode_current,
    fetch_current,
)
from weather_now.datasources.weatherapi.query import coordinates_query, normalize_query

__all__ = [
    "CURRENT_ENDPOINT",
    "WEATHERAPI_BASE_URL",
    "WeatherClient",
    "build_current_url",
    "coordinates_query",
    "decode_current",
    "fetch_current",
    "normalize_query",
    "redact_url",
]
