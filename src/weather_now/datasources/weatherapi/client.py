"""WeatherAPI.com endpoint constants and URL construction.

API docs: https://www.weatherapi.com/docs/
"""

from __future__ import annotations

import re
from urllib.parse import quote

from weather_now.schemas import Units

WEATHERAPI_BASE_URL = "https://api.weatherapi.com/v1/"
CURRENT_ENDPOINT = "current.json"

_KEY_PARAM = re.compile(r"([?&]key=)[^&]*")


def build_current_url(
    query: str,
    units: Units,
    api_key: str,
    *,
    base_url: str = WEATHERAPI_BASE_URL,
) -> str:
    """
    Compose the current-conditions URL.

    Args:
        query: Already-normalized (percent-encoded) location query.
        units: Unit preference sent as the ``units`` parameter.
        api_key: WeatherAPI.com key.
        base_url: Endpoint root, with or without a trailing slash.
    """
    root = base_url if base_url.endswith("/") else f"{base_url}/"
    key = quote(api_key, safe="")
    return f"{root}{CURRENT_ENDPOINT}?key={key}&q={query}&units={units.value}"


def redact_url(url: str) -> str:
    """Mask the API key in a URL so it can be logged."""
    return _KEY_PARAM.sub(r"\1***", url)
