"""weather-now - current conditions from WeatherAPI.com.

Architecture::

    datasources/   WeatherAPI.com client (query normalization, fetch, decode)
    renderers/     Pure data -> display strings (icons, temperatures, HTML card)
    services/      Shared utilities (HTTP session with default timeout)
    screen.py      Event handlers + the single "last known response" slot
    cli.py         Command-line display surface

Data flow: query -> datasources (fetch + decode) -> screen (state) -> renderers
"""

__version__ = "0.1.0"

from weather_now.config import Settings, get_settings
from weather_now.errors import (
    ConfigurationError,
    DecodeError,
    InvalidQuery,
    LocationUnavailable,
    NetworkError,
    WeatherError,
)
from weather_now.schemas import IconId, Units, WeatherResponse

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "IconId",
    "InvalidQuery",
    "LocationUnavailable",
    "NetworkError",
    "Settings",
    "Units",
    "WeatherError",
    "WeatherResponse",
    "__version__",
    "get_settings",
]
