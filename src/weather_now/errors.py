"""
Error taxonomy for weather lookups.

Every error is terminal for the request that raised it. Nothing here is
retried; callers (the screen presenter, the CLI) turn these into a
user-visible "unable to fetch weather" state.
"""

from __future__ import annotations


class WeatherError(Exception):
    """Base class for all weather lookup failures."""


class InvalidQuery(WeatherError):
    """The location query was empty or could not be percent-encoded."""


class ConfigurationError(WeatherError):
    """Required configuration (e.g. the API key) is missing."""


class NetworkError(WeatherError):
    """Transport failure or non-2xx response from the weather API."""

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        status_code: int | None = None,
        api_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code
        self.api_message = api_message


class DecodeError(WeatherError):
    """The response body was not valid JSON or lacked required fields."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class LocationUnavailable(WeatherError):
    """The location provider could not produce a fix."""
