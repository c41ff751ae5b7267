"""
Domain models for weather-now.

Pydantic models for the WeatherAPI.com payload and for what the display
surface receives. The wire models mirror the JSON shape one-to-one; callers
use the flat properties on ``WeatherResponse``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class Units(StrEnum):
    """Temperature unit preference. The value is the ``units`` wire parameter."""

    CELSIUS = "c"
    FAHRENHEIT = "f"

    @classmethod
    def from_flag(cls, fahrenheit: bool) -> Units:
        """Map a Celsius/Fahrenheit toggle to a unit."""
        return cls.FAHRENHEIT if fahrenheit else cls.CELSIUS

    @property
    def symbol(self) -> str:
        return "°F" if self is Units.FAHRENHEIT else "°C"


class IconId(StrEnum):
    """Symbolic icon names derived from a condition code."""

    SUNNY = "sunny"
    PARTLY_CLOUDY = "partly-cloudy"
    RAIN = "rain"
    SNOW = "snow"
    DRIZZLE = "drizzle"
    LIGHT_SNOW = "light-snow"
    SLEET = "sleet"
    UNKNOWN = "unknown"


# =============================================================================
# Geographic
# =============================================================================


class Coordinates(BaseModel):
    """A single fix from a location provider."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)


# =============================================================================
# WeatherAPI.com current.json (subset consumed)
# =============================================================================

_WIRE_CONFIG = ConfigDict(frozen=True, strict=True)


class Condition(BaseModel):
    model_config = _WIRE_CONFIG

    text: str
    code: int


class Current(BaseModel):
    model_config = _WIRE_CONFIG

    temp_c: float
    temp_f: float
    condition: Condition


class Place(BaseModel):
    model_config = _WIRE_CONFIG

    name: str


class WeatherResponse(BaseModel):
    """
    Decoded current-conditions response.

    Every field is required and strictly typed, so a response is either fully
    decoded or not constructed at all.
    """

    model_config = _WIRE_CONFIG

    location: Place
    current: Current

    @property
    def location_name(self) -> str:
        return self.location.name

    @property
    def temp_c(self) -> float:
        return self.current.temp_c

    @property
    def temp_f(self) -> float:
        return self.current.temp_f

    @property
    def condition_code(self) -> int:
        return self.current.condition.code

    @property
    def condition_text(self) -> str:
        return self.current.condition.text


class ApiErrorDetail(BaseModel):
    """The ``error`` object WeatherAPI.com returns with 4xx responses."""

    code: int | None = None
    message: str


class ApiErrorEnvelope(BaseModel):
    error: ApiErrorDetail


# =============================================================================
# Display
# =============================================================================


class ScreenStatus(StrEnum):
    """Lifecycle of the single weather screen."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ScreenState(BaseModel):
    """Snapshot handed to the display surface after every event."""

    model_config = ConfigDict(frozen=True)

    units: Units = Units.CELSIUS
    status: ScreenStatus = ScreenStatus.IDLE
    location_name: str | None = None
    temperature_text: str | None = None
    icon: IconId | None = None
    condition_text: str | None = None
    error_message: str | None = None
