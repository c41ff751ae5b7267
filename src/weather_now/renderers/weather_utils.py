"""Weather display helpers.

Pure lookup and formatting functions with no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from weather_now.schemas import IconId, Units, WeatherResponse

# WeatherAPI.com condition codes (https://www.weatherapi.com/docs/weather_conditions.json)
_ICON_CODES: dict[IconId, tuple[int, ...]] = {
    IconId.SUNNY: (1000,),
    IconId.PARTLY_CLOUDY: (1003, 1006),  # Partly cloudy, Cloudy
    IconId.RAIN: (1183, 1189),  # Light rain, Moderate rain
    IconId.SNOW: (1225,),
    IconId.DRIZZLE: (1063, 1150, 1153),  # Patchy rain, Patchy light drizzle, Light drizzle
    IconId.LIGHT_SNOW: (1066, 1210, 1213),
    IconId.SLEET: (1069, 1207, 1240),
}

CONDITION_ICONS: dict[int, IconId] = {
    code: icon for icon, codes in _ICON_CODES.items() for code in codes
}


@dataclass(frozen=True)
class IconStyle:
    """Symbol name and palette a display surface uses to draw an icon."""

    symbol: str
    palette: tuple[str, ...] = field(default_factory=tuple)


ICON_STYLES: dict[IconId, IconStyle] = {
    IconId.SUNNY: IconStyle("sun.max.fill", ("systemYellow",)),
    IconId.PARTLY_CLOUDY: IconStyle("cloud.sun.fill", ("systemGray3", "yellow")),
    IconId.RAIN: IconStyle("cloud.rain.fill", ("systemBlue",)),
    IconId.SNOW: IconStyle("snow", ("systemBlue", "white")),
    IconId.DRIZZLE: IconStyle("cloud.drizzle.fill", ("systemBlue",)),
    IconId.LIGHT_SNOW: IconStyle("cloud.snow.fill", ("systemBlue", "white")),
    IconId.SLEET: IconStyle("cloud.sleet.fill", ("systemBlue",)),
    IconId.UNKNOWN: IconStyle("questionmark.circle"),
}


def code_to_icon(code: int) -> IconId:
    """Map a WeatherAPI.com condition code to an icon (``UNKNOWN`` if unmapped)."""
    return CONDITION_ICONS.get(code, IconId.UNKNOWN)


def icon_style(icon: IconId) -> IconStyle:
    return ICON_STYLES[icon]


def format_temperature(resp: WeatherResponse, units: Units) -> str:
    """
    Format the response temperature in the requested unit.

    No conversion happens here: the API supplies both ``temp_c`` and ``temp_f``.
    """
    value = resp.temp_f if units is Units.FAHRENHEIT else resp.temp_c
    return f"{value}{units.symbol}"
