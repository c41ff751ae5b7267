"""Location query normalization.

Turns free-text searches and coordinate fixes into the percent-encoded
``q`` parameter. Normalizing is idempotent: valid escapes in the input are
decoded first, so feeding a normalized query back in returns it unchanged.
"""

from __future__ import annotations

from urllib.parse import quote, unquote

from pydantic import ValidationError

from weather_now.errors import InvalidQuery
from weather_now.schemas import Coordinates

# Kept literal in addition to the RFC 3986 unreserved set ("lat,lon" pairs)
_SAFE_CHARS = ","


def normalize_query(raw: str | None) -> str:
    """
    Percent-encode a location query for embedding in the request URL.

    Raises:
        InvalidQuery: The query is missing, blank, or not encodable as UTF-8.
    """
    if raw is None:
        raise InvalidQuery("Query is empty")

    try:
        text = unquote(raw.strip(), encoding="utf-8", errors="strict").strip()
        if not text:
            raise InvalidQuery("Query is empty")
        return quote(text, safe=_SAFE_CHARS, encoding="utf-8", errors="strict")
    except UnicodeError as e:
        raise InvalidQuery(f"Query cannot be percent-encoded: {e.reason}") from e


def coordinates_query(lat: float, lon: float) -> str:
    """
    Format a coordinate fix as the ``"<lat>,<lon>"`` query form.

    Raises:
        InvalidQuery: Latitude/longitude are out of range or not finite.
    """
    try:
        coords = Coordinates(lat=lat, lon=lon)
    except ValidationError as e:
        raise InvalidQuery(f"Invalid coordinates ({lat}, {lon})") from e
    return f"{coords.lat},{coords.lon}"
