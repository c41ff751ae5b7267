"""Tests for location query normalization."""

from __future__ import annotations

import math

import pytest

from weather_now.datasources.weatherapi import coordinates_query, normalize_query
from weather_now.errors import InvalidQuery


class TestNormalizeQuery:
    """Percent-encoding of free-text and coordinate queries."""

    def test_plain_name_unchanged(self) -> None:
        assert normalize_query("Paris") == "Paris"

    def test_spaces_encoded(self) -> None:
        assert normalize_query("New York") == "New%20York"

    def test_surrounding_whitespace_stripped(self) -> None:
        assert normalize_query("  London \n") == "London"

    def test_comma_kept_for_coordinates(self) -> None:
        assert normalize_query("48.8566,2.3522") == "48.8566,2.3522"

    def test_negative_coordinates(self) -> None:
        assert normalize_query("-33.87,151.21") == "-33.87,151.21"

    def test_reserved_characters_encoded(self) -> None:
        """Characters that would break out of the ``q`` parameter are escaped."""
        assert normalize_query("a&key=x") == "a%26key%3Dx"

    def test_non_ascii_encoded_as_utf8(self) -> None:
        assert normalize_query("Zürich") == "Z%C3%BCrich"

    @pytest.mark.parametrize("raw", ["Paris", "New York", "Zürich", "São Paulo", "100%", "1,2"])
    def test_idempotent(self, raw: str) -> None:
        once = normalize_query(raw)
        assert normalize_query(once) == once

    def test_literal_percent_encoded(self) -> None:
        assert normalize_query("100%") == "100%25"

    @pytest.mark.parametrize("raw", [None, "", "   ", "\t\n", "%20"])
    def test_empty_raises(self, raw: str | None) -> None:
        with pytest.raises(InvalidQuery):
            normalize_query(raw)

    def test_unencodable_raises(self) -> None:
        """Lone surrogates cannot be encoded as UTF-8."""
        with pytest.raises(InvalidQuery):
            normalize_query("bad\ud800place")

    def test_invalid_escape_raises(self) -> None:
        with pytest.raises(InvalidQuery):
            normalize_query("%FF")


class TestCoordinatesQuery:
    """``lat,lon`` formatting for location fixes."""

    def test_formats_pair(self) -> None:
        assert coordinates_query(48.8566, 2.3522) == "48.8566,2.3522"

    def test_negative_values(self) -> None:
        assert coordinates_query(-33.87, -70.5) == "-33.87,-70.5"

    def test_result_is_already_normalized(self) -> None:
        query = coordinates_query(45.5, -122.6)
        assert normalize_query(query) == query

    @pytest.mark.parametrize(
        ("lat", "lon"),
        [(91.0, 0.0), (-91.0, 0.0), (0.0, 181.0), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
    )
    def test_invalid_coordinates_raise(self, lat: float, lon: float) -> None:
        with pytest.raises(InvalidQuery):
            coordinates_query(lat, lon)
