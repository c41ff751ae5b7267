"""
Single-screen presenter.

``WeatherScreen`` holds the one piece of mutable state (the last response
that completed) and exposes one plain method per user or device event:

    search_submitted(text)      return key / search button
    location_requested()        location button
    locations_updated(fixes)    location provider delivered fixes
    location_failed(error)      location provider gave up
    units_toggled(fahrenheit)   °C/°F switch

Every event produces a new ``ScreenState`` which is passed to ``on_change``.
Lookups run through ``WeatherClient.submit``; whichever request completes
last wins the display. Events that start a lookup return a ``Future`` that
resolves with the published state once the lookup has been applied.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import Future
from typing import Protocol

from pydantic import ValidationError

from weather_now.datasources.weatherapi import WeatherClient, coordinates_query, normalize_query
from weather_now.errors import InvalidQuery, LocationUnavailable, WeatherError
from weather_now.renderers.weather_utils import code_to_icon, format_temperature
from weather_now.schemas import (
    Coordinates,
    ScreenState,
    ScreenStatus,
    Units,
    WeatherResponse,
)

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Unable to fetch weather"
LOCATION_FAILED_MESSAGE = "Unable to determine your location"


class LocationProvider(Protocol):
    """Anything that can produce coordinate fixes on request."""

    def locate(self) -> Sequence[Coordinates]:
        """Return available fixes, most relevant first. Raise ``LocationUnavailable`` on failure."""
        ...


class StaticLocationProvider:
    """Location provider that always reports the same fix."""

    def __init__(self, lat: float, lon: float) -> None:
        self.lat = lat
        self.lon = lon

    def locate(self) -> Sequence[Coordinates]:
        try:
            return [Coordinates(lat=self.lat, lon=self.lon)]
        except ValidationError as e:
            raise LocationUnavailable(f"Invalid fix ({self.lat}, {self.lon})") from e


class WeatherScreen:
    """Event handlers and display state for the weather screen."""

    def __init__(
        self,
        client: WeatherClient,
        *,
        location_provider: LocationProvider | None = None,
        units: Units = Units.CELSIUS,
        on_change: Callable[[ScreenState], None] | None = None,
    ) -> None:
        self._client = client
        self._location_provider = location_provider
        self._on_change = on_change
        self._lock = threading.Lock()
        self._response: WeatherResponse | None = None
        self._state = ScreenState(units=units)

    @property
    def state(self) -> ScreenState:
        with self._lock:
            return self._state

    @property
    def response(self) -> WeatherResponse | None:
        with self._lock:
            return self._response

    # -- events -----------------------------------------------------------------

    def search_submitted(self, text: str | None) -> Future[ScreenState] | None:
        """Start a lookup for the search field contents."""
        return self._load(text)

    def location_requested(self) -> Future[ScreenState] | None:
        """Ask the location provider for a fix and look it up."""
        if self._location_provider is None:
            self.location_failed(LocationUnavailable("No location provider configured"))
            return None
        try:
            fixes = self._location_provider.locate()
        except LocationUnavailable as e:
            self.location_failed(e)
            return None
        return self.locations_updated(fixes)

    def locations_updated(self, fixes: Sequence[Coordinates]) -> Future[ScreenState] | None:
        """Look up the first fix; later fixes in the batch are ignored."""
        if not fixes:
            logger.info("No location available")
            return None
        first = fixes[0]
        try:
            query = coordinates_query(first.lat, first.lon)
        except InvalidQuery as e:
            self._fail(e)
            return None
        return self._load(query)

    def location_failed(self, error: BaseException) -> None:
        logger.warning("Location error: %s", error)
        self._publish(
            lambda s: s.model_copy(
                update={"status": ScreenStatus.ERROR, "error_message": LOCATION_FAILED_MESSAGE}
            )
        )

    def units_toggled(self, fahrenheit: bool) -> ScreenState:
        """Switch units and re-format the retained response. No network call."""
        units = Units.from_flag(fahrenheit)

        def update(s: ScreenState) -> ScreenState:
            if self._response is None:
                return s.model_copy(update={"units": units})
            return s.model_copy(
                update={
                    "units": units,
                    "temperature_text": format_temperature(self._response, units),
                }
            )

        return self._publish(update)

    # -- internals --------------------------------------------------------------

    def _load(self, query: str | None) -> Future[ScreenState] | None:
        try:
            normalize_query(query)
        except InvalidQuery as e:
            self._fail(e)
            return None

        state = self._publish(
            lambda s: s.model_copy(update={"status": ScreenStatus.LOADING, "error_message": None})
        )
        outcome: Future[ScreenState] = Future()

        def on_done(future: Future[WeatherResponse]) -> None:
            try:
                outcome.set_result(self._completed(future))
            except Exception as e:
                outcome.set_exception(e)

        self._client.submit(query, state.units).add_done_callback(on_done)
        return outcome

    def _completed(self, future: Future[WeatherResponse]) -> ScreenState:
        try:
            resp = future.result()
        except WeatherError as e:
            return self._fail(e)
        except Exception as e:
            # Still end the request on screen, then hand the error to the caller
            self._fail(e)
            raise

        def update(s: ScreenState) -> ScreenState:
            self._response = resp
            return s.model_copy(
                update={
                    "status": ScreenStatus.READY,
                    "location_name": resp.location_name,
                    "temperature_text": format_temperature(resp, s.units),
                    "icon": code_to_icon(resp.condition_code),
                    "condition_text": resp.condition_text,
                    "error_message": None,
                }
            )

        return self._publish(update)

    def _fail(self, error: Exception) -> ScreenState:
        # Prior location/temperature/icon stay on screen
        logger.warning("%s: %s", FETCH_FAILED_MESSAGE, error)
        return self._publish(
            lambda s: s.model_copy(
                update={"status": ScreenStatus.ERROR, "error_message": FETCH_FAILED_MESSAGE}
            )
        )

    def _publish(self, update: Callable[[ScreenState], ScreenState]) -> ScreenState:
        with self._lock:
            self._state = update(self._state)
            state = self._state
        if self._on_change is not None:
            self._on_change(state)
        return state
