# ABOUTME: Search controller driving geocode -> forecast -> render and the panel's display state.
# ABOUTME: Sole error boundary of the pipeline; handles user searches and the startup default city.

import logging
from enum import Enum

from skyline import config
from skyline.deps import AppContext
from skyline.models import DisplayState, Location, WeatherSnapshot
from skyline.weather_service import geocode, get_forecast

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "City not found. Try another name."
FAILURE_MESSAGE = "Could not load weather. Check your connection and try again."
DEFAULT_NOT_FOUND_MESSAGE = "Could not load default weather. Search for a city."
DEFAULT_FAILURE_MESSAGE = "Could not load weather. Search for a city to get started."


class SearchOutcome(str, Enum):
    READY = "ready"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    STALE = "stale"


class SearchController:
    """Runs the weather pipeline and moves the view between display states.

    Each run takes a generation number. By default whichever run finishes last
    wins, so a slow startup load can overwrite a newer user search. With
    ``guard_stale_results`` on, a run that finishes after a newer one has
    started leaves the view untouched.

    Any failure inside a run, including malformed payloads, ends in the error
    state; a run never leaves the view in loading.
    """

    def __init__(
        self,
        context: AppContext,
        default_city: str = config.DEFAULT_CITY,
        guard_stale_results: bool = config.GUARD_STALE_RESULTS,
    ):
        self.context = context
        self.default_city = default_city
        self.guard_stale_results = guard_stale_results
        self._generation = 0

    @property
    def view(self):
        return self.context.view

    async def search(self, query: str) -> SearchOutcome | None:
        """Run a user search. Blank queries are ignored: no state change, no request."""
        query = query.strip()
        if not query:
            return None
        return await self._run(query, NOT_FOUND_MESSAGE, FAILURE_MESSAGE)

    async def bootstrap(self) -> SearchOutcome:
        """Load the default city once at startup."""
        self.view.search_placeholder = f"e.g. {self.default_city}, New York, Tokyo"
        return await self._run(self.default_city, DEFAULT_NOT_FOUND_MESSAGE, DEFAULT_FAILURE_MESSAGE)

    async def _run(self, query: str, not_found_message: str, failure_message: str) -> SearchOutcome:
        self._generation += 1
        generation = self._generation
        self.view.set_state(DisplayState.LOADING)
        logger.info("Loading weather for %r", query)

        result = await self._load(query)

        if self._is_stale(generation):
            logger.info("Discarding stale result for %r", query)
            return SearchOutcome.STALE

        if result is SearchOutcome.NOT_FOUND:
            self.view.show_error(not_found_message)
            return result
        if result is SearchOutcome.FAILED:
            self.view.show_error(failure_message)
            return result

        location, snapshot = result
        self.view.render_current(snapshot, location.name, location.country_code)
        self.view.render_forecast(snapshot)
        self.view.set_state(DisplayState.READY)
        logger.debug("Rendered %s (%s)", location.name, location.country_code)
        return SearchOutcome.READY

    async def _load(self, query: str) -> tuple[Location, WeatherSnapshot] | SearchOutcome:
        """Resolve the location and fetch its weather, returning the data or a failure outcome."""
        client = self.context.http_client
        try:
            location = await geocode(client, query)
        except Exception:
            logger.exception("Geocoding failed for %r", query)
            return SearchOutcome.FAILED
        if location is None:
            logger.info("No geocoding match for %r", query)
            return SearchOutcome.NOT_FOUND

        try:
            snapshot = await get_forecast(client, location.latitude, location.longitude, location.timezone)
        except Exception:
            logger.exception("Forecast fetch failed for %s", location.name)
            return SearchOutcome.FAILED
        return location, snapshot

    def _is_stale(self, generation: int) -> bool:
        return self.guard_stale_results and generation != self._generation
