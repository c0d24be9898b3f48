"""Per-user trip session: debounced autocomplete and route planning."""

import asyncio
import logging
from collections.abc import Callable

from app.config import settings
from app.core.places import KnownPlaceResolver
from app.core.route_planner import RoutePlanningClient
from app.core.suggestion_client import CURRENT_LOCATION, SuggestionClient, accepts_query
from app.schemas.trip import PlannedRoute, TripField, TripState
from app.schemas.vehicle import Coordinate

logger = logging.getLogger(__name__)

MY_CURRENT_LOCATION = "My Current Location"
PLAN_FAILED = "Failed to plan route. Please try again."


class TripSessionController:
    """Sequences user input into suggestion and planning calls.

    All methods must be called from the event loop. Every state change is
    pushed to `listener` as a fresh, immutable TripState.
    """

    def __init__(
        self,
        suggestions: SuggestionClient,
        planner: RoutePlanningClient,
        resolver: KnownPlaceResolver | None = None,
        listener: Callable[[TripState], None] | None = None,
        debounce_seconds: float | None = None,
    ) -> None:
        self.suggestions = suggestions
        self.planner = planner
        self.resolver = resolver or KnownPlaceResolver()
        self.listener = listener
        if debounce_seconds is None:
            debounce_seconds = settings.suggestion_debounce_ms / 1000
        self.debounce_seconds = debounce_seconds

        self._origin = CURRENT_LOCATION
        self._destination = ""
        self._active_field: TripField | None = None
        self._suggestions: list[str] = []
        self._loading_suggestions = False
        self._planning = False
        self._plan: PlannedRoute | None = None
        self._error: str | None = None
        self._user_location: Coordinate | None = None
        self._destination_location: Coordinate | None = None

        self._debounce: asyncio.Task | None = None
        self._inflight: set[asyncio.Task] = set()
        # Bumped for every issued suggestion request; only the latest may render
        self._suggestion_seq = 0

    @property
    def state(self) -> TripState:
        return TripState(
            origin=self._origin,
            destination=self._destination,
            active_field=self._active_field,
            suggestions=list(self._suggestions),
            loading_suggestions=self._loading_suggestions,
            planning=self._planning,
            plan=self._plan,
            error=self._error,
            user_location=self._user_location,
            destination_location=self._destination_location,
        )

    def _publish(self) -> None:
        if self.listener is not None:
            self.listener(self.state)

    def _value(self, field: TripField) -> str:
        return self._origin if field == TripField.ORIGIN else self._destination

    # --- input -------------------------------------------------------------

    def focus(self, field: TripField) -> None:
        self._active_field = field
        self._publish()
        self._restart_debounce()

    def blur(self) -> None:
        self._active_field = None
        self._cancel_debounce()
        self._publish()

    def update_field(self, field: TripField, text: str) -> None:
        if field == TripField.ORIGIN:
            self._origin = text
        else:
            self._destination = text
        self._active_field = field
        self._publish()
        self._restart_debounce()

    def select_suggestion(self, suggestion: str) -> None:
        if self._active_field == TripField.ORIGIN:
            self._origin = suggestion
        else:
            self._destination = suggestion
        self._cancel_debounce()
        self._suggestion_seq += 1
        self._suggestions = []
        self._loading_suggestions = False
        self._active_field = None
        self._publish()

    # --- geolocation -------------------------------------------------------

    def location_found(self, location: Coordinate) -> None:
        self._user_location = location
        self._publish()
        if self._active_field is not None:
            self._restart_debounce()

    def location_denied(self) -> None:
        logger.info("Geolocation unavailable for trip session")
        if self._origin == CURRENT_LOCATION:
            self._origin = ""
        self._publish()

    def use_current_location(self, location: Coordinate) -> None:
        self._user_location = location
        self._origin = CURRENT_LOCATION
        self._publish()
        if self._active_field is not None:
            self._restart_debounce()

    # --- suggestions -------------------------------------------------------

    def _cancel_debounce(self) -> None:
        if self._debounce is not None and not self._debounce.done():
            self._debounce.cancel()
        self._debounce = None

    def _restart_debounce(self) -> None:
        self._cancel_debounce()
        self._debounce = asyncio.create_task(self._debounced_lookup())

    async def _debounced_lookup(self) -> None:
        await asyncio.sleep(self.debounce_seconds)
        # Only the sleep above is cancellable; the request runs in its own task
        field = self._active_field
        if field is None:
            return
        query = self._value(field)

        self._suggestion_seq += 1
        seq = self._suggestion_seq
        if not accepts_query(query):
            self._suggestions = []
            self._loading_suggestions = False
            self._publish()
            return

        self._loading_suggestions = True
        self._publish()
        task = asyncio.create_task(self._fetch_suggestions(seq, query, self._user_location))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _fetch_suggestions(self, seq: int, query: str, nearby: Coordinate | None) -> None:
        results = await self.suggestions.suggest(query, nearby)
        if seq != self._suggestion_seq:
            logger.debug("Dropping stale suggestions for %r (seq %d < %d)", query, seq, self._suggestion_seq)
            return
        self._suggestions = results
        self._loading_suggestions = False
        self._publish()

    # --- planning ----------------------------------------------------------

    async def submit_plan(self) -> PlannedRoute | None:
        """Plan a route for the current origin/destination.

        Ignored when a field is empty or a plan is already in flight.
        """
        if not self._origin or not self._destination or self._planning:
            return None

        self._planning = True
        self._plan = None
        self._error = None
        self._publish()

        use_location = self._origin == CURRENT_LOCATION
        start = self._origin
        if use_location and self._user_location is not None:
            start = MY_CURRENT_LOCATION

        try:
            self._plan = await self.planner.plan_route(
                start,
                self._destination,
                self._user_location if use_location else None,
            )
            self._destination_location = self.resolver.resolve(self._destination)
        except Exception:
            logger.exception("Trip planning failed")
            self._error = PLAN_FAILED
        finally:
            self._planning = False
            self._publish()

        return self._plan

    async def close(self) -> None:
        """Cancel the pending timer and any in-flight suggestion requests."""
        self._cancel_debounce()
        pending = list(self._inflight)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
