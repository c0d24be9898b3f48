"""Transit itinerary planning backed by the reasoning service."""

import logging

from app.core.reasoning import ConfigurationError, ReasoningService
from app.core.response_parser import (
    detect_hazards,
    extract_text,
    grounding_urls,
    parse_steps,
)
from app.schemas.trip import PlannedRoute, RouteStep, StepKind
from app.schemas.vehicle import Coordinate

logger = logging.getLogger(__name__)

TOTAL_DURATION_PLACEHOLDER = "See details"

_PROMPT = """
I am in Franklin County, Massachusetts.
I need to go from {origin} to {destination}.
{coordinates}

Please provide a route plan using ONLY public transit (FRTA buses, Amtrak Vermonter/Valley Flyer) or walking.

Focus on:
1. Real-world bus route numbers (e.g., FRTA Route 31, 41).
2. Amtrak schedules if relevant.
3. Any potential delays or hazards typically found on this route (use Google Maps data).
4. Estimated time.

Format the output as a clear, numbered step-by-step guide.
Also, list any grounding links (Sources) you find explicitly.
"""


def build_prompt(origin: str, destination: str, user_location: Coordinate | None = None) -> str:
    coordinates = ""
    if user_location is not None:
        coordinates = f"My current coordinates are {user_location.lat}, {user_location.lon}."
    return _PROMPT.format(origin=origin, destination=destination, coordinates=coordinates)


def failed_route() -> PlannedRoute:
    """Degraded plan shown when the service could not be reached."""
    return PlannedRoute(
        summary="Error planning route",
        steps=[RouteStep(
            instruction="Could not connect to route planner. Please try again.",
            kind=StepKind.WAIT,
        )],
        hazards=["Connection Error"],
        total_duration="--",
        grounding_urls=[],
    )


def route_from_response(response, destination: str) -> PlannedRoute:
    text = extract_text(response).text

    steps = parse_steps(text)
    if not steps:
        # Model ignored the numbered format; show the whole answer as one step
        steps = [RouteStep(instruction=text, kind=StepKind.WAIT)]

    return PlannedRoute(
        summary=f"Route to {destination}",
        steps=steps,
        hazards=detect_hazards(text),
        total_duration=TOTAL_DURATION_PLACEHOLDER,
        grounding_urls=grounding_urls(response),
    )


class RoutePlanningClient:
    """Asks the reasoning service for a transit itinerary and structures it."""

    def __init__(self, service: ReasoningService) -> None:
        self.service = service

    async def plan_route(
        self,
        origin: str,
        destination: str,
        user_location: Coordinate | None = None,
    ) -> PlannedRoute:
        """Plan a trip. Only a missing credential raises (ConfigurationError)."""
        if not self.service.configured:
            raise ConfigurationError("Gemini API key missing")

        try:
            response = await self.service.generate(
                build_prompt(origin, destination, user_location),
                location=user_location,
            )
            route = route_from_response(response, destination)
        except Exception:
            logger.exception("Route planning failed: %s -> %s", origin, destination)
            return failed_route()

        logger.info(
            "Planned route to %s: %d steps, %d sources",
            destination, len(route.steps), len(route.grounding_urls),
        )
        return route
