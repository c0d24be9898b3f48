"""Trip planning and place autocomplete endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from app.core.reasoning import ConfigurationError
from app.core.trip_session import PLAN_FAILED
from app.schemas.trip import PlannedRoute, PlanRequest
from app.schemas.vehicle import Coordinate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/trips", tags=["trips"])

# Will be set by main.py
suggestion_client = None
planner = None


@router.get("/suggestions", response_model=list[str])
async def suggest_places(q: str, lat: float | None = None, lon: float | None = None):
    """Autocomplete a place name. Failures yield an empty list."""
    if suggestion_client is None:
        return []
    nearby = Coordinate(lat=lat, lon=lon) if lat is not None and lon is not None else None
    return await suggestion_client.suggest(q, nearby)


@router.post("/plan", response_model=PlannedRoute)
async def plan_trip(request: PlanRequest):
    """Plan a transit itinerary between two places."""
    if planner is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    try:
        return await planner.plan_route(request.origin, request.destination, request.user_location)
    except ConfigurationError:
        logger.error("Route planning requested but no Gemini API key is configured")
        raise HTTPException(status_code=503, detail=PLAN_FAILED)
