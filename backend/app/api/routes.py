"""Static route and station endpoints for the map."""

from fastapi import APIRouter

from app.core import network
from app.schemas.route import RouteInfo, StationInfo

router = APIRouter(prefix="/api", tags=["network"])


@router.get("/routes", response_model=list[RouteInfo])
async def list_routes():
    """Get route polylines."""
    return network.route_infos()


@router.get("/stations", response_model=list[StationInfo])
async def list_stations():
    """Get station markers."""
    return network.STATIONS
