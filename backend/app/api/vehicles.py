"""Vehicle REST API endpoints."""

from fastapi import APIRouter

from app.schemas.vehicle import Vehicle, VehicleKind

router = APIRouter(prefix="/api/vehicles", tags=["vehicles"])

# Will be set by main.py
clock = None


@router.get("", response_model=list[Vehicle])
async def list_vehicles(kind: VehicleKind | None = None):
    """Get the latest simulated vehicle snapshot."""
    if clock is None:
        return []
    vehicles = list(clock.current_vehicles)
    if kind:
        vehicles = [v for v in vehicles if v.kind == kind]
    return vehicles


@router.get("/{vehicle_id}", response_model=Vehicle | None)
async def get_vehicle(vehicle_id: str):
    """Get a specific vehicle by ID."""
    if clock is None:
        return None
    for v in clock.current_vehicles:
        if v.id == vehicle_id:
            return v
    return None
