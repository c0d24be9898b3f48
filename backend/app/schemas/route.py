from pydantic import BaseModel

from app.schemas.vehicle import Coordinate, VehicleKind


class StationInfo(BaseModel):
    id: str
    name: str
    kind: str  # "amtrak" | "bus_stop"
    location: Coordinate


class RouteInfo(BaseModel):
    id: str
    name: str
    kind: VehicleKind
    color: str
    geometry: list[list[float]]  # [[lat, lon], ...]
