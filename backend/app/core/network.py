"""Static description of the Franklin County network: stations, paths, simulated fleet."""

from app.core.simulation import SimulatedVehicle
from app.schemas.route import RouteInfo, StationInfo
from app.schemas.vehicle import Coordinate, VehicleKind

# Near Greenfield, MA
CENTER_OF_MAP = Coordinate(lat=42.5879, lon=-72.6014)

STATIONS: list[StationInfo] = [
    StationInfo(
        id="gfd-amtrak",
        name="Greenfield John W. Olver Transit Center",
        kind="amtrak",
        location=Coordinate(lat=42.5879, lon=-72.5995),
    ),
    StationInfo(
        id="nht-amtrak",
        name="Northampton Station",
        kind="amtrak",
        location=Coordinate(lat=42.3195, lon=-72.6298),
    ),
    StationInfo(
        id="bus-stop-1",
        name="Main St & Federal St",
        kind="bus_stop",
        location=Coordinate(lat=42.5890, lon=-72.6000),
    ),
    StationInfo(
        id="bus-stop-2",
        name="GCC Main Entrance",
        kind="bus_stop",
        location=Coordinate(lat=42.5950, lon=-72.6200),
    ),
    StationInfo(
        id="bus-stop-3",
        name="Baystate Franklin Medical",
        kind="bus_stop",
        location=Coordinate(lat=42.5920, lon=-72.6050),
    ),
]

VERMONTER_PATH: tuple[Coordinate, ...] = (
    Coordinate(lat=42.6500, lon=-72.5800),  # north
    Coordinate(lat=42.5879, lon=-72.5995),  # Greenfield
    Coordinate(lat=42.3195, lon=-72.6298),  # Northampton
    Coordinate(lat=42.2000, lon=-72.6300),  # south
)

BUS_ROUTE_31_PATH: tuple[Coordinate, ...] = (
    Coordinate(lat=42.5879, lon=-72.5995),  # transit center
    Coordinate(lat=42.5920, lon=-72.6050),
    Coordinate(lat=42.5950, lon=-72.6200),
    Coordinate(lat=42.6000, lon=-72.6100),  # loop back
    Coordinate(lat=42.5890, lon=-72.6000),
)

FLEET: list[SimulatedVehicle] = [
    SimulatedVehicle(
        id="train-1",
        kind=VehicleKind.TRAIN,
        route="Vermonter",
        path=VERMONTER_PATH,
        cycle_ticks=400,
        next_stop="Northampton",
        color="#60A5FA",
        delay_probability=0.05,
    ),
    SimulatedVehicle(
        id="bus-31",
        kind=VehicleKind.BUS,
        route="FRTA 31",
        path=BUS_ROUTE_31_PATH,
        cycle_ticks=400,
        phase_multiplier=2.0,
        next_stop="Main St",
        color="#34D399",
    ),
]


def route_infos() -> list[RouteInfo]:
    """Polylines for the map, one per simulated route."""
    return [
        RouteInfo(
            id=v.id,
            name=v.route,
            kind=v.kind,
            color=v.color,
            geometry=[[c.lat, c.lon] for c in v.path],
        )
        for v in FLEET
    ]
