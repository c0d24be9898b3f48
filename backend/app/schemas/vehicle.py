from enum import Enum

from pydantic import BaseModel, ConfigDict


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class VehicleKind(str, Enum):
    BUS = "bus"
    TRAIN = "train"


class VehicleStatus(str, Enum):
    ON_TIME = "On Time"
    DELAYED = "Delayed"
    EARLY = "Early"


class Vehicle(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    kind: VehicleKind
    route: str
    position: Coordinate
    heading: float  # degrees, [0, 360)
    status: VehicleStatus
    next_stop: str
    color: str

