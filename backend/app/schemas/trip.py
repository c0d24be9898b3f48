from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.vehicle import Coordinate


class StepKind(str, Enum):
    WALK = "walk"
    BUS = "bus"
    TRAIN = "train"
    WAIT = "wait"


class TripField(str, Enum):
    ORIGIN = "origin"
    DESTINATION = "destination"


class RouteStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    instruction: str
    kind: StepKind
    duration: str | None = None
    distance: str | None = None


class PlannedRoute(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str
    steps: list[RouteStep] = Field(min_length=1)
    hazards: list[str] = []
    total_duration: str
    grounding_urls: list[str] = []


class PlanRequest(BaseModel):
    origin: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    user_location: Coordinate | None = None


class TripState(BaseModel):
    """Snapshot of a trip session, published after every change."""

    model_config = ConfigDict(frozen=True)

    origin: str
    destination: str
    active_field: TripField | None = None
    suggestions: list[str] = []
    loading_suggestions: bool = False
    planning: bool = False
    plan: PlannedRoute | None = None
    error: str | None = None
    user_location: Coordinate | None = None
    destination_location: Coordinate | None = None
