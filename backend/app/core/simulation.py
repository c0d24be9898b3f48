"""Deterministic vehicle-motion simulator driven by a fixed-period tick."""

import itertools
import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from apscheduler.jobstores.base import JobLookupError

from app.core.path_interpolator import bearing, interpolate, locate
from app.schemas.vehicle import Coordinate, Vehicle, VehicleKind, VehicleStatus

logger = logging.getLogger(__name__)

_session_ids = itertools.count(1)


@dataclass(frozen=True)
class SimulatedVehicle:
    """Static configuration for one simulated vehicle."""

    id: str
    kind: VehicleKind
    route: str
    path: tuple[Coordinate, ...]
    cycle_ticks: int  # ticks per full loop
    next_stop: str
    color: str
    phase_multiplier: float = 1.0  # loops completed per clock cycle
    delay_probability: float = 0.0

    def progress_at(self, tick: int) -> float:
        progress = (tick % self.cycle_ticks) / self.cycle_ticks
        if self.phase_multiplier != 1.0:
            progress = (progress * self.phase_multiplier) % 1.0
        return progress


class DelayStatusPolicy:
    """Reports a vehicle as delayed with its configured probability.

    Non-deterministic unless a fixed `source` is supplied.
    """

    def __init__(self, source: Callable[[], float] = random.random) -> None:
        self._source = source

    def __call__(self, vehicle: SimulatedVehicle) -> VehicleStatus:
        if vehicle.delay_probability > 0 and self._source() < vehicle.delay_probability:
            return VehicleStatus.DELAYED
        return VehicleStatus.ON_TIME


class SimulationClock:
    """One simulation session: a tick counter plus the fleet it moves.

    Each tick rebuilds the whole vehicle list and replaces `current_vehicles`,
    so readers always see a complete snapshot.
    """

    def __init__(
        self,
        fleet: Sequence[SimulatedVehicle],
        publisher=None,
        status_policy: Callable[[SimulatedVehicle], VehicleStatus] | None = None,
        interval_seconds: float = 0.1,
    ) -> None:
        for cfg in fleet:
            if len(cfg.path) < 2:
                raise ValueError(f"Vehicle {cfg.id}: path needs at least 2 points")
            if cfg.cycle_ticks <= 0:
                raise ValueError(f"Vehicle {cfg.id}: cycle_ticks must be positive")

        self.session_id = next(_session_ids)
        self.fleet = tuple(fleet)
        self.publisher = publisher
        self.status_policy = status_policy or DelayStatusPolicy()
        self.interval_seconds = interval_seconds

        self.tick = 0
        self.current_vehicles: tuple[Vehicle, ...] = ()
        self._job = None

    @property
    def running(self) -> bool:
        return self._job is not None

    def snapshot_at(self, tick: int) -> list[Vehicle]:
        """Build the vehicle list for an arbitrary tick without touching state."""
        vehicles = []
        for cfg in self.fleet:
            progress = cfg.progress_at(tick)
            seg = locate(cfg.path, progress)
            vehicles.append(Vehicle(
                id=cfg.id,
                kind=cfg.kind,
                route=cfg.route,
                position=interpolate(cfg.path, progress),
                heading=bearing(cfg.path[seg.index], cfg.path[seg.next_index]),
                status=self.status_policy(cfg),
                next_stop=cfg.next_stop,
                color=cfg.color,
            ))
        return vehicles

    def advance(self) -> tuple[Vehicle, ...]:
        """Increment the tick counter and replace the current snapshot."""
        self.tick += 1
        self.current_vehicles = tuple(self.snapshot_at(self.tick))
        return self.current_vehicles

    async def run_tick(self) -> None:
        """Scheduler job: advance one tick and publish the result."""
        vehicles = self.advance()
        if self.publisher is None:
            return
        try:
            await self.publisher.publish([v.model_dump(mode="json") for v in vehicles])
        except Exception:
            logger.exception("Failed to publish simulation tick %d", self.tick)

    def start(self, scheduler) -> None:
        """Register the periodic tick on `scheduler`. No-op if already running."""
        if self._job is not None:
            return
        self._job = scheduler.add_job(
            self.run_tick,
            "interval",
            seconds=self.interval_seconds,
            id=f"simulation:{self.session_id}",
            name="Advance simulated vehicle positions",
            max_instances=1,
            coalesce=True,
        )
        logger.info(
            "Simulation %d started: %d vehicles every %.0fms",
            self.session_id, len(self.fleet), self.interval_seconds * 1000,
        )

    def stop(self) -> None:
        """Remove the periodic tick. No-op if not running."""
        if self._job is None:
            return
        job, self._job = self._job, None
        try:
            job.remove()
        except JobLookupError:
            logger.debug("Simulation %d job already gone", self.session_id)
        logger.info("Simulation %d stopped at tick %d", self.session_id, self.tick)
