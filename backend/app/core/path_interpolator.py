"""Linear interpolation of a position along an ordered waypoint path."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from app.schemas.vehicle import Coordinate


@dataclass(frozen=True)
class SegmentPosition:
    index: int  # start waypoint of the segment being travelled
    next_index: int
    fraction: float  # 0.0–1.0 within the segment


def locate(path: Sequence[Coordinate], progress: float) -> SegmentPosition:
    """Find the segment and local fraction for a loop progress in [0, 1)."""
    if len(path) < 2:
        raise ValueError(f"Path needs at least 2 points, got {len(path)}")

    segments = len(path) - 1
    scaled = progress * segments
    index = min(max(math.floor(scaled), 0), segments - 1)
    return SegmentPosition(
        index=index,
        next_index=(index + 1) % len(path),
        fraction=scaled - index,
    )


def interpolate(path: Sequence[Coordinate], progress: float) -> Coordinate:
    """Return the coordinate at `progress` of one traversal of `path`.

    Flat-plane lerp, no spherical correction: the network spans a few tens
    of kilometres.
    """
    seg = locate(path, progress)
    start, end = path[seg.index], path[seg.next_index]
    return Coordinate(
        lat=start.lat + (end.lat - start.lat) * seg.fraction,
        lon=start.lon + (end.lon - start.lon) * seg.fraction,
    )


def bearing(start: Coordinate, end: Coordinate) -> float:
    """Flat-plane bearing from start to end in degrees, [0, 360)."""
    heading = math.degrees(math.atan2(end.lon - start.lon, end.lat - start.lat)) % 360.0
    if heading >= 360.0:
        heading = 0.0
    return heading
