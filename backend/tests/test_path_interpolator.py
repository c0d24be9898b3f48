"""Tests for path interpolation."""

import pytest

from app.core.path_interpolator import bearing, interpolate, locate
from app.schemas.vehicle import Coordinate

PATH = [
    Coordinate(lat=42.65, lon=-72.58),
    Coordinate(lat=42.5879, lon=-72.5995),
    Coordinate(lat=42.3195, lon=-72.6298),
    Coordinate(lat=42.20, lon=-72.63),
]


def test_start_of_loop_is_first_point():
    assert interpolate(PATH, 0.0) == PATH[0]


def test_midpoint_of_two_point_path():
    path = [Coordinate(lat=0.0, lon=0.0), Coordinate(lat=2.0, lon=4.0)]
    mid = interpolate(path, 0.5)
    assert mid.lat == pytest.approx(1.0)
    assert mid.lon == pytest.approx(2.0)


def test_segment_boundaries():
    # 3 segments: progress 1/3 lands on the second waypoint
    seg = locate(PATH, 1 / 3)
    assert seg.index == 1
    assert seg.fraction == pytest.approx(0.0)
    assert seg.next_index == 2


def test_last_segment_is_clamped():
    seg = locate(PATH, 0.999)
    assert seg.index == len(PATH) - 2
    assert seg.next_index == len(PATH) - 1
    assert 0.99 < seg.fraction < 1.0


def test_points_lie_on_their_segment():
    for i in range(100):
        progress = i / 100
        point = interpolate(PATH, progress)
        seg = locate(PATH, progress)
        a, b = PATH[seg.index], PATH[seg.next_index]

        cross = (b.lat - a.lat) * (point.lon - a.lon) - (b.lon - a.lon) * (point.lat - a.lat)
        assert cross == pytest.approx(0.0, abs=1e-9)
        assert min(a.lat, b.lat) - 1e-9 <= point.lat <= max(a.lat, b.lat) + 1e-9
        assert min(a.lon, b.lon) - 1e-9 <= point.lon <= max(a.lon, b.lon) + 1e-9


def test_single_point_path_rejected():
    with pytest.raises(ValueError):
        interpolate([Coordinate(lat=42.0, lon=-72.0)], 0.5)


def test_bearing_cardinal_directions():
    origin = Coordinate(lat=0.0, lon=0.0)
    assert bearing(origin, Coordinate(lat=1.0, lon=0.0)) == pytest.approx(0.0)
    assert bearing(origin, Coordinate(lat=0.0, lon=1.0)) == pytest.approx(90.0)
    assert bearing(origin, Coordinate(lat=-1.0, lon=0.0)) == pytest.approx(180.0)
    assert bearing(origin, Coordinate(lat=0.0, lon=-1.0)) == pytest.approx(270.0)
