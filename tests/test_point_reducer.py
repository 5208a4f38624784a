import pytest

from gpxclimb.profile.models import GeoPoint
from gpxclimb.profile.point_reducer import reduce_points


@pytest.fixture
def track_with_pauses():
    """Route with a stop at the start and at the end."""
    return [
        GeoPoint(50.0, 19.9, 200.0),
        GeoPoint(50.0, 19.9, 202.0),
        GeoPoint(50.001, 19.91, 210.0),
        GeoPoint(50.002, 19.92, 220.0),
        GeoPoint(50.002, 19.92, 224.0),
        GeoPoint(50.002, 19.92, 222.0),
    ]


def test_empty_input():
    assert reduce_points([]) == []


def test_single_point():
    point = GeoPoint(50.0, 19.9, 123.0)
    assert reduce_points([point]) == [point]


def test_duplicate_points_merged_to_mean():
    points = [
        GeoPoint(50.0, 19.9, 100.0),
        GeoPoint(50.0, 19.9, 120.0),
        GeoPoint(50.0, 19.9, 110.0),
    ]
    assert reduce_points(points) == [GeoPoint(50.0, 19.9, 110.0)]


def test_order_and_runs_preserved(track_with_pauses):
    result = reduce_points(track_with_pauses)

    assert [p.location for p in result] == [
        (50.0, 19.9),
        (50.001, 19.91),
        (50.002, 19.92),
    ]
    assert [p.elevation for p in result] == [201.0, 210.0, 222.0]


def test_non_adjacent_duplicates_not_merged():
    """Returning to the same spot later is a new point."""
    points = [
        GeoPoint(50.0, 19.9, 100.0),
        GeoPoint(50.001, 19.91, 110.0),
        GeoPoint(50.0, 19.9, 120.0),
    ]
    assert reduce_points(points) == points


def test_elevation_not_part_of_key():
    points = [GeoPoint(50.0, 19.9, 100.0), GeoPoint(50.0, 19.9, 300.0)]
    assert len(reduce_points(points)) == 1


def test_reduction_is_idempotent(track_with_pauses):
    once = reduce_points(track_with_pauses)
    assert reduce_points(once) == once


def test_length_bounds(track_with_pauses):
    assert len(reduce_points(track_with_pauses)) <= len(track_with_pauses)

    distinct = [GeoPoint(50.0 + i * 0.001, 19.9, 100.0) for i in range(5)]
    assert len(reduce_points(distinct)) == len(distinct)
