from typing import Sequence, Tuple

from .geodesy import pair_geometry
from .models import GeoPoint, PairGeometry, SegmentStats


def _pair_contribution(geometry: PairGeometry) -> Tuple[float, float, float]:
    distance = geometry.horizontal_distance_m
    if geometry.slope_pct <= 0:
        return distance, 0.0, 0.0
    # km weighted by squared grade
    score = distance / 1000.0 * geometry.slope_pct ** 2
    return distance, geometry.vertical_delta_m, score


def aggregate_segment(points: Sequence[GeoPoint]) -> SegmentStats:
    """Fold consecutive pairs of an already reduced segment into SegmentStats.

    Distance accumulates for every pair. Ascent and climb score only grow on
    uphill pairs (positive slope).
    """
    total_distance = total_ascent = total_score = 0.0
    for a, b in zip(points, points[1:]):
        distance, ascent, score = _pair_contribution(pair_geometry(a, b))
        total_distance += distance
        total_ascent += ascent
        total_score += score
    return SegmentStats(
        total_distance_m=total_distance,
        total_ascent_m=total_ascent,
        climb_score=total_score,
    )
