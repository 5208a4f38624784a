from .facade import TrackLogProfile
from .geodesy import horizontal_distance_m, pair_geometry
from .models import GeoPoint, PairGeometry, Segment, SegmentReport, SegmentStats, Track
from .point_reducer import reduce_points
from .segment_aggregator import aggregate_segment

__all__ = [
    "GeoPoint",
    "PairGeometry",
    "Segment",
    "SegmentReport",
    "SegmentStats",
    "Track",
    "TrackLogProfile",
    "aggregate_segment",
    "horizontal_distance_m",
    "pair_geometry",
    "reduce_points",
]
