from dataclasses import dataclass, field
from typing import Optional, Tuple

from gpxclimb.config import DEFAULT_ELEVATION_M, UNNAMED_TRACK


@dataclass(frozen=True)
class GeoPoint:
    """A single track point: degrees for latitude/longitude, meters for elevation."""

    latitude: float
    longitude: float
    elevation: float = DEFAULT_ELEVATION_M

    @property
    def location(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Segment:
    points: Tuple[GeoPoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class Track:
    name: Optional[str] = None
    segments: Tuple[Segment, ...] = ()

    @property
    def display_name(self) -> str:
        return self.name if self.name is not None else UNNAMED_TRACK


@dataclass(frozen=True)
class PairGeometry:
    """Geometry of one consecutive point pair.

    Attributes
    ----------
    horizontal_distance_m : float
        Ellipsoidal surface distance, elevation ignored.
    vertical_delta_m : float
        Elevation of the second point minus the first.
    slope_run_m : float
        Horizontal leg when the surface distance is taken as the slant length.
    slope_pct : float
        Rise over run in percent, 0 when the run is 0.
    """

    horizontal_distance_m: float
    vertical_delta_m: float
    slope_run_m: float
    slope_pct: float


@dataclass(frozen=True)
class SegmentStats:
    total_distance_m: float = 0.0
    total_ascent_m: float = 0.0
    climb_score: float = 0.0

    @property
    def distance_km(self) -> float:
        return self.total_distance_m / 1000.0


@dataclass(frozen=True)
class SegmentReport:
    track_no: int
    track_name: str
    segment_no: int
    num_points: int
    num_reduced_points: int
    stats: SegmentStats = field(default_factory=SegmentStats)

    @property
    def merged_points(self) -> int:
        return self.num_points - self.num_reduced_points
