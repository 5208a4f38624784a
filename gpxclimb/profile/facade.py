import logging
from typing import List, Optional, Sequence

import pandas as pd

from .models import SegmentReport, Track
from .point_reducer import reduce_points
from .segment_aggregator import aggregate_segment

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "track_no",
    "track_name",
    "segment_no",
    "num_points",
    "num_reduced_points",
    "merged_points",
    "distance_km",
    "ascent_m",
    "climb_score",
]


class TrackLogProfile:
    """High-level API over a parsed track log.

    Runs point reduction and segment aggregation for every (track, segment)
    pair, in document order.

    Parameters
    ----------
    tracks : Sequence[Track]
        Tracks as returned by ``GPXParser.parse_tracks``.
    """

    def __init__(self, tracks: Sequence[Track]) -> None:
        self.tracks = tuple(tracks)
        self._reports: Optional[List[SegmentReport]] = None

    def _build_reports(self) -> List[SegmentReport]:
        reports: List[SegmentReport] = []
        for track_no, track in enumerate(self.tracks, start=1):
            for segment_no, segment in enumerate(track.segments, start=1):
                reduced = reduce_points(segment.points)
                report = SegmentReport(
                    track_no=track_no,
                    track_name=track.display_name,
                    segment_no=segment_no,
                    num_points=len(segment.points),
                    num_reduced_points=len(reduced),
                    stats=aggregate_segment(reduced),
                )
                logger.debug(
                    "Track #%d segment #%d: %d points, %d merged, %.1f m, +%.1f m, score %.3f",
                    track_no,
                    segment_no,
                    report.num_points,
                    report.merged_points,
                    report.stats.total_distance_m,
                    report.stats.total_ascent_m,
                    report.stats.climb_score,
                )
                reports.append(report)
        logger.debug("Computed stats for %d segments", len(reports))
        return reports

    # ---------- Stats ----------
    def segment_reports(self) -> List[SegmentReport]:
        if self._reports is None:
            self._reports = self._build_reports()
        return list(self._reports)

    def summary(self) -> pd.DataFrame:
        rows = [
            [
                r.track_no,
                r.track_name,
                r.segment_no,
                r.num_points,
                r.num_reduced_points,
                r.merged_points,
                r.stats.distance_km,
                r.stats.total_ascent_m,
                r.stats.climb_score,
            ]
            for r in self.segment_reports()
        ]
        return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)

    def totals(self) -> dict[str, float | int]:
        df = self.summary()
        return {
            "num_segments": len(df),
            "distance_km": float(df["distance_km"].sum()),
            "ascent_m": float(df["ascent_m"].sum()),
            "climb_score": float(df["climb_score"].sum()),
        }
