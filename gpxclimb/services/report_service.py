from typing import Iterable, List

from gpxclimb.config import REPORT_LINE_TEMPLATE
from gpxclimb.profile import SegmentReport


def format_segment_line(report: SegmentReport) -> str:
    return REPORT_LINE_TEMPLATE.format(
        track_no=report.track_no,
        track_name=report.track_name,
        segment_no=report.segment_no,
        climb_score=report.stats.climb_score,
        distance_km=report.stats.distance_km,
        ascent_m=report.stats.total_ascent_m,
    )


def format_report(reports: Iterable[SegmentReport]) -> List[str]:
    return [format_segment_line(r) for r in reports]

