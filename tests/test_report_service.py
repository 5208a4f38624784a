from gpxclimb.profile.models import SegmentReport, SegmentStats
from gpxclimb.services.report_service import format_report, format_segment_line


def test_format_segment_line():
    report = SegmentReport(
        track_no=1,
        track_name="Morning ride",
        segment_no=2,
        num_points=10,
        num_reduced_points=9,
        stats=SegmentStats(
            total_distance_m=12345.6, total_ascent_m=321.4, climb_score=1234.56789
        ),
    )
    assert format_segment_line(report) == (
        "Track #1 (Morning ride), segment #2: 1234.568 "
        "(distance: 12.346km, ascend: 321m)"
    )


def test_format_empty_segment():
    report = SegmentReport(3, "[unnamed]", 1, 0, 0)
    assert format_segment_line(report) == (
        "Track #3 ([unnamed]), segment #1: 0.000 (distance: 0.000km, ascend: 0m)"
    )


def test_format_report_keeps_order():
    reports = [SegmentReport(1, "A", n, 0, 0) for n in (1, 2, 3)]
    lines = format_report(reports)
    assert [line.split(":")[0] for line in lines] == [
        "Track #1 (A), segment #1",
        "Track #1 (A), segment #2",
        "Track #1 (A), segment #3",
    ]
