import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from gpxclimb.config import LOG_FORMAT, LOG_LEVEL_ENV, log_level_value
from gpxclimb.exceptions import TrackLogError
from gpxclimb.gpx_parser import GPXParser
from gpxclimb.profile import TrackLogProfile
from gpxclimb.services.report_service import format_report

logger = logging.getLogger("gpxclimb")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpxclimb",
        description=(
            "Print distance, ascent and climbing difficulty for every track "
            "segment of a GPX file."
        ),
        epilog=f"Set {LOG_LEVEL_ENV}=DEBUG for diagnostic output on stderr.",
    )
    parser.add_argument("gpx_file", type=Path, help="Path to the input GPX file.")
    return parser


def setup_logging(level_str: Optional[str]) -> None:
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.handlers[:] = [handler]
    logger.setLevel(log_level_value(level_str))
    logger.propagate = False


def run(gpx_file: Path) -> List[str]:
    tracks = GPXParser(gpx_file).parse_tracks()
    profile = TrackLogProfile(tracks)
    lines = format_report(profile.segment_reports())
    logger.info("Processed %s: %d segments", gpx_file, len(lines))
    return lines


def main(argv: Optional[List[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    setup_logging(os.environ.get(LOG_LEVEL_ENV))

    try:
        lines = run(args.gpx_file)
    except OSError as exc:
        logger.error(str(exc))
        sys.exit(1)
    except TrackLogError as exc:
        logger.error(f"{args.gpx_file}: {exc}")
        sys.exit(1)

    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
