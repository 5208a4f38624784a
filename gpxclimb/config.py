import logging

UNNAMED_TRACK = "[unnamed]"
DEFAULT_ELEVATION_M = 0.0

REPORT_LINE_TEMPLATE = (
    "Track #{track_no} ({track_name}), segment #{segment_no}: "
    "{climb_score:.3f} (distance: {distance_km:.3f}km, ascend: {ascent_m:.0f}m)"
)

LOG_LEVEL_ENV = "GPXCLIMB_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s: %(message)s"

_KNOWN_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_log_level(level_str) -> str:
    """
    Validates the log level name taken from the environment.
    Anything empty or unknown falls back to DEFAULT_LOG_LEVEL.
    """
    try:
        level = level_str.strip().upper()
    except AttributeError:
        return DEFAULT_LOG_LEVEL
    if level not in _KNOWN_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level


def log_level_value(level_str) -> int:
    return getattr(logging, validate_log_level(level_str))
