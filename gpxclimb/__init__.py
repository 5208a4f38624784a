from .exceptions import GPXParseError, GPXSchemaError, TrackLogError
from .gpx_parser import GPXParser
from .profile import TrackLogProfile

__all__ = [
    "GPXParser",
    "GPXParseError",
    "GPXSchemaError",
    "TrackLogError",
    "TrackLogProfile",
]

__version__ = "0.1.0"
