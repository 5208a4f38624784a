class TrackLogError(ValueError):
    """Base class for errors raised while reading a GPX track log."""


class GPXParseError(TrackLogError):
    """The input is not a well-formed XML/GPX document."""


class GPXSchemaError(TrackLogError):
    """A track point is missing a coordinate or carries a non-numeric value."""
