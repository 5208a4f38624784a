import io
import logging
import os
import xml.etree.ElementTree as ET
from typing import Iterator, List, Optional

import gpxpy
import gpxpy.gpx
import pandas as pd

from gpxclimb.config import DEFAULT_ELEVATION_M
from gpxclimb.exceptions import GPXParseError, GPXSchemaError
from gpxclimb.profile.models import GeoPoint, Segment, Track

logger = logging.getLogger(__name__)


def _local_name(name: str) -> str:
    return name.rsplit("}", 1)[-1]


def _strip_namespaces(root: ET.Element) -> None:
    """Rename every element and attribute to its local name, in place."""
    for element in root.iter():
        element.tag = _local_name(element.tag)
        for key in [k for k in element.attrib if "}" in k]:
            element.set(_local_name(key), element.attrib.pop(key))


def _children(element: ET.Element, tag: str) -> Iterator[ET.Element]:
    return (child for child in element if child.tag == tag)


def _check_number(value: Optional[str], field: str, where: str) -> None:
    if value is None:
        raise GPXSchemaError(f"{where}: missing '{field}'")
    try:
        float(value)
    except ValueError:
        raise GPXSchemaError(f"{where}: '{field}' is not a number: {value!r}") from None


class GPXParser:
    """Parse GPX data into tracks, segments and points."""

    def __init__(self, gpx_source):
        """
        Initialize the GPX parser.

        Parameters
        ----------
        gpx_source : str | os.PathLike | bytes | file-like object
            The GPX data source, which can be:
            - A file path to a GPX file (str or pathlib.Path)
            - GPX file content as bytes
            - A file-like object opened in binary or text mode
        """
        self.gpx_source = gpx_source
        self.tracks = None

    def _read_source(self):
        """
        Load the raw GPX document from the configured source.

        Bytes are returned undecoded so the XML declaration picks the encoding.

        Raises
        ------
        OSError
            If the file cannot be opened or read.
        ValueError
            If the GPX source type is unsupported.
        """
        if isinstance(self.gpx_source, (bytes, bytearray)):
            return bytes(self.gpx_source)
        if hasattr(self.gpx_source, "read"):  # File-like object
            return self.gpx_source.read()
        if isinstance(self.gpx_source, (str, os.PathLike)):  # File path
            with open(self.gpx_source, "rb") as f:
                return f.read()
        raise ValueError("Unsupported GPX source type.")

    @staticmethod
    def _load_tree(content) -> ET.Element:
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise GPXParseError(f"Malformed GPX document: {e}") from e
        _strip_namespaces(root)
        return root

    @staticmethod
    def _validate_points(root: ET.Element) -> None:
        """
        Check coordinates and elevations of every track point.

        ``lat`` and ``lon`` are required. ``ele`` may be absent, but when present
        its text must be a number; empty text is rejected.
        """
        for track_no, trk in enumerate(_children(root, "trk"), start=1):
            for segment_no, seg in enumerate(_children(trk, "trkseg"), start=1):
                for point_no, pt in enumerate(_children(seg, "trkpt"), start=1):
                    where = (
                        f"track #{track_no}, segment #{segment_no}, point #{point_no}"
                    )
                    _check_number(pt.get("lat"), "lat", where)
                    _check_number(pt.get("lon"), "lon", where)
                    ele = pt.find("ele")
                    if ele is not None:
                        _check_number(ele.text or "", "ele", where)

    @staticmethod
    def _track_names(root: ET.Element) -> List[Optional[str]]:
        # gpxpy turns <name></name> into None; an empty name is still a name
        names = []
        for trk in _children(root, "trk"):
            name = trk.find("name")
            names.append(None if name is None else "".join(name.itertext()))
        return names

    @staticmethod
    def _to_geo_point(point: gpxpy.gpx.GPXTrackPoint) -> GeoPoint:
        elevation = point.elevation
        if elevation is None:
            elevation = DEFAULT_ELEVATION_M
        return GeoPoint(point.latitude, point.longitude, elevation)

    def parse_tracks(self) -> List[Track]:
        """
        Parse the GPX data into Track values.

        Elements are matched by local name, so any namespace or prefix on
        ``trk``, ``trkseg``, ``trkpt``, ``name`` and ``ele`` is accepted.

        Returns
        -------
        list[Track]
            Tracks in document order. Empty tracks and segments are kept.

        Raises
        ------
        OSError
            If the source file cannot be read.
        GPXParseError
            If the document is not well-formed XML.
        GPXSchemaError
            If a track point lacks ``lat``/``lon`` or a numeric value is invalid.
        """
        root = self._load_tree(self._read_source())
        self._validate_points(root)
        names = self._track_names(root)

        try:
            gpx = gpxpy.parse(io.StringIO(ET.tostring(root, encoding="unicode")))
        except gpxpy.gpx.GPXXMLSyntaxException as e:
            raise GPXParseError(f"Malformed GPX document: {e}") from e
        except (gpxpy.gpx.GPXException, ValueError) as e:
            raise GPXSchemaError(f"Invalid track point: {e}") from e

        tracks = []
        for track, name in zip(gpx.tracks, names):
            segments = tuple(
                Segment(tuple(self._to_geo_point(p) for p in segment.points))
                for segment in track.segments
            )
            tracks.append(Track(name=name, segments=segments))

        logger.debug(
            "Parsed %d tracks with %d segments",
            len(tracks),
            sum(len(t.segments) for t in tracks),
        )
        self.tracks = tracks
        return tracks

    def parse_to_dataframe(self) -> pd.DataFrame:
        """
        Parse the GPX data into a flat pandas DataFrame of points.

        Returns
        -------
        pd.DataFrame
            A DataFrame with the following columns:
            - 'track_no': 1-based track number
            - 'track_name': display name of the track
            - 'segment_no': 1-based segment number within the track
            - 'latitude', 'longitude': coordinates in degrees
            - 'elevation': elevation in meters (0 when absent)
        """
        tracks = self.tracks if self.tracks is not None else self.parse_tracks()

        point_data = []
        for track_no, track in enumerate(tracks, start=1):
            for segment_no, segment in enumerate(track.segments, start=1):
                for point in segment.points:
                    point_data.append(
                        [
                            track_no,
                            track.display_name,
                            segment_no,
                            point.latitude,
                            point.longitude,
                            point.elevation,
                        ]
                    )

        return pd.DataFrame(
            point_data,
            columns=[
                "track_no",
                "track_name",
                "segment_no",
                "latitude",
                "longitude",
                "elevation",
            ],
        )
