from itertools import groupby
from operator import attrgetter
from typing import Iterable, List

import numpy as np

from .models import GeoPoint

_location = attrgetter("location")


def reduce_points(points: Iterable[GeoPoint]) -> List[GeoPoint]:
    """Collapse runs of consecutive points sharing the same location.

    Each run becomes one point at that location whose elevation is the mean
    of the run's elevations. Latitude and longitude must match exactly; order
    of first occurrence is preserved.
    """
    reduced: List[GeoPoint] = []
    for (latitude, longitude), run in groupby(points, key=_location):
        elevation = float(np.mean([p.elevation for p in run]))
        reduced.append(GeoPoint(latitude, longitude, elevation))
    return reduced
