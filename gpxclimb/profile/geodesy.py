import math

from geopy.distance import geodesic

from .models import GeoPoint, PairGeometry


def horizontal_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """
    Compute the WGS-84 ellipsoidal distance between two points in meters.

    Elevation is ignored; the result is never negative.
    """
    return geodesic(a.location, b.location).meters


def pair_geometry(a: GeoPoint, b: GeoPoint) -> PairGeometry:
    """
    Compute distance, vertical delta, run and slope for the pair (a, b).

    Parameters
    ----------
    a, b : GeoPoint
        Consecutive points, in travel order.

    Returns
    -------
    PairGeometry
        The surface distance is treated as the slant length, so the run is
        ``sqrt(d**2 - dz**2)`` clamped at 0. Slope is 0 whenever the run is 0.
    """
    distance = horizontal_distance_m(a, b)
    delta = b.elevation - a.elevation
    run = math.sqrt(max(distance * distance - delta * delta, 0.0))
    slope_pct = 0.0 if run == 0 else delta / run * 100.0
    return PairGeometry(
        horizontal_distance_m=distance,
        vertical_delta_m=delta,
        slope_run_m=run,
        slope_pct=slope_pct,
    )
