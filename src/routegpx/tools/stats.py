"""Distance and climbing totals for a track."""

from typing import Sequence

from routegpx.models import GeoPoint, RouteStats
from routegpx.utils.geo import haversine_distance, round_meters


def compute_stats(points: Sequence[GeoPoint]) -> RouteStats:
    """
    Total great-circle distance and elevation gain over consecutive points.

    Only climbs count towards the gain, and a pair where either point has
    no elevation adds nothing. NaN coordinates make the distance NaN.
    """
    distance_m = 0.0
    elevation_gain_m = 0.0

    for prev, curr in zip(points, points[1:]):
        distance_m += haversine_distance(prev.lat, prev.lng, curr.lat, curr.lng)

        if curr.ele is not None and prev.ele is not None:
            climb = curr.ele - prev.ele
            if climb > 0:
                elevation_gain_m += climb

    return RouteStats(
        distance_m=round_meters(distance_m),
        elevation_gain_m=round_meters(elevation_gain_m),
    )
