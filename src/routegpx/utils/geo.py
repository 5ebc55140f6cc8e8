"""Geospatial utility functions."""

from math import radians, sin, cos, sqrt, atan2, floor, isfinite
from typing import Sequence

EARTH_RADIUS_M = 6_371_000


def haversine_distance(
    lat1: float, lon1: float,
    lat2: float, lon2: float,
) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Args:
        lat1, lon1: First point coordinates in degrees
        lat2, lon2: Second point coordinates in degrees

    Returns:
        Distance in meters
    """
    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)

    a = sin(dlat/2)**2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon/2)**2
    c = 2 * atan2(sqrt(a), sqrt(1-a))

    return EARTH_RADIUS_M * c


def round_meters(value: float) -> int | float:
    """Round to the nearest whole meter, halves up. Non-finite values pass through."""
    if not isfinite(value):
        return value
    return floor(value + 0.5)


def calculate_total_distance(coordinates: Sequence[tuple[float, float]]) -> int | float:
    """
    Sum the great-circle distance along a line of coordinates.

    Args:
        coordinates: (longitude, latitude) pairs, map-library order

    Returns:
        Distance in whole meters
    """
    total = 0.0
    for (lon1, lat1), (lon2, lat2) in zip(coordinates, coordinates[1:]):
        total += haversine_distance(lat1, lon1, lat2, lon2)
    return round_meters(total)
