"""Utility functions for GPX routes."""

from .gpx import create_route_gpx, import_route_gpx, read_gpx_file, save_gpx_file
from .geo import haversine_distance, calculate_total_distance
from .formatting import format_distance, format_duration

__all__ = [
    "create_route_gpx",
    "import_route_gpx",
    "read_gpx_file",
    "save_gpx_file",
    "haversine_distance",
    "calculate_total_distance",
    "format_distance",
    "format_duration",
]
