"""Data models for GPX routes."""

from .route import GeoPoint, Waypoint, ParsedRoute, RouteStats
from .export import SampleForExport
from .planned import PlannedWaypoint, ImportedRoute, WaypointType

__all__ = [
    "GeoPoint",
    "Waypoint",
    "ParsedRoute",
    "RouteStats",
    "SampleForExport",
    "PlannedWaypoint",
    "ImportedRoute",
    "WaypointType",
]
