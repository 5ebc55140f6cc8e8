"""GPX file utilities for planned routes."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Sequence

import gpxpy
import gpxpy.gpx
from pydantic import ValidationError

from routegpx.config import settings
from routegpx.models import ImportedRoute, PlannedWaypoint, WaypointType
from routegpx.utils.geo import calculate_total_distance

logger = logging.getLogger(__name__)

DEFAULT_PLANNED_NAME = "Route"
DEFAULT_IMPORTED_NAME = "Imported Route"


def create_route_gpx(
    waypoints: Sequence[PlannedWaypoint],
    route_coordinates: Sequence[tuple[float, float]],
    name: str = DEFAULT_PLANNED_NAME,
    description: str = "",
    now: Callable[[], datetime] | None = None,
) -> str:
    """
    Create a GPX document for a route drawn in the route builder.

    Args:
        waypoints: The user's waypoints, written as <wpt> elements
        route_coordinates: Routed line as (longitude, latitude) pairs
        name: Name of the route and its track
        description: Optional route description
        now: Clock for the metadata timestamp

    Returns:
        GPX XML string
    """
    gpx = gpxpy.gpx.GPX()
    gpx.name = name
    gpx.description = description
    gpx.creator = settings.gpx_creator
    gpx.time = now() if now else datetime.now(timezone.utc)

    for i, wp in enumerate(waypoints, start=1):
        gpx.waypoints.append(gpxpy.gpx.GPXWaypoint(
            latitude=wp.lat,
            longitude=wp.lng,
            name=wp.name or f"Waypoint {i}",
            type=(wp.type or WaypointType.VIA).value,
        ))

    gpx_track = gpxpy.gpx.GPXTrack(name=name)
    gpx.tracks.append(gpx_track)

    gpx_segment = gpxpy.gpx.GPXTrackSegment()
    gpx_track.segments.append(gpx_segment)

    for lon, lat in route_coordinates:
        gpx_segment.points.append(gpxpy.gpx.GPXTrackPoint(latitude=lat, longitude=lon))

    return gpx.to_xml()


def _waypoint_type(value: str | None) -> WaypointType | None:
    try:
        return WaypointType(value) if value else None
    except ValueError:
        return None


def import_route_gpx(gpx_text: str) -> ImportedRoute | None:
    """
    Read a planned route back from a GPX document.

    Unlike the tolerant trackpoint parser this needs well-formed XML;
    a document gpxpy can't read is logged and None is returned.
    """
    try:
        gpx = gpxpy.parse(gpx_text)
    except (gpxpy.gpx.GPXException, ValueError) as e:
        logger.error("Failed to parse GPX: %s", e)
        return None

    first_track = gpx.tracks[0] if gpx.tracks else None
    name = gpx.name or (first_track.name if first_track else None) or DEFAULT_IMPORTED_NAME
    description = gpx.description or (first_track.description if first_track else None) or ""

    track_points = [
        (point.longitude, point.latitude)
        for track in gpx.tracks
        for segment in track.segments
        for point in segment.points
    ]

    waypoints = [
        {
            "lat": wpt.latitude,
            "lng": wpt.longitude,
            "name": wpt.name or None,
            "type": _waypoint_type(wpt.type) or (WaypointType.START if i == 0 else WaypointType.VIA),
        }
        for i, wpt in enumerate(gpx.waypoints)
    ]

    # No explicit waypoints: use the ends of the track
    if not waypoints and len(track_points) >= 2:
        (start_lon, start_lat), (end_lon, end_lat) = track_points[0], track_points[-1]
        waypoints = [
            {"lat": start_lat, "lng": start_lon, "type": WaypointType.START},
            {"lat": end_lat, "lng": end_lon, "type": WaypointType.END},
        ]

    if len(waypoints) > 1:
        waypoints[-1]["type"] = WaypointType.END

    try:
        return ImportedRoute(
            name=name,
            description=description,
            waypoints=[PlannedWaypoint(**wp) for wp in waypoints],
            track_points=track_points,
            distance=calculate_total_distance(track_points),
        )
    except ValidationError as e:
        logger.error("Unusable route in GPX: %s", e)
        return None


def gpx_filename(filename: str) -> str:
    """Append the .gpx extension unless it is already there."""
    return filename if filename.endswith(".gpx") else f"{filename}.gpx"


def read_gpx_file(filepath: str | Path) -> str:
    """Read GPX content from a file."""
    return Path(filepath).read_text(encoding="utf-8")


def save_gpx_file(gpx_content: str, filepath: str | Path) -> Path:
    """Save GPX content to a file, adding the .gpx extension if missing."""
    path = Path(filepath)
    path = path.with_name(gpx_filename(path.name))
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(gpx_content)
    return path
