"""Models for routes drawn in the route builder."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class WaypointType(str, Enum):
    """Role of a waypoint in a planned route."""
    START = "start"
    VIA = "via"
    END = "end"


class PlannedWaypoint(BaseModel):
    """A waypoint placed by the user."""
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float
    name: str | None = None
    type: WaypointType | None = None


class ImportedRoute(BaseModel):
    """A planned route read back from a GPX file."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    waypoints: list[PlannedWaypoint] = Field(default_factory=list)
    track_points: list[tuple[float, float]] = Field(
        default_factory=list,
        description="Track coordinates as (longitude, latitude) pairs"
    )
    distance: int | float = Field(
        default=0,
        description="Total track distance in meters, NaN for NaN coordinates"
    )
