"""Models for parsed GPX routes and their statistics."""

from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """A single trackpoint.

    Coordinate ranges are not enforced and NaN is accepted, so whatever
    the parser read from the document is kept as is.
    """
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float
    ele: float | None = None


class Waypoint(BaseModel):
    """A named point of interest."""
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float
    name: str | None = None
    type: str | None = None


class ParsedRoute(BaseModel):
    """Everything decoded from one GPX document."""
    model_config = ConfigDict(frozen=True)

    name: str = "Unnamed Route"
    trackpoints: list[GeoPoint] = Field(default_factory=list)
    waypoints: list[Waypoint] = Field(default_factory=list)


class RouteStats(BaseModel):
    """Route totals in whole meters.

    A non-finite sum (NaN coordinates in the input) is kept as a float.
    """
    model_config = ConfigDict(frozen=True)

    distance_m: int | float = Field(
        default=0,
        description="Great-circle distance along the track in meters"
    )
    elevation_gain_m: int | float = Field(
        default=0,
        description="Sum of positive elevation deltas in meters"
    )
