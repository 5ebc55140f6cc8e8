"""Input models for GPX export."""

from pydantic import BaseModel, ConfigDict, Field


class SampleForExport(BaseModel):
    """A recorded location sample."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    latitude: float
    longitude: float
    altitude: float | None = None
    timestamp_ms: int = Field(
        ...,
        alias="timestampMs",
        description="Unix epoch time of the sample in milliseconds"
    )
