from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """A geographic point, or an opaque place reference when coordinates are missing."""

    model_config = ConfigDict(frozen=True)

    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    address: str = Field(default="")
    place_id: str = Field(default="")

    @property
    def is_complete(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_request_value(self) -> str:
        """Format the point the way the directions provider expects it.

        Complete points become ``"lat,lng"``. Anything else is sent as a place
        reference and never as coordinates.
        """
        if self.is_complete:
            return f"{self.latitude},{self.longitude}"
        if self.place_id:
            return f"place_id:{self.place_id}"
        return self.address
