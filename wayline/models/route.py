from enum import Enum
from typing import Any, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from wayline.models.location import GeoPoint


class RouteState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    READY = "ready"
    FAILED = "failed"


class RouteOptions(BaseModel):
    mode: str = Field("DRIVING", description="Travel mode, sent lower-cased")
    language: str = "en"
    region: str = ""
    precision: Literal["low", "high"] = Field(
        "low", description="'low' uses the overview polyline, 'high' every step polyline"
    )
    departure_time: Optional[str] = Field(None, description="Departure time hint, e.g. 'now'")
    channel: Optional[str] = Field(None, description="Billing channel")
    avoid_tolls: bool = False
    avoid_highways: bool = False
    avoid_ferries: bool = False
    optimize_waypoints: bool = False
    split_waypoints: bool = False

    @field_validator("departure_time", mode="before")
    @classmethod
    def normalize_departure_time(cls, v):
        if v is None or v == "" or v == "none":
            return None
        return str(v)


class RouteSegment(BaseModel):
    """One provider-bound sub-route."""

    model_config = ConfigDict(frozen=True)

    origin: GeoPoint
    destination: GeoPoint
    waypoints: List[GeoPoint] = Field(default_factory=list)


class SegmentResult(BaseModel):
    distance_km: float = Field(..., description="Distance in kilometers")
    duration_min: float = Field(..., description="Duration in minutes")
    path: List[GeoPoint] = Field(default_factory=list)
    fare: Optional[Any] = None
    legs: List[Any] = Field(default_factory=list)
    waypoint_order: List[int] = Field(default_factory=list)


class AggregateResult(BaseModel):
    path: List[GeoPoint] = Field(default_factory=list)
    distance_km: float = Field(0.0, description="Total distance in kilometers")
    duration_min: float = Field(0.0, description="Total duration in minutes")
    fares: List[Optional[Any]] = Field(default_factory=list, description="One entry per segment")
    legs: List[Any] = Field(default_factory=list, description="Legs of the last segment")
    waypoint_order: List[List[int]] = Field(default_factory=list, description="One entry per segment")
