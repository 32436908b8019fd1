from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from wayline.models.location import GeoPoint
from wayline.models.route import RouteOptions


# Request Models
class DirectionsRequest(BaseModel):
    origin: GeoPoint = Field(..., description="Route start")
    destination: GeoPoint = Field(..., description="Route end")
    waypoints: List[GeoPoint] = Field(
        default_factory=list, description="Ordered intermediate points"
    )
    options: RouteOptions = Field(default_factory=RouteOptions)
    prefer: Optional[Literal["fastest", "shortest"]] = Field(
        None, description="Pick among alternative routes instead of the provider's first"
    )
