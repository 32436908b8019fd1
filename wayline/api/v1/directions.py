import logging
from fastapi import APIRouter, Depends, HTTPException

from wayline.api.dependencies import get_transport
from wayline.api.v1.models import DirectionsRequest
from wayline.core.settings import Settings, get_settings
from wayline.models.route import AggregateResult
from wayline.repositories.base import BaseTransport
from wayline.repositories.maps.google_maps import (
    NoRouteFoundError,
    ProviderStatusError,
    RouteSelectionError,
    TransportError,
)
from wayline.services.directions import DirectionsService
from wayline.services.selection import SELECTORS


logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/directions", response_model=AggregateResult)
async def get_directions_api(
    request: DirectionsRequest,
    settings: Settings = Depends(get_settings),
    transport: BaseTransport = Depends(get_transport),
):
    """Compute a route through the requested waypoints."""
    logger.info(
        f"Received directions request: origin={request.origin.to_request_value()!r}, "
        f"destination={request.destination.to_request_value()!r}, "
        f"{len(request.waypoints)} waypoints, split={request.options.split_waypoints}"
    )
    if not settings.GOOGLE_MAPS_API_KEY:
        logger.error("Directions requested but GOOGLE_MAPS_API_KEY is not configured")
        raise HTTPException(status_code=503, detail="Directions provider is not configured.")
    if not (request.origin.is_complete and request.destination.is_complete):
        raise HTTPException(
            status_code=422, detail="Origin and destination need both latitude and longitude."
        )

    service = DirectionsService(
        api_key=settings.GOOGLE_MAPS_API_KEY,
        transport=transport,
        base_url=settings.DIRECTIONS_SERVICE_BASE_URL,
        waypoint_limit=settings.WAYPOINT_LIMIT,
        selector=SELECTORS[request.prefer]() if request.prefer else None,
    )
    result = await service.run(
        request.origin, request.destination, request.waypoints, request.options
    )
    if result is not None:
        return result

    error = service.last_error
    if isinstance(error, NoRouteFoundError):
        raise HTTPException(status_code=404, detail=f"Could not find directions: {error}")
    if isinstance(error, (ProviderStatusError, RouteSelectionError, TransportError)):
        raise HTTPException(status_code=502, detail=f"Directions provider error: {error}")
    logger.error(f"Unexpected error computing directions: {error}")
    raise HTTPException(status_code=500, detail="Internal server error while computing directions.")
