from typing import Any, Dict, List, Optional, Tuple
import logging

from wayline.models.route import RouteOptions, RouteSegment, SegmentResult
from wayline.repositories.base import BaseDirectionsRepository, BaseTransport, QueryParams
from wayline.repositories.maps.codec import decode_paths
from wayline.services.selection import RouteSelector

logger = logging.getLogger(__name__)

OK_STATUS = "OK"


# Custom Exception Hierarchy
class MapsServiceError(Exception):
    """Base class for directions service errors."""
    pass

class MissingCredentialsError(MapsServiceError):
    """No provider API key is configured."""
    pass

class IncompleteInputError(MapsServiceError):
    """Origin or destination lacks a latitude or longitude."""
    pass

class ProviderStatusError(MapsServiceError):
    """The provider answered with a non-OK status."""

    def __init__(self, message: str, status: Optional[str] = None):
        super().__init__(message)
        self.status = status

class NoRouteFoundError(MapsServiceError):
    """The provider answered OK but returned no routes."""
    pass

class TransportError(MapsServiceError):
    """The request for a segment failed or its response could not be read."""

    def __init__(self, message: str, segment_index: int):
        super().__init__(message)
        self.segment_index = segment_index

class RouteSelectionError(MapsServiceError):
    """A route selector picked an alternative that does not exist."""
    pass


def format_segment(segment: RouteSegment, options: RouteOptions) -> Tuple[str, str, str]:
    """Return the origin, destination and waypoints strings sent for a segment."""
    waypoints = "|".join(w.to_request_value() for w in segment.waypoints)
    if options.optimize_waypoints:
        waypoints = f"optimize:true|{waypoints}"
    return (
        segment.origin.to_request_value(),
        segment.destination.to_request_value(),
        waypoints,
    )


def build_request_params(segment: RouteSegment, options: RouteOptions, api_key: str) -> QueryParams:
    origin, destination, waypoints = format_segment(segment, options)
    params = [
        ("origin", origin),
        ("waypoints", waypoints),
        ("destination", destination),
        ("key", api_key),
        ("mode", options.mode.lower()),
        ("language", options.language),
        ("region", options.region),
    ]
    if options.departure_time:
        params.append(("departure_time", options.departure_time))
    if options.channel:
        params.append(("channel", options.channel))
    if options.avoid_tolls:
        params.append(("avoid", "tolls"))
    if options.avoid_highways:
        params.append(("avoid", "highways"))
    if options.avoid_ferries:
        params.append(("avoid", "ferries"))
    return params


def route_metrics(route: Dict[str, Any], precision: str = "low") -> SegmentResult:
    """Compute distance, duration and path for one provider route."""
    legs = route.get("legs", [])
    distance_m = sum(leg["distance"]["value"] for leg in legs)
    duration_s = sum(
        (leg.get("duration_in_traffic") or leg["duration"])["value"] for leg in legs
    )

    if precision == "low":
        path = decode_paths([route["overview_polyline"]["points"]])
    else:
        path = decode_paths(
            step["polyline"]["points"] for leg in legs for step in leg.get("steps", [])
        )

    return SegmentResult(
        distance_km=distance_m / 1000,
        duration_min=duration_s / 60,
        path=path,
        fare=route.get("fare"),
        legs=legs,
        waypoint_order=route.get("waypoint_order") or [],
    )


class GoogleDirectionsRepository(BaseDirectionsRepository):
    def __init__(
        self,
        transport: BaseTransport,
        base_url: str,
        precision: str = "low",
        selector: Optional[RouteSelector] = None,
    ):
        self.transport = transport
        self.base_url = base_url
        self.precision = precision
        self.selector = selector

    async def fetch_segment(self, params: QueryParams, index: int = 0) -> SegmentResult:
        """Request one segment and convert the chosen route into a SegmentResult."""
        logger.info(f"Requesting directions for segment {index}")
        try:
            data = await self.transport.get_json(self.base_url, params)
        except Exception as e:
            logger.error(f"Directions request failed for segment {index}: {e}", exc_info=True)
            raise TransportError(f"Error on directions request for segment {index}: {e}", index) from e

        try:
            result = self._parse_response(data, index)
        except MapsServiceError:
            raise
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            logger.error(f"Malformed directions response for segment {index}: {e}", exc_info=True)
            raise TransportError(
                f"Malformed directions response for segment {index}: {e!r}", index
            ) from e

        logger.info(
            f"Segment {index}: distance={result.distance_km:.1f}km, "
            f"duration={result.duration_min:.0f}min, {len(result.path)} points"
        )
        return result

    def _parse_response(self, data: Dict[str, Any], index: int) -> SegmentResult:
        status = data.get("status")
        if status != OK_STATUS:
            message = data.get("error_message") or status or "Unknown error"
            logger.warning(f"Directions provider returned status {status!r} for segment {index}: {message}")
            raise ProviderStatusError(message, status=status)

        routes: List[Dict[str, Any]] = data.get("routes") or []
        if not routes:
            logger.warning(f"No route found for segment {index}")
            raise NoRouteFoundError(f"No route found for segment {index}")

        if self.selector is None:
            return route_metrics(routes[0], self.precision)

        # Every alternative is offered, in provider order
        alternatives = [route_metrics(route, self.precision) for route in routes]
        selected = self.selector.select_route(alternatives)
        if (
            isinstance(selected, bool)
            or not isinstance(selected, int)
            or not 0 <= selected < len(alternatives)
        ):
            raise RouteSelectionError(
                f"Route selector returned {selected!r} for {len(alternatives)} alternatives"
            )
        logger.debug(f"Selected alternative {selected} of {len(alternatives)} for segment {index}")
        return alternatives[selected]
