from typing import Callable, List, Optional, Sequence
import asyncio
import logging

from wayline.core.settings import get_settings
from wayline.models.location import GeoPoint
from wayline.models.route import AggregateResult, RouteOptions, RouteState
from wayline.repositories.base import BaseTransport
from wayline.repositories.maps.google_maps import (
    GoogleDirectionsRepository,
    IncompleteInputError,
    MissingCredentialsError,
    build_request_params,
    format_segment,
)
from wayline.repositories.transport import AiohttpTransport
from wayline.services.aggregation import aggregate_results
from wayline.services.chunking import chunk_waypoints
from wayline.services.selection import RouteSelector

logger = logging.getLogger(__name__)

StartObserver = Callable[[str, str, str], None]
ReadyObserver = Callable[[AggregateResult], None]
ErrorObserver = Callable[[str], None]


class DirectionsService:
    """Computes a route through any number of waypoints.

    Waypoints are split into provider-sized segments, all segments are fetched
    concurrently and the results are stitched together. A run either produces a
    complete result or fails as a whole; the first segment failure wins.

    Observers:
        on_start(origin, destination, waypoints): request strings of the first
            segment, called once per run before the requests are dispatched.
        on_ready(result): called with the AggregateResult of a successful run.
        on_error(message): called with the error message of a failed run.

    Calling ``run`` again while a run is in flight supersedes it; results of
    the older run are dropped without notifying any observer.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        transport: Optional[BaseTransport] = None,
        base_url: Optional[str] = None,
        waypoint_limit: Optional[int] = None,
        selector: Optional[RouteSelector] = None,
        on_start: Optional[StartObserver] = None,
        on_ready: Optional[ReadyObserver] = None,
        on_error: Optional[ErrorObserver] = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.GOOGLE_MAPS_API_KEY
        self.transport = transport or AiohttpTransport(timeout=settings.REQUEST_TIMEOUT_SECONDS)
        self.base_url = base_url or settings.DIRECTIONS_SERVICE_BASE_URL
        self.waypoint_limit = waypoint_limit or settings.WAYPOINT_LIMIT
        self.selector = selector
        self.on_start = on_start
        self.on_ready = on_ready
        self.on_error = on_error

        self.state = RouteState.IDLE
        self.result: Optional[AggregateResult] = None
        self.last_error: Optional[Exception] = None
        self._epoch = 0

    @property
    def path(self) -> List[GeoPoint]:
        """Path of the current result, empty unless the last run succeeded."""
        return self.result.path if self.result else []

    def _check_inputs(self, origin: Optional[GeoPoint], destination: Optional[GeoPoint]):
        if not self.api_key:
            raise MissingCredentialsError("Missing API Key")
        if origin is None or destination is None or not (origin.is_complete and destination.is_complete):
            raise IncompleteInputError("Origin and destination need both latitude and longitude")

    async def run(
        self,
        origin: Optional[GeoPoint],
        destination: Optional[GeoPoint],
        waypoints: Optional[Sequence[GeoPoint]] = None,
        options: Optional[RouteOptions] = None,
    ) -> Optional[AggregateResult]:
        """Compute the route; returns the result, or None if nothing was produced."""
        try:
            self._check_inputs(origin, destination)
        except MissingCredentialsError as e:
            logger.warning(f"Directions error: {e}")
            return None
        except IncompleteInputError as e:
            logger.debug(f"Skipping directions request: {e}")
            return None

        options = options or RouteOptions()
        self._epoch += 1
        epoch = self._epoch
        self.state = RouteState.FETCHING

        segments = chunk_waypoints(
            origin,
            destination,
            waypoints,
            limit=self.waypoint_limit,
            split_enabled=options.split_waypoints,
        )
        requests = [build_request_params(segment, options, self.api_key) for segment in segments]
        logger.info(
            f"Computing route with {len(waypoints or [])} waypoints in {len(segments)} segment(s), "
            f"mode='{options.mode.lower()}', precision='{options.precision}'"
        )

        repository = GoogleDirectionsRepository(
            transport=self.transport,
            base_url=self.base_url,
            precision=options.precision,
            selector=self.selector,
        )
        try:
            if self.on_start:
                self.on_start(*format_segment(segments[0], options))
            results = await asyncio.gather(
                *(repository.fetch_segment(params, index) for index, params in enumerate(requests))
            )
        except Exception as e:
            if epoch != self._epoch:
                logger.info(f"Ignoring failure of superseded run {epoch}: {e}")
                return None
            self._fail(e)
            return None

        if epoch != self._epoch:
            logger.info(f"Ignoring result of superseded run {epoch}")
            return None

        result = aggregate_results(results)
        self.result = result
        self.last_error = None
        self.state = RouteState.READY
        logger.info(
            f"Route ready: distance={result.distance_km:.1f}km, duration={result.duration_min:.0f}min, "
            f"{len(result.path)} points"
        )
        if self.on_ready:
            self.on_ready(result)
        return result

    def _fail(self, error: Exception):
        self.result = None
        self.last_error = error
        self.state = RouteState.FAILED
        message = str(error) or error.__class__.__name__
        logger.warning(f"Directions error: {message}")
        if self.on_error:
            self.on_error(message)
