import asyncio
from typing import Any, Callable, Dict, List, Optional

import pytest

from wayline.models.location import GeoPoint
from wayline.repositories.base import BaseTransport

# Reference polyline: (38.5, -120.2), (40.7, -120.95), (43.252, -126.453)
REFERENCE_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
SINGLE_POINT_POLYLINE = "_p~iF~ps|U"  # (38.5, -120.2)
DELTA_POLYLINE = "_ulLnnqC"  # (2.2, -0.75)


def make_leg(distance_m, duration_s, traffic_s=None, step_polylines=()):
    leg = {
        "distance": {"value": distance_m},
        "duration": {"value": duration_s},
        "steps": [{"polyline": {"points": p}} for p in step_polylines],
    }
    if traffic_s is not None:
        leg["duration_in_traffic"] = {"value": traffic_s}
    return leg


def make_route(legs, overview=SINGLE_POINT_POLYLINE, fare=None, waypoint_order=None):
    route = {"legs": legs, "overview_polyline": {"points": overview}}
    if fare is not None:
        route["fare"] = fare
    if waypoint_order is not None:
        route["waypoint_order"] = waypoint_order
    return route


def make_response(*routes, status="OK"):
    return {"status": status, "routes": list(routes)}


class FakeTransport(BaseTransport):
    """Answers requests from a handler; records every call."""

    def __init__(self, handler: Callable[[Dict[str, Any]], Any]):
        self.handler = handler
        self.calls: List[List] = []

    async def get_json(self, url, params):
        self.calls.append(list(params))
        response = self.handler(dict(params))
        if asyncio.iscoroutine(response):
            response = await response
        if isinstance(response, Exception):
            raise response
        return response


def point(lat: Optional[float], lng: Optional[float]) -> GeoPoint:
    return GeoPoint(latitude=lat, longitude=lng)


@pytest.fixture
def origin():
    return point(52.52, 13.405)


@pytest.fixture
def destination():
    return point(48.137, 11.575)


@pytest.fixture
def waypoints():
    return [point(50.0 + i / 100, 10.0 + i / 100) for i in range(25)]
