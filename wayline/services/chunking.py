from typing import List, Optional, Sequence

from wayline.models.location import GeoPoint
from wayline.models.route import RouteSegment

WAYPOINT_LIMIT = 10


def chunk_waypoints(
    origin: GeoPoint,
    destination: GeoPoint,
    waypoints: Optional[Sequence[GeoPoint]] = None,
    limit: int = WAYPOINT_LIMIT,
    split_enabled: bool = False,
) -> List[RouteSegment]:
    """Split a route into segments with at most ``limit`` waypoints each.

    Inner segments start at the last waypoint of the previous group and end at
    the first waypoint of the next one, so consecutive segments join up.
    """
    if limit < 1:
        raise ValueError(f"Waypoint limit must be at least 1, got {limit}")

    waypoints = list(waypoints or [])
    if not split_enabled or len(waypoints) <= limit:
        return [RouteSegment(origin=origin, destination=destination, waypoints=waypoints)]

    groups = [waypoints[i:i + limit] for i in range(0, len(waypoints), limit)]
    segments = []
    for i, group in enumerate(groups):
        segments.append(
            RouteSegment(
                origin=origin if i == 0 else groups[i - 1][-1],
                destination=destination if i == len(groups) - 1 else groups[i + 1][0],
                waypoints=group,
            )
        )
    return segments
