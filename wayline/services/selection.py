from typing import List, Protocol

from wayline.models.route import SegmentResult


class RouteSelector(Protocol):
    def select_route(self, alternatives: List[SegmentResult]) -> int:
        """Return the index of the chosen alternative.

        Must return a valid index for any non-empty list.
        """
        ...


class FastestRouteSelector:
    """Picks the alternative with the lowest duration."""

    def select_route(self, alternatives: List[SegmentResult]) -> int:
        return min(range(len(alternatives)), key=lambda i: alternatives[i].duration_min)


class ShortestRouteSelector:
    """Picks the alternative with the lowest distance."""

    def select_route(self, alternatives: List[SegmentResult]) -> int:
        return min(range(len(alternatives)), key=lambda i: alternatives[i].distance_km)


SELECTORS = {
    "fastest": FastestRouteSelector,
    "shortest": ShortestRouteSelector,
}
