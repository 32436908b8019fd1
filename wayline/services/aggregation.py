from typing import Sequence

from wayline.models.route import AggregateResult, SegmentResult


def aggregate_results(results: Sequence[SegmentResult]) -> AggregateResult:
    """Fold segment results, in segment order, into one route."""
    aggregate = AggregateResult()
    for result in results:
        aggregate.path.extend(result.path)
        aggregate.distance_km += result.distance_km
        aggregate.duration_min += result.duration_min
        aggregate.fares.append(result.fare)
        # Last segment wins, legs are not concatenated
        aggregate.legs = list(result.legs)
        aggregate.waypoint_order.append(list(result.waypoint_order))
    return aggregate
