import pytest

from wayline.models.route import SegmentResult
from wayline.services.aggregation import aggregate_results
from tests.conftest import point


def make_result(distance, duration, path, fare=None, legs=(), order=()):
    return SegmentResult(
        distance_km=distance,
        duration_min=duration,
        path=path,
        fare=fare,
        legs=list(legs),
        waypoint_order=list(order),
    )


def test_aggregate_sums_and_concatenates_in_order():
    results = [
        make_result(1.25, 10.5, [point(1, 1), point(2, 2)], fare={"value": 2}, legs=["a"], order=[0, 1]),
        make_result(2.5, 20.25, [point(3, 3)], legs=["b"], order=[]),
        make_result(0.1, 0.2, [point(4, 4)], fare={"value": 5}, legs=["c", "d"], order=[2, 0, 1]),
    ]

    aggregate = aggregate_results(results)

    assert aggregate.distance_km == pytest.approx(3.85)
    assert aggregate.duration_min == pytest.approx(30.95)
    assert [p.latitude for p in aggregate.path] == [1, 2, 3, 4]
    assert aggregate.fares == [{"value": 2}, None, {"value": 5}]
    assert aggregate.waypoint_order == [[0, 1], [], [2, 0, 1]]


def test_aggregate_keeps_legs_of_last_segment():
    results = [
        make_result(1, 1, [], legs=["first"]),
        make_result(1, 1, [], legs=["second", "third"]),
    ]

    assert aggregate_results(results).legs == ["second", "third"]


def test_aggregate_empty():
    aggregate = aggregate_results([])

    assert aggregate.path == []
    assert aggregate.distance_km == 0
    assert aggregate.fares == []
    assert aggregate.waypoint_order == []
