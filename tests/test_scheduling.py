import pytest
from hypothesis import given
from hypothesis import strategies as st

from greedykit.scheduling import (
    MAX_POSITION,
    average_waiting_time,
    can_complete_circuit,
    car_pooling,
    lemonade_change,
    merge_intervals,
)

_trip = st.tuples(
    st.integers(min_value=1, max_value=20),
    st.integers(min_value=0, max_value=MAX_POSITION - 1),
    st.integers(min_value=1, max_value=50),
).map(lambda t: (t[0], t[1], min(t[1] + t[2], MAX_POSITION)))


def test_car_pooling_source_example():
    trips = [[2, 1, 5], [3, 3, 7]]
    assert car_pooling(trips, 4) is False
    assert car_pooling(trips, 5) is True


def test_car_pooling_rejects_out_of_range_location():
    with pytest.raises(ValueError):
        car_pooling([[1, 0, MAX_POSITION + 1]], 3)


@given(st.lists(_trip, max_size=10))
def test_car_pooling_total_capacity_always_fits(trips):
    total = sum(p for p, _, _ in trips)
    assert car_pooling(trips, total) is True


@given(st.lists(_trip, min_size=1, max_size=10))
def test_car_pooling_single_trip_over_capacity_fails(trips):
    largest = max(p for p, _, _ in trips)
    assert car_pooling(trips, largest - 1) is False


def test_can_complete_circuit_source_example():
    assert can_complete_circuit([1, 2, 3, 4, 5], [3, 4, 5, 1, 2]) == 3


def test_can_complete_circuit_not_enough_gas():
    assert can_complete_circuit([2, 3, 4], [3, 4, 3]) == -1


def test_can_complete_circuit_length_mismatch():
    with pytest.raises(ValueError):
        can_complete_circuit([1, 2], [1])


@given(
    st.lists(
        st.tuples(st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20)),
        min_size=1,
        max_size=12,
    )
)
def test_can_complete_circuit_start_is_valid(stations):
    gas = [g for g, _ in stations]
    cost = [c for _, c in stations]
    start = can_complete_circuit(gas, cost)
    if sum(cost) > sum(gas):
        assert start == -1
    else:
        assert 0 <= start < len(gas)
        tank = 0
        for step in range(len(gas)):
            station = (start + step) % len(gas)
            tank += gas[station] - cost[station]
            assert tank >= 0


def test_merge_intervals_example():
    intervals = [[1, 3], [2, 6], [8, 10], [15, 18]]
    assert merge_intervals(intervals) == [[1, 6], [8, 10], [15, 18]]


def test_merge_intervals_touching():
    assert merge_intervals([[4, 5], [1, 4]]) == [[1, 5]]


_interval = st.tuples(
    st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=20)
).map(lambda t: [t[0], t[0] + t[1]])


@given(st.lists(_interval, max_size=15))
def test_merge_intervals_disjoint_and_covering(intervals):
    merged = merge_intervals(intervals)
    for left, right in zip(merged, merged[1:]):
        assert left[1] < right[0]
    for start, end in intervals:
        assert any(lo <= start and end <= hi for lo, hi in merged)


def test_average_waiting_time_example():
    assert average_waiting_time([4, 3, 7, 1, 2]) == 4


def test_average_waiting_time_empty():
    with pytest.raises(ValueError):
        average_waiting_time([])


@given(st.integers(min_value=0, max_value=1000))
def test_average_waiting_time_single_job(burst):
    assert average_waiting_time([burst]) == 0


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=15))
def test_average_waiting_time_order_independent(bursts):
    assert average_waiting_time(bursts) == average_waiting_time(list(reversed(bursts)))
    assert average_waiting_time(bursts) <= sum(bursts)


def test_lemonade_change_examples():
    assert lemonade_change([5, 5, 5, 10, 20]) is True
    assert lemonade_change([5, 5, 10, 10, 20]) is False


def test_lemonade_change_first_ten_fails():
    assert lemonade_change([10]) is False


def test_lemonade_change_unsupported_bill():
    with pytest.raises(ValueError):
        lemonade_change([5, 50])


@given(st.integers(min_value=0, max_value=30))
def test_lemonade_change_only_fives(count):
    assert lemonade_change([5] * count) is True