"""Greedy scheduling problems: trips, circuits, intervals, queues and change."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate

MAX_POSITION = 1000
"""Highest trip location accepted by :func:`car_pooling`."""


def car_pooling(trips: Iterable[Sequence[int]], capacity: int) -> bool:
    """Return whether every trip ``(passengers, start, end)`` fits in the car.

    Passengers board at ``start`` and leave at ``end``; locations run from
    0 to :data:`MAX_POSITION`.
    """
    changes: Counter[int] = Counter()
    for passengers, start, end in trips:
        for point in (start, end):
            if not 0 <= point <= MAX_POSITION:
                raise ValueError(f"location {point} outside 0..{MAX_POSITION}")
        changes[start] += passengers
        changes[end] -= passengers

    load = 0
    for point in sorted(changes):
        load += changes[point]
        if load > capacity:
            return False
    return True


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Return the station from which the circuit can be completed, or -1."""
    total = 0
    tank = 0
    start = 0
    for index, (fuel, spend) in enumerate(zip(gas, cost, strict=True)):
        total += fuel - spend
        tank += fuel - spend
        if tank < 0:
            tank = 0
            start = index + 1
    return -1 if total < 0 else start


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals, returned in order of start."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def average_waiting_time(burst_times: Sequence[int]) -> int:
    """Return the whole-number average waiting time under shortest-job-first."""
    if not burst_times:
        raise ValueError("at least one burst time is required")
    ordered = sorted(burst_times)
    total = sum(accumulate(ordered[:-1], initial=0))
    count = len(ordered)
    return total // count if total >= 0 else -(-total // count)


def lemonade_change(bills: Iterable[int]) -> bool:
    """Return whether correct change can be given to every customer in turn.

    Each lemonade costs 5; customers pay with 5, 10 or 20 bills.
    """
    fives = 0
    tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if fives == 0:
                return False
            fives -= 1
            tens += 1
        elif bill == 20:
            if tens > 0 and fives > 0:
                tens -= 1
                fives -= 1
            elif fives >= 3:
                fives -= 3
            else:
                return False
        else:
            raise ValueError(f"unsupported bill: {bill}")
    return True