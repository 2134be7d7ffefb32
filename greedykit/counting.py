"""Greedy counting problems: parities, runs, groups, frequencies and recipes."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence


def min_cost_to_move_chips(positions: Sequence[int]) -> int:
    """Return the cheapest cost to gather all chips on one occupied position.

    Moving a chip by two costs nothing and moving it by one costs one, so
    the cost of a target is the number of chips of the other parity.
    """
    if not positions:
        raise ValueError("at least one chip position is required")
    parities = Counter(position % 2 for position in positions)
    return len(positions) - max(parities.values())


def is_possible_divide(nums: Sequence[int], k: int) -> bool:
    """Return whether ``nums`` splits into groups of ``k`` consecutive integers."""
    if k <= 0:
        raise ValueError("group size must be positive")
    if len(nums) % k:
        return False

    counts = Counter(nums)
    for start in sorted(counts):
        run = counts[start]
        if run == 0:
            continue
        for value in range(start, start + k):
            if counts[value] < run:
                return False
            counts[value] -= run
    return True


def group_the_people(group_sizes: Iterable[int]) -> list[list[int]]:
    """Group person indices so each person is in a group of their stated size.

    Groups are emitted as soon as they fill; people left in a group that
    never fills are not returned.
    """
    pending: defaultdict[int, list[int]] = defaultdict(list)
    groups: list[list[int]] = []
    for person, size in enumerate(group_sizes):
        members = pending[size]
        members.append(person)
        if len(members) == size:
            groups.append(members)
            pending[size] = []
    return groups


def min_set_size(values: Sequence[int]) -> int:
    """Return the fewest distinct values whose removal halves the array or better."""
    total = len(values)
    removed = 0
    frequencies = sorted(Counter(values).values(), reverse=True)
    for chosen, frequency in enumerate(frequencies, start=1):
        removed += frequency
        if total - removed <= total // 2:
            return chosen
    return len(frequencies)


def num_of_burgers(tomato_slices: int, cheese_slices: int) -> list[int]:
    """Return ``[jumbo, small]`` burgers that use every slice, or ``[]`` if none do.

    A jumbo burger takes four tomato slices and one cheese slice; a small
    burger takes two tomato slices and one cheese slice.
    """
    if tomato_slices == 0 and cheese_slices == 0:
        return [0, 0]
    if (
        tomato_slices > 4 * cheese_slices
        or tomato_slices % 2
        or cheese_slices >= tomato_slices
    ):
        return []
    jumbo = (tomato_slices - 2 * cheese_slices) // 2
    small = cheese_slices - jumbo
    if jumbo < 0 or small < 0:
        return []
    return [jumbo, small]