"""Greedy pairing problems: matching values from one collection against another."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from functools import lru_cache


def advantage_count(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Permute ``nums1`` so that it beats ``nums2`` at as many positions as possible.

    Each value of ``nums1`` is matched with the largest remaining element of
    ``nums2`` that it beats. Values that beat nothing fill the remaining
    positions in ascending order.
    """
    if len(nums1) != len(nums2):
        raise ValueError("nums1 and nums2 must have the same length")

    # A stable sort keeps equal values of nums2 in their original index order.
    order = sorted(range(len(nums2)), key=nums2.__getitem__)
    result = [0] * len(nums2)
    unused: deque[int] = deque()
    pos = 0
    for value in sorted(nums1):
        if pos < len(order) and value > nums2[order[pos]]:
            result[order[pos]] = value
            pos += 1
        else:
            unused.append(value)

    for index in order[pos:]:
        result[index] = unused.popleft()
    return result


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Return how many children get a cookie at least as large as their greed."""
    children = sorted(greed)
    content = 0
    for size in sorted(sizes):
        if content == len(children):
            break
        if size >= children[content]:
            content += 1
    return content


def bag_of_tokens_score(tokens: Sequence[int], power: int) -> int:
    """Return the best score reachable by playing tokens face up or face down.

    Cheap tokens are played face up for a point; when power runs short, the
    most expensive remaining token is played face down to regain power.
    """
    remaining = deque(sorted(tokens))
    score = 0
    best = 0
    while remaining:
        if power >= remaining[0]:
            power -= remaining.popleft()
            score += 1
            best = max(best, score)
        elif score > 0:
            power += remaining.pop()
            score -= 1
        else:
            break
    return best


def bag_of_tokens_score_exhaustive(tokens: Sequence[int], power: int) -> int:
    """Return the best score by trying every choice for each token in the given order.

    Each token, in turn, is played face up, played face down, or skipped.
    """
    values = tuple(tokens)

    @lru_cache(maxsize=None)
    def best(index: int, current_power: int, current_score: int) -> int:
        if index == len(values):
            return current_score
        token = values[index]
        outcomes = [best(index + 1, current_power, current_score)]
        if current_power >= token:
            outcomes.append(best(index + 1, current_power - token, current_score + 1))
        if current_score >= 1:
            outcomes.append(best(index + 1, current_power + token, current_score - 1))
        return max(outcomes)

    return best(0, power, 0)


def num_rescue_boats(people: Sequence[int], limit: int) -> int:
    """Return the fewest boats, each carrying at most two people within ``limit``."""
    queue = deque(sorted(people))
    boats = 0
    while queue:
        heaviest = queue.pop()
        if queue and queue[0] + heaviest <= limit:
            queue.popleft()
        boats += 1
    return boats