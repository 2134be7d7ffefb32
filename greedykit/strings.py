"""Greedy string problems: partitions, distinct subsequences and arrangements."""

from __future__ import annotations

from collections import Counter


def partition_labels(s: str) -> list[int]:
    """Split ``s`` into the most parts such that each letter is in one part.

    Returns the lengths of the parts in order.
    """
    last = {char: index for index, char in enumerate(s)}
    sizes: list[int] = []
    start = 0
    end = 0
    for index, char in enumerate(s):
        end = max(end, last[char])
        if index == end:
            sizes.append(end - start + 1)
            start = index + 1
    return sizes


def _smallest_distinct_subsequence(s: str) -> str:
    last = {char: index for index, char in enumerate(s)}
    stack: list[str] = []
    on_stack: set[str] = set()
    for index, char in enumerate(s):
        if char in on_stack:
            continue
        while stack and char < stack[-1] and last[stack[-1]] > index:
            on_stack.discard(stack.pop())
        stack.append(char)
        on_stack.add(char)
    return "".join(stack)


def remove_duplicate_letters(s: str) -> str:
    """Keep one of each letter, giving the lexicographically smallest result."""
    return _smallest_distinct_subsequence(s)


def smallest_subsequence(s: str) -> str:
    """Return the smallest subsequence holding every distinct letter exactly once."""
    return _smallest_distinct_subsequence(s)


def reorganize_string(s: str) -> str:
    """Rearrange ``s`` so no two neighbours are equal, or return ``""`` if impossible.

    The most frequent letters fill even positions first, then odd ones.
    """
    n = len(s)
    counts = Counter(s)
    if any(count > (n + 1) // 2 for count in counts.values()):
        return ""
    ordered = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    slots = [*range(0, n, 2), *range(1, n, 2)]
    result = list(s)
    filler = (char for char, count in ordered for _ in range(count))
    for slot, char in zip(slots, filler):
        result[slot] = char
    return "".join(result)


def str_without_3a3b(a: int, b: int) -> str:
    """Return a string of ``a`` 'a's and ``b`` 'b's with no 'aaa' or 'bbb'."""
    if a < 0 or b < 0:
        raise ValueError("letter counts must not be negative")
    if a > 2 * (b + 1) or b > 2 * (a + 1):
        raise ValueError(f"no string with {a} 'a' and {b} 'b' avoids triples")
    if a == 0 and b == 0:
        return ""

    remaining = {"a": a, "b": b}
    other = {"a": "b", "b": "a"}
    last = "a" if a > b else "b"
    remaining[last] -= 1
    letters = [last]
    doubled = False
    while remaining["a"] > 0 or remaining["b"] > 0:
        if not doubled and remaining[last] > remaining[other[last]]:
            chosen = last
        else:
            chosen = other[last]
        doubled = chosen == last
        remaining[chosen] -= 1
        letters.append(chosen)
        last = chosen
    return "".join(letters)