# greedykit

Greedy solutions to well-known array, interval and string problems. Each one is
a plain function that takes and returns ordinary Python lists, strings and
integers.

## Installation

```
pip install greedykit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

### `greedykit.pairing`

- `advantage_count(nums1, nums2)` reorders `nums1` so that it beats `nums2` at as many positions as possible. Values that beat nothing fill the remaining positions in ascending order. Raises `ValueError` if the lengths differ.
- `find_content_children(greed, sizes)` returns how many children can get a cookie at least as big as their greed.
- `bag_of_tokens_score(tokens, power)` returns the best score reachable by playing tokens face up, which costs power and gains a point, or face down, which costs a point and gains power. Tokens are taken cheapest first for face up and dearest first for face down.
- `bag_of_tokens_score_exhaustive(tokens, power)` tries every choice for each token (face up, face down or skip), keeping the tokens in the order given. Because the order is fixed, its result can be lower than that of `bag_of_tokens_score` for unsorted input.
- `num_rescue_boats(people, limit)` returns the fewest boats needed, where each boat carries at most two people whose weights add up to no more than `limit`.

### `greedykit.scheduling`

- `car_pooling(trips, capacity)` tells whether every trip `(passengers, start, end)` fits in the car. Locations must lie between 0 and `MAX_POSITION` (1000), otherwise `ValueError` is raised.
- `can_complete_circuit(gas, cost)` returns the index of the station from which the full circuit can be driven, or `-1` if there is none. Raises `ValueError` if the lists differ in length.
- `merge_intervals(intervals)` merges overlapping `[start, end]` intervals and returns them ordered by start.
- `average_waiting_time(burst_times)` returns the average waiting time under shortest-job-first as a whole number, with the fraction dropped. Raises `ValueError` for an empty list.
- `lemonade_change(bills)` tells whether correct change can be given to every customer in turn. A lemonade costs 5, and customers pay with 5, 10 or 20. Any other bill raises `ValueError`.

### `greedykit.counting`

- `min_cost_to_move_chips(positions)` returns the cheapest cost to gather all chips on one position. A move of two costs nothing and a move of one costs one. Raises `ValueError` for an empty list.
- `is_possible_divide(nums, k)` tells whether `nums` splits into groups of `k` consecutive integers. Raises `ValueError` if `k` is not positive.
- `group_the_people(group_sizes)` groups person indices so that each person is in a group of the size they stated. Groups are listed in the order they fill. People in a group that never fills are left out.
- `min_set_size(values)` returns the fewest distinct values whose removal takes away at least half of the list.
- `num_of_burgers(tomato_slices, cheese_slices)` returns `[jumbo, small]` burger counts that use up every slice, or `[]` if that cannot be done. A jumbo burger takes 4 tomato slices and 1 cheese slice. A small burger takes 2 tomato slices and 1 cheese slice.

### `greedykit.strings`

- `partition_labels(s)` returns the lengths of the most parts `s` can be cut into so that each letter appears in only one part.
- `remove_duplicate_letters(s)` keeps one of each letter and returns the lexicographically smallest result.
- `smallest_subsequence(s)` returns the lexicographically smallest subsequence that holds every distinct letter exactly once.
- `reorganize_string(s)` rearranges `s` so that no two neighbouring letters are equal, or returns `""` if that cannot be done.
- `str_without_3a3b(a, b)` builds a string of `a` letters `'a'` and `b` letters `'b'` with no `"aaa"` and no `"bbb"` in it. Raises `ValueError` if a count is negative or no such string exists.

## Example

```python
from greedykit.scheduling import can_complete_circuit, merge_intervals
from greedykit.strings import partition_labels

merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])
# [[1, 6], [8, 10], [15, 18]]

can_complete_circuit([1, 2, 3, 4, 5], [3, 4, 5, 1, 2])
# 3

partition_labels("ababcbacadefegdehijhklij")
# [9, 7, 8]
```

## What it does not do

greedykit is a library only. It has no command-line tool, and it does not read
input from files or from the terminal. You call the functions from your own
Python code.