"""Array and list puzzles: rotations, queries, counting and stack problems."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations

_HOURGLASS = ((0, 0), (0, 1), (0, 2), (1, 1), (2, 0), (2, 1), (2, 2))


def hourglass_max(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest hourglass sum in a rectangular grid of at least 3x3."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if rows < 3 or cols < 3:
        raise ValueError("grid must be at least 3x3")
    if any(len(row) != cols for row in grid):
        raise ValueError("grid must be rectangular")
    return max(
        sum(grid[top + dr][left + dc] for dr, dc in _HOURGLASS)
        for top in range(rows - 2)
        for left in range(cols - 2)
    )


def array_manipulation(n: int, queries: Iterable[tuple[int, int, int]]) -> int:
    """Add k to the 1-based range [a, b] for each query and return the maximum value."""
    diff = [0] * (n + 1)
    for a, b, k in queries:
        diff[a - 1] += k
        diff[b] -= k
    best = running = 0
    for delta in diff:
        running += delta
        best = max(best, running)
    return best


def reverse_array(values: Sequence[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(reversed(values))


def rotate_left(values: Sequence[int], d: int) -> list[int]:
    """Rotate values left by d positions, where 0 <= d <= len(values)."""
    if not 0 <= d <= len(values):
        raise ValueError("rotation must be between 0 and the length of the array")
    return list(values[d:]) + list(values[:d])


def matching_strings(strings: Iterable[str], queries: Iterable[str]) -> list[int]:
    """Count how often each query string occurs in strings."""
    counts = Counter(strings)
    return [counts[query] for query in queries]


def dynamic_array(n: int, queries: Iterable[tuple[int, int, int]]) -> list[int]:
    """Run the dynamic-array queries and return every answer to a type-2 query."""
    sequences: list[list[int]] = [[] for _ in range(n)]
    last = 0
    answers = []
    for kind, x, y in queries:
        seq = sequences[(x ^ last) % n]
        if kind == 1:
            seq.append(y)
        elif kind == 2:
            if not seq:
                raise IndexError("query on an empty sequence")
            last = seq[y % len(seq)]
            answers.append(last)
    return answers


def circular_rotation_queries(
    values: Sequence[int], k: int, queries: Iterable[int]
) -> list[int]:
    """Rotate values right k times and return the element at each queried index."""
    n = len(values)
    k %= n
    return [values[(n - k + x) % n] for x in queries]


def variable_sized_lookup(
    arrays: Sequence[Sequence[int]], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Return arrays[x][y] for each (x, y) query."""
    return [arrays[x][y] for x, y in queries]


def larrys_array(values: Sequence[int]) -> bool:
    """Tell whether values can be sorted using only three-element rotations."""
    inversions = sum(1 for first, second in combinations(values, 2) if first > second)
    return inversions % 2 == 0


def divisible_sum_pairs(values: Sequence[int], k: int) -> int:
    """Count pairs i < j whose sum is divisible by k."""
    return sum(1 for first, second in combinations(values, 2) if (first + second) % k == 0)


def equalize_array(values: Sequence[int]) -> int:
    """Return the fewest deletions that leave only equal elements."""
    if not values:
        return 0
    return len(values) - max(Counter(values).values())


def mini_max_sum(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest sums of all but one element."""
    if not values:
        raise ValueError("values must not be empty")
    total = sum(values)
    return total - max(values), total - min(values)


def minimum_distance(values: Sequence[int]) -> int:
    """Return the smallest index distance between equal elements, or -1."""
    last_seen: dict[int, int] = {}
    best = -1
    for index, value in enumerate(values):
        if value in last_seen:
            gap = index - last_seen[value]
            if best == -1 or gap < best:
                best = gap
        last_seen[value] = index
    return best


def plus_minus(values: Sequence[int]) -> tuple[float, float, float]:
    """Return the fractions of positive, negative and zero elements."""
    if not values:
        raise ValueError("values must not be empty")
    n = len(values)
    positive = sum(1 for v in values if v > 0)
    negative = sum(1 for v in values if v < 0)
    zero = n - positive - negative
    return positive / n, negative / n, zero / n


def diagonal_difference(matrix: Sequence[Sequence[int]]) -> int:
    """Return the absolute difference of the two diagonal sums of a square matrix."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    primary = sum(row[i] for i, row in enumerate(matrix))
    secondary = sum(row[n - 1 - i] for i, row in enumerate(matrix))
    return abs(primary - secondary)


def cut_the_sticks(lengths: Iterable[int]) -> list[int]:
    """Return the number of sticks left before each cut."""
    sticks = list(lengths)
    if any(length < 1 for length in sticks):
        raise ValueError("stick lengths must be positive")
    rounds = []
    while sticks:
        rounds.append(len(sticks))
        shortest = min(sticks)
        sticks = [length - shortest for length in sticks if length > shortest]
    return rounds


def max_element_queries(operations: Iterable[Sequence[int]]) -> list[int]:
    """Run push (1 x), pop (2) and max (3) operations and return every reported maximum.

    The maximum of an empty stack is reported as 0.
    """
    maxima: list[int] = []
    answers = []
    for op in operations:
        kind = op[0]
        if kind == 1:
            previous = maxima[-1] if maxima else 0
            maxima.append(max(previous, op[1]))
        elif kind == 2:
            if not maxima:
                raise IndexError("pop from an empty stack")
            maxima.pop()
        elif kind == 3:
            answers.append(maxima[-1] if maxima else 0)
        else:
            raise ValueError(f"unknown operation {kind}")
    return answers


def jesse_cookies(sweetness: Iterable[int], k: int) -> int:
    """Return how many mixes make every cookie at least k sweet, or -1."""
    heap = list(sweetness)
    if not heap:
        return -1
    heapq.heapify(heap)
    operations = 0
    while heap[0] < k:
        if len(heap) < 2:
            return -1
        least = heapq.heappop(heap)
        second = heapq.heappop(heap)
        heapq.heappush(heap, least + 2 * second)
        operations += 1
    return operations