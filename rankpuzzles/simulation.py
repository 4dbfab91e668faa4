"""Step-by-step simulations: stacks of plates, clouds, valleys, grids and grades."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import takewhile


def first_primes(count: int) -> list[int]:
    """Return the first count prime numbers."""
    primes: list[int] = []
    candidate = 2
    while len(primes) < count:
        bounded = takewhile(lambda p: p * p <= candidate, primes)
        if all(candidate % p for p in bounded):
            primes.append(candidate)
        candidate += 1
    return primes


def waiter(plates: Sequence[int], q: int) -> list[int]:
    """Return the plate numbers in the order the waiter reports them.

    The last element of plates is the top of the starting stack.
    """
    stack = list(plates)
    result: list[int] = []
    for prime in first_primes(q):
        divisible: list[int] = []
        rest: list[int] = []
        while stack:
            plate = stack.pop()
            (divisible if plate % prime == 0 else rest).append(plate)
        result.extend(reversed(divisible))
        stack = rest
        if not stack:
            break
    result.extend(reversed(stack))
    return result


def count_fruit_landings(
    s: int, t: int, a: int, b: int, apples: Iterable[int], oranges: Iterable[int]
) -> tuple[int, int]:
    """Count apples and oranges landing on the house spanning [s, t].

    Apples fall from a and land only when thrown forward; oranges fall from b and
    land only when thrown backward.
    """
    apple_hits = sum(1 for d in apples if d >= 0 and s <= a + d <= t)
    orange_hits = sum(1 for d in oranges if d <= 0 and s <= b + d <= t)
    return apple_hits, orange_hits


def cat_and_mouse(x: int, y: int, z: int) -> str:
    """Tell which cat reaches the mouse at z first, or that the mouse escapes."""
    to_a, to_b = abs(x - z), abs(y - z)
    if to_a < to_b:
        return "Cat A"
    if to_a > to_b:
        return "Cat B"
    return "Mouse C"


def counting_valleys(path: Iterable[str]) -> int:
    """Count the valleys walked through on a path of 'U' and 'D' steps."""
    level = valleys = 0
    for step in path:
        if step == "U":
            if level == -1:
                valleys += 1
            level += 1
        elif step == "D":
            level -= 1
    return valleys


def fair_rations(loaves: Iterable[int]) -> int | None:
    """Return the loaves to hand out so everyone has an even count, or None if impossible."""
    given = 0
    carry = 0
    for count in loaves:
        if (count + carry) % 2:
            carry = 1
            given += 2
        else:
            carry = 0
    return None if carry else given


def flatland_max_distance(n: int, stations: Iterable[int]) -> int:
    """Return the greatest distance from any of n cities to its nearest space station."""
    ordered = sorted(stations)
    if not ordered:
        raise ValueError("at least one station is required")
    gaps = ((right - left) // 2 for left, right in zip(ordered, ordered[1:]))
    return max(ordered[0], n - 1 - ordered[-1], *gaps)


def jumping_on_clouds(clouds: Sequence[int]) -> int:
    """Return the fewest jumps of one or two clouds from the first to the last, avoiding 1s."""
    last = len(clouds) - 1
    position = jumps = 0
    while position < last:
        if position + 2 <= last and clouds[position + 2] == 0:
            position += 2
        elif clouds[position + 1] == 0:
            position += 1
        else:
            raise ValueError(f"no safe cloud reachable from {position}")
        jumps += 1
    return jumps


def special_problems(k: int, chapters: Iterable[int]) -> int:
    """Count problems whose number equals their page, with k problems per page."""
    if k < 1:
        raise ValueError("k must be positive")
    page = 1
    special = 0
    for count in chapters:
        for problem in range(1, count + 1):
            if problem == page:
                special += 1
            if problem % k == 0 and problem != count:
                page += 1
        page += 1
    return special


def service_lane(widths: Sequence[int], cases: Iterable[tuple[int, int]]) -> list[int]:
    """Return the narrowest width between entry and exit for each (entry, exit) case."""
    return [min(widths[entry : max(entry, exit_) + 1]) for entry, exit_ in cases]


def round_grade(grade: int) -> int:
    """Round a passing-range grade up to the next multiple of 5 when within 2 of it."""
    if grade < 38:
        return grade
    remainder = grade % 5
    return grade + 5 - remainder if remainder >= 3 else grade


def grade_students(grades: Iterable[int]) -> list[int]:
    """Round every grade."""
    return [round_grade(grade) for grade in grades]


def cavity_map(grid: Sequence[str]) -> list[str]:
    """Mark with 'X' every interior cell deeper than its four neighbours."""
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    result = []
    for i, row in enumerate(grid):
        cells = list(row)
        if 0 < i < n - 1:
            for j in range(1, n - 1):
                depth = row[j]
                neighbours = (grid[i - 1][j], grid[i + 1][j], row[j - 1], row[j + 1])
                if all(other < depth for other in neighbours):
                    cells[j] = "X"
        result.append("".join(cells))
    return result