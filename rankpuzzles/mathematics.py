"""Number puzzles: divisibility, modular arithmetic, calendars and sequences."""

from __future__ import annotations

import math


def army_game_packages(n: int, m: int) -> int:
    """Return the fewest supply drops covering an n x m grid, each drop serving a 2x2 block."""
    if n < 1 or m < 1:
        raise ValueError("grid dimensions must be positive")
    return ((n + 1) // 2) * ((m + 1) // 2)


def reverse_digits(num: int) -> int:
    """Return num with its decimal digits reversed; 0 for non-positive numbers."""
    if num <= 0:
        return 0
    return int(str(num)[::-1])


def beautiful_days(i: int, j: int, k: int) -> int:
    """Count days in [i, j] whose distance to their digit reversal is divisible by k."""
    return sum(1 for day in range(i, j + 1) if abs(day - reverse_digits(day)) % k == 0)


def extended_euclid(a: int, b: int) -> tuple[int, int]:
    """Return (x, y) with a*x + b*y equal to the greatest common divisor of a and b."""
    if a % b == 0:
        return 0, 1
    x, y = extended_euclid(b, a % b)
    return y, x - y * (a // b)


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of a modulo m, in the range [0, m)."""
    if math.gcd(a, m) != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    x, _ = extended_euclid(a, m)
    return x % m


def handshakes(n: int) -> int:
    """Return the number of handshakes when each of n people greets every other once."""
    return n * (n - 1) // 2


def chocolate_feast(n: int, c: int, m: int) -> int:
    """Return the bars eaten with n money, bars costing c, and m wrappers buying a bar."""
    if m < 2:
        raise ValueError("wrapper exchange rate must be at least 2")
    total = wrappers = n // c
    while wrappers >= m:
        bought, kept = divmod(wrappers, m)
        total += bought
        wrappers = bought + kept
    return total


def find_digits(n: int) -> int:
    """Count the digits of n (with repetition) that divide n; zeros never count."""
    return sum(1 for digit in str(abs(n)) if digit != "0" and n % int(digit) == 0)


def kangaroo(x1: int, v1: int, x2: int, v2: int) -> bool:
    """Tell whether the first kangaroo, behind and faster, lands with the second."""
    if v2 < v1:
        return (x2 - x1) % (v1 - v2) == 0
    return False


def minimum_triangle_height(base: int, area: int) -> int:
    """Return the smallest integer height giving a triangle of at least the given area."""
    if base <= 0:
        raise ValueError("base must be positive")
    return -(-2 * area // base)


def save_the_prisoner(n: int, m: int, s: int) -> int:
    """Return the chair receiving the last of m sweets handed out from chair s of n."""
    return (m + s - 1) % n or n


def squares_in_range(a: int, b: int) -> int:
    """Count the perfect squares in [a, b]."""
    low = math.isqrt(a)
    if low * low < a:
        low += 1
    return max(0, math.isqrt(b) - low + 1)


def utopian_tree_height(n: int) -> int:
    """Return the tree's height after n growth cycles, starting at 1."""
    height = 1
    for cycle in range(1, n + 1):
        height = height * 2 if cycle % 2 else height + 1
    return height


def day_of_programmer(year: int) -> str:
    """Return the date of the 256th day of the year as dd.mm.yyyy in the Russian calendar."""
    if year == 1918:
        return "26.09.1918"
    leap = (
        (year < 1918 and year % 4 == 0)
        or (year % 4 == 0 and year % 100 != 0)
        or year % 400 == 0
    )
    return f"{12 if leap else 13}.09.{year}"


def library_fine(d1: int, m1: int, y1: int, d2: int, m2: int, y2: int) -> int:
    """Return the fine for returning a book on d1/m1/y1 that was due on d2/m2/y2."""
    if d1 > d2 and m1 == m2 and y1 == y2:
        return 15 * (d1 - d2)
    if m1 > m2 and y1 == y2:
        return 500 * (m1 - m2)
    if y1 > y2:
        return 10000
    return 0


def manasa_stones(n: int, a: int, b: int) -> list[int]:
    """Return, in ascending order, every possible value of the last of n stones."""
    if n < 1:
        raise ValueError("there must be at least one stone")
    return sorted({a * i + b * (n - 1 - i) for i in range(n)})