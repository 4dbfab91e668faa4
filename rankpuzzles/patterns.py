"""Text and number patterns."""

from __future__ import annotations


def staircase(n: int) -> list[str]:
    """Return the rows of a right-aligned staircase of '#' with n steps."""
    return [" " * (n - step) + "#" * step for step in range(1, n + 1)]


def concentric_pattern(n: int) -> list[list[int]]:
    """Return the (2n-1)-square of numbers falling from n at the border to 1 at the centre."""
    if n < 1:
        return []
    centre = n - 1
    size = 2 * n - 1
    return [
        [1 + max(abs(row - centre), abs(col - centre)) for col in range(size)]
        for row in range(size)
    ]