import pytest

from rankpuzzles.patterns import concentric_pattern, staircase


def test_staircase_small():
    assert staircase(3) == ["  #", " ##", "###"]


@pytest.mark.parametrize("n", [1, 4, 10])
def test_staircase_shape(n):
    rows = staircase(n)
    assert len(rows) == n
    assert all(len(row) == n for row in rows)
    assert all(row.endswith("#") for row in rows)
    assert [row.count("#") for row in rows] == list(range(1, n + 1))
    assert rows[-1] == "#" * n


def test_staircase_empty():
    assert staircase(0) == []


def test_concentric_pattern_small():
    assert concentric_pattern(2) == [[2, 2, 2], [2, 1, 2], [2, 2, 2]]


def test_concentric_pattern_one():
    assert concentric_pattern(1) == [[1]]


@pytest.mark.parametrize("n", [2, 4, 7])
def test_concentric_pattern_shape(n):
    grid = concentric_pattern(n)
    size = 2 * n - 1
    assert len(grid) == size
    assert all(len(row) == size for row in grid)
    assert grid[0] == [n] * size
    assert grid[-1] == [n] * size
    assert all(row[0] == n and row[-1] == n for row in grid)
    assert grid[n - 1][n - 1] == concentric_pattern(1)[0][0]


@pytest.mark.parametrize("n", [3, 5])
def test_concentric_pattern_symmetry(n):
    grid = concentric_pattern(n)
    assert grid == grid[::-1]
    assert all(row == row[::-1] for row in grid)
    assert grid == [list(col) for col in zip(*grid)]


def test_concentric_pattern_empty():
    assert concentric_pattern(0) == []