# tests/conftest.py
import random

import pytest

from starlogic.puzzle_data import PuzzleData
from starlogic.puzzle_solver import solve
from starlogic.region_generator import generate_regions


# The only legal placement is columns 1, 3, 0, 2; placing 2, 0, 3, 1 puts two
# stars in region 0.
UNIQUE_4X4 = [
    [0, 0, 0, 1],
    [0, 1, 1, 1],
    [2, 2, 3, 3],
    [2, 2, 3, 3],
]


def column_regions(size):
    """Region id equals column index: every column is one region."""
    return [[c for c in range(size)] for _ in range(size)]


def row_regions(size):
    """Region id equals row index: every row is one region."""
    return [[r] * size for r in range(size)]


def generated_regions(size, region_count=None, max_calls=50):
    """Calls generate_regions until one call succeeds; a single call may legitimately give up."""
    for _ in range(max_calls):
        regions = generate_regions(size, region_count or size)
        if regions is not None:
            return regions
    pytest.fail(f"no {size}x{size} partition after {max_calls} calls")


def make_puzzle(regions, solution=None, active=True):
    """Builds a PuzzleData around a fixed partition, solving it when no solution is given."""
    size = len(regions)
    puzzle = PuzzleData(size)
    puzzle.regions = [list(row) for row in regions]
    puzzle.solution_grid = solution if solution is not None else solve(regions, size)
    puzzle.is_active = active
    return puzzle


@pytest.fixture
def seeded():
    random.seed(1234)
    yield
    random.seed()


@pytest.fixture
def five_by_five():
    """5x5 puzzle whose regions are the columns; its first solution is columns 0, 2, 4, 1, 3."""
    return make_puzzle(column_regions(5))


@pytest.fixture
def six_by_six_rows():
    """6x6 puzzle whose regions are the rows, with an empty solution grid."""
    return make_puzzle(row_regions(6), solution=[[0] * 6 for _ in range(6)])
