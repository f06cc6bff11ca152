import random

import pytest

from conftest import generated_regions
from starlogic.region_generator import (
    generate_regions, is_valid_partition, is_region_connected, region_cells
)


def assert_balanced_and_connected(regions, size):
    assert len(regions) == size and all(len(row) == size for row in regions)
    cells = region_cells(regions)
    assert sorted(cells) == list(range(size))
    for members in cells.values():
        assert len(members) == size
        assert is_region_connected(members)
    assert is_valid_partition(regions, size)


@pytest.mark.parametrize("size", [5, 6])
def test_generated_partitions_are_balanced_and_connected(seeded, size):
    for _ in range(5):
        assert_balanced_and_connected(generated_regions(size), size)


def test_large_grid_gives_a_valid_partition_or_none(seeded):
    # Growth on 8x8 stalls far more often than it finishes.
    for _ in range(3):
        regions = generate_regions(8, 8, max_attempts=20)
        if regions is not None:
            assert_balanced_and_connected(regions, 8)


def test_every_cell_belongs_to_exactly_one_region(seeded):
    regions = generated_regions(6)
    all_cells = [cell for members in region_cells(regions).values() for cell in members]
    assert len(all_cells) == 36
    assert len(set(all_cells)) == 36


def test_fewer_regions_than_rows_still_split_evenly(seeded):
    regions = generated_regions(4, 2)
    assert is_valid_partition(regions, 2)


def test_uneven_split_is_rejected():
    with pytest.raises(ValueError):
        generate_regions(5, 3)


def test_returns_none_when_every_attempt_fails(monkeypatch):
    monkeypatch.setattr("starlogic.region_generator._try_generate_regions", lambda size, n: None)
    assert generate_regions(5, 5, max_attempts=3) is None


def test_same_seed_gives_same_partition():
    random.seed(99)
    first = generated_regions(6)
    random.seed(99)
    second = generated_regions(6)
    assert first == second


def test_connectivity_check_rejects_diagonal_only_contact():
    assert is_region_connected([(0, 0), (0, 1), (1, 1)])
    assert not is_region_connected([(0, 0), (1, 1)])


def test_partition_check_rejects_disconnected_region():
    regions = [
        [0, 1, 1],
        [1, 2, 0],
        [2, 2, 0],
    ]
    assert not is_valid_partition(regions, 3)
