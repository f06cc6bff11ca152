"""**********************************************************************************
 * Title: region_generator.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This module generates the region partition of a puzzle. Regions are grown
 * from randomly placed seed cells by a randomized flood fill: at every step
 * one unassigned cell bordering a region that is not yet full is picked at
 * random and added to that region. When growth stalls before every region
 * reaches its target size the attempt is discarded and generation starts
 * again, up to a fixed number of attempts.
 **********************************************************************************"""

# --- IMPORTS ---
import random
import logging

from starlogic.constants import REGION_ATTEMPT_LIMIT

# 4-way adjacency (right, left, down, up)
ORTHOGONAL_DIRECTIONS = [(0, 1), (0, -1), (1, 0), (-1, 0)]
UNASSIGNED = -1

# --- REGION GENERATION ---
def generate_regions(grid_size, region_count, max_attempts=REGION_ATTEMPT_LIMIT):
    """
    Generates a grid of connected regions of equal size.

    :param int grid_size: The dimension of the grid (e.g., 6 for 6x6).
    :param int region_count: The number of regions to create. Must divide grid_size**2.
    :param int max_attempts: How many growth attempts to make before giving up.
    :returns: A 2D list mapping each cell to a region id in [0, region_count),
              or None if every attempt failed.
    :rtype: list[list[int]] | None
    :raises ValueError: If the cells cannot be split evenly between the regions.
    """
    if grid_size <= 0 or region_count <= 0:
        raise ValueError("Grid size and region count must be positive.")
    if (grid_size * grid_size) % region_count != 0:
        raise ValueError(f"{region_count} regions cannot evenly split a {grid_size}x{grid_size} grid.")

    for attempt in range(1, max_attempts + 1):
        grid = _try_generate_regions(grid_size, region_count)
        if grid is not None:
            logging.debug(f"Region partition found on attempt {attempt}.")
            return grid

    logging.warning(f"Failed to generate regions after {max_attempts} attempts")
    return None

def _try_generate_regions(size, n_regions):
    """
    Makes a single attempt at growing the regions.

    :returns: The region grid, or None if some region could not reach full size.
    :rtype: list[list[int]] | None
    """
    cells_per_region = (size * size) // n_regions
    grid = [[UNASSIGNED] * size for _ in range(size)]
    region_sizes = [0] * n_regions

    # Shuffle every coordinate and use the first n_regions as seeds
    all_cells = [(r, c) for r in range(size) for c in range(size)]
    random.shuffle(all_cells)
    seeds = all_cells[:n_regions]
    for region_id, (r, c) in enumerate(seeds):
        grid[r][c] = region_id
        region_sizes[region_id] = 1

    candidates = []
    for region_id, (r, c) in enumerate(seeds):
        _add_candidates(grid, candidates, r, c, region_id)

    while candidates:
        valid_candidates = [cand for cand in candidates if region_sizes[cand[2]] < cells_per_region]
        if not valid_candidates:
            break

        r, c, region_id = random.choice(valid_candidates)
        # A cell can be a candidate for several regions at once
        if grid[r][c] == UNASSIGNED:
            grid[r][c] = region_id
            region_sizes[region_id] += 1
            _add_candidates(grid, candidates, r, c, region_id)

        candidates = [cand for cand in candidates if (cand[0], cand[1]) != (r, c)]

    if any(region_size != cells_per_region for region_size in region_sizes):
        return None
    return grid

def _add_candidates(grid, candidates, r, c, region_id):
    """Adds the unassigned orthogonal neighbours of (r, c) as candidates for region_id."""
    size = len(grid)
    for dr, dc in ORTHOGONAL_DIRECTIONS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size and grid[nr][nc] == UNASSIGNED:
            candidate = (nr, nc, region_id)
            if candidate not in candidates:
                candidates.append(candidate)

# --- PARTITION CHECKS ---
def region_cells(region_grid):
    """
    Groups the cells of a region grid by region id.

    :param list[list[int]] region_grid: The 2D region grid.
    :returns: A dictionary mapping each region id to its list of (row, col) cells.
    :rtype: dict[int, list[tuple[int, int]]]
    """
    regions = {}
    for r, row in enumerate(region_grid):
        for c, region_id in enumerate(row):
            regions.setdefault(region_id, []).append((r, c))
    return regions

def is_region_connected(cells):
    """
    Checks that a set of cells forms one 4-connected component.

    :param list[tuple[int, int]] cells: The cells of a single region.
    :rtype: bool
    """
    if not cells:
        return False
    remaining = set(cells)
    stack = [cells[0]]
    remaining.discard(cells[0])
    while stack:
        r, c = stack.pop()
        for dr, dc in ORTHOGONAL_DIRECTIONS:
            neighbour = (r + dr, c + dc)
            if neighbour in remaining:
                remaining.discard(neighbour)
                stack.append(neighbour)
    return not remaining

def is_valid_partition(region_grid, region_count):
    """
    Checks the partition invariants: region_count regions with ids in
    [0, region_count), equal sizes, and each region 4-connected.

    :rtype: bool
    """
    size = len(region_grid)
    if size == 0 or any(len(row) != size for row in region_grid):
        return False
    regions = region_cells(region_grid)
    if sorted(regions) != list(range(region_count)):
        return False
    target = (size * size) // region_count
    return all(len(cells) == target and is_region_connected(cells) for cells in regions.values())
