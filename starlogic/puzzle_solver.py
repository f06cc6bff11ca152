"""**********************************************************************************
 * Title: puzzle_solver.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * A depth-first backtracking solver that finds a legal star placement for a
 * region partition. Cells are tried in row-major order and the first full
 * placement found is returned, so the result is fully determined by the
 * partition. Row, column and region star counts are kept incrementally and
 * restored on every backtrack.
 *
 * Two prunings keep the search fast without changing which placement is
 * found first: stars are only tried after the previously placed one in scan
 * order, and a branch is abandoned as soon as the scan moves past a row that
 * still needs stars, since no later placement can ever fill it.
 **********************************************************************************"""

# --- IMPORTS ---
from starlogic.constants import STARS_PER_AREA

# All eight neighbours of a cell, orthogonal and diagonal.
NEIGHBOUR_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if not (dr == 0 and dc == 0)]

def solve(region_grid, grid_size=None, stars_per_area=STARS_PER_AREA):
    """
    Finds the first legal star placement for a region partition.

    :param list[list[int]] region_grid: The 2D region grid (ids in [0, grid_size)).
    :param int | None grid_size: The grid dimension; defaults to len(region_grid).
    :param int stars_per_area: Stars required in every row, column and region.
    :returns: A 2D list with 1 where a star is placed and 0 elsewhere, or None
              if the partition admits no legal placement.
    :rtype: list[list[int]] | None
    """
    dim = grid_size if grid_size is not None else len(region_grid)
    grid = [[0] * dim for _ in range(dim)]
    row_counts, col_counts = [0] * dim, [0] * dim
    region_counts = {}
    for row in region_grid:
        for region_id in row:
            region_counts[region_id] = 0
    total_needed = dim * stars_per_area

    def is_safe(r, c):
        if row_counts[r] >= stars_per_area or col_counts[c] >= stars_per_area: return False
        if region_counts[region_grid[r][c]] >= stars_per_area: return False
        for dr, dc in NEIGHBOUR_OFFSETS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < dim and 0 <= nc < dim and grid[nr][nc] == 1: return False
        return True

    def place(r, c, delta):
        grid[r][c] = 1 if delta > 0 else 0
        row_counts[r] += delta
        col_counts[c] += delta
        region_counts[region_grid[r][c]] += delta

    def solve_recursive(stars_placed, start_index):
        if stars_placed == total_needed:
            return True

        for cell_index in range(start_index, dim * dim):
            r, c = divmod(cell_index, dim)
            # Row r-1 can no longer receive a star.
            if c == 0 and r > 0 and row_counts[r - 1] < stars_per_area:
                return False
            if not is_safe(r, c):
                continue

            place(r, c, 1)
            if solve_recursive(stars_placed + 1, cell_index + 1):
                return True
            place(r, c, -1)  # backtrack

        return False

    if solve_recursive(0, 0):
        return grid
    return None

def is_valid_solution(region_grid, solution_grid, stars_per_area=STARS_PER_AREA):
    """
    Checks a placement against every rule: the right number of stars in each
    row, column and region, and no two stars touching (diagonals included).

    :param list[list[int]] region_grid: The 2D region grid.
    :param list[list[int]] solution_grid: The 2D 0/1 placement.
    :rtype: bool
    """
    dim = len(region_grid)
    stars = [(r, c) for r in range(dim) for c in range(dim) if solution_grid[r][c]]
    if len(stars) != dim * stars_per_area:
        return False

    row_counts, col_counts, region_counts = [0] * dim, [0] * dim, {}
    for r, c in stars:
        row_counts[r] += 1
        col_counts[c] += 1
        region_counts[region_grid[r][c]] = region_counts.get(region_grid[r][c], 0) + 1
        for dr, dc in NEIGHBOUR_OFFSETS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < dim and 0 <= nc < dim and solution_grid[nr][nc]:
                return False

    region_ids = {region_id for row in region_grid for region_id in row}
    return (all(count == stars_per_area for count in row_counts)
            and all(count == stars_per_area for count in col_counts)
            and all(region_counts.get(region_id, 0) == stars_per_area for region_id in region_ids))
