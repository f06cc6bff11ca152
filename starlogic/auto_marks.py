"""**********************************************************************************
 * Title: auto_marks.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * Derives the automatic conflict marks (X marks) on the player's grid. Every
 * pass first wipes all existing X marks and then, for each star, marks every
 * empty cell in its row, its column and its eight neighbours. Because the
 * marks are rebuilt from the stars alone, running the pass twice gives the
 * same grid and the order of the stars does not matter. Player marks and
 * stars are never overwritten.
 **********************************************************************************"""

# --- IMPORTS ---
from starlogic.constants import CellState
from starlogic.puzzle_solver import NEIGHBOUR_OFFSETS

def regenerate_auto_marks(puzzle):
    """
    Recomputes every X mark on the player's grid from the current stars.

    :param PuzzleData puzzle: The puzzle instance; its user_grid is updated in place.
    """
    grid = puzzle.user_grid
    for r, c in puzzle.cells():
        if grid[r][c] == CellState.MARK_X:
            grid[r][c] = CellState.EMPTY

    for r, c in puzzle.cells():
        if grid[r][c] == CellState.STAR:
            apply_star_conflict_marks(puzzle, r, c)

def apply_star_conflict_marks(puzzle, star_row, star_col):
    """Marks the empty cells a star at (star_row, star_col) rules out."""
    size, grid = puzzle.grid_size, puzzle.user_grid

    threatened = [(star_row, c) for c in range(size) if c != star_col]
    threatened += [(r, star_col) for r in range(size) if r != star_row]
    threatened += [(star_row + dr, star_col + dc) for dr, dc in NEIGHBOUR_OFFSETS]

    for r, c in threatened:
        if puzzle.is_in_bounds(r, c) and grid[r][c] == CellState.EMPTY:
            grid[r][c] = CellState.MARK_X
