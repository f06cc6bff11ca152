"""**********************************************************************************
 * Title: validator.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * Rule checks on the player's grid. A star is illegal when it touches another
 * star (diagonals included) or when its row, column or region holds more
 * stars than allowed. The count check is strictly greater-than, so a lone
 * star is always legal and both stars of a pair are flagged together. The
 * module also reports progress, lists the conflicting stars for highlighting
 * and condenses everything into a single status for the host.
 **********************************************************************************"""

# --- IMPORTS ---
from starlogic.constants import (
    CellState, STATUS_SOLVED, STATUS_CONFLICT, STATUS_IN_PROGRESS
)
from starlogic.puzzle_solver import NEIGHBOUR_OFFSETS

# --- STAR COUNTING ---
def count_stars_in_row(puzzle, row):
    return sum(1 for cell in puzzle.user_grid[row] if cell == CellState.STAR)

def count_stars_in_column(puzzle, col):
    return sum(1 for row in puzzle.user_grid if row[col] == CellState.STAR)

def count_stars_in_region(puzzle, region_id):
    size = puzzle.grid_size
    return sum(1 for r in range(size) for c in range(size)
               if puzzle.regions[r][c] == region_id and puzzle.user_grid[r][c] == CellState.STAR)

def count_total_stars(puzzle):
    return sum(1 for row in puzzle.user_grid for cell in row if cell == CellState.STAR)

# --- PLACEMENT RULES ---
def is_legal_placement(puzzle, row, col):
    """
    Checks whether a star the player placed at (row, col) breaks a rule.

    :param PuzzleData puzzle: The puzzle instance.
    :param int row: The row of the star.
    :param int col: The column of the star.
    :returns: False if a neighbouring cell holds a star, or if the star's row,
              column or region holds more than stars_per_area stars.
    :rtype: bool
    """
    size = puzzle.grid_size
    for dr, dc in NEIGHBOUR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < size and 0 <= nc < size and puzzle.user_grid[nr][nc] == CellState.STAR:
            return False

    limit = puzzle.stars_per_area
    if count_stars_in_row(puzzle, row) > limit: return False
    if count_stars_in_column(puzzle, col) > limit: return False
    if count_stars_in_region(puzzle, puzzle.regions[row][col]) > limit: return False
    return True

def star_cells(puzzle):
    """Returns every (row, col) holding a star, in row-major order."""
    return [(r, c) for r, c in puzzle.cells() if puzzle.user_grid[r][c] == CellState.STAR]

def validate_all(puzzle):
    """True when no star on the player's grid breaks a rule."""
    return all(is_legal_placement(puzzle, r, c) for r, c in star_cells(puzzle))

def find_error_cells(puzzle):
    """
    Lists the stars that break a rule, for error highlighting.

    :rtype: list[tuple[int, int]]
    """
    return [(r, c) for r, c in star_cells(puzzle) if not is_legal_placement(puzzle, r, c)]

# --- PROGRESS AND COMPLETION ---
def progress(puzzle):
    """
    Reports how many stars are on the grid against how many are needed.

    :returns: A (placed, required) tuple.
    :rtype: tuple[int, int]
    """
    return count_total_stars(puzzle), puzzle.grid_size * puzzle.stars_per_area

def is_solved(puzzle):
    placed, required = progress(puzzle)
    return placed == required and validate_all(puzzle)

def puzzle_status(puzzle):
    """
    Condenses the grid into one of the status constants. Solved wins over
    conflict, conflict wins over plain progress.

    :rtype: str
    """
    placed, required = progress(puzzle)
    rules_valid = validate_all(puzzle)
    if placed == required and rules_valid:
        return STATUS_SOLVED
    if not rules_valid:
        return STATUS_CONFLICT
    return STATUS_IN_PROGRESS
