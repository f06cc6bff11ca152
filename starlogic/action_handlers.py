"""**********************************************************************************
 * Title: action_handlers.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * Contains the functions the host calls in response to player actions:
 * resetting the grid, clicking a cell, asking for a hint, revealing the
 * answer and checking the solution. Every handler takes the PuzzleData it
 * acts on explicitly, mutates it in place and refreshes the auto marks so the
 * next snapshot is consistent.
 **********************************************************************************"""

# --- IMPORTS ---
import logging

from starlogic import validator
from starlogic.auto_marks import regenerate_auto_marks
from starlogic.constants import (
    CellState, STATUS_SOLVED, STATUS_CONFLICT,
    MESSAGE_SOLVED, MESSAGE_CONFLICT
)

# Empty -> Plus -> Star -> Empty. Auto X marks count as empty.
CLICK_CYCLE = {
    CellState.EMPTY: CellState.MARK_PLUS,
    CellState.MARK_PLUS: CellState.STAR,
    CellState.STAR: CellState.EMPTY,
}

# --- PLAYER ACTIONS ---
def reset_puzzle(puzzle):
    """
    Clears every star and mark and re-opens the puzzle for play.

    :param PuzzleData puzzle: The puzzle instance.
    :returns: The same instance.
    :rtype: PuzzleData
    """
    puzzle.reset()
    regenerate_auto_marks(puzzle)
    puzzle.is_active = True
    logging.info("Puzzle reset.")
    return puzzle

def apply_cell_click(puzzle, row, col):
    """
    Cycles the state of the clicked cell, then refreshes marks and status.

    Clicks are ignored once the puzzle is solved or revealed.

    :param PuzzleData puzzle: The puzzle instance.
    :param int row: The clicked row.
    :param int col: The clicked column.
    :returns: The same instance.
    :rtype: PuzzleData
    :raises ValueError: If (row, col) is outside the grid.
    """
    if not puzzle.is_in_bounds(row, col):
        raise ValueError(f"Cell ({row}, {col}) is outside the {puzzle.grid_size}x{puzzle.grid_size} grid.")
    if not puzzle.is_active:
        return puzzle

    current_state = puzzle.user_grid[row][col]
    effective_state = CellState.EMPTY if current_state == CellState.MARK_X else current_state
    puzzle.user_grid[row][col] = CLICK_CYCLE.get(effective_state, CellState.EMPTY)

    regenerate_auto_marks(puzzle)
    check_solution(puzzle, show_errors=False)
    return puzzle

def request_hint(puzzle):
    """
    Places the first missing solution star, scanning in row-major order.

    :param PuzzleData puzzle: The puzzle instance.
    :returns: The (row, col) of the placed star, or None when every solution
              star is already on the grid or the puzzle is no longer active.
    :rtype: tuple[int, int] | None
    """
    if not puzzle.is_active:
        return None

    for r, c in puzzle.cells():
        if puzzle.solution_grid[r][c] == 1 and puzzle.user_grid[r][c] != CellState.STAR:
            puzzle.user_grid[r][c] = CellState.STAR
            puzzle.hints_used += 1
            regenerate_auto_marks(puzzle)
            logging.info(f"Hint {puzzle.hints_used}: star placed at row {r + 1}, column {c + 1}")
            check_solution(puzzle, show_errors=False)
            return r, c

    logging.info("No hint available: all stars already placed.")
    return None

def reveal_solution(puzzle):
    """
    Overwrites the player's grid with the stored solution and ends the game.

    :param PuzzleData puzzle: The puzzle instance.
    :returns: The same instance.
    :rtype: PuzzleData
    """
    for r, c in puzzle.cells():
        puzzle.user_grid[r][c] = CellState.STAR if puzzle.solution_grid[r][c] == 1 else CellState.EMPTY
    puzzle.is_active = False
    puzzle.is_revealed = True
    logging.info("Answer revealed.")
    return puzzle

def check_solution(puzzle, show_errors=True):
    """
    Evaluates the player's grid and ends the game once it is solved.

    :param PuzzleData puzzle: The puzzle instance.
    :param bool show_errors: Include the conflicting stars in the result.
    :returns: A dictionary with 'status', 'message', 'placed', 'required'
              and 'errorCells' keys.
    :rtype: dict
    """
    placed, required = validator.progress(puzzle)
    status = validator.puzzle_status(puzzle)
    error_cells = validator.find_error_cells(puzzle) if show_errors else []

    if status == STATUS_SOLVED:
        if puzzle.is_active:
            logging.info("Puzzle solved!")
        puzzle.is_active = False
        message = MESSAGE_SOLVED
    elif status == STATUS_CONFLICT:
        message = MESSAGE_CONFLICT
    else:
        message = f"Progress: {placed}/{required} stars placed"

    return {
        'status': status,
        'message': message,
        'placed': placed,
        'required': required,
        'errorCells': error_cells,
    }
