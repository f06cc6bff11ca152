"""**********************************************************************************
 * Title: puzzle_data.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This file defines the PuzzleData class, the single source of truth for one
 * play session. It holds the grid configuration, the fixed region partition,
 * the player's grid and the solver's star placement, together with the small
 * amount of session bookkeeping (difficulty label, hints used, whether the
 * puzzle still accepts moves). It also produces the read-only snapshot that
 * is handed to the host after every mutation.
 **********************************************************************************"""

# --- IMPORTS ---
from starlogic import validator
from starlogic.constants import (
    CellState, STARS_PER_AREA, DEFAULT_DIFFICULTY
)

# --- CLASS DEFINITION ---
class PuzzleData:
    """
    Contains all data for a single puzzle instance.

    The region partition and the solution are written once by the assembler;
    the player grid is mutated by user actions and by the auto-mark pass.
    """
    def __init__(self, size, difficulty=DEFAULT_DIFFICULTY):
        """
        Creates a new, empty puzzle instance for an N x N grid.

        :param int size: The dimension of the grid (e.g., 5, 6 or 8).
        :param str difficulty: The display label chosen by the host.
        """
        self.grid_size = size
        self.stars_per_area = STARS_PER_AREA
        self.region_count = size
        self.difficulty = difficulty

        self.regions = [[0] * size for _ in range(size)]
        self.user_grid = [[CellState.EMPTY] * size for _ in range(size)]
        self.solution_grid = [[0] * size for _ in range(size)]

        self.hints_used = 0
        self.is_active = False
        self.is_revealed = False

    def reset(self):
        """Resets the player grid to all empty cells. Regions and solution are kept."""
        self.user_grid = [[CellState.EMPTY] * self.grid_size for _ in range(self.grid_size)]
        self.is_revealed = False

    def get_region(self, row, col):
        """
        Gets the region id of a cell.

        :returns: The region id, or -1 if the coordinate is outside the grid.
        :rtype: int
        """
        if self.is_in_bounds(row, col):
            return self.regions[row][col]
        return -1

    def is_in_bounds(self, row, col):
        return 0 <= row < self.grid_size and 0 <= col < self.grid_size

    def cells(self):
        """Yields every (row, col) coordinate in row-major order."""
        for r in range(self.grid_size):
            for c in range(self.grid_size):
                yield r, c

    def snapshot(self):
        """
        Builds a read-only, JSON-ready view of the current puzzle state.

        Grids are returned as tuples so the host cannot write back into the
        session. The solution is only included once it has been revealed.

        :returns: A dictionary describing the puzzle as the host should render it.
        :rtype: dict
        """
        placed, required = validator.progress(self)
        view = {
            'gridSize': self.grid_size,
            'starsPerArea': self.stars_per_area,
            'regionCount': self.region_count,
            'difficulty': self.difficulty,
            'regions': tuple(tuple(row) for row in self.regions),
            'userGrid': tuple(tuple(CellState(cell).name for cell in row) for row in self.user_grid),
            'errorCells': tuple(validator.find_error_cells(self)),
            'progress': {'placed': placed, 'required': required},
            'status': validator.puzzle_status(self),
            'isActive': self.is_active,
            'hintsUsed': self.hints_used,
        }
        if self.is_revealed:
            view['solutionGrid'] = tuple(tuple(row) for row in self.solution_grid)
        return view
