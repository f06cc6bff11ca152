"""**********************************************************************************
 * Title: puzzle_handler.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This module assembles new puzzles. It pairs the region generator with the
 * backtracking solver, retrying with fresh regions until a partition both
 * generates and solves, and bakes the solution into a new PuzzleData
 * instance. Optionally, each candidate partition is also checked with the Z3
 * model so that only puzzles with a single solution are accepted. It also
 * provides a terminal renderer used for debug output and by the CLI.
 **********************************************************************************"""

# --- IMPORTS ---
import time
import logging

from starlogic.constants import (
    SUPPORTED_GRID_SIZES, DIFFICULTIES, DEFAULT_DIFFICULTY, PUZZLE_DEFINITIONS,
    ASSEMBLY_ATTEMPT_LIMIT, BASE64_DISPLAY_ALPHABET, STAR_SYMBOL
)
from starlogic.puzzle_data import PuzzleData
from starlogic.puzzle_solver import solve
from starlogic.region_generator import generate_regions
from starlogic.z3_solver import Z3StarBattleSolver, format_duration

# --- PUZZLE ASSEMBLY ---
def assemble_puzzle(grid_size, difficulty=DEFAULT_DIFFICULTY, require_unique=False,
                    max_attempts=ASSEMBLY_ATTEMPT_LIMIT):
    """
    Builds a solvable puzzle of the requested size.

    Each attempt generates a fresh region partition and runs the solver on
    it. Partitions that fail to generate, cannot be solved or (when
    require_unique is set) admit more than one solution are thrown away.

    :param int grid_size: The dimension of the grid.
    :param str difficulty: The display label stored on the puzzle.
    :param bool require_unique: Reject partitions with several solutions.
    :param int max_attempts: The number of attempts before giving up.
    :returns: A ready-to-play PuzzleData, or None if every attempt failed.
    :rtype: PuzzleData | None
    """
    logging.info(f"Generating a {grid_size}x{grid_size} {difficulty} puzzle...")
    start_time = time.monotonic()

    for attempt in range(1, max_attempts + 1):
        puzzle = PuzzleData(grid_size, difficulty)
        regions = generate_regions(grid_size, puzzle.region_count)
        if regions is None:
            logging.debug(f"Attempt #{attempt}: region generation failed.")
            continue

        puzzle.regions = regions
        solution = solve(regions, grid_size, puzzle.stars_per_area)
        if solution is None:
            logging.debug(f"Attempt #{attempt}: partition has no legal placement, discarding.")
            continue

        if require_unique:
            num_solutions = Z3StarBattleSolver(regions, puzzle.stars_per_area).count_solutions()
            if num_solutions != 1:
                logging.debug(f"Attempt #{attempt}: discarding partition with {num_solutions} solutions.")
                continue

        puzzle.solution_grid = solution
        puzzle.reset()
        puzzle.is_active = True
        logging.info(f"Puzzle ready after {attempt} attempt(s) in {format_duration(time.monotonic() - start_time)}.")
        logging.debug(display_terminal_grid(regions, "Generated Puzzle", solution))
        return puzzle

    logging.error(f"Could not generate a {grid_size}x{grid_size} puzzle after {max_attempts} attempts.")
    return None

def new_puzzle(grid_size, difficulty=DEFAULT_DIFFICULTY, require_unique=False):
    """
    Host entry point for a new game: validates the request, then assembles.

    :returns: A PuzzleData, or None when assembly is exhausted (the host should
              offer a retry).
    :rtype: PuzzleData | None
    :raises ValueError: If the grid size or difficulty is not offered.
    """
    if grid_size not in SUPPORTED_GRID_SIZES:
        raise ValueError(f"Unsupported grid size {grid_size}; choose one of {SUPPORTED_GRID_SIZES}.")
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty '{difficulty}'; choose one of {DIFFICULTIES}.")
    return assemble_puzzle(grid_size, difficulty, require_unique=require_unique)

def new_puzzle_from_definition(size_id, require_unique=False):
    """
    Creates a puzzle from an entry of PUZZLE_DEFINITIONS.

    :param int size_id: The index into PUZZLE_DEFINITIONS.
    :rtype: PuzzleData | None
    :raises ValueError: If size_id is out of range.
    """
    if not 0 <= size_id < len(PUZZLE_DEFINITIONS):
        raise ValueError(f"Invalid size_id {size_id}")
    definition = PUZZLE_DEFINITIONS[size_id]
    return new_puzzle(definition['dim'], definition['difficulty'], require_unique=require_unique)

# --- DISPLAY ---
def display_terminal_grid(grid, title, content_grid=None):
    """
    Renders a region grid as text, one symbol per cell.

    :param list[list[int]] grid: The 2D region grid.
    :param str title: A heading printed above the grid.
    :param list[list[int]] | None content_grid: An optional 0/1 star grid;
           starred cells are drawn with STAR_SYMBOL instead of their region.
    :returns: The rendered multi-line string.
    :rtype: str
    """
    if not grid: return ""
    dim = len(grid)
    lines = [f"--- {title} ---"]
    for r in range(dim):
        row_str = []
        for c in range(dim):
            region_id = grid[r][c]
            symbol = STAR_SYMBOL if content_grid and content_grid[r][c] == 1 else BASE64_DISPLAY_ALPHABET[region_id % len(BASE64_DISPLAY_ALPHABET)]
            row_str.append(f"{symbol:^3}")
        lines.append("".join(row_str))
    lines.append("-" * (dim * 3))
    return "\n".join(lines)
