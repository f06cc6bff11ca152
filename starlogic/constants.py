"""**********************************************************************************
 * Title: constants.py
 *
 * @version 1.0.0
 * -------------------------------------------------------------------------------
 * Description:
 * This file contains all the static data and constants for the Star Logic
 * Grid puzzle engine. It centralizes configuration values and definitions,
 * such as the cell state identifiers, the supported grid sizes and
 * difficulty labels, the retry ceilings used while generating puzzles, and
 * the status messages reported back to the host after every check.
 **********************************************************************************"""

# --- IMPORTS ---
from enum import IntEnum

# --- GAME STATE CONSTANTS ---
# Defines the possible states for a single cell on the player's grid.
class CellState(IntEnum):
    EMPTY = 0
    STAR = 1
    MARK_PLUS = 2  # Player-placed candidate mark, no rule meaning
    MARK_X = 3     # Auto-generated conflict mark, never set by the player

# --- PUZZLE DEFINITION CONSTANTS ---
# One star per row, column and region in this variant.
STARS_PER_AREA = 1

SUPPORTED_GRID_SIZES = (5, 6, 8)
DEFAULT_GRID_SIZE = 6

# Difficulty is a display label only; it does not change generation or solving.
DIFFICULTIES = ('Easy', 'Medium', 'Hard')
DEFAULT_DIFFICULTY = 'Medium'

# A list of dictionaries, where each dictionary defines a puzzle type offered
# to the host. The index of each entry serves as its 'size_id'.
PUZZLE_DEFINITIONS = [
    {'dim': dim, 'stars': STARS_PER_AREA, 'difficulty': difficulty}
    for dim in SUPPORTED_GRID_SIZES
    for difficulty in DIFFICULTIES
]

# --- GENERATION LIMITS ---
# Attempts made by the region generator before reporting failure.
REGION_ATTEMPT_LIMIT = 200

# Attempts made by the assembler (regions + solve) before giving up.
ASSEMBLY_ATTEMPT_LIMIT = 100

# Solutions the Z3 cross-check looks for when testing uniqueness.
UNIQUENESS_SOLUTION_LIMIT = 2

# --- CHECK STATUS CONSTANTS ---
STATUS_SOLVED = 'solved'
STATUS_CONFLICT = 'conflict'
STATUS_IN_PROGRESS = 'in_progress'

MESSAGE_GENERATION_FAILED = "Failed to generate puzzle. Please try again!"
MESSAGE_SOLVED = "Puzzle solved!"
MESSAGE_CONFLICT = "Some stars conflict! Check the red stars."
MESSAGE_ALL_STARS_PLACED = "All stars already placed!"
MESSAGE_PUZZLE_INACTIVE = "This puzzle is finished. Reset it or start a new one."

# --- SESSION CONSTANTS ---
# Play sessions the web host keeps in memory; the oldest is dropped past this.
MAX_SESSIONS = 256

# --- DISPLAY CONSTANTS ---
# The alphabet used for displaying region ids in the terminal.
BASE64_DISPLAY_ALPHABET = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_'
STAR_SYMBOL = '*'
