"""**********************************************************************************
 * Title: constants.py
 * -------------------------------------------------------------------------------
 * Description:
 * Static data for the mini-games engine: cell states, the 6x6 Sudoku
 * geometry with its 2x3 boxes, the difficulty table mapping each level to
 * the number of cells cleared from a solved grid, the N-Queens board size,
 * the parameters of a Zip (target-sum) round and the memory-match deck.
 **********************************************************************************"""

from enum import Enum

# --- CELL STATE CONSTANTS ---
# A Sudoku cell holds 1..N, or EMPTY when cleared. A queens cell holds either state.
STATE_EMPTY = 0
STATE_QUEEN = 1

# --- SUDOKU GEOMETRY ---
SUDOKU_SIZE = 6
SUDOKU_BOX_ROWS = 2
SUDOKU_BOX_COLS = 3


class Difficulty(Enum):
    """Closed set of Sudoku difficulty levels."""
    EASY = 'easy'
    MEDIUM = 'medium'
    HARD = 'hard'


# Number of distinct cells cleared from the solved grid for each level.
REMOVAL_COUNTS = {
    Difficulty.EASY: 12,
    Difficulty.MEDIUM: 18,
    Difficulty.HARD: 24,
}

# --- N-QUEENS ---
QUEENS_BOARD_SIZE = 8
QUEENS_MAX_BOARD_SIZE = 32

# --- ZIP (TARGET-SUM) ROUND ---
ZIP_NUMBER_COUNT = 6
ZIP_MIN_NUMBER = 1
ZIP_MAX_NUMBER = 20
ZIP_TIME_LIMIT = 30  # seconds

# --- MEMORY MATCH ---
MEMORY_SYMBOLS = ['fish', 'cat', 'bone', 'heart_eyes', 'shrimp', 'paw']

# --- REWARDS ---
# Gems credited by the caller for any win.
GEMS_PER_WIN = 1
