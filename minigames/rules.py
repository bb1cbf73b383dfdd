"""**********************************************************************************
 * Title: rules.py
 * -------------------------------------------------------------------------------
 * Description:
 * Constraint predicates shared by the generators and the validators. Each
 * rule set answers one question: may this value stand at (row, col) given
 * the rest of the grid? Sudoku forbids a repeat in the row, the column or
 * the sub-box; N-Queens forbids two queens on a row, column or diagonal.
 * The cell under test is always excluded from its own check, so a value
 * already on the grid can be re-checked in place.
 **********************************************************************************"""

from minigames.constants import (
    STATE_EMPTY, STATE_QUEEN, SUDOKU_SIZE, SUDOKU_BOX_ROWS, SUDOKU_BOX_COLS, QUEENS_MAX_BOARD_SIZE
)
from minigames.exceptions import PuzzleInputError, PuzzleGenerationError


# --- GRID SHAPE HELPERS ---
def is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def check_board_size(board_size):
    """
    Ensures a queens board size is an integer in 1..QUEENS_MAX_BOARD_SIZE.

    :raises PuzzleInputError: For any other value.
    """
    if not is_int(board_size) or not 1 <= board_size <= QUEENS_MAX_BOARD_SIZE:
        raise PuzzleInputError(
            f"Board size must be an integer between 1 and {QUEENS_MAX_BOARD_SIZE}, got {board_size!r}."
        )
    return board_size


def check_square_grid(grid, size=None):
    """
    Ensures a grid is a square list of rows, optionally of a given size.

    :param list[list] grid: The grid to inspect.
    :param int | None size: The required dimension, if any.
    :returns: The dimension of the grid.
    :rtype: int
    :raises PuzzleInputError: If the grid is empty, ragged, not square, or the wrong size.
    """
    if not isinstance(grid, (list, tuple)) or not grid:
        raise PuzzleInputError("Grid must be a non-empty list of rows.")
    dim = len(grid)
    for row in grid:
        if not isinstance(row, (list, tuple)) or len(row) != dim:
            raise PuzzleInputError(f"Grid is not square: expected {dim} cells in every row.")
    if size is not None and dim != size:
        raise PuzzleInputError(f"Grid is {dim}x{dim} but the board size is {size}.")
    return dim


def copy_grid(grid):
    return [list(row) for row in grid]


def _check_cell(grid, row, col):
    dim = len(grid)
    if not (0 <= row < dim and 0 <= col < dim):
        raise PuzzleInputError(f"Cell ({row}, {col}) is outside the {dim}x{dim} grid.")


# --- RULE SETS ---
class SudokuRules:
    """Row, column and sub-box uniqueness for an N x N grid of values 1..N."""

    def __init__(self, size=SUDOKU_SIZE, box_rows=SUDOKU_BOX_ROWS, box_cols=SUDOKU_BOX_COLS):
        """
        :param int size: The grid dimension N.
        :param int box_rows: Height of each sub-box.
        :param int box_cols: Width of each sub-box.
        :raises PuzzleGenerationError: If the boxes do not tile the grid with N cells each.
        """
        if box_rows < 1 or box_cols < 1 or size % box_rows or size % box_cols or box_rows * box_cols != size:
            raise PuzzleGenerationError(
                f"A {box_rows}x{box_cols} box does not tile a {size}x{size} grid with {size} cells per box."
            )
        self.size, self.box_rows, self.box_cols = size, box_rows, box_cols

    def box_origin(self, row, col):
        return (row // self.box_rows) * self.box_rows, (col // self.box_cols) * self.box_cols

    def box_cells(self, row, col):
        """Yields every (r, c) in the sub-box holding (row, col)."""
        start_r, start_c = self.box_origin(row, col)
        for r in range(start_r, start_r + self.box_rows):
            for c in range(start_c, start_c + self.box_cols):
                yield r, c

    def is_legal(self, grid, row, col, value):
        if value == STATE_EMPTY or value is None: return True
        n = self.size
        if any(grid[row][j] == value for j in range(n) if j != col): return False
        if any(grid[i][col] == value for i in range(n) if i != row): return False
        for r, c in self.box_cells(row, col):
            if (r, c) != (row, col) and grid[r][c] == value: return False
        return True


class QueensRules:
    """No two queens may share a row, a column or a diagonal."""

    @staticmethod
    def attacks(r1, c1, r2, c2):
        return r1 == r2 or c1 == c2 or abs(r1 - r2) == abs(c1 - c2)

    def is_legal(self, grid, row, col, value):
        if value != STATE_QUEEN: return True
        dim = len(grid)
        for r in range(dim):
            for c in range(dim):
                if (r, c) == (row, col) or grid[r][c] != STATE_QUEEN: continue
                if self.attacks(row, col, r, c): return False
        return True


SUDOKU_6X6 = SudokuRules()
QUEENS = QueensRules()


def is_legal(grid, row, col, value, rule_set):
    """
    Checks whether `value` may stand at (row, col) under `rule_set`.

    The grid is never modified and the cell's current content is ignored.

    :param list[list[int]] grid: The current grid state.
    :param int row: Zero-based row index.
    :param int col: Zero-based column index.
    :param int value: The value (or queen state) under test.
    :param SudokuRules | QueensRules rule_set: The rules to apply.
    :returns: True if the placement breaks no rule.
    :rtype: bool
    :raises PuzzleInputError: If (row, col) lies outside the grid.
    """
    _check_cell(grid, row, col)
    return rule_set.is_legal(grid, row, col, value)
