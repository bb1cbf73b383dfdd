"""**********************************************************************************
 * Title: sudoku_generator.py
 * -------------------------------------------------------------------------------
 * Description:
 * Builds playable Sudoku grids in two steps. A randomized backtracking
 * search first fills an empty grid to a complete, legal solution; a mask
 * then clears a fixed number of distinct cells from a copy of it. The
 * search mutates one working grid in place and undoes each placement on
 * backtrack. Both steps accept an injectable random source so that tests
 * can seed them.
 **********************************************************************************"""

import logging
import random

from minigames.constants import STATE_EMPTY
from minigames.exceptions import PuzzleGenerationError, PuzzleInputError
from minigames.rules import SUDOKU_6X6, check_square_grid, copy_grid, is_int


# --- BACKTRACKING SOLVER ---
def _find_empty(grid):
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == STATE_EMPTY: return r, c
    return None


def _fill(grid, rules, rng):
    """
    Fills `grid` in place. Returns False when the current branch is a dead end,
    leaving the grid exactly as it was found.
    """
    cell = _find_empty(grid)
    if cell is None: return True
    r, c = cell
    candidates = list(range(1, rules.size + 1))
    rng.shuffle(candidates)
    for value in candidates:
        if rules.is_legal(grid, r, c, value):
            grid[r][c] = value
            if _fill(grid, rules, rng): return True
            grid[r][c] = STATE_EMPTY  # backtrack
    return False


def _check_givens(grid, rules):
    """
    Clears None cells to STATE_EMPTY in place and rejects givens that no
    completion could keep: values outside 1..N or repeats.
    """
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value is None:
                row[c] = STATE_EMPTY
            elif value != STATE_EMPTY and (not is_int(value) or not 1 <= value <= rules.size):
                raise PuzzleInputError(f"Cell value {value!r} at ({r}, {c}) is outside 1..{rules.size}.")
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value != STATE_EMPTY and not rules.is_legal(grid, r, c, value):
                raise PuzzleInputError(f"Given {value} at ({r}, {c}) repeats in its row, column or box.")


def solve_complete(grid=None, rules=SUDOKU_6X6, rng=None):
    """
    Completes a grid to a full legal solution with randomized backtracking.

    Cells are scanned in row-major order; each empty cell (0 or None) tries
    the values 1..N in a freshly shuffled order. The input grid is never modified.

    :param list[list[int]] | None grid: The starting grid, or None for an empty one.
    :param SudokuRules rules: The board geometry to fill.
    :param random.Random | None rng: Source of the shuffles; the module-level generator if None.
    :returns: A new, fully populated grid.
    :rtype: list[list[int]]
    :raises PuzzleInputError: If the grid has the wrong shape, or a given is out of range or repeated.
    :raises PuzzleGenerationError: If no completion exists from the given start.
    """
    rng = rng or random
    if grid is None:
        work = [[STATE_EMPTY] * rules.size for _ in range(rules.size)]
    else:
        check_square_grid(grid, rules.size)
        work = copy_grid(grid)
        _check_givens(work, rules)

    if not _fill(work, rules, rng):
        logging.critical(
            f"Backtracking exhausted every candidate for a {rules.size}x{rules.size} grid "
            f"with {rules.box_rows}x{rules.box_cols} boxes."
        )
        raise PuzzleGenerationError("Could not complete the Sudoku grid.")
    return work


# --- PUZZLE MASK ---
def mask_puzzle(solution_grid, removal_count, rng=None):
    """
    Clears exactly `removal_count` distinct cells from a copy of a solved grid.

    :param list[list[int]] solution_grid: A complete grid; left untouched.
    :param int removal_count: How many cells to clear; must leave at least one filled.
    :param random.Random | None rng: Source of the cell picks.
    :returns: The player-facing grid, with STATE_EMPTY in every cleared cell.
    :rtype: list[list[int]]
    :raises PuzzleInputError: If the count is negative or would clear the whole grid.
    """
    rng = rng or random
    dim = check_square_grid(solution_grid)
    if not isinstance(removal_count, int) or not 0 <= removal_count < dim * dim:
        raise PuzzleInputError(f"Removal count must be between 0 and {dim * dim - 1}, got {removal_count!r}.")

    puzzle = copy_grid(solution_grid)
    cleared = set()
    while len(cleared) < removal_count:
        cell = (rng.randrange(dim), rng.randrange(dim))
        if cell in cleared: continue  # re-roll
        cleared.add(cell)
        puzzle[cell[0]][cell[1]] = STATE_EMPTY
    return puzzle
