"""**********************************************************************************
 * Title: z3_solver.py
 * -------------------------------------------------------------------------------
 * Description:
 * Solves Sudoku and N-Queens boards with the Z3 theorem prover. Each solver
 * translates the game's rules into constraints, keeps whatever the player
 * has already placed, and asks Z3 for up to two models. A second model
 * means the position has more than one completion. These solvers back the
 * "reveal solution" actions; generation never depends on them.
 **********************************************************************************"""

# --- IMPORTS ---
import time

from z3 import Solver, Int, Bool, Distinct, And, Or, PbEq, PbLe, is_true, sat

from minigames.constants import STATE_EMPTY, STATE_QUEEN
from minigames.exceptions import PuzzleInputError
from minigames.rules import SUDOKU_6X6, check_board_size, check_square_grid, is_int
from minigames.validators import check_queens_board


# --- HELPER FUNCTIONS ---
def format_duration(seconds):
    """
    Formats a time duration in seconds into a more human-readable string.

    :param float seconds: The duration in seconds to format.
    :returns: The formatted time string (e.g., "1.234 s", "5.67 ms", "1 min 30.00 s").
    :rtype: str
    """
    if seconds >= 60: return f"{int(seconds//60)} min {seconds%60:.2f} s"
    if seconds >= 1: return f"{seconds:.3f} s"
    return f"{seconds*1000:.2f} ms"


def _first_two_models(s, grid_vars, read_cell, differs):
    """
    Collects up to two distinct solutions from a prepared solver.

    After the first model is read back, a clause forbidding that exact
    assignment is added and the solver is asked again.
    """
    solutions, start_time = [], time.monotonic()
    while len(solutions) < 2 and s.check() == sat:
        model = s.model()
        solution = [[read_cell(model, v) for v in row] for row in grid_vars]
        solutions.append(solution)
        s.add(Or([differs(v, solution[r][c]) for r, row in enumerate(grid_vars) for c, v in enumerate(row)]))
    return solutions, {'solve_time': format_duration(time.monotonic() - start_time)}


# --- SOLVER CLASSES ---
class Z3SudokuSolver:
    """Completes a partially filled Sudoku grid using the Z3 SMT solver."""

    def __init__(self, grid, rules=SUDOKU_6X6):
        """
        :param list[list[int | None]] grid: The player's grid; 0 or None marks an empty cell.
        :param SudokuRules rules: The board geometry.
        :raises PuzzleInputError: If the grid has the wrong shape or a value outside 0..N.
        """
        check_square_grid(grid, rules.size)
        for row in grid:
            for value in row:
                if value is not None and value != STATE_EMPTY and not (is_int(value) and 1 <= value <= rules.size):
                    raise PuzzleInputError(f"Cell value {value!r} is outside 1..{rules.size}.")
        self.grid, self.rules = grid, rules

    def solve(self):
        """
        Formulates the Sudoku constraints and uses Z3 to find up to two solutions.

        :returns: A tuple of the solutions found (complete grids) and a stats dictionary.
        :rtype: tuple[list[list[list[int]]], dict]
        """
        n = self.rules.size
        s = Solver()
        grid_vars = [[Int(f"c_{r}_{c}") for c in range(n)] for r in range(n)]

        for r in range(n):
            for c in range(n):
                s.add(And(grid_vars[r][c] >= 1, grid_vars[r][c] <= n))
                given = self.grid[r][c]
                if given: s.add(grid_vars[r][c] == given)

        # Rule: every value once per row, column and box
        for i in range(n):
            s.add(Distinct(grid_vars[i]))
            s.add(Distinct([grid_vars[r][i] for r in range(n)]))
        for box_r in range(0, n, self.rules.box_rows):
            for box_c in range(0, n, self.rules.box_cols):
                s.add(Distinct([grid_vars[r][c] for r, c in self.rules.box_cells(box_r, box_c)]))

        return _first_two_models(
            s, grid_vars,
            read_cell=lambda model, v: model.evaluate(v, model_completion=True).as_long(),
            differs=lambda v, value: v != value,
        )


class Z3QueensSolver:
    """Places N non-attacking queens, keeping any queens already on the board."""

    def __init__(self, board_size, board=None):
        """
        :param int board_size: The board dimension and number of queens.
        :param list[list[int]] | None board: Queens the solution must keep, if any.
        :raises PuzzleInputError: If the size is outside 1..QUEENS_MAX_BOARD_SIZE, or the board
                                  does not match it or holds cells other than 0/1.
        """
        check_board_size(board_size)
        if board is not None:
            check_queens_board(board, board_size)
        self.dim, self.board = board_size, board

    def solve(self):
        """
        Formulates the N-Queens constraints and uses Z3 to find up to two solutions.

        :returns: A tuple of the solutions found (0/1 boards) and a stats dictionary.
        :rtype: tuple[list[list[list[int]]], dict]
        """
        n = self.dim
        s = Solver()
        grid_vars = [[Bool(f"q_{r}_{c}") for c in range(n)] for r in range(n)]

        # Rule: exactly one queen per row and column
        for i in range(n):
            s.add(PbEq([(grid_vars[i][c], 1) for c in range(n)], 1))
            s.add(PbEq([(grid_vars[r][i], 1) for r in range(n)], 1))

        # Rule: at most one queen per diagonal and anti-diagonal
        for d in range(-(n - 1), n):
            diagonal = [(grid_vars[r][r - d], 1) for r in range(n) if 0 <= r - d < n]
            s.add(PbLe(diagonal, 1))
        for d in range(2 * n - 1):
            anti_diagonal = [(grid_vars[r][d - r], 1) for r in range(n) if 0 <= d - r < n]
            s.add(PbLe(anti_diagonal, 1))

        if self.board is not None:
            for r in range(n):
                for c in range(n):
                    if self.board[r][c] == STATE_QUEEN: s.add(grid_vars[r][c])

        return _first_two_models(
            s, grid_vars,
            read_cell=lambda model, v: STATE_QUEEN if is_true(model.evaluate(v, model_completion=True)) else STATE_EMPTY,
            differs=lambda v, value: v != bool(value),
        )
