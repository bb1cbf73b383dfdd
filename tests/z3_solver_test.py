import pytest

from minigames.constants import QUEENS_MAX_BOARD_SIZE
from minigames.exceptions import PuzzleInputError
from minigames.validators import is_solved, is_valid_solution
from minigames.z3_solver import Z3QueensSolver, Z3SudokuSolver, format_duration

SOLVED = [
    [1, 2, 3, 4, 5, 6],
    [4, 5, 6, 1, 2, 3],
    [2, 3, 1, 5, 6, 4],
    [5, 6, 4, 2, 3, 1],
    [3, 1, 2, 6, 4, 5],
    [6, 4, 5, 3, 1, 2],
]
CANONICAL = [0, 4, 7, 5, 2, 6, 1, 3]


# ---------- Sudoku ----------


def test_single_gap_has_unique_completion():
    grid = [row[:] for row in SOLVED]
    grid[2][4] = 0
    solutions, stats = Z3SudokuSolver(grid).solve()
    assert solutions == [SOLVED]
    assert 'solve_time' in stats


def test_empty_grid_has_many_completions():
    solutions, _ = Z3SudokuSolver([[0] * 6 for _ in range(6)]).solve()
    assert len(solutions) == 2
    assert solutions[0] != solutions[1]
    for solution in solutions:
        assert is_solved(solution)


def test_completion_keeps_givens():
    grid = [[0] * 6 for _ in range(6)]
    grid[0] = [6, 5, 4, 3, 2, 1]
    grid[5][5] = None
    solutions, _ = Z3SudokuSolver(grid).solve()
    assert solutions
    assert solutions[0][0] == [6, 5, 4, 3, 2, 1]
    assert is_solved(solutions[0])


def test_conflicting_givens_have_no_completion():
    grid = [[0] * 6 for _ in range(6)]
    grid[0][0] = grid[0][5] = 3
    solutions, _ = Z3SudokuSolver(grid).solve()
    assert solutions == []


def test_sudoku_solver_rejects_bad_grid():
    with pytest.raises(PuzzleInputError):
        Z3SudokuSolver([[0] * 4 for _ in range(4)])
    grid = [row[:] for row in SOLVED]
    grid[0][0] = 9
    with pytest.raises(PuzzleInputError):
        Z3SudokuSolver(grid)


def test_sudoku_solver_rejects_bool_cells():
    grid = [[0] * 6 for _ in range(6)]
    grid[0][0] = True
    with pytest.raises(PuzzleInputError):
        Z3SudokuSolver(grid)


# ---------- N-Queens ----------


def test_empty_eight_board_has_several_solutions():
    solutions, _ = Z3QueensSolver(8).solve()
    assert len(solutions) == 2
    for solution in solutions:
        assert is_valid_solution(solution, 8)


def test_seven_fixed_queens_force_the_last():
    board = [[0] * 8 for _ in range(8)]
    for r, c in enumerate(CANONICAL[:7]):
        board[r][c] = 1
    solutions, _ = Z3QueensSolver(8, board).solve()
    assert len(solutions) == 1
    assert solutions[0][7][CANONICAL[7]] == 1
    assert is_valid_solution(solutions[0], 8)


def test_unsolvable_sizes_return_no_solution():
    assert Z3QueensSolver(2).solve()[0] == []
    assert Z3QueensSolver(3).solve()[0] == []


def test_one_by_one_board():
    assert Z3QueensSolver(1).solve()[0] == [[[1]]]


def test_queens_solver_rejects_bad_size():
    with pytest.raises(PuzzleInputError):
        Z3QueensSolver(0)
    with pytest.raises(PuzzleInputError):
        Z3QueensSolver(8, [[0] * 6 for _ in range(6)])


def test_queens_solver_rejects_oversized_board():
    with pytest.raises(PuzzleInputError):
        Z3QueensSolver(QUEENS_MAX_BOARD_SIZE + 1)
    with pytest.raises(PuzzleInputError):
        Z3QueensSolver(True)


@pytest.mark.parametrize("cell", [2, -1, True, "1"])
def test_queens_solver_rejects_cells_other_than_zero_or_one(cell):
    board = [[0] * 8 for _ in range(8)]
    board[4][4] = cell
    with pytest.raises(PuzzleInputError):
        Z3QueensSolver(8, board)


# ---------- Helpers ----------


def test_format_duration():
    assert format_duration(0.0025) == "2.50 ms"
    assert format_duration(1.5) == "1.500 s"
    assert format_duration(90) == "1 min 30.00 s"
