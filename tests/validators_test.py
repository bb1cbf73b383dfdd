import pytest

from minigames.exceptions import PuzzleInputError
from minigames.validators import (
    attacking_pairs, cards_match, count_queens, editable_cells, is_memory_cleared,
    is_solved, is_valid_solution, sum_matches
)

SOLVED = [
    [1, 2, 3, 4, 5, 6],
    [4, 5, 6, 1, 2, 3],
    [2, 3, 1, 5, 6, 4],
    [5, 6, 4, 2, 3, 1],
    [3, 1, 2, 6, 4, 5],
    [6, 4, 5, 3, 1, 2],
]


def queens_board(columns):
    n = len(columns)
    board = [[0] * n for _ in range(n)]
    for r, c in enumerate(columns):
        board[r][c] = 1
    return board


# ---------- Sudoku ----------


def test_complete_legal_grid_is_solved():
    assert is_solved(SOLVED)


def test_any_empty_cell_means_not_solved():
    for marker in (0, None):
        grid = [row[:] for row in SOLVED]
        grid[4][2] = marker
        assert not is_solved(grid)


def test_full_grid_with_repeat_is_not_solved():
    grid = [row[:] for row in SOLVED]
    grid[0][0], grid[0][1] = grid[0][1], grid[0][0]  # rows stay fine, columns break
    assert not is_solved(grid)


def test_other_legal_completion_also_wins():
    # Relabelling every digit gives a different, still legal grid.
    relabel = {1: 2, 2: 3, 3: 4, 4: 5, 5: 6, 6: 1}
    grid = [[relabel[v] for v in row] for row in SOLVED]
    assert grid != SOLVED
    assert is_solved(grid)


def test_validation_is_idempotent():
    grid = [row[:] for row in SOLVED]
    grid[5][5] = 0
    assert is_solved(SOLVED) == is_solved(SOLVED)
    assert is_solved(grid) == is_solved(grid)
    assert grid[5][5] == 0


def test_out_of_range_value_is_rejected():
    grid = [row[:] for row in SOLVED]
    grid[2][3] = 7
    with pytest.raises(PuzzleInputError):
        is_solved(grid)


def test_out_of_range_value_is_rejected_even_beside_empty_cells():
    grid = [row[:] for row in SOLVED]
    grid[0][0] = 0
    grid[5][5] = -1
    with pytest.raises(PuzzleInputError):
        is_solved(grid)


def test_wrong_shape_is_rejected():
    with pytest.raises(PuzzleInputError):
        is_solved([row[:5] for row in SOLVED])
    with pytest.raises(PuzzleInputError):
        is_solved(SOLVED[:5])


def test_editable_cells_lists_cleared_positions():
    grid = [row[:] for row in SOLVED]
    grid[0][1] = 0
    grid[3][4] = None
    assert editable_cells(grid) == [(0, 1), (3, 4)]


# ---------- N-Queens ----------


def test_canonical_eight_queens_is_solved():
    assert is_valid_solution(queens_board([0, 4, 7, 5, 2, 6, 1, 3]), 8)


def test_main_diagonal_is_not_solved():
    board = queens_board([0, 1, 2, 3, 4, 5, 6, 7])
    assert count_queens(board) == 8
    assert not is_valid_solution(board, 8)


def test_too_few_safe_queens_is_not_solved():
    board = [[0] * 8 for _ in range(8)]
    for r, c in [(0, 0), (1, 2), (2, 4)]:
        board[r][c] = 1
    assert attacking_pairs(board) == []
    assert not is_valid_solution(board, 8)


def test_too_many_queens_is_not_solved():
    board = queens_board([0, 4, 7, 5, 2, 6, 1, 3])
    board[7][7] = 1
    assert count_queens(board) == 9
    assert not is_valid_solution(board, 8)


def test_queens_sharing_a_row_are_not_solved():
    board = [[0] * 8 for _ in range(8)]
    board[0] = [1] * 8
    assert not is_valid_solution(board, 8)


def test_attacking_pairs_reports_conflicts():
    board = [[0] * 8 for _ in range(8)]
    board[0][0] = 1
    board[2][2] = 1
    board[1][5] = 1
    assert attacking_pairs(board) == [((0, 0), (2, 2))]


def test_board_size_mismatch_is_rejected():
    with pytest.raises(PuzzleInputError):
        is_valid_solution(queens_board([0, 4, 7, 5, 2, 6, 1, 3]), 6)
    with pytest.raises(PuzzleInputError):
        is_valid_solution([[0]], 0)


def test_queens_cells_must_be_zero_or_one():
    board = queens_board([0, 4, 7, 5, 2, 6, 1, 3])
    board[0][1] = 2
    with pytest.raises(PuzzleInputError):
        is_valid_solution(board, 8)


# ---------- Zip ----------


def test_sum_matches_target():
    assert sum_matches([3, 5, 7, 2, 9, 1], [0, 3], 5)


def test_sum_misses_target():
    assert not sum_matches([3, 5, 7, 2, 9, 1], [0, 1], 5)


def test_more_than_two_numbers_may_reach_target():
    assert sum_matches([3, 5, 7, 2, 9, 1], [0, 3, 5], 6)


def test_empty_selection_only_matches_zero():
    assert not sum_matches([3, 5, 7, 2, 9, 1], [], 5)


@pytest.mark.parametrize("selected", [[6], [-1], [0, 0], ["1"]])
def test_bad_selection_is_rejected(selected):
    with pytest.raises(PuzzleInputError):
        sum_matches([3, 5, 7, 2, 9, 1], selected, 5)


# ---------- Memory Match ----------


CARDS = [
    {'id': 'a', 'value': 'cat'},
    {'id': 'b', 'value': 'fish'},
    {'id': 'c', 'value': 'cat'},
    {'id': 'd', 'value': 'fish'},
]


def test_matching_cards():
    assert cards_match(CARDS, 'a', 'c')
    assert not cards_match(CARDS, 'a', 'b')
    assert not cards_match(CARDS, 'a', 'a')
    assert not cards_match(CARDS, 'a', 'zzz')


def test_memory_cleared_only_when_every_card_matched():
    assert not is_memory_cleared(CARDS, ['a', 'c'])
    assert is_memory_cleared(CARDS, ['a', 'b', 'c', 'd'])
