"""**********************************************************************************
 * Title: validators.py
 * -------------------------------------------------------------------------------
 * Description:
 * Win checks for every game. A Sudoku grid is solved once it is full and no
 * value repeats in a row, column or box; it is never compared against the
 * generated solution, so any legal completion wins. An N-Queens board is
 * solved with exactly N mutually safe queens. A Zip selection wins when its
 * numbers add up to the target. These functions are pure and run on every
 * player edit, so they neither log nor keep state. Malformed input raises
 * PuzzleInputError; an unfinished or conflicting board is simply unsolved.
 **********************************************************************************"""

from itertools import combinations

from minigames.constants import STATE_EMPTY, STATE_QUEEN
from minigames.exceptions import PuzzleInputError
from minigames.rules import SUDOKU_6X6, QUEENS, QueensRules, check_board_size, check_square_grid, is_int


# --- SUDOKU ---
def is_solved(grid, rules=SUDOKU_6X6):
    """
    Reports whether a Sudoku grid is complete and legal.

    :param list[list[int | None]] grid: The player's grid; 0 or None marks an empty cell.
    :param SudokuRules rules: The board geometry.
    :returns: True only for a full grid with no repeated value in any row, column or box.
    :rtype: bool
    :raises PuzzleInputError: If the grid has the wrong shape or a value outside 0..N.
    """
    check_square_grid(grid, rules.size)
    has_empty = False
    for row in grid:
        for value in row:
            if value is None or value == STATE_EMPTY:
                has_empty = True
            elif not is_int(value) or not 1 <= value <= rules.size:
                raise PuzzleInputError(f"Cell value {value!r} is outside 1..{rules.size}.")
    if has_empty: return False
    return all(
        rules.is_legal(grid, r, c, grid[r][c])
        for r in range(rules.size) for c in range(rules.size)
    )


def editable_cells(player_grid):
    """Lists the (row, col) cells cleared by the mask, in row-major order."""
    check_square_grid(player_grid)
    return [
        (r, c) for r, row in enumerate(player_grid) for c, value in enumerate(row)
        if value is None or value == STATE_EMPTY
    ]


# --- N-QUEENS ---
def check_queens_board(board, board_size):
    """Rejects a board that is not board_size x board_size of 0/1 cells, or an unsupported size."""
    check_board_size(board_size)
    check_square_grid(board, board_size)
    for row in board:
        for value in row:
            if value not in (STATE_EMPTY, STATE_QUEEN) or isinstance(value, bool):
                raise PuzzleInputError(f"Queens cells must be 0 or 1, got {value!r}.")


def queen_positions(board):
    return [(r, c) for r, row in enumerate(board) for c, value in enumerate(row) if value == STATE_QUEEN]


def count_queens(board):
    return sum(1 for row in board for value in row if value == STATE_QUEEN)


def attacking_pairs(board):
    """
    Lists every pair of queens that attack each other.

    :param list[list[int]] board: A square board of 0/1 cells.
    :returns: Pairs of (row, col) positions, each pair in row-major order.
    :rtype: list[tuple[tuple[int, int], tuple[int, int]]]
    """
    check_square_grid(board)
    return [
        (a, b) for a, b in combinations(queen_positions(board), 2)
        if QueensRules.attacks(a[0], a[1], b[0], b[1])
    ]


def is_valid_solution(board, board_size):
    """
    Reports whether an N-Queens board is solved.

    The queen count is checked first; a board with any other number of
    queens than `board_size` is unsolved however its queens sit.

    :param list[list[int]] board: A board_size x board_size grid of 0/1 cells.
    :param int board_size: The required number of queens and board dimension.
    :returns: True for exactly board_size queens with no two attacking.
    :rtype: bool
    :raises PuzzleInputError: If the board does not match board_size or holds other values.
    """
    check_queens_board(board, board_size)
    if count_queens(board) != board_size: return False
    return all(QUEENS.is_legal(board, r, c, STATE_QUEEN) for r, c in queen_positions(board))


# --- ZIP (TARGET-SUM) ---
def sum_matches(numbers, selected_indices, target):
    """
    Checks whether the selected numbers add up to the target exactly.

    :param list[int] numbers: The round's numbers.
    :param list[int] selected_indices: Positions picked by the player; each at most once.
    :param int target: The sum to reach.
    :returns: True if the selected numbers sum to target.
    :rtype: bool
    :raises PuzzleInputError: If an index is out of bounds, negative, repeated or not an int.
    """
    if not isinstance(numbers, (list, tuple)) or not all(is_int(n) for n in numbers):
        raise PuzzleInputError("Numbers must be a list of integers.")
    if not is_int(target):
        raise PuzzleInputError(f"Target must be an integer, got {target!r}.")
    if not isinstance(selected_indices, (list, tuple)):
        raise PuzzleInputError("Selection must be a list of indices.")
    seen = set()
    for idx in selected_indices:
        if not is_int(idx) or not 0 <= idx < len(numbers):
            raise PuzzleInputError(f"Selected index {idx!r} is out of bounds for {len(numbers)} numbers.")
        if idx in seen:
            raise PuzzleInputError(f"Index {idx} was selected more than once.")
        seen.add(idx)
    return sum(numbers[idx] for idx in selected_indices) == target


# --- MEMORY MATCH ---
def cards_match(cards, first_id, second_id):
    """True if two different cards in the deck show the same symbol."""
    if first_id == second_id: return False
    by_id = {card['id']: card for card in cards}
    first, second = by_id.get(first_id), by_id.get(second_id)
    if first is None or second is None: return False
    return first['value'] == second['value']


def is_memory_cleared(cards, matched_ids):
    matched = set(matched_ids)
    return all(card['id'] in matched for card in cards)
