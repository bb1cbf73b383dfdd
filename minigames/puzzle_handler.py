"""**********************************************************************************
 * Title: puzzle_handler.py
 * -------------------------------------------------------------------------------
 * Description:
 * Entry points used by the game screens. Every function here starts or
 * checks one round of a mini game: a masked 6x6 Sudoku with its hidden
 * solution, an empty N-Queens board, a Zip target-sum round, or a shuffled
 * memory-match deck. Calls are independent of each other; the engine keeps
 * no state between them, and every grid handed back is a fresh copy owned
 * by the caller.
 **********************************************************************************"""

# --- IMPORTS ---
import logging
import random
import uuid

from minigames.constants import (
    STATE_EMPTY, STATE_QUEEN, Difficulty, REMOVAL_COUNTS, QUEENS_BOARD_SIZE,
    ZIP_NUMBER_COUNT, ZIP_MIN_NUMBER, ZIP_MAX_NUMBER, ZIP_TIME_LIMIT, MEMORY_SYMBOLS
)
from minigames.exceptions import PuzzleInputError
from minigames.rules import SUDOKU_6X6, check_board_size, check_square_grid, copy_grid
from minigames.sudoku_generator import solve_complete, mask_puzzle
from minigames.validators import is_solved, is_valid_solution, sum_matches
from minigames.z3_solver import Z3SudokuSolver, Z3QueensSolver


def parse_difficulty(difficulty):
    """
    Resolves a difficulty given as a Difficulty member or its name ('easy', 'medium', 'hard').

    :raises PuzzleInputError: For any other value.
    """
    if isinstance(difficulty, Difficulty): return difficulty
    try:
        return Difficulty(difficulty)
    except (ValueError, TypeError):
        raise PuzzleInputError(f"Unknown difficulty {difficulty!r}; expected one of easy, medium, hard.") from None


# --- SUDOKU ---
def generate_sudoku_puzzle(difficulty, rng=None):
    """
    Builds a new 6x6 Sudoku round.

    A complete grid is filled by randomized backtracking, then the number of
    cells set by the difficulty is cleared from a copy of it.

    :param Difficulty | str difficulty: The requested difficulty.
    :param random.Random | None rng: Optional seeded random source.
    :returns: A dict with 'player_grid' (0 marks an empty cell), 'solution_grid',
              'difficulty' and 'removal_count'.
    :rtype: dict
    :raises PuzzleInputError: If the difficulty is unknown.
    :raises PuzzleGenerationError: If the grid could not be completed.
    """
    level = parse_difficulty(difficulty)
    removal_count = REMOVAL_COUNTS[level]
    solution = solve_complete(rules=SUDOKU_6X6, rng=rng)
    player_grid = mask_puzzle(solution, removal_count, rng=rng)
    logging.info(f"Generated {level.value} Sudoku puzzle with {removal_count} cells cleared.")
    return {
        'player_grid': player_grid,
        'solution_grid': solution,
        'difficulty': level.value,
        'removal_count': removal_count,
    }


def check_sudoku(player_grid):
    return is_solved(player_grid, SUDOKU_6X6)


def solve_sudoku(player_grid):
    """
    Finds a legal completion of the player's grid with Z3.

    :param list[list[int | None]] player_grid: The current grid.
    :returns: A tuple of (solution or None, whether that completion is the only one).
    :rtype: tuple[list[list[int]] | None, bool]
    """
    solutions, stats = Z3SudokuSolver(player_grid, SUDOKU_6X6).solve()
    logging.info(f"Z3 Sudoku solve found {len(solutions)} solution(s) in {stats['solve_time']}.")
    if not solutions: return None, False
    return solutions[0], len(solutions) == 1


# --- N-QUEENS ---
def generate_queens_puzzle(board_size=QUEENS_BOARD_SIZE):
    """
    Returns an empty board_size x board_size board; the rules are the whole puzzle.

    :raises PuzzleInputError: If board_size is not an integer in 1..QUEENS_MAX_BOARD_SIZE.
    """
    check_board_size(board_size)
    logging.info(f"Generated empty {board_size}x{board_size} N-Queens board.")
    return {'board': [[STATE_EMPTY] * board_size for _ in range(board_size)]}


def validate_queens_solution(board, board_size=QUEENS_BOARD_SIZE):
    return is_valid_solution(board, board_size)


def toggle_queen(board, row, col):
    """
    Places or lifts a queen, returning a new board.

    :param list[list[int]] board: The current board; not modified.
    :param int row: Zero-based row index.
    :param int col: Zero-based column index.
    :returns: A copy of the board with the cell flipped between empty and queen.
    :rtype: list[list[int]]
    :raises PuzzleInputError: If the cell is outside the board.
    """
    dim = check_square_grid(board)
    if not (0 <= row < dim and 0 <= col < dim):
        raise PuzzleInputError(f"Cell ({row}, {col}) is outside the {dim}x{dim} board.")
    new_board = copy_grid(board)
    new_board[row][col] = STATE_EMPTY if board[row][col] == STATE_QUEEN else STATE_QUEEN
    return new_board


def solve_queens(board_size=QUEENS_BOARD_SIZE, board=None):
    """
    Finds a full placement of queens that keeps the queens already on `board`.

    :returns: A tuple of (solution or None, whether that placement is the only one).
    :rtype: tuple[list[list[int]] | None, bool]
    """
    solutions, stats = Z3QueensSolver(board_size, board).solve()
    logging.info(f"Z3 N-Queens solve found {len(solutions)} solution(s) in {stats['solve_time']}.")
    if not solutions: return None, False
    return solutions[0], len(solutions) == 1


# --- ZIP (TARGET-SUM) ---
def generate_zip_game(rng=None):
    """
    Builds one Zip round: six numbers in 1..20 and a reachable target.

    The target is the sum of two entries picked independently (with
    replacement), so at least one pair of picks always reaches it.

    :param random.Random | None rng: Optional seeded random source.
    :returns: A dict with 'target', 'numbers' and 'time_limit' (seconds).
    :rtype: dict
    """
    rng = rng or random
    numbers = [rng.randint(ZIP_MIN_NUMBER, ZIP_MAX_NUMBER) for _ in range(ZIP_NUMBER_COUNT)]
    target = rng.choice(numbers) + rng.choice(numbers)
    logging.info(f"Generated Zip round with target {target}.")
    return {'target': target, 'numbers': numbers, 'time_limit': ZIP_TIME_LIMIT}


def check_zip_solution(zip_round, selected_indices):
    return sum_matches(zip_round['numbers'], selected_indices, zip_round['target'])


# --- MEMORY MATCH ---
def generate_memory_game(rng=None):
    """
    Deals a shuffled memory-match deck holding two cards of every symbol.

    :param random.Random | None rng: Optional seeded random source.
    :returns: A dict with 'cards', each card a dict of a unique 'id' and its 'value'.
    :rtype: dict
    """
    rng = rng or random
    cards = [{'id': uuid.uuid4().hex, 'value': symbol} for symbol in MEMORY_SYMBOLS * 2]
    rng.shuffle(cards)
    logging.info(f"Dealt memory-match deck of {len(cards)} cards.")
    return {'cards': cards}
