"""**********************************************************************************
 * Title: app.py
 * -------------------------------------------------------------------------------
 * Description:
 * Flask API that serves mini-game rounds and win checks to the frontend.
 * Each route wraps one puzzle_handler call and returns JSON with camelCase
 * keys. Bad input comes back as 400 with the reason; anything unexpected,
 * including a failed generation, comes back as 500 and is logged.
 **********************************************************************************"""

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

from minigames import puzzle_handler as pz
from minigames import constants as const
from minigames.exceptions import PuzzleInputError
from minigames.validators import count_queens, attacking_pairs

app = Flask(__name__)
CORS(app)


def _bad_request(message):
    logging.warning(f"Rejected request to {request.path}: {message}")
    return jsonify({'error': message}), 400


def _internal_error(e):
    logging.error(f"Error in {request.path}: {e}")
    return jsonify({'error': 'An internal error occurred'}), 500


def _reward(won):
    return const.GEMS_PER_WIN if won else 0


def _json_body():
    return request.get_json(silent=True) or {}


# --- SUDOKU ---
@app.route('/api/sudoku/new', methods=['GET'])
def new_sudoku():
    try:
        puzzle = pz.generate_sudoku_puzzle(request.args.get('difficulty', const.Difficulty.EASY.value))
        return jsonify({
            'playerGrid': puzzle['player_grid'],
            'solutionGrid': puzzle['solution_grid'],
            'difficulty': puzzle['difficulty'],
            'removalCount': puzzle['removal_count'],
        })
    except PuzzleInputError as e:
        return _bad_request(str(e))
    except Exception as e:
        return _internal_error(e)


@app.route('/api/sudoku/check', methods=['POST'])
def check_sudoku():
    try:
        player_grid = _json_body().get('playerGrid')
        if player_grid is None:
            return _bad_request('Missing playerGrid in request')
        solved = pz.check_sudoku(player_grid)
        return jsonify({'isSolved': solved, 'rewardGems': _reward(solved)})
    except PuzzleInputError as e:
        return _bad_request(str(e))
    except Exception as e:
        return _internal_error(e)


@app.route('/api/sudoku/solve', methods=['POST'])
def solve_sudoku():
    try:
        player_grid = _json_body().get('playerGrid')
        if player_grid is None:
            return _bad_request('Missing playerGrid in request')
        solution, is_unique = pz.solve_sudoku(player_grid)
        return jsonify({'solution': solution, 'isUnique': is_unique})
    except PuzzleInputError as e:
        return _bad_request(str(e))
    except Exception as e:
        return _internal_error(e)


# --- N-QUEENS ---
@app.route('/api/queens/new', methods=['GET'])
def new_queens():
    try:
        raw_size = request.args.get('boardSize')
        if raw_size is None:
            board_size = const.QUEENS_BOARD_SIZE
        else:
            try:
                board_size = int(raw_size)
            except ValueError:
                return _bad_request(f'boardSize must be an integer, got {raw_size!r}')
        puzzle = pz.generate_queens_puzzle(board_size)
        return jsonify({'board': puzzle['board'], 'boardSize': board_size})
    except PuzzleInputError as e:
        return _bad_request(str(e))
    except Exception as e:
        return _internal_error(e)


@app.route('/api/queens/check', methods=['POST'])
def check_queens():
    try:
        data = _json_body()
        board, board_size = data.get('board'), data.get('boardSize', const.QUEENS_BOARD_SIZE)
        if board is None:
            return _bad_request('Missing board in request')
        is_correct = pz.validate_queens_solution(board, board_size)
        return jsonify({
            'isCorrect': is_correct,
            'queensPlaced': count_queens(board),
            'attackingPairs': [[list(a), list(b)] for a, b in attacking_pairs(board)],
            'rewardGems': _reward(is_correct),
        })
    except PuzzleInputError as e:
        return _bad_request(str(e))
    except Exception as e:
        return _internal_error(e)


@app.route('/api/queens/solve', methods=['POST'])
def solve_queens():
    try:
        data = _json_body()
        solution, is_unique = pz.solve_queens(data.get('boardSize', const.QUEENS_BOARD_SIZE), data.get('board'))
        return jsonify({'solution': solution, 'isUnique': is_unique})
    except PuzzleInputError as e:
        return _bad_request(str(e))
    except Exception as e:
        return _internal_error(e)


# --- ZIP ---
@app.route('/api/zip/new', methods=['GET'])
def new_zip():
    try:
        zip_round = pz.generate_zip_game()
        return jsonify({
            'target': zip_round['target'],
            'numbers': zip_round['numbers'],
            'timeLimit': zip_round['time_limit'],
        })
    except Exception as e:
        return _internal_error(e)


@app.route('/api/zip/check', methods=['POST'])
def check_zip():
    try:
        data = _json_body()
        numbers, selected, target = data.get('numbers'), data.get('selected'), data.get('target')
        if numbers is None or selected is None or target is None:
            return _bad_request('Missing numbers, selected or target in request')
        is_correct = pz.check_zip_solution({'numbers': numbers, 'target': target}, selected)
        return jsonify({
            'isCorrect': is_correct,
            'total': sum(numbers[i] for i in selected),
            'rewardGems': _reward(is_correct),
        })
    except PuzzleInputError as e:
        return _bad_request(str(e))
    except Exception as e:
        return _internal_error(e)


# --- MEMORY MATCH ---
@app.route('/api/memory/new', methods=['GET'])
def new_memory():
    try:
        return jsonify(pz.generate_memory_game())
    except Exception as e:
        return _internal_error(e)
