# --- File: starlogic/app.py ---
# JSON API for the browser front end. Each play session owns one PuzzleData,
# held in process memory and guarded by its own lock. At most MAX_SESSIONS
# sessions are kept; starting one more drops the oldest.
import os
import uuid
import logging
import threading

from flask import Flask, jsonify, request
from flask_cors import CORS

from starlogic import action_handlers as actions
from starlogic import puzzle_handler as pz
from starlogic import constants as const

app = Flask(__name__)
CORS(app)
app.config['REQUIRE_UNIQUE_SOLUTION'] = os.environ.get('STARLOGIC_REQUIRE_UNIQUE', '').lower() in ('1', 'true', 'yes')
app.config['MAX_SESSIONS'] = int(os.environ.get('STARLOGIC_MAX_SESSIONS', const.MAX_SESSIONS))

# Insertion ordered, so the first key is always the oldest session.
_sessions = {}
_sessions_lock = threading.Lock()

class _Session:
    def __init__(self, puzzle):
        self.puzzle = puzzle
        self.lock = threading.Lock()

def _add_session(puzzle):
    session_id = uuid.uuid4().hex
    with _sessions_lock:
        _sessions[session_id] = _Session(puzzle)
        while len(_sessions) > app.config['MAX_SESSIONS']:
            oldest = next(iter(_sessions))
            del _sessions[oldest]
            logging.info(f"Session {oldest} dropped, session limit reached.")
    return session_id

def _get_session(session_id):
    with _sessions_lock:
        return _sessions.get(session_id)

def _session_not_found():
    return jsonify({'error': 'Unknown session'}), 404

def _internal_error(route, e):
    logging.error(f"Error in {route}: {e}")
    return jsonify({'error': 'An internal error occurred'}), 500

@app.route('/api/options', methods=['GET'])
def get_options():
    try:
        return jsonify({
            'gridSizes': list(const.SUPPORTED_GRID_SIZES),
            'difficulties': list(const.DIFFICULTIES),
            'defaultGridSize': const.DEFAULT_GRID_SIZE,
            'defaultDifficulty': const.DEFAULT_DIFFICULTY,
        })
    except Exception as e:
        return _internal_error('/api/options', e)

@app.route('/api/new_puzzle', methods=['POST'])
def create_puzzle():
    try:
        data = request.get_json(silent=True) or {}
        try:
            grid_size = int(data.get('gridSize', const.DEFAULT_GRID_SIZE))
        except (TypeError, ValueError):
            return jsonify({'error': 'gridSize must be an integer'}), 400
        difficulty = data.get('difficulty', const.DEFAULT_DIFFICULTY)
        if grid_size not in const.SUPPORTED_GRID_SIZES:
            return jsonify({'error': f'Invalid gridSize, choose one of {list(const.SUPPORTED_GRID_SIZES)}'}), 400
        if difficulty not in const.DIFFICULTIES:
            return jsonify({'error': f'Invalid difficulty, choose one of {list(const.DIFFICULTIES)}'}), 400

        puzzle = pz.new_puzzle(grid_size, difficulty, require_unique=app.config['REQUIRE_UNIQUE_SOLUTION'])
        if puzzle is None:
            return jsonify({'error': const.MESSAGE_GENERATION_FAILED}), 503

        session_id = _add_session(puzzle)
        logging.info(f"Session {session_id} started with a {grid_size}x{grid_size} {difficulty} puzzle.")
        return jsonify({'sessionId': session_id, 'puzzle': puzzle.snapshot()})
    except Exception as e:
        return _internal_error('/api/new_puzzle', e)

@app.route('/api/<session_id>', methods=['GET'])
def get_puzzle(session_id):
    try:
        session = _get_session(session_id)
        if session is None:
            return _session_not_found()
        with session.lock:
            return jsonify({'puzzle': session.puzzle.snapshot()})
    except Exception as e:
        return _internal_error(f'/api/{session_id}', e)

@app.route('/api/<session_id>', methods=['DELETE'])
def end_session(session_id):
    try:
        with _sessions_lock:
            session = _sessions.pop(session_id, None)
        if session is None:
            return _session_not_found()
        logging.info(f"Session {session_id} ended.")
        return jsonify({'sessionId': session_id, 'ended': True})
    except Exception as e:
        return _internal_error(f'/api/{session_id}', e)

@app.route('/api/<session_id>/reset', methods=['POST'])
def reset_puzzle(session_id):
    try:
        session = _get_session(session_id)
        if session is None:
            return _session_not_found()
        with session.lock:
            actions.reset_puzzle(session.puzzle)
            return jsonify({'puzzle': session.puzzle.snapshot()})
    except Exception as e:
        return _internal_error(f'/api/{session_id}/reset', e)

@app.route('/api/<session_id>/click', methods=['POST'])
def click_cell(session_id):
    try:
        session = _get_session(session_id)
        if session is None:
            return _session_not_found()
        data = request.get_json(silent=True) or {}
        try:
            row, col = int(data['row']), int(data['col'])
        except (KeyError, TypeError, ValueError):
            return jsonify({'error': 'Missing or invalid row/col in request'}), 400
        with session.lock:
            try:
                actions.apply_cell_click(session.puzzle, row, col)
            except ValueError as e:
                return jsonify({'error': str(e)}), 400
            return jsonify({'puzzle': session.puzzle.snapshot()})
    except Exception as e:
        return _internal_error(f'/api/{session_id}/click', e)

@app.route('/api/<session_id>/hint', methods=['POST'])
def get_hint(session_id):
    try:
        session = _get_session(session_id)
        if session is None:
            return _session_not_found()
        with session.lock:
            was_active = session.puzzle.is_active
            hint = actions.request_hint(session.puzzle)
            response = {'puzzle': session.puzzle.snapshot(), 'hint': list(hint) if hint else None}
            if hint is None:
                response['message'] = const.MESSAGE_ALL_STARS_PLACED if was_active else const.MESSAGE_PUZZLE_INACTIVE
            return jsonify(response)
    except Exception as e:
        return _internal_error(f'/api/{session_id}/hint', e)

@app.route('/api/<session_id>/reveal', methods=['POST'])
def reveal(session_id):
    try:
        session = _get_session(session_id)
        if session is None:
            return _session_not_found()
        with session.lock:
            actions.reveal_solution(session.puzzle)
            return jsonify({'puzzle': session.puzzle.snapshot()})
    except Exception as e:
        return _internal_error(f'/api/{session_id}/reveal', e)

@app.route('/api/<session_id>/check', methods=['POST'])
def check(session_id):
    try:
        session = _get_session(session_id)
        if session is None:
            return _session_not_found()
        with session.lock:
            result = actions.check_solution(session.puzzle)
            return jsonify({'puzzle': session.puzzle.snapshot(), 'check': result})
    except Exception as e:
        return _internal_error(f'/api/{session_id}/check', e)
