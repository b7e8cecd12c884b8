"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import SUPPORTED_WORD_LENGTHS
from ..models.game import GameMode
from ..services.session_service import get_session_engine
from ..services.stats_service import get_stats_store
from ..utils.decorators import require_session
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

GAME_MODES = [mode.value for mode in GameMode]


def log_game_end(state, final_guess):
    """Log a game_won/game_lost event for a terminal snapshot."""
    if not state.game_over:
        return
    game_logger.log_game_event(
        'game_won' if state.won else 'game_lost', request.remote_addr,
        game_mode=state.game_mode, rounds_used=len(state.guesses),
        target_word=state.answer, final_guess=final_guess
    )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Start a new game session, replacing the current one."""
    try:
        engine = get_session_engine()
        if not engine:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({
                'success': False,
                'error': 'Request body must be a JSON object'
            }), 400

        word_length = data.get('word_length', 5)
        game_mode = data.get('game_mode', GameMode.UNLIMITED.value)
        custom_word = data.get('custom_word')

        if word_length not in SUPPORTED_WORD_LENGTHS:
            return jsonify({
                'success': False,
                'error': f'Invalid word length. Must be one of {list(SUPPORTED_WORD_LENGTHS)}'
            }), 400

        if game_mode not in GAME_MODES:
            return jsonify({
                'success': False,
                'error': f'Invalid game mode. Must be one of {GAME_MODES}'
            }), 400

        if custom_word is not None and not isinstance(custom_word, str):
            return jsonify({
                'success': False,
                'error': 'Custom word must be a string'
            }), 400

        game_logger.log_user_action(
            request, 'new_game',
            word_length=word_length, game_mode=game_mode, custom_word=bool(custom_word)
        )

        engine.start_session(word_length, game_mode, custom_word)
        state = engine.get_game_state()

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'new_game', True, response_data)
        game_logger.log_game_event(
            'game_started', request.remote_addr,
            game_mode=game_mode, word_length=word_length, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/state', methods=['GET'])
@require_session
def get_state(engine):
    """Get the current session snapshot."""
    response_data = {
        'success': True,
        'state': asdict(engine.get_game_state())
    }
    return jsonify(response_data)


@game_bp.route('/game/guess', methods=['POST'])
@require_session
def make_guess(engine):
    """Submit a guess for validation and evaluation."""
    try:
        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response)
            return jsonify(error_response), 400

        guess = data['guess']
        game_logger.log_user_action(request, 'submit_guess', guess=guess)

        result = engine.submit_guess(guess)
        if not result.accepted:
            error_response = {
                'success': False,
                'error': result.error
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response,
                validation_error=result.error, attempted_guess=guess
            )
            return jsonify(error_response), 400

        state = engine.get_game_state()
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data,
            guess=result.guess.word, status=state.status
        )
        log_game_end(state, result.guess.word)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/reset', methods=['POST'])
@require_session
def reset_game(engine):
    """Restart with the same word length and mode."""
    game_logger.log_user_action(request, 'reset_game')
    engine.reset_session()
    state = engine.get_game_state()
    response_data = {
        'success': True,
        'state': asdict(state)
    }
    game_logger.log_server_response(request, 'reset_game', True, response_data)
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    engine = get_session_engine()
    stats_store = get_stats_store()

    session = engine.session if engine else None
    response_data = {
        'status': 'healthy',
        'session_active': session is not None,
        'session_status': session.status.value if session else None,
        'stats_available': stats_store is not None,
        'log_stats': game_logger.get_log_stats()
    }
    return jsonify(response_data)
