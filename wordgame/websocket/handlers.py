"""
WebSocket Event Handlers

Handles per-keystroke editing of the guess buffer. Every accepted event is
answered with a `game_state` event carrying the session snapshot.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit
from ..utils.decorators import websocket_session_required
from ..utils.game_logger import game_logger


def emit_game_state(engine, changed=True):
    emit('game_state', {'changed': changed, 'state': asdict(engine.get_game_state())})


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.debug(f"WebSocket client connected: {request.sid}")

    @socketio.on('add_letter')
    @websocket_session_required
    def handle_add_letter(data, engine=None):
        """Append one letter to the guess buffer."""
        if isinstance(data, str):
            letter = data
        elif isinstance(data, dict):
            letter = data.get('letter', '')
        else:
            emit('error', {'error': 'Letter is required'})
            return
        changed = engine.add_letter(letter)
        emit_game_state(engine, changed)

    @socketio.on('remove_letter')
    @websocket_session_required
    def handle_remove_letter(data=None, engine=None):
        """Drop the last letter of the guess buffer."""
        changed = engine.remove_letter()
        emit_game_state(engine, changed)

    @socketio.on('submit_guess')
    @websocket_session_required
    def handle_submit_guess(data=None, engine=None):
        """Submit the guess buffer."""
        result = engine.submit_current()
        if not result.accepted:
            emit('error', {'error': result.error})
            return

        state = engine.get_game_state()
        emit_game_state(engine)
        if state.game_over:
            game_logger.log_game_event(
                'game_won' if state.won else 'game_lost', request.sid,
                game_mode=state.game_mode, rounds_used=len(state.guesses),
                target_word=state.answer, final_guess=result.guess.word
            )
