"""
Service Decorators

Contains decorators guarding HTTP and WebSocket handlers that need an
active game session.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_session(f):
    """
    Decorator for HTTP endpoints that operate on the active session.

    Passes the session engine as the `engine` keyword argument.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.session_service import get_session_engine

        engine = get_session_engine()
        if not engine:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        if engine.session is None:
            return jsonify({
                'success': False,
                'error': 'No active game'
            }), 404

        kwargs['engine'] = engine
        return f(*args, **kwargs)

    return decorated_function


def websocket_session_required(f):
    """Decorator for WebSocket events that operate on the active session."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.session_service import get_session_engine

        engine = get_session_engine()
        if not engine or engine.session is None:
            emit('error', {'error': 'No active game'})
            return

        kwargs['engine'] = engine
        return f(*args, **kwargs)

    return decorated_function
