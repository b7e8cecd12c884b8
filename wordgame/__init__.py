"""
Word Game Server Application Package

Guess-evaluation and game-progression engine for a Wordle-style word game,
served to a UI over HTTP and Socket.IO.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, store=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        store: Key-value store to persist into; built from the config when omitted

    Returns:
        Tuple of (Flask application, SocketIO instance) with all services initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .utils.game_logger import game_logger
    game_logger.configure(
        None if app.config.get('TESTING') else config_class.LOG_DIR,
        config_class.LOG_LEVEL
    )

    # Initialize services
    from .services.storage import create_store
    from .services.word_source import WordSource
    from .services.stats_service import initialize_stats_store
    from .services.settings_service import initialize_settings_store
    from .services.session_service import initialize_session_engine

    if store is None:
        store = create_store(config_class)
    stats_store = initialize_stats_store(store)
    initialize_settings_store(store)
    initialize_session_engine(WordSource(), stats_store)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.stats_controller import stats_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(stats_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
