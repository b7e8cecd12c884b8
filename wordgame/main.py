"""
Word Game Server - Main Entry Point

Initializes all services and starts the Flask-SocketIO application.
"""

import os

from wordgame import create_app
from wordgame.config import config, validate_word_list_integrity
from wordgame.services.session_service import get_session_engine
from wordgame.utils.game_logger import game_logger


def main():
    config_class = config[os.getenv('WORDGAME_ENV', 'default')]

    validate_word_list_integrity()
    app, socketio = create_app(config_class)

    # Have a game ready for the UI on first load
    get_session_engine().start_session(config_class.DEFAULT_WORD_LENGTH, 'unlimited')

    try:
        game_logger.logger.info(f"Word game server starting on {config_class.HOST}:{config_class.PORT}")

        print(f"\nStarting Word Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Store backend: {config_class.STORE_BACKEND}")
        print("=" * 50)

        socketio.run(
            app,
            host=config_class.HOST,
            port=config_class.PORT,
            debug=config_class.DEBUG,
            allow_unsafe_werkzeug=True
        )

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word game server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
