"""
Rapid Wordle Game Server - Main Entry Point

This is the main entry point for the game server.
It creates the Flask-SocketIO application and starts serving.
"""

from rapid_wordle import create_app
from rapid_wordle.config import Config, validate_word_list_integrity
from rapid_wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Validating word list...")
        validate_word_list_integrity()
        print("✓ Word list validated")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application and game service created successfully")

        game_logger.logger.info("Rapid Wordle Server Starting")

        print(f"\nStarting Rapid Wordle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Time limit: {Config.TIME_LIMIT_SECONDS}s")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Rapid Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
