"""
Rapid Wordle Game Server Application Package

A timed word-guessing game. The server owns the game core and the clock,
the browser page renders the commands it receives over Socket.IO.
"""

from flask import Flask, render_template
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config

__version__ = "0.1.0"


def create_app(config_class=Config, **service_overrides):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        **service_overrides: Extra GameService arguments (e.g. a clock_factory for tests)

    Returns:
        Flask application instance and its SocketIO server
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(
        app, cors_allowed_origins="*", async_mode='threading',
        logger=False, engineio_logger=False
    )

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    @app.route('/')
    def index():
        return render_template('index.html', time_limit=app.config['TIME_LIMIT_SECONDS'])

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    from .services.game_service import initialize_game_service
    service_args = {
        'time_limit': app.config['TIME_LIMIT_SECONDS'],
        'tick_interval': app.config['TICK_INTERVAL_SECONDS'],
        'word_seed': app.config['WORD_SEED'],
    }
    service_args.update(service_overrides)
    initialize_game_service(socketio, **service_args)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
