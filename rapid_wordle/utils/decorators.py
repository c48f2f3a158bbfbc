"""
Service Decorators

Contains decorators that resolve the game service for HTTP and WebSocket
handlers.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator for HTTP endpoints that need the game service.

    The service is passed to the view as the `game_service` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """
    Decorator for WebSocket events that act on the caller's game.

    The session's game (created on demand) is passed as the `game` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        kwargs['game'] = game_service.get_or_create_game(request.sid)
        return f(*args, **kwargs)

    return decorated_function
