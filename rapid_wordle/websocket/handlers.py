"""
WebSocket Event Handlers

Player input arrives here as Socket.IO events; render commands flow back
through each game's SocketIORenderer.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def _emit_state(game, action):
    state = asdict(game.get_state())
    response_data = {'success': True, 'state': state}
    emit('game_state', response_data)
    game_logger.log_server_response(
        request.sid, action, True, response_data, game.game_id,
        phase=state['phase'], score=state['score']
    )


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Create a fresh (idle) game for the new browser session."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game = game_service.create_game(request.sid)
        game_logger.log_user_action(request.sid, 'connect', game.game_id)
        _emit_state(game, 'connect')

    @socketio.on('disconnect')
    def handle_disconnect(reason=None):
        """Stop the session's clock and discard its game."""
        game_service = get_game_service()
        if not game_service:
            return

        removed = game_service.remove_game(request.sid)
        game_logger.log_user_action(request.sid, 'disconnect', removed=removed, reason=str(reason))

    @socketio.on('start_game')
    @websocket_game_required
    def handle_start_game(data=None, game=None):
        """Start or restart the countdown."""
        game_logger.log_user_action(request.sid, 'start_game', game.game_id)
        game.start()
        _emit_state(game, 'start_game')

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data=None, game=None):
        """Submit a guess for validation and evaluation."""
        if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
            error_response = {'success': False, 'error': 'Guess is required'}
            emit('error', error_response)
            game_logger.log_server_response(request.sid, 'submit_guess', False, error_response, game.game_id)
            return

        guess = data['guess']
        game_logger.log_user_action(
            request.sid, 'submit_guess', game.game_id,
            guess=guess, guess_length=len(guess)
        )

        result = game.submit_guess(guess)
        response_data = {
            'success': result.accepted,
            'result': result.to_dict(),
            'state': asdict(game.get_state())
        }
        emit('guess_result', response_data)
        game_logger.log_server_response(
            request.sid, 'submit_guess', result.accepted, response_data, game.game_id,
            guess=result.guess, correct=result.correct
        )

    @socketio.on('end_game')
    @websocket_game_required
    def handle_end_game(data=None, game=None):
        """End the game before the timer runs out."""
        game_logger.log_user_action(request.sid, 'end_game', game.game_id)
        game.end()
        _emit_state(game, 'end_game')

    @socketio.on('get_state')
    @websocket_game_required
    def handle_get_state(data=None, game=None):
        """Send the current game snapshot."""
        game_logger.log_user_action(request.sid, 'get_state', game.game_id)
        _emit_state(game, 'get_state')
