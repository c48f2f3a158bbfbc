"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import get_word_statistics, validate_word_list_integrity
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import get_client_identity

game_bp = Blueprint('game', __name__)


@game_bp.route('/game/<session_id>/state', methods=['GET'])
@require_game_service
def get_state(session_id, game_service=None):
    """Get the current state of a session's game."""
    client = get_client_identity(request)
    try:
        game_logger.log_user_action(client, 'get_state', target_session=session_id)

        state = game_service.get_game_state(session_id)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(client, 'get_state', False, error_response)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            client, 'get_state', True, response_data, state.game_id,
            phase=state.phase, score=state.score
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(e, 'get_state', session_id=client)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(client, 'get_state', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/word_bank', methods=['GET'])
def word_bank_stats():
    """Statistics about the configured word table."""
    client = get_client_identity(request)
    try:
        game_logger.log_user_action(client, 'word_bank_stats')

        validate_word_list_integrity()
        response_data = {
            'success': True,
            'stats': get_word_statistics()
        }

        game_logger.log_server_response(client, 'word_bank_stats', True, response_data)
        return jsonify(response_data)

    except ValueError as e:
        game_logger.log_error(e, 'word_bank_stats', session_id=client)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(client, 'word_bank_stats', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service=None):
    """Health check endpoint."""
    client = get_client_identity(request)
    try:
        game_logger.log_user_action(client, 'health_check')

        response_data = {
            'status': 'healthy',
            'sessions': len(game_service.games),
            'active_games': game_service.active_games(),
            'time_limit': game_service.time_limit,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(client, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(e, 'health_check', session_id=client)
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(client, 'health_check', False, error_response)
        return jsonify(error_response), 500
