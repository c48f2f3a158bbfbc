"""
Services Package

Contains all business logic and service classes.
"""

from .clock import Clock, ScheduledTick, SocketIOClock
from .feedback import evaluate_guess, feedback_pattern
from .game_service import GameService, RapidWordleGame, get_game_service, initialize_game_service
from .renderer import Renderer, SocketIORenderer
from .word_bank import WordBank

__all__ = [
    'Clock', 'ScheduledTick', 'SocketIOClock',
    'evaluate_guess', 'feedback_pattern',
    'GameService', 'RapidWordleGame', 'get_game_service', 'initialize_game_service',
    'Renderer', 'SocketIORenderer',
    'WordBank'
]
