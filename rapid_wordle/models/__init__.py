"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import EndReason, GamePhase, GameState, GuessResult, LetterFeedback

__all__ = ['EndReason', 'GamePhase', 'GameState', 'GuessResult', 'LetterFeedback']
