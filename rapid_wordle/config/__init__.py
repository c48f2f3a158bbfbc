"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and the word table (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_TIME_LIMIT, POINTS_PER_LENGTH_STEP, START_WORD_LENGTH, WORD_LIST,
    get_word_statistics, validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LIST', 'START_WORD_LENGTH', 'POINTS_PER_LENGTH_STEP', 'DEFAULT_TIME_LIMIT',
    'validate_word_list_integrity', 'get_word_statistics'
]
