"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game constants and the word list (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, WORD_LENGTH, ALPHABET, MAX_ROUNDS,
    is_alphabet_word, is_game_word, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game constants
    'WORD_LIST', 'WORD_LENGTH', 'ALPHABET', 'MAX_ROUNDS',
    'is_alphabet_word', 'is_game_word', 'validate_word_list_integrity', 'get_word_statistics'
]
