"""
Utilities Package

Contains hashing, error types, decorators, helpers and the game logger.
"""

from .decorators import require_service
from .errors import (
    ZKWordleError, InvalidInput, InvalidGuessLength, InvalidPosition,
    InvalidPositionHashes, VerificationMismatch, SessionNotFound, UpstreamUnavailable
)
from .game_logger import game_logger
from .hashing import hash_string, position_leaf, is_hex_digest
from .helpers import get_user_identity

__all__ = [
    'require_service', 'game_logger', 'get_user_identity',
    'hash_string', 'position_leaf', 'is_hex_digest',
    'ZKWordleError', 'InvalidInput', 'InvalidGuessLength', 'InvalidPosition',
    'InvalidPositionHashes', 'VerificationMismatch', 'SessionNotFound', 'UpstreamUnavailable'
]
