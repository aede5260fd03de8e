"""
Services Package

Contains the proof scheme, the guess evaluator, the client-side validator,
session storage, the word source and the game service.
"""

from .client_validator import (
    ZKGameState, initialize_zk_game_state, validate_guess_with_zk, verify_zk_proof,
    verify_zk_guess_result, verify_letter_proof, verify_word_presence_proof,
    result_to_game_state
)
from .evaluator import (
    LetterOracle, PlaintextOracle, PositionHashOracle, evaluate_guess, evaluate_with_oracle
)
from .game_service import ZKGameService, get_game_service, initialize_game_service
from .proof_service import (
    FlatCommitment, build_position_hashes, generate_letter_proof,
    generate_word_presence_proof, generate_zk_proof
)
from .session_store import (
    SessionStore, InMemorySessionStore, MongoSessionStore, create_session_store
)
from .word_service import WordOfDayService, get_word_service, initialize_word_service

__all__ = [
    'ZKGameState', 'initialize_zk_game_state', 'validate_guess_with_zk', 'verify_zk_proof',
    'verify_zk_guess_result', 'verify_letter_proof', 'verify_word_presence_proof',
    'result_to_game_state',
    'LetterOracle', 'PlaintextOracle', 'PositionHashOracle', 'evaluate_guess', 'evaluate_with_oracle',
    'ZKGameService', 'get_game_service', 'initialize_game_service',
    'FlatCommitment', 'build_position_hashes', 'generate_letter_proof',
    'generate_word_presence_proof', 'generate_zk_proof',
    'SessionStore', 'InMemorySessionStore', 'MongoSessionStore', 'create_session_store',
    'WordOfDayService', 'get_word_service', 'initialize_word_service'
]
