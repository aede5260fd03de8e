"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GuessResult, LetterState, LetterStatus, Session
from .proof import Commitment, LetterProof, ProofBundle, WordPresenceProof

__all__ = [
    'GuessResult', 'LetterState', 'LetterStatus', 'Session',
    'Commitment', 'LetterProof', 'ProofBundle', 'WordPresenceProof'
]
