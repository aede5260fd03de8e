"""
Game Data Models

Contains guess evaluation results, session state and the letter status enum.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .proof import LetterProof, ProofBundle, WordPresenceProof


class LetterStatus(Enum):
    """Letter evaluation status."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    UNUSED = "unused"


@dataclass
class LetterState:
    """Feedback for one guess position."""
    position: int
    letter: str
    state: LetterStatus
    proof: Optional[LetterProof] = None
    presence_proof: Optional[WordPresenceProof] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'position': self.position,
            'letter': self.letter,
            'state': self.state.value
        }
        if self.proof is not None:
            data['proof'] = self.proof.to_dict()
        if self.presence_proof is not None:
            data['presenceProof'] = self.presence_proof.to_dict()
        return data


@dataclass
class GuessResult:
    """Evaluation of a whole guess."""
    letter_states: List[LetterState]
    is_winner: bool
    guess: str
    session_id: Optional[str] = None
    word: Optional[str] = None  # Only set when the game is won or over

    @property
    def states(self) -> List[str]:
        return [letter_state.state.value for letter_state in self.letter_states]

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'guess': self.guess,
            'letterStates': [letter_state.to_dict() for letter_state in self.letter_states],
            'isWinner': self.is_winner
        }
        if self.session_id is not None:
            data['sessionId'] = self.session_id
        if self.word is not None:
            data['word'] = self.word
        return data


def _empty_letter_status() -> Dict[str, str]:
    return {letter: LetterStatus.UNUSED.value for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}


@dataclass
class Session:
    """
    Server-side binding between a session id and one secret/proof bundle.

    guesses and letter_status are the per-row history used to colour the
    board and keyboard. The secret never leaves the server through this model
    except via to_document, which is for session stores only.
    """
    session_id: str
    secret: str
    proof_bundle: ProofBundle
    date: str
    guesses: List[str] = field(default_factory=list)
    letter_status: Dict[str, str] = field(default_factory=_empty_letter_status)
    won: bool = False
    regenerated: bool = False

    def to_document(self) -> Dict[str, Any]:
        return {
            'session_id': self.session_id,
            'secret': self.secret,
            'proof_bundle': self.proof_bundle.to_dict(),
            'date': self.date,
            'guesses': list(self.guesses),
            'letter_status': dict(self.letter_status),
            'won': self.won,
            'regenerated': self.regenerated
        }

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'Session':
        return cls(
            session_id=document['session_id'],
            secret=document['secret'],
            proof_bundle=ProofBundle.from_dict(document['proof_bundle']),
            date=document['date'],
            guesses=list(document.get('guesses', [])),
            letter_status=dict(document.get('letter_status') or _empty_letter_status()),
            won=bool(document.get('won', False)),
            regenerated=bool(document.get('regenerated', False))
        )
