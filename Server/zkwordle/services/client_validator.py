"""
Client-Side Validator

Validates guesses locally against the published position hashes, without
sending the guess to the server. Also offers best-effort checks of server
responses.

Known soundness gap: the response checks are structural. They confirm
shapes and lengths and that a correct letter's leaf appears in its proof
list, but nothing here binds the claims to the commitment, so a dishonest
server is not detected.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Union

from ..config.game_settings import WORD_LENGTH
from ..models.game import GuessResult
from ..models.proof import LetterProof, ProofBundle, WordPresenceProof
from ..utils.errors import InvalidInput
from ..utils.game_logger import game_logger
from ..utils.hashing import is_hex_digest, position_leaf
from .evaluator import evaluate_guess


@dataclass
class ZKGameState:
    """Public data a client needs to evaluate guesses on its own."""
    proof_bundle: ProofBundle
    salt: str
    date: str
    position_hashes: List[str]

    @classmethod
    def from_published(cls, data: Dict[str, Any]) -> 'ZKGameState':
        """Build the state from a word-of-day payload."""
        try:
            return cls(
                proof_bundle=ProofBundle.from_dict(data['zkProof']),
                salt=data['salt'],
                date=data.get('date', ''),
                position_hashes=list(data['positionHashes'])
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInput(f"Malformed published game data: {e}")


def initialize_zk_game_state(proof_bundle: ProofBundle,
                             salt: str,
                             date: str,
                             position_hashes: List[str]) -> ZKGameState:
    """Initialize the client state from server-published data."""
    return ZKGameState(
        proof_bundle=proof_bundle,
        salt=salt,
        date=date,
        position_hashes=list(position_hashes)
    )


def validate_guess_with_zk(guess: str, game_state: ZKGameState) -> GuessResult:
    """
    Evaluate a guess against the published position hashes.

    Raises:
        InvalidGuessLength: If the guess length differs from the committed length
        InvalidPositionHashes: If the published table has the wrong length
    """
    return evaluate_guess(
        guess,
        game_state.position_hashes,
        salt=game_state.salt,
        word_length=game_state.proof_bundle.word_length
    )


def verify_zk_proof(proof_bundle: Union[ProofBundle, Dict[str, Any]]) -> bool:
    """Basic shape check of a proof bundle: 64-hex commitment and root, 5 letters."""
    if isinstance(proof_bundle, dict):
        try:
            proof_bundle = ProofBundle.from_dict(proof_bundle)
        except (KeyError, TypeError, ValueError):
            return False

    return (
        is_hex_digest(proof_bundle.commitment.value)
        and is_hex_digest(proof_bundle.merkle_root)
        and proof_bundle.word_length == WORD_LENGTH
    )


def _word_length_of(session: Union[ZKGameState, Dict[str, Any]]) -> int:
    if isinstance(session, ZKGameState):
        return session.proof_bundle.word_length
    return int(session['zkProof']['wordLength'])


def verify_zk_guess_result(result: Union[GuessResult, Dict[str, Any]],
                           session: Union[ZKGameState, Dict[str, Any]]) -> bool:
    """
    Check that a server guess response has the expected structure.

    Only the number of letter states is compared with the committed word
    length; the individual claims are trusted. Anything that is neither a
    GuessResult nor a dict fails the check.
    """
    if not result or not session:
        return False

    if isinstance(result, GuessResult):
        result = result.to_dict()
    elif not isinstance(result, dict):
        return False

    letter_states = result.get('letterStates')
    if not isinstance(letter_states, list):
        return False

    try:
        word_length = _word_length_of(session)
    except (KeyError, TypeError, ValueError):
        return False

    if len(letter_states) != word_length:
        game_logger.logger.warning(
            f"Letter states length mismatch: expected {word_length}, got {len(letter_states)}"
        )
        return False

    return True


def verify_letter_proof(letter_proof: Union[LetterProof, Dict[str, Any]], salt: str) -> bool:
    """
    Check a letter proof.

    A correct claim must have its recomputed leaf in the proof list. An
    incorrect claim withholds the letter and cannot be checked, so it is
    accepted as sent.
    """
    if isinstance(letter_proof, dict):
        letter_proof = LetterProof(
            position=letter_proof.get('position', -1),
            letter=letter_proof.get('letter', ''),
            proof=list(letter_proof.get('proof') or []),
            is_correct=bool(letter_proof.get('isCorrect'))
        )

    if not letter_proof.is_correct:
        return True

    expected = position_leaf(letter_proof.position, letter_proof.letter, salt)
    return expected in letter_proof.proof


def verify_word_presence_proof(presence_proof: Union[WordPresenceProof, Dict[str, Any]]) -> bool:
    """
    Structural check of a presence proof: a digest when present, empty when absent.

    The positions are hashed in plaintext, so the claim itself cannot be
    verified without knowing the word.
    """
    if isinstance(presence_proof, dict):
        presence_proof = WordPresenceProof(
            is_present=bool(presence_proof.get('isPresent')),
            proof=presence_proof.get('proof', '')
        )

    if presence_proof.is_present:
        return is_hex_digest(presence_proof.proof)
    return presence_proof.proof == ''


def result_to_game_state(result: Union[GuessResult, Dict[str, Any]]) -> List[Dict[str, str]]:
    """Convert a guess result to the board row format: [{letter, status}]."""
    if isinstance(result, GuessResult):
        result = result.to_dict()

    return [
        {'letter': letter_state['letter'], 'status': letter_state['state']}
        for letter_state in result.get('letterStates', [])
    ]
