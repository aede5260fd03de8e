"""
Proof Service

Server-side commitment scheme for a secret word:
- a flat commitment over per-position leaves (hash of "i:L:salt")
- the published position hash table
- per-letter proofs and word-presence proofs

This is a commitment-hash scheme, not a zero-knowledge proof system.
The root is a hash of the concatenated leaves rather than a Merkle tree,
and every letter proof carries all leaves, so a single query is enough
to recover the secret by brute force. Both properties are part of the
published contract and are kept as they are.
"""

import time
from typing import List, Optional

from ..config.game_settings import is_alphabet_word
from ..models.proof import Commitment, LetterProof, ProofBundle, WordPresenceProof
from ..utils.errors import InvalidInput, InvalidPosition
from ..utils.hashing import hash_string, position_leaf


def _normalize_secret(secret: str) -> str:
    if not secret or not isinstance(secret, str):
        raise InvalidInput("Secret word must be a non-empty string")
    if not is_alphabet_word(secret):
        raise InvalidInput("Secret word must contain only letters A-Z")
    return secret.upper()


def _normalize_letter(letter: str) -> str:
    if not isinstance(letter, str) or len(letter) != 1:
        raise InvalidInput("Guessed letter must be a single character")
    return letter.upper()


class FlatCommitment:
    """
    Flat hash-of-leaves commitment.

    leaves[i] = hash(f"{i}:{secret[i]}:{salt}") and root = hash("".join(leaves)).
    Not a Merkle tree: sibling_proof returns every other leaf rather than a
    logarithmic inclusion path.
    """

    def __init__(self, secret: str, salt: str):
        self.secret = _normalize_secret(secret)
        self.salt = salt
        self.leaves: List[str] = [
            position_leaf(i, letter, salt) for i, letter in enumerate(self.secret)
        ]

    @property
    def root(self) -> str:
        return hash_string(''.join(self.leaves))

    def __len__(self) -> int:
        return len(self.leaves)

    def sibling_proof(self, position: int) -> List[str]:
        """Leaf at position first, followed by every other leaf in index order."""
        if position < 0 or position >= len(self.leaves):
            raise InvalidPosition(position, len(self.leaves))
        return [self.leaves[position]] + [
            leaf for i, leaf in enumerate(self.leaves) if i != position
        ]


def generate_zk_proof(secret: str, salt: str, now_ms: Optional[int] = None) -> ProofBundle:
    """
    Commit to a secret word.

    Args:
        secret: Secret word, normalized to uppercase
        salt: Salt bound into every leaf
        now_ms: Generation time in milliseconds, defaults to the wall clock

    Returns:
        ProofBundle with a non-verifiable commitment, the flat root and the word length

    Raises:
        InvalidInput: If the secret is empty
    """
    normalized = _normalize_secret(secret)
    if now_ms is None:
        now_ms = int(time.time() * 1000)

    commitment = Commitment(hash_string(normalized + salt + str(now_ms)))
    flat = FlatCommitment(normalized, salt)

    return ProofBundle(
        commitment=commitment,
        merkle_root=flat.root,
        word_length=len(normalized)
    )


def build_position_hashes(secret: str, salt: str) -> List[str]:
    """
    Build the position hash table published to clients.

    Must be called with the same salt as generate_zk_proof for the same
    secret, otherwise every guess evaluates as absent.
    """
    return FlatCommitment(secret, salt).leaves


def generate_letter_proof(secret: str, position: int, guessed_letter: str, salt: str) -> LetterProof:
    """
    Prove whether guessed_letter sits at position in the secret.

    The letter is only revealed when it is correct, but the proof list holds
    every position's true leaf regardless of the outcome.

    Raises:
        InvalidPosition: If position is outside the word
    """
    flat = FlatCommitment(secret, salt)
    if not isinstance(position, int) or position < 0 or position >= len(flat):
        raise InvalidPosition(position, len(flat))

    letter = _normalize_letter(guessed_letter)
    actual_letter = flat.secret[position]
    is_correct = actual_letter == letter

    return LetterProof(
        position=position,
        letter=actual_letter if is_correct else '',
        proof=flat.sibling_proof(position),
        is_correct=is_correct
    )


def generate_word_presence_proof(secret: str, guessed_letter: str, salt: str) -> WordPresenceProof:
    """
    Prove whether guessed_letter occurs anywhere in the secret.

    The proof hashes the letter with its comma-joined positions; it cannot be
    checked by anyone who does not already know the word.
    """
    normalized = _normalize_secret(secret)
    letter = _normalize_letter(guessed_letter)

    positions = [str(i) for i, actual in enumerate(normalized) if actual == letter]
    if not positions:
        return WordPresenceProof(is_present=False, proof='')

    proof = hash_string(f"{letter}:{','.join(positions)}:{salt}")
    return WordPresenceProof(is_present=True, proof=proof)
