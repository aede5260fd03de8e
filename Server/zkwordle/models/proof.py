"""
Proof Data Models

Data structures produced by the commitment scheme. Each model serializes
to the camelCase shape published to clients.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Commitment:
    """
    Opaque commitment token.

    The value hashes the secret together with the generation time, so it
    can never be recomputed later. verifiable is always False and nothing
    should try to check a commitment against a recomputation.
    """
    value: str
    verifiable: bool = False


@dataclass(frozen=True)
class ProofBundle:
    """Published commitment, flat root and word length for one secret/salt pair."""
    commitment: Commitment
    merkle_root: str
    word_length: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'commitment': self.commitment.value,
            'merkleRoot': self.merkle_root,
            'wordLength': self.word_length
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProofBundle':
        return cls(
            commitment=Commitment(data['commitment']),
            merkle_root=data['merkleRoot'],
            word_length=int(data['wordLength'])
        )


@dataclass
class LetterProof:
    """
    Per-position proof.

    letter holds the true letter only when is_correct. proof lists the
    queried position's leaf first, then every other leaf in index order.
    """
    position: int
    letter: str
    proof: List[str] = field(default_factory=list)
    is_correct: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'position': self.position,
            'letter': self.letter,
            'proof': list(self.proof),
            'isCorrect': self.is_correct
        }


@dataclass
class WordPresenceProof:
    """Presence flag plus a hash over the letter's positions (empty when absent)."""
    is_present: bool
    proof: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {'isPresent': self.is_present, 'proof': self.proof}
