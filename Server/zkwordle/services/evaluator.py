"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm once, over a
letter-at-position oracle. Two oracles are provided:

- PlaintextOracle: the evaluator holds the secret word
- PositionHashOracle: the evaluator only holds the published position
  hashes and the salt, and recovers letters by trying the alphabet

Both run through evaluate_with_oracle, so a client holding only public
data gets exactly the feedback the server computes from the plaintext.
"""

from typing import Dict, List, Optional, Sequence, Union

from ..config.game_settings import ALPHABET, is_alphabet_word
from ..models.game import GuessResult, LetterState, LetterStatus
from ..utils.errors import (
    InvalidGuessLength, InvalidInput, InvalidPositionHashes, VerificationMismatch
)
from ..utils.game_logger import game_logger
from ..utils.hashing import position_leaf


class LetterOracle:
    """Answers letter-at-position questions about a committed word."""

    word_length: int = 0

    def is_correct(self, position: int, letter: str) -> bool:
        raise NotImplementedError

    def actual_letter_at(self, position: int) -> str:
        """
        Return the committed letter at position.

        Raises:
            VerificationMismatch: If the letter cannot be determined
        """
        raise NotImplementedError


class PlaintextOracle(LetterOracle):
    """Direct lookup in the secret word."""

    def __init__(self, secret: str):
        if not secret or not isinstance(secret, str):
            raise InvalidInput("Secret word must be a non-empty string")
        if not is_alphabet_word(secret):
            raise InvalidInput("Secret word must contain only letters A-Z")
        self.secret = secret.upper()
        self.word_length = len(self.secret)

    def is_correct(self, position: int, letter: str) -> bool:
        return self.secret[position] == letter

    def actual_letter_at(self, position: int) -> str:
        return self.secret[position]


class PositionHashOracle(LetterOracle):
    """
    Hash comparison against a published position hash table.

    actual_letter_at tries every alphabet letter (26 hashes per position at
    most) and caches the result.
    """

    def __init__(self, position_hashes: Sequence[str], salt: str, alphabet: str = ALPHABET):
        if salt is None or not isinstance(salt, str):
            raise InvalidInput("Salt is required to evaluate against position hashes")
        self.position_hashes = list(position_hashes)
        self.salt = salt
        self.alphabet = alphabet
        self.word_length = len(self.position_hashes)
        self._recovered: Dict[int, str] = {}

    def is_correct(self, position: int, letter: str) -> bool:
        return position_leaf(position, letter, self.salt) == self.position_hashes[position]

    def actual_letter_at(self, position: int) -> str:
        if position not in self._recovered:
            for candidate in self.alphabet:
                if self.is_correct(position, candidate):
                    self._recovered[position] = candidate
                    break
            else:
                raise VerificationMismatch(position)
        return self._recovered[position]


def evaluate_with_oracle(guess: str, oracle: LetterOracle) -> GuessResult:
    """
    Evaluate a guess using the two-pass Wordle rule.

    Pass one marks exact matches as correct and removes those positions from
    the letter pool. Pass two counts the committed letters at the remaining
    positions and marks guess letters present, left to right, while the pool
    still holds that letter; everything else is absent.

    Args:
        guess: Guessed word (case-insensitive)
        oracle: Source of letter-at-position answers

    Returns:
        GuessResult with one LetterState per position

    Raises:
        InvalidGuessLength: If the guess length differs from the oracle's word length
    """
    if not isinstance(guess, str):
        raise InvalidInput("Guess must be a valid string")

    normalized_guess = guess.upper()
    word_length = oracle.word_length
    if len(normalized_guess) != word_length:
        raise InvalidGuessLength(word_length, len(normalized_guess))

    statuses: List[Optional[LetterStatus]] = [None] * word_length

    # First pass: exact position matches claim their position
    for i, letter in enumerate(normalized_guess):
        if oracle.is_correct(i, letter):
            statuses[i] = LetterStatus.CORRECT

    # Pool of committed letters at unclaimed positions
    remaining: Dict[str, int] = {}
    for i in range(word_length):
        if statuses[i] == LetterStatus.CORRECT:
            continue
        try:
            actual = oracle.actual_letter_at(i)
        except VerificationMismatch as mismatch:
            game_logger.logger.warning(f"Position hash verification failed: {mismatch}")
            continue
        remaining[actual] = remaining.get(actual, 0) + 1

    # Second pass: present or absent, consuming the pool left to right
    for i, letter in enumerate(normalized_guess):
        if statuses[i] == LetterStatus.CORRECT:
            continue
        if remaining.get(letter, 0) > 0:
            statuses[i] = LetterStatus.PRESENT
            remaining[letter] -= 1
        else:
            statuses[i] = LetterStatus.ABSENT

    letter_states = [
        LetterState(position=i, letter=letter, state=statuses[i])
        for i, letter in enumerate(normalized_guess)
    ]

    return GuessResult(
        letter_states=letter_states,
        is_winner=all(state == LetterStatus.CORRECT for state in statuses),
        guess=normalized_guess
    )


def evaluate_guess(guess: str,
                   secret_or_hashes: Union[str, Sequence[str]],
                   salt: Optional[str] = None,
                   word_length: Optional[int] = None) -> GuessResult:
    """
    Evaluate a guess in plaintext mode (secret given as a string) or hash
    mode (position hash table given as a list, salt required).

    In hash mode the table is only checked against word_length when one is
    passed. Without it the table's own length is taken as the word length,
    so a short or long table surfaces as InvalidGuessLength instead of
    InvalidPositionHashes. Callers holding a proof bundle should pass its
    word_length, as validate_guess_with_zk does.

    Args:
        guess: Guessed word
        secret_or_hashes: Secret word, or the published position hashes
        salt: Salt the position hashes were built with (hash mode only)
        word_length: Committed word length, when known from a proof bundle

    Raises:
        InvalidGuessLength: If the guess length differs from the word length
        InvalidPositionHashes: If the hash table length differs from word_length
        InvalidInput: If the inputs are malformed
    """
    if isinstance(secret_or_hashes, str):
        oracle = PlaintextOracle(secret_or_hashes)
    elif isinstance(secret_or_hashes, (list, tuple)):
        if word_length is not None:
            if not isinstance(guess, str):
                raise InvalidInput("Guess must be a valid string")
            if len(guess.upper()) != word_length:
                raise InvalidGuessLength(word_length, len(guess.upper()))
            if len(secret_or_hashes) != word_length:
                raise InvalidPositionHashes(word_length, len(secret_or_hashes))
        oracle = PositionHashOracle(secret_or_hashes, salt)
    else:
        raise InvalidInput("Expected a secret word or a list of position hashes")

    return evaluate_with_oracle(guess, oracle)
