"""
Game Service

Session-oriented game logic: starting games, validating guesses with
per-letter proofs, publishing the word-of-day commitment bundle and the
plain guess check.
"""

import uuid
from typing import Dict, List, Optional

from ..config.app_config import Config
from ..config.game_settings import is_alphabet_word, is_game_word
from ..models.game import GuessResult, LetterState, LetterStatus, Session
from ..utils.errors import InvalidGuessLength, InvalidInput
from ..utils.game_logger import game_logger
from .evaluator import PlaintextOracle, evaluate_guess, evaluate_with_oracle
from .proof_service import (
    build_position_hashes, generate_letter_proof,
    generate_word_presence_proof, generate_zk_proof
)
from .session_store import InMemorySessionStore, SessionStore
from .word_service import WordOfDayService

PRACTICE_PREFIX = 'practice-'


class ZKGameService:
    """
    Game service managing proof-backed sessions.

    This class handles:
    - Session creation bound to the day's secret and the permanent salt
    - Regeneration of unknown sessions from the day key
    - Guess validation with letter and presence proofs
    - Board/keyboard history without exposing the answer to clients
    """

    def __init__(self,
                 word_service: WordOfDayService,
                 session_store: Optional[SessionStore] = None,
                 salt: str = Config.ZK_SALT,
                 max_rounds: int = Config.MAX_ROUNDS,
                 daily_salt_template: str = Config.DAILY_SALT_TEMPLATE):
        self.word_service = word_service
        self.session_store = session_store if session_store is not None else InMemorySessionStore()
        self.salt = salt
        self.max_rounds = max_rounds
        self.daily_salt_template = daily_salt_template

    def _new_session(self, session_id: str, regenerated: bool = False) -> Session:
        word = self.word_service.get_todays_word().upper()
        return Session(
            session_id=session_id,
            secret=word,
            proof_bundle=generate_zk_proof(word, self.salt),
            date=self.word_service.today_key(),
            regenerated=regenerated
        )

    def start_game(self) -> Session:
        """
        Creates a session bound to today's word.

        Returns:
            Session: The stored session; only its id and bundle may be sent to clients

        Raises:
            UpstreamUnavailable: If the word source has no word
        """
        session_id = str(uuid.uuid4())
        session = self._new_session(session_id)
        self.session_store.put(session_id, session)

        game_logger.log_game_event(
            session_id, 'session_started', 'system',
            date=session.date, active_sessions=self.session_store.count()
        )
        return session

    def regenerate_session(self, session_id: str) -> Session:
        """
        Rebuild a session for an unknown id from today's word.

        Two regenerations on the same day bind to the same word and salt, so
        their position hashes evaluate guesses identically.
        """
        session = self._new_session(session_id, regenerated=True)
        game_logger.log_game_event(session_id, 'session_regenerated', 'system', date=session.date)
        return session

    def is_game_over(self, session: Session) -> bool:
        return session.won or len(session.guesses) >= self.max_rounds

    def validate_guess(self, session_id: str, guess: str) -> GuessResult:
        """
        Evaluates a guess for a session and attaches proofs.

        Every position gets a letter proof; present letters also get a
        presence proof. The word is revealed once the game is won or the
        last round is used.

        Args:
            session_id: Session identifier (unknown ids are regenerated)
            guess: The guessed word

        Returns:
            GuessResult for the guess

        Raises:
            InvalidInput: If the guess is missing, malformed or the game is over
            InvalidGuessLength: If the guess length differs from the word length
            UpstreamUnavailable: If an unknown session cannot be regenerated
        """
        if not session_id or not guess:
            raise InvalidInput("Session ID and guess required")

        if not isinstance(guess, str) or not isinstance(session_id, str):
            raise InvalidInput("Session ID and guess must be strings")

        session, _ = self.session_store.get_or_regenerate(session_id, self.regenerate_session)

        if self.is_game_over(session):
            raise InvalidInput("Game is already over")

        word = session.secret.upper()
        normalized_guess = guess.strip().upper()

        if len(normalized_guess) != len(word):
            raise InvalidGuessLength(len(word), len(normalized_guess))

        if not is_alphabet_word(normalized_guess):
            raise InvalidInput("Guess must contain only letters A-Z")

        result = evaluate_with_oracle(normalized_guess, PlaintextOracle(word))
        self._attach_proofs(word, result.letter_states)

        session.guesses.append(normalized_guess)
        self._update_letter_status(session.letter_status, result.letter_states)
        if result.is_winner:
            session.won = True

        result.session_id = session_id
        if self.is_game_over(session):
            result.word = word

        self.session_store.put(session_id, session)
        return result

    def _attach_proofs(self, word: str, letter_states: List[LetterState]) -> None:
        for letter_state in letter_states:
            letter_state.proof = generate_letter_proof(
                word, letter_state.position, letter_state.letter, self.salt
            )
            if letter_state.state == LetterStatus.PRESENT:
                letter_state.presence_proof = generate_word_presence_proof(
                    word, letter_state.letter, self.salt
                )

    def _update_letter_status(self, letter_status: Dict[str, str], letter_states: List[LetterState]) -> None:
        """
        Updates keyboard letter status based on guess results.

        Status only moves up: unused < absent < present < correct.
        """
        for letter_state in letter_states:
            letter = letter_state.letter
            new_status = letter_state.state
            current_status = LetterStatus(letter_status.get(letter, LetterStatus.UNUSED.value))

            if new_status == LetterStatus.CORRECT:
                letter_status[letter] = LetterStatus.CORRECT.value
            elif new_status == LetterStatus.PRESENT and current_status != LetterStatus.CORRECT:
                letter_status[letter] = LetterStatus.PRESENT.value
            elif new_status == LetterStatus.ABSENT and current_status == LetterStatus.UNUSED:
                letter_status[letter] = LetterStatus.ABSENT.value

    def get_session_state(self, session_id: str) -> Optional[Dict]:
        """
        Returns the public state of a session (without revealing the answer).

        Returns:
            dict or None if the session is not stored
        """
        session = self.session_store.get(session_id)
        if session is None:
            return None

        game_over = self.is_game_over(session)
        return {
            'sessionId': session.session_id,
            'date': session.date,
            'zkProof': session.proof_bundle.to_dict(),
            'guesses': list(session.guesses),
            'letterStatus': dict(session.letter_status),
            'maxRounds': self.max_rounds,
            'won': session.won,
            'gameOver': game_over,
            'word': session.secret if game_over else None
        }

    def daily_salt(self, date_key: str) -> str:
        return self.daily_salt_template.format(date=date_key)

    def get_published_bundle(self, date_key: Optional[str] = None) -> Dict:
        """
        Builds the word-of-day publication for client-side validation.

        The salt is included so clients can recompute position hashes.
        """
        date_key = date_key or self.word_service.today_key()
        word = self.word_service.get_word_for_date(date_key)
        salt = self.daily_salt(date_key)

        return {
            'date': date_key,
            'method': 'word_list',
            'zkProof': generate_zk_proof(word, salt).to_dict(),
            'positionHashes': build_position_hashes(word, salt),
            'salt': salt
        }

    def check_plaintext_guess(self, guess: str, game_id: Optional[str] = None) -> Dict:
        """
        Plain guess check without proofs.

        Practice game ids ('practice-WORD') carry their own solution; any
        other id is checked against today's word.

        Raises:
            InvalidInput: If the guess or practice id is malformed
        """
        if not is_game_word(guess):
            raise InvalidInput("Invalid guess")

        if isinstance(game_id, str) and game_id.startswith(PRACTICE_PREFIX):
            solution = game_id[len(PRACTICE_PREFIX):]
            if not is_game_word(solution):
                raise InvalidInput("Invalid practice game ID")
        else:
            solution = self.word_service.get_todays_word()

        result = evaluate_guess(guess, solution)
        return {
            'result': result.states,
            'isCorrect': result.guess == solution.upper()
        }

    def delete_session(self, session_id: str) -> bool:
        return self.session_store.delete(session_id)

    def active_sessions_count(self) -> int:
        return self.session_store.count()


# Global service instance
_game_service = None


def get_game_service() -> Optional[ZKGameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_service: WordOfDayService,
                            session_store: Optional[SessionStore] = None,
                            config_class=Config) -> ZKGameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = ZKGameService(
        word_service,
        session_store,
        salt=config_class.ZK_SALT,
        max_rounds=config_class.MAX_ROUNDS,
        daily_salt_template=config_class.DAILY_SALT_TEMPLATE
    )
    return _game_service
