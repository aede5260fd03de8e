"""
Word Of The Day Service

Provides the secret word for a date. The word is picked deterministically
from the curated word list, seeded by the date key, so every process and
every regenerated session agrees on the day's word. Manual overrides can
be cached per date.
"""

import random
from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional

from ..config.game_settings import WORD_LIST, WORD_LENGTH, is_game_word
from ..utils.errors import InvalidInput, UpstreamUnavailable
from ..utils.game_logger import game_logger

CACHE_RETENTION_DAYS = 30


class WordOfDayService:
    """
    Source of daily secret words.

    Lookup order for a date key: cached override, then a seeded pick from
    the word list.
    """

    def __init__(self, word_list: Optional[List[str]] = None,
                 today: Optional[Callable[[], date]] = None):
        words = WORD_LIST if word_list is None else word_list
        invalid = [word for word in words if not is_game_word(word)]
        if invalid:
            raise InvalidInput(f"Word list entries must be {WORD_LENGTH} letters A-Z: {invalid}")
        self.word_list = [word.upper() for word in words]
        self._today = today or date.today
        self.cache: Dict[str, Dict] = {}  # date key -> {"word", "timestamp"}

    def today_key(self) -> str:
        """Today's date as YYYY-MM-DD."""
        return self._today().isoformat()

    def get_todays_word(self) -> str:
        return self.get_word_for_date(self.today_key())

    def get_word_for_date(self, date_key: str) -> str:
        """
        Returns the secret word for a date key.

        Raises:
            UpstreamUnavailable: If there is no word list to pick from
        """
        entry = self.cache.get(date_key)
        if entry:
            return entry["word"]

        if not self.word_list:
            raise UpstreamUnavailable("No words available to pick the word of the day")

        return random.Random(date_key).choice(self.word_list)

    def get_cached_word(self, date_key: str) -> Optional[str]:
        entry = self.cache.get(date_key)
        return entry["word"] if entry else None

    def cache_word_for_date(self, date_key: str, word: str) -> None:
        """
        Manually pin the word for a date.

        Raises:
            InvalidInput: If the date key or the word is malformed
        """
        try:
            datetime.strptime(date_key, '%Y-%m-%d')
        except (TypeError, ValueError):
            raise InvalidInput(f"Invalid date key: {date_key}")

        if not is_game_word(word):
            raise InvalidInput(f"Word must be {WORD_LENGTH} letters A-Z")

        self.cache[date_key] = {"word": word.upper(), "timestamp": datetime.now()}
        self._clean_old_entries()
        game_logger.logger.info(f"Cached word override for {date_key}")

    def _clean_old_entries(self) -> None:
        cutoff = datetime.now() - timedelta(days=CACHE_RETENTION_DAYS)
        self.cache = {
            key: entry for key, entry in self.cache.items()
            if entry["timestamp"] > cutoff
        }


# Global service instance
_word_service = None


def get_word_service() -> Optional[WordOfDayService]:
    """Get the global word service instance."""
    return _word_service


def initialize_word_service(word_list: Optional[List[str]] = None,
                            today: Optional[Callable[[], date]] = None) -> WordOfDayService:
    """Initialize the global word service instance."""
    global _word_service
    _word_service = WordOfDayService(word_list, today)
    return _word_service
