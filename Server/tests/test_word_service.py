from datetime import date, datetime, timedelta

import pytest

from zkwordle.config import WORD_LIST, is_game_word, validate_word_list_integrity, get_word_statistics
from zkwordle.services.word_service import WordOfDayService
from zkwordle.utils.errors import InvalidInput, UpstreamUnavailable


def test_word_list_is_valid():
    assert validate_word_list_integrity() is True
    assert 'CRANE' in WORD_LIST
    assert get_word_statistics()['total_words'] == len(WORD_LIST)


@pytest.mark.parametrize('words', [
    ['CRANE', 'CRANE'], ['crane'], ['CRAN'], ['CR4NE'], ['CAFÉS'], ['STRAß'], []
])
def test_word_list_validation_failures(words):
    with pytest.raises(ValueError):
        validate_word_list_integrity(words)


def test_today_key_uses_clock():
    service = WordOfDayService(today=lambda: date(2026, 1, 2))

    assert service.today_key() == '2026-01-02'


def test_daily_word_is_deterministic_across_instances():
    first = WordOfDayService(today=lambda: date(2026, 10, 19))
    second = WordOfDayService(today=lambda: date(2026, 10, 19))

    assert first.get_todays_word() == second.get_todays_word()
    assert first.get_todays_word() in WORD_LIST


def test_cached_override_wins(word_service):
    assert word_service.get_todays_word() == 'CRANE'
    assert word_service.get_cached_word('2026-10-19') == 'CRANE'
    assert word_service.get_cached_word('2026-10-20') is None


def test_cache_rejects_malformed_input(word_service):
    with pytest.raises(InvalidInput):
        word_service.cache_word_for_date('19/10/2026', 'CRANE')
    with pytest.raises(InvalidInput):
        word_service.cache_word_for_date('2026-10-20', 'CRANES')


@pytest.mark.parametrize('word', ['straß', 'STRAß', 'CAFÉS', 'ÉTUDE', 'ΑΒΓΔΕ'])
def test_cache_rejects_letters_outside_a_to_z(word_service, word):
    with pytest.raises(InvalidInput):
        word_service.cache_word_for_date('2026-10-20', word)

    assert word_service.get_cached_word('2026-10-20') is None


def test_word_list_entries_must_be_a_to_z():
    with pytest.raises(InvalidInput):
        WordOfDayService(word_list=['CRANE', 'CAFÉS'], today=lambda: date(2026, 10, 19))

    service = WordOfDayService(word_list=['crane'], today=lambda: date(2026, 10, 19))
    assert service.get_todays_word() == 'CRANE'


@pytest.mark.parametrize('word, expected', [
    ('crane', True), ('CRANE', True), ('straß', False), ('CAFÉS', False),
    ('CR4NE', False), ('CRAN', False), ('', False), (None, False),
])
def test_is_game_word(word, expected):
    assert is_game_word(word) is expected


def test_cache_drops_entries_older_than_thirty_days(word_service):
    word_service.cache['2026-01-01'] = {'word': 'SPEED', 'timestamp': datetime.now() - timedelta(days=31)}

    word_service.cache_word_for_date('2026-10-20', 'trace')

    assert '2026-01-01' not in word_service.cache
    assert word_service.get_cached_word('2026-10-20') == 'TRACE'


def test_empty_word_list_is_upstream_failure():
    service = WordOfDayService(word_list=[], today=lambda: date(2026, 10, 19))

    with pytest.raises(UpstreamUnavailable):
        service.get_todays_word()
