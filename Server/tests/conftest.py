import os
import tempfile
from datetime import date

os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'zkwordle-test-logs'))

import pytest

from zkwordle import create_app
from zkwordle.config import TestingConfig
from zkwordle.services.game_service import ZKGameService, initialize_game_service
from zkwordle.services.session_store import InMemorySessionStore
from zkwordle.services.word_service import WordOfDayService, initialize_word_service

TODAY = date(2026, 10, 19)
TODAY_KEY = '2026-10-19'
SECRET = 'CRANE'
SALT = TestingConfig.ZK_SALT


@pytest.fixture
def word_service():
    service = WordOfDayService(today=lambda: TODAY)
    service.cache_word_for_date(TODAY_KEY, SECRET)
    return service


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def game_service(word_service, session_store):
    return ZKGameService(word_service, session_store, salt=SALT, max_rounds=6)


@pytest.fixture
def app():
    word_service = initialize_word_service(today=lambda: TODAY)
    word_service.cache_word_for_date(TODAY_KEY, SECRET)
    initialize_game_service(word_service, InMemorySessionStore(), TestingConfig)
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
