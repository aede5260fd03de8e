from types import SimpleNamespace

import pytest

from zkwordle.config import TestingConfig
from zkwordle.models.game import Session
from zkwordle.services.proof_service import generate_zk_proof
from zkwordle.services.session_store import (
    InMemorySessionStore, MongoSessionStore, create_session_store
)
from zkwordle.utils.errors import SessionNotFound


class FakeCollection:
    """Minimal stand-in for a pymongo collection."""

    def __init__(self):
        self.documents = {}
        self.indexes = []

    def create_index(self, key, unique=False):
        self.indexes.append((key, unique))

    def find_one(self, query):
        document = self.documents.get(query['session_id'])
        return dict(document, _id='object-id') if document else None

    def replace_one(self, query, document, upsert=False):
        assert upsert
        self.documents[query['session_id']] = dict(document)
        return SimpleNamespace(matched_count=1)

    def delete_one(self, query):
        removed = self.documents.pop(query['session_id'], None)
        return SimpleNamespace(deleted_count=1 if removed else 0)

    def count_documents(self, query):
        return len(self.documents)


def make_session(session_id='abc'):
    return Session(
        session_id=session_id,
        secret='CRANE',
        proof_bundle=generate_zk_proof('CRANE', 's1', now_ms=1),
        date='2026-10-19'
    )


@pytest.fixture(params=['memory', 'mongo'])
def store(request):
    if request.param == 'memory':
        return InMemorySessionStore()
    return MongoSessionStore(FakeCollection())


def test_put_get_delete(store):
    session = make_session()
    store.put('abc', session)

    loaded = store.get('abc')
    assert loaded.secret == 'CRANE'
    assert loaded.proof_bundle == session.proof_bundle
    assert store.count() == 1

    assert store.delete('abc') is True
    assert store.delete('abc') is False
    assert store.get('abc') is None


def test_require_raises_for_unknown_id(store):
    with pytest.raises(SessionNotFound):
        store.require('missing')


def test_get_or_regenerate_returns_stored_session(store):
    store.put('abc', make_session())

    session, regenerated = store.get_or_regenerate('abc', lambda sid: pytest.fail('should not regenerate'))

    assert regenerated is False
    assert session.session_id == 'abc'


def test_get_or_regenerate_stores_new_session_on_miss(store):
    session, regenerated = store.get_or_regenerate('new-id', make_session)

    assert regenerated is True
    assert session.session_id == 'new-id'
    assert store.get('new-id').secret == 'CRANE'


def test_session_history_survives_mongo_round_trip():
    store = MongoSessionStore(FakeCollection())
    session = make_session()
    session.guesses.append('TRACE')
    session.letter_status['T'] = 'absent'
    store.put('abc', session)

    loaded = store.get('abc')

    assert loaded.guesses == ['TRACE']
    assert loaded.letter_status['T'] == 'absent'
    assert loaded.won is False


def test_mongo_store_indexes_session_id():
    collection = FakeCollection()
    MongoSessionStore(collection)

    assert ('session_id', True) in collection.indexes


def test_create_session_store_backends():
    assert isinstance(create_session_store(TestingConfig), InMemorySessionStore)

    class MongoWithoutUri(TestingConfig):
        SESSION_BACKEND = 'mongo'
        MONGO_URI = None

    class Unknown(TestingConfig):
        SESSION_BACKEND = 'redis'

    with pytest.raises(ValueError):
        create_session_store(MongoWithoutUri)
    with pytest.raises(ValueError):
        create_session_store(Unknown)
