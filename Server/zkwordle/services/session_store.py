"""
Session Stores

Key-value storage of game sessions by session id. The proof logic only
depends on the SessionStore interface, so sessions can live in process
memory or in MongoDB.
"""

from typing import Callable, Dict, Optional, Tuple

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.game import Session
from ..utils.errors import SessionNotFound
from ..utils.game_logger import game_logger


class SessionStore:
    """Interface for session storage."""

    def get(self, session_id: str) -> Optional[Session]:
        raise NotImplementedError

    def put(self, session_id: str, session: Session) -> None:
        raise NotImplementedError

    def delete(self, session_id: str) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def require(self, session_id: str) -> Session:
        """
        Returns the stored session.

        Raises:
            SessionNotFound: If nothing is stored under session_id
        """
        session = self.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def get_or_regenerate(self, session_id: str,
                          regenerate: Callable[[str], Session]) -> Tuple[Session, bool]:
        """
        Returns the stored session, or regenerates and stores one on a miss.

        A miss is not an error: regenerate is expected to rebuild a session
        bound to the current secret, which is derived from the day key.

        Returns:
            Tuple of (session, regenerated)
        """
        try:
            return self.require(session_id), False
        except SessionNotFound:
            game_logger.logger.info(f"Session {session_id} not found, regenerating")

        session = regenerate(session_id)
        self.put(session_id, session)
        return session, True


class InMemorySessionStore(SessionStore):
    """Process-local store; sessions are lost on restart."""

    def __init__(self):
        self.sessions: Dict[str, Session] = {}

    def get(self, session_id: str) -> Optional[Session]:
        return self.sessions.get(session_id)

    def put(self, session_id: str, session: Session) -> None:
        self.sessions[session_id] = session

    def delete(self, session_id: str) -> bool:
        if session_id in self.sessions:
            del self.sessions[session_id]
            return True
        return False

    def count(self) -> int:
        return len(self.sessions)


class MongoSessionStore(SessionStore):
    """
    MongoDB-backed store.

    One document per session, keyed by a unique session_id index.
    """

    def __init__(self, collection):
        self.collection = collection
        self.collection.create_index("session_id", unique=True)

    @classmethod
    def from_uri(cls, mongo_uri: str, db_name: str = "zk_wordle") -> 'MongoSessionStore':
        """
        Connect to MongoDB and use the zk_sessions collection.

        Raises:
            pymongo.errors.PyMongoError: If the server cannot be reached
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        client.admin.command('ping')
        game_logger.logger.info("Successfully connected to MongoDB session store")
        return cls(client[db_name].zk_sessions)

    def get(self, session_id: str) -> Optional[Session]:
        document = self.collection.find_one({"session_id": session_id})
        if document is None:
            return None
        return Session.from_document(document)

    def put(self, session_id: str, session: Session) -> None:
        document = session.to_document()
        document["session_id"] = session_id
        self.collection.replace_one({"session_id": session_id}, document, upsert=True)

    def delete(self, session_id: str) -> bool:
        return self.collection.delete_one({"session_id": session_id}).deleted_count > 0

    def count(self) -> int:
        return self.collection.count_documents({})


def create_session_store(config_class) -> SessionStore:
    """Pick the session backend from SESSION_BACKEND."""
    backend = getattr(config_class, 'SESSION_BACKEND', 'memory')

    if backend == 'mongo':
        if not config_class.MONGO_URI:
            raise ValueError("MONGO_URI must be set for the mongo session backend")
        return MongoSessionStore.from_uri(config_class.MONGO_URI, config_class.MONGO_DB_NAME)

    if backend != 'memory':
        raise ValueError(f"Unknown session backend: {backend}")

    return InMemorySessionStore()
