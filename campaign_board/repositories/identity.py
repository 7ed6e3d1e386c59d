"""
Identity repository implementations.

Sessions and role assignments are owned by the identity provider; these
repositories only read them.
"""
import datetime
from typing import Dict, Iterable, List, Optional

from pymongo import ASCENDING

from campaign_board.interfaces.providers.data_storage import DataStorageProvider
from campaign_board.interfaces.repositories import RoleRepository, SessionRepository


class MongoSessionRepository(SessionRepository):
    """Resolves session tokens stored in MongoDB."""

    def __init__(self, db_adapter: DataStorageProvider, collection_name: str = "sessions"):
        self.db = db_adapter
        self.collection = collection_name
        self.db.create_collection(self.collection)
        self.db.create_index(self.collection, [("token", ASCENDING)], unique=True)

    def get_user_id(self, token: str) -> Optional[str]:
        if not token:
            return None
        session = self.db.find_one(self.collection, {"token": token})
        if not session:
            return None

        expires_at = session.get("expires_at")
        if expires_at is not None:
            if expires_at.tzinfo is None:
                expires_at = expires_at.replace(tzinfo=datetime.timezone.utc)
            if expires_at <= datetime.datetime.now(datetime.timezone.utc):
                return None

        return session.get("user_id")


class MongoRoleRepository(RoleRepository):
    """Reads role assignments from the user_roles collection."""

    def __init__(self, db_adapter: DataStorageProvider, collection_name: str = "user_roles"):
        self.db = db_adapter
        self.collection = collection_name
        self.db.create_collection(self.collection)
        self.db.create_index(self.collection, [("user_id", ASCENDING)])

    def get_roles(self, user_id: str) -> List[str]:
        assignments = self.db.find(self.collection, {"user_id": user_id})
        return [a["role"] for a in assignments if a.get("role")]


class InMemorySessionRepository(SessionRepository):
    """Session store held in memory."""

    def __init__(self, sessions: Optional[Dict[str, str]] = None):
        self.sessions: Dict[str, str] = dict(sessions or {})

    def get_user_id(self, token: str) -> Optional[str]:
        if not token:
            return None
        return self.sessions.get(token)


class InMemoryRoleRepository(RoleRepository):
    """Role assignments held in memory."""

    def __init__(self, roles: Optional[Dict[str, Iterable[str]]] = None):
        self.roles: Dict[str, List[str]] = {
            user_id: list(assigned) for user_id, assigned in (roles or {}).items()
        }

    def get_roles(self, user_id: str) -> List[str]:
        return list(self.roles.get(user_id, []))
