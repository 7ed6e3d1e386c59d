import os
import uuid
import pytest
import mongomock
from unittest.mock import patch
from pymongo import MongoClient, ASCENDING, DESCENDING

from campaign_board.adapters.mongodb_adapter import MongoDBAdapter


@pytest.fixture
def mongo_client():
    """Fixture for MongoDB client (mock or real based on env var)."""
    if os.environ.get("MONGODB_REAL") == "1":
        # Use real MongoDB for integration tests
        client = MongoClient("mongodb://localhost:27017/")
        yield client
        client.drop_database("test_db")
    else:
        # Use mongomock for unit tests
        yield mongomock.MongoClient()


@pytest.fixture
def mongodb_adapter(mongo_client):
    """Fixture for MongoDB adapter."""
    adapter = MongoDBAdapter(connection_string="mongodb://localhost:27017/", database_name="test_db")
    # Replace the real client with our fixture
    adapter.client = mongo_client
    adapter.db = mongo_client["test_db"]
    return adapter


@pytest.fixture
def sample_projects():
    """Fixture for sample project documents."""
    return [
        {"id": "p1", "title": "Library books", "status": "pending", "goal_amount": 500},
        {"id": "p2", "title": "Science kits", "status": "active", "goal_amount": 1200},
        {"id": "p3", "title": "Art supplies", "status": "pending", "goal_amount": 300},
    ]


class TestMongoDBAdapter:
    """Test suite for MongoDB adapter."""

    def test_client_is_timezone_aware(self):
        """Test that stored datetimes are read back with a timezone."""
        with patch("campaign_board.adapters.mongodb_adapter.MongoClient") as client_cls:
            MongoDBAdapter(connection_string="mongodb://localhost:27017/", database_name="test_db")

        client_cls.assert_called_once_with("mongodb://localhost:27017/", tz_aware=True)

    def test_create_collection(self, mongodb_adapter):
        """Test creating a collection is idempotent."""
        mongodb_adapter.create_collection("projects")
        mongodb_adapter.create_collection("projects")
        assert "projects" in mongodb_adapter.db.list_collection_names()

    def test_insert_one_without_id(self, mongodb_adapter):
        """Test inserting a document without ID generates a UUID."""
        result_id = mongodb_adapter.insert_one("projects", {"title": "Test"})
        uuid.UUID(result_id)
        stored = mongodb_adapter.db["projects"].find_one({"_id": result_id})
        assert stored["title"] == "Test"

    def test_insert_one_with_id(self, mongodb_adapter):
        """Test inserting a document keeps an existing ID."""
        result_id = mongodb_adapter.insert_one("projects", {"_id": "fixed", "title": "Test"})
        assert result_id == "fixed"

    def test_find_one(self, mongodb_adapter, sample_projects):
        """Test finding a single document."""
        for doc in sample_projects:
            mongodb_adapter.insert_one("projects", doc)

        assert mongodb_adapter.find_one("projects", {"id": "p2"})["title"] == "Science kits"
        assert mongodb_adapter.find_one("projects", {"id": "nope"}) is None

    def test_find_with_filter_and_sort(self, mongodb_adapter, sample_projects):
        """Test filtering and sorting documents."""
        for doc in sample_projects:
            mongodb_adapter.insert_one("projects", doc)

        results = mongodb_adapter.find(
            "projects", {"status": "pending"}, sort=[("goal_amount", DESCENDING)])
        assert [doc["id"] for doc in results] == ["p1", "p3"]

        results = mongodb_adapter.find("projects", {}, sort=[("goal_amount", ASCENDING)])
        assert [doc["id"] for doc in results] == ["p3", "p1", "p2"]

    def test_find_with_limit_and_skip(self, mongodb_adapter, sample_projects):
        """Test paging through documents."""
        for doc in sample_projects:
            mongodb_adapter.insert_one("projects", doc)

        results = mongodb_adapter.find(
            "projects", {}, sort=[("goal_amount", ASCENDING)], limit=1, skip=1)
        assert [doc["id"] for doc in results] == ["p1"]

    def test_find_one_and_update_matches(self, mongodb_adapter, sample_projects):
        """Test a matching conditional update returns the new document."""
        for doc in sample_projects:
            mongodb_adapter.insert_one("projects", doc)

        updated = mongodb_adapter.find_one_and_update(
            "projects", {"id": "p1", "status": "pending"}, {"$set": {"status": "active"}})

        assert updated["status"] == "active"
        assert mongodb_adapter.find_one("projects", {"id": "p1"})["status"] == "active"

    def test_find_one_and_update_no_match(self, mongodb_adapter, sample_projects):
        """Test a conditional update that does not match leaves data untouched."""
        for doc in sample_projects:
            mongodb_adapter.insert_one("projects", doc)

        updated = mongodb_adapter.find_one_and_update(
            "projects", {"id": "p2", "status": "pending"}, {"$set": {"status": "rejected"}})

        assert updated is None
        assert mongodb_adapter.find_one("projects", {"id": "p2"})["status"] == "active"

    def test_create_index(self, mongodb_adapter):
        """Test creating a unique index."""
        mongodb_adapter.create_index("projects", [("id", ASCENDING)], unique=True)
        index_info = mongodb_adapter.db["projects"].index_information()
        assert any(info.get("unique") for info in index_info.values())
