"""
Project repository implementations.

This module provides data access for projects, backed either by MongoDB or
by process memory.
"""
import logging
import threading
import uuid
from datetime import timezone
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError

from campaign_board.interfaces.providers.data_storage import DataStorageProvider
from campaign_board.interfaces.repositories import ProjectRepository
from campaign_board.domains import (
    DuplicateProject,
    InvalidTransition,
    NotFound,
    Project,
    ProjectCategory,
    ProjectStatus,
    can_transition,
)

logger = logging.getLogger(__name__)


def _check_transition(project_id: str, expected: ProjectStatus, new: ProjectStatus) -> None:
    if not can_transition(expected, new):
        raise InvalidTransition(project_id, expected.value, new.value)


class MongoProjectRepository(ProjectRepository):
    """MongoDB implementation of the ProjectRepository interface."""

    def __init__(self, db_adapter: DataStorageProvider, collection_name: str = "projects"):
        """Initialize with a MongoDB adapter.

        Args:
            db_adapter: MongoDB adapter
            collection_name: Name of the collection to use
        """
        self.db = db_adapter
        self.collection = collection_name

        self.db.create_collection(self.collection)
        self.db.create_index(self.collection, [("id", ASCENDING)], unique=True)
        self.db.create_index(
            self.collection, [("status", ASCENDING), ("submitted_at", DESCENDING)])
        self.db.create_index(self.collection, [("creator_id", ASCENDING)])

    @staticmethod
    def _to_document(project: Project) -> Dict[str, Any]:
        document = project.model_dump()
        document["status"] = project.status.value
        document["category"] = project.category.value
        return document

    @staticmethod
    def _from_document(document: Dict[str, Any]) -> Project:
        document = dict(document)
        document.pop("_id", None)
        for field in ("submitted_at", "created_at"):
            value = document.get(field)
            if value is not None and value.tzinfo is None:
                document[field] = value.replace(tzinfo=timezone.utc)
        return Project(**document)

    def create(self, project: Project) -> str:
        """Create a new project.

        Args:
            project: Project to create

        Returns:
            ID of the created project
        """
        if not project.id:
            project.id = str(uuid.uuid4())

        try:
            self.db.insert_one(self.collection, self._to_document(project))
        except DuplicateKeyError:
            raise DuplicateProject(project.id)
        return project.id

    def get(self, project_id: str) -> Optional[Project]:
        """Get a project by ID.

        Args:
            project_id: ID of the project to retrieve

        Returns:
            Project or None if not found
        """
        document = self.db.find_one(self.collection, {"id": project_id})
        if not document:
            return None
        return self._from_document(document)

    def update_status(
        self,
        project_id: str,
        expected_status: ProjectStatus,
        new_status: ProjectStatus,
        reason: Optional[str] = None,
    ) -> Project:
        """Move a project between statuses with a compare-and-set on status.

        Args:
            project_id: ID of the project
            expected_status: Status the project must currently have
            new_status: Status to set
            reason: Rejection reason, stored only for rejected projects

        Returns:
            The updated project
        """
        _check_transition(project_id, expected_status, new_status)

        changes: Dict[str, Any] = {"status": new_status.value}
        if new_status == ProjectStatus.REJECTED:
            changes["rejection_reason"] = reason

        document = self.db.find_one_and_update(
            self.collection,
            {"id": project_id, "status": expected_status.value},
            {"$set": changes},
        )
        if document:
            return self._from_document(document)

        # Nothing matched: either the project is gone or another writer won.
        current = self.get(project_id)
        if current is None:
            raise NotFound(project_id)
        logger.info(
            f"Status update skipped for project {project_id}: "
            f"expected {expected_status.value}, found {current.status.value}"
        )
        raise InvalidTransition(project_id, current.status.value, new_status.value)

    def find_by_status(
        self, status: ProjectStatus, category: Optional[ProjectCategory] = None
    ) -> List[Project]:
        """Find projects by status.

        Args:
            status: Project status
            category: Optional category filter

        Returns:
            Matching projects, most recently submitted first
        """
        query: Dict[str, Any] = {"status": ProjectStatus(status).value}
        if category is not None:
            query["category"] = ProjectCategory(category).value

        documents = self.db.find(
            self.collection, query, sort=[("submitted_at", DESCENDING)])
        return [self._from_document(document) for document in documents]

    def find_by_creator(self, creator_id: str) -> List[Project]:
        """Find projects by submitter.

        Args:
            creator_id: ID of the submitter

        Returns:
            The submitter's projects, most recently submitted first
        """
        documents = self.db.find(
            self.collection, {"creator_id": creator_id}, sort=[("submitted_at", DESCENDING)])
        return [self._from_document(document) for document in documents]


class InMemoryProjectRepository(ProjectRepository):
    """In-process project store, used for tests and local demos."""

    def __init__(self):
        self._projects: Dict[str, Project] = {}
        self._lock = threading.Lock()

    def create(self, project: Project) -> str:
        if not project.id:
            project.id = str(uuid.uuid4())
        with self._lock:
            if project.id in self._projects:
                raise DuplicateProject(project.id)
            self._projects[project.id] = project.model_copy(deep=True)
        return project.id

    def get(self, project_id: str) -> Optional[Project]:
        with self._lock:
            project = self._projects.get(project_id)
            return project.model_copy(deep=True) if project else None

    def update_status(
        self,
        project_id: str,
        expected_status: ProjectStatus,
        new_status: ProjectStatus,
        reason: Optional[str] = None,
    ) -> Project:
        _check_transition(project_id, expected_status, new_status)

        with self._lock:
            project = self._projects.get(project_id)
            if project is None:
                raise NotFound(project_id)
            if project.status != expected_status:
                raise InvalidTransition(project_id, project.status.value, new_status.value)

            changes: Dict[str, Any] = {"status": new_status}
            if new_status == ProjectStatus.REJECTED:
                changes["rejection_reason"] = reason
            updated = project.model_copy(update=changes)
            self._projects[project_id] = updated
            return updated.model_copy(deep=True)

    def _sorted(self, projects: List[Project]) -> List[Project]:
        ordered = sorted(projects, key=lambda p: p.submitted_at, reverse=True)
        return [project.model_copy(deep=True) for project in ordered]

    def find_by_status(
        self, status: ProjectStatus, category: Optional[ProjectCategory] = None
    ) -> List[Project]:
        with self._lock:
            matches = [
                p for p in self._projects.values()
                if p.status == status and (category is None or p.category == category)
            ]
            return self._sorted(matches)

    def find_by_creator(self, creator_id: str) -> List[Project]:
        with self._lock:
            return self._sorted(
                [p for p in self._projects.values() if p.creator_id == creator_id])
