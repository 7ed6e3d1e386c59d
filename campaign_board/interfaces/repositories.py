"""
Repository interfaces for data access.

These interfaces define the contracts for data access components,
allowing for different storage implementations (MongoDB, memory, etc.)
without changing the business logic.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from campaign_board.domains import Project, ProjectCategory, ProjectStatus


class ProjectRepository(ABC):
    """Interface for project storage."""

    @abstractmethod
    def create(self, project: Project) -> str:
        """Persist a new project and return its ID."""
        pass

    @abstractmethod
    def get(self, project_id: str) -> Optional[Project]:
        """Get a project by ID."""
        pass

    @abstractmethod
    def update_status(
        self,
        project_id: str,
        expected_status: ProjectStatus,
        new_status: ProjectStatus,
        reason: Optional[str] = None,
    ) -> Project:
        """Atomically move a project from expected_status to new_status.

        Raises:
            NotFound: If no project has the given ID
            InvalidTransition: If the project is not in expected_status
        """
        pass

    @abstractmethod
    def find_by_status(
        self, status: ProjectStatus, category: Optional[ProjectCategory] = None
    ) -> List[Project]:
        """Find projects by status, most recently submitted first."""
        pass

    @abstractmethod
    def find_by_creator(self, creator_id: str) -> List[Project]:
        """Find projects submitted by a user, most recently submitted first."""
        pass


class SessionRepository(ABC):
    """Interface for resolving session tokens issued by the identity provider."""

    @abstractmethod
    def get_user_id(self, token: str) -> Optional[str]:
        """Return the user ID for a live session token, or None."""
        pass


class RoleRepository(ABC):
    """Read-only interface to the role assignments of users."""

    @abstractmethod
    def get_roles(self, user_id: str) -> List[str]:
        """Return the roles assigned to a user."""
        pass
