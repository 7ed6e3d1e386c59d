"""
Service interfaces for business logic components.

These interfaces define the contracts for business logic services,
ensuring proper separation of concerns and testability.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from campaign_board.domains import Principal, Project


class AccessControlService(ABC):
    """Interface for resolving sessions and guarding operations."""

    @abstractmethod
    def resolve(self, session_token: Optional[str]) -> Principal:
        """Resolve a session token to the caller it belongs to."""
        pass

    @abstractmethod
    def require_authenticated(self, session_token: Optional[str]) -> str:
        """Return the caller's user ID or raise Unauthenticated."""
        pass

    @abstractmethod
    def require_admin(self, session_token: Optional[str]) -> str:
        """Return the caller's user ID or raise Unauthenticated/Forbidden."""
        pass


class SubmissionService(ABC):
    """Interface for submitting projects for review."""

    @abstractmethod
    async def submit(self, raw_payload: Dict[str, Any], session_token: Optional[str]) -> str:
        """Validate and store a new pending project, returning its ID."""
        pass

    @abstractmethod
    async def list_mine(self, session_token: Optional[str]) -> List[Project]:
        """List the caller's own submissions."""
        pass


class ModerationService(ABC):
    """Interface for reviewing pending projects."""

    @abstractmethod
    async def approve(self, project_id: str, session_token: Optional[str]) -> Project:
        """Publish a pending project."""
        pass

    @abstractmethod
    async def reject(self, project_id: str, reason: str, session_token: Optional[str]) -> Project:
        """Reject a pending project with a reason."""
        pass

    @abstractmethod
    async def list_pending(self, session_token: Optional[str]) -> List[Project]:
        """List projects awaiting review, newest first."""
        pass


class CatalogService(ABC):
    """Interface for public browsing of published projects."""

    @abstractmethod
    async def list_active(self, category: Optional[str] = None) -> List[Project]:
        """List published projects."""
        pass

    @abstractmethod
    async def get_active(self, project_id: str) -> Project:
        """Get a single published project."""
        pass
