from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from campaign_board.domains import OperationResult


class CampaignBoard(ABC):
    """Interface for the Campaign Board client."""

    @abstractmethod
    async def submit_project(self, payload: Dict[str, Any], session_token: Optional[str]) -> OperationResult:
        """Submit a project for review."""
        pass

    @abstractmethod
    async def list_pending_projects(self, session_token: Optional[str]) -> OperationResult:
        """List projects awaiting review."""
        pass

    @abstractmethod
    async def approve_project(self, project_id: str, session_token: Optional[str]) -> OperationResult:
        """Approve a pending project."""
        pass

    @abstractmethod
    async def reject_project(self, project_id: str, reason: str, session_token: Optional[str]) -> OperationResult:
        """Reject a pending project."""
        pass

    @abstractmethod
    async def list_active_projects(self, category: Optional[str] = None) -> OperationResult:
        """List published projects."""
        pass

    @abstractmethod
    async def get_active_project(self, project_id: str) -> OperationResult:
        """Get a published project."""
        pass

    @abstractmethod
    async def list_my_projects(self, session_token: Optional[str]) -> OperationResult:
        """List the caller's submissions."""
        pass
