"""
Moderation service implementation.

Admins decide pending projects exactly once: pending -> active publishes a
project, pending -> rejected records why it was turned down. Both end states
are final.
"""
import logging
from typing import List, Optional

from campaign_board.interfaces.services import (
    AccessControlService,
    ModerationService as ModerationServiceInterface,
)
from campaign_board.interfaces.repositories import ProjectRepository
from campaign_board.domains import (
    InvalidTransition,
    MissingReason,
    Project,
    ProjectStatus,
)

logger = logging.getLogger(__name__)


class ModerationService(ModerationServiceInterface):
    """Service for approving and rejecting submitted projects."""

    def __init__(self, project_repository: ProjectRepository, access_control: AccessControlService):
        """Initialize the moderation service.

        Args:
            project_repository: Repository for project data
            access_control: Service resolving sessions to users
        """
        self.repository = project_repository
        self.access_control = access_control

    def _decide(
        self,
        project_id: str,
        admin_id: str,
        new_status: ProjectStatus,
        reason: Optional[str] = None,
    ) -> Project:
        try:
            project = self.repository.update_status(
                project_id, ProjectStatus.PENDING, new_status, reason=reason
            )
        except InvalidTransition as e:
            logger.warning(
                f"Invalid moderation attempted: project={project_id}, "
                f"from={e.current_status}, to={new_status.value}, actor={admin_id}"
            )
            raise

        logger.info(
            f"Project moderated: project={project_id}, "
            f"from={ProjectStatus.PENDING.value}, to={new_status.value}, actor={admin_id}"
        )
        return project

    async def approve(self, project_id: str, session_token: Optional[str]) -> Project:
        """Approve a pending project so it is publicly listed.

        Args:
            project_id: Project ID
            session_token: Caller's session

        Returns:
            The approved project

        Raises:
            Unauthenticated, Forbidden: If the caller is not an admin
            NotFound: If the project does not exist
            InvalidTransition: If the project is no longer pending
        """
        admin_id = self.access_control.require_admin(session_token)
        return self._decide(project_id, admin_id, ProjectStatus.ACTIVE)

    async def reject(self, project_id: str, reason: str, session_token: Optional[str]) -> Project:
        """Reject a pending project.

        Args:
            project_id: Project ID
            reason: Feedback for the submitter, required
            session_token: Caller's session

        Returns:
            The rejected project

        Raises:
            Unauthenticated, Forbidden: If the caller is not an admin
            MissingReason: If reason is blank
            NotFound: If the project does not exist
            InvalidTransition: If the project is no longer pending
        """
        admin_id = self.access_control.require_admin(session_token)

        reason = (reason or "").strip()
        if not reason:
            raise MissingReason()

        return self._decide(project_id, admin_id, ProjectStatus.REJECTED, reason=reason)

    async def list_pending(self, session_token: Optional[str]) -> List[Project]:
        """List projects awaiting review, most recently submitted first."""
        self.access_control.require_admin(session_token)
        return self.repository.find_by_status(ProjectStatus.PENDING)
