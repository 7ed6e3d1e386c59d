"""
Submission service implementation.

Turns a validated payload from an authenticated user into a pending project.
"""
import logging
from typing import Any, Dict, List, Optional

from campaign_board.interfaces.services import (
    AccessControlService,
    SubmissionService as SubmissionServiceInterface,
)
from campaign_board.interfaces.repositories import ProjectRepository
from campaign_board.domains import Project, ProjectStatus, ValidationFailed, utc_now
from campaign_board.services.validation import DEFAULT_CAMPAIGN_DOMAIN, validate_submission

logger = logging.getLogger(__name__)


class SubmissionService(SubmissionServiceInterface):
    """Service for submitting projects for review."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        access_control: AccessControlService,
        campaign_domain: str = DEFAULT_CAMPAIGN_DOMAIN,
    ):
        """Initialize the submission service.

        Args:
            project_repository: Repository for project data
            access_control: Service resolving sessions to users
            campaign_domain: Domain campaign links must be hosted on
        """
        self.repository = project_repository
        self.access_control = access_control
        self.campaign_domain = campaign_domain

    async def submit(self, raw_payload: Dict[str, Any], session_token: Optional[str]) -> str:
        """Submit a project for review.

        Args:
            raw_payload: Fields as entered by the submitter
            session_token: Caller's session

        Returns:
            ID of the new pending project

        Raises:
            Unauthenticated: If the caller is not logged in
            ValidationFailed: If any field rule is violated
        """
        user_id = self.access_control.require_authenticated(session_token)

        result = validate_submission(raw_payload, campaign_domain=self.campaign_domain)
        if not result.is_valid:
            logger.info(
                f"Submission from user {user_id} rejected by validation: "
                f"{[v.field for v in result.violations]}"
            )
            raise ValidationFailed(result.violations)

        now = utc_now()
        project = Project(
            **result.draft.model_dump(mode="json"),
            creator_id=user_id,
            status=ProjectStatus.PENDING,
            current_amount=0.0,
            rejection_reason=None,
            submitted_at=now,
            created_at=now,
        )

        project_id = self.repository.create(project)
        logger.info(f"Project {project_id} submitted for review by user {user_id}")
        return project_id

    async def list_mine(self, session_token: Optional[str]) -> List[Project]:
        """List the caller's own submissions with their review outcome.

        Args:
            session_token: Caller's session

        Returns:
            Projects created by the caller, most recent first
        """
        user_id = self.access_control.require_authenticated(session_token)
        return self.repository.find_by_creator(user_id)
