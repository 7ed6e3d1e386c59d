"""
Error taxonomy for the submission and moderation workflow.

Every failure is scoped to a single operation; callers receive these as
typed results through the client.
"""
from typing import List, Optional

from campaign_board.domains.validation import FieldViolation


class CampaignBoardError(Exception):
    """Base class for workflow errors."""
    code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(CampaignBoardError):
    """No valid session."""
    code = "unauthenticated"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class Forbidden(CampaignBoardError):
    """Valid session without the required role."""
    code = "forbidden"

    def __init__(self, message: str = "Admin privileges required"):
        super().__init__(message)


class ValidationFailed(CampaignBoardError):
    """One or more field violations."""
    code = "validation_failed"

    def __init__(self, violations: List[FieldViolation]):
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Validation failed for: {fields}")
        self.violations = violations


class NotFound(CampaignBoardError):
    """Unknown project id."""
    code = "not_found"

    def __init__(self, project_id: str):
        super().__init__(f"Project not found: {project_id}")
        self.project_id = project_id


class InvalidTransition(CampaignBoardError):
    """Project is not in the status the transition requires."""
    code = "invalid_transition"

    def __init__(self, project_id: str, current_status: str, target_status: Optional[str] = None):
        message = f"Project {project_id} is '{current_status}'"
        if target_status:
            message += f" and cannot move to '{target_status}'"
        super().__init__(message)
        self.project_id = project_id
        self.current_status = current_status
        self.target_status = target_status


class MissingReason(CampaignBoardError):
    """Rejection without a reason."""
    code = "missing_reason"

    def __init__(self, message: str = "A rejection reason is required"):
        super().__init__(message)


class DuplicateProject(CampaignBoardError):
    """A project with this id is already stored."""
    code = "duplicate_project"

    def __init__(self, project_id: str):
        super().__init__(f"Project already exists: {project_id}")
        self.project_id = project_id
