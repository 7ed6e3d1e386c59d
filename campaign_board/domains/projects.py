"""
Project domain models.

These models define the structure of a submitted fundraising project and the
moderation workflow it moves through.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional, Set
from pydantic import BaseModel, Field


class ProjectStatus(str, Enum):
    """Status of a project in the moderation workflow."""
    PENDING = "pending"
    ACTIVE = "active"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition is defined from this status."""
        return not ALLOWED_TRANSITIONS[self]


class ProjectCategory(str, Enum):
    """Category a project is listed under."""
    EDUCATION = "education"
    HEALTHCARE = "healthcare"
    TECHNOLOGY = "technology"
    COMMUNITY = "community"
    OTHER = "other"


# Rejected projects are final; a new submission is required for re-review.
ALLOWED_TRANSITIONS: Dict[ProjectStatus, Set[ProjectStatus]] = {
    ProjectStatus.PENDING: {ProjectStatus.ACTIVE, ProjectStatus.REJECTED},
    ProjectStatus.ACTIVE: set(),
    ProjectStatus.REJECTED: set(),
}


def can_transition(current: ProjectStatus, new: ProjectStatus) -> bool:
    """Check whether a project may move from one status to another."""
    return new in ALLOWED_TRANSITIONS.get(current, set())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Project(BaseModel):
    """Project model."""
    id: str = Field("", description="Unique identifier")
    title: str = Field(..., description="Project title")
    description: str = Field(..., description="Project description")
    campaign_link: str = Field(...,
                               description="Link to the external fundraising campaign")
    image_url: Optional[str] = Field(None, description="Optional image URL")
    category: ProjectCategory = Field(..., description="Project category")
    goal_amount: float = Field(..., description="Fundraising goal")
    current_amount: float = Field(
        0.0, description="Amount raised, reported by the campaign provider")
    contact_name: str = Field(..., description="Contact person")
    contact_email: str = Field(..., description="Contact email address")
    contact_phone: Optional[str] = Field(
        None, description="Optional contact phone, free text")
    creator_id: str = Field(..., description="ID of the submitting user")
    status: ProjectStatus = Field(
        ProjectStatus.PENDING, description="Moderation status")
    rejection_reason: Optional[str] = Field(
        None, description="Reason given when the project was rejected")
    submitted_at: datetime = Field(
        default_factory=utc_now, description="When the project was submitted")
    created_at: datetime = Field(
        default_factory=utc_now, description="When the record was created")

    @property
    def is_public(self) -> bool:
        return self.status == ProjectStatus.ACTIVE
