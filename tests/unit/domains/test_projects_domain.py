"""
Tests for the project domain models and status transitions.
"""
import pytest

from campaign_board.domains import (
    ALLOWED_TRANSITIONS,
    InvalidTransition,
    Project,
    ProjectCategory,
    ProjectStatus,
    ValidationFailed,
    FieldViolation,
    ViolationCode,
    can_transition,
)


@pytest.fixture
def project():
    return Project(
        id="proj-1",
        title="Books for Our Reading Corner",
        description="Our third grade classroom needs new books for the reading corner.",
        campaign_link="https://www.gofundme.com/f/x",
        category=ProjectCategory.EDUCATION,
        goal_amount=500,
        contact_name="Jo Lee",
        contact_email="jo@x.edu",
        creator_id="user-1",
    )


def test_project_defaults(project):
    """Test a new project starts pending with nothing raised."""
    assert project.status == ProjectStatus.PENDING
    assert project.current_amount == 0.0
    assert project.rejection_reason is None
    assert project.submitted_at.tzinfo is not None
    assert project.is_public is False


def test_active_project_is_public(project):
    project.status = ProjectStatus.ACTIVE
    assert project.is_public is True


@pytest.mark.parametrize(
    "current, new, allowed",
    [
        (ProjectStatus.PENDING, ProjectStatus.ACTIVE, True),
        (ProjectStatus.PENDING, ProjectStatus.REJECTED, True),
        (ProjectStatus.PENDING, ProjectStatus.PENDING, False),
        (ProjectStatus.ACTIVE, ProjectStatus.REJECTED, False),
        (ProjectStatus.ACTIVE, ProjectStatus.PENDING, False),
        (ProjectStatus.REJECTED, ProjectStatus.PENDING, False),
        (ProjectStatus.REJECTED, ProjectStatus.ACTIVE, False),
    ],
)
def test_can_transition(current, new, allowed):
    """Test the transition table."""
    assert can_transition(current, new) is allowed


def test_terminal_statuses():
    """Test that only pending has outgoing transitions."""
    assert not ProjectStatus.PENDING.is_terminal
    assert ProjectStatus.ACTIVE.is_terminal
    assert ProjectStatus.REJECTED.is_terminal
    assert set(ALLOWED_TRANSITIONS) == set(ProjectStatus)


def test_status_values_are_closed():
    """Test that unknown status values cannot be represented."""
    with pytest.raises(ValueError):
        ProjectStatus("archived")


def test_error_codes():
    """Test errors carry stable codes and details."""
    error = InvalidTransition("proj-1", "active", "rejected")
    assert error.code == "invalid_transition"
    assert "active" in error.message and "rejected" in error.message

    violation = FieldViolation(field="title", code=ViolationCode.TOO_SHORT)
    failed = ValidationFailed([violation])
    assert failed.code == "validation_failed"
    assert failed.violations == [violation]
    assert "title" in str(failed)
