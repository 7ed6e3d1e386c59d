"""
Catalog service implementation.

Public, read-only view of published projects.
"""
from typing import List, Optional

from campaign_board.interfaces.services import CatalogService as CatalogServiceInterface
from campaign_board.interfaces.repositories import ProjectRepository
from campaign_board.domains import (
    FieldViolation,
    NotFound,
    Project,
    ProjectCategory,
    ProjectStatus,
    ValidationFailed,
    ViolationCode,
)


class CatalogService(CatalogServiceInterface):
    """Service for browsing approved projects."""

    def __init__(self, project_repository: ProjectRepository):
        self.repository = project_repository

    async def list_active(self, category: Optional[str] = None) -> List[Project]:
        """List published projects, newest first.

        Args:
            category: Optional category to filter by

        Returns:
            Active projects
        """
        selected = None
        if category:
            try:
                selected = ProjectCategory(category)
            except ValueError:
                raise ValidationFailed([
                    FieldViolation(
                        field="category",
                        code=ViolationCode.INVALID_CATEGORY,
                        message=f"Unknown category: {category}",
                    )
                ])
        return self.repository.find_by_status(ProjectStatus.ACTIVE, category=selected)

    async def get_active(self, project_id: str) -> Project:
        """Get a published project.

        Pending and rejected projects are reported as not found.
        """
        project = self.repository.get(project_id)
        if project is None or not project.is_public:
            raise NotFound(project_id)
        return project
