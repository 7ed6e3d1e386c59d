"""
Simplified client interface for the Campaign Board system.

This module provides the operations consumed by the presentation layer.
Every operation returns an OperationResult; workflow errors never escape as
exceptions.
"""

import json
import importlib.util
import logging
from typing import Any, Awaitable, Dict, Optional

from campaign_board.factories.board_factory import CampaignBoardFactory
from campaign_board.interfaces.client.client import CampaignBoard as CampaignBoardInterface
from campaign_board.domains import (
    CampaignBoardError,
    ErrorDetail,
    OperationResult,
    ValidationFailed,
)

logger = logging.getLogger(__name__)

REVIEW_PENDING_MESSAGE = (
    "Your campaign will be reviewed by our team. "
    "You'll be notified once it's approved."
)


class CampaignBoard(CampaignBoardInterface):
    """Client for submitting, moderating and browsing projects."""

    def __init__(self, config_path: str = None, config: Dict[str, Any] = None):
        """Initialize the system from config file or dictionary.

        Args:
            config_path: Path to configuration file (JSON or Python)
            config: Configuration dictionary
        """
        if config is None and not config_path:
            raise ValueError("Either config or config_path must be provided")

        if config_path:
            with open(config_path, "r") as f:
                if config_path.endswith(".json"):
                    config = json.load(f)
                else:
                    # Assume it's a Python file
                    spec = importlib.util.spec_from_file_location("config", config_path)
                    config_module = importlib.util.module_from_spec(spec)
                    spec.loader.exec_module(config_module)
                    config = config_module.config

        self.services = CampaignBoardFactory.create_from_config(config)

    async def _run(self, operation: str, call: Awaitable[Any], message: str = "") -> OperationResult:
        try:
            data = await call
        except ValidationFailed as e:
            return OperationResult.failure(
                ErrorDetail(code=e.code, message=e.message, violations=e.violations)
            )
        except CampaignBoardError as e:
            return OperationResult.failure(ErrorDetail(code=e.code, message=e.message))
        except Exception:
            logger.exception(f"Unexpected error during {operation}")
            raise
        return OperationResult.success(data=data, message=message)

    async def submit_project(self, payload: Dict[str, Any], session_token: Optional[str]) -> OperationResult:
        """Submit a project; data is the new project ID."""
        return await self._run(
            "submit_project",
            self.services.submission.submit(payload, session_token),
            message=REVIEW_PENDING_MESSAGE,
        )

    async def list_pending_projects(self, session_token: Optional[str]) -> OperationResult:
        """List pending projects for an admin; data is a list of projects."""
        return await self._run(
            "list_pending_projects",
            self.services.moderation.list_pending(session_token),
        )

    async def approve_project(self, project_id: str, session_token: Optional[str]) -> OperationResult:
        """Approve a project; data is the updated project."""
        return await self._run(
            "approve_project",
            self.services.moderation.approve(project_id, session_token),
            message="The project is now live on the platform.",
        )

    async def reject_project(self, project_id: str, reason: str, session_token: Optional[str]) -> OperationResult:
        """Reject a project; data is the updated project."""
        return await self._run(
            "reject_project",
            self.services.moderation.reject(project_id, reason, session_token),
            message="The submitter will be notified.",
        )

    async def list_active_projects(self, category: Optional[str] = None) -> OperationResult:
        """List published projects; data is a list of projects."""
        return await self._run(
            "list_active_projects",
            self.services.catalog.list_active(category),
        )

    async def get_active_project(self, project_id: str) -> OperationResult:
        """Get a published project."""
        return await self._run(
            "get_active_project",
            self.services.catalog.get_active(project_id),
        )

    async def list_my_projects(self, session_token: Optional[str]) -> OperationResult:
        """List the caller's own submissions."""
        return await self._run(
            "list_my_projects",
            self.services.submission.list_mine(session_token),
        )
