"""
Factory for creating and wiring components of the Campaign Board system.

This module handles the creation and dependency injection for all
services and components used in the system.
"""
import logging
from typing import Any, Dict, NamedTuple

# Service imports
from campaign_board.services.access_control import AccessControlService
from campaign_board.services.catalog import CatalogService
from campaign_board.services.moderation import ModerationService
from campaign_board.services.submission import SubmissionService
from campaign_board.services.validation import DEFAULT_CAMPAIGN_DOMAIN

# Repository imports
from campaign_board.repositories.project import InMemoryProjectRepository, MongoProjectRepository
from campaign_board.repositories.identity import (
    InMemoryRoleRepository,
    InMemorySessionRepository,
    MongoRoleRepository,
    MongoSessionRepository,
)

# Adapter imports
from campaign_board.adapters.mongodb_adapter import MongoDBAdapter

# Setup logger for this module
logger = logging.getLogger(__name__)


class BoardServices(NamedTuple):
    """Wired services exposed to the client."""
    access_control: AccessControlService
    submission: SubmissionService
    moderation: ModerationService
    catalog: CatalogService


class CampaignBoardFactory:
    """Factory for creating and wiring components of the Campaign Board system."""

    @staticmethod
    def create_from_config(config: Dict[str, Any]) -> BoardServices:
        """Create the workflow services from configuration.

        Args:
            config: Configuration dictionary

        Returns:
            Configured services
        """
        if "mongo" in config:
            if "connection_string" not in config["mongo"]:
                raise ValueError("MongoDB connection string is required.")
            if "database" not in config["mongo"]:
                raise ValueError("MongoDB database name is required.")
            db_adapter = MongoDBAdapter(
                connection_string=config["mongo"]["connection_string"],
                database_name=config["mongo"]["database"],
            )
            project_repository = MongoProjectRepository(db_adapter)
            session_repository = MongoSessionRepository(db_adapter)
            role_repository = MongoRoleRepository(db_adapter)
            logger.info("Using MongoDB for project and identity storage")
        else:
            identity = config.get("identity") or {}
            project_repository = InMemoryProjectRepository()
            session_repository = InMemorySessionRepository(identity.get("sessions"))
            role_repository = InMemoryRoleRepository(identity.get("roles"))
            logger.info("No MongoDB configured, using in-memory storage")

        campaign_domain = (config.get("campaigns") or {}).get(
            "allowed_domain", DEFAULT_CAMPAIGN_DOMAIN)
        if not campaign_domain:
            raise ValueError("Campaign domain must not be empty.")
        logger.info(f"Campaign links restricted to domain: {campaign_domain}")

        access_control = AccessControlService(
            session_repository=session_repository,
            role_repository=role_repository,
        )

        return BoardServices(
            access_control=access_control,
            submission=SubmissionService(
                project_repository=project_repository,
                access_control=access_control,
                campaign_domain=campaign_domain,
            ),
            moderation=ModerationService(
                project_repository=project_repository,
                access_control=access_control,
            ),
            catalog=CatalogService(project_repository=project_repository),
        )
