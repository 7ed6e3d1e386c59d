"""
Campaign Board - submission, moderation and publication of school fundraising projects.

Visitors submit projects that link to an external fundraising campaign,
admins approve or reject them, and the public browses approved projects.
"""

# Client interface (main entry point)
from campaign_board.client.campaign_board import CampaignBoard

# Factory for wiring the services
from campaign_board.factories.board_factory import CampaignBoardFactory

# Validation rules
from campaign_board.services.validation import validate_submission

# Package metadata
__all__ = [
    # Main client interface
    "CampaignBoard",
    # Factories
    "CampaignBoardFactory",
    # Validation
    "validate_submission",
]
