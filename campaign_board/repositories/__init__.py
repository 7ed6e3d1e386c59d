"""
Repository implementations for data access.

This package contains repository implementations that provide
data access capabilities for the domain models.
"""

from campaign_board.repositories.project import *
from campaign_board.repositories.identity import *
