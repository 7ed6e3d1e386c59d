"""
Domain models for the Campaign Board system.

This package contains the core domain models that represent the
business objects and value types in the system.
"""

from campaign_board.domains.projects import *
from campaign_board.domains.identity import *
from campaign_board.domains.validation import *
from campaign_board.domains.errors import *
from campaign_board.domains.results import *
