"""
Validation domain models.

Field-level violations produced when checking a submitted payload.
"""
from enum import Enum
from pydantic import BaseModel, Field


class ViolationCode(str, Enum):
    """Reason a field failed validation."""
    REQUIRED = "required"
    INVALID_TYPE = "invalid_type"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_EMAIL = "invalid_email"
    INVALID_URL = "invalid_url"
    INVALID_CAMPAIGN_LINK = "invalid_campaign_link"
    INVALID_CATEGORY = "invalid_category"
    OUT_OF_RANGE = "out_of_range"


class FieldViolation(BaseModel):
    """A single rule violated by a submitted field."""
    field: str = Field(..., description="Name of the offending field")
    code: ViolationCode = Field(..., description="Violation code")
    message: str = Field("", description="Human readable explanation")
