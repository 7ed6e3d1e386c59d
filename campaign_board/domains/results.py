"""
Result models returned to the presentation layer.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, Field

from campaign_board.domains.validation import FieldViolation


class ErrorDetail(BaseModel):
    """Typed error reported for a failed operation."""
    code: str = Field(..., description="Stable error code")
    message: str = Field("", description="Human readable message")
    violations: List[FieldViolation] = Field(
        default_factory=list, description="Field violations, for validation failures")


class OperationResult(BaseModel):
    """Success or error outcome of a caller-facing operation."""
    ok: bool = Field(..., description="Whether the operation succeeded")
    data: Optional[Any] = Field(None, description="Operation payload")
    message: str = Field("", description="Informational message for the caller")
    error: Optional[ErrorDetail] = Field(None, description="Error details")

    @classmethod
    def success(cls, data: Any = None, message: str = "") -> "OperationResult":
        return cls(ok=True, data=data, message=message)

    @classmethod
    def failure(cls, error: ErrorDetail) -> "OperationResult":
        return cls(ok=False, error=error)
