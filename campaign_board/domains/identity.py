"""
Identity domain models.

A caller is always exactly one of Anonymous, User or Admin; services check
capabilities against this variant rather than against loose booleans.
"""
from typing import Literal, Union
from pydantic import BaseModel, Field

ADMIN_ROLE = "admin"


class Anonymous(BaseModel):
    """Caller without a valid session."""
    kind: Literal["anonymous"] = "anonymous"


class User(BaseModel):
    """Authenticated caller without elevated privileges."""
    kind: Literal["user"] = "user"
    user_id: str = Field(..., description="ID of the authenticated user")


class Admin(BaseModel):
    """Authenticated caller holding the admin role."""
    kind: Literal["admin"] = "admin"
    user_id: str = Field(..., description="ID of the authenticated admin")


Principal = Union[Anonymous, User, Admin]
