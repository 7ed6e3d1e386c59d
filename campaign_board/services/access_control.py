"""
Access control service implementation.

Resolves session tokens to callers and guards workflow operations by role.
"""
import logging
from typing import Optional

from campaign_board.interfaces.services import AccessControlService as AccessControlServiceInterface
from campaign_board.interfaces.repositories import RoleRepository, SessionRepository
from campaign_board.domains import (
    ADMIN_ROLE,
    Admin,
    Anonymous,
    Forbidden,
    Principal,
    Unauthenticated,
    User,
)

logger = logging.getLogger(__name__)


class AccessControlService(AccessControlServiceInterface):
    """Service for resolving callers and enforcing role checks."""

    def __init__(self, session_repository: SessionRepository, role_repository: RoleRepository):
        """Initialize the access control service.

        Args:
            session_repository: Lookup for live session tokens
            role_repository: Read-only lookup for role assignments
        """
        self.session_repository = session_repository
        self.role_repository = role_repository

    def resolve(self, session_token: Optional[str]) -> Principal:
        """Resolve a session token to the caller it belongs to.

        Args:
            session_token: Opaque token from the identity provider

        Returns:
            Anonymous, User or Admin
        """
        if not session_token:
            return Anonymous()

        user_id = self.session_repository.get_user_id(session_token)
        if not user_id:
            return Anonymous()

        if ADMIN_ROLE in self.role_repository.get_roles(user_id):
            return Admin(user_id=user_id)
        return User(user_id=user_id)

    def require_authenticated(self, session_token: Optional[str]) -> str:
        """Return the caller's user ID.

        Raises:
            Unauthenticated: If the session does not resolve to a user
        """
        principal = self.resolve(session_token)
        if isinstance(principal, Anonymous):
            raise Unauthenticated()
        return principal.user_id

    def require_admin(self, session_token: Optional[str]) -> str:
        """Return the caller's user ID if they hold the admin role.

        Raises:
            Unauthenticated: If the session does not resolve to a user
            Forbidden: If the user is not an admin
        """
        principal = self.resolve(session_token)
        if isinstance(principal, Anonymous):
            raise Unauthenticated()
        if not isinstance(principal, Admin):
            logger.warning(f"Admin operation refused for user {principal.user_id}")
            raise Forbidden()
        return principal.user_id
