"""Authentication and role gates, independent of the web framework.

Both gates are plain checks over the request's credentials/identity. They raise
UnauthenticatedError or ForbiddenError and have no other side effects; the API
layer wires them in front of protected handlers.
"""

import logging
from collections.abc import Iterable

from coursehub.core.errors import ForbiddenError, InvalidTokenError, UnauthenticatedError
from coursehub.core.security import TokenService
from coursehub.models.user import Role
from coursehub.schemas.auth import IdentityClaim

logger = logging.getLogger(__name__)

# Missing and invalid tokens must look the same to the caller.
UNAUTHENTICATED_MESSAGE = "Invalid or missing access token"


def authenticate(token: str | None, token_service: TokenService) -> IdentityClaim:
    """Return the verified claim for a bearer token, or raise UnauthenticatedError."""
    if not token:
        raise UnauthenticatedError(UNAUTHENTICATED_MESSAGE)
    try:
        return token_service.verify(token)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token: %s", e.message)
        raise UnauthenticatedError(UNAUTHENTICATED_MESSAGE) from e


def authorize(identity: IdentityClaim | None, allowed_roles: Iterable[Role]) -> IdentityClaim:
    """Require an authenticated identity whose role is in allowed_roles."""
    if identity is None:
        raise UnauthenticatedError("Authentication required")
    if identity.role not in set(allowed_roles):
        logger.warning(
            "Forbidden: user %s with role %s", identity.id, identity.role.value
        )
        raise ForbiddenError("Insufficient permissions")
    return identity


def is_owner_or_admin(identity: IdentityClaim, owner_id: str) -> bool:
    """Ownership rule: the resource creator or any admin."""
    return identity.id == owner_id or identity.role == Role.ADMIN
