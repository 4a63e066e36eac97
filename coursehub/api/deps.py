"""FastAPI dependencies: service lookup and the auth/role gates."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from coursehub.container import Container
from coursehub.core.authz import authenticate, authorize
from coursehub.models.user import Role
from coursehub.schemas.auth import IdentityClaim
from coursehub.services import AccountService, CourseService, UserService

security = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_account_service(container: Annotated[Container, Depends(get_container)]) -> AccountService:
    return container.accounts


def get_user_service(container: Annotated[Container, Depends(get_container)]) -> UserService:
    return container.user_service


def get_course_service(container: Annotated[Container, Depends(get_container)]) -> CourseService:
    return container.course_service


def get_current_identity(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    container: Annotated[Container, Depends(get_container)],
) -> IdentityClaim:
    """Dependency: require a valid Bearer token; attach and return its claim. Raises 401."""
    token = credentials.credentials if credentials is not None else None
    identity = authenticate(token, container.tokens)
    request.state.identity = identity
    return identity


def require_roles(*roles: Role) -> Callable[..., IdentityClaim]:
    """Dependency factory: authenticated identity whose role is one of roles. Raises 403."""
    allowed = frozenset(roles)

    def dependency(
        identity: Annotated[IdentityClaim, Depends(get_current_identity)],
    ) -> IdentityClaim:
        return authorize(identity, allowed)

    return dependency


CurrentIdentity = Annotated[IdentityClaim, Depends(get_current_identity)]
AdminIdentity = Annotated[IdentityClaim, Depends(require_roles(Role.ADMIN))]
StaffIdentity = Annotated[IdentityClaim, Depends(require_roles(Role.COACH, Role.ADMIN))]
