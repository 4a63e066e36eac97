"""Own profile and admin-only coach provisioning."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from coursehub.api.deps import AdminIdentity, CurrentIdentity, get_user_service
from coursehub.models.user import PublicUser
from coursehub.schemas.common import Envelope
from coursehub.schemas.user import CreateCoachRequest, UpdateProfileRequest
from coursehub.services import UserService

router = APIRouter()


@router.get("/me", response_model=Envelope[PublicUser])
def get_me(
    identity: CurrentIdentity,
    users: Annotated[UserService, Depends(get_user_service)],
) -> Envelope[PublicUser]:
    return Envelope(data=users.get_profile(identity.id))


@router.put("/me", response_model=Envelope[PublicUser])
def update_me(
    body: UpdateProfileRequest,
    identity: CurrentIdentity,
    users: Annotated[UserService, Depends(get_user_service)],
) -> Envelope[PublicUser]:
    """Update name and/or email of the authenticated user."""
    user = users.update_profile(identity.id, name=body.name, email=body.email)
    return Envelope(message="Profile updated successfully", data=user)


@router.post(
    "/coach",
    response_model=Envelope[PublicUser],
    status_code=status.HTTP_201_CREATED,
)
def create_coach(
    body: CreateCoachRequest,
    _admin: AdminIdentity,
    users: Annotated[UserService, Depends(get_user_service)],
) -> Envelope[PublicUser]:
    """Create a coach account (admin only)."""
    coach = users.create_coach(body.name, body.email, body.password)
    return Envelope(message="Coach created successfully", data=coach)
