"""Schemas for profile updates and coach provisioning."""

from pydantic import BaseModel, EmailStr, Field


class UpdateProfileRequest(BaseModel):
    """Fields a user may change on their own profile."""

    name: str | None = Field(default=None, min_length=2)
    email: EmailStr | None = None


class CreateCoachRequest(BaseModel):
    """Coach account created by an admin."""

    name: str = Field(..., min_length=2)
    email: EmailStr
    password: str = Field(..., min_length=6)
