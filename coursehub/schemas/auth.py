"""Schemas for registration, login and the verified token claim."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from coursehub.models.user import PublicUser, Role


class RegisterRequest(BaseModel):
    """New student account."""

    name: str = Field(..., min_length=2, description="Display name")
    email: EmailStr = Field(..., description="Email address, unique per account")
    password: str = Field(..., min_length=6, description="Password")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Password")


class IdentityClaim(BaseModel):
    """
    Facts embedded in a token at issuance time.

    email and role are a snapshot; they may drift from the live account.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    email: str
    role: Role
    iat: datetime
    exp: datetime


class AuthResult(BaseModel):
    """Account (without password) plus a fresh access token."""

    user: PublicUser
    token: str
