"""Account records: the internal shape with the password hash and the public shape without it."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    ADMIN = "ADMIN"
    COACH = "COACH"
    STUDENT = "STUDENT"


class PublicUser(BaseModel):
    """Account as it leaves the services. Has no password field at all."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime


class Account(BaseModel):
    """
    Stored account, including the bcrypt password hash.

    Never returned from a service; convert with to_public_user first.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    password_hash: str
    role: Role = Role.STUDENT
    created_at: datetime
    updated_at: datetime


def to_public_user(account: Account) -> PublicUser:
    """Drop the password hash."""
    return PublicUser(
        id=account.id,
        name=account.name,
        email=account.email,
        role=account.role,
        created_at=account.created_at,
        updated_at=account.updated_at,
    )
