"""Pydantic request/response schemas."""

from coursehub.schemas.auth import (
    AuthResult,
    IdentityClaim,
    LoginRequest,
    RegisterRequest,
)
from coursehub.schemas.common import Envelope, MessageResponse
from coursehub.schemas.course import CreateCourseRequest, UpdateCourseRequest
from coursehub.schemas.health import HealthResponse
from coursehub.schemas.user import CreateCoachRequest, UpdateProfileRequest

__all__ = [
    "AuthResult",
    "CreateCoachRequest",
    "CreateCourseRequest",
    "Envelope",
    "HealthResponse",
    "IdentityClaim",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "UpdateCourseRequest",
    "UpdateProfileRequest",
]
