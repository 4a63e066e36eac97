"""Registration and login."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from coursehub.api.deps import get_account_service
from coursehub.schemas.auth import AuthResult, LoginRequest, RegisterRequest
from coursehub.schemas.common import Envelope
from coursehub.services import AccountService

router = APIRouter()


@router.post(
    "/register",
    response_model=Envelope[AuthResult],
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    accounts: Annotated[AccountService, Depends(get_account_service)],
) -> Envelope[AuthResult]:
    """Create a student account and return it with an access token."""
    result = accounts.register(body.name, body.email, body.password)
    return Envelope(message="User registered successfully", data=result)


@router.post("/login", response_model=Envelope[AuthResult])
def login(
    body: LoginRequest,
    accounts: Annotated[AccountService, Depends(get_account_service)],
) -> Envelope[AuthResult]:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = accounts.login(body.email, body.password)
    return Envelope(message="Login successful", data=result)
