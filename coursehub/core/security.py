"""Password hashing and JWT creation/verification for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import ValidationError as PydanticValidationError

from coursehub.core.errors import InvalidTokenError
from coursehub.models.user import Role
from coursehub.schemas.auth import IdentityClaim

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds); overridden by Settings.BCRYPT_ROUNDS.
BCRYPT_ROUNDS = 10

# Tokens are valid for 24 hours from issuance.
DEFAULT_TOKEN_TTL_MINUTES = 24 * 60

REQUIRED_CLAIMS = ["id", "email", "role", "iat", "exp"]


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never match."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


class TokenService:
    """Signs and verifies identity claims as HS256 JWTs."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int = DEFAULT_TOKEN_TTL_MINUTES,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = timedelta(minutes=expire_minutes)

    def issue(
        self,
        account_id: str,
        email: str,
        role: Role | str,
        now: datetime | None = None,
    ) -> str:
        """Create a signed token for the account, expiring ttl after now."""
        # JWT NumericDate has whole-second precision
        issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
        payload: dict[str, Any] = {
            "id": account_id,
            "email": email,
            "role": Role(role).value,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> IdentityClaim:
        """
        Decode and validate the token; return the embedded claim.
        Raises InvalidTokenError on bad signature, bad structure or expiry.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired", cause=e) from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError("Token is invalid", cause=e) from e

        try:
            return IdentityClaim(
                id=payload["id"],
                email=payload["email"],
                role=payload["role"],
                iat=datetime.fromtimestamp(payload["iat"], UTC),
                exp=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (PydanticValidationError, TypeError, ValueError, OverflowError) as e:
            raise InvalidTokenError("Token payload is invalid", cause=e) from e
