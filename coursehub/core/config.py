"""Application configuration loaded from environment variables."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Used when JWT_SECRET is not configured. Acceptable for dev/demo deployments only.
FALLBACK_JWT_SECRET = "your-super-secret-jwt-key"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # JWT authentication; unset secret falls back to FALLBACK_JWT_SECRET
    JWT_SECRET: SecretStr | None = None
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 24 * 60

    # Bcrypt cost (log2 rounds)
    BCRYPT_ROUNDS: int = 10

    # Bootstrap administrator, seeded once per store
    ADMIN_NAME: str = "Admin User"
    ADMIN_EMAIL: str = "admin@no.com"
    ADMIN_PASSWORD: SecretStr = SecretStr("admin123")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr | None) -> SecretStr | None:
        if v is None or not v.get_secret_value().strip():
            return None
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("JWT_EXPIRE_MINUTES")
    @classmethod
    def validate_jwt_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 10080:
            raise ValueError(
                "JWT_EXPIRE_MINUTES must be between 1 and 10080 (1 min to 7 days)"
            )
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 15:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 15")
        return v

    @field_validator("ADMIN_EMAIL")
    @classmethod
    def validate_admin_email(cls, v: str) -> str:
        if not v or "@" not in v:
            raise ValueError("ADMIN_EMAIL must be an email address")
        return v.strip()

    @property
    def jwt_secret_value(self) -> str:
        """Signing secret, or the documented fallback when none is configured."""
        if self.JWT_SECRET is None:
            return FALLBACK_JWT_SECRET
        return self.JWT_SECRET.get_secret_value()

    @property
    def uses_fallback_secret(self) -> bool:
        return self.JWT_SECRET is None

    def warn_insecure_defaults(self, logger: logging.Logger) -> None:
        """Log warnings for defaults that must not reach production."""
        if self.uses_fallback_secret:
            logger.warning(
                "JWT_SECRET is not set; using the built-in fallback secret. "
                "Do not run this configuration in production."
            )
        if self.ADMIN_PASSWORD.get_secret_value() == "admin123":
            logger.warning("Bootstrap admin %s uses the default password.", self.ADMIN_EMAIL)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()
