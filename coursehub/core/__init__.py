"""Core configuration, security, errors and the entity store."""

from coursehub.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
