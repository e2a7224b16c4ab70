"""Core app configuration, database, security and errors."""

from auth_service.core.config import get_settings, settings

__all__ = ["get_settings", "settings"]
