"""Core app configuration and security. Stores live in app.core.storage."""

from app.core.config import get_settings, settings

__all__ = ["get_settings", "settings"]
