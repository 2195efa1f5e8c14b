"""Domain models held in process memory."""

from app.models.user import User

__all__ = ["User"]
