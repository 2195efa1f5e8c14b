"""In-memory model for application users (auth and role tagging)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    Staff account seeded at process start. Never mutated or deleted.

    role: 'admin' or 'manager'
    """

    id: str
    username: str
    password_hash: str
    role: str
    email: str
