"""Credential store: seeded staff accounts and password authentication."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from app.core.security import hash_password, verify_password
from app.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedUser:
    """Plain-text seed record; hashed once when the store is built."""

    id: str
    username: str
    password: str
    role: str
    email: str


DEFAULT_USERS: tuple[SeedUser, ...] = (
    SeedUser(
        id="1",
        username="admin",
        password="password123",
        role="admin",
        email="admin@remwaste.co.uk",
    ),
    SeedUser(
        id="2",
        username="manager",
        password="manager123",
        role="manager",
        email="manager@remwaste.co.uk",
    ),
)


class CredentialStore:
    """Read-only set of users keyed by (case-sensitive) username."""

    def __init__(self, users: Iterable[User], dummy_hash: str) -> None:
        self._users: dict[str, User] = {}
        for user in users:
            if user.username in self._users:
                raise ValueError(f"Duplicate username in credential store: {user.username!r}")
            self._users[user.username] = user
        # Compared against when the username is unknown, so both failure paths cost a bcrypt check.
        self._dummy_hash = dummy_hash

    @classmethod
    def from_seed(
        cls,
        seed: Iterable[SeedUser] = DEFAULT_USERS,
        rounds: int | None = None,
    ) -> "CredentialStore":
        """Hash seed passwords (and a dummy password) at the same bcrypt cost."""
        users = [
            User(
                id=s.id,
                username=s.username,
                password_hash=hash_password(s.password, rounds=rounds),
                role=s.role,
                email=s.email,
            )
            for s in seed
        ]
        store = cls(users, dummy_hash=hash_password("not-a-real-password", rounds=rounds))
        logger.info("Credential store ready: users=%s", len(users))
        return store

    def get(self, username: str) -> User | None:
        return self._users.get(username)

    def authenticate(self, username: str, password: str) -> User | None:
        """
        Return the user when username and password match, else None.

        Unknown usernames still run a full hash comparison so response latency does
        not reveal whether the username exists.
        """
        user = self._users.get(username)
        if user is None:
            verify_password(password, self._dummy_hash)
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def __len__(self) -> int:
        return len(self._users)
