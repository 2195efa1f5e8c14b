"""Unit tests for app.services.credentials: seeded users and constant-cost authentication."""

import time
import unittest
from unittest.mock import patch

from app.services import credentials
from app.services.credentials import DEFAULT_USERS, CredentialStore, SeedUser


class TestCredentialStoreSeed(unittest.TestCase):
    """from_seed hashes passwords and keeps user metadata."""

    @classmethod
    def setUpClass(cls) -> None:
        cls.store = CredentialStore.from_seed(rounds=4)

    def test_default_users_present(self) -> None:
        self.assertEqual(len(self.store), len(DEFAULT_USERS))
        admin = self.store.get("admin")
        self.assertIsNotNone(admin)
        self.assertEqual(admin.id, "1")
        self.assertEqual(admin.role, "admin")
        self.assertEqual(admin.email, "admin@remwaste.co.uk")
        self.assertEqual(self.store.get("manager").role, "manager")

    def test_passwords_are_hashed(self) -> None:
        self.assertNotEqual(self.store.get("admin").password_hash, "password123")

    def test_username_lookup_is_case_sensitive(self) -> None:
        self.assertIsNone(self.store.get("Admin"))

    def test_duplicate_usernames_rejected(self) -> None:
        seed = [
            SeedUser(id="1", username="dup", password="a", role="admin", email="a@x"),
            SeedUser(id="2", username="dup", password="b", role="manager", email="b@x"),
        ]
        with self.assertRaises(ValueError):
            CredentialStore.from_seed(seed, rounds=4)


class TestAuthenticate(unittest.TestCase):
    """authenticate returns the user only on an exact username/password match."""

    @classmethod
    def setUpClass(cls) -> None:
        cls.store = CredentialStore.from_seed(rounds=4)

    def test_valid_credentials(self) -> None:
        user = self.store.authenticate("admin", "password123")
        self.assertIsNotNone(user)
        self.assertEqual(user.username, "admin")
        self.assertEqual(self.store.authenticate("manager", "manager123").role, "manager")

    def test_wrong_password(self) -> None:
        self.assertIsNone(self.store.authenticate("admin", "wrongpassword"))

    def test_unknown_username(self) -> None:
        self.assertIsNone(self.store.authenticate("nonexistentuser", "password123"))

    def test_unknown_username_still_compares_a_hash(self) -> None:
        with patch.object(credentials, "verify_password", wraps=credentials.verify_password) as spy:
            self.store.authenticate("nonexistentuser", "password123")
            self.store.authenticate("admin", "wrongpassword")
        self.assertEqual(spy.call_count, 2)

    def test_failure_paths_take_comparable_time(self) -> None:
        start = time.perf_counter()
        self.store.authenticate("nonexistentuser", "password123")
        unknown = time.perf_counter() - start
        start = time.perf_counter()
        self.store.authenticate("admin", "wrongpassword")
        wrong = time.perf_counter() - start
        self.assertLess(abs(unknown - wrong), 0.2)


if __name__ == "__main__":
    unittest.main()
