"""Tests for package import order, app settings wiring and schema config."""

import subprocess
import sys
import unittest
import warnings
from pathlib import Path

from app.core.config import settings
from app.main import app
from app.models.user import User
from app.schemas.auth import CurrentUser, PublicUser

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestFreshImports(unittest.TestCase):
    """Every module imports cleanly when it is the first thing a new interpreter loads."""

    MODULES = (
        "app.services.credentials",
        "app.services.item_store",
        "app.core.security",
        "app.core.storage",
        "app.scripts.issue_token",
        "app.main",
    )

    def test_modules_import_first(self) -> None:
        for module in self.MODULES:
            with self.subTest(module=module):
                result = subprocess.run(
                    [sys.executable, "-c", f"import {module}"],
                    cwd=PROJECT_ROOT,
                    capture_output=True,
                    text=True,
                    timeout=60,
                )
                self.assertEqual(result.returncode, 0, result.stderr)


class TestAppSettings(unittest.TestCase):
    def test_debug_flag_reaches_app(self) -> None:
        self.assertEqual(app.debug, settings.DEBUG)


class TestSchemaConfig(unittest.TestCase):
    """Auth schemas read attributes from domain objects without deprecated config."""

    def test_public_user_from_attributes(self) -> None:
        user = User(id="7", username="ops", password_hash="$2b$hash", role="manager", email="ops@remwaste.co.uk")
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            view = PublicUser.model_validate(user)
            identity = CurrentUser.model_validate(user)
        self.assertEqual(view.model_dump(), {"id": "7", "username": "ops", "role": "manager", "email": "ops@remwaste.co.uk"})
        self.assertEqual(identity.role, "manager")
        self.assertTrue(PublicUser.model_config["from_attributes"])


if __name__ == "__main__":
    unittest.main()
