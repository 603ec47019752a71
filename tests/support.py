"""Shared helpers: an app on in-memory SQLite with registration on and rate limits off."""

import unittest
from typing import Any
from unittest.mock import patch

from fastapi.testclient import TestClient

from portfolio_api.core.config import Settings
from portfolio_api.main import create_app

TEST_SECRET = "test-secret"


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "APP_ENV": "test",
        "DATABASE_URL": "sqlite://",
        "DATABASE_CREATE_TABLES": True,
        "JWT_SECRET": TEST_SECRET,
        "ALLOW_REGISTER": True,
        "RATE_LIMIT_ENABLED": False,
        "CLOUDINARY_CLOUD_NAME": None,
        "CLOUDINARY_API_KEY": None,
        "CLOUDINARY_API_SECRET": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class ApiTestCase(unittest.TestCase):
    """Starts a fresh app per test; subclasses may set settings_overrides."""

    settings_overrides: dict[str, Any] = {}

    def setUp(self) -> None:
        # Low bcrypt cost for tests.
        rounds = patch("portfolio_api.core.security.BCRYPT_ROUNDS", 4)
        rounds.start()
        self.addCleanup(rounds.stop)
        self.settings = make_settings(**self.settings_overrides)
        self.app = create_app(self.settings)
        self.client = TestClient(self.app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    def register(
        self,
        email: str = "admin@example.com",
        password: str = "secret123",
        name: str = "Admin",
    ) -> dict[str, Any]:
        resp = self.client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["data"]

    def auth_headers(self, email: str = "admin@example.com") -> dict[str, str]:
        token = self.register(email=email)["token"]
        return {"Authorization": f"Bearer {token}"}
