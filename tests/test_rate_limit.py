"""Fixed-window limiter and the 429 responses it produces."""

import unittest

from support import ApiTestCase

from portfolio_api.core.rate_limit import FixedWindowRateLimiter


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestFixedWindowRateLimiter(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.limiter = FixedWindowRateLimiter(limit=2, window_seconds=60, clock=self.clock)

    def test_limit_within_window(self) -> None:
        self.assertFalse(self.limiter.hit("a"))
        self.assertFalse(self.limiter.hit("a"))
        self.assertTrue(self.limiter.is_limited("a"))
        self.assertTrue(self.limiter.hit("a"))

    def test_keys_are_independent(self) -> None:
        self.limiter.hit("a")
        self.limiter.hit("a")
        self.assertFalse(self.limiter.is_limited("b"))

    def test_window_resets(self) -> None:
        self.limiter.hit("a")
        self.limiter.hit("a")
        self.clock.now += 30
        self.assertEqual(self.limiter.retry_after("a"), 30)
        self.clock.now += 30
        self.assertFalse(self.limiter.is_limited("a"))
        self.assertFalse(self.limiter.hit("a"))

    def test_expired_windows_are_dropped(self) -> None:
        for i in range(10_000):
            self.limiter.hit(f"10.0.{i // 256}.{i % 256}")
        self.assertEqual(len(self.limiter), 10_000)
        self.clock.now += 10_000
        self.limiter.hit("203.0.113.9")
        self.assertEqual(len(self.limiter), 1)

    def test_live_windows_survive_pruning(self) -> None:
        self.limiter.hit("a")
        self.clock.now += 59
        self.limiter.hit("b")
        self.limiter.hit("b")
        self.clock.now += 1
        self.limiter.hit("c")
        self.assertEqual(len(self.limiter), 2)
        self.assertTrue(self.limiter.is_limited("b"))

    def test_reset(self) -> None:
        self.limiter.hit("a")
        self.limiter.hit("a")
        self.limiter.reset()
        self.assertFalse(self.limiter.is_limited("a"))


class TestGeneralLimit(ApiTestCase):
    settings_overrides = {"RATE_LIMIT_ENABLED": True, "RATE_LIMIT_MAX": 3}

    def test_api_requests_over_limit_get_429(self) -> None:
        for _ in range(3):
            self.assertEqual(self.client.get("/api/skills").status_code, 200)
        resp = self.client.get("/api/skills")
        self.assertEqual(resp.status_code, 429)
        self.assertEqual(
            resp.json(),
            {"success": False, "error": "Too many requests from this IP, please try again later."},
        )
        self.assertIn("retry-after", resp.headers)

    def test_rejected_requests_are_logged(self) -> None:
        with self.assertLogs("portfolio_api.main", level="INFO") as logs:
            for _ in range(4):
                self.client.get("/api/skills")
        self.assertTrue(any("GET /api/skills 429" in line for line in logs.output))

    def test_health_is_not_limited(self) -> None:
        for _ in range(5):
            self.assertEqual(self.client.get("/health").status_code, 200)


class TestAuthLimit(ApiTestCase):
    settings_overrides = {"RATE_LIMIT_ENABLED": True, "AUTH_RATE_LIMIT_MAX": 2}

    def login(self, password: str):
        return self.client.post(
            "/api/auth/login", json={"email": "admin@example.com", "password": password}
        )

    def test_failed_logins_trip_the_auth_limit(self) -> None:
        self.register()
        self.assertEqual(self.login("wrong-1").status_code, 401)
        self.assertEqual(self.login("wrong-2").status_code, 401)
        resp = self.login("secret123")
        self.assertEqual(resp.status_code, 429)
        self.assertEqual(
            resp.json()["error"], "Too many login attempts, please try again later."
        )

    def test_forwarded_header_does_not_reset_the_count(self) -> None:
        self.register()
        codes = [
            self.client.post(
                "/api/auth/login",
                json={"email": "admin@example.com", "password": "wrong-pass"},
                headers={"X-Forwarded-For": f"10.0.0.{i}"},
            ).status_code
            for i in range(4)
        ]
        self.assertEqual(codes, [401, 401, 429, 429])

    def test_successful_logins_do_not_count(self) -> None:
        self.register()
        for _ in range(4):
            self.assertEqual(self.login("secret123").status_code, 200)


if __name__ == "__main__":
    unittest.main()
