"""Error translation into the {success: false, error, details?} envelope."""

import unittest

from fastapi.testclient import TestClient

from support import make_settings

from portfolio_api.core.errors import ValidationFailed, validation_errors
from portfolio_api.core.responses import error_response, success_response
from portfolio_api.main import create_app
from portfolio_api.schemas.common import PageMeta


def _client_with_failing_route(app_env: str) -> TestClient:
    app = create_app(make_settings(APP_ENV=app_env))

    @app.get("/api/explode")
    def explode() -> None:
        raise RuntimeError("kaboom")

    return TestClient(app, raise_server_exceptions=False)


class TestEnvelopes(unittest.TestCase):
    def test_success_omits_absent_parts(self) -> None:
        self.assertEqual(success_response("Done"), {"success": True, "message": "Done"})

    def test_success_serializes_models_by_alias(self) -> None:
        body = success_response("Listed", [], PageMeta.build(total=7, page=1, limit=5))
        self.assertEqual(body["data"], [])
        self.assertEqual(body["meta"], {"total": 7, "page": 1, "pages": 2, "limit": 5})

    def test_error_with_details(self) -> None:
        err = ValidationFailed([{"field": "title", "message": "Field required"}])
        self.assertEqual(
            error_response(err.message, err.details),
            {
                "success": False,
                "error": "Validation failed",
                "details": {"errors": [{"field": "title", "message": "Field required"}]},
            },
        )

    def test_validation_error_locations_drop_request_part(self) -> None:
        errors = validation_errors(
            [
                {"loc": ("body", "liveUrl"), "msg": "bad url"},
                {"loc": ("query", "limit"), "msg": "too big"},
                {"loc": ("body",), "msg": "missing body"},
            ]
        )
        self.assertEqual(
            errors,
            [
                {"field": "liveUrl", "message": "bad url"},
                {"field": "limit", "message": "too big"},
                {"field": "body", "message": "missing body"},
            ],
        )


class TestErrorTranslation(unittest.TestCase):
    def test_unknown_route(self) -> None:
        with TestClient(create_app(make_settings())) as client:
            resp = client.get("/api/nowhere")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"success": False, "error": "Route not found: /api/nowhere"})

    def test_malformed_json_body(self) -> None:
        with TestClient(create_app(make_settings())) as client:
            resp = client.post(
                "/api/auth/login",
                content=b"{not json",
                headers={"Content-Type": "application/json"},
            )
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.json()["success"])

    def test_unhandled_error_exposes_stack_outside_production(self) -> None:
        with _client_with_failing_route("development") as client:
            resp = client.get("/api/explode")
        self.assertEqual(resp.status_code, 500)
        body = resp.json()
        self.assertEqual(body["error"], "Internal Server Error")
        self.assertIn("kaboom", body["details"]["stack"])

    def test_unhandled_error_hides_stack_in_production(self) -> None:
        with _client_with_failing_route("production") as client:
            resp = client.get("/api/explode")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"success": False, "error": "Internal Server Error"})


class TestSecurityHeaders(unittest.TestCase):
    def test_headers_on_success_and_error_responses(self) -> None:
        with TestClient(create_app(make_settings())) as client:
            responses = [client.get("/health"), client.get("/api/nowhere")]
        for resp in responses:
            self.assertEqual(resp.headers["x-content-type-options"], "nosniff")
            self.assertEqual(resp.headers["x-frame-options"], "SAMEORIGIN")
            self.assertEqual(resp.headers["referrer-policy"], "no-referrer")

    def test_headers_on_rate_limited_responses(self) -> None:
        settings = make_settings(RATE_LIMIT_ENABLED=True, RATE_LIMIT_MAX=1)
        with TestClient(create_app(settings)) as client:
            client.get("/api/skills")
            resp = client.get("/api/skills")
        self.assertEqual(resp.status_code, 429)
        self.assertEqual(resp.headers["x-content-type-options"], "nosniff")


class TestHealth(unittest.TestCase):
    def test_health_and_root(self) -> None:
        with TestClient(create_app(make_settings())) as client:
            health = client.get("/health")
            root = client.get("/")
        self.assertEqual(health.status_code, 200)
        body = health.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["message"], "Server is running")
        self.assertEqual(body["environment"], "test")
        self.assertEqual(body["database"], "connected")
        self.assertEqual(root.json()["endpoints"]["projects"], "/api/projects")


if __name__ == "__main__":
    unittest.main()
