"""Public contact form and the authenticated inbox."""

import unittest

from support import ApiTestCase

MESSAGE = {"name": "Visitor", "email": "visitor@example.com", "message": "Hello there"}


class TestContact(ApiTestCase):
    def submit(self, **overrides):
        return self.client.post("/api/contact", json={**MESSAGE, **overrides})

    def test_anonymous_submit_returns_receipt_only(self) -> None:
        resp = self.submit()
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(set(resp.json()["data"]), {"id", "createdAt"})

    def test_invalid_submission(self) -> None:
        resp = self.submit(email="nope", message="")
        self.assertEqual(resp.status_code, 400)
        fields = {e["field"] for e in resp.json()["details"]["errors"]}
        self.assertEqual(fields, {"email", "message"})

    def test_inbox_requires_auth(self) -> None:
        msg_id = self.submit().json()["data"]["id"]
        self.assertEqual(self.client.get("/api/contact").status_code, 401)
        self.assertEqual(self.client.get(f"/api/contact/{msg_id}").status_code, 401)
        self.assertEqual(self.client.delete(f"/api/contact/{msg_id}").status_code, 401)

    def test_opening_marks_read(self) -> None:
        headers = self.auth_headers()
        msg_id = self.submit().json()["data"]["id"]
        unread = self.client.get("/api/contact", params={"read": "false"}, headers=headers)
        self.assertEqual(unread.json()["meta"]["total"], 1)
        opened = self.client.get(f"/api/contact/{msg_id}", headers=headers).json()["data"]
        self.assertTrue(opened["read"])
        self.assertEqual(opened["email"], "visitor@example.com")
        unread = self.client.get("/api/contact", params={"read": "false"}, headers=headers)
        self.assertEqual(unread.json()["meta"]["total"], 0)

    def test_mark_read_endpoint(self) -> None:
        headers = self.auth_headers()
        msg_id = self.submit().json()["data"]["id"]
        resp = self.client.put(f"/api/contact/{msg_id}/read", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["data"]["read"])

    def test_sender_address_is_the_connection_peer(self) -> None:
        headers = self.auth_headers()
        resp = self.client.post(
            "/api/contact",
            json=MESSAGE,
            headers={"X-Forwarded-For": "203.0.113.5, 10.0.0.1"},
        )
        msg_id = resp.json()["data"]["id"]
        data = self.client.get(f"/api/contact/{msg_id}", headers=headers).json()["data"]
        self.assertEqual(data["ipAddress"], "testclient")

    def test_list_is_newest_first_and_paginated(self) -> None:
        headers = self.auth_headers()
        for i in range(3):
            self.submit(subject=f"#{i}")
        body = self.client.get("/api/contact", params={"limit": 2}, headers=headers).json()
        self.assertEqual([m["subject"] for m in body["data"]], ["#2", "#1"])
        self.assertEqual(body["meta"], {"total": 3, "page": 1, "pages": 2, "limit": 2})

    def test_delete(self) -> None:
        headers = self.auth_headers()
        msg_id = self.submit().json()["data"]["id"]
        self.assertEqual(self.client.delete(f"/api/contact/{msg_id}", headers=headers).status_code, 200)
        self.assertEqual(self.client.get(f"/api/contact/{msg_id}", headers=headers).status_code, 404)


if __name__ == "__main__":
    unittest.main()
