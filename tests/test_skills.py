"""Skill CRUD, name uniqueness and grouping."""

import unittest
from typing import Any

from support import ApiTestCase


class TestSkills(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers()

    def create(self, **fields: Any):
        return self.client.post("/api/skills", json=fields, headers=self.headers)

    def test_duplicate_name_is_rejected(self) -> None:
        first = self.create(name="Go", category="Backend", proficiency=80)
        self.assertEqual(first.status_code, 201)
        second = self.create(name="Go", category="Backend", proficiency=80)
        self.assertEqual(second.status_code, 400)
        self.assertEqual(second.json(), {"success": False, "error": "name already exists"})

    def test_defaults(self) -> None:
        data = self.create(name="Docker").json()["data"]
        self.assertEqual(data["category"], "Other")
        self.assertEqual(data["proficiency"], 50)
        self.assertEqual(data["order"], 0)

    def test_proficiency_bounds(self) -> None:
        self.assertEqual(self.create(name="A", proficiency=0).status_code, 201)
        self.assertEqual(self.create(name="B", proficiency=100).status_code, 201)
        for value in (-1, 101):
            resp = self.create(name=f"P{value}", proficiency=value)
            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp.json()["details"]["errors"][0]["field"], "proficiency")

    def test_unknown_category_is_rejected(self) -> None:
        self.assertEqual(self.create(name="X", category="Cooking").status_code, 400)

    def test_list_grouped_by_category(self) -> None:
        self.create(name="Go", category="Backend", order=2)
        self.create(name="Python", category="Backend", order=1)
        self.create(name="React", category="Frontend")
        data = self.client.get("/api/skills").json()["data"]
        self.assertEqual(set(data), {"Backend", "Frontend"})
        self.assertEqual([s["name"] for s in data["Backend"]], ["Python", "Go"])
        self.assertEqual([s["name"] for s in data["Frontend"]], ["React"])

    def test_list_one_category(self) -> None:
        self.create(name="Go", category="Backend")
        self.create(name="React", category="Frontend")
        data = self.client.get("/api/skills", params={"category": "Frontend"}).json()["data"]
        self.assertEqual([s["name"] for s in data], ["React"])

    def test_rename_onto_existing_name(self) -> None:
        self.create(name="Go")
        other = self.create(name="Rust").json()["data"]
        resp = self.client.put(
            f"/api/skills/{other['id']}", json={"name": "Go"}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "name already exists")

    def test_update_keeping_own_name(self) -> None:
        skill = self.create(name="Go").json()["data"]
        resp = self.client.put(
            f"/api/skills/{skill['id']}",
            json={"name": "Go", "proficiency": 90},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["proficiency"], 90)

    def test_get_and_delete(self) -> None:
        skill = self.create(name="Go").json()["data"]
        self.assertEqual(self.client.get(f"/api/skills/{skill['id']}").status_code, 200)
        resp = self.client.delete(f"/api/skills/{skill['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.get(f"/api/skills/{skill['id']}").status_code, 404)
        self.assertEqual(self.client.get("/api/skills/123").status_code, 400)

    def test_writes_require_auth(self) -> None:
        resp = self.client.post("/api/skills", json={"name": "Go"})
        self.assertEqual(resp.status_code, 401)


if __name__ == "__main__":
    unittest.main()
