"""Project listing, pagination, featured selection and CRUD."""

import unittest
import uuid
from typing import Any

from support import ApiTestCase


class ProjectsTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers()

    def create(self, **fields: Any) -> dict[str, Any]:
        body = {"title": "Portfolio", "description": "A site", **fields}
        resp = self.client.post("/api/projects", json=body, headers=self.headers)
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["data"]


class TestProjectList(ProjectsTestCase):
    def test_pagination_meta(self) -> None:
        for i in range(12):
            self.create(title=f"Project {i}", order=i)
        resp = self.client.get("/api/projects", params={"page": 2, "limit": 5})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["meta"], {"total": 12, "page": 2, "pages": 3, "limit": 5})
        self.assertEqual([p["order"] for p in body["data"]], [5, 6, 7, 8, 9])

    def test_empty_list(self) -> None:
        body = self.client.get("/api/projects").json()
        self.assertEqual(body["data"], [])
        self.assertEqual(body["meta"], {"total": 0, "page": 1, "pages": 0, "limit": 10})

    def test_defaults_to_published(self) -> None:
        self.create(title="Live")
        self.create(title="Wip", status="draft")
        titles = [p["title"] for p in self.client.get("/api/projects").json()["data"]]
        self.assertEqual(titles, ["Live"])
        drafts = self.client.get("/api/projects", params={"status": "draft"}).json()["data"]
        self.assertEqual([p["title"] for p in drafts], ["Wip"])

    def test_unknown_status_is_rejected(self) -> None:
        resp = self.client.get("/api/projects", params={"status": "deleted"})
        self.assertEqual(resp.status_code, 400)

    def test_limit_is_capped(self) -> None:
        resp = self.client.get("/api/projects", params={"limit": 101})
        self.assertEqual(resp.status_code, 400)

    def test_search_matches_title_description_and_tech(self) -> None:
        self.create(title="Shop", description="Store front", tech=["FastAPI", "React"])
        self.create(title="Blog", description="Markdown engine", tech=["Go"])
        self.create(title="Notes", description="A fastapi playground")
        found = self.client.get("/api/projects", params={"q": "fastapi"}).json()
        self.assertEqual(sorted(p["title"] for p in found["data"]), ["Notes", "Shop"])
        self.assertEqual(found["meta"]["total"], 2)

    def test_same_order_sorts_newest_first(self) -> None:
        first = self.create(title="Older")
        second = self.create(title="Newer")
        ids = [p["id"] for p in self.client.get("/api/projects").json()["data"]]
        self.assertEqual(ids, [second["id"], first["id"]])


class TestFeatured(ProjectsTestCase):
    def test_featured_is_capped_and_published_only(self) -> None:
        for i in range(7):
            self.create(title=f"F{i}", featured=True, order=i)
        self.create(title="Hidden", featured=True, status="draft", order=-1)
        self.create(title="Plain")
        data = self.client.get("/api/projects/featured").json()["data"]
        self.assertEqual([p["title"] for p in data], [f"F{i}" for i in range(6)])


class TestProjectCrud(ProjectsTestCase):
    def test_create_returns_camel_case_document(self) -> None:
        data = self.create(
            tech=[" Python ", "", "SQL"],
            liveUrl="https://example.com",
            repoUrl="https://github.com/me/site",
        )
        self.assertEqual(data["tech"], ["Python", "SQL"])
        self.assertEqual(data["liveUrl"], "https://example.com")
        self.assertEqual(data["repoUrl"], "https://github.com/me/site")
        self.assertEqual(data["status"], "published")
        self.assertFalse(data["featured"])
        self.assertIn("createdAt", data)
        self.assertIn("updatedAt", data)

    def test_create_requires_auth(self) -> None:
        resp = self.client.post("/api/projects", json={"title": "x", "description": "y"})
        self.assertEqual(resp.status_code, 401)

    def test_create_reports_every_invalid_field(self) -> None:
        resp = self.client.post(
            "/api/projects", json={"liveUrl": "not a url"}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 400)
        fields = {e["field"] for e in resp.json()["details"]["errors"]}
        self.assertEqual(fields, {"title", "description", "liveUrl"})

    def test_get_by_id(self) -> None:
        created = self.create()
        resp = self.client.get(f"/api/projects/{created['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["title"], "Portfolio")

    def test_malformed_id_is_400_and_absent_id_is_404(self) -> None:
        bad = self.client.get("/api/projects/not-an-id")
        self.assertEqual(bad.status_code, 400)
        self.assertEqual(bad.json()["error"], "Invalid id: not-an-id")
        missing = self.client.get(f"/api/projects/{uuid.uuid4()}")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json()["error"], "Project not found")

    def test_partial_update(self) -> None:
        created = self.create(tech=["Python"])
        resp = self.client.put(
            f"/api/projects/{created['id']}",
            json={"featured": True, "tech": ["Go"]},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()["data"]
        self.assertTrue(data["featured"])
        self.assertEqual(data["tech"], ["Go"])
        self.assertEqual(data["title"], "Portfolio")

    def test_update_rejects_null_title(self) -> None:
        created = self.create()
        resp = self.client.put(
            f"/api/projects/{created['id']}", json={"title": None}, headers=self.headers
        )
        self.assertEqual(resp.status_code, 400)

    def test_delete(self) -> None:
        created = self.create()
        resp = self.client.delete(f"/api/projects/{created['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"], {"id": created["id"]})
        self.assertEqual(self.client.get(f"/api/projects/{created['id']}").status_code, 404)


if __name__ == "__main__":
    unittest.main()
