"""
Tests for the HTTP adapter.

These tests verify:
- Collection descriptors are exposed for the content platform
- POST .../validate returns the validated record or field issues
- Page metadata is served by id, unknown ids are 404
"""


class TestRoot:
    def test_root_reports_ok(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "portfolio-content"}


class TestCollectionEndpoints:
    def test_list_collections(self, client):
        response = client.get("/api/collections")

        assert response.status_code == 200
        names = [c["name"] for c in response.json()]
        assert names == ["projects", "decisions", "journey", "writing", "uses", "speaking", "testimonials"]

    def test_get_collection_descriptor(self, client):
        response = client.get("/api/collections/writing")

        assert response.status_code == 200
        data = response.json()
        assert data["base"] == "./src/content/writing"
        assert data["fields"]["draft"] == {"kind": "boolean", "required": False, "default": False}

    def test_unknown_collection_is_404(self, client):
        assert client.get("/api/collections/recipes").status_code == 404
        assert client.post("/api/collections/recipes/validate", json={}).status_code == 404

    def test_validate_returns_normalised_record(self, client):
        response = client.post("/api/collections/journey/validate", json={
            "date": "2020-02-03T10:00:00Z",
            "title": "Switched to backend",
            "type": "transition",
            "description": "Moved from frontend work.",
        })

        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["data"]["date"] == "2020-02-03"
        assert "skills" not in body["data"]

    def test_validate_reports_field_issues(self, client):
        response = client.post("/api/collections/journey/validate", json={
            "date": "2020-02-03",
            "title": "Something",
            "type": "invented",
            "description": "x",
        })

        assert response.status_code == 422
        issues = response.json()["detail"]
        assert [issue["path"] for issue in issues] == ["type"]
        assert issues[0]["code"] == "literal_error"

    def test_validate_fills_defaults(self, client):
        response = client.post("/api/collections/writing/validate", json={
            "title": "Hello",
            "description": "First post",
            "publishDate": "2024-01-15",
        })

        assert response.status_code == 200
        assert response.json()["data"]["draft"] is False


class TestPageEndpoints:
    def test_list_pages(self, client):
        response = client.get("/api/pages")

        assert response.status_code == 200
        assert set(response.json()) == {
            "home", "projects", "decisions", "journey",
            "writing", "speaking", "uses", "contact",
        }

    def test_get_page(self, client):
        response = client.get("/api/pages/projects")

        assert response.status_code == 200
        assert response.json()["heading"] == "Projects"

    def test_unknown_page_is_404(self, client):
        assert client.get("/api/pages/blog").status_code == 404
