"""Tests for ContentService and the Flask routes in app.py."""

import pytest

from app import create_app
from docs_content.errors import ContentNotFoundError
from docs_content.services.content.path_enumerator import EnumerationPolicy
from docs_content.services.content.service import ContentService
from docs_content.services.navigation.sidebar_builder import UnlistedPolicy
from tests.conftest import seed_hierarchy


@pytest.fixture
def service(adapter, session) -> ContentService:
    seed_hierarchy(session)
    return ContentService(
        adapter,
        unlisted_policy=UnlistedPolicy.ACTIVE_ONLY,
        enumeration_policy=EnumerationPolicy(),
    )


@pytest.fixture
def client(service):
    app = create_app(service)
    app.config["TESTING"] = True
    return app.test_client()


# ── ContentService.get_content ──────────────────────────────────────────────

class TestGetContent:
    def test_section_payload(self, service) -> None:
        result = service.get_content("/getting-started")

        assert result["type"] == "section"
        assert result["section"]["id"] == "getting-started"
        assert [c["id"] for c in result["children"]] == ["installation", "usage"]

    def test_category_payload_lists_published_articles(self, service) -> None:
        result = service.get_content("/getting-started/installation")

        assert result["type"] == "category"
        assert [a["id"] for a in result["children"]] == ["quick-start", "npm"]

    def test_article_payload(self, service) -> None:
        result = service.get_content("/getting-started/installation/quick-start")

        assert result["type"] == "article"
        assert result["article"]["content"].startswith("# quick-start")
        assert result["author"]["name"] == "Steve Ruiz"
        assert result["links"]["prev"] is None
        assert result["links"]["next"]["id"] == "npm"

    def test_normalizes_incoming_path(self, service) -> None:
        assert service.get_content("reference/api/")["category"]["id"] == "api"

    def test_not_found(self, service) -> None:
        with pytest.raises(ContentNotFoundError):
            service.get_content("/reference/missing")


class TestServiceNavigation:
    def test_sidebar_for_article_path_shows_active_unlisted(self, service) -> None:
        result = service.get_sidebar_for_path("/getting-started/installation/yarn")

        assert result["articleId"] == "yarn"
        assert result["categoryId"] == "installation"
        group = result["links"][0]["children"][0]["children"][1]
        assert [a["articleId"] for a in group["children"]] == ["npm", "yarn"]

    def test_landing_sidebar(self, service) -> None:
        result = service.get_sidebar()
        assert result["sectionId"] is None
        assert len(result["links"]) == 2

    def test_article_links_unknown_id(self, service) -> None:
        with pytest.raises(ContentNotFoundError, match="Article not found"):
            service.get_article_links("missing")

    def test_list_paths_resolve(self, service) -> None:
        for path in service.list_paths():
            assert service.get_content(path)

    def test_route_params(self, service) -> None:
        assert ["reference", "api", "tldraw"] in service.list_route_params()


# ── Flask routes ────────────────────────────────────────────────────────────

class TestRoutes:
    def test_health(self, client) -> None:
        assert client.get("/").status_code == 200

    def test_content_route(self, client) -> None:
        resp = client.get("/api/content/reference/api/store")

        assert resp.status_code == 200
        assert resp.get_json()["article"]["id"] == "store"

    def test_content_route_not_found(self, client) -> None:
        resp = client.get("/api/content/nope")

        assert resp.status_code == 404
        assert "No content found for /nope" in resp.get_json()["error"]

    def test_content_root_not_found(self, client) -> None:
        assert client.get("/api/content/").status_code == 404

    def test_sidebar_route(self, client) -> None:
        resp = client.get("/api/sidebar?path=/reference/api")

        assert resp.status_code == 200
        body = resp.get_json()
        assert body["sectionId"] == "reference"
        assert body["links"][1]["url"] is None

    def test_sidebar_route_with_ids(self, client) -> None:
        body = client.get("/api/sidebar?articleId=yarn").get_json()
        assert body["articleId"] == "yarn"

    def test_sidebar_route_unknown_path(self, client) -> None:
        assert client.get("/api/sidebar?path=/nope").status_code == 404

    def test_links_route(self, client) -> None:
        body = client.get("/api/articles/editor/links").get_json()

        assert body["prev"]["id"] == "npm"
        assert body["next"] is None

    def test_links_route_not_found(self, client) -> None:
        assert client.get("/api/articles/missing/links").status_code == 404

    def test_headings_route(self, client) -> None:
        body = client.get("/api/articles/quick-start/headings").get_json()

        assert body["articleId"] == "quick-start"
        assert body["headings"] == []

    def test_paths_route(self, client) -> None:
        body = client.get("/api/paths").get_json()

        assert body["total"] == len(body["paths"]) == 12
        assert body["params"][0] == {"id": ["getting-started"]}

    def test_unexpected_error_is_500(self, service, monkeypatch) -> None:
        def boom() -> list[str]:
            raise RuntimeError("database is gone")

        monkeypatch.setattr(service, "list_paths", boom)
        client = create_app(service).test_client()

        resp = client.get("/api/paths")
        assert resp.status_code == 500
        assert resp.get_json() == {"error": "database is gone"}
