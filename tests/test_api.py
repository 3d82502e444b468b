import logging

import pytest
from fastapi.testclient import TestClient

from bootcamp_site import SiteConfig, create_app, runtime
from bootcamp_site.api_server import resolve_static_path

EXPECTED_STATS = {
    "students": 500,
    "jobPlacement": 95,
    "weeks": 12,
    "graduates": 500,
    "partnerCompanies": 50,
    "averageRating": 4.9,
    "averageSalary": 95000,
}


def test_stats_returns_fixed_fields(client):
    response = client.get("/api/stats")

    assert response.status_code == 200
    assert response.json() == EXPECTED_STATS


def test_curriculum_lists_six_entries_in_week_order(client):
    curriculum = client.get("/api/curriculum").json()

    assert [entry["week"] for entry in curriculum] == ["1-2", "3-4", "5-6", "7-8", "9-10", "11-12"]
    assert curriculum[0] == {
        "week": "1-2",
        "title": "Foundation",
        "description": "Linux fundamentals, Git version control, and basic networking concepts",
        "topics": ["Linux Basics", "Git & GitHub", "Networking Fundamentals", "Command Line"],
    }
    for entry in curriculum:
        assert set(entry) == {"week", "title", "description", "topics"}
        assert len(entry["topics"]) == 4


def test_tools_lists_twelve_entries(client):
    tools = client.get("/api/tools").json()

    assert len(tools) == 12
    assert [tool["name"] for tool in tools][:3] == ["Docker", "Kubernetes", "Jenkins"]
    assert tools[-1] == {
        "name": "RKE2",
        "image": "imgs/rke2-logo.jpeg",
        "description": "Rancher Kubernetes Engine 2 - enterprise-grade Kubernetes distribution",
        "category": "Enterprise K8s",
    }
    for tool in tools:
        assert tool["image"].startswith("imgs/")


def test_health_reports_instance_and_runtime(client):
    response = client.get("/health")
    health = response.json()

    assert response.status_code == 200
    assert health["status"] == "OK"
    assert health["instance_id"] == "bootcamp-7"
    assert health["port"] == 4321
    assert health["timestamp"].endswith("Z")
    assert health["uptime"] >= 0
    assert health["python_version"]
    assert "max_rss" in health["memory_usage"]


def test_health_defaults_to_standalone_instance():
    client = TestClient(create_app(SiteConfig(environ={})))

    assert client.get("/health").json()["instance_id"] == "standalone"


@pytest.mark.parametrize("method, path", [
    ("GET", "/nope"),
    ("GET", "/api/unknown"),
    ("POST", "/api/stats"),
    ("DELETE", "/"),
    ("GET", "/docs"),
])
def test_unmatched_routes_return_not_found(client, method, path):
    response = client.request(method, path)

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found"}


def test_index_serves_bundled_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "DevOps Bootcamp" in response.text


def test_bundled_assets_are_served(client):
    assert client.get("/css/styles.css").status_code == 200
    assert client.get("/js/main.js").status_code == 200


def test_static_files_come_from_configured_root(static_root):
    config = SiteConfig(environ={"STATIC_DIR": str(static_root)})
    client = TestClient(create_app(config))

    assert client.get("/").text == "<h1>Custom landing page</h1>"
    assert client.get("/index.html").text == "<h1>Custom landing page</h1>"

    css = client.get("/css/site.css")
    assert css.status_code == 200
    assert css.headers["content-type"].startswith("text/css")
    assert css.text == "body { color: red; }"

    assert client.get("/docs/").text == "<h1>Docs</h1>"
    assert client.get("/css/missing.css").status_code == 404


def test_missing_index_is_not_found(tmp_path):
    client = TestClient(create_app(SiteConfig(environ={"STATIC_DIR": str(tmp_path)})))

    response = client.get("/")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_resolve_static_path_rejects_escapes(static_root):
    root = static_root.resolve()
    (root.parent / "secret.txt").write_text("nope")

    assert resolve_static_path(root, "css/site.css") == root / "css" / "site.css"
    assert resolve_static_path(root, "docs") == root / "docs" / "index.html"
    assert resolve_static_path(root, "../secret.txt") is None
    assert resolve_static_path(root, "css/../../secret.txt") is None
    assert resolve_static_path(root, "css") is None


def test_handler_errors_are_hidden_and_logged(config, monkeypatch, caplog):
    def broken():
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(runtime, "memory_usage", broken)
    client = TestClient(create_app(config), raise_server_exceptions=False)

    response = client.get("/health")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error"}
    assert "disk on fire" not in response.text
    assert any("disk on fire" in record.getMessage() for record in caplog.records)


def test_requests_are_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="bootcamp_site.api_server")

    client.get("/api/stats")

    assert "GET /api/stats - testclient" in caplog.messages


@pytest.mark.parametrize("path", ["/", "/api/stats", "/api/curriculum", "/api/tools", "/health"])
def test_read_routes_answer_head(client, path):
    response = client.head(path)

    assert response.status_code == 200


def test_head_on_unknown_path_is_not_found(client):
    assert client.head("/nope").status_code == 404
