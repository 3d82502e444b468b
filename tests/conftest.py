import pytest
from fastapi.testclient import TestClient

from bootcamp_site import SiteConfig, create_app


@pytest.fixture
def config():
    return SiteConfig(environ={
        "PORT": "4321",
        "INSTANCE_ID": "bootcamp-7",
        "CONTACT_DELAY": "0",
    })


@pytest.fixture
def client(config):
    return TestClient(create_app(config))


@pytest.fixture
def static_root(tmp_path):
    (tmp_path / "index.html").write_text("<h1>Custom landing page</h1>")
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "site.css").write_text("body { color: red; }")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "index.html").write_text("<h1>Docs</h1>")
    return tmp_path
