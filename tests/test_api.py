"""
HTTP surface smoke tests (FastAPI TestClient over an in-memory store).
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blog_manager.app import create_app  # noqa: E402
from blog_manager.repositories.blog_store import BlogStore  # noqa: E402
from blog_manager.repositories.json_storage import JsonFileStorage  # noqa: E402
from blog_manager.repositories.storage import MemoryStorage  # noqa: E402


class BrokenWriteStorage(MemoryStorage):
    fail = False

    def set_item(self, key, value):
        if self.fail:
            raise OSError("quota exceeded")
        super().set_item(key, value)


@pytest.fixture()
def storage():
    return BrokenWriteStorage()


@pytest.fixture()
def client(storage):
    app = create_app(BlogStore(storage, excerpt_length=150))
    with TestClient(app) as test_client:
        yield test_client


def test_startup_seeds_store(client):
    categories = client.get("/api/categories").json()
    assert [c["name"] for c in categories] == ["Technology", "Lifestyle", "Travel"]

    active = client.get("/api/themes/active").json()
    assert active["id"] == "default-light"
    assert active["primaryColor"] == "#0f766e"


def test_blog_crud_and_cascade(client):
    created = client.post(
        "/api/blogs",
        json={"title": "T", "content": "C", "categories": ["cat-1"], "tags": ["x"], "published": False},
    )
    assert created.status_code == 201
    blog = created.json()
    assert blog["excerpt"] == "C..."
    assert blog["publishedAt"]

    updated = client.put(f"/api/blogs/{blog['id']}", json={"title": "T2", "content": "C", "categories": ["cat-1"]})
    assert updated.status_code == 200
    assert updated.json()["createdAt"] == blog["createdAt"]

    assert client.delete("/api/categories/cat-1").json() == {"ok": True}
    fetched = client.get(f"/api/blogs/{blog['id']}").json()
    assert fetched["title"] == "T2"
    assert fetched["categories"] == []

    assert client.delete(f"/api/blogs/{blog['id']}").status_code == 200
    assert client.get(f"/api/blogs/{blog['id']}").status_code == 404


def test_blog_validation_and_missing(client):
    response = client.post("/api/blogs", json={"title": "", "content": "C"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter a title for your blog post"

    assert client.put("/api/blogs/missing", json={"title": "T", "content": "C"}).status_code == 404


def test_blog_list_search(client):
    client.post("/api/blogs", json={"title": "Python tips", "content": "C"})
    client.post("/api/blogs", json={"title": "Lisbon", "content": "Travel log", "categories": ["cat-3"]})

    titles = [b["title"] for b in client.get("/api/blogs", params={"q": "travel"}).json()]
    assert titles == ["Lisbon"]

    ordered = client.get("/api/blogs", params={"sort": "title", "direction": "asc"}).json()
    assert [b["title"] for b in ordered] == ["Lisbon", "Python tips"]


def test_theme_activation_and_delete_rules(client):
    theme = client.post("/api/themes", json={"name": "Mine", "backgroundColor": "#000000"}).json()
    assert theme["isActive"] is False

    activated = client.post(f"/api/themes/{theme['id']}/activate").json()
    assert activated["isActive"] is True
    assert client.get("/api/themes/active").json()["id"] == theme["id"]

    response = client.delete(f"/api/themes/{theme['id']}")
    assert response.status_code == 409
    assert response.json()["detail"] == "Cannot delete the active theme"

    assert client.delete("/api/themes/default-light").status_code == 200
    ids = [t["id"] for t in client.get("/api/themes").json()]
    assert ids == ["default-dark", "elegant", theme["id"]]


def test_write_failure_is_reported(client, storage):
    storage.fail = True
    response = client.post("/api/categories", json={"name": "Food"})
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to save category"


def test_preview_page_renders_markup_and_theme(client):
    preview = client.post(
        "/api/blogs/preview",
        json={"title": "Hello", "content": "# Big\n**bold** <b>", "categories": ["cat-1", "cat-x"]},
    ).json()
    assert preview["previewUrl"] == f"/preview/{preview['id']}"

    page = client.get(preview["previewUrl"])
    assert page.status_code == 200
    body = page.text
    assert "<h1>Big</h1>" in body
    assert "<strong>bold</strong> &lt;b&gt;" in body
    assert "Technology" in body
    assert "Draft" in body
    assert "#ffffff" in body

    assert client.get("/preview/missing").status_code == 404


def test_startup_on_corrupt_data_file_degrades_to_empty(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{broken", encoding="utf-8")
    app = create_app(BlogStore(JsonFileStorage(path), excerpt_length=150))

    with TestClient(app) as test_client:
        assert test_client.get("/api/blogs").json() == []
        assert test_client.get("/api/categories").json() == []
        assert test_client.get("/api/themes/active").status_code == 404

    assert path.read_text(encoding="utf-8") == "{broken"
