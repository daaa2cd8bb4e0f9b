import uuid
from datetime import datetime

from services.magazine_service import build_image_path


def _article(**overrides):
    body = {
        "category": "AI",
        "title": "Agents in production",
        "description": "What changes after the demo",
        "content": "Full article body",
        "tags": ["ai", "agents"],
    }
    body.update(overrides)
    return body


def test_create_and_get_magazine(client):
    created = client.post("/api/magazines", json=_article(image_url="https://cdn.example.com/a.jpg"))

    assert created.status_code == 201
    magazine_id = created.json()["id"]

    resp = client.get(f"/api/magazines/{magazine_id}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Agents in production"
    assert body["content"] == "Full article body"
    assert body["tags"] == ["ai", "agents"]
    assert body["image_url"] == "https://cdn.example.com/a.jpg"


def test_list_magazines_newest_first_without_content(client):
    for i in range(3):
        client.post("/api/magazines", json=_article(title=f"Issue {i}", tags=None))

    resp = client.get("/api/magazines", params={"limit": 2})

    assert resp.status_code == 200
    items = resp.json()
    assert [m["title"] for m in items] == ["Issue 2", "Issue 1"]
    assert "content" not in items[0]


def test_get_missing_magazine_returns_404(client):
    resp = client.get("/api/magazines/999")

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Magazine with ID 999 not found"}


def test_create_magazine_requires_title(client):
    resp = client.post("/api/magazines", json=_article(title=""))

    assert resp.status_code == 400
    assert "title" in resp.json()["details"]


def test_invalid_limit_returns_400(client):
    assert client.get("/api/magazines", params={"limit": 0}).status_code == 400


def test_unknown_route_returns_404_envelope(client):
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Route not found"}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_build_image_path():
    file_id = uuid.UUID("0f8fad5b-d9cb-469f-a165-70867728950e")

    assert build_image_path(datetime(2026, 3, 5, 9, 0), file_id) == "2026/03/05/0f8fad5b-d9cb-469f-a165-70867728950e.jpg"
