# Basic tests
from fastapi.testclient import TestClient

from notekeep.main import app

client = TestClient(app)


def test_root_endpoint():
    """Test the root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "NoteKeep API"}


def test_health_endpoint():
    """Test health check."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_api_root_lists_endpoints():
    response = client.get("/api/")
    assert response.status_code == 200
    assert response.json()["endpoints"]["notes"] == "/api/notes"


def test_models_import():
    """Test that models can be imported."""
    from notekeep.core.models.note import Note
    from notekeep.core.models.user import User

    assert User.__tablename__ == "users"
    assert Note.__tablename__ == "notes"


def test_expected_routes_registered():
    routes = {
        (method, route.path)
        for route in app.routes
        if hasattr(route, "methods")
        for method in route.methods
    }

    expected = {
        ("POST", "/api/auth/register"),
        ("POST", "/api/auth/login"),
        ("GET", "/api/notes"),
        ("GET", "/api/notes/search"),
        ("GET", "/api/notes/{note_id}"),
        ("POST", "/api/notes"),
        ("PUT", "/api/notes/{note_id}"),
        ("DELETE", "/api/notes/{note_id}"),
    }
    assert expected <= routes


def test_notes_require_token():
    response = client.get("/api/notes")
    assert response.status_code == 401
    assert response.json()["error"] == "UNAUTHORIZED"
