"""Tests for the application shell: root, health, startup, correlation IDs, CORS."""

import uuid

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from fakes import FakeCompletionClient

pytestmark = pytest.mark.integration


@pytest.fixture
def api_client(test_settings):
    return TestClient(create_app(test_settings, completion_client=FakeCompletionClient()))


def test_root_reports_running(api_client):
    response = api_client.get("/")

    assert response.status_code == 200
    assert response.text == "Website Builder Backend API is running!"


def test_health_check(api_client):
    response = api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "website-builder-backend"}


def test_health_check_draining(api_client):
    api_client.app.state.shutting_down = True

    response = api_client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "shutting_down"


def test_startup_fails_without_api_key(test_settings):
    settings = test_settings.model_copy(update={"openrouter_api_key": ""})
    app = create_app(settings, completion_client=FakeCompletionClient())

    with pytest.raises(RuntimeError, match="OPENROUTER_API_KEY"):
        with TestClient(app):
            pass


def test_startup_succeeds_with_api_key(test_settings):
    app = create_app(test_settings, completion_client=FakeCompletionClient())

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        assert app.state.shutting_down is False


def test_response_includes_correlation_id_header(api_client):
    response = api_client.get("/health")

    assert "x-request-id" in response.headers
    uuid.UUID(response.headers["x-request-id"])


def test_custom_correlation_id_echoed(api_client):
    response = api_client.get("/health", headers={"X-Request-ID": "custom-id-123"})

    assert response.headers["x-request-id"] == "custom-id-123"


def test_different_requests_get_different_ids(api_client):
    first = api_client.get("/health").headers["x-request-id"]
    second = api_client.get("/health").headers["x-request-id"]

    assert first != second


def test_unknown_route_returns_debug_id(api_client):
    response = api_client.get("/does-not-exist")

    assert response.status_code == 404
    assert "debug_id" in response.json()


def test_cors_allows_configured_origin(api_client):
    response = api_client.options(
        "/generate-website",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_cors_rejects_unknown_origin(api_client):
    response = api_client.options(
        "/generate-website",
        headers={
            "Origin": "https://evil.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert "access-control-allow-origin" not in response.headers


def test_internal_errors_return_sanitized_500(test_settings):
    app = create_app(test_settings, completion_client=FakeCompletionClient())

    @app.get("/explode")
    async def explode():
        raise RuntimeError("secret detail")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/explode")

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal server error"
    assert "secret detail" not in response.text
