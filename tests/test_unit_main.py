"""
Tests for the application factory and its exception handlers.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.errors import NotFoundError
from app.main import INTERNAL_SERVER_ERROR_MESSAGE, create_app


class TestExceptionHandlers:
    def test_domain_error_maps_to_status_with_empty_body(self):
        app = create_app()
        client = TestClient(app)

        @app.get("/test-error")
        def test_error():
            raise NotFoundError("Test not found", details={"id": 123})

        response = client.get("/test-error")

        assert response.status_code == 404
        assert response.content == b""

    def test_unhandled_error_hides_details(self):
        app = create_app()
        client = TestClient(app)

        @app.get("/test-exception")
        def test_exception():
            raise ValueError("secret table name leaked")

        response = client.get("/test-exception")

        assert response.status_code == 500
        assert response.text == INTERNAL_SERVER_ERROR_MESSAGE
        assert "secret" not in response.text

    def test_unhandled_error_logs_the_action(self, caplog: pytest.LogCaptureFixture):
        app = create_app()
        client = TestClient(app)

        @app.get("/test-exception")
        def explode():
            raise RuntimeError("boom")

        with caplog.at_level("ERROR"):
            client.get("/test-exception")

        assert any(
            "Something went wrong inside explode action: boom" in r.getMessage()
            for r in caplog.records
        )

    def test_unhandled_error_response_keeps_request_id(self):
        app = create_app()
        client = TestClient(app)

        @app.get("/test-exception")
        def explode():
            raise RuntimeError("boom")

        response = client.get("/test-exception", headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "req-500"

    def test_unhandled_error_response_carries_cors_headers(self):
        app = create_app()
        client = TestClient(app)

        @app.get("/test-exception")
        def explode():
            raise RuntimeError("boom")

        origin = settings.cors_origins_list[0]
        response = client.get("/test-exception", headers={"Origin": origin})

        assert response.status_code == 500
        assert response.headers["access-control-allow-origin"] == origin


class TestAppWiring:
    def test_routes_are_mounted_under_api_prefix(self):
        paths = {route.path for route in create_app().routes}

        assert "/api/owner" in paths
        assert "/api/owner/{id}" in paths
        assert "/api/owner/{id}/account" in paths
        assert "/api/health" in paths
        assert "/api/readyz" in paths

    def test_request_id_is_echoed(self):
        client = TestClient(create_app())

        response = client.get("/api/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated_when_missing(self):
        client = TestClient(create_app())

        response = client.get("/api/health")

        assert response.headers["X-Request-ID"]

    def test_metrics_endpoint_exposes_prometheus_text(self):
        client = TestClient(create_app())
        client.get("/api/health")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "http_requests_total" in response.text

    def test_only_get_is_exposed_for_owners(self):
        client = TestClient(create_app())

        response = client.post("/api/owner", json={"name": "Alice"})

        assert response.status_code == 405
