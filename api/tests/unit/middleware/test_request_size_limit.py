"""Tests for the request size limit middleware."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from shoe_locker.presentation.middleware import RequestSizeLimitMiddleware


@pytest.fixture
def client():
    app = FastAPI()
    app.add_middleware(RequestSizeLimitMiddleware, max_size=100)

    @app.post("/api/echo")
    async def echo(payload: dict):
        return payload

    return TestClient(app)


class TestRequestSizeLimitMiddleware:
    def test_small_body_passes(self, client):
        response = client.post("/api/echo", json={"user_email": "alice@example.com"})

        assert response.status_code == 200
        assert response.json() == {"user_email": "alice@example.com"}

    def test_oversized_body_is_413(self, client):
        response = client.post(
            "/api/echo",
            content=b"x" * 101,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 413
        assert "100 bytes" in response.json()["message"]

    def test_invalid_content_length_is_400(self, client):
        response = client.post(
            "/api/echo",
            content=b"{}",
            headers={"Content-Type": "application/json", "Content-Length": "abc"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid Content-Length header"}
