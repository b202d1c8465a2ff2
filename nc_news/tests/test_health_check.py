from unittest.mock import AsyncMock, patch

import httpx
from asgi_lifespan import LifespanManager

from nc_news.main import app
from nc_news.routers.api import ENDPOINTS


class TestHealthCheck:
    async def test_health_check(self, test_client: httpx.AsyncClient):
        response = await test_client.get("/health")
        assert response.status_code == 200
        assert response.json() == "ok"


class TestGetApi:
    async def test_serves_endpoints_document(self, test_client: httpx.AsyncClient):
        response = await test_client.get("/api")
        assert response.status_code == 200
        assert response.json() == {"endpoints": ENDPOINTS}

    async def test_every_route_is_documented(self, test_client: httpx.AsyncClient):
        response = await test_client.get("/api")
        endpoints = response.json()["endpoints"]
        for key in (
            "GET /api/topics",
            "GET /api/articles",
            "GET /api/articles/:article_id",
            "PATCH /api/articles/:article_id",
            "GET /api/articles/:article_id/comments",
            "POST /api/articles/:article_id/comments",
            "DELETE /api/comments/:comment_id",
            "GET /api/users",
            "GET /api/users/:username",
        ):
            assert "description" in endpoints[key]


class TestUnmatchedRoute:
    async def test_unknown_path(self, test_client: httpx.AsyncClient, fake_store):
        response = await test_client.get("/api/invalid")
        assert response.status_code == 404
        assert response.json() == {"msg": "404 - request not found"}
        assert fake_store.statements == []

    async def test_unknown_method(self, test_client: httpx.AsyncClient):
        response = await test_client.put("/api/topics", json={})
        assert response.status_code == 404
        assert response.json() == {"msg": "404 - request not found"}


class TestLifespan:
    async def test_startup_and_shutdown(self):
        with (
            patch("nc_news.dependencies.postgres.startup", new=AsyncMock()) as startup,
            patch("nc_news.dependencies.postgres.shutdown", new=AsyncMock()) as shutdown,
        ):
            async with LifespanManager(app):
                startup.assert_awaited_once()
                shutdown.assert_not_awaited()
            shutdown.assert_awaited_once()
