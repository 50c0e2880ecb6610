"""Integration tests for model definition endpoints."""

import pytest
from httpx import AsyncClient

from tests.factories import product_payload


pytestmark = pytest.mark.integration

PRODUCT = product_payload()


class TestSaveModel:
    """Tests for POST /api/v1/models."""

    async def test_admin_creates_model(self, client: AsyncClient, admin_headers):
        response = await client.post("/api/v1/models", json=PRODUCT, headers=admin_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Product"
        assert data["ownerField"] == "ownerId"
        assert data["fields"][0]["validation"]["maxLength"] == 200
        assert data["permissions"]["delete"] == ["Admin"]
        assert data["createdAt"] is not None

    async def test_manager_cannot_create(self, client: AsyncClient, manager_headers):
        response = await client.post("/api/v1/models", json=PRODUCT, headers=manager_headers)

        assert response.status_code == 403
        assert response.json()["type"].endswith("/errors/insufficient_role")

    async def test_default_permissions(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/models",
            json={"name": "Note", "fields": [{"name": "text", "type": "string"}]},
            headers=admin_headers,
        )

        assert response.json()["permissions"] == {
            "create": ["Admin"],
            "read": ["Admin", "Manager", "Viewer"],
            "update": ["Admin"],
            "delete": ["Admin"],
        }

    async def test_replace_keeps_creation_time(self, client: AsyncClient, admin_headers):
        first = await client.post("/api/v1/models", json=PRODUCT, headers=admin_headers)
        changed = {**PRODUCT, "fields": [{"name": "title", "type": "string"}]}

        second = await client.post("/api/v1/models", json=changed, headers=admin_headers)

        assert second.status_code == 200
        assert second.json()["createdAt"] == first.json()["createdAt"]
        assert [f["name"] for f in second.json()["fields"]] == ["title"]

        listing = await client.get("/api/v1/models", headers=admin_headers)
        assert listing.json()["total"] == 1

    async def test_invalid_definition(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/models",
            json={"name": "Bad", "fields": [{"name": "x", "type": "color"}]},
            headers=admin_headers,
        )

        assert response.status_code == 422
        assert response.json()["errors"]

    async def test_duplicate_field_names(self, client: AsyncClient, admin_headers):
        response = await client.post(
            "/api/v1/models",
            json={
                "name": "Bad",
                "fields": [{"name": "x", "type": "string"}, {"name": "x", "type": "number"}],
            },
            headers=admin_headers,
        )

        assert response.status_code == 422


class TestReadModels:
    """Tests for listing and fetching model definitions."""

    async def test_any_role_can_read(self, client: AsyncClient, admin_headers, viewer_headers):
        await client.post("/api/v1/models", json=PRODUCT, headers=admin_headers)

        listing = await client.get("/api/v1/models", headers=viewer_headers)
        single = await client.get("/api/v1/models/Product", headers=viewer_headers)

        assert listing.status_code == 200
        assert [m["name"] for m in listing.json()["items"]] == ["Product"]
        assert single.status_code == 200
        assert single.json()["name"] == "Product"

    async def test_missing_model(self, client: AsyncClient, viewer_headers):
        response = await client.get("/api/v1/models/Ghost", headers=viewer_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Model not found"


class TestDeleteModel:
    """Tests for DELETE /api/v1/models/{name}."""

    async def test_admin_deletes(self, client: AsyncClient, admin_headers):
        await client.post("/api/v1/models", json=PRODUCT, headers=admin_headers)

        response = await client.delete("/api/v1/models/Product", headers=admin_headers)

        assert response.status_code == 204
        missing = await client.get("/api/v1/models/Product", headers=admin_headers)
        assert missing.status_code == 404

    async def test_delete_missing(self, client: AsyncClient, admin_headers):
        response = await client.delete("/api/v1/models/Ghost", headers=admin_headers)

        assert response.status_code == 404

    async def test_viewer_cannot_delete(self, client: AsyncClient, admin_headers, viewer_headers):
        await client.post("/api/v1/models", json=PRODUCT, headers=admin_headers)

        response = await client.delete("/api/v1/models/Product", headers=viewer_headers)

        assert response.status_code == 403
