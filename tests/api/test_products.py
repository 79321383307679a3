"""Tests for Product API endpoints."""

from uuid import uuid4

import httpx
import pytest


@pytest.fixture
async def lamp(client: httpx.AsyncClient, lamp_data) -> dict:
    """Create the sample lamp through the API."""
    response = await client.post("/products", json=lamp_data)
    assert response.status_code == 201
    return response.json()


class TestCreateProduct:
    """Tests for POST /products endpoint."""

    async def test_create_product(self, client: httpx.AsyncClient) -> None:
        """Test creating a product with images."""
        response = await client.post(
            "/products",
            json={"title": "Lamp", "slug": "lamp", "images": ["a.jpg", "b.jpg"]},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "Lamp"
        assert data["slug"] == "lamp"
        assert data["images"] == ["a.jpg", "b.jpg"]
        assert len(data["id"]) == 36

    async def test_create_product_with_gender(self, client: httpx.AsyncClient) -> None:
        """Test gender is stored as its plain value."""
        response = await client.post("/products", json={"title": "Tee", "gender": "kid"})

        assert response.status_code == 201
        assert response.json()["gender"] == "kid"

    async def test_create_duplicate_title(self, client: httpx.AsyncClient, lamp) -> None:
        """Test duplicate title returns 400 with store detail."""
        response = await client.post("/products", json={"title": "Lamp", "slug": "lamp-2"})

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "DUPLICATE_PRODUCT"
        assert data["message"]

    async def test_create_invalid_payload(self, client: httpx.AsyncClient) -> None:
        """Test validation errors for bad payloads."""
        response = await client.post("/products", json={"title": "", "price": -1})
        assert response.status_code == 422


class TestListProducts:
    """Tests for GET /products endpoint."""

    async def test_list_products_empty(self, client: httpx.AsyncClient) -> None:
        """Test listing with no products."""
        response = await client.get("/products")

        assert response.status_code == 200
        assert response.json() == []

    async def test_list_products_pagination(self, client: httpx.AsyncClient) -> None:
        """Test limit and offset."""
        for i in range(1, 6):
            await client.post("/products", json={"title": f"Product {i}"})

        response = await client.get("/products", params={"limit": 2, "offset": 1})

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Product 2", "Product 3"]

    async def test_list_products_flattens_images(self, client: httpx.AsyncClient, lamp) -> None:
        """Test images are returned as URLs."""
        response = await client.get("/products")
        assert response.json()[0]["images"] == ["a.jpg", "b.jpg"]

    @pytest.mark.parametrize("params", [{"limit": 0}, {"limit": -1}, {"offset": -1}])
    async def test_list_products_invalid_params(self, client: httpx.AsyncClient, params) -> None:
        """Test invalid pagination values are rejected."""
        response = await client.get("/products", params=params)
        assert response.status_code == 422


class TestGetProduct:
    """Tests for GET /products/{term} endpoint."""

    async def test_get_by_id(self, client: httpx.AsyncClient, lamp) -> None:
        """Test lookup by id."""
        response = await client.get(f"/products/{lamp['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == lamp["id"]

    async def test_get_by_slug_ignores_case(self, client: httpx.AsyncClient, lamp) -> None:
        """Test lookup by slug in any case."""
        response = await client.get("/products/LAMP")

        assert response.status_code == 200
        assert response.json()["images"] == ["a.jpg", "b.jpg"]

    async def test_get_unknown_id(self, client: httpx.AsyncClient) -> None:
        """Test unknown id returns 404 naming the id."""
        missing = str(uuid4())

        response = await client.get(f"/products/{missing}")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert missing in data["message"]

    async def test_get_unknown_slug(self, client: httpx.AsyncClient) -> None:
        """Test unknown slug returns 404."""
        response = await client.get("/products/nothing-here")
        assert response.status_code == 404


class TestUpdateProduct:
    """Tests for PATCH /products/{product_id} endpoint."""

    async def test_update_fields_keeps_images(self, client: httpx.AsyncClient, lamp) -> None:
        """Test omitting images keeps them."""
        response = await client.patch(f"/products/{lamp['id']}", json={"stock": 8})

        assert response.status_code == 200
        data = response.json()
        assert data["stock"] == 8
        assert data["images"] == ["a.jpg", "b.jpg"]

    async def test_update_with_empty_images(self, client: httpx.AsyncClient, lamp) -> None:
        """Test explicit empty list clears images."""
        response = await client.patch(f"/products/{lamp['id']}", json={"images": []})

        assert response.status_code == 200
        assert response.json()["images"] == []

        fresh = await client.get("/products/lamp")
        assert fresh.json()["images"] == []

    async def test_update_replaces_images(self, client: httpx.AsyncClient, lamp) -> None:
        """Test supplied images replace the set."""
        response = await client.patch(
            f"/products/{lamp['id']}",
            json={"title": "Floor Lamp", "images": ["c.jpg"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Floor Lamp"
        assert data["images"] == ["c.jpg"]

    async def test_update_duplicate_title(self, client: httpx.AsyncClient, lamp) -> None:
        """Test duplicate title on update returns 400."""
        await client.post("/products", json={"title": "Chair"})

        response = await client.patch(f"/products/{lamp['id']}", json={"title": "Chair"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "DUPLICATE_PRODUCT"

    async def test_update_unknown_product(self, client: httpx.AsyncClient) -> None:
        """Test updating an unknown product returns 404."""
        response = await client.patch(f"/products/{uuid4()}", json={"stock": 1})
        assert response.status_code == 404

    async def test_update_requires_uuid(self, client: httpx.AsyncClient) -> None:
        """Test non-UUID ids are rejected."""
        response = await client.patch("/products/lamp", json={"stock": 1})
        assert response.status_code == 422

    async def test_null_clears_description(self, client: httpx.AsyncClient, lamp) -> None:
        """Test explicit null clears the description."""
        response = await client.patch(f"/products/{lamp['id']}", json={"description": None})

        assert response.status_code == 200
        assert response.json()["description"] is None

        fresh = await client.get("/products/lamp")
        assert fresh.json()["description"] is None

    async def test_null_clears_gender(self, client: httpx.AsyncClient, lamp) -> None:
        """Test explicit null clears a previously set gender."""
        response = await client.patch(f"/products/{lamp['id']}", json={"gender": "kid"})
        assert response.json()["gender"] == "kid"

        response = await client.patch(f"/products/{lamp['id']}", json={"gender": None})

        assert response.status_code == 200
        assert response.json()["gender"] is None

    async def test_null_keeps_required_fields_and_images(
        self, client: httpx.AsyncClient, lamp
    ) -> None:
        """Test null on a required field or images leaves it unchanged."""
        response = await client.patch(
            f"/products/{lamp['id']}",
            json={"title": None, "images": None, "stock": 4},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Lamp"
        assert data["stock"] == 4
        assert data["images"] == ["a.jpg", "b.jpg"]


class TestDeleteProduct:
    """Tests for DELETE /products/{product_id} endpoint."""

    async def test_delete_product(self, client: httpx.AsyncClient, lamp) -> None:
        """Test deleting a product."""
        response = await client.delete(f"/products/{lamp['id']}")
        assert response.status_code == 204

        response = await client.get(f"/products/{lamp['id']}")
        assert response.status_code == 404

    async def test_delete_unknown_product(self, client: httpx.AsyncClient) -> None:
        """Test deleting an unknown product returns 404."""
        response = await client.delete(f"/products/{uuid4()}")
        assert response.status_code == 404

    async def test_delete_requires_uuid(self, client: httpx.AsyncClient) -> None:
        """Test non-UUID ids are rejected."""
        response = await client.delete("/products/lamp")
        assert response.status_code == 422
