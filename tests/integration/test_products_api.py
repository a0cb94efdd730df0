"""Integration tests for the /products endpoints."""

from __future__ import annotations

import uuid
from datetime import timedelta

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.integration


async def _count_products(client: AsyncClient) -> int:
    response = await client.get("/products/offset", params={"limit": 1})
    return response.json()["meta"]["total"]


class TestCreateProduct:
    """POST /products"""

    async def test_creates_product(self, client: AsyncClient):
        response = await client.post(
            "/products",
            json={"name": "Espresso Machine", "description": "15 bar", "price": 199.99, "stock": 4},
        )

        assert response.status_code == 201
        body = response.json()
        assert uuid.UUID(body["id"])
        assert body["name"] == "Espresso Machine"
        assert body["description"] == "15 bar"
        assert body["price"] == "199.99"
        assert body["stock"] == 4
        assert "createdAt" in body
        assert "updatedAt" in body

    async def test_defaults_optional_fields(self, client: AsyncClient):
        response = await client.post("/products", json={"name": "Mug", "price": "4.50"})

        assert response.status_code == 201
        body = response.json()
        assert body["description"] is None
        assert body["stock"] == 0

    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"name": "Mug", "price": 0}, "body.price"),
            ({"name": "Mug", "price": -5}, "body.price"),
            ({"name": "Mu", "price": 10}, "body.name"),
            ({"name": "Mug", "price": 10, "stock": -1}, "body.stock"),
            ({"price": 10}, "body.name"),
        ],
    )
    async def test_rejects_invalid_payload(self, client: AsyncClient, payload, field):
        response = await client.post("/products", json=payload)

        assert response.status_code == 422
        body = response.json()
        assert body["type"] == "validation-error"
        assert field in [e["field"] for e in body["errors"]]
        assert await _count_products(client) == 0


class TestGetProduct:
    """GET /products/{id}"""

    async def test_returns_product(self, client: AsyncClient, make_product):
        product = await make_product("Teapot", price="30.00")

        response = await client.get(f"/products/{product.id}")

        assert response.status_code == 200
        assert response.json()["id"] == product.id
        assert response.json()["name"] == "Teapot"

    async def test_unknown_id_is_404(self, client: AsyncClient):
        missing = uuid.uuid4()

        response = await client.get(f"/products/{missing}")

        assert response.status_code == 404
        body = response.json()
        assert body["type"] == "not-found"
        assert body["status"] == 404
        assert str(missing) in body["detail"]

    async def test_malformed_id_is_422(self, client: AsyncClient):
        response = await client.get("/products/not-a-uuid")

        assert response.status_code == 422


class TestUpdateProduct:
    """PUT /products/{id}"""

    async def test_partial_update_keeps_other_fields(self, client: AsyncClient, make_product):
        product = await make_product("Blender", price="55.00", stock=2, description="600W")

        response = await client.put(f"/products/{product.id}", json={"stock": 10})

        assert response.status_code == 200
        body = response.json()
        assert body["stock"] == 10
        assert body["name"] == "Blender"
        assert body["price"] == "55.00"
        assert body["description"] == "600W"

    async def test_description_can_be_cleared(self, client: AsyncClient, make_product):
        product = await make_product("Blender", description="600W")

        response = await client.put(f"/products/{product.id}", json={"description": None})

        assert response.status_code == 200
        assert response.json()["description"] is None

    async def test_null_price_is_rejected(self, client: AsyncClient, make_product):
        product = await make_product("Blender", price="55.00")

        response = await client.put(f"/products/{product.id}", json={"price": None})

        assert response.status_code == 422
        follow_up = await client.get(f"/products/{product.id}")
        assert follow_up.json()["price"] == "55.00"

    async def test_invalid_update_changes_nothing(self, client: AsyncClient, make_product):
        product = await make_product("Blender", price="55.00")

        response = await client.put(f"/products/{product.id}", json={"price": 0, "stock": 3})

        assert response.status_code == 422
        follow_up = (await client.get(f"/products/{product.id}")).json()
        assert follow_up["price"] == "55.00"
        assert follow_up["stock"] == 5

    async def test_unknown_id_is_404(self, client: AsyncClient):
        response = await client.put(f"/products/{uuid.uuid4()}", json={"stock": 1})

        assert response.status_code == 404


class TestDeleteProduct:
    """DELETE /products/{id}"""

    async def test_returns_deleted_record(self, client: AsyncClient, make_product):
        product = await make_product("Toaster", price="25.00")

        response = await client.delete(f"/products/{product.id}")

        assert response.status_code == 200
        assert response.json()["id"] == product.id
        assert response.json()["name"] == "Toaster"
        assert (await client.get(f"/products/{product.id}")).status_code == 404

    async def test_second_delete_is_404(self, client: AsyncClient, make_product):
        product = await make_product("Toaster")
        await client.delete(f"/products/{product.id}")

        response = await client.delete(f"/products/{product.id}")

        assert response.status_code == 404


class TestOffsetEndpoint:
    """GET /products/offset"""

    async def test_meta_uses_camel_case(self, client: AsyncClient, make_product, base_time):
        for i in range(3):
            await make_product(f"Product {i}", created_at=base_time + timedelta(minutes=i))

        response = await client.get("/products/offset", params={"page": 1, "limit": 2})

        assert response.status_code == 200
        body = response.json()
        assert [p["name"] for p in body["data"]] == ["Product 2", "Product 1"]
        assert body["meta"] == {"total": 3, "page": 1, "limit": 2, "totalPages": 2}

    async def test_defaults_to_first_page_of_ten(self, client: AsyncClient):
        response = await client.get("/products/offset")

        assert response.status_code == 200
        assert response.json()["meta"] == {"total": 0, "page": 1, "limit": 10, "totalPages": 0}

    async def test_limit_is_capped(self, client: AsyncClient):
        response = await client.get("/products/offset", params={"limit": 5000})

        assert response.status_code == 200
        assert response.json()["meta"]["limit"] == 100

    async def test_huge_page_is_empty_not_an_error(self, client: AsyncClient, make_product):
        await make_product("Kettle")

        response = await client.get("/products/offset", params={"page": 10**18, "limit": 10})

        assert response.status_code == 200
        body = response.json()
        assert body["data"] == []
        assert body["meta"]["total"] == 1
        assert body["meta"]["page"] == 10**18

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "x"}])
    async def test_rejects_bad_query(self, client: AsyncClient, params):
        response = await client.get("/products/offset", params=params)

        assert response.status_code == 422


class TestCursorEndpoint:
    """GET /products/cursor"""

    async def test_walks_pages_with_next_cursor(self, client: AsyncClient, make_product, base_time):
        products = [
            await make_product(f"Product {i}", created_at=base_time + timedelta(minutes=i))
            for i in range(3)
        ]

        first = (await client.get("/products/cursor", params={"limit": 2})).json()
        assert [p["id"] for p in first["data"]] == [products[2].id, products[1].id]
        assert first["meta"] == {"hasNextPage": True, "nextCursor": products[1].id}

        second = (
            await client.get(
                "/products/cursor", params={"limit": 2, "cursor": first["meta"]["nextCursor"]}
            )
        ).json()
        assert [p["id"] for p in second["data"]] == [products[0].id]
        assert second["meta"] == {"hasNextPage": False, "nextCursor": None}

    async def test_unknown_cursor_is_400(self, client: AsyncClient):
        cursor = str(uuid.uuid4())

        response = await client.get("/products/cursor", params={"cursor": cursor})

        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "invalid-cursor"
        assert body["cursor"] == cursor

    async def test_malformed_cursor_is_422(self, client: AsyncClient):
        response = await client.get("/products/cursor", params={"cursor": "abc"})

        assert response.status_code == 422

    async def test_empty_catalog(self, client: AsyncClient):
        response = await client.get("/products/cursor")

        assert response.status_code == 200
        assert response.json() == {"data": [], "meta": {"hasNextPage": False, "nextCursor": None}}


class TestCrossCutting:
    """Headers and error envelopes shared by every endpoint."""

    async def test_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get("/products/offset", headers={"X-Request-ID": "req-42"})

        assert response.headers["x-request-id"] == "req-42"
        assert "x-process-time" in response.headers

    async def test_problem_details_carry_request_id(self, client: AsyncClient):
        response = await client.get(
            f"/products/{uuid.uuid4()}", headers={"X-Request-ID": "req-404"}
        )

        assert response.json()["request_id"] == "req-404"
