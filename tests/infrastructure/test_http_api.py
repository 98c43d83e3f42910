"""HTTP API tests using FastAPI's TestClient and in-memory repositories."""

import re

import pytest
from fastapi.testclient import TestClient

from stockroom.infrastructure.http.app import create_app
from stockroom.infrastructure.persistence.in_memory import (
    InMemoryOrderRepository,
    InMemoryProductRepository,
)


@pytest.fixture
def client():
    app = create_app(InMemoryProductRepository(), InMemoryOrderRepository())
    return TestClient(app)


def _create_product(client, **overrides):
    body = {"name": "Denim Jeans", "brand": "Azure", "category": "Bottoms", **overrides}
    response = client.post("/api/products", json=body)
    assert response.status_code == 201
    return response.json()


def _add_variant(client, product_id, **overrides):
    body = {"size": "M", "color": "Blue", "price": 49.9, "stock": 5, **overrides}
    return client.post(f"/api/products/{product_id}/variants", json=body)


class TestProductsApi:

    def test_list_starts_empty(self, client):
        response = client.get("/api/products")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_returns_product(self, client):
        product = _create_product(client)
        assert product["name"] == "Denim Jeans"
        assert product["variants"] == []
        assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z", product["createdAt"])

    def test_create_missing_fields(self, client):
        response = client.post("/api/products", json={"name": "Tee"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_create_without_body(self, client):
        response = client.post("/api/products")
        assert response.status_code == 400
        assert "error" in response.json()

    def test_get_round_trip(self, client):
        product = _create_product(client)
        response = client.get(f"/api/products/{product['id']}")
        assert response.status_code == 200
        assert response.json() == product

    def test_get_unknown(self, client):
        response = client.get("/api/products/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_update_partial(self, client):
        product = _create_product(client)
        response = client.put(f"/api/products/{product['id']}", json={"category": "Denim"})
        assert response.status_code == 200
        body = response.json()
        assert body["category"] == "Denim"
        assert body["name"] == "Denim Jeans"
        assert body["createdAt"] == product["createdAt"]

    def test_update_unknown(self, client):
        response = client.put("/api/products/nope", json={"name": "x"})
        assert response.status_code == 404

    def test_delete_twice(self, client):
        product = _create_product(client)
        first = client.delete(f"/api/products/{product['id']}")
        second = client.delete(f"/api/products/{product['id']}")
        assert first.status_code == 204
        assert second.status_code == 404
        assert second.json() == {"error": "Product not found"}


class TestVariantsApi:

    def test_add_variant(self, client):
        product = _create_product(client)
        response = _add_variant(client, product["id"])
        assert response.status_code == 201
        variant = response.json()
        assert variant["sku"] == "AZU-DEN-BLU-M"
        assert re.fullmatch(r"\d{12}", variant["barcode"])
        assert variant["price"] == 49.9
        assert variant["stock"] == 5
        assert set(variant) == {"id", "size", "color", "price", "stock", "sku", "barcode"}

    def test_add_variant_missing_fields(self, client):
        product = _create_product(client)
        response = client.post(f"/api/products/{product['id']}/variants", json={"size": "M"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_add_variant_non_numeric_price(self, client):
        product = _create_product(client)
        response = _add_variant(client, product["id"], price="cheap")
        assert response.status_code == 400
        assert "error" in response.json()

    def test_add_variant_negative_stock(self, client):
        product = _create_product(client)
        response = _add_variant(client, product["id"], stock=-1)
        assert response.status_code == 400

    def test_add_variant_unknown_product(self, client):
        response = _add_variant(client, "nope")
        assert response.status_code == 404

    def test_numeric_strings_accepted(self, client):
        product = _create_product(client)
        response = _add_variant(client, product["id"], price="19.99", stock="3")
        assert response.status_code == 201
        assert response.json()["stock"] == 3

    def test_update_stock(self, client):
        product = _create_product(client)
        variant = _add_variant(client, product["id"]).json()
        url = f"/api/products/{product['id']}/variants/{variant['id']}"

        response = client.put(url, json={"stock": 42})

        assert response.status_code == 200
        assert response.json()["stock"] == 42
        assert response.json()["sku"] == variant["sku"]

    def test_update_requires_stock(self, client):
        product = _create_product(client)
        variant = _add_variant(client, product["id"]).json()
        url = f"/api/products/{product['id']}/variants/{variant['id']}"
        response = client.put(url, json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Stock quantity is required"}

    def test_update_unknown_variant(self, client):
        product = _create_product(client)
        response = client.put(f"/api/products/{product['id']}/variants/nope", json={"stock": 1})
        assert response.status_code == 404
        assert response.json() == {"error": "Variant not found"}

    def test_delete_variant(self, client):
        product = _create_product(client)
        variant = _add_variant(client, product["id"]).json()
        url = f"/api/products/{product['id']}/variants/{variant['id']}"

        assert client.delete(url).status_code == 204
        assert client.delete(url).status_code == 404
        assert client.get(f"/api/products/{product['id']}").json()["variants"] == []

    def test_rename_keeps_existing_skus(self, client):
        product = _create_product(client)
        _add_variant(client, product["id"])
        client.put(f"/api/products/{product['id']}", json={"brand": "Zephyr"})
        variants = client.get(f"/api/products/{product['id']}").json()["variants"]
        assert variants[0]["sku"] == "AZU-DEN-BLU-M"


class TestOrdersApi:

    def _order_body(self, **overrides):
        item = {
            "variantId": "v1",
            "productId": "p1",
            "productName": "Denim Jeans",
            "size": "M",
            "color": "Blue",
            "quantity": 2,
            "price": 25,
        }
        return {"items": [item], "customerName": "Alice", **overrides}

    def test_create_order(self, client):
        response = client.post("/api/orders", json=self._order_body())
        assert response.status_code == 201
        order = response.json()
        assert order["status"] == "pending"
        assert order["total"] == 50
        assert order["items"][0]["total"] == 50
        assert order["customerName"] == "Alice"
        assert order["id"].startswith("ORD-")

    def test_create_order_without_items(self, client):
        response = client.post("/api/orders", json={"items": []})
        assert response.status_code == 400

    def test_get_and_list(self, client):
        order = client.post("/api/orders", json=self._order_body()).json()
        assert client.get(f"/api/orders/{order['id']}").json() == order
        assert client.get("/api/orders").json() == [order]

    def test_status_update(self, client):
        order = client.post("/api/orders", json=self._order_body()).json()
        response = client.put(f"/api/orders/{order['id']}/status", json={"status": "completed"})
        assert response.status_code == 200
        assert response.json()["status"] == "completed"

    def test_status_update_rejects_unknown_status(self, client):
        order = client.post("/api/orders", json=self._order_body()).json()
        response = client.put(f"/api/orders/{order['id']}/status", json={"status": "shipped"})
        assert response.status_code == 400

    def test_status_update_unknown_order(self, client):
        response = client.put("/api/orders/ORD-1/status", json={"status": "completed"})
        assert response.status_code == 404

    def test_delete_order(self, client):
        order = client.post("/api/orders", json=self._order_body()).json()
        assert client.delete(f"/api/orders/{order['id']}").status_code == 204
        assert client.delete(f"/api/orders/{order['id']}").status_code == 404


class TestStatsApi:

    def test_inventory_stats(self, client):
        jeans = _create_product(client)
        _create_product(client, name="Tee")
        for size, stock in [("S", 5), ("M", 10), ("L", 0)]:
            assert _add_variant(client, jeans["id"], size=size, stock=stock).status_code == 201

        response = client.get("/api/stats")

        assert response.status_code == 200
        assert response.json() == {"totalProducts": 2, "totalVariants": 3, "totalStock": 15}

    def test_sales_stats(self, client):
        item = {
            "variantId": "v1", "productId": "p1", "productName": "Tee",
            "size": "M", "color": "White", "quantity": 1, "price": 100,
        }
        order = client.post("/api/orders", json={"items": [item]}).json()
        client.put(f"/api/orders/{order['id']}/status", json={"status": "completed"})

        stats = client.get("/api/stats/sales").json()

        assert stats["totalRevenue"] == 100
        assert stats["totalOrders"] == 1
        assert stats["completedOrders"] == 1
        assert stats["averageOrderValue"] == 100
        assert stats["todayOrders"] == 1


class TestMisc:

    def test_ping(self):
        app = create_app(InMemoryProductRepository(), InMemoryOrderRepository(), ping_message="pong")
        assert TestClient(app).get("/api/ping").json() == {"message": "pong"}

    def test_unknown_route_uses_error_shape(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert "error" in response.json()
