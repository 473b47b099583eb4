"""Tests for the product service HTTP API."""

import pytest

pytestmark = pytest.mark.django_db


PRODUCT_PAYLOAD = {
    "name": "Test Product",
    "description": "Test Description",
    "price": 99.99,
    "stock": 10,
    "category": "Electronics",
}


@pytest.fixture
def created_product(api_client):
    response = api_client.post("/api/products", PRODUCT_PAYLOAD, format="json")
    assert response.status_code == 201
    return response.json()


class TestHealth:
    def test_health(self, api_client):
        response = api_client.get("/api/products/health")
        assert response.status_code == 200
        assert response.content == b"Product Service is UP"


class TestCreateProduct:
    def test_create(self, created_product):
        assert created_product["name"] == "Test Product"
        assert created_product["price"] == 99.99
        assert created_product["active"] is True
        assert isinstance(created_product["id"], int)

    def test_blank_name_rejected(self, api_client):
        response = api_client.post("/api/products", {**PRODUCT_PAYLOAD, "name": ""}, format="json")
        assert response.status_code == 400
        assert "name" in response.json()["details"]

    def test_negative_price_rejected(self, api_client):
        response = api_client.post("/api/products", {**PRODUCT_PAYLOAD, "price": -1}, format="json")
        assert response.status_code == 400
        assert "price" in response.json()["details"]

    def test_negative_stock_rejected(self, api_client):
        response = api_client.post("/api/products", {**PRODUCT_PAYLOAD, "stock": -5}, format="json")
        assert response.status_code == 400
        assert "stock" in response.json()["details"]
        assert api_client.get("/api/products").json() == []

    def test_stock_beyond_column_range_rejected(self, api_client):
        response = api_client.post("/api/products", {**PRODUCT_PAYLOAD, "stock": 10 ** 20}, format="json")
        assert response.status_code == 400
        assert "stock" in response.json()["details"]


class TestReadProducts:
    def test_list_empty(self, api_client):
        response = api_client.get("/api/products")
        assert response.status_code == 200
        assert response["Content-Type"] == "application/json"
        assert response.json() == []

    def test_get_by_id(self, api_client, created_product):
        response = api_client.get(f"/api/products/{created_product['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Test Product"

    def test_get_missing_returns_404(self, api_client):
        response = api_client.get("/api/products/999")
        assert response.status_code == 404
        assert response.json()["details"]["code"] == "NOT_FOUND"

    def test_filters(self, api_client, make_product):
        make_product(name="Gaming Monitor", category="Electronics", stock=0)
        make_product(name="Yoga Mat", category="Sports", stock=4)

        by_name = api_client.get("/api/products", {"name": "gaming"}).json()
        by_category = api_client.get("/api/products", {"category": "SPORTS"}).json()
        in_stock = api_client.get("/api/products", {"inStock": "true"}).json()

        assert [p["name"] for p in by_name] == ["Gaming Monitor"]
        assert [p["name"] for p in by_category] == ["Yoga Mat"]
        assert [p["name"] for p in in_stock] == ["Yoga Mat"]


class TestUpdateProduct:
    def test_full_replace(self, api_client, created_product):
        response = api_client.put(
            f"/api/products/{created_product['id']}",
            {"name": "Renamed", "price": 10, "stock": 3},
            format="json",
        )
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Renamed"
        assert data["description"] is None
        assert data["category"] is None
        assert data["stock"] == 3
        assert data["active"] is True

    def test_negative_stock_accepted(self, api_client, created_product):
        response = api_client.put(
            f"/api/products/{created_product['id']}",
            {**PRODUCT_PAYLOAD, "stock": -5},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["stock"] == -5

    def test_stock_beyond_column_range_rejected(self, api_client, created_product):
        response = api_client.put(
            f"/api/products/{created_product['id']}",
            {**PRODUCT_PAYLOAD, "stock": 10 ** 20},
            format="json",
        )
        assert response.status_code == 400
        assert "stock" in response.json()["details"]

    def test_missing_returns_404(self, api_client):
        response = api_client.put("/api/products/999", PRODUCT_PAYLOAD, format="json")
        assert response.status_code == 404


class TestDeleteProduct:
    def test_soft_delete(self, api_client, created_product):
        product_id = created_product["id"]

        response = api_client.delete(f"/api/products/{product_id}")

        assert response.status_code == 204
        assert api_client.get("/api/products").json() == []
        detail = api_client.get(f"/api/products/{product_id}").json()
        assert detail["active"] is False

    def test_delete_twice(self, api_client, created_product):
        url = f"/api/products/{created_product['id']}"
        assert api_client.delete(url).status_code == 204
        assert api_client.delete(url).status_code == 204

    def test_missing_returns_404(self, api_client):
        assert api_client.delete("/api/products/999").status_code == 404


class TestStockAdjustment:
    def test_adjust_then_overdraw(self, api_client, created_product):
        url = f"/api/products/{created_product['id']}/stock"

        first = api_client.patch(f"{url}?quantity=-3")
        second = api_client.patch(f"{url}?quantity=-8")

        assert first.status_code == 200
        assert first.json()["stock"] == 7
        assert second.status_code == 400
        assert second.json()["details"]["code"] == "INSUFFICIENT_STOCK"
        assert api_client.get(f"/api/products/{created_product['id']}").json()["stock"] == 7

    def test_missing_quantity(self, api_client, created_product):
        response = api_client.patch(f"/api/products/{created_product['id']}/stock")
        assert response.status_code == 400
        assert "quantity" in response.json()["details"]

    def test_missing_product(self, api_client):
        response = api_client.patch("/api/products/999/stock?quantity=1")
        assert response.status_code == 404

    def test_quantity_beyond_column_range_rejected(self, api_client, created_product):
        response = api_client.patch(f"/api/products/{created_product['id']}/stock?quantity=99999999999999999999")
        assert response.status_code == 400
        assert "quantity" in response.json()["details"]
        assert api_client.get(f"/api/products/{created_product['id']}").json()["stock"] == 10

    def test_adjustment_past_stock_limit_rejected(self, api_client, created_product):
        response = api_client.patch(f"/api/products/{created_product['id']}/stock?quantity=2147483647")
        assert response.status_code == 400
        assert response.json()["details"]["code"] == "STOCK_LIMIT_EXCEEDED"
        assert api_client.get(f"/api/products/{created_product['id']}").json()["stock"] == 10
