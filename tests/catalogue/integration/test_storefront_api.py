"""Integration tests for the storefront API endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from marketplace.catalogue.api.routes import category_router, product_router, stats_router
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(product_router)
    app.include_router(category_router)
    app.include_router(stats_router)
    register_exception_handlers(app)
    return TestClient(app)


class TestProductEndpoints:
    def test_list_and_search(self, client, add_product):
        add_product(name="Kettle")
        add_product(name="Toaster")

        assert len(client.get("/products").json()) == 2
        assert [p["name"] for p in client.get("/products?search=kett").json()] == ["Kettle"]
        assert len(client.get("/products?limit=1").json()) == 1

    def test_detail(self, client, product_id):
        response = client.get(f"/products/{product_id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Samsung Galaxy A54"

    def test_unknown_product(self, client):
        assert client.get("/products/does-not-exist").status_code == 404

    def test_record_view(self, client, product_id):
        assert client.post(f"/products/{product_id}/views").status_code == 200
        assert client.get(f"/products/{product_id}").json()["views"] == 1


class TestCategoryEndpoints:
    def test_list_categories(self, client, product_id):
        categories = client.get("/categories").json()
        assert categories[0]["name"] == "Electronics"
        assert categories[0]["product_count"] == 1

    def test_sellers_create_categories(self, client, seller_account):
        response = client.post("/categories", json={"name": "Toys & Games"}, headers=seller_account["headers"])
        assert response.status_code == 201
        detail = client.get(f"/categories/{response.json()['category_id']}").json()
        assert detail["slug"] == "toys-games"

    def test_anonymous_users_cannot_create_categories(self, client):
        assert client.post("/categories", json={"name": "Toys & Games"}).status_code == 401

    def test_deactivated_category_is_hidden(self, client, seller_account, category_id):
        client.put(f"/categories/{category_id}", json={"is_active": False}, headers=seller_account["headers"])
        assert client.get(f"/categories/{category_id}").status_code == 404
        assert client.get("/categories").json() == []


class TestStats:
    def test_stats(self, client, product_id):
        assert client.get("/stats").json() == {"total_products": 1, "total_categories": 1, "total_orders": 0}
