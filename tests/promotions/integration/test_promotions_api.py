"""Integration tests for the discount code endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from marketplace.promotions.api.routes import router
from marketplace.promotions.seeding import seed_default_codes
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(router)
    register_exception_handlers(app)
    return TestClient(app)


class TestStorefront:
    def test_active_codes(self, client):
        seed_default_codes()
        response = client.get("/discounts/active")
        assert response.status_code == 200
        assert {c["code"] for c in response.json()} == {"WELCOME10", "FREESHIP", "PAKISTAN20", "FLASH50"}

    def test_apply(self, client):
        seed_default_codes()
        response = client.post("/discounts/apply", json={"code": "freeship", "order_amount": 2500})
        assert response.json() == {
            "success": True,
            "discount_amount": 500.0,
            "message": "Rs. 500 off on orders above Rs. 2000",
            "code": "FREESHIP",
        }

    def test_apply_unknown(self, client):
        body = client.post("/discounts/apply", json={"code": "NOPE", "order_amount": 2500}).json()
        assert body["success"] is False
        assert body["discount_amount"] == 0


class TestSellerManagement:
    def test_requires_a_seller(self, client, customer):
        assert client.get("/discounts", headers=customer["headers"]).status_code == 403

    def test_create_update_delete(self, client, seller_account):
        headers = seller_account["headers"]
        created = client.post(
            "/discounts", json={"code": "EID25", "discount_type": "percentage", "value": 25}, headers=headers
        )
        assert created.status_code == 201
        discount_id = created.json()["discount_code_id"]

        updated = client.put(f"/discounts/{discount_id}", json={"value": 30}, headers=headers)
        assert updated.status_code == 200
        assert client.get("/discounts", headers=headers).json()[0]["value"] == 30

        assert client.delete(f"/discounts/{discount_id}", headers=headers).status_code == 200
        assert client.get("/discounts", headers=headers).json() == []

    def test_invalid_value(self, client, seller_account):
        response = client.post(
            "/discounts",
            json={"code": "HALF", "discount_type": "percentage", "value": 150},
            headers=seller_account["headers"],
        )
        assert response.status_code == 400

    def test_stats(self, client, seller_account):
        seed_default_codes()
        stats = client.get("/discounts/stats", headers=seller_account["headers"]).json()
        assert stats["total_codes"] == 4
        assert stats["popular_codes"] == []
