"""Integration tests for the cart, checkout, order and return endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from marketplace.ordering.api.routes import cart_router, checkout_router, order_router, return_router
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    for router in (cart_router, checkout_router, order_router, return_router):
        app.include_router(router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def checkout_body():
    return {
        "first_name": "Sana",
        "last_name": "Iqbal",
        "email": "sana@example.pk",
        "phone": "0300-7654321",
        "address": "House 4, Street 9, F-7",
        "city": "Islamabad",
        "payment_method": "jazzcash",
        "payment_details": {"phone": "03007654321", "otp": "123456"},
    }


class TestCartEndpoints:
    def test_requires_login(self, client):
        assert client.get("/carts/me").status_code == 401

    def test_add_update_remove(self, client, customer, product_id):
        headers = customer["headers"]

        added = client.post("/carts/me/items", json={"product_id": product_id, "quantity": 2}, headers=headers)
        assert added.status_code == 201
        assert added.json()["total_items"] == 2

        updated = client.put(f"/carts/me/items/{product_id}", json={"quantity": 4}, headers=headers)
        assert updated.json()["total_price"] == 10000.0

        removed = client.delete(f"/carts/me/items/{product_id}", headers=headers)
        assert removed.json()["items"] == []

    def test_over_stock_is_a_bad_request(self, client, customer, product_id):
        response = client.post(
            "/carts/me/items", json={"product_id": product_id, "quantity": 50}, headers=customer["headers"]
        )
        assert response.status_code == 400

    def test_clear(self, client, customer, product_id):
        client.post("/carts/me/items", json={"product_id": product_id}, headers=customer["headers"])
        assert client.delete("/carts/me", headers=customer["headers"]).json() == {"status": "ok"}
        assert client.get("/carts/me", headers=customer["headers"]).json()["total_items"] == 0


class TestCheckoutEndpoints:
    def test_quote_then_place(self, client, customer, product_id, checkout_body, gateways):
        headers = customer["headers"]
        client.post("/carts/me/items", json={"product_id": product_id, "quantity": 2}, headers=headers)

        quote = client.post("/checkout/quote", json={"donation_amount": 100}, headers=headers)
        assert quote.status_code == 200
        assert quote.json()["total"] == 5100.0
        assert gateways["payments"].calls == []

        placed = client.post("/checkout", json={**checkout_body, "donation_amount": 0}, headers=headers)
        assert placed.status_code == 201
        body = placed.json()
        assert body["final_amount"] == 5000.0
        assert body["formatted_total"] == "Rs. 5,000"
        assert body["order_number"]

        orders = client.get("/orders", headers=headers).json()
        assert [o["order_id"] for o in orders] == [body["order_id"]]
        assert client.get(f"/orders/{body['order_id']}", headers=headers).json()["status"] == "pending"

    def test_empty_cart(self, client, customer, checkout_body):
        response = client.post("/checkout", json=checkout_body, headers=customer["headers"])
        assert response.status_code == 400

    def test_declined_payment(self, client, customer, product_id, checkout_body, gateways):
        gateways["payments"].configure(success_rate=0.0)
        client.post("/carts/me/items", json={"product_id": product_id}, headers=customer["headers"])

        response = client.post("/checkout", json=checkout_body, headers=customer["headers"])
        assert response.status_code == 400
        assert client.get("/carts/me", headers=customer["headers"]).json()["total_items"] == 1

    def test_someone_elses_order(self, client, customer, sign_up, product_id, checkout_body):
        client.post("/carts/me/items", json={"product_id": product_id}, headers=customer["headers"])
        order_id = client.post("/checkout", json=checkout_body, headers=customer["headers"]).json()["order_id"]

        _, other_headers = sign_up(email="omar@example.pk", full_name="Omar Farooq")
        assert client.get(f"/orders/{order_id}", headers=other_headers).status_code == 404


class TestReturnEndpoints:
    def test_customer_requests_and_seller_resolves(
        self, client, customer, seller_account, product_id, fill_cart, place_order, deliver
    ):
        fill_cart(product_id)
        order_id = place_order()
        deliver(order_id)
        item_id = client.get(f"/orders/{order_id}", headers=customer["headers"]).json()["items"][0]["item_id"]

        created = client.post(
            "/returns",
            json={"order_id": order_id, "order_item_id": item_id, "reason": "Wrong colour"},
            headers=customer["headers"],
        )
        assert created.status_code == 201
        return_id = created.json()["return_id"]

        seller_view = client.get("/returns/seller", headers=seller_account["headers"]).json()
        assert [r["return_id"] for r in seller_view] == [return_id]

        resolved = client.put(
            f"/returns/{return_id}/status", json={"status": "rejected"}, headers=seller_account["headers"]
        )
        assert resolved.status_code == 200
        assert client.get("/returns", headers=customer["headers"]).json()[0]["status"] == "rejected"

    def test_customer_cannot_resolve(self, client, customer):
        response = client.put("/returns/any/status", json={"status": "approved"}, headers=customer["headers"])
        assert response.status_code == 403
