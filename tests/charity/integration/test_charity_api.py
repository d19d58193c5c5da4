"""Integration tests for the charity, donation and goods donation endpoints via TestClient."""

import asyncio
import base64
import time

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from marketplace.charity.api.routes import charity_router, donation_router, goods_router
from protean.integrations.fastapi import register_exception_handlers

WALLET = {"phone": "03007654321", "otp": "123456"}


@pytest.fixture()
def client():
    app = FastAPI()
    for router in (charity_router, donation_router, goods_router):
        app.include_router(router)
    register_exception_handlers(app)
    return TestClient(app)


class TestCharityEndpoints:
    def test_public_listing_and_detail(self, client, charity_id):
        listing = client.get("/charities")
        assert listing.status_code == 200
        assert [c["charity_id"] for c in listing.json()] == [charity_id]

        detail = client.get(f"/charities/{charity_id}").json()
        assert detail["name"] == "Edhi Foundation"
        assert detail["total_donations"] == 0

    def test_unknown_charity(self, client):
        assert client.get("/charities/missing").status_code == 404

    def test_register_requires_login(self, client):
        assert client.post("/charities", json={"name": "Akhuwat"}).status_code == 401

    def test_register_verify_and_reject(self, client, customer, seller_account):
        created = client.post(
            "/charities", json={"name": "Akhuwat", "category": "Social Welfare"}, headers=customer["headers"]
        )
        assert created.status_code == 201
        charity_id = created.json()["charity_id"]

        headers = seller_account["headers"]
        assert client.put(f"/charities/{charity_id}/verify", headers=headers).status_code == 200
        assert client.get(f"/charities/{charity_id}").json()["verification_status"] == "verified"

        again = client.put(f"/charities/{charity_id}/reject", json={"reason": "Late"}, headers=headers)
        assert again.status_code == 400

    def test_shoppers_cannot_manage_charities(self, client, customer, charity_id):
        headers = customer["headers"]
        assert client.put(f"/charities/{charity_id}/verify", headers=headers).status_code == 403
        rejected = client.put(f"/charities/{charity_id}/reject", json={"reason": "Spam"}, headers=headers)
        assert rejected.status_code == 403
        assert client.put(f"/charities/{charity_id}", json={"name": "Renamed"}, headers=headers).status_code == 403
        assert client.delete(f"/charities/{charity_id}", headers=headers).status_code == 403
        assert client.get(f"/charities/{charity_id}").json()["name"] == "Edhi Foundation"

    def test_impact(self, client, charity_id):
        body = client.get("/charities/impact").json()
        assert body["total_raised"] == 0
        assert body["charities"][0]["people_helped"] == 0


class TestDonationEndpoints:
    def test_donate_and_list(self, client, customer, charity_id):
        response = client.post(
            "/donations",
            json={"charity_id": charity_id, "amount": 500, "payment_method": "easypaisa", "payment_details": WALLET},
            headers=customer["headers"],
        )
        assert response.status_code == 201
        assert response.json()["success"] is True

        mine = client.get("/donations/mine", headers=customer["headers"]).json()
        assert [d["amount"] for d in mine] == [500]
        assert client.get(f"/charities/{charity_id}").json()["raised_amount"] == 500
        assert client.get("/donations/stats").json()["total_amount"] == 500

    def test_declined(self, client, customer, charity_id, gateways):
        gateways["payments"].configure(success_rate=0.0)
        response = client.post(
            "/donations",
            json={"charity_id": charity_id, "amount": 500, "payment_method": "easypaisa", "payment_details": WALLET},
            headers=customer["headers"],
        )
        assert response.status_code == 201
        assert response.json()["success"] is False


class TestGoodsDonationEndpoints:
    def test_submit_with_photo_and_review(self, client, customer, seller_account, goods_offer):
        photo = {"filename": "jacket.jpg", "content_type": "image/jpeg", "data": base64.b64encode(b"jpeg").decode()}
        created = client.post("/goods-donations", json={**goods_offer, "images": [photo]}, headers=customer["headers"])
        assert created.status_code == 201
        donation_id = created.json()["donation_id"]

        mine = client.get("/goods-donations/mine", headers=customer["headers"]).json()
        assert len(mine[0]["images"]) == 1

        scheduled = client.put(
            f"/goods-donations/{donation_id}/pickup",
            json={"pickup_date": "2024-12-01", "pickup_time": "10:00 - 12:00"},
            headers=seller_account["headers"],
        )
        assert scheduled.status_code == 200
        listing = client.get(
            "/goods-donations", params={"status": "approved"}, headers=seller_account["headers"]
        ).json()
        assert [d["donation_id"] for d in listing] == [donation_id]

    def test_donors_cannot_review_goods_donations(self, client, customer, goods_offer):
        headers = customer["headers"]
        donation_id = client.post("/goods-donations", json=goods_offer, headers=headers).json()["donation_id"]

        approved = client.put(f"/goods-donations/{donation_id}/status", json={"status": "approved"}, headers=headers)
        assert approved.status_code == 403
        scheduled = client.put(
            f"/goods-donations/{donation_id}/pickup",
            json={"pickup_date": "2024-12-01", "pickup_time": "10:00 - 12:00"},
            headers=headers,
        )
        assert scheduled.status_code == 403
        assert client.get("/goods-donations", headers=headers).status_code == 403
        assert client.get("/goods-donations/stats", headers=headers).status_code == 403
        assert client.get("/goods-donations/mine", headers=headers).json()[0]["status"] == "pending"

    def test_bad_photo_data(self, client, customer, goods_offer):
        photo = {"filename": "jacket.jpg", "content_type": "image/jpeg", "data": "not base64!"}
        response = client.post("/goods-donations", json={**goods_offer, "images": [photo]}, headers=customer["headers"])
        assert response.status_code == 400

    def test_missing_contact_details(self, client, customer, goods_offer):
        response = client.post(
            "/goods-donations", json={**goods_offer, "donor_phone": ""}, headers=customer["headers"]
        )
        assert response.status_code == 400

    def test_stats_and_delete(self, client, customer, seller_account, goods_offer):
        donation_id = client.post("/goods-donations", json=goods_offer, headers=customer["headers"]).json()[
            "donation_id"
        ]
        assert client.get("/goods-donations/stats", headers=seller_account["headers"]).json()["total"] == 1

        assert client.delete(f"/goods-donations/{donation_id}", headers=customer["headers"]).status_code == 200
        assert client.get("/goods-donations/mine", headers=customer["headers"]).json() == []


class TestPaymentConcurrency:
    def test_payment_steps_do_not_hold_up_other_requests(self, customer, charity_id, gateways):
        gateways["payments"].configure(step_delay=0.25)
        app = FastAPI()
        app.include_router(donation_router)
        register_exception_handlers(app)

        @app.get("/ping")
        async def ping():
            return {"status": "ok"}

        body = {"charity_id": charity_id, "amount": 300, "payment_method": "easypaisa", "payment_details": WALLET}

        async def donate_while_pinging():
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
                donation = asyncio.create_task(http.post("/donations", json=body, headers=customer["headers"]))
                await asyncio.sleep(0.1)
                started = time.perf_counter()
                ping_response = await http.get("/ping")
                waited = time.perf_counter() - started
                return await donation, ping_response, waited

        donation, ping_response, waited = asyncio.run(donate_while_pinging())

        assert donation.status_code == 201
        assert donation.json()["success"] is True
        assert ping_response.status_code == 200
        # The four payment steps take a full second between them
        assert waited < 0.5
