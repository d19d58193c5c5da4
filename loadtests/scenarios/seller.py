"""Seller load test scenarios.

Stateful SequentialTaskSet journeys: opening a store and stocking it, then
running promotions from the dashboard. Steps execute in order; each depends
on the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    category_name,
    discount_code_data,
    product_data,
    seller_registration_data,
    signup_data,
)
from loadtests.helpers.state import SellerState


def sign_up(task_set, state) -> None:
    with task_set.client.post("/auth/signup", json=signup_data(), catch_response=True, name="POST /auth/signup") as resp:
        if resp.status_code == 201:
            state.headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}
        else:
            resp.failure(f"Sign up failed: {resp.status_code}")
            task_set.interrupt()


class StoreOpeningJourney(SequentialTaskSet):
    """Sign up -> Register as seller -> Create category -> Add products -> Settings -> Dashboard."""

    def on_start(self):
        self.state = SellerState()

    @task
    def sign_up(self):
        sign_up(self, self.state)

    @task
    def register_seller(self):
        with self.client.post(
            "/sellers",
            json=seller_registration_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /sellers",
        ) as resp:
            if resp.status_code == 201:
                self.state.seller_id = resp.json()["seller_id"]
            else:
                resp.failure(f"Register seller failed: {resp.status_code}")
                self.interrupt()

    @task
    def create_category(self):
        with self.client.post(
            "/categories",
            json={"name": category_name()},
            headers=self.state.headers,
            catch_response=True,
            name="POST /categories",
        ) as resp:
            if resp.status_code == 201:
                self.state.category_id = resp.json()["category_id"]
            else:
                resp.failure(f"Create category failed: {resp.status_code}")

    @task
    def add_products(self):
        for _ in range(random.randint(2, 4)):
            with self.client.post(
                "/sellers/me/products",
                json=product_data(self.state.category_id),
                headers=self.state.headers,
                catch_response=True,
                name="POST /sellers/me/products",
            ) as resp:
                if resp.status_code == 201:
                    self.state.product_ids.append(resp.json()["product_id"])
                else:
                    resp.failure(f"Add product failed: {resp.status_code}")

    @task
    def update_settings(self):
        self.client.put(
            "/sellers/me/settings",
            json={"auto_fulfill": random.random() < 0.5, "shipping_zones": ["Punjab", "Sindh"]},
            headers=self.state.headers,
            name="PUT /sellers/me/settings",
        )

    @task
    def upload_image(self):
        if not self.state.product_ids:
            return
        self.client.post(
            "/sellers/me/images",
            params={"filename": "front.jpg", "product_id": self.state.product_ids[0]},
            data=b"\xff\xd8\xff\xd9",
            headers={**self.state.headers, "Content-Type": "image/jpeg"},
            name="POST /sellers/me/images",
        )

    @task
    def load_dashboard(self):
        self.client.get("/sellers/me/dashboard", headers=self.state.headers, name="GET /sellers/me/dashboard")

    @task
    def done(self):
        self.interrupt()


class PromotionJourney(SequentialTaskSet):
    """Open a store -> Create discount code -> Tweak it -> Check stats -> Retire it."""

    def on_start(self):
        self.state = SellerState()

    @task
    def sign_up(self):
        sign_up(self, self.state)

    @task
    def register_seller(self):
        with self.client.post(
            "/sellers",
            json=seller_registration_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /sellers",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Register seller failed: {resp.status_code}")
                self.interrupt()

    @task
    def create_code(self):
        with self.client.post(
            "/discounts",
            json=discount_code_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /discounts",
        ) as resp:
            if resp.status_code == 201:
                self.state.discount_code_ids.append(resp.json()["discount_code_id"])
            else:
                resp.failure(f"Create discount code failed: {resp.status_code}")
                self.interrupt()

    @task
    def update_code(self):
        self.client.put(
            f"/discounts/{self.state.discount_code_ids[0]}",
            json={"description": "Updated by load test"},
            headers=self.state.headers,
            name="PUT /discounts/{id}",
        )

    @task
    def stats(self):
        self.client.get("/discounts/stats", headers=self.state.headers, name="GET /discounts/stats")

    @task
    def retire_code(self):
        self.client.put(
            f"/discounts/{self.state.discount_code_ids[0]}",
            json={"is_active": False},
            headers=self.state.headers,
            name="PUT /discounts/{id}",
        )

    @task
    def done(self):
        self.interrupt()


class SellerUser(HttpUser):
    """Sellers opening stores and running promotions."""

    tasks = {StoreOpeningJourney: 4, PromotionJourney: 1}
    wait_time = between(1, 3)
