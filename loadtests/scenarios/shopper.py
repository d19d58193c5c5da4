"""Shopper load test scenarios.

Browsing is stateless and read-heavy; checkout is a SequentialTaskSet that
fills a cart and pays for it with the simulated gateway. The checkout journey
needs products on sale, so run it alongside the seller scenarios.
"""

import random

from locust import HttpUser, SequentialTaskSet, TaskSet, between, task

from loadtests.data_generators import checkout_data, signup_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class BrowsingTasks(TaskSet):
    """Anonymous storefront traffic."""

    @task(5)
    def list_products(self):
        self.client.get("/products", params={"limit": 20}, name="GET /products")

    @task(3)
    def search(self):
        term = random.choice(["phone", "shirt", "lamp", "book", "shoe"])
        self.client.get("/products", params={"search": term}, name="GET /products?search")

    @task(3)
    def view_product(self):
        resp = self.client.get("/products", params={"limit": 20}, name="GET /products")
        products = resp.json() if resp.status_code == 200 else []
        if not products:
            return
        product_id = random.choice(products)["product_id"]
        self.client.get(f"/products/{product_id}", name="GET /products/{id}")
        self.client.post(f"/products/{product_id}/views", name="POST /products/{id}/views")

    @task(2)
    def categories(self):
        self.client.get("/categories", name="GET /categories")

    @task(1)
    def storefront_extras(self):
        self.client.get("/stats", name="GET /stats")
        self.client.get("/discounts/active", name="GET /discounts/active")
        self.client.get("/payments/methods", name="GET /payments/methods")


class CheckoutJourney(SequentialTaskSet):
    """Sign up -> Pick products -> Add to cart -> Quote -> Checkout -> Order history."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def sign_up(self):
        with self.client.post("/auth/signup", json=signup_data(), catch_response=True, name="POST /auth/signup") as resp:
            if resp.status_code == 201:
                self.state.headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}
            else:
                resp.failure(f"Sign up failed: {resp.status_code}")
                self.interrupt()

    @task
    def pick_products(self):
        resp = self.client.get("/products", params={"limit": 50}, name="GET /products")
        products = [p for p in resp.json() if p.get("stock_quantity", 0) > 2] if resp.status_code == 200 else []
        if not products:
            self.interrupt()
            return
        picks = random.sample(products, k=min(len(products), random.randint(1, 3)))
        self.state.product_ids = [p["product_id"] for p in picks]

    @task
    def fill_cart(self):
        for product_id in self.state.product_ids:
            self.client.post(
                "/carts/me/items",
                json={"product_id": product_id, "quantity": random.randint(1, 2)},
                headers=self.state.headers,
                name="POST /carts/me/items",
            )

    @task
    def quote(self):
        self.client.post(
            "/checkout/quote",
            json={"discount_code": random.choice([None, "WELCOME10", "FREESHIP"])},
            headers=self.state.headers,
            name="POST /checkout/quote",
        )

    @task
    def checkout(self):
        with self.client.post(
            "/checkout",
            json=checkout_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /checkout",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["order_id"])
            elif resp.status_code == 400 and "Payment failed" in extract_error_detail(resp):
                # Declines are part of the simulated gateway's behaviour
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code}")

    @task
    def order_history(self):
        self.client.get("/orders", headers=self.state.headers, name="GET /orders")
        for order_id in self.state.order_ids:
            self.client.get(f"/orders/{order_id}", headers=self.state.headers, name="GET /orders/{id}")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    """Mostly browsing, occasionally buying."""

    tasks = {BrowsingTasks: 5, CheckoutJourney: 2}
    wait_time = between(1, 3)
