"""Charity load test scenarios: money donations and goods donations."""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import charity_data, donation_data, goods_donation_data, signup_data
from loadtests.helpers.state import DonorState


class DonorJourney(SequentialTaskSet):
    """Sign up -> Find a charity -> Donate -> Offer goods -> Review own giving -> Impact page."""

    def on_start(self):
        self.state = DonorState()

    @task
    def sign_up(self):
        with self.client.post("/auth/signup", json=signup_data(), catch_response=True, name="POST /auth/signup") as resp:
            if resp.status_code == 201:
                self.state.headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}
            else:
                resp.failure(f"Sign up failed: {resp.status_code}")
                self.interrupt()

    @task
    def find_charity(self):
        resp = self.client.get("/charities", name="GET /charities")
        self.state.charity_ids = [c["charity_id"] for c in resp.json()] if resp.status_code == 200 else []
        if self.state.charity_ids:
            return

        with self.client.post(
            "/charities", json=charity_data(), headers=self.state.headers, catch_response=True, name="POST /charities"
        ) as created:
            if created.status_code == 201:
                self.state.charity_ids.append(created.json()["charity_id"])
            else:
                created.failure(f"Register charity failed: {created.status_code}")
                self.interrupt()

    @task
    def view_charity(self):
        charity_id = random.choice(self.state.charity_ids)
        self.client.get(f"/charities/{charity_id}", name="GET /charities/{id}")

    @task
    def donate(self):
        with self.client.post(
            "/donations",
            json=donation_data(random.choice(self.state.charity_ids)),
            headers=self.state.headers,
            catch_response=True,
            name="POST /donations",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Donation failed: {resp.status_code}")

    @task
    def offer_goods(self):
        if random.random() < 0.5:
            return
        with self.client.post(
            "/goods-donations",
            json=goods_donation_data(photos=random.randint(0, 2)),
            headers=self.state.headers,
            catch_response=True,
            name="POST /goods-donations",
        ) as resp:
            if resp.status_code == 201:
                self.state.goods_donation_ids.append(resp.json()["donation_id"])
            else:
                resp.failure(f"Goods donation failed: {resp.status_code}")

    @task
    def my_giving(self):
        self.client.get("/donations/mine", headers=self.state.headers, name="GET /donations/mine")
        self.client.get("/goods-donations/mine", headers=self.state.headers, name="GET /goods-donations/mine")

    @task
    def impact(self):
        self.client.get("/charities/impact", name="GET /charities/impact")
        self.client.get("/payments/donation-presets", name="GET /payments/donation-presets")

    @task
    def done(self):
        self.interrupt()


class DonorUser(HttpUser):
    tasks = [DonorJourney]
    wait_time = between(2, 5)
