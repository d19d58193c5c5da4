"""Boot the FastAPI app the way uvicorn does, in a fresh interpreter.

The rest of the suite imports handler and repository modules directly, so
it cannot tell whether ``marketplace.init()`` registers them on its own.
Here a child process imports ``app`` with nothing else loaded, reports what
the domain registered, and drives a few requests through the real app and
its middleware.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[2] / "src"

BOOT = """
import json
import sys

from fastapi.testclient import TestClient

from app import app
from marketplace.domain import marketplace

client = TestClient(app)
session = client.post(
    "/auth/signup", json={"email": "sana@example.pk", "password": "secret123", "full_name": "Sana Iqbal"}
).json()
headers = {"Authorization": "Bearer " + session["access_token"]}

report = {
    "event_handlers": sorted(r.cls.__name__ for r in marketplace.registry.event_handlers.values()),
    "repositories": sorted(r.cls.__name__ for r in marketplace.registry.repositories.values()),
    "statuses": {
        "products": client.get("/products").status_code,
        "cart": client.get("/carts/me", headers=headers).status_code,
        "orders": client.get("/orders", headers=headers).status_code,
        "donations": client.get("/donations/mine", headers=headers).status_code,
    },
}
with open(sys.argv[1], "w") as f:
    json.dump(report, f)
"""


@pytest.fixture(scope="module")
def boot_report(tmp_path_factory):
    workdir = tmp_path_factory.mktemp("boot")
    report_file = workdir / "report.json"
    env = {**os.environ, "PYTHONPATH": str(SRC), "PROTEAN_ENV": "test"}
    env.pop("MARKETPLACE_BACKEND", None)

    completed = subprocess.run(
        [sys.executable, "-c", BOOT, str(report_file)],
        cwd=workdir,
        env=env,
        capture_output=True,
        text=True,
        timeout=120,
    )
    assert completed.returncode == 0, completed.stderr
    return json.loads(report_file.read_text())


class TestAppStartup:
    def test_nested_event_handlers_are_registered(self, boot_report):
        assert {
            "CharityDonationEventHandler",
            "CheckoutDonationEventHandler",
            "DiscountRedemptionEventHandler",
            "ProductSalesEventHandler",
        } <= set(boot_report["event_handlers"])

    def test_custom_repositories_are_registered(self, boot_report):
        assert {
            "CartRepository",
            "DiscountCodeRepository",
            "OrderRepository",
            "SellerRepository",
        } <= set(boot_report["repositories"])

    def test_requests_are_served(self, boot_report):
        assert boot_report["statuses"] == {"products": 200, "cart": 200, "orders": 200, "donations": 200}
