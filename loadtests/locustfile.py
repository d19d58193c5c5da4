"""Marketplace Load Testing: Locust entry point.

Discovers all user classes from the scenarios package.
Run specific scenarios with Locust's class selection.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py

    # Mixed workload only:
    locust -f loadtests/locustfile.py MixedWorkloadUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py MixedWorkloadUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest

Start the API with ``PROTEAN_ENV=test`` so simulated payments answer instantly.
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.charity import DonorUser  # noqa: F401
from loadtests.scenarios.mixed import MixedWorkloadUser  # noqa: F401
from loadtests.scenarios.seller import SellerUser  # noqa: F401
from loadtests.scenarios.shopper import ShopperUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Extracts the API error body so you see "Only 3 of Samsung Galaxy A54
    left in stock" instead of just "400".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Check the API is up and log a marker when the load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    if environment.host:
        try:
            health = requests.get(f"{environment.host.rstrip('/')}/health", timeout=5).json()
            print(f"[LOADTEST] API health: {health}")
        except (requests.RequestException, ValueError) as e:
            print(f"[LOADTEST] Could not reach the API health check: {e}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print a short summary of the run."""
    stats = environment.stats.total
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Requests: {stats.num_requests}, failures: {stats.num_failures}")
    print(f"[LOADTEST] Median response time: {stats.median_response_time} ms\n")
