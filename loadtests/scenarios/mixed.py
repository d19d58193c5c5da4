"""Mixed marketplace workload scenario.

Combines the shopper, seller and donor journeys with weights that model a
storefront where most visitors browse, some buy, few sell and some give.
This is the recommended scenario for a load baseline.
"""

from locust import HttpUser, between

from loadtests.scenarios.charity import DonorJourney
from loadtests.scenarios.seller import PromotionJourney, StoreOpeningJourney
from loadtests.scenarios.shopper import BrowsingTasks, CheckoutJourney


class MixedWorkloadUser(HttpUser):
    """Realistic mixed workload.

    Shoppers (75%):
    - Browsing the storefront: by far the most common traffic
    - Checkout: carts turned into paid orders

    Sellers (15%):
    - Opening and stocking a store
    - Running discount codes

    Donors (10%):
    - Money and goods donations
    """

    tasks = {
        BrowsingTasks: 50,
        CheckoutJourney: 25,
        StoreOpeningJourney: 12,
        PromotionJourney: 3,
        DonorJourney: 10,
    }
    wait_time = between(1, 3)
