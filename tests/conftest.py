import json
import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before the domain is first imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def marketplace_bed():
    from marketplace.domain import marketplace

    bed = DomainFixture(marketplace)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(marketplace_bed):
    with marketplace_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def gateways():
    """Instant, always-successful payments and in-memory storage and auth for every test."""
    from marketplace.identity.auth import reset_auth_gateway, set_auth_gateway
    from marketplace.identity.auth.fake_adapter import FakeAuthGateway
    from marketplace.payments.gateway import SimulatedGateway, reset_gateway, set_gateway
    from marketplace.storage import reset_storage, set_storage
    from marketplace.storage.memory_adapter import InMemoryStorage

    payments = SimulatedGateway(step_delay=0.0, success_rate=1.0)
    storage = InMemoryStorage()
    auth = FakeAuthGateway()
    set_gateway(payments)
    set_storage(storage)
    set_auth_gateway(auth)

    yield {"payments": payments, "storage": storage, "auth": auth}

    reset_gateway()
    reset_storage()
    reset_auth_gateway()


# ---------------------------------------------------------------------------
# Shared marketplace fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def sign_up(gateways):
    """Create an account with the fake auth backend; returns (user, auth headers)."""

    def _sign_up(email="ali@example.pk", password="secret123", full_name="Ali Raza"):
        result = gateways["auth"].sign_up(email, password, full_name)
        assert result.success, result.error
        return result.user, {"Authorization": f"Bearer {result.access_token}"}

    return _sign_up


@pytest.fixture()
def customer(sign_up):
    user, headers = sign_up(email="sana@example.pk", full_name="Sana Iqbal")
    return {"user": user, "headers": headers, "id": user.id}


@pytest.fixture()
def seller_account(sign_up):
    from protean import current_domain

    from marketplace.identity.seller.registration import RegisterSeller

    user, headers = sign_up(email="ayesha@example.pk", full_name="Ayesha Khan")
    seller_id = current_domain.process(
        RegisterSeller(
            user_id=user.id,
            email=user.email,
            full_name="Ayesha Khan",
            business_name="Khan Electronics",
            phone="+92 300 1234567",
            address="12 Mall Road",
            city="Lahore",
            business_type="Electronics",
            tax_id="NTN-1234567-8",
        ),
        asynchronous=False,
    )
    return {"user": user, "headers": headers, "seller_id": seller_id}


@pytest.fixture()
def category_id():
    from protean import current_domain

    from marketplace.catalogue.category.management import CreateCategory

    return current_domain.process(CreateCategory(name="Electronics", description="Phones and more"), asynchronous=False)


@pytest.fixture()
def add_product(seller_account, category_id):
    from protean import current_domain

    from marketplace.catalogue.product.listing import AddProduct

    def _add_product(**overrides):
        values = {
            "seller_id": seller_account["seller_id"],
            "name": "Samsung Galaxy A54",
            "description": "128GB",
            "category_id": category_id,
            "price": 2500.0,
            "original_price": 3000.0,
            "stock_quantity": 20,
        }
        values.update(overrides)
        return current_domain.process(AddProduct(**values), asynchronous=False)

    return _add_product


@pytest.fixture()
def product_id(add_product):
    return add_product()


CHECKOUT_SHIPPING = {
    "first_name": "Sana",
    "last_name": "Iqbal",
    "email": "sana@example.pk",
    "phone": "0300-7654321",
    "address": "House 4, Street 9, F-7",
    "city": "Islamabad",
}


@pytest.fixture()
def fill_cart(customer):
    from protean import current_domain

    from marketplace.ordering.cart.items import AddToCart

    def _fill_cart(product_id, quantity=1):
        current_domain.process(
            AddToCart(customer_id=customer["id"], product_id=product_id, quantity=quantity), asynchronous=False
        )

    return _fill_cart


@pytest.fixture()
def place_order(customer):
    """Check the customer's cart out with EasyPaisa; keyword overrides go to PlaceOrder."""
    from protean import current_domain

    from marketplace.ordering.order.checkout import PlaceOrder

    def _place_order(**overrides):
        values = {
            **CHECKOUT_SHIPPING,
            "customer_id": customer["id"],
            "payment_method": "easypaisa",
            "payment_details": json.dumps({"phone": "03007654321", "otp": "123456"}),
        }
        values.update(overrides)
        return current_domain.process(PlaceOrder(**values), asynchronous=False)

    return _place_order


@pytest.fixture()
def deliver(seller_account):
    from protean import current_domain

    from marketplace.ordering.order.fulfillment import UpdateOrderStatus

    def _deliver(order_id):
        for status in ("confirmed", "processing", "shipped", "delivered"):
            current_domain.process(
                UpdateOrderStatus(order_id=order_id, seller_id=seller_account["seller_id"], status=status),
                asynchronous=False,
            )

    return _deliver
