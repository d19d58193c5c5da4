"""BDD tests for product listing."""

import pytest
from marketplace.catalogue.product.listing import AddProduct, RemoveProduct
from marketplace.catalogue.storefront import list_products
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/product_listing.feature")


@pytest.fixture()
def listing():
    return {"product_id": None, "exc": None}


def _list(seller_id, listing, name, price, stock):
    try:
        listing["product_id"] = current_domain.process(
            AddProduct(seller_id=seller_id, name=name, price=price, stock_quantity=stock),
            asynchronous=False,
        )
    except ValidationError as exc:
        listing["exc"] = exc


@given("a seller with a store", target_fixture="seller_id")
def seller_with_store(seller_account):
    return seller_account["seller_id"]


@given(parsers.cfparse('the seller has listed "{name}" at {price:d} with {stock:d} in stock'))
@when(parsers.cfparse('the seller lists "{name}" at {price:d} with {stock:d} in stock'))
def seller_lists(seller_id, listing, name, price, stock):
    _list(seller_id, listing, name, price, stock)


@when("the seller removes the product")
def seller_removes(seller_id, listing):
    current_domain.process(RemoveProduct(product_id=listing["product_id"], seller_id=seller_id), asynchronous=False)


@then(parsers.cfparse('the storefront shows "{name}"'))
def storefront_shows(name):
    assert name in [p["name"] for p in list_products()]


@then(parsers.cfparse('the product stock level is "{level}"'))
def stock_level_is(level):
    assert list_products()[0]["stock_level"] == level


@then(parsers.cfparse('the listing fails with "{message}"'))
def listing_fails(listing, message):
    assert isinstance(listing["exc"], ValidationError)
    assert message in [m for messages in listing["exc"].messages.values() for m in messages]


@then("the storefront is empty")
def storefront_empty():
    assert list_products() == []
