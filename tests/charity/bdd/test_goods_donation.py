"""BDD tests for the goods donation review flow."""

from datetime import date

import pytest
from marketplace.charity.goods.goods_donation import GoodsDonation
from marketplace.charity.goods.handling import ScheduleGoodsPickup, UpdateGoodsDonationStatus
from marketplace.charity.goods.submission import submit_goods_donation
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/goods_donation.feature")


@pytest.fixture()
def error():
    return {"exc": None}


def _process(command, error):
    try:
        current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a shopper offers {quantity:d} "{name}" in "{condition}" condition'),
    target_fixture="donation_id",
)
def offer(customer, goods_offer, quantity, name, condition):
    values = {**goods_offer, "quantity": quantity, "product_name": name, "condition": condition}
    return submit_goods_donation(donor_id=customer["id"], **values)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('a pickup is scheduled for "{day}" between "{window}"'))
def schedule(donation_id, error, day, window):
    _process(
        ScheduleGoodsPickup(donation_id=donation_id, pickup_date=date.fromisoformat(day), pickup_time=window), error
    )


@when(parsers.cfparse('the offer is moved to "{status}"'))
def move(donation_id, error, status):
    _process(UpdateGoodsDonationStatus(donation_id=donation_id, status=status), error)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the offer is "{status}"'))
def offer_status(donation_id, status):
    assert current_domain.repository_for(GoodsDonation).get(donation_id).status == status


@then(parsers.cfparse('the pickup is on "{day}"'))
def pickup_day(donation_id, day):
    assert current_domain.repository_for(GoodsDonation).get(donation_id).pickup_date == date.fromisoformat(day)


@then(parsers.cfparse('the review fails with "{message}"'))
def review_fails(error, message):
    assert isinstance(error["exc"], ValidationError)
    assert message in [m for messages in error["exc"].messages.values() for m in messages]
