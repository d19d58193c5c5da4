import pytest
from marketplace.charity.donation.donation import Donation
from marketplace.charity.donation.events import DonationCompleted, DonationFailed
from protean.exceptions import ValidationError


def _pending():
    return Donation.pending(user_id="user-1", amount=150, payment_method="cod", charity_id="charity-1", order_id="o-1")


class TestDonationLifecycle:
    def test_pending_donation_raises_nothing(self):
        donation = _pending()
        assert donation.is_pending
        assert donation._events == []

    def test_complete(self):
        donation = _pending()
        donation.complete()

        assert donation.is_completed
        event = donation._events[-1]
        assert isinstance(event, DonationCompleted)
        assert event.order_id == "o-1"
        assert event.amount == 150

    def test_fail(self):
        donation = _pending()
        donation.fail("Order was cancelled")

        assert donation.status == "failed"
        assert isinstance(donation._events[-1], DonationFailed)

    def test_settled_donation_cannot_change(self):
        donation = _pending()
        donation.complete()
        with pytest.raises(ValidationError) as exc:
            donation.fail("Order was cancelled")
        assert exc.value.messages["status"] == ["Donation is already completed"]

    def test_completed_factory_records_the_transaction(self):
        donation = Donation.completed(user_id="user-1", amount=500, payment_method="card", transaction_id="TXN7")
        assert donation.transaction_id == "TXN7"
        assert isinstance(donation._events[-1], DonationCompleted)
