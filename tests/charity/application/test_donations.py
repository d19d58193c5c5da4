import json

import pytest
from marketplace.charity.charity.charity import Charity
from marketplace.charity.charity.management import UpdateCharity
from marketplace.charity.donation.donation import Donation
from marketplace.charity.donation.giving import process_donation
from marketplace.charity.impact import charity_stats, donation_stats, user_donations
from protean import current_domain
from protean.exceptions import ValidationError

CARD = json.dumps({"card_number": "4242424242424242", "expiry": "12/27", "cvv": "123", "card_name": "SANA IQBAL"})


@pytest.fixture()
def donate(customer, charity_id):
    def _donate(amount=1000, **overrides):
        values = {
            "user_id": customer["id"],
            "charity_id": charity_id,
            "amount": amount,
            "payment_method": "card",
            "payment_details": CARD,
        }
        values.update(overrides)
        return process_donation(**values)

    return _donate


class TestDirectDonation:
    def test_completed_donation_credits_the_charity(self, donate, charity_id, gateways):
        result = donate(1000, message="For the ambulances")

        assert result.success
        assert result.message == "Thank you for your donation!"
        donation = current_domain.repository_for(Donation).get(result.donation_id)
        assert donation.status == "completed"
        assert donation.transaction_id.startswith("TXN")
        assert current_domain.repository_for(Charity).get(charity_id).raised_amount == 1000
        assert gateways["payments"].calls[-1] == {"amount": 1000, "method": "card"}

    def test_declined_donation_is_kept_as_failed(self, donate, charity_id, gateways):
        gateways["payments"].configure(success_rate=0.0)
        result = donate(500)

        assert not result.success
        assert result.message == "Payment failed. Please try again."
        assert current_domain.repository_for(Donation).get(result.donation_id).status == "failed"
        assert current_domain.repository_for(Charity).get(charity_id).raised_amount == 0

    def test_amount_must_be_positive(self, donate):
        with pytest.raises(ValidationError) as exc:
            donate(0)
        assert exc.value.messages["amount"] == ["Please enter a donation amount greater than 0"]

    def test_inactive_charity(self, donate, charity_id):
        current_domain.process(UpdateCharity(charity_id=charity_id, is_active=False), asynchronous=False)
        with pytest.raises(ValidationError) as exc:
            donate()
        assert exc.value.messages["charity_id"] == ["This charity is not accepting donations"]

    def test_requires_login(self, donate):
        with pytest.raises(ValidationError):
            donate(user_id=None)

    def test_card_details(self, donate):
        with pytest.raises(ValidationError) as exc:
            donate(payment_details=json.dumps({"card_number": "4242424242424242"}))
        assert exc.value.messages["payment_details"] == ["Please provide: expiry date, CVV, cardholder name"]


class TestDonationReports:
    def test_stats_count_completed_donations_only(self, donate, customer, charity_id, sign_up, gateways):
        donate(1000)
        donate(500)
        other, _ = sign_up(email="omar@example.pk", full_name="Omar Farooq")
        donate(1500, user_id=other.id)
        gateways["payments"].configure(success_rate=0.0)
        donate(9999)

        stats = donation_stats()
        assert stats["total_donations"] == 3
        assert stats["total_amount"] == 3000
        assert stats["unique_donors"] == 2
        assert stats["average_donation"] == 1000
        assert stats["top_charities"] == [{"charity_id": charity_id, "name": "Edhi Foundation", "amount": 3000}]

        assert charity_stats(charity_id)["unique_donors"] == 2
        assert len(user_donations(customer["id"])) == 3
