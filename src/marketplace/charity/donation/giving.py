"""Direct donations from a charity's page: command, handler and result."""

import json
from dataclasses import dataclass

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.charity.charity.charity import Charity
from marketplace.charity.donation.donation import Donation
from marketplace.domain import marketplace
from marketplace.payments.gateway import get_gateway
from marketplace.payments.methods import validate_payment_details

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DonationProcessResult:
    success: bool
    donation_id: str | None = None
    message: str = ""


@marketplace.command(part_of="Donation")
class MakeDonation:
    user_id = Identifier()
    charity_id = Identifier(required=True)
    amount = Float(required=True)
    payment_method = String(required=True, max_length=20)
    payment_details = Text()  # JSON object
    anonymous = Boolean(default=False)
    message = Text()


@marketplace.command_handler(part_of=Donation)
class MakeDonationHandler:
    @handle(MakeDonation)
    def make_donation(self, command):
        if not command.user_id:
            raise ValidationError({"user_id": ["You need to be logged in to donate"]})
        if command.amount is None or command.amount <= 0:
            raise ValidationError({"amount": ["Please enter a donation amount greater than 0"]})

        try:
            charity = current_domain.repository_for(Charity).get(command.charity_id)
        except ObjectNotFoundError:
            charity = None
        if charity is None or not charity.is_active:
            raise ValidationError({"charity_id": ["This charity is not accepting donations"]})

        details = json.loads(command.payment_details) if command.payment_details else {}
        method = validate_payment_details(command.payment_method, details)

        result = get_gateway().charge(command.amount, method.value, details)
        if result.success:
            donation = Donation.completed(
                user_id=command.user_id,
                amount=command.amount,
                payment_method=method.value,
                charity_id=command.charity_id,
                transaction_id=result.transaction_id,
                anonymous=command.anonymous,
                message=command.message,
            )
        else:
            logger.warning("donation_payment_declined", charity_id=command.charity_id, amount=command.amount)
            donation = Donation.failed(
                user_id=command.user_id,
                amount=command.amount,
                payment_method=method.value,
                charity_id=command.charity_id,
                reason=result.failure_reason,
                anonymous=command.anonymous,
                message=command.message,
            )

        current_domain.repository_for(Donation).add(donation)
        return str(donation.id)


def process_donation(**fields) -> DonationProcessResult:
    """Run a direct donation and describe the outcome for the donor."""
    donation_id = current_domain.process(MakeDonation(**fields), asynchronous=False)
    donation = current_domain.repository_for(Donation).get(donation_id)
    if donation.is_completed:
        return DonationProcessResult(success=True, donation_id=donation_id, message="Thank you for your donation!")
    return DonationProcessResult(success=False, donation_id=donation_id, message=donation.failure_reason or "")
